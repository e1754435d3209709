"""
Asset inclusion filter.

An asset is included when no patterns are configured, or when its name
matches at least one pattern. Matching is an unanchored regular expression
search, so ``zip`` selects ``app.zip`` and ``\\.zip$`` selects only files
ending in ``.zip``.
"""

import logging
from typing import List, Optional, Pattern, Sequence

from ..exceptions import PatternError
from ..utils.error_handling import compile_pattern


class AssetFilter:
    """
    OR-combined set of asset name patterns.

    Patterns that fail to compile are reported once and never match; the
    remaining patterns keep working.
    """

    def __init__(self, patterns: Optional[Sequence[str]] = None) -> None:
        """
        Initialize the filter.

        Args:
            patterns: Regular expressions; None includes every asset
        """
        self.patterns = list(patterns) if patterns is not None else None
        self._compiled: List[Pattern[str]] = []

        for pattern in self.patterns or []:
            try:
                self._compiled.append(compile_pattern(pattern))
            except PatternError as e:
                logging.error("%s", e)

    def includes(self, name: str) -> bool:
        """
        Check whether an asset name passes the filter.

        Args:
            name: Asset display name

        Returns:
            True if no patterns are configured or any valid pattern matches
        """
        if self.patterns is None:
            return True
        return any(p.search(name) for p in self._compiled)

    def __repr__(self) -> str:
        return f"AssetFilter({self.patterns!r})"


def is_asset_included(name: str, patterns: Optional[Sequence[str]]) -> bool:
    """
    Check a single asset name against a pattern set.

    Example:
        >>> is_asset_included("app.zip", [r"\\.zip$", r"\\.tar\\.gz$"])
        True
        >>> is_asset_included("app.exe", [r"\\.zip$"])
        False
    """
    return AssetFilter(patterns).includes(name)


__all__ = ["AssetFilter", "is_asset_included"]
