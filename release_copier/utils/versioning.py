"""
Semantic version coercion and release ordering.

Tags are free-form strings. For ordering, each tag is coerced to a semantic
version by locating the first ``MAJOR[.MINOR[.PATCH]]`` run of digits in it,
so ``v1.2``, ``1.2.0`` and ``release-1.2.0`` all coerce to ``1.2.0``. A
pre-release suffix is kept only after a complete ``MAJOR.MINOR.PATCH`` triple.
"""

import re
from datetime import datetime, timezone
from functools import total_ordering
from typing import List, Optional, Sequence, Tuple, Union

from ..models.github_api import ReleaseSummary

_COERCE_RE = re.compile(
    r"(?<!\d)(?P<major>\d{1,16})"
    r"(?:\.(?P<minor>\d{1,16}))?"
    r"(?:\.(?P<patch>\d{1,16}))?"
    r"(?:-(?P<prerelease>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?"
)

# Sentinel used to sort releases without a creation time last
_EPOCH_MAX = datetime.max.replace(tzinfo=timezone.utc)


@total_ordering
class SemanticVersion:
    """A semantic version with standard precedence rules (build metadata ignored)."""

    def __init__(self, major: int, minor: int = 0, patch: int = 0, prerelease: Tuple[str, ...] = ()) -> None:
        self.major = major
        self.minor = minor
        self.patch = patch
        self.prerelease = tuple(prerelease)

    @staticmethod
    def _identifier_key(identifier: str) -> Tuple[int, Union[int, str]]:
        # Numeric identifiers have lower precedence than alphanumeric ones
        if identifier.isdigit():
            return (0, int(identifier))
        return (1, identifier)

    def _key(self) -> Tuple:
        if not self.prerelease:
            # A release ranks above any of its pre-releases
            pre: Tuple = (1,)
        else:
            pre = (0, tuple(self._identifier_key(i) for i in self.prerelease))
        return (self.major, self.minor, self.patch, pre)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: "SemanticVersion") -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        base = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            return f"{base}-{'.'.join(self.prerelease)}"
        return base

    def __repr__(self) -> str:
        return f"SemanticVersion('{self}')"


def coerce_version(tag: str) -> Optional[SemanticVersion]:
    """
    Coerce a release tag to a semantic version.

    Args:
        tag: Release tag, e.g. ``v1.10.0`` or ``release-2.1``

    Returns:
        SemanticVersion, or None if the tag contains no version number

    Example:
        >>> str(coerce_version("v1.10"))
        '1.10.0'
        >>> coerce_version("nightly") is None
        True
    """
    match = _COERCE_RE.search(tag)
    if not match:
        return None

    minor = match.group("minor")
    patch = match.group("patch")
    prerelease: Tuple[str, ...] = ()
    if minor is not None and patch is not None and match.group("prerelease"):
        prerelease = tuple(match.group("prerelease").split("."))

    return SemanticVersion(int(match.group("major")), int(minor or 0), int(patch or 0), prerelease)


def _created_key(release: ReleaseSummary) -> datetime:
    return release.created_at or _EPOCH_MAX


def sort_releases(releases: Sequence[ReleaseSummary], by_semver: bool = True) -> List[ReleaseSummary]:
    """
    Order source releases for a copy-all run, oldest first.

    In semantic-version mode, tags that coerce to a version are sorted
    ascending by version (equal versions by creation time) and the remaining
    tags follow, sorted by creation time. In date mode all tags are sorted by
    creation time. Both sorts are stable with respect to listing order.

    Args:
        releases: Releases as listed by the source repository
        by_semver: Sort by semantic version (True) or creation date (False)

    Returns:
        New list of releases in processing order
    """
    if not by_semver:
        return sorted(releases, key=_created_key)

    versioned: List[Tuple[SemanticVersion, ReleaseSummary]] = []
    unversioned: List[ReleaseSummary] = []
    for release in releases:
        version = coerce_version(release.tag_name)
        if version is None:
            unversioned.append(release)
        else:
            versioned.append((version, release))

    versioned.sort(key=lambda item: (item[0], _created_key(item[1])))
    unversioned.sort(key=_created_key)

    return [release for _, release in versioned] + unversioned


__all__ = ["SemanticVersion", "coerce_version", "sort_releases"]
