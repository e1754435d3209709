"""
Release body transformation.

Applies an optional regular expression substitution to the release notes
before they are written to the destination. When a pattern is configured
without replacement text, every match is deleted.

Replacement text understands the usual ``$`` tokens:

    $$          a literal dollar sign
    $&          the whole match
    $1 to $99   a numbered group (empty if the group did not participate)
    $<name>     a named group
    $` and $'   the text before and after the match

Tokens naming a group the pattern does not define are kept as written.
Backslashes are not special.
"""

import logging
import re
from typing import Callable, Match, Optional, Union

from ..exceptions import PatternError
from ..utils.error_handling import compile_pattern

_TOKEN_RE = re.compile(
    r"\$(?:(?P<dollar>\$)|(?P<whole>&)|(?P<before>`)|(?P<after>')|(?P<num>\d\d?)|<(?P<name>[^>]*)>)"
)


def _group_text(match: Match[str], group: Union[int, str]) -> str:
    return match.group(group) or ""


def _expand_number(match: Match[str], digits: str) -> Optional[str]:
    """Resolve ``$n``/``$nn``, preferring the two-digit group when it exists."""
    group_count = match.re.groups
    if len(digits) == 2 and 1 <= int(digits) <= group_count:
        return _group_text(match, int(digits))
    if 1 <= int(digits[0]) <= group_count:
        return _group_text(match, int(digits[0])) + digits[1:]
    return None


def _replacer(template: str) -> Callable[[Match[str]], str]:
    """Build a ``re.sub`` callable expanding ``$`` tokens of a replacement template."""

    def expand(match: Match[str]) -> str:
        def token(found: Match[str]) -> str:
            if found.group("dollar"):
                return "$"
            if found.group("whole"):
                return match.group(0)
            if found.group("before"):
                return match.string[: match.start()]
            if found.group("after"):
                return match.string[match.end() :]
            if found.group("num") is not None:
                expanded = _expand_number(match, found.group("num"))
                return found.group(0) if expanded is None else expanded
            if not match.re.groupindex:
                return found.group(0)
            name = found.group("name")
            return _group_text(match, name) if name in match.re.groupindex else ""

        return _TOKEN_RE.sub(token, template)

    return expand


def transform_body(body: str, pattern: Optional[str] = None, replacement: Optional[str] = None) -> str:
    """
    Replace every match of a pattern in the release body.

    Args:
        body: Original release body
        pattern: Regular expression to search for; None or "" leaves the body unchanged
        replacement: Replacement template with ``$`` tokens; None removes the matches

    Returns:
        The transformed body, or the original body if the pattern is invalid

    Example:
        >>> transform_body("a-b-a", "a", "X")
        'X-b-X'
        >>> transform_body("Before replace-this after", "replace-this")
        'Before  after'
        >>> transform_body("see v12 now", r"v(\\d+)", "version-$1")
        'see version-12 now'
    """
    if not pattern:
        return body

    try:
        compiled = compile_pattern(pattern)
    except PatternError as e:
        logging.warning("Warning: %s", e)
        return body

    if not replacement:
        return compiled.sub("", body)
    return compiled.sub(_replacer(replacement), body)


__all__ = ["transform_body"]
