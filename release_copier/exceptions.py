"""
Exception hierarchy for release-copier.

Fatal kinds (ConfigError, NotFoundError, TransportError, LocalIOError) propagate
to the CLI boundary. PatternError is raised by pattern compilation helpers and
recovered locally by the asset filter and the body transformer.
"""

from typing import Any, Optional


class ReleaseCopierError(Exception):
    """Base exception for all release-copier errors."""


class ConfigError(ReleaseCopierError):
    """Invalid combination of copy options."""


class LocalIOError(ReleaseCopierError):
    """Failure creating the staging directory or reading/writing staged assets."""


class PatternError(ReleaseCopierError):
    """Malformed regular expression supplied for asset filtering or body replacement."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid regex pattern '{pattern}': {reason}")
        self.pattern = pattern
        self.reason = reason


class TransportError(ReleaseCopierError):
    """
    Remote API failure.

    Attributes:
        status_code: HTTP status code returned by the hosting API, if any
        response_data: Parsed JSON payload (or raw text) of the error response, if any
    """

    def __init__(
        self, message: str, status_code: Optional[int] = None, response_data: Optional[Any] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_data = response_data


class NotFoundError(TransportError):
    """The requested release, tag or asset does not exist (HTTP 404)."""


__all__ = [
    "ReleaseCopierError",
    "ConfigError",
    "LocalIOError",
    "PatternError",
    "TransportError",
    "NotFoundError",
]
