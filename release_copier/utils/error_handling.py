"""
Error handling utilities for standardized error logging and handling.

This module provides the reusable error reporting used at the CLI boundary
and the pattern compilation helper shared by the asset filter and the body
transformer.
"""

import logging
import re
import traceback
from typing import Pattern

from ..exceptions import NotFoundError, PatternError, TransportError


def compile_pattern(pattern: str) -> Pattern[str]:
    """
    Compile a user supplied regular expression.

    Args:
        pattern: Regular expression source

    Returns:
        Compiled pattern

    Raises:
        PatternError: If the expression does not compile
    """
    try:
        return re.compile(pattern)
    except re.error as e:
        raise PatternError(pattern, str(e)) from e


def handle_transport_error(error: TransportError, operation: str, *, log_traceback: bool = True) -> None:
    """
    Handle remote API errors with standardized logging.

    Logs the message, the remote status code and the remote response payload
    when they are available.

    Args:
        error: The transport error to handle
        operation: Description of the operation that failed
        log_traceback: Whether to log the full traceback
    """
    status = error.status_code

    if status == 401:
        logging.error(
            "Authentication failed during %s: Invalid credentials. Please check the API token.", operation
        )
    elif status == 403:
        logging.error(
            "Permission denied during %s: the token lacks access or the rate limit was exceeded.", operation
        )
    elif isinstance(error, NotFoundError):
        logging.error("Resource not found during %s", operation)
    elif status is not None and status >= 500:
        logging.error("Server error during %s", operation)

    logging.error("Action failed: %s", error)
    if log_traceback:
        logging.error("Traceback: %s", traceback.format_exc())
    if status is not None:
        logging.error("Request failed with status %s", status)
    if error.response_data:
        logging.error("Response data: %s", error.response_data)


def handle_generic_error(error: Exception, operation: str, *, log_traceback: bool = True) -> None:
    """
    Handle generic errors with standardized logging.

    Args:
        error: The exception to handle
        operation: Description of the operation that failed
        log_traceback: Whether to log the full traceback
    """
    logging.error("Unexpected error during %s: %s", operation, error)

    if log_traceback:
        logging.error("Traceback: %s", traceback.format_exc())


__all__ = [
    "compile_pattern",
    "handle_transport_error",
    "handle_generic_error",
]
