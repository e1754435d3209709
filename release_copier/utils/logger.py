"""
Logging configuration for release-copier.

All modules log through the standard ``logging`` module; this module only
decides levels and output format once at the process boundary.
"""

import logging

# ============================================================================
# Logging Configuration Constants
# ============================================================================

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

# Loggers of the HTTP stack that log every request at INFO level
HTTP_LOGGERS = ("httpx", "httpcore")

# ============================================================================
# Logging Setup Functions
# ============================================================================


def verbosity_to_level(verbosity: int) -> int:
    """
    Map a ``-d`` count to a logging level.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2+=DEBUG)

    Returns:
        Logging level constant
    """
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(verbosity: int = 0) -> None:
    """
    Setup logging configuration with multi-level verbosity.

    Log records go to stderr so that the diagnostic stream carries progress
    and failure details while stdout stays free for command output.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG, 3+=DEBUG with HTTP logs)

    Verbosity Levels:
        0 (default): WARNING - Only warnings and errors
        1 (-d):      INFO - Progress of each copy step
        2 (-dd):     DEBUG - Verbose output with request details
        3+ (-ddd):   DEBUG - Maximum verbosity including HTTP request logs
    """
    level = verbosity_to_level(verbosity)
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)

    http_level = logging.DEBUG if verbosity >= 3 else logging.WARNING
    for name in HTTP_LOGGERS:
        logging.getLogger(name).setLevel(http_level)


__all__ = [
    "LOG_FORMAT",
    "setup_logging",
    "verbosity_to_level",
]
