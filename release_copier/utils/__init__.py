"""
Utility modules for release-copier.
"""

from .logger import setup_logging
from .session import create_session_with_retry
from .error_handling import compile_pattern, handle_generic_error, handle_transport_error
from .config_manager import ConfigManager

from . import constants

__all__ = [
    "setup_logging",
    "create_session_with_retry",
    "compile_pattern",
    "handle_generic_error",
    "handle_transport_error",
    "ConfigManager",
    "constants",
]
