"""
Session utilities for hosting API access.

This module creates the httpx clients used by the GitHub client, with
connection pooling and transport-level connection retries.
"""

import importlib.util
import logging
from typing import Dict, Optional

import httpx
from httpx import HTTPTransport

from .constants import DEFAULT_TIMEOUT, GITHUB_API_VERSION, USER_AGENT

# ============================================================================
# HTTP Configuration Constants
# ============================================================================

# Connection-level retries performed by the transport (failed connects only;
# HTTP error responses are never retried)
MAX_RETRIES = 3


def _http2_available() -> bool:
    """Return True when the optional h2 package is installed."""
    return importlib.util.find_spec("h2") is not None


def create_session_with_retry(
    timeout: float = DEFAULT_TIMEOUT,
    max_connections: int = 10,
    auth: Optional[httpx.Auth] = None,
    headers: Optional[Dict[str, str]] = None,
) -> httpx.Client:
    """
    Create an httpx client with connection retries and pooling.

    Args:
        timeout: Total timeout in seconds
        max_connections: Maximum number of connections in the pool
        auth: Optional httpx.Auth applied to every request
        headers: Extra default headers merged over the GitHub defaults

    Returns:
        Configured httpx.Client object that follows redirects (asset
        downloads are served through a redirect to storage)

    Example:
        >>> client = create_session_with_retry(auth=TokenAuth("ghp_..."))
        >>> response = client.get("https://api.github.com/rate_limit")
    """
    limits = httpx.Limits(
        max_connections=max_connections,
        max_keepalive_connections=max(2, max_connections // 2),
    )
    timeout_config = httpx.Timeout(timeout, connect=10.0)

    default_headers = {
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": GITHUB_API_VERSION,
        "User-Agent": USER_AGENT,
    }
    if headers:
        default_headers.update(headers)

    use_http2 = _http2_available()
    if not use_http2:
        logging.debug("HTTP/2 support not available (h2 package not installed)")

    transport = HTTPTransport(limits=limits, retries=MAX_RETRIES, http2=use_http2)

    return httpx.Client(
        transport=transport,
        timeout=timeout_config,
        follow_redirects=True,
        headers=default_headers,
        auth=auth,
    )


__all__ = ["create_session_with_retry", "MAX_RETRIES"]
