"""
Token authentication for the GitHub REST API.

This module provides the httpx authentication flow used by every request of
a GitHubClient. Tokens are pre-issued (personal access tokens, fine-grained
tokens or installation tokens); no token exchange happens here.
"""

from typing import Generator

import httpx


class TokenAuth(httpx.Auth):
    """
    Bearer token authentication flow.

    The Authorization header is only sent to the API and upload hosts the
    client was configured for, never to the storage host that asset
    downloads redirect to (presigned URLs reject extra credentials).
    """

    def __init__(self, token: str, *trusted_hosts: str) -> None:
        """
        Initialize token authentication.

        Args:
            token: Pre-issued API token
            trusted_hosts: Host names that may receive the token. When empty,
                every request is authenticated.
        """
        self._token = token
        self._trusted_hosts = frozenset(h.lower() for h in trusted_hosts if h)

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        """Add the Authorization header to requests for trusted hosts."""
        if self._token and (not self._trusted_hosts or request.url.host.lower() in self._trusted_hosts):
            request.headers["Authorization"] = f"Bearer {self._token}"
        yield request

    def __repr__(self) -> str:
        return f"TokenAuth(token=***, hosts={sorted(self._trusted_hosts)})"


__all__ = ["TokenAuth"]
