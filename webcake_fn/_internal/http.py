"""Shared HTTP client configuration."""

import httpx

from webcake_fn._version import __version__

DEFAULT_TIMEOUT = 30.0


def _default_headers() -> dict[str, str]:
    return {"User-Agent": f"webcake-fn/{__version__}"}


def create_http_client(*, timeout: float = DEFAULT_TIMEOUT) -> httpx.Client:
    """Create configured HTTP client.

    Args:
        timeout: Request timeout in seconds.

    Returns:
        Configured httpx.Client instance.
    """
    return httpx.Client(
        timeout=timeout,
        headers=_default_headers(),
        follow_redirects=True,
    )


def create_async_http_client(*, timeout: float = DEFAULT_TIMEOUT) -> httpx.AsyncClient:
    """Create configured async HTTP client. Same settings as create_http_client."""
    return httpx.AsyncClient(
        timeout=timeout,
        headers=_default_headers(),
        follow_redirects=True,
    )
