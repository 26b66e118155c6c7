"""Site identifier detection and default base URL resolution."""

import os
from collections.abc import Callable

import httpx

API_PREFIX = "/api/v1"
SITE_ID_ENV = "WEBCAKE_SITE_ID"

SiteIdDetector = Callable[[], str | None]


def detect_site_id() -> str | None:
    """Return the hosting site's identifier, or None when not running inside a site."""
    site_id = os.environ.get(SITE_ID_ENV, "").strip()
    return site_id or None


def resolve_base_url(
    base_url: str | None,
    site_id_detector: SiteIdDetector | None = detect_site_id,
    origin: str | None = None,
) -> str:
    """Resolve the base URL used for every function call.

    An explicit base_url always wins and the detector is not consulted.
    Otherwise the detector is called once: a site id gives
    ``/api/v1/<site_id>``, no site id gives ``/api/v1``.

    With an origin, the result is joined against it the way a browser
    resolves a link: an absolute path replaces the origin's path, and an
    absolute base_url is kept as-is.

    Args:
        base_url: Explicit base URL, if the caller supplied one.
        site_id_detector: Callable returning the current site id, or None.
        origin: Scheme and host a relative base URL is resolved against.

    Returns:
        The base URL without a trailing slash.

    Raises:
        httpx.InvalidURL: If origin is not a valid URL.
    """
    if base_url:
        resolved = base_url.rstrip("/") or base_url
    else:
        site_id = site_id_detector() if site_id_detector is not None else None
        resolved = f"{API_PREFIX}/{site_id}" if site_id else API_PREFIX

    if origin:
        resolved = str(httpx.URL(origin).join(resolved)).rstrip("/")
    return resolved
