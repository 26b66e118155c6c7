"""Public models for WebCake FN.

These types describe the calling convention shared by FunctionCall,
AsyncFunctionCall and ApiProxy:

    from webcake_fn.models import HttpMethod, FunctionCallConfig

    config = FunctionCallConfig(base_url="http://localhost:3000/api/v1/site-1")
"""

import os
from enum import StrEnum
from typing import Any, NamedTuple

from pydantic import BaseModel, Field, field_validator

# =============================================================================
# Constants
# =============================================================================

DEFAULT_TIMEOUT_MS = 30_000

# Wire shape returned by the backend: {"data": {"result": ...}}
Envelope = dict[str, Any]


class HttpMethod(StrEnum):
    """HTTP verbs a backend function can be called with."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


class DispatchKey(NamedTuple):
    """Parsed form of an api proxy key such as ``post_update_status``."""

    method: HttpMethod
    function_name: str


# =============================================================================
# Configuration
# =============================================================================


class FunctionCallConfig(BaseModel):
    """Settings for a FunctionCall instance.

    Fields:
        base_url: Root of all function URLs. Resolved from the site id when omitted.
        origin: Scheme and host that a relative base_url is resolved against.
        timeout_ms: Request timeout in milliseconds.
        debug: Enable debug logging to stderr.
    """

    base_url: str | None = None
    origin: str | None = None
    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0)
    debug: bool = False

    model_config = {"frozen": True}

    @field_validator("base_url", "origin")
    @classmethod
    def blank_as_none(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            return None
        return v

    @classmethod
    def from_env(cls) -> "FunctionCallConfig":
        """Create a config from environment variables.

        Optional environment variables:
            WEBCAKE_FN_BASE_URL: Base URL for all function calls.
            WEBCAKE_FN_ORIGIN: Origin used to resolve a relative base URL.
            WEBCAKE_FN_TIMEOUT_MS: Request timeout in milliseconds.
            WEBCAKE_FN_DEBUG: Set to "1" to enable debug logging.

        Raises:
            ValueError: If WEBCAKE_FN_TIMEOUT_MS is not an integer.
        """
        return cls(
            base_url=os.environ.get("WEBCAKE_FN_BASE_URL"),
            origin=os.environ.get("WEBCAKE_FN_ORIGIN"),
            timeout_ms=int(os.environ.get("WEBCAKE_FN_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS))),
            debug=os.environ.get("WEBCAKE_FN_DEBUG", "") == "1",
        )


__all__ = [
    "DEFAULT_TIMEOUT_MS",
    "DispatchKey",
    "Envelope",
    "FunctionCallConfig",
    "HttpMethod",
]
