"""Redaction of sensitive values before params are written to debug output."""

from typing import Any

REDACT_KEYS: frozenset[str] = frozenset({
    "api_key",
    "apikey",
    "token",
    "access_token",
    "refresh_token",
    "secret",
    "secret_key",
    "password",
    "authorization",
    "private_key",
    "credentials",
})

REDACTED_VALUE = "[REDACTED]"


def redact_params(params: Any) -> Any:
    """Recursively replace values of sensitive keys with "[REDACTED]".

    Returns a new structure; the params sent over the wire are never touched.
    """
    if isinstance(params, dict):
        result = {}
        for key, value in params.items():
            key_lower = key.lower() if isinstance(key, str) else key
            if key_lower in REDACT_KEYS:
                result[key] = REDACTED_VALUE
            else:
                result[key] = redact_params(value)
        return result
    elif isinstance(params, (list, tuple)):
        return [redact_params(item) for item in params]
    else:
        return params
