"""Parsing of api proxy keys into (method, function name)."""

from webcake_fn._internal.request import normalize_method
from webcake_fn.exceptions import FunctionCallValidationError
from webcake_fn.models import DispatchKey

KEY_SEPARATOR = "_"


def resolve_dispatch_key(key: str) -> DispatchKey:
    """Split a key like ``post_update_status`` at its first underscore.

    The verb is matched case-insensitively. Everything after the first
    underscore is the function name, underscores included.

    Raises:
        FunctionCallValidationError: If the key has no function name or an unknown verb.
    """
    if not isinstance(key, str):
        raise FunctionCallValidationError(f"api key must be a string, got {type(key).__name__}")
    verb, _, function_name = key.partition(KEY_SEPARATOR)
    if not function_name:
        raise FunctionCallValidationError(
            f"Invalid api key {key!r}: expected '<method>_<functionName>'"
        )
    return DispatchKey(method=normalize_method(verb), function_name=function_name)
