"""Name-driven proxy over a FunctionCall.

Any attribute of an ApiProxy is a callable whose name encodes the HTTP
verb and the backend function:

    from webcake_fn import get_api

    api = get_api()
    users = api.get_getUsers({"limit": 10})
    api.post_update_status({"status": "active"})  # POST to update_status

Names that are not valid identifiers can be looked up with item access
(``api["get_fetch-thing"]``) or passed to ``api.call(key, params)``.
"""

from collections.abc import Callable
from typing import Any

from webcake_fn._internal.dispatch import resolve_dispatch_key
from webcake_fn.client import (
    AsyncFunctionCall,
    FunctionCall,
    get_async_function_call,
    get_function_call,
)


class ApiProxy:
    """Dynamic dispatcher mapping ``<method>_<functionName>`` keys to calls.

    Every key resolves to a callable lazily; keys are only parsed when the
    callable is invoked, so a malformed key raises FunctionCallValidationError
    at call time. With an AsyncFunctionCall behind it, the callables return
    awaitables.
    """

    def __init__(self, function_call: FunctionCall | AsyncFunctionCall) -> None:
        self._function_call = function_call
        self._callables: dict[str, Callable[..., Any]] = {}

    @property
    def function_call(self) -> FunctionCall | AsyncFunctionCall:
        return self._function_call

    def call(self, key: str, params: Any = None) -> Any:
        """Invoke the function named by key, e.g. ``call("get_fetch", {...})``."""
        method, function_name = resolve_dispatch_key(key)
        return self._function_call.call_fn_result(method, function_name, params)

    def __getitem__(self, key: str) -> Callable[..., Any]:
        fn = self._callables.get(key)
        if fn is None:
            fn = self._make_callable(key)
            self._callables[key] = fn
        return fn

    def __getattr__(self, name: str) -> Callable[..., Any]:
        # Private and dunder names stay regular attribute misses so copy,
        # pickle and introspection keep working.
        if name.startswith("_"):
            raise AttributeError(name)
        return self[name]

    def _make_callable(self, key: str) -> Callable[..., Any]:
        def invoke(params: Any = None) -> Any:
            return self.call(key, params)

        invoke.__name__ = str(key)
        invoke.__qualname__ = f"{type(self).__name__}.{key}"
        return invoke

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self._function_call.base_url!r})"


def get_api() -> ApiProxy:
    """Get an ApiProxy over a FunctionCall configured from environment variables."""
    return ApiProxy(get_function_call())


def get_async_api() -> ApiProxy:
    """Get an ApiProxy over an AsyncFunctionCall configured from environment variables."""
    return ApiProxy(get_async_function_call())
