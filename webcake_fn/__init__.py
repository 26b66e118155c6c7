"""WebCake FN - client for calling WebCake backend functions.

Public API:
    FunctionCall - Call a backend function explicitly (call_fn, call_fn_result)
    AsyncFunctionCall - Async variant built on httpx.AsyncClient
    ApiProxy - Dynamic ``api.<method>_<functionName>(params)`` dispatcher
    get_api / get_async_api - Proxies configured from environment variables

Internal (not for direct use):
    _internal - Request shaping, dispatch key parsing, HTTP client setup
"""

from webcake_fn._version import __version__
from webcake_fn.api import ApiProxy, get_api, get_async_api
from webcake_fn.client import (
    AsyncFunctionCall,
    FunctionCall,
    get_async_function_call,
    get_function_call,
)
from webcake_fn.exceptions import (
    FunctionCallConfigError,
    FunctionCallHTTPError,
    FunctionCallValidationError,
    WebCakeFnError,
)
from webcake_fn.models import FunctionCallConfig, HttpMethod

__all__ = [
    "__version__",
    "ApiProxy",
    "AsyncFunctionCall",
    "FunctionCall",
    "FunctionCallConfig",
    "HttpMethod",
    "get_api",
    "get_async_api",
    "get_async_function_call",
    "get_function_call",
    "WebCakeFnError",
    "FunctionCallHTTPError",
    "FunctionCallConfigError",
    "FunctionCallValidationError",
]
