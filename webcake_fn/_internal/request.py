"""Request shaping and envelope unwrapping for backend function calls.

Both the sync and async clients build their requests here so that the
wire format is defined in exactly one place.
"""

import json
from typing import Any

from pydantic import BaseModel

from webcake_fn.exceptions import FunctionCallValidationError
from webcake_fn.models import Envelope, HttpMethod

FUNCTIONS_PATH = "_functions"
PARAMS_QUERY_KEY = "params"
JSON_CONTENT_TYPE = "application/json"


class FunctionRequest(BaseModel):
    """A fully shaped HTTP request for one function call."""

    method: HttpMethod
    url: str
    query: dict[str, str] | None = None
    content: str | None = None
    headers: dict[str, str] = {}

    model_config = {"frozen": True}


def normalize_method(method: str | HttpMethod) -> HttpMethod:
    """Normalize a verb case-insensitively.

    Raises:
        FunctionCallValidationError: If the verb is not GET, POST, PUT, DELETE or PATCH.
    """
    if isinstance(method, HttpMethod):
        return method
    if not isinstance(method, str):
        raise FunctionCallValidationError(f"HTTP method must be a string, got {type(method).__name__}")
    try:
        return HttpMethod(method.strip().upper())
    except ValueError:
        raise FunctionCallValidationError(f"Unsupported HTTP method: {method!r}") from None


def encode_params(params: Any) -> str:
    """Serialize params as compact JSON, the form the backend expects."""
    try:
        return json.dumps(params, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise FunctionCallValidationError(f"params are not JSON serializable: {e}") from e


def build_request(
    base_url: str,
    method: str | HttpMethod,
    function_name: str,
    params: Any = None,
) -> FunctionRequest:
    """Build the request for calling function_name with params.

    GET carries params as a single ``params`` query parameter and never has
    a body. Every other verb sends params as the JSON body; with no params
    the body and content type are omitted.
    """
    if not function_name:
        raise FunctionCallValidationError("function_name must not be empty")

    http_method = normalize_method(method)
    url = f"{base_url}/{FUNCTIONS_PATH}/{function_name}"

    if http_method is HttpMethod.GET:
        query = {PARAMS_QUERY_KEY: encode_params(params)} if params is not None else None
        return FunctionRequest(method=http_method, url=url, query=query)

    if params is None:
        return FunctionRequest(method=http_method, url=url)

    return FunctionRequest(
        method=http_method,
        url=url,
        content=encode_params(params),
        headers={"Content-Type": JSON_CONTENT_TYPE},
    )


def extract_result(envelope: Envelope) -> Any:
    """Return envelope["data"]["result"], or None when either level is missing.

    A missing result is not an error: callers that need to tell "no data"
    apart from a null result should use call_fn and inspect the envelope.
    """
    if not isinstance(envelope, dict):
        return None
    data = envelope.get("data")
    if not isinstance(data, dict):
        return None
    return data.get("result")
