"""FunctionCall clients for invoking backend functions over HTTP.

Example usage:
    from webcake_fn import FunctionCall

    fn = FunctionCall(base_url="http://localhost:3000/api/v1/site-1")

    # Full response envelope
    envelope = fn.call_fn("GET", "getUsers", {"limit": 10})

    # Just envelope["data"]["result"]
    users = fn.call_fn_result("GET", "getUsers", {"limit": 10})
"""

import sys
from contextlib import AbstractAsyncContextManager, AbstractContextManager, nullcontext
from typing import Any, Self

import httpx
from pydantic import ValidationError

from webcake_fn._internal.http import create_async_http_client, create_http_client
from webcake_fn._internal.redaction import redact_params
from webcake_fn._internal.request import FunctionRequest, build_request, extract_result
from webcake_fn._internal.site import SiteIdDetector, detect_site_id, resolve_base_url
from webcake_fn.exceptions import FunctionCallConfigError, FunctionCallHTTPError
from webcake_fn.models import DEFAULT_TIMEOUT_MS, Envelope, FunctionCallConfig, HttpMethod


class _FunctionCallBase:
    """Configuration and response handling shared by the sync and async clients."""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        origin: str | None = None,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        debug: bool = False,
        site_id_detector: SiteIdDetector | None = detect_site_id,
    ) -> None:
        try:
            self._config = FunctionCallConfig(
                base_url=base_url,
                origin=origin,
                timeout_ms=timeout_ms,
                debug=debug,
            )
        except ValidationError as e:
            raise FunctionCallConfigError(f"Invalid FunctionCall configuration: {e}") from e

        # Resolved once; never re-read at call time.
        try:
            self._base_url = resolve_base_url(
                self._config.base_url,
                site_id_detector,
                origin=self._config.origin,
            )
        except httpx.InvalidURL as e:
            raise FunctionCallConfigError(f"Invalid origin {self._config.origin!r}: {e}") from e

    @classmethod
    def from_env(cls, **kwargs: Any) -> Self:
        """Create a client from WEBCAKE_FN_* environment variables.

        See FunctionCallConfig.from_env() for the variables read. Extra
        keyword arguments (http_client, site_id_detector) are passed through.
        """
        config = FunctionCallConfig.from_env()
        return cls(**config.model_dump(), **kwargs)

    @property
    def base_url(self) -> str:
        """Root URL that every function path is appended to."""
        return self._base_url

    @property
    def config(self) -> FunctionCallConfig:
        return self._config

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._config.debug:
            print(f"[webcake-fn] {message}", file=sys.stderr)

    def _build(
        self,
        method: str | HttpMethod,
        function_name: str,
        params: Any,
    ) -> FunctionRequest:
        request = build_request(self._base_url, method, function_name, params)
        self._log_debug(f"Calling {request.method} {request.url} params={redact_params(params)}")
        return request

    def _handle_response(self, request: FunctionRequest, response: httpx.Response) -> Envelope:
        if not response.is_success:
            self._log_debug(f"{request.method} {request.url} failed with status {response.status_code}")
            raise FunctionCallHTTPError(
                f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
            )

        self._log_debug(f"{request.method} {request.url} succeeded")
        return response.json()


class FunctionCall(_FunctionCallBase):
    """Client for calling backend functions at ``{base_url}/_functions/{name}``.

    Each call issues exactly one HTTP request. Non-success statuses raise
    FunctionCallHTTPError; transport errors (httpx.TransportError) and
    invalid JSON bodies (json.JSONDecodeError) propagate unchanged.

    The instance holds no per-call state, so one FunctionCall can be shared
    between threads.
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        origin: str | None = None,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        debug: bool = False,
        http_client: httpx.Client | None = None,
        site_id_detector: SiteIdDetector | None = detect_site_id,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Root URL for function calls. Defaults to ``/api/v1/<site_id>``
                when a site id is detected, else ``/api/v1``.
            origin: Scheme and host a relative base_url is resolved against.
            timeout_ms: Request timeout in milliseconds.
            debug: Enable debug logging to stderr.
            http_client: Optional httpx.Client to send requests with. It is
                used as-is and never closed by FunctionCall.
            site_id_detector: Callable returning the hosting site id. Called
                once, here, and only when base_url is not given.
        """
        super().__init__(
            base_url=base_url,
            origin=origin,
            timeout_ms=timeout_ms,
            debug=debug,
            site_id_detector=site_id_detector,
        )
        self._http_client = http_client

    def _client(self) -> AbstractContextManager[httpx.Client]:
        if self._http_client is not None:
            return nullcontext(self._http_client)
        return create_http_client(timeout=self._config.timeout_ms / 1000)

    def call_fn(
        self,
        method: str | HttpMethod,
        function_name: str,
        params: Any = None,
    ) -> Envelope:
        """Call a backend function and return the parsed response body.

        Args:
            method: HTTP verb, case-insensitive (GET, POST, PUT, DELETE, PATCH).
            function_name: Name of the backend function.
            params: JSON-serializable params. Sent as the ``params`` query
                parameter for GET and as the JSON body otherwise.

        Returns:
            The response envelope, unvalidated.

        Raises:
            FunctionCallValidationError: Bad verb, empty name or unserializable params.
            FunctionCallHTTPError: The backend answered with a non-2xx status.
        """
        request = self._build(method, function_name, params)
        try:
            with self._client() as client:
                response = client.request(
                    request.method.value,
                    request.url,
                    params=request.query,
                    content=request.content,
                    headers=request.headers,
                )
        except httpx.TransportError as e:
            self._log_debug(f"{request.method} {request.url} transport error: {e}")
            raise
        return self._handle_response(request, response)

    def call_fn_result(
        self,
        method: str | HttpMethod,
        function_name: str,
        params: Any = None,
    ) -> Any:
        """Call a backend function and return ``envelope["data"]["result"]``.

        Returns None when the envelope has no ``data`` or no ``result``.
        """
        return extract_result(self.call_fn(method, function_name, params))


class AsyncFunctionCall(_FunctionCallBase):
    """Async counterpart of FunctionCall built on httpx.AsyncClient.

    Calls are independent coroutines; run several with asyncio.gather and
    ``return_exceptions=True`` to let each settle on its own.
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        origin: str | None = None,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        debug: bool = False,
        http_client: httpx.AsyncClient | None = None,
        site_id_detector: SiteIdDetector | None = detect_site_id,
    ) -> None:
        super().__init__(
            base_url=base_url,
            origin=origin,
            timeout_ms=timeout_ms,
            debug=debug,
            site_id_detector=site_id_detector,
        )
        self._http_client = http_client

    def _client(self) -> AbstractAsyncContextManager[httpx.AsyncClient]:
        if self._http_client is not None:
            return nullcontext(self._http_client)
        return create_async_http_client(timeout=self._config.timeout_ms / 1000)

    async def call_fn(
        self,
        method: str | HttpMethod,
        function_name: str,
        params: Any = None,
    ) -> Envelope:
        """Async version of FunctionCall.call_fn."""
        request = self._build(method, function_name, params)
        try:
            async with self._client() as client:
                response = await client.request(
                    request.method.value,
                    request.url,
                    params=request.query,
                    content=request.content,
                    headers=request.headers,
                )
        except httpx.TransportError as e:
            self._log_debug(f"{request.method} {request.url} transport error: {e}")
            raise
        return self._handle_response(request, response)

    async def call_fn_result(
        self,
        method: str | HttpMethod,
        function_name: str,
        params: Any = None,
    ) -> Any:
        """Async version of FunctionCall.call_fn_result."""
        return extract_result(await self.call_fn(method, function_name, params))


def get_function_call() -> FunctionCall:
    """Get a FunctionCall configured from environment variables.

    Returns:
        A FunctionCall instance. Without WEBCAKE_FN_BASE_URL the base URL
        falls back to the site id default.
    """
    return FunctionCall.from_env()


def get_async_function_call() -> AsyncFunctionCall:
    """Get an AsyncFunctionCall configured from environment variables."""
    return AsyncFunctionCall.from_env()
