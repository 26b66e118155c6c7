"""Public exceptions for the WebCake FN client."""


class WebCakeFnError(Exception):
    """Base exception for all WebCake FN errors."""


class FunctionCallHTTPError(WebCakeFnError):
    """Backend answered a function call with a non-success status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class FunctionCallConfigError(WebCakeFnError):
    """Configuration error (invalid base URL, timeout, etc.)."""


class FunctionCallValidationError(WebCakeFnError):
    """Validation error for call arguments (verb, function name, params)."""
