"""Internal modules for WebCake FN.

These modules back the public FunctionCall and ApiProxy classes and are
not intended for direct use in application code.

Modules:
    dispatch - Dispatch key parsing for the dynamic api proxy
    http - Shared HTTP client configuration
    redaction - Redaction of sensitive params in debug output
    request - Request shaping and envelope unwrapping
    site - Site identifier detection and default base URL
"""
