"""Dispatch key parsing for the dynamic api proxy."""

from webcake_fn._internal.dispatch.keys import resolve_dispatch_key

__all__ = ["resolve_dispatch_key"]
