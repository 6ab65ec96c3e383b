"""Middleware chain construction."""

from .compose import use_middlewares, with_middlewares
from .context import extend_context

__all__ = [
    "extend_context",
    "use_middlewares",
    "with_middlewares",
]
