"""Compose async middleware around serverless request handlers."""

from lambda_middlewares.exceptions import (
    InvalidHandlerError,
    InvalidMiddlewareError,
    MiddlewareError,
)
from lambda_middlewares.middleware import extend_context, use_middlewares, with_middlewares
from lambda_middlewares.types import Handler, Middleware, PromiseHandler

__version__ = "0.1.0"

__all__ = [
    "Handler",
    "InvalidHandlerError",
    "InvalidMiddlewareError",
    "Middleware",
    "MiddlewareError",
    "PromiseHandler",
    "extend_context",
    "use_middlewares",
    "with_middlewares",
]
