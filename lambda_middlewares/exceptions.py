"""Exceptions raised while building a middleware chain."""

from typing import Any, Dict, Optional


class MiddlewareError(Exception):
    """Base exception for malformed chain input."""

    def __init__(
        self,
        message: str,
        error_code: str = "MIDDLEWARE_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class InvalidHandlerError(MiddlewareError):
    """Terminal handler is not callable."""

    def __init__(self, handler: Any):
        super().__init__(
            message=f"Handler must be callable, got {type(handler).__name__}",
            error_code="INVALID_HANDLER",
            details={"type": type(handler).__name__},
        )


class InvalidMiddlewareError(MiddlewareError):
    """A middleware in the sequence is not callable."""

    def __init__(self, middleware: Any, position: int):
        super().__init__(
            message=f"Middleware at position {position} must be callable, got {type(middleware).__name__}",
            error_code="INVALID_MIDDLEWARE",
            details={"position": position, "type": type(middleware).__name__},
        )
