"""Composition of async middleware around a terminal handler."""

from functools import reduce, update_wrapper
from typing import Any, Callable, Iterable

from lambda_middlewares.exceptions import InvalidHandlerError, InvalidMiddlewareError
from lambda_middlewares.types import EventT, Handler, Middleware, ResultT
from lambda_middlewares.utils.logger import get_logger

log = get_logger(__name__)


def _name_of(fn: Any) -> str:
    return getattr(fn, "__name__", None) or getattr(fn, "__qualname__", None) or type(fn).__name__


def _wrap(
    next_handler: Handler[EventT, ResultT], middleware: Middleware[EventT, ResultT]
) -> Handler[EventT, ResultT]:
    """Bind one middleware to the chain built so far."""

    async def wrapped(event: EventT, context: Any) -> ResultT:
        return await middleware(event, context, next_handler)

    # __wrapped__ points one layer in; inspect.unwrap() reaches the handler
    return update_wrapper(wrapped, next_handler)


def with_middlewares(
    middlewares: Iterable[Middleware[EventT, ResultT]],
    handler: Handler[EventT, ResultT],
) -> Handler[EventT, ResultT]:
    """
    Compose middleware around a terminal handler.

    The first middleware is the outermost: it runs first and its code after
    ``await next(...)`` finishes last. The chain is built right-to-left, so the
    last middleware wraps ``handler`` directly. A middleware that returns
    without calling ``next`` short-circuits everything after it.

    Exceptions raised by middleware or the handler propagate unchanged to the
    caller of the composed handler.

    Args:
        middlewares: Ordered middleware; copied, never mutated
        handler: Terminal ``(event, context)`` coroutine function

    Returns:
        A handler with the same signature as ``handler``; ``handler`` itself
        when there is no middleware

    Raises:
        InvalidHandlerError: If handler is not callable
        InvalidMiddlewareError: If any middleware is not callable
    """
    if not callable(handler):
        raise InvalidHandlerError(handler)

    ordered = list(middlewares)
    for position, middleware in enumerate(ordered):
        if not callable(middleware):
            raise InvalidMiddlewareError(middleware, position)

    chain = reduce(_wrap, reversed(ordered), handler)

    log.debug(
        "middleware chain composed",
        handler=_name_of(handler),
        middlewares=[_name_of(m) for m in ordered],
    )
    return chain


def use_middlewares(
    *middlewares: Middleware[EventT, ResultT],
) -> Callable[[Handler[EventT, ResultT]], Handler[EventT, ResultT]]:
    """Decorator form of :func:`with_middlewares`."""

    def decorator(handler: Handler[EventT, ResultT]) -> Handler[EventT, ResultT]:
        return with_middlewares(middlewares, handler)

    return decorator
