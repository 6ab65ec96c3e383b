"""Callable shapes shared by handlers and middleware."""

from typing import Any, Awaitable, Callable, TypeVar

EventT = TypeVar("EventT")
ResultT = TypeVar("ResultT")

# (event, context) -> awaitable result; the terminal node of a chain
Handler = Callable[[EventT, Any], Awaitable[ResultT]]

# Same concept under the name used by the non-Lambda variant
PromiseHandler = Handler

# (event, context, next) -> awaitable result
Middleware = Callable[[EventT, Any, Handler[EventT, ResultT]], Awaitable[ResultT]]
