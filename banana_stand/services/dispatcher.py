"""Ordered request-handler chain with error-handler fallback."""

# pylint: disable=unnecessary-ellipsis

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Awaitable, Protocol, Sequence, Union

from banana_stand.core.exceptions import HandlerNotFoundError
from banana_stand.core.logging import get_logger
from banana_stand.core.models import RequestEnvelope
from banana_stand.core.responses import ResponseBuilder, SkillResponse

if TYPE_CHECKING:  # pragma: no cover - import for static analysis only
    from . import ServiceContainer

logger = get_logger(__name__)

HandlerResult = Union[SkillResponse, Awaitable[SkillResponse]]


@dataclass(slots=True)
class HandlerInput:
    """Everything a handler needs for one invocation."""

    request_envelope: RequestEnvelope
    services: "ServiceContainer"
    response_builder: ResponseBuilder = field(default_factory=ResponseBuilder)


class RequestHandler(Protocol):
    """A handler that claims requests via ``accepts`` and answers them via ``handle``."""

    def accepts(self, handler_input: HandlerInput) -> bool:
        """Return True when this handler should answer the request."""
        ...

    def handle(self, handler_input: HandlerInput) -> HandlerResult:
        """Produce the response; may be a coroutine."""
        ...


class ErrorHandler(Protocol):
    """A handler consulted when request handling raises."""

    def accepts(self, handler_input: HandlerInput, error: Exception) -> bool:
        """Return True when this handler should answer for ``error``."""
        ...

    def handle(self, handler_input: HandlerInput, error: Exception) -> HandlerResult:
        """Produce a fallback response; may be a coroutine."""
        ...


async def _resolve(result: HandlerResult) -> SkillResponse:
    if inspect.isawaitable(result):
        return await result
    return result


class RequestDispatcher:
    """Dispatch each request to the first handler that accepts it.

    Registration order is the only priority. Exceptions raised while selecting or
    running a request handler, including :class:`HandlerNotFoundError`, go to the
    first error handler that accepts them; with none accepting, they propagate.
    """

    def __init__(
        self,
        request_handlers: Sequence[RequestHandler] | None = None,
        error_handlers: Sequence[ErrorHandler] | None = None,
    ) -> None:
        self._request_handlers: list[RequestHandler] = list(request_handlers or [])
        self._error_handlers: list[ErrorHandler] = list(error_handlers or [])

    def add_request_handlers(self, *handlers: RequestHandler) -> "RequestDispatcher":
        self._request_handlers.extend(handlers)
        return self

    def add_error_handlers(self, *handlers: ErrorHandler) -> "RequestDispatcher":
        self._error_handlers.extend(handlers)
        return self

    def request_handlers(self) -> list[RequestHandler]:
        """Return a copy of the registered request handlers in dispatch order."""
        return list(self._request_handlers)

    def error_handlers(self) -> list[ErrorHandler]:
        """Return a copy of the registered error handlers in dispatch order."""
        return list(self._error_handlers)

    def find_request_handler(self, handler_input: HandlerInput) -> RequestHandler:
        """Return the first handler accepting ``handler_input``."""
        for handler in self._request_handlers:
            if handler.accepts(handler_input):
                return handler
        raise HandlerNotFoundError(
            f"Unable to find a suitable request handler for {_describe(handler_input)}"
        )

    def _find_error_handler(
        self, handler_input: HandlerInput, error: Exception
    ) -> ErrorHandler | None:
        for handler in self._error_handlers:
            if handler.accepts(handler_input, error):
                return handler
        return None

    async def dispatch(self, handler_input: HandlerInput) -> SkillResponse:
        """Run the request through the handler chain and return its response."""
        try:
            handler = self.find_request_handler(handler_input)
            logger.debug(
                "Dispatching %s to %s", _describe(handler_input), type(handler).__name__
            )
            return await _resolve(handler.handle(handler_input))
        except Exception as exc:  # pylint: disable=broad-except
            error_handler = self._find_error_handler(handler_input, exc)
            if error_handler is None:
                raise
            logger.debug("Routing %s to %s", type(exc).__name__, type(error_handler).__name__)
            # Discard anything the failed handler already added.
            handler_input.response_builder = ResponseBuilder()
            return await _resolve(error_handler.handle(handler_input, exc))


def _describe(handler_input: HandlerInput) -> str:
    envelope = handler_input.request_envelope
    if envelope.intent_name:
        return f"{envelope.request_type}({envelope.intent_name})"
    return envelope.request_type


__all__ = [
    "ErrorHandler",
    "HandlerInput",
    "RequestDispatcher",
    "RequestHandler",
]
