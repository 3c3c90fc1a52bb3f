"""Catch-all error handler."""

from __future__ import annotations

from banana_stand.core.logging import get_logger
from banana_stand.core.responses import SkillResponse
from banana_stand.services import speech
from banana_stand.services.dispatcher import HandlerInput

logger = get_logger(__name__)


class CatchAllErrorHandler:
    """Log any unhandled error and ask the user to try again.

    A ``HandlerNotFoundError`` here usually means an intent is missing from the
    handler chain in :mod:`banana_stand.services.skill`.
    """

    def accepts(self, handler_input: HandlerInput, error: Exception) -> bool:
        return True

    def handle(self, handler_input: HandlerInput, error: Exception) -> SkillResponse:
        logger.error("Error handled: %s", error, exc_info=error)
        return (
            handler_input.response_builder.speak(speech.PLEASE_REPEAT)
            .reprompt(speech.PLEASE_REPEAT)
            .get_response()
        )


__all__ = ["CatchAllErrorHandler"]
