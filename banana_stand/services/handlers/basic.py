"""Single-branch handlers: launch, yes/no follow-ups, help, stop, session end, reflector."""

from __future__ import annotations

from banana_stand.core.logging import get_logger
from banana_stand.core.models import SessionEndedRequest
from banana_stand.core.responses import SkillResponse
from banana_stand.services import speech
from banana_stand.services.dispatcher import HandlerInput

from .predicates import is_intent_name, is_request_type

logger = get_logger(__name__)

NO_INTENT = "AMAZON.NoIntent"
HELP_INTENT = "AMAZON.HelpIntent"
CANCEL_INTENT = "AMAZON.CancelIntent"
STOP_INTENT = "AMAZON.StopIntent"


class LaunchRequestHandler:
    """Greet the user and offer the daily reminder."""

    def accepts(self, handler_input: HandlerInput) -> bool:
        return is_request_type(handler_input, "LaunchRequest")

    def handle(self, handler_input: HandlerInput) -> SkillResponse:
        return (
            handler_input.response_builder.speak(speech.WELCOME)
            .reprompt(speech.WELCOME)
            .get_response()
        )


class NoIntentHandler:
    """Acknowledge the user declining the reminder."""

    def accepts(self, handler_input: HandlerInput) -> bool:
        return is_intent_name(handler_input, NO_INTENT)

    def handle(self, handler_input: HandlerInput) -> SkillResponse:
        return handler_input.response_builder.speak(speech.DECLINED).get_response()


class HelpIntentHandler:
    """Explain what the skill can do and keep the session open."""

    def accepts(self, handler_input: HandlerInput) -> bool:
        return is_intent_name(handler_input, HELP_INTENT)

    def handle(self, handler_input: HandlerInput) -> SkillResponse:
        return (
            handler_input.response_builder.speak(speech.HELP).reprompt(speech.HELP).get_response()
        )


class CancelAndStopIntentHandler:
    """Say goodbye and end the session."""

    def accepts(self, handler_input: HandlerInput) -> bool:
        return is_intent_name(handler_input, CANCEL_INTENT, STOP_INTENT)

    def handle(self, handler_input: HandlerInput) -> SkillResponse:
        return handler_input.response_builder.speak(speech.GOODBYE).get_response()


class SessionEndedRequestHandler:
    """Acknowledge session end; the platform ignores any speech here."""

    def accepts(self, handler_input: HandlerInput) -> bool:
        return is_request_type(handler_input, "SessionEndedRequest")

    def handle(self, handler_input: HandlerInput) -> SkillResponse:
        request = handler_input.request_envelope.request
        if isinstance(request, SessionEndedRequest):
            logger.info("Session ended with reason: %s", request.reason)
        return handler_input.response_builder.get_response()


class IntentReflectorHandler:
    """Echo the triggered intent name.

    Accepts every IntentRequest, so it must be registered after all intent
    handlers.
    """

    def accepts(self, handler_input: HandlerInput) -> bool:
        return is_request_type(handler_input, "IntentRequest")

    def handle(self, handler_input: HandlerInput) -> SkillResponse:
        intent_name = handler_input.request_envelope.intent_name or ""
        return handler_input.response_builder.speak(
            speech.intent_reflection(intent_name)
        ).get_response()


__all__ = [
    "CANCEL_INTENT",
    "HELP_INTENT",
    "NO_INTENT",
    "STOP_INTENT",
    "CancelAndStopIntentHandler",
    "HelpIntentHandler",
    "IntentReflectorHandler",
    "LaunchRequestHandler",
    "NoIntentHandler",
    "SessionEndedRequestHandler",
]
