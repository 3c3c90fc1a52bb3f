"""Permission-gated reminder creation and the consent-response follow-up."""

from __future__ import annotations

from typing import cast

from banana_stand.core.exceptions import ReminderApiError
from banana_stand.core.logging import get_logger
from banana_stand.core.models import ConnectionsResponse
from banana_stand.core.reminders import build_daily_reminder
from banana_stand.core.responses import (
    REMINDERS_PERMISSION_SCOPE,
    SkillResponse,
    ask_for_permissions_directive,
)
from banana_stand.services import speech
from banana_stand.services.dispatcher import HandlerInput

from .predicates import is_intent_name, is_request_type

logger = get_logger(__name__)

YES_INTENT = "AMAZON.YesIntent"
ASK_FOR_CONNECTION = "AskFor"
DENIED = "DENIED"


class CreateReminderIntentHandler:
    """Create the daily reminder once the user says yes.

    Without a permissions grant on the user context the response only carries a
    voice-permission consent request; the platform answers later with a
    ``Connections.Response`` handled by :class:`ConnectionsResponseHandler`.
    """

    def accepts(self, handler_input: HandlerInput) -> bool:
        return is_intent_name(handler_input, YES_INTENT)

    async def handle(self, handler_input: HandlerInput) -> SkillResponse:
        builder = handler_input.response_builder
        envelope = handler_input.request_envelope
        if not envelope.has_permissions:
            logger.info("Reminders permission missing; requesting consent.")
            return builder.add_directive(
                ask_for_permissions_directive(REMINDERS_PERMISSION_SCOPE)
            ).get_response()

        reminder = build_daily_reminder()
        factory = handler_input.services.reminder_client_factory
        try:
            if factory is None:
                raise ReminderApiError("No reminder client factory configured")
            await factory(envelope).create_reminder(reminder)
        except Exception:  # pylint: disable=broad-except
            logger.error("Failed to schedule reminder.", exc_info=True)
            return builder.speak(speech.REMINDER_FAILED).get_response()

        logger.info("Scheduled daily reminder at %s.", reminder.trigger.scheduled_time)
        return builder.speak(speech.REMINDER_CREATED).get_response()


class ConnectionsResponseHandler:
    """Follow up on the outcome of a voice-permission consent request."""

    def accepts(self, handler_input: HandlerInput) -> bool:
        if not is_request_type(handler_input, "Connections.Response"):
            return False
        request = handler_input.request_envelope.request
        return isinstance(request, ConnectionsResponse) and request.name == ASK_FOR_CONNECTION

    def handle(self, handler_input: HandlerInput) -> SkillResponse:
        request = cast(ConnectionsResponse, handler_input.request_envelope.request)
        builder = handler_input.response_builder
        status = (request.payload.status or "").upper()
        is_card_thrown = request.payload.is_card_thrown
        logger.info("Consent response status=%s card_thrown=%s", status, is_card_thrown)

        if status == DENIED and not is_card_thrown:
            return (
                builder.speak(speech.GRANT_PERMISSIONS)
                .with_ask_for_permissions_consent_card([REMINDERS_PERMISSION_SCOPE])
                .get_response()
            )
        if is_card_thrown:
            return builder.speak(speech.PERMISSIONS_DEFERRED).get_response()
        # ACCEPTED and NOT_ANSWERED both land here.
        return (
            builder.speak(speech.CONFIRM_REMINDER).reprompt(speech.CONFIRM_REMINDER).get_response()
        )


__all__ = [
    "ASK_FOR_CONNECTION",
    "YES_INTENT",
    "ConnectionsResponseHandler",
    "CreateReminderIntentHandler",
]
