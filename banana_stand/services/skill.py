"""Handler chain for the Banana Stand skill."""

from __future__ import annotations

from banana_stand.services.dispatcher import RequestDispatcher
from banana_stand.services.handlers import (
    CancelAndStopIntentHandler,
    CatchAllErrorHandler,
    ConnectionsResponseHandler,
    CreateReminderIntentHandler,
    HelpIntentHandler,
    IntentReflectorHandler,
    LaunchRequestHandler,
    NoIntentHandler,
    SessionEndedRequestHandler,
)


def build_skill_dispatcher() -> RequestDispatcher:
    """Return the dispatcher with handlers in priority order.

    Order matters: the reflector accepts any intent and must stay last.
    """
    return RequestDispatcher().add_request_handlers(
        LaunchRequestHandler(),
        CreateReminderIntentHandler(),
        NoIntentHandler(),
        ConnectionsResponseHandler(),
        HelpIntentHandler(),
        CancelAndStopIntentHandler(),
        SessionEndedRequestHandler(),
        IntentReflectorHandler(),
    ).add_error_handlers(CatchAllErrorHandler())


__all__ = ["build_skill_dispatcher"]
