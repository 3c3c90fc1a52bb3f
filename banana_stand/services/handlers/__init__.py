"""Request and error handlers making up the skill."""

from .basic import (
    CancelAndStopIntentHandler,
    HelpIntentHandler,
    IntentReflectorHandler,
    LaunchRequestHandler,
    NoIntentHandler,
    SessionEndedRequestHandler,
)
from .errors import CatchAllErrorHandler
from .reminders import ConnectionsResponseHandler, CreateReminderIntentHandler

__all__ = [
    "CancelAndStopIntentHandler",
    "CatchAllErrorHandler",
    "ConnectionsResponseHandler",
    "CreateReminderIntentHandler",
    "HelpIntentHandler",
    "IntentReflectorHandler",
    "LaunchRequestHandler",
    "NoIntentHandler",
    "SessionEndedRequestHandler",
]
