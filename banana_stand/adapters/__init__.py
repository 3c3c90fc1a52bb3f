"""Infrastructure adapter exports."""

from banana_stand.core.exceptions import ReminderApiError  # noqa: F401

from .reminders import AlexaReminderClient, reminder_client_for

__all__ = [
    "AlexaReminderClient",
    "reminder_client_for",
    "ReminderApiError",
]
