"""Reminders API request/response models and the daily banana reminder."""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional
from zoneinfo import ZoneInfo

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

REMINDER_TIMEZONE = "America/Los_Angeles"
REMINDER_HOUR = 13
REMINDER_LOCALE = "en-US"
REMINDER_TEXT = "Time to get yo banana"

# Reminders API expects local wall-clock times without an offset.
REMINDER_TIME_FORMAT = "%Y-%m-%dT%H:%M:%S"


class ReminderModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class Recurrence(ReminderModel):
    freq: Literal["DAILY", "WEEKLY"] = "DAILY"


class Trigger(ReminderModel):
    type: Literal["SCHEDULED_ABSOLUTE", "SCHEDULED_RELATIVE"] = "SCHEDULED_ABSOLUTE"
    scheduled_time: str
    time_zone_id: str
    recurrence: Optional[Recurrence] = None


class SpokenText(ReminderModel):
    locale: str
    text: str


class SpokenInfo(ReminderModel):
    content: list[SpokenText]


class AlertInfo(ReminderModel):
    spoken_info: SpokenInfo


class PushNotification(ReminderModel):
    status: Literal["ENABLED", "DISABLED"] = "ENABLED"


class ReminderRequest(ReminderModel):
    """Body of a create-reminder call."""

    request_time: str
    trigger: Trigger
    alert_info: AlertInfo
    push_notification: PushNotification = Field(default_factory=PushNotification)

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ReminderResponse(BaseModel):
    """Subset of the create-reminder reply the skill cares about."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    alert_token: Optional[str] = None
    created_time: Optional[str] = None
    updated_time: Optional[str] = None
    status: Optional[str] = None
    href: Optional[str] = None


def build_daily_reminder(now: datetime | None = None) -> ReminderRequest:
    """Return a daily 1 p.m. Pacific reminder request stamped at ``now``.

    ``now`` may be naive (taken as UTC) or aware; it is converted to the
    reminder timezone before the schedule for "today" is derived.
    """
    zone = ZoneInfo(REMINDER_TIMEZONE)
    if now is None:
        local_now = datetime.now(zone)
    elif now.tzinfo is None:
        local_now = now.replace(tzinfo=ZoneInfo("UTC")).astimezone(zone)
    else:
        local_now = now.astimezone(zone)
    scheduled = local_now.replace(hour=REMINDER_HOUR, minute=0, second=0, microsecond=0)
    return ReminderRequest(
        request_time=local_now.strftime(REMINDER_TIME_FORMAT),
        trigger=Trigger(
            type="SCHEDULED_ABSOLUTE",
            scheduled_time=scheduled.strftime(REMINDER_TIME_FORMAT),
            time_zone_id=REMINDER_TIMEZONE,
            recurrence=Recurrence(freq="DAILY"),
        ),
        alert_info=AlertInfo(
            spoken_info=SpokenInfo(content=[SpokenText(locale=REMINDER_LOCALE, text=REMINDER_TEXT)])
        ),
        push_notification=PushNotification(status="ENABLED"),
    )


__all__ = [
    "REMINDER_HOUR",
    "REMINDER_LOCALE",
    "REMINDER_TEXT",
    "REMINDER_TIMEZONE",
    "AlertInfo",
    "PushNotification",
    "Recurrence",
    "ReminderRequest",
    "ReminderResponse",
    "SpokenInfo",
    "SpokenText",
    "Trigger",
    "build_daily_reminder",
]
