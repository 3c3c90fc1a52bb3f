"""Protocol definitions for infrastructure adapters."""

# pylint: disable=unnecessary-ellipsis

from __future__ import annotations

from typing import Callable, Protocol

from banana_stand.core.models import RequestEnvelope
from banana_stand.core.reminders import ReminderRequest, ReminderResponse


class ReminderClientPort(Protocol):
    """Port exposing the Reminders API operations the skill uses."""

    async def create_reminder(self, reminder: ReminderRequest) -> ReminderResponse:
        """Create ``reminder`` for the user the client is bound to."""
        ...


# Clients are bound to the per-request endpoint and access token.
ReminderClientFactory = Callable[[RequestEnvelope], ReminderClientPort]


__all__ = ["ReminderClientPort", "ReminderClientFactory"]
