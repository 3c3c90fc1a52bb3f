"""Application service layer for skill request handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from banana_stand.core.ports import ReminderClientFactory

if TYPE_CHECKING:  # pragma: no cover - type narrowing only
    from .dispatcher import RequestDispatcher


@dataclass(slots=True)
class ServiceContainer:
    """Aggregate of application-level services available to handlers."""

    dispatcher: Optional["RequestDispatcher"] = None
    reminder_client_factory: Optional[ReminderClientFactory] = None


def build_default_services(
    *,
    reminder_client_factory: Optional[ReminderClientFactory] = None,
) -> ServiceContainer:
    """Return a service container with the skill's handler chain wired in."""

    from .skill import build_skill_dispatcher  # pylint: disable=import-outside-toplevel

    return ServiceContainer(
        dispatcher=build_skill_dispatcher(),
        reminder_client_factory=reminder_client_factory,
    )


__all__ = ["ServiceContainer", "build_default_services"]
