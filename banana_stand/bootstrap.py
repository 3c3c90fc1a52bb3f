"""Application bootstrap helpers for assembling the service container."""

from __future__ import annotations

from banana_stand.adapters.reminders import reminder_client_for
from banana_stand.services import ServiceContainer, build_default_services


def build_default_service_container() -> ServiceContainer:
    """Return the default service container wired to production adapters."""

    return build_default_services(reminder_client_factory=reminder_client_for)


__all__ = ["build_default_service_container"]
