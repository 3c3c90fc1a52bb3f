"""Core exception types shared across layers."""

from __future__ import annotations


class SkillError(Exception):
    """Base error for skill request processing."""


class HandlerNotFoundError(SkillError):
    """Raised when no request handler in the chain accepts the request."""


class SkillIdMismatchError(SkillError):
    """Raised when an envelope targets a different skill than the one configured."""


class ReminderApiError(SkillError):
    """Raised when the Reminders API rejects or fails a call."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


__all__ = [
    "SkillError",
    "HandlerNotFoundError",
    "SkillIdMismatchError",
    "ReminderApiError",
]
