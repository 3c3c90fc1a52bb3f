"""Reminders API adapter implementing the reminder client port."""

from __future__ import annotations

from typing import Optional

import httpx
from pydantic import ValidationError

from banana_stand.core.config import config
from banana_stand.core.exceptions import ReminderApiError
from banana_stand.core.logging import get_logger
from banana_stand.core.models import RequestEnvelope
from banana_stand.core.ports import ReminderClientPort
from banana_stand.core.reminders import ReminderRequest, ReminderResponse

logger = get_logger(__name__)

REMINDERS_PATH = "/v1/alerts/reminders"


class AlexaReminderClient(ReminderClientPort):
    """Client for the platform Reminders API bound to one request's credentials."""

    def __init__(
        self,
        api_endpoint: str,
        api_access_token: str,
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._url = api_endpoint.rstrip("/") + REMINDERS_PATH
        self._api_access_token = api_access_token
        self._timeout = config.REMINDERS_API_TIMEOUT_SECONDS if timeout is None else timeout
        self._transport = transport

    async def create_reminder(self, reminder: ReminderRequest) -> ReminderResponse:
        headers = {
            "Authorization": f"Bearer {self._api_access_token}",
            "Content-Type": "application/json",
        }
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.post(self._url, headers=headers, json=reminder.to_payload())
        except httpx.HTTPError as exc:
            raise ReminderApiError(f"Reminders API request failed: {exc}") from exc

        if response.status_code >= 400:
            logger.error(
                "Reminders API returned %s: %s", response.status_code, response.text
            )
            raise ReminderApiError(
                f"Reminders API returned {response.status_code}",
                status_code=response.status_code,
            )
        logger.info("Created reminder (status %s).", response.status_code)
        if not response.content:
            return ReminderResponse()
        # A 2xx means the reminder exists; an unreadable body is not a failure.
        try:
            return ReminderResponse.model_validate(response.json())
        except (ValueError, ValidationError):
            logger.warning(
                "Unreadable Reminders API body (status %s): %s",
                response.status_code,
                response.text,
                exc_info=True,
            )
            return ReminderResponse()


def reminder_client_for(envelope: RequestEnvelope) -> ReminderClientPort:
    """Build a client from the envelope's API endpoint and access token."""
    system = envelope.system
    if system is None or not system.api_endpoint or not system.api_access_token:
        raise ReminderApiError("Request envelope carries no Reminders API credentials")
    return AlexaReminderClient(system.api_endpoint, system.api_access_token)


__all__ = ["AlexaReminderClient", "reminder_client_for", "REMINDERS_PATH"]
