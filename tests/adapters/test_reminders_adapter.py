"""Tests for the Reminders API adapter."""

# pylint: disable=missing-function-docstring

from __future__ import annotations

import asyncio
import json
from datetime import datetime, timezone

import httpx
import pytest

from banana_stand.adapters.reminders import AlexaReminderClient, reminder_client_for
from banana_stand.core.exceptions import ReminderApiError
from banana_stand.core.reminders import build_daily_reminder
from tests.factories import API_ACCESS_TOKEN, API_ENDPOINT, envelope_payload, launch_request, parse

HTTP_CREATED = 201
HTTP_UNAUTHORIZED = 401

REMINDER = build_daily_reminder(datetime(2026, 10, 19, 20, 0, 0, tzinfo=timezone.utc))


def _client(handler) -> AlexaReminderClient:  # type: ignore[no-untyped-def]
    return AlexaReminderClient(
        API_ENDPOINT + "/", API_ACCESS_TOKEN, transport=httpx.MockTransport(handler)
    )


def test_create_reminder_posts_payload_with_bearer_token():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            HTTP_CREATED,
            json={"alertToken": "alert-123", "createdTime": "2026-10-19T20:00:00Z", "status": "ON"},
        )

    result = asyncio.run(_client(handler).create_reminder(REMINDER))

    assert result.alert_token == "alert-123"
    assert result.status == "ON"
    request = seen[0]
    assert request.method == "POST"
    assert str(request.url) == "https://api.amazonalexa.com/v1/alerts/reminders"
    assert request.headers["Authorization"] == f"Bearer {API_ACCESS_TOKEN}"
    assert json.loads(request.content) == REMINDER.to_payload()


def test_create_reminder_accepts_empty_body():
    result = asyncio.run(
        _client(lambda request: httpx.Response(HTTP_CREATED)).create_reminder(REMINDER)
    )

    assert result.alert_token is None


def test_non_json_success_body_returns_empty_response():
    result = asyncio.run(
        _client(lambda request: httpx.Response(HTTP_CREATED, text="Created")).create_reminder(
            REMINDER
        )
    )

    assert result.alert_token is None


def test_unexpected_success_body_shape_returns_empty_response():
    result = asyncio.run(
        _client(
            lambda request: httpx.Response(HTTP_CREATED, json={"alertToken": 123})
        ).create_reminder(REMINDER)
    )

    assert result.alert_token is None


def test_error_status_raises_reminder_api_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(HTTP_UNAUTHORIZED, json={"code": "UNAUTHORIZED"})

    with pytest.raises(ReminderApiError) as excinfo:
        asyncio.run(_client(handler).create_reminder(REMINDER))

    assert excinfo.value.status_code == HTTP_UNAUTHORIZED


def test_transport_error_raises_reminder_api_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("unreachable", request=request)

    with pytest.raises(ReminderApiError) as excinfo:
        asyncio.run(_client(handler).create_reminder(REMINDER))

    assert excinfo.value.status_code is None


def test_reminder_client_for_uses_envelope_credentials():
    client = reminder_client_for(parse(launch_request()))

    assert isinstance(client, AlexaReminderClient)


def test_reminder_client_for_requires_credentials():
    payload = envelope_payload({"type": "LaunchRequest"})
    del payload["context"]["System"]["apiAccessToken"]

    with pytest.raises(ReminderApiError):
        reminder_client_for(parse(payload))
