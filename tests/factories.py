"""Request-envelope builders shared by the test suite."""

from __future__ import annotations

from typing import Any

from banana_stand.core.models import RequestEnvelope

SKILL_ID = "amzn1.ask.skill.banana-stand"
USER_ID = "amzn1.ask.account.TESTUSER"
API_ENDPOINT = "https://api.amazonalexa.com"
API_ACCESS_TOKEN = "access-token"


def envelope_payload(
    request: dict[str, Any], *, permissions: bool = False, application_id: str = SKILL_ID
) -> dict[str, Any]:
    """Return a raw camelCase envelope wrapping ``request``."""
    user: dict[str, Any] = {"userId": USER_ID}
    if permissions:
        user["permissions"] = {"consentToken": "consent-token"}
    return {
        "version": "1.0",
        "session": {
            "new": True,
            "sessionId": "amzn1.echo-api.session.1",
            "application": {"applicationId": application_id},
            "user": {"userId": USER_ID},
        },
        "context": {
            "System": {
                "application": {"applicationId": application_id},
                "user": user,
                "apiEndpoint": API_ENDPOINT,
                "apiAccessToken": API_ACCESS_TOKEN,
            }
        },
        "request": {"requestId": "amzn1.echo-api.request.1", "locale": "en-US", **request},
    }


def launch_request(**kwargs: Any) -> dict[str, Any]:
    return envelope_payload({"type": "LaunchRequest"}, **kwargs)


def intent_request(name: str, **kwargs: Any) -> dict[str, Any]:
    return envelope_payload({"type": "IntentRequest", "intent": {"name": name}}, **kwargs)


def connections_response(
    status: str | None, is_card_thrown: bool, *, name: str = "AskFor", **kwargs: Any
) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "isCardThrown": is_card_thrown,
        "permissionScope": "alexa::alerts:reminders:skill:readwrite",
    }
    if status is not None:
        payload["status"] = status
    return envelope_payload(
        {
            "type": "Connections.Response",
            "name": name,
            "status": {"code": "200", "message": "OK"},
            "payload": payload,
            "token": "",
        },
        **kwargs,
    )


def session_ended_request(**kwargs: Any) -> dict[str, Any]:
    return envelope_payload({"type": "SessionEndedRequest", "reason": "USER_INITIATED"}, **kwargs)


def parse(payload: dict[str, Any]) -> RequestEnvelope:
    return RequestEnvelope.model_validate(payload)
