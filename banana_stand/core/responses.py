"""Response models and the per-invocation response builder."""

from __future__ import annotations

import re
from typing import Any, Literal, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

REMINDERS_PERMISSION_SCOPE = "alexa::alerts:reminders:skill:readwrite"

_SPEAK_TAG = re.compile(r"^\s*<speak>(.*)</speak>\s*$", re.DOTALL)


class ResponseModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class OutputSpeech(ResponseModel):
    type: Literal["SSML"] = "SSML"
    ssml: str

    @property
    def text(self) -> str:
        """Speech content with the surrounding ``<speak>`` tags removed."""
        match = _SPEAK_TAG.match(self.ssml)
        return match.group(1) if match else self.ssml


class Reprompt(ResponseModel):
    output_speech: OutputSpeech


class AskForPermissionsConsentCard(ResponseModel):
    type: Literal["AskForPermissionsConsent"] = "AskForPermissionsConsent"
    permissions: list[str]


class SkillResponse(ResponseModel):
    """Spoken output and directives returned for a single request."""

    output_speech: Optional[OutputSpeech] = None
    reprompt: Optional[Reprompt] = None
    card: Optional[AskForPermissionsConsentCard] = None
    directives: Optional[list[dict[str, Any]]] = None
    should_end_session: Optional[bool] = None

    @property
    def speech_text(self) -> Optional[str]:
        return self.output_speech.text if self.output_speech else None

    @property
    def reprompt_text(self) -> Optional[str]:
        return self.reprompt.output_speech.text if self.reprompt else None


class ResponseEnvelope(ResponseModel):
    version: str = "1.0"
    session_attributes: Optional[dict[str, Any]] = None
    response: SkillResponse = Field(default_factory=SkillResponse)

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the platform's camelCase JSON shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def _to_ssml(text: str) -> str:
    match = _SPEAK_TAG.match(text)
    inner = match.group(1) if match else text
    return f"<speak>{inner}</speak>"


def ask_for_permissions_directive(scope: str = REMINDERS_PERMISSION_SCOPE) -> dict[str, Any]:
    """Directive asking the platform to run its voice-permission consent flow."""
    return {
        "type": "Connections.SendRequest",
        "name": "AskFor",
        "payload": {
            "@type": "AskForPermissionsConsentRequest",
            "@version": "1",
            "permissionScope": scope,
        },
        "token": "",
    }


class ResponseBuilder:
    """Accumulate response parts for one invocation.

    ``get_response`` freezes the parts into a :class:`SkillResponse`. When the
    session flag was not set explicitly, a reprompt keeps the session open and any
    other non-empty response closes it.
    """

    def __init__(self) -> None:
        self._speech: Optional[OutputSpeech] = None
        self._reprompt: Optional[Reprompt] = None
        self._card: Optional[AskForPermissionsConsentCard] = None
        self._directives: list[dict[str, Any]] = []
        self._should_end_session: Optional[bool] = None

    def speak(self, text: str) -> "ResponseBuilder":
        self._speech = OutputSpeech(ssml=_to_ssml(text))
        return self

    def reprompt(self, text: str) -> "ResponseBuilder":
        self._reprompt = Reprompt(output_speech=OutputSpeech(ssml=_to_ssml(text)))
        return self

    def add_directive(self, directive: dict[str, Any]) -> "ResponseBuilder":
        self._directives.append(dict(directive))
        return self

    def with_ask_for_permissions_consent_card(self, scopes: Sequence[str]) -> "ResponseBuilder":
        self._card = AskForPermissionsConsentCard(permissions=list(scopes))
        return self

    def set_should_end_session(self, value: bool) -> "ResponseBuilder":
        self._should_end_session = value
        return self

    def _resolve_should_end_session(self) -> Optional[bool]:
        if self._should_end_session is not None:
            return self._should_end_session
        if self._reprompt is not None:
            return False
        if self._speech is not None or self._card is not None or self._directives:
            return True
        return None

    def get_response(self) -> SkillResponse:
        return SkillResponse(
            output_speech=self._speech,
            reprompt=self._reprompt,
            card=self._card,
            directives=list(self._directives) or None,
            should_end_session=self._resolve_should_end_session(),
        )


__all__ = [
    "REMINDERS_PERMISSION_SCOPE",
    "AskForPermissionsConsentCard",
    "OutputSpeech",
    "Reprompt",
    "ResponseBuilder",
    "ResponseEnvelope",
    "SkillResponse",
    "ask_for_permissions_directive",
]
