"""Request envelope models delivered by the voice platform."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag
from pydantic.alias_generators import to_camel


class EnvelopeModel(BaseModel):
    """Base for platform payloads: camelCase on the wire, frozen once parsed."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class Application(EnvelopeModel):
    application_id: str


class Permissions(EnvelopeModel):
    consent_token: Optional[str] = None


class User(EnvelopeModel):
    user_id: str
    permissions: Optional[Permissions] = None


class SystemState(EnvelopeModel):
    application: Optional[Application] = None
    user: Optional[User] = None
    api_endpoint: Optional[str] = None
    api_access_token: Optional[str] = None


class Context(EnvelopeModel):
    system: SystemState = Field(alias="System")


class Session(EnvelopeModel):
    session_id: Optional[str] = None
    new: bool = False
    application: Optional[Application] = None
    user: Optional[User] = None
    attributes: dict[str, Any] = Field(default_factory=dict)


class Intent(EnvelopeModel):
    name: str
    slots: dict[str, Any] = Field(default_factory=dict)


class BaseRequest(EnvelopeModel):
    request_id: Optional[str] = None
    timestamp: Optional[str] = None
    locale: Optional[str] = None


class LaunchRequest(BaseRequest):
    type: Literal["LaunchRequest"] = "LaunchRequest"


class IntentRequest(BaseRequest):
    type: Literal["IntentRequest"] = "IntentRequest"
    intent: Intent


class ConnectionsStatus(EnvelopeModel):
    code: Optional[str] = None
    message: Optional[str] = None


class ConnectionsPayload(EnvelopeModel):
    """Outcome of a voice-permission consent request."""

    status: Optional[str] = None
    is_card_thrown: bool = False
    permission_scope: Optional[str] = None


class ConnectionsResponse(BaseRequest):
    type: Literal["Connections.Response"] = "Connections.Response"
    name: str
    status: Optional[ConnectionsStatus] = None
    payload: ConnectionsPayload = Field(default_factory=ConnectionsPayload)
    token: Optional[str] = None


class SessionEndedRequest(BaseRequest):
    type: Literal["SessionEndedRequest"] = "SessionEndedRequest"
    reason: Optional[str] = None
    error: Optional[dict[str, Any]] = None


class UnknownRequest(BaseRequest):
    """Any request kind the skill has no model for."""

    type: str


_KNOWN_REQUEST_TYPES = frozenset(
    {"LaunchRequest", "IntentRequest", "Connections.Response", "SessionEndedRequest"}
)


def _request_kind(value: Any) -> str:
    if isinstance(value, dict):
        kind = value.get("type")
    else:
        kind = getattr(value, "type", None)
    return kind if kind in _KNOWN_REQUEST_TYPES else "Unknown"


SkillRequest = Annotated[
    Union[
        Annotated[LaunchRequest, Tag("LaunchRequest")],
        Annotated[IntentRequest, Tag("IntentRequest")],
        Annotated[ConnectionsResponse, Tag("Connections.Response")],
        Annotated[SessionEndedRequest, Tag("SessionEndedRequest")],
        Annotated[UnknownRequest, Tag("Unknown")],
    ],
    Discriminator(_request_kind),
]


class RequestEnvelope(EnvelopeModel):
    """A single platform invocation."""

    version: str = "1.0"
    session: Optional[Session] = None
    context: Optional[Context] = None
    request: SkillRequest

    @property
    def request_type(self) -> str:
        return self.request.type

    @property
    def intent_name(self) -> Optional[str]:
        """Intent name for IntentRequests, otherwise ``None``."""
        if isinstance(self.request, IntentRequest):
            return self.request.intent.name
        return None

    @property
    def system(self) -> Optional[SystemState]:
        return self.context.system if self.context else None

    @property
    def user(self) -> Optional[User]:
        if self.system and self.system.user:
            return self.system.user
        return self.session.user if self.session else None

    @property
    def user_id(self) -> Optional[str]:
        return self.user.user_id if self.user else None

    @property
    def application_id(self) -> Optional[str]:
        if self.system and self.system.application:
            return self.system.application.application_id
        if self.session and self.session.application:
            return self.session.application.application_id
        return None

    @property
    def has_permissions(self) -> bool:
        """True when the user context carries any granted permissions."""
        user = self.system.user if self.system else None
        return bool(user and user.permissions is not None)


@dataclass(slots=True)
class RequestContext:
    """Metadata describing an inbound API request."""

    correlation_id: str
    path: str
    method: str
    user_agent: Optional[str] = None


__all__ = [
    "Application",
    "ConnectionsPayload",
    "ConnectionsResponse",
    "ConnectionsStatus",
    "Context",
    "Intent",
    "IntentRequest",
    "LaunchRequest",
    "Permissions",
    "RequestContext",
    "RequestEnvelope",
    "Session",
    "SessionEndedRequest",
    "SkillRequest",
    "SystemState",
    "UnknownRequest",
    "User",
]
