"""Request-matching helpers shared by handler ``accepts`` methods."""

from __future__ import annotations

from banana_stand.core.models import IntentRequest
from banana_stand.services.dispatcher import HandlerInput


def is_request_type(handler_input: HandlerInput, request_type: str) -> bool:
    return handler_input.request_envelope.request_type == request_type


def is_intent_name(handler_input: HandlerInput, *intent_names: str) -> bool:
    """True for IntentRequests whose intent name is one of ``intent_names``."""
    request = handler_input.request_envelope.request
    return isinstance(request, IntentRequest) and request.intent.name in intent_names


__all__ = ["is_intent_name", "is_request_type"]
