"""Skill endpoint receiving platform request envelopes."""

from __future__ import annotations

import json
import time
from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from banana_stand.apps.api.dependencies import get_service_container
from banana_stand.core.config import config
from banana_stand.core.exceptions import SkillIdMismatchError
from banana_stand.core.identifiers import get_log_safe_user_id
from banana_stand.core.logging import bind_log_user_id, get_logger, reset_log_user_id
from banana_stand.core.models import RequestEnvelope
from banana_stand.core.responses import ResponseEnvelope
from banana_stand.services import ServiceContainer
from banana_stand.services.dispatcher import HandlerInput

router = APIRouter()
logger = get_logger(__name__)


def verify_skill_id(envelope: RequestEnvelope, expected: str | None) -> None:
    """Reject envelopes addressed to another skill when a skill id is configured."""
    if not expected:
        return
    if envelope.application_id != expected:
        raise SkillIdMismatchError(
            f"Envelope application id {envelope.application_id!r} does not match this skill"
        )


@router.post("/alexa")
async def handle_skill_request(
    request: Request,
    services: Annotated[ServiceContainer, Depends(get_service_container)],
):
    """Dispatch one request envelope through the skill and return the response envelope."""
    try:
        envelope = RequestEnvelope.model_validate(await request.json())
    except json.JSONDecodeError:
        logger.error("Invalid JSON received", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid JSON"},
        )
    except ValidationError as exc:
        logger.warning("Invalid request envelope: %s", exc.errors(include_url=False))
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request envelope"},
        )

    try:
        verify_skill_id(envelope, config.SKILL_ID)
    except SkillIdMismatchError as exc:
        logger.warning("%s", exc)
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN,
            content={"error": "Invalid skill id"},
        )

    if services.dispatcher is None:
        raise RuntimeError("Request dispatcher has not been configured.")

    user_id = envelope.user_id
    token = bind_log_user_id(get_log_safe_user_id(user_id) if user_id else None)
    start = time.perf_counter()
    try:
        logger.info("%s received.", envelope.request_type)
        response = await services.dispatcher.dispatch(
            HandlerInput(request_envelope=envelope, services=services)
        )
        logger.info(
            "%s handled in %.2f ms.",
            envelope.request_type,
            (time.perf_counter() - start) * 1000.0,
        )
    finally:
        reset_log_user_id(token)
    return JSONResponse(ResponseEnvelope(response=response).to_payload())


__all__ = ["router", "verify_skill_id"]
