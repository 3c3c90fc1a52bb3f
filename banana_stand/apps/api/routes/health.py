"""Health and readiness routes."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from banana_stand import BANANA_STAND_VERSION

from ..dependencies import require_healthcheck_token

router = APIRouter()


@router.get("/")
def read_root() -> dict[str, str]:
    """Info endpoint naming the skill endpoint."""
    return {"message": "Banana Stand skill. POST request envelopes to /alexa."}


@router.get("/alive")
async def alive_check(_: None = Depends(require_healthcheck_token)) -> JSONResponse:
    """Authenticated health check endpoint for infrastructure probes."""
    return JSONResponse(
        {"status": "ok", "message": "Banana Stand is alive.", "version": BANANA_STAND_VERSION}
    )


__all__ = ["router"]
