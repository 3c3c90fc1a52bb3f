"""ASGI entrypoint: ``uvicorn main:app``."""

from banana_stand.apps.api.app import create_app
from banana_stand.bootstrap import build_default_service_container

app = create_app(build_default_service_container())

__all__ = ["app"]
