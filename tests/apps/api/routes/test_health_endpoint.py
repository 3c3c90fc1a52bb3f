"""Tests for health routes and the token guard."""
# pylint: disable=missing-function-docstring

import asyncio
from http import HTTPStatus

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient

from banana_stand.apps.api import dependencies
from banana_stand.apps.api.app import create_app
from banana_stand.core.config import config as app_config
from banana_stand.services import build_default_services


def _client() -> TestClient:
    return TestClient(create_app(build_default_services()))


def test_root_lists_skill_endpoint():
    resp = _client().get("/")

    assert resp.status_code == HTTPStatus.OK
    assert "/alexa" in resp.json()["message"]


def test_alive_requires_token(monkeypatch):
    monkeypatch.setattr(app_config, "ENABLE_HEALTHCHECK_AUTH", True, raising=True)
    monkeypatch.setattr(app_config, "HEALTHCHECK_API_TOKEN", "health", raising=True)
    client = _client()

    assert client.get("/alive").status_code == HTTPStatus.UNAUTHORIZED
    ok = client.get("/alive", headers={"Authorization": "Bearer health"})
    assert ok.status_code == HTTPStatus.OK
    assert ok.json()["status"] == "ok"


def test_healthcheck_guard_disabled(monkeypatch):
    monkeypatch.setattr(app_config, "ENABLE_HEALTHCHECK_AUTH", False, raising=True)
    asyncio.run(dependencies.require_healthcheck_token())


def test_healthcheck_guard_accepts_admin_header(monkeypatch):
    monkeypatch.setattr(app_config, "ENABLE_HEALTHCHECK_AUTH", True, raising=True)
    monkeypatch.setattr(app_config, "HEALTHCHECK_API_TOKEN", "health", raising=True)
    asyncio.run(dependencies.require_healthcheck_token(x_admin_token="health"))


def test_healthcheck_guard_rejects_wrong_token(monkeypatch):
    monkeypatch.setattr(app_config, "ENABLE_HEALTHCHECK_AUTH", True, raising=True)
    monkeypatch.setattr(app_config, "HEALTHCHECK_API_TOKEN", "health", raising=True)
    with pytest.raises(HTTPException):
        asyncio.run(dependencies.require_healthcheck_token(authorization="Bearer nope"))


def test_healthcheck_guard_rejects_when_unconfigured(monkeypatch):
    monkeypatch.setattr(app_config, "ENABLE_HEALTHCHECK_AUTH", True, raising=True)
    monkeypatch.setattr(app_config, "HEALTHCHECK_API_TOKEN", None, raising=True)
    with pytest.raises(HTTPException):
        asyncio.run(dependencies.require_healthcheck_token(x_admin_token="anything"))
