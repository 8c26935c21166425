from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.testclient import TestClient

from app.api.origin_guard import OriginGuardMiddleware, check_origin
from app.domain.exceptions import OriginNotAllowedError


ALLOWED = ("http://localhost:3000", "https://pixelfit.io")


def _make_app(calls: list[str]) -> FastAPI:
    app = FastAPI()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(ALLOWED),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(OriginGuardMiddleware, allowed_origins=ALLOWED)

    @app.get("/ping")
    def ping():
        calls.append("ping")
        return {"ok": True}

    return app


def test_check_origin_allows_missing_origin():
    check_origin(None, frozenset(ALLOWED))
    check_origin("", frozenset(ALLOWED))


def test_check_origin_rejects_unknown_origin():
    with pytest.raises(OriginNotAllowedError, match="CORS blocked: https://evil.example"):
        check_origin("https://evil.example", frozenset(ALLOWED))


def test_request_without_origin_reaches_handler():
    calls: list[str] = []
    client = TestClient(_make_app(calls))

    response = client.get("/ping")

    assert response.status_code == 200
    assert calls == ["ping"]


def test_allowed_origin_gets_credential_headers():
    calls: list[str] = []
    client = TestClient(_make_app(calls))

    response = client.get("/ping", headers={"Origin": "https://pixelfit.io"})

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "https://pixelfit.io"
    assert response.headers["access-control-allow-credentials"] == "true"
    assert calls == ["ping"]


def test_unknown_origin_is_blocked_before_handler():
    calls: list[str] = []
    client = TestClient(_make_app(calls))

    response = client.get("/ping", headers={"Origin": "https://evil.example"})

    assert response.status_code == 403
    assert response.text == "CORS blocked: https://evil.example"
    assert calls == []


def test_unknown_origin_preflight_is_blocked():
    calls: list[str] = []
    client = TestClient(_make_app(calls))

    response = client.options(
        "/ping",
        headers={"Origin": "https://evil.example", "Access-Control-Request-Method": "GET"},
    )

    assert response.status_code == 403
    assert "access-control-allow-origin" not in response.headers
