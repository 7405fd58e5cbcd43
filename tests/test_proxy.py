import asyncio
import logging

import aiohttp
import pytest
from fastapi.testclient import TestClient

from openrouter_dashboard import app
from openrouter_dashboard.config.settings import settings

client = TestClient(app)

TOKEN = "dashboard-secret"
UPSTREAM = "https://openrouter.ai/api/v1"

RESOURCES = [
    ("/api/keys", f"{UPSTREAM}/keys", "OpenRouter keys"),
    ("/api/credits", f"{UPSTREAM}/credits", "OpenRouter credits"),
]


@pytest.mark.parametrize("path,url,label", RESOURCES)
def test_success_passes_body_through(upstream, path, url, label):
    payload = {"data": [{"name": "default", "usage": 1.25, "limit": None, "disabled": False}]}
    upstream.get(url, status=200, payload=payload)
    r = client.get(path, params={"token": TOKEN})
    assert r.status_code == 200
    assert r.json() == payload


def test_credits_body_unchanged(upstream):
    payload = {"data": {"total_credits": 50.0, "total_usage": 12.3456}}
    upstream.get(f"{UPSTREAM}/credits", payload=payload)
    r = client.get("/api/credits", params={"token": TOKEN})
    assert r.json() == payload


def test_upstream_2xx_other_than_200_is_success(upstream):
    upstream.get(f"{UPSTREAM}/keys", status=203, payload={"data": []})
    r = client.get("/api/keys", params={"token": TOKEN})
    assert r.status_code == 200
    assert r.json() == {"data": []}


def test_sends_bearer_credential(upstream):
    upstream.get(f"{UPSTREAM}/keys", payload={"data": []})
    client.get("/api/keys", params={"token": TOKEN})
    calls = [c for (method, url), cs in upstream.requests.items() if str(url) == f"{UPSTREAM}/keys" for c in cs]
    assert len(calls) == 1
    headers = calls[0].kwargs["headers"]
    assert headers["Authorization"] == "Bearer sk-or-test-key"
    assert headers["Content-Type"] == "application/json"


def test_dashboard_token_not_forwarded(upstream):
    upstream.get(f"{UPSTREAM}/keys", payload={"data": []})
    client.get("/api/keys", params={"token": TOKEN})
    (key,) = upstream.requests.keys()
    assert "token" not in key[1].query


@pytest.mark.parametrize("path,url,label", RESOURCES)
def test_upstream_error_is_wrapped(upstream, path, url, label):
    upstream.get(url, status=403, body="forbidden")
    r = client.get(path, params={"token": TOKEN})
    assert r.status_code == 403
    assert r.json() == {"error": f"Failed to fetch {label}", "details": "forbidden"}


def test_upstream_error_keeps_json_text_verbatim(upstream):
    body = '{"error":{"code":401,"message":"No auth credentials found"}}'
    upstream.get(f"{UPSTREAM}/credits", status=401, body=body)
    r = client.get("/api/credits", params={"token": TOKEN})
    assert r.status_code == 401
    assert r.json()["details"] == body


def test_upstream_error_is_logged(upstream, caplog):
    upstream.get(f"{UPSTREAM}/keys", status=502, body="bad gateway")
    with caplog.at_level(logging.ERROR, logger="openrouter_dashboard.upstream"):
        r = client.get("/api/keys", params={"token": TOKEN})
    assert r.status_code == 502
    assert any("502" in rec.getMessage() and "bad gateway" in rec.getMessage() for rec in caplog.records)


@pytest.mark.parametrize("path,url,label", RESOURCES)
def test_unreachable_upstream(upstream, path, url, label):
    upstream.get(url, exception=aiohttp.ClientConnectionError("Cannot connect to host openrouter.ai:443"))
    r = client.get(path, params={"token": TOKEN})
    assert r.status_code == 500
    body = r.json()
    assert body["error"] == "Internal server error"
    assert body["message"] == "Cannot connect to host openrouter.ai:443"


def test_timeout_has_a_message(upstream):
    upstream.get(f"{UPSTREAM}/keys", exception=asyncio.TimeoutError())
    r = client.get("/api/keys", params={"token": TOKEN})
    assert r.status_code == 500
    assert r.json()["message"]


def test_malformed_success_body(upstream, caplog):
    upstream.get(f"{UPSTREAM}/keys", status=200, body="<html>not json</html>")
    with caplog.at_level(logging.ERROR, logger="openrouter_dashboard.upstream"):
        r = client.get("/api/keys", params={"token": TOKEN})
    assert r.status_code == 500
    body = r.json()
    assert body["error"] == "Internal server error"
    assert "message" in body
    assert any("OpenRouter keys" in rec.getMessage() for rec in caplog.records)


def test_base_url_setting(monkeypatch, upstream):
    monkeypatch.setattr(settings, "OPENROUTER_BASE_URL", "http://upstream.local/v9")
    upstream.get("http://upstream.local/v9/credits", payload={"data": {"total_credits": 1}})
    r = client.get("/api/credits", params={"token": TOKEN})
    assert r.status_code == 200
    assert r.json() == {"data": {"total_credits": 1}}


def test_upstream_error_with_undecodable_body(upstream):
    upstream.get(f"{UPSTREAM}/keys", status=403, body=b"forbidden \xff\xfe")
    r = client.get("/api/keys", params={"token": TOKEN})
    assert r.status_code == 403
    body = r.json()
    assert body["error"] == "Failed to fetch OpenRouter keys"
    assert body["details"].startswith("forbidden ")
    assert "�" in body["details"]


@pytest.mark.parametrize("status", [200, 204])
def test_empty_success_body(upstream, status):
    upstream.get(f"{UPSTREAM}/credits", status=status, body=b"")
    r = client.get("/api/credits", params={"token": TOKEN})
    assert r.status_code == 500
    body = r.json()
    assert body["error"] == "Internal server error"
    assert body["message"]


def test_unexpected_relay_error_keeps_frame_policy(monkeypatch):
    from openrouter_dashboard.core.upstream import openrouter_client

    async def boom(resource, label):
        raise RuntimeError("relay exploded")

    monkeypatch.setattr(openrouter_client, "relay", boom)
    unsafe_client = TestClient(app, raise_server_exceptions=False)
    r = unsafe_client.get("/api/keys", params={"token": TOKEN})
    assert r.status_code == 500
    assert r.json() == {"error": "Internal server error", "message": "relay exploded"}
    assert r.headers["content-security-policy"] == "frame-ancestors *"
