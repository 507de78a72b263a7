# test_app.py
from __future__ import annotations

import dns.exception
import pytest
from fastapi.testclient import TestClient

from dns_txt_checker.app import app, get_checker
from txtcheck import TXTRecordChecker


@pytest.fixture
def client_with():
    def _make(resolver, allow_bare_domain: bool = False) -> TestClient:
        app.dependency_overrides[get_checker] = lambda: TXTRecordChecker(
            resolver, allow_bare_domain=allow_bare_domain
        )
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


def test_health(fake_resolver, client_with):
    client = client_with(fake_resolver())
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}


def test_check_found(fake_resolver, client_with):
    client = client_with(fake_resolver(records=[(b"token",)]))
    r = client.get("/check", params={"domain": "https://example.com", "record": "token"})

    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "found"
    assert body["domain"] == "example.com"


def test_check_not_found_is_not_an_error(fake_resolver, client_with):
    client = client_with(fake_resolver(records=[]))
    r = client.get("/check", params={"domain": "https://example.com", "record": "token"})

    assert r.status_code == 200
    assert r.json()["status"] == "not_found"


def test_check_invalid_input_is_400(fake_resolver, client_with):
    resolver = fake_resolver()
    client = client_with(resolver)
    r = client.get("/check", params={"domain": "not a url", "record": "token"})

    assert r.status_code == 400
    assert r.json()["detail"].startswith("URL parse error:")
    assert resolver.calls == []


def test_check_dns_failure_is_502(fake_resolver, client_with):
    client = client_with(fake_resolver(error=dns.exception.Timeout()))
    r = client.get("/check", params={"domain": "https://example.com", "record": "token"})

    assert r.status_code == 502
    detail = r.json()["detail"]
    assert detail["status"] == "error"
    assert detail["error"]["reason"] == "timeout"


def test_check_requires_both_params(fake_resolver, client_with):
    client = client_with(fake_resolver())
    assert client.get("/check", params={"domain": "https://example.com"}).status_code == 422
    assert client.get("/check", params={"record": "x"}).status_code == 422
