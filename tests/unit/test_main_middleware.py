import logging

from fastapi.testclient import TestClient

from storefront.api.main import app


def test_root_message():
    client = TestClient(app)
    r = client.get("/")
    assert r.status_code == 200
    assert r.json() == {"message": "Storefront API"}


def test_requests_are_logged(caplog):
    client = TestClient(app)
    with caplog.at_level(logging.INFO, logger="storefront.api.main"):
        client.get("/")
    assert any("Incoming request" in rec.getMessage() and "GET" in rec.getMessage() for rec in caplog.records)


def test_cors_preflight_allows_configured_origin():
    client = TestClient(app)
    r = client.options(
        "/users",
        headers={"Origin": "http://localhost:3000", "Access-Control-Request-Method": "GET"},
    )
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "http://localhost:3000"
