from __future__ import annotations

from fastapi.testclient import TestClient

from presentation.demo_server import VERSION, create_app


client = TestClient(create_app(environment="test"))


def test_root():
    r = client.get("/")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "healthy"
    assert body["environment"] == "test"
    assert body["timestamp"].endswith("Z")


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["service"] == "backend"
    assert body["uptime"] >= 0


def test_api_status():
    r = client.get("/api/status")
    assert r.status_code == 200
    assert r.json()["api"] == "available"
    assert r.json()["version"] == VERSION


def test_users():
    r = client.get("/users")
    assert r.status_code == 200
    assert [u["id"] for u in r.json()] == [1, 2]


def test_unknown_route_is_json_404():
    r = client.get("/api/health")
    assert r.status_code == 404
    assert r.json() == {"error": "Route not found"}


def test_unhandled_error_is_json_500():
    app = create_app()

    @app.get("/boom")
    def boom():
        raise RuntimeError("kaboom")

    r = TestClient(app, raise_server_exceptions=False).get("/boom")
    assert r.status_code == 500
    assert r.json() == {"error": "Something went wrong!"}
