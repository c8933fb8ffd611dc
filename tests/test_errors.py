# tests/test_errors.py
from fastapi.testclient import TestClient

from app.core.errors import BadRequestError, InternalError, NotFoundError, RequestValidationFailed

ALLOWED_ORIGIN = "http://localhost:5173"


def test_error_bodies():
    assert NotFoundError("Ticket").to_body() == {
        "success": False,
        "error": {"message": "Ticket not found", "code": "NOT_FOUND"},
    }
    assert BadRequestError("Malformed cursor").status_code == 400
    assert BadRequestError("Malformed cursor").to_body()["error"]["code"] == "BAD_REQUEST"

    err = RequestValidationFailed([{"path": "body.title", "message": "too short"}])
    assert err.status_code == 422
    assert err.to_body()["error"] == {
        "message": "Validation failed",
        "code": "VALIDATION_ERROR",
        "details": [{"path": "body.title", "message": "too short"}],
    }

    assert InternalError().to_body()["error"] == {"message": "Internal server error", "code": "INTERNAL_ERROR"}


def test_unknown_route_uses_error_envelope(client):
    r = client.get("/nowhere")
    assert r.status_code == 404
    assert r.json()["success"] is False
    assert r.json()["error"]["code"] == "NOT_FOUND"


def test_method_not_allowed_uses_error_envelope(client):
    r = client.put("/tickets")
    assert r.status_code == 405
    assert r.json()["error"]["code"] == "BAD_REQUEST"


def test_invalid_json_body_is_validation_error(client):
    r = client.post("/tickets", content=b"{not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 422
    assert r.json()["error"]["code"] == "VALIDATION_ERROR"


def test_unexpected_failure_is_generic_500(app, caplog):
    @app.get("/boom")
    def boom():
        raise RuntimeError("database password is hunter2")

    with TestClient(app, raise_server_exceptions=False) as c:
        r = c.get("/boom")

    assert r.status_code == 500
    assert r.json() == {"success": False, "error": {"message": "Internal server error", "code": "INTERNAL_ERROR"}}
    assert "hunter2" not in r.text
    assert any("Unhandled error on GET /boom" in rec.getMessage() for rec in caplog.records)


def test_cors_allow_list(client):
    r = client.get("/health", headers={"Origin": ALLOWED_ORIGIN})
    assert r.headers["access-control-allow-origin"] == ALLOWED_ORIGIN

    r = client.get("/health", headers={"Origin": "https://evil.example.com"})
    assert r.status_code == 200
    assert "access-control-allow-origin" not in r.headers

    # server-to-server calls carry no Origin and are always let through
    r = client.get("/health")
    assert r.status_code == 200


def test_cors_preflight(client):
    r = client.options(
        "/tickets",
        headers={"Origin": ALLOWED_ORIGIN, "Access-Control-Request-Method": "PATCH"},
    )
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == ALLOWED_ORIGIN

    r = client.options(
        "/tickets",
        headers={"Origin": "https://evil.example.com", "Access-Control-Request-Method": "POST"},
    )
    assert r.status_code == 400
