import pytest

from attendance_api.app import create_app
from attendance_api.config.settings import Config


def test_health_check_returns_plain_text(client):
    resp = client.get("/api")

    assert resp.status_code == 200
    assert resp.mimetype == "text/plain"
    assert resp.get_data(as_text=True) == "Student Attendance API working"


ORIGIN = {"Origin": "http://example.com"}


def test_every_response_allows_any_origin(client):
    for path in ("/api", "/api/students", "/api/nope"):
        resp = client.get(path, headers=ORIGIN)
        assert resp.headers["Access-Control-Allow-Origin"] == "*"


def test_correlation_header_is_exposed_to_browsers(client):
    resp = client.get("/api/students", headers=ORIGIN)

    assert "x-correlation-id" in resp.headers["Access-Control-Expose-Headers"].lower()


def test_preflight_is_answered(client):
    resp = client.options(
        "/api/attendance",
        headers={**ORIGIN, "Access-Control-Request-Method": "POST"},
    )

    assert resp.status_code == 200
    assert resp.headers["Access-Control-Allow-Origin"] == "*"
    assert "POST" in resp.headers["Access-Control-Allow-Methods"]


def test_preflight_allows_the_requested_headers(client):
    resp = client.options(
        "/api/students",
        headers={
            **ORIGIN,
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "X-Requested-With, Content-Type",
        },
    )

    allowed = resp.headers["Access-Control-Allow-Headers"].lower()
    assert "x-requested-with" in allowed
    assert "content-type" in allowed


def test_correlation_id_is_echoed_or_generated(client):
    echoed = client.get("/api", headers={"X-Correlation-ID": "abc123"})
    generated = client.get("/api")

    assert echoed.headers["X-Correlation-ID"] == "abc123"
    assert len(generated.headers["X-Correlation-ID"]) == 8


def test_static_files_are_served_from_root(client):
    resp = client.get("/index.html")

    assert resp.status_code == 200
    assert b"Student Attendance" in resp.data


def test_root_path_serves_the_frontend(client):
    resp = client.get("/")

    assert resp.status_code == 200
    assert b"Student Attendance" in resp.data


def test_unknown_route_is_json_404(client):
    resp = client.get("/api/unknown")

    assert resp.status_code == 404
    assert resp.get_json() == {"message": "Resource not found"}


def test_wrong_method_is_405(client):
    assert client.delete("/api/students").status_code == 405


def test_invalid_configuration_is_rejected(repo):
    with pytest.raises(ValueError, match="PORT"):
        create_app({"PORT": 0}, repository=repo)
    with pytest.raises(ValueError, match="MONGO_URI"):
        create_app({"MONGO_URI": ""}, repository=repo)
    with pytest.raises(ValueError, match="LOG_LEVEL"):
        create_app({"LOG_LEVEL": "chatty"}, repository=repo)


def test_class_defaults_are_valid():
    Config.validate()


def test_repository_is_registered_on_app(app, repo):
    assert app.extensions["attendance_repository"] is repo
