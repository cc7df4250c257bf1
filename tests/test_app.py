"""
Application-level tests: CORS, operational endpoints and the fallback
error handler.
"""
import logging

from portfolio_api.app.api import actuator
from portfolio_api.app.dependencies import get_profile_service


def _preflight(client, origin, method="PUT"):
    return client.options(
        "/api/v1/profiles/1",
        headers={
            "Origin": origin,
            "Access-Control-Request-Method": method,
            "Access-Control-Request-Headers": "Authorization, Content-Type",
        },
    )


def test_preflight_from_allowed_origin(client):
    response = _preflight(client, "http://localhost:4200")

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:4200"
    assert response.headers["access-control-max-age"] == "3600"
    assert "PUT" in response.headers["access-control-allow-methods"]


def test_preflight_from_unknown_origin_is_refused(client):
    response = _preflight(client, "https://evil.example.com")

    assert response.status_code == 400
    assert "access-control-allow-origin" not in response.headers


def test_simple_request_from_production_origin_gets_cors_header(client, seed_profile):
    response = client.get("/api/v1/profiles/1", headers={"Origin": "https://boredsoftwaredeveloper.xyz"})

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "https://boredsoftwaredeveloper.xyz"


def test_health_reports_up(client):
    response = client.get("/actuator/health")

    assert response.status_code == 200
    assert response.json() == {"status": "UP"}


def test_health_reports_down_when_store_is_unreachable(client, monkeypatch):
    monkeypatch.setattr(actuator, "check_connection", lambda: False)

    response = client.get("/actuator/health")

    assert response.status_code == 503
    assert response.json() == {"status": "DOWN"}


def test_info_reports_name_and_version(client):
    response = client.get("/actuator/info")

    assert response.status_code == 200
    assert response.json() == {"app": {"name": "Portfolio Profile API", "version": "1.0.0"}}


class ExplodingProfileService:
    def get_profile_by_id(self, profile_id):
        raise RuntimeError("secret connection string: postgres://admin:hunter2@db")


def test_unexpected_error_returns_generic_500(app, lenient_client, caplog):
    app.dependency_overrides[get_profile_service] = ExplodingProfileService

    with caplog.at_level(logging.ERROR):
        response = lenient_client.get("/api/v1/profiles/1")

    assert response.status_code == 500
    assert response.json() == {
        "status": 500,
        "error": "Internal Server Error",
        "message": "An unexpected error occurred",
    }
    assert "hunter2" not in response.text
    assert "hunter2" in caplog.text


def test_unknown_route_uses_error_shape(client):
    response = client.get("/api/v1/nothing-here")

    assert response.status_code == 404
    assert response.json() == {"status": 404, "error": "Not Found", "message": "Not Found"}


def test_unexpected_error_keeps_cors_headers(app, client):
    app.dependency_overrides[get_profile_service] = ExplodingProfileService

    response = client.get("/api/v1/profiles/1", headers={"Origin": "http://localhost:4200"})

    assert response.status_code == 500
    assert response.json()["message"] == "An unexpected error occurred"
    assert response.headers["access-control-allow-origin"] == "http://localhost:4200"


def test_failed_write_keeps_cors_headers(client, auth_headers, row_count):
    response = client.post(
        "/api/v1/achievements",
        json={"profileId": 999, "id": "orphan"},
        headers={**auth_headers, "Origin": "https://boredsoftwaredeveloper.xyz"},
    )

    assert response.status_code == 500
    assert response.headers["access-control-allow-origin"] == "https://boredsoftwaredeveloper.xyz"
    assert row_count("achievement") == 0


def test_openapi_describes_write_operations(client):
    paths = client.get("/openapi.json").json()["paths"]

    for resource, noun in (("achievements", "achievement"), ("aspirations", "aspiration"), ("experiences", "experience")):
        assert paths[f"/api/v1/{resource}"]["post"]["description"] == f"Create an {noun} (owner only)."
        item = paths[f"/api/v1/{resource}/{{{noun}_id}}"]
        assert item["put"]["description"] == f"Replace every field of an {noun} (owner only)."
        assert item["delete"]["description"] == f"Delete an {noun} (owner only)."
