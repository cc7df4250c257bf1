"""
HTTP tests for /api/v1/profiles, including the public-read / owner-write
authorization contract.
"""


def test_get_profile_is_public(client, seed_profile):
    response = client.get("/api/v1/profiles/1")

    assert response.status_code == 200
    body = response.json()
    assert body["firstName"] == "John"
    assert body["lastName"] == "Doe"
    assert body["profileId"] == 1
    assert body["photoUrl"] is None


def test_get_missing_profile_returns_404_body(client):
    response = client.get("/api/v1/profiles/999")

    assert response.status_code == 404
    assert response.json() == {
        "status": 404,
        "error": "Not Found",
        "message": "Profile not found with id: 999",
    }


def test_post_without_token_is_rejected_and_writes_nothing(client, seed_profile, row_count):
    response = client.post("/api/v1/profiles", json={"firstName": "Eve", "lastName": "Intruder"})

    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"
    assert response.json()["status"] == 401
    assert response.json()["error"] == "Unauthorized"
    assert row_count("profile") == 1


def test_post_with_token_creates_profile(client, auth_headers):
    payload = {"firstName": "Jane", "lastName": "Smith", "photoUrl": "https://example.com/jane.jpg", "status": "Active"}

    response = client.post("/api/v1/profiles", json=payload, headers=auth_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["profileId"] is not None
    assert {k: body[k] for k in payload} == payload
    assert client.get(f"/api/v1/profiles/{body['profileId']}").json() == body


def test_put_replaces_all_fields(client, seed_profile, auth_headers):
    response = client.put("/api/v1/profiles/1", json={"firstName": "Jane"}, headers=auth_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["firstName"] == "Jane"
    assert body["lastName"] is None
    assert client.get("/api/v1/profiles/1").json() == body


def test_put_without_token_leaves_profile_unchanged(client, seed_profile):
    response = client.put("/api/v1/profiles/1", json={"firstName": "Jane"})

    assert response.status_code == 401
    assert client.get("/api/v1/profiles/1").json()["firstName"] == "John"


def test_put_with_invalid_token_is_rejected(client, seed_profile):
    response = client.put(
        "/api/v1/profiles/1",
        json={"firstName": "Jane"},
        headers={"Authorization": "Bearer not.a.token"},
    )

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid or expired token"


def test_non_bearer_credentials_are_rejected(client, seed_profile):
    response = client.put(
        "/api/v1/profiles/1",
        json={"firstName": "Jane"},
        headers={"Authorization": "Basic am9objpkb2U="},
    )

    assert response.status_code == 401


def test_put_missing_profile_returns_404(client, auth_headers):
    response = client.put("/api/v1/profiles/77", json={"firstName": "X"}, headers=auth_headers)

    assert response.status_code == 404
    assert response.json()["message"] == "Profile not found with id: 77"


def test_delete_uses_query_parameter(client, seed_profile, auth_headers):
    response = client.delete("/api/v1/profiles", params={"profileId": 1}, headers=auth_headers)

    assert response.status_code == 200
    assert response.json() is True
    assert client.get("/api/v1/profiles/1").status_code == 404


def test_delete_missing_profile_returns_404(client, auth_headers):
    response = client.delete("/api/v1/profiles", params={"profileId": 5}, headers=auth_headers)

    assert response.status_code == 404
    assert response.json()["message"] == "Profile not found with id: 5"


def test_delete_without_token_keeps_profile(client, seed_profile, row_count):
    response = client.delete("/api/v1/profiles", params={"profileId": 1})

    assert response.status_code == 401
    assert row_count("profile") == 1


def test_delete_without_profile_id_is_bad_request(client, auth_headers):
    response = client.delete("/api/v1/profiles", headers=auth_headers)

    assert response.status_code == 400
    assert response.json()["error"] == "Bad Request"


def test_non_numeric_id_is_bad_request(client):
    response = client.get("/api/v1/profiles/abc")

    assert response.status_code == 400


def test_john_and_jane_scenario(client, seed_profile, token):
    """Public read, anonymous write refused, owner write replaces the record."""
    read = client.get("/api/v1/profiles/1")
    assert read.status_code == 200
    assert (read.json()["firstName"], read.json()["lastName"]) == ("John", "Doe")

    assert client.post("/api/v1/profiles", json={"firstName": "X", "lastName": "Y"}).status_code == 401

    update = client.put(
        "/api/v1/profiles/1",
        json={"firstName": "Jane"},
        headers={"Authorization": f"Bearer {token}"},
    )
    assert update.status_code == 200
    assert update.json()["firstName"] == "Jane"
    assert update.json()["lastName"] is None
