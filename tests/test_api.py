"""
HTTP-level tests for the auth and users routes.
"""

import logging

import pytest

from auth.jwt import create_token
from config.settings import DEFAULT_JWT_SECRET, config
from main import create_app


def _register(client, name="Maria", email="maria@x.com", password="secret"):
    return client.post(
        "/api/auth/register",
        json={"name": name, "email": email, "password": password},
    )


class TestAuthRoutes:
    def test_register_example(self, client):
        resp = _register(client)
        assert resp.status_code == 201
        body = resp.json()
        assert body["token"]
        assert body["user"] == {"id": 2, "name": "Maria", "email": "maria@x.com"}
        assert "password" not in resp.text
        assert "password_hash" not in resp.text

    def test_register_missing_field(self, client):
        resp = client.post("/api/auth/register", json={"name": "Maria", "email": "maria@x.com"})
        assert resp.status_code == 400
        assert "required" in resp.json()["detail"]

    def test_register_twice_keeps_first(self, client):
        first = _register(client).json()
        resp = _register(client, name="Impostor", password="other")
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Email already registered"

        headers = {"Authorization": f"Bearer {first['token']}"}
        fetched = client.get(f"/api/users/{first['user']['id']}", headers=headers)
        assert fetched.status_code == 200
        assert fetched.json()["name"] == "Maria"

    def test_login_admin(self, client):
        resp = client.post(
            "/api/auth/login",
            json={"email": config.admin_email, "password": config.admin_password},
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["user"] == {"id": 1, "name": config.admin_name, "email": config.admin_email}

    @pytest.mark.parametrize("payload", [
        {"email": "admin@example.com", "password": "wrong"},
        {"email": "nobody@example.com", "password": "admin123"},
    ])
    def test_login_bad_credentials(self, client, payload):
        resp = client.post("/api/auth/login", json=payload)
        assert resp.status_code == 401
        assert set(resp.json()) == {"detail"}

    def test_login_missing_password(self, client):
        resp = client.post("/api/auth/login", json={"email": config.admin_email})
        assert resp.status_code == 400

    def test_login_malformed_body(self, client):
        resp = client.post(
            "/api/auth/login",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 400
        assert resp.json() == {"detail": "Malformed JSON body"}


class TestAuthMiddleware:
    def test_no_header(self, client):
        resp = client.get("/api/users")
        assert resp.status_code == 401
        assert resp.headers["www-authenticate"] == "Bearer"

    def test_rejection_is_logged(self, client, caplog):
        caplog.set_level(logging.INFO, logger="auth.dependencies")
        client.get("/api/users", headers={"Authorization": "Bearer garbage"})
        assert any(
            "Rejected GET /api/users: Invalid token" in rec.getMessage() for rec in caplog.records
        )

    def test_bad_login_challenges_bearer(self, client):
        resp = client.post("/api/auth/login", json={"email": "nobody@x.com", "password": "pw"})
        assert resp.headers["www-authenticate"] == "Bearer"

    def test_wrong_scheme(self, client, admin_token):
        resp = client.get("/api/users", headers={"Authorization": f"Basic {admin_token}"})
        assert resp.status_code == 401

    def test_expired_token(self, client):
        token = create_token(1, expires_in=-5)
        resp = client.get("/api/users", headers={"Authorization": f"Bearer {token}"})
        assert resp.status_code == 401
        assert resp.json()["detail"] == "Token expired"

    def test_altered_token(self, client, admin_token):
        resp = client.get("/api/users", headers={"Authorization": f"Bearer {admin_token}x"})
        assert resp.status_code == 401

    def test_valid_token(self, client, auth_headers):
        resp = client.get("/api/users", headers=auth_headers)
        assert resp.status_code == 200


class TestUserRoutes:
    def test_list_includes_seed(self, client, auth_headers):
        resp = client.get("/api/users", headers=auth_headers)
        assert [u["email"] for u in resp.json()] == [config.admin_email]

    def test_create_then_get(self, client, auth_headers):
        created = client.post(
            "/api/users", json={"name": "Ana", "email": "ana@x.com"}, headers=auth_headers,
        )
        assert created.status_code == 201
        user = created.json()
        fetched = client.get(f"/api/users/{user['id']}", headers=auth_headers)
        assert fetched.status_code == 200
        assert fetched.json() == user

    def test_create_missing_field(self, client, auth_headers):
        resp = client.post("/api/users", json={"name": "Ana"}, headers=auth_headers)
        assert resp.status_code == 400

    def test_get_missing(self, client, auth_headers):
        resp = client.get("/api/users/999", headers=auth_headers)
        assert resp.status_code == 404
        assert resp.json() == {"detail": "User not found"}

    def test_partial_update(self, client, auth_headers):
        user = client.post(
            "/api/users", json={"name": "Ana", "email": "ana@x.com"}, headers=auth_headers,
        ).json()
        resp = client.put(f"/api/users/{user['id']}", json={"name": "Ana Maria"}, headers=auth_headers)
        assert resp.status_code == 200
        assert resp.json() == {"id": user["id"], "name": "Ana Maria", "email": "ana@x.com"}

    def test_update_with_null_is_ignored(self, client, auth_headers):
        resp = client.put("/api/users/1", json={"name": None}, headers=auth_headers)
        assert resp.status_code == 200
        assert resp.json()["name"] == config.admin_name

    def test_create_missing_field_names_it(self, client, auth_headers):
        resp = client.post("/api/users", json={"email": "ana@x.com"}, headers=auth_headers)
        assert resp.json() == {"detail": "Invalid request: name Field required"}

    def test_update_missing(self, client, auth_headers):
        resp = client.put("/api/users/999", json={"name": "X"}, headers=auth_headers)
        assert resp.status_code == 404

    def test_delete(self, client, auth_headers):
        user = client.post(
            "/api/users", json={"name": "Ana", "email": "ana@x.com"}, headers=auth_headers,
        ).json()
        resp = client.delete(f"/api/users/{user['id']}", headers=auth_headers)
        assert resp.status_code == 204
        assert resp.content == b""
        assert client.get(f"/api/users/{user['id']}", headers=auth_headers).status_code == 404

    def test_delete_missing_is_no_content(self, client, auth_headers):
        resp = client.delete("/api/users/999", headers=auth_headers)
        assert resp.status_code == 204

    def test_delete_requires_auth(self, client):
        assert client.delete("/api/users/1").status_code == 401


class TestDocsAndCors:
    def test_docs_served_without_auth(self, client):
        resp = client.get("/api-docs")
        assert resp.status_code == 200
        assert "swagger" in resp.text.lower()

    def test_openapi_lists_routes(self, client):
        spec = client.get("/api-docs/openapi.json").json()
        assert "/api/auth/login" in spec["paths"]
        assert "/api/users/{user_id}" in spec["paths"]
        assert "HTTPBearer" in spec["components"]["securitySchemes"]

    def test_preflight(self, client):
        resp = client.options(
            "/api/users",
            headers={
                "Origin": "http://localhost:5173",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Authorization",
            },
        )
        assert resp.status_code == 200
        assert resp.headers["access-control-allow-origin"] == "*"

    def test_process_time_header(self, client):
        assert "x-process-time" in client.get("/api-docs").headers


class TestStartup:
    def test_default_secret_warns(self, monkeypatch, caplog):
        monkeypatch.setattr(config, "jwt_secret", DEFAULT_JWT_SECRET)
        caplog.set_level(logging.WARNING, logger="main")
        create_app()
        assert "JWT_SECRET is not set; using the insecure demo default." in caplog.messages

    def test_custom_secret_does_not_warn(self, caplog):
        caplog.set_level(logging.WARNING, logger="main")
        create_app()
        assert not any("JWT_SECRET" in msg for msg in caplog.messages)
