"""
API Tests - Authentication
"""
import pytest


class TestLogin:
    """Tests for POST /auth/login"""

    @pytest.mark.parametrize("role,landing", [
        ("ADMIN", "dashboard"),
        ("OPERATIONS", "dashboard"),
        ("PACKAGING", "inventory"),
        ("BRAND_OWNER", "dashboard"),
        ("SUPPORT", "dashboard"),
    ])
    def test_landing_page(self, client, credentials, role, landing):
        email, password = credentials[role]
        response = client.post(
            "/api/v1/auth/login", json={"email": email, "password": password, "locale": "en"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["landing_page"] == landing
        assert body["token_type"] == "bearer"
        assert body["identity"]["role"] == role

    def test_wrong_password_generic_message(self, client):
        response = client.post(
            "/api/v1/auth/login",
            json={"email": "admin@fulfillo.com", "password": "nope", "locale": "en"},
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid credentials or account suspended."
        assert response.headers["www-authenticate"] == "Bearer"

    def test_unknown_email_same_message(self, client):
        response = client.post(
            "/api/v1/auth/login",
            json={"email": "ghost@fulfillo.com", "password": "x", "locale": "en"},
        )
        assert response.json()["detail"] == "Invalid credentials or account suspended."

    def test_suspended_account_same_message_in_arabic(self, client, store):
        store.toggle_user_active("pack@fulfillo.com")

        response = client.post(
            "/api/v1/auth/login",
            json={"email": "pack@fulfillo.com", "password": "warehouse-key-5", "locale": "ar"},
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "بيانات الدخول غير صحيحة أو الحساب معلق"

    def test_default_locale_is_arabic(self, client):
        response = client.post(
            "/api/v1/auth/login",
            json={"email": "admin@fulfillo.com", "password": "admin-unique-7721"},
        )
        identity = response.json()["identity"]

        assert identity["locale"] == "ar"
        assert identity["direction"] == "rtl"


class TestSession:
    """Tests for /auth/me, /auth/locale and /auth/logout"""

    def test_me_requires_token(self, client):
        assert client.get("/api/v1/auth/me").status_code == 401

    def test_me_with_unknown_token(self, client):
        response = client.get("/api/v1/auth/me", headers={"Authorization": "Bearer forged"})
        assert response.status_code == 401

    def test_me(self, client, login):
        body = client.get("/api/v1/auth/me", headers=login("BRAND_OWNER")).json()

        assert body["email"] == "glowskin@brand.com"
        assert body["brand_filter"] == "b1"
        assert body["capabilities"]["read_only"] is True
        assert "settings" not in body["navigation"]

    def test_toggle_locale(self, client, login):
        headers = login("ADMIN", "en")

        toggled = client.put("/api/v1/auth/locale", json={}, headers=headers).json()
        assert toggled["locale"] == "ar"
        assert toggled["direction"] == "rtl"

        explicit = client.put("/api/v1/auth/locale", json={"locale": "en"}, headers=headers).json()
        assert explicit["locale"] == "en"

    def test_logout_ends_session(self, client, login):
        headers = login("OPERATIONS")

        assert client.post("/api/v1/auth/logout", headers=headers).status_code == 204
        assert client.get("/api/v1/auth/me", headers=headers).status_code == 401

    def test_deactivation_keeps_open_sessions(self, client, login, store):
        headers = login("PACKAGING")
        store.toggle_user_active("pack@fulfillo.com")

        response = client.get("/api/v1/auth/me", headers=headers)

        assert response.status_code == 200
        assert response.json()["active"] is False
