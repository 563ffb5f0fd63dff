"""
API Tests - User Management
"""


class TestUsers:
    """Tests for the admin user endpoints"""

    def test_list_hides_passwords(self, client, login):
        body = client.get("/api/v1/users", headers=login("ADMIN")).json()

        assert len(body) == 5
        assert all("password" not in u for u in body)
        assert [u["email"] for u in body if u["is_self"]] == ["admin@fulfillo.com"]

    def test_non_admin_forbidden(self, client, login):
        response = client.get("/api/v1/users", headers=login("OPERATIONS"))

        assert response.status_code == 403
        assert "OPERATIONS" in response.json()["detail"]

    def test_register_and_login(self, client, login):
        response = client.post(
            "/api/v1/users",
            json={
                "email": "nadia@fulfillo.com",
                "password": "pack-2",
                "name": "Nadia",
                "role": "PACKAGING",
                "department": "Warehouse B",
            },
            headers=login("ADMIN"),
        )
        assert response.status_code == 201
        assert response.json()["active"] is True

        session = client.post(
            "/api/v1/auth/login",
            json={"email": "nadia@fulfillo.com", "password": "pack-2", "locale": "en"},
        )
        assert session.json()["landing_page"] == "inventory"

    def test_duplicate_email(self, client, login):
        response = client.post(
            "/api/v1/users",
            json={"email": "ops@fulfillo.com", "password": "x", "name": "Dup", "role": "ADMIN"},
            headers=login("ADMIN"),
        )
        assert response.status_code == 409

    def test_patch_merges_fields(self, client, login, store):
        response = client.patch(
            "/api/v1/users/ops@fulfillo.com", json={"department": "Night Shift"}, headers=login("ADMIN")
        )

        assert response.json()["department"] == "Night Shift"
        assert store.get_user("ops@fulfillo.com").password == "ops-secure-991"

    def test_unknown_user(self, client, login):
        response = client.post("/api/v1/users/ghost@fulfillo.com/toggle-active", headers=login("ADMIN"))
        assert response.status_code == 404

    def test_admin_cannot_suspend_self(self, client, login, store):
        headers = login("ADMIN")

        response = client.post("/api/v1/users/admin@fulfillo.com/toggle-active", headers=headers)

        assert response.status_code == 409
        assert store.get_user("admin@fulfillo.com").active is True
        client.post("/api/v1/auth/logout", headers=headers)
        relogin = client.post(
            "/api/v1/auth/login",
            json={"email": "admin@fulfillo.com", "password": "admin-unique-7721", "locale": "en"},
        )
        assert relogin.status_code == 200

    def test_suspend_other_account(self, client, login):
        response = client.post("/api/v1/users/pack@fulfillo.com/toggle-active", headers=login("ADMIN"))

        assert response.status_code == 200
        assert response.json()["active"] is False
        assert response.json()["is_self"] is False
