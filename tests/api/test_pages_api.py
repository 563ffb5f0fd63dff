"""
API Tests - Page Rendering and Brand Filter
"""


class TestPages:
    """Tests for GET /pages"""

    def test_current_page_is_landing_page(self, client, login):
        body = client.get("/api/v1/pages", headers=login("PACKAGING")).json()

        assert body["page"] == "inventory"
        assert body["navigation"] == ["orders", "inventory"]

    def test_unauthorized_page_falls_back(self, client, login):
        response = client.get("/api/v1/pages/settings", headers=login("OPERATIONS"))

        assert response.status_code == 200
        assert response.json()["page"] == "dashboard"
        assert response.json()["requested"] == "settings"

    def test_unknown_page_falls_back(self, client, login):
        body = client.get("/api/v1/pages/warehouse-map", headers=login("ADMIN")).json()
        assert body["page"] == "dashboard"

    def test_navigation_persists(self, client, login):
        headers = login("ADMIN")
        client.get("/api/v1/pages/reports", headers=headers)

        assert client.get("/api/v1/pages", headers=headers).json()["page"] == "reports"
        assert client.get("/api/v1/auth/me", headers=headers).json()["active_page"] == "reports"

    def test_orders_page_params(self, client, login):
        body = client.get(
            "/api/v1/pages/orders", params={"status": "PACKAGING"}, headers=login("ADMIN")
        ).json()
        assert [o["id"] for o in body["data"]["orders"]] == ["#ORD-7720"]

    def test_arabic_page(self, client, login):
        body = client.get("/api/v1/pages/dashboard", headers=login("ADMIN", "ar")).json()

        assert body["direction"] == "rtl"
        assert body["title"] == "لوحة التحكم"
        assert body["data"]["stats"]["total_revenue"] == "165.50"

    def test_requires_session(self, client):
        assert client.get("/api/v1/pages/dashboard").status_code == 401


class TestBrandFilterApi:
    """Tests for PUT /pages/brand-filter"""

    def test_filter_scopes_other_endpoints(self, client, login):
        headers = login("OPERATIONS")

        response = client.put("/api/v1/pages/brand-filter", json={"brand": "TechGear"}, headers=headers)
        orders = client.get("/api/v1/orders", headers=headers).json()

        assert response.json() == {"brand_filter": "b2"}
        assert [o["id"] for o in orders["items"]] == ["#ORD-7720"]

    def test_clear_filter(self, client, login):
        headers = login("ADMIN")
        client.put("/api/v1/pages/brand-filter", json={"brand": "TechGear"}, headers=headers)

        response = client.put("/api/v1/pages/brand-filter", json={}, headers=headers)

        assert response.json() == {"brand_filter": None}
        assert client.get("/api/v1/orders", headers=headers).json()["total"] == 2

    def test_filter_is_per_session(self, client, login):
        first = login("ADMIN")
        second = login("ADMIN")
        client.put("/api/v1/pages/brand-filter", json={"brand": "GlowSkin"}, headers=first)

        assert client.get("/api/v1/orders", headers=second).json()["total"] == 2

    def test_unknown_brand(self, client, login):
        response = client.put("/api/v1/pages/brand-filter", json={"brand": "Nope"}, headers=login("ADMIN"))
        assert response.status_code == 404

    def test_brand_owner_keeps_scope(self, client, login):
        headers = login("BRAND_OWNER")

        response = client.put("/api/v1/pages/brand-filter", json={"brand": "TechGear"}, headers=headers)

        assert response.json() == {"brand_filter": "b1"}
        assert client.get("/api/v1/orders", headers=headers).json()["total"] == 1
