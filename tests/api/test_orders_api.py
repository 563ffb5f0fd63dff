"""
API Tests - Orders
"""

ORD_7720 = "/api/v1/orders/%23ORD-7720"
ORD_7721 = "/api/v1/orders/%23ORD-7721"


class TestListOrders:
    """Tests for GET /orders"""

    def test_admin_sees_all(self, client, login):
        body = client.get("/api/v1/orders", headers=login("ADMIN")).json()

        assert body["total"] == 2
        assert body["counts"]["NEW"] == 1
        assert body["counts"]["PACKAGING"] == 1
        assert body["items"][0]["brand"] == "GlowSkin"

    def test_brand_owner_scope(self, client, login):
        body = client.get("/api/v1/orders", headers=login("BRAND_OWNER")).json()
        assert [o["id"] for o in body["items"]] == ["#ORD-7721"]
        assert body["counts"]["ALL"] == 1

    def test_filter_and_search(self, client, login):
        headers = login("SUPPORT")

        by_status = client.get("/api/v1/orders", params={"status": "NEW"}, headers=headers).json()
        by_text = client.get("/api/v1/orders", params={"q": "connor"}, headers=headers).json()

        assert [o["id"] for o in by_status["items"]] == ["#ORD-7721"]
        assert [o["id"] for o in by_text["items"]] == ["#ORD-7720"]

    def test_totals_are_strings(self, client, login):
        body = client.get("/api/v1/orders", headers=login("ADMIN")).json()
        assert body["items"][0]["total"] == "120.00"


class TestOrderDetail:
    def test_get_order_with_next_statuses(self, client, login):
        body = client.get(ORD_7721, headers=login("ADMIN")).json()

        assert body["id"] == "#ORD-7721"
        assert body["next_statuses"] == ["PACKAGING"]

    def test_out_of_scope_order_is_404(self, client, login):
        assert client.get(ORD_7720, headers=login("BRAND_OWNER")).status_code == 404

    def test_unknown_order(self, client, login):
        assert client.get("/api/v1/orders/%23ORD-0000", headers=login("ADMIN")).status_code == 404


class TestStatusUpdates:
    """Tests for force-set, advance and bulk updates"""

    def test_force_set_touches_only_target(self, client, login, store):
        before = store.get_order("#ORD-7721")

        response = client.put(f"{ORD_7720}/status", json={"status": "PACKED"}, headers=login("OPERATIONS"))

        assert response.status_code == 200
        assert response.json()["status"] == "PACKED"
        assert store.get_order("#ORD-7721") == before

    def test_invalid_status_value(self, client, login):
        response = client.put(f"{ORD_7720}/status", json={"status": "LOST"}, headers=login("ADMIN"))
        assert response.status_code == 422

    def test_force_set_unknown_order(self, client, login):
        response = client.put(
            "/api/v1/orders/%23ORD-0000/status", json={"status": "PACKED"}, headers=login("ADMIN")
        )
        assert response.status_code == 404

    def test_advance(self, client, login):
        response = client.post(f"{ORD_7720}/advance", json={"status": "PACKED"}, headers=login("PACKAGING"))
        assert response.json()["status"] == "PACKED"

    def test_advance_conflict(self, client, login, store):
        response = client.post(f"{ORD_7721}/advance", json={"status": "DELIVERED"}, headers=login("ADMIN"))

        assert response.status_code == 409
        body = response.json()
        assert body["order_id"] == "#ORD-7721"
        assert body["current"] == "NEW"
        assert body["requested"] == "DELIVERED"
        assert store.get_order("#ORD-7721").status.value == "NEW"

    def test_brand_owner_cannot_update(self, client, login):
        response = client.put(f"{ORD_7721}/status", json={"status": "PACKED"}, headers=login("BRAND_OWNER"))
        assert response.status_code == 403

    def test_bulk_status(self, client, login):
        response = client.post(
            "/api/v1/orders/bulk-status",
            json={"order_ids": ["#ORD-7720", "#ORD-7721", "#ORD-1111"], "status": "SHIPPED"},
            headers=login("OPERATIONS"),
        )

        body = response.json()
        assert body["updated"] == ["#ORD-7720", "#ORD-7721"]
        assert body["missing"] == ["#ORD-1111"]


class TestCreateOrder:
    def test_manual_order(self, client, login):
        response = client.post(
            "/api/v1/orders",
            json={"brand_id": "b2", "customer": "Omar", "total": "75.25", "carrier": "Aramex"},
            headers=login("SUPPORT"),
        )

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "NEW"
        assert body["source"] == "Manual"
        assert body["brand"] == "TechGear"
        assert body["created"] == "2024-03-14"

    def test_unknown_brand(self, client, login):
        response = client.post(
            "/api/v1/orders",
            json={"brand_id": "b99", "customer": "Omar", "total": "1.00"},
            headers=login("ADMIN"),
        )
        assert response.status_code == 404


class TestPrintManifest:
    def test_print_selected(self, client, login):
        response = client.post(
            "/api/v1/orders/print", json={"order_ids": ["#ORD-7720"]}, headers=login("PACKAGING")
        )

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert "Fulfillo ID: #ORD-7720" in response.text
        assert "#ORD-7721" not in response.text

    def test_brand_owner_prints_only_own_orders(self, client, login):
        response = client.post(
            "/api/v1/orders/print", json={"order_ids": ["#ORD-7720"]}, headers=login("BRAND_OWNER")
        )
        assert response.status_code == 404
