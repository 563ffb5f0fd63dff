"""
API Tests - Finance
"""
from fulfillo.domain.enums import OrderStatus


class TestFinanceSummary:
    """Tests for GET /finance/summary"""

    def test_admin_summary(self, client, login, store):
        store.update_order_status("#ORD-7721", OrderStatus.DELIVERED)
        store.update_order_status("#ORD-7720", OrderStatus.SHIPPED)

        body = client.get("/api/v1/finance/summary", headers=login("ADMIN")).json()

        assert body["total_settled_revenue"] == "120.00"
        assert body["total_projected_revenue"] == "45.50"
        assert body["estimated_profit"] == "30.00"
        assert body["average_order_value"] == "120.00"
        assert [b["brand_id"] for b in body["brands"]] == ["b1", "b2"]

    def test_brand_owner_sees_own_row(self, client, login, store):
        store.update_order_status("#ORD-7720", OrderStatus.DELIVERED)

        body = client.get("/api/v1/finance/summary", headers=login("BRAND_OWNER")).json()

        assert [b["brand_id"] for b in body["brands"]] == ["b1"]
        assert body["total_settled_revenue"] == "0.00"

    def test_operations_cannot_view(self, client, login):
        assert client.get("/api/v1/finance/summary", headers=login("OPERATIONS")).status_code == 403


class TestReconcile:
    """Tests for brand balance reconciliation"""

    def test_reconcile_adds_to_previous_balance(self, client, login, store):
        store.update_order_status("#ORD-7720", OrderStatus.DELIVERED)

        response = client.post(
            "/api/v1/finance/brands/b2/reconcile", json={"amount": "100.00"}, headers=login("ADMIN")
        )

        body = response.json()
        assert body["previous_balance"] == "4300.50"
        assert body["current_account_balance"] == "45.50"

    def test_amount_must_be_positive(self, client, login):
        response = client.post(
            "/api/v1/finance/brands/b2/reconcile", json={"amount": "0"}, headers=login("ADMIN")
        )
        assert response.status_code == 422

    def test_unknown_brand(self, client, login):
        response = client.post(
            "/api/v1/finance/brands/b9/reconcile", json={"amount": "5.00"}, headers=login("ADMIN")
        )
        assert response.status_code == 404

    def test_brand_owner_cannot_reconcile(self, client, login):
        response = client.post(
            "/api/v1/finance/brands/b1/reconcile", json={"amount": "5.00"}, headers=login("BRAND_OWNER")
        )
        assert response.status_code == 403
