"""
API Tests - Partner Inquiries and Onboarding
"""
import pytest
from fastapi.testclient import TestClient

JOIN_FORM = {
    "brand": "Acme",
    "email": "hi@acme.com",
    "phone": "0500000000",
    "products": "Widgets",
}


class TestJoin:
    """Tests for the public join form"""

    def test_join_without_session(self, client, store):
        response = client.post("/api/v1/inquiries/join", json=JOIN_FORM)

        assert response.status_code == 201
        body = response.json()
        assert body["inquiry_id"].startswith("INQ-")
        assert body["message"].startswith("Your request was received")
        new = [i for i in store.inquiries if i.brand == "Acme"]
        assert len(new) == 1
        assert new[0].status.value == "NEW"

    def test_join_arabic_message(self, client):
        response = client.post("/api/v1/inquiries/join", params={"locale": "ar"}, json=JOIN_FORM)
        assert response.json()["message"].startswith("تم استلام طلبك")

    def test_join_requires_products(self, client):
        form = dict(JOIN_FORM, products="")
        assert client.post("/api/v1/inquiries/join", json=form).status_code == 422


class TestReview:
    """Tests for the admin review queue"""

    def test_list_by_status(self, client, login):
        headers = login("ADMIN")
        client.post("/api/v1/inquiries/join", json=JOIN_FORM)

        everything = client.get("/api/v1/inquiries", headers=headers).json()
        rejected = client.get("/api/v1/inquiries", params={"status": "REJECTED"}, headers=headers).json()

        assert [i["brand"] for i in everything] == ["Acme", "EcoThreads"]
        assert rejected == []

    def test_review_is_admin_only(self, client, login):
        assert client.get("/api/v1/inquiries", headers=login("OPERATIONS")).status_code == 403

    def test_approve_prefills_brand_form(self, client, login):
        headers = login("ADMIN")

        approved = client.post("/api/v1/inquiries/INQ-001/approve", headers=headers).json()
        page = client.get("/api/v1/pages", headers=headers).json()
        form = client.get("/api/v1/brands/onboarding", headers=headers).json()

        assert approved["active_page"] == "brands"
        assert approved["onboarding"]["brand"] == "EcoThreads"
        assert page["page"] == "brands"
        assert page["data"]["onboarding"]["form"]["name"] == "EcoThreads"
        assert form["inquiry_id"] == "INQ-001"
        assert form["form"]["admin_email"] == "hello@ecothreads.co"

    def test_completing_form_clears_slot(self, client, login, store):
        headers = login("ADMIN")
        client.post("/api/v1/inquiries/INQ-001/approve", headers=headers)

        created = client.post(
            "/api/v1/brands",
            json={"name": "EcoThreads", "admin_email": "hello@ecothreads.co"},
            headers=headers,
        )
        form = client.get("/api/v1/brands/onboarding", headers=headers).json()

        assert created.status_code == 201
        assert form == {"inquiry_id": None, "form": None}
        assert store.get_inquiry("INQ-001").status.value == "NEW"

    def test_cancel_onboarding(self, client, login):
        headers = login("ADMIN")
        client.post("/api/v1/inquiries/INQ-001/approve", headers=headers)

        assert client.delete("/api/v1/brands/onboarding", headers=headers).status_code == 204
        assert client.get("/api/v1/brands/onboarding", headers=headers).json()["form"] is None

    def test_reject_then_approve_conflicts(self, client, login):
        headers = login("ADMIN")

        rejected = client.post("/api/v1/inquiries/INQ-001/reject", headers=headers)
        again = client.post("/api/v1/inquiries/INQ-001/approve", headers=headers)

        assert rejected.json()["status"] == "REJECTED"
        assert again.status_code == 409

    def test_unknown_inquiry(self, client, login):
        response = client.post("/api/v1/inquiries/INQ-404/approve", headers=login("ADMIN"))
        assert response.status_code == 404

    def test_rejected_inquiry_stays_terminal(self, client, login, store):
        headers = login("ADMIN")
        client.post("/api/v1/inquiries/INQ-001/reject", headers=headers)

        again = client.post("/api/v1/inquiries/INQ-001/reject", headers=headers)
        reopen = client.put("/api/v1/inquiries/INQ-001/status", json={"status": "NEW"}, headers=headers)

        assert again.status_code == 409
        assert reopen.status_code in (404, 405)
        assert store.get_inquiry("INQ-001").status.value == "REJECTED"


class TestMarkApproved:
    """Onboarding configured to close the originating inquiry"""

    @pytest.fixture
    def approving_client(self, mark_approved_app):
        return TestClient(mark_approved_app)

    def test_brand_creation_marks_inquiry_approved(self, approving_client, credentials, store):
        email, password = credentials["ADMIN"]
        token = approving_client.post(
            "/api/v1/auth/login", json={"email": email, "password": password, "locale": "en"}
        ).json()["token"]
        headers = {"Authorization": f"Bearer {token}"}

        approving_client.post("/api/v1/inquiries/INQ-001/approve", headers=headers)
        approving_client.post(
            "/api/v1/brands",
            json={"name": "EcoThreads", "admin_email": "hello@ecothreads.co"},
            headers=headers,
        )

        assert store.get_inquiry("INQ-001").status.value == "APPROVED"
