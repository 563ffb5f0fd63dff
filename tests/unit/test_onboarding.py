"""
Unit Tests - Partner Onboarding
"""
import pytest

from fulfillo.domain.enums import InquiryStatus, Page
from fulfillo.domain.exceptions import InquiryClosedError
from fulfillo.domain.models import BrandFields, InquiryFields
from fulfillo.services.onboarding import OnboardingPipeline


def _brand_form(**overrides) -> BrandFields:
    values = {"name": "EcoThreads", "admin_email": "hello@ecothreads.co"}
    values.update(overrides)
    return BrandFields(**values)


class TestReview:
    """Tests for approving and rejecting inquiries"""

    def test_submit_creates_new_inquiry(self, onboarding, store):
        inquiry = onboarding.submit(InquiryFields(
            brand="Acme", email="hi@acme.com", phone="0500000000", products="Widgets",
        ))

        assert inquiry.status == InquiryStatus.NEW
        assert [i.brand for i in store.inquiries if i.status == InquiryStatus.NEW] == [
            "Acme", "EcoThreads",
        ]

    def test_approve_parks_payload_and_moves_to_brands(self, onboarding, session_for, store):
        session, _ = session_for("admin@fulfillo.com")

        payload = onboarding.approve(session, "INQ-001")

        assert payload.brand == "EcoThreads"
        assert payload.email == "hello@ecothreads.co"
        assert session.pending_onboarding == payload
        assert session.active_page == Page.BRANDS
        assert store.get_inquiry("INQ-001").status == InquiryStatus.NEW

    def test_approve_unknown_inquiry(self, onboarding, session_for):
        session, _ = session_for("admin@fulfillo.com")

        assert onboarding.approve(session, "INQ-404") is None
        assert session.pending_onboarding is None

    def test_reject_is_terminal(self, onboarding, session_for):
        session, _ = session_for("admin@fulfillo.com")

        rejected = onboarding.reject("INQ-001")

        assert rejected.status == InquiryStatus.REJECTED
        with pytest.raises(InquiryClosedError):
            onboarding.approve(session, "INQ-001")
        with pytest.raises(InquiryClosedError):
            onboarding.reject("INQ-001")


class TestBrandForm:
    """Tests for the pre-filled brand form"""

    def test_prefill_from_pending_inquiry(self, onboarding, session_for):
        session, _ = session_for("admin@fulfillo.com")
        assert onboarding.prefill(session) is None

        onboarding.approve(session, "INQ-001")

        assert onboarding.prefill(session) == {
            "name": "EcoThreads",
            "admin_email": "hello@ecothreads.co",
            "admin_phone": "+966 54 333 2222",
        }

    def test_brands_page_shows_prefill(self, onboarding, page_router, session_for):
        session, user = session_for("admin@fulfillo.com")
        onboarding.approve(session, "INQ-001")

        view = page_router.render(session, user)

        assert view.page == Page.BRANDS
        assert view.data["onboarding"]["inquiry_id"] == "INQ-001"
        assert view.data["onboarding"]["form"]["name"] == "EcoThreads"

    def test_complete_creates_brand_and_clears_slot(self, onboarding, session_for, store):
        session, _ = session_for("admin@fulfillo.com")
        onboarding.approve(session, "INQ-001")

        brand = onboarding.complete(session, _brand_form())

        assert store.get_brand(brand.id).name == "EcoThreads"
        assert session.pending_onboarding is None
        assert store.get_inquiry("INQ-001").status == InquiryStatus.NEW

    def test_complete_can_mark_inquiry_approved(self, store, session_for):
        pipeline = OnboardingPipeline(store, mark_inquiry_approved=True)
        session, _ = session_for("admin@fulfillo.com")
        pipeline.approve(session, "INQ-001")

        pipeline.complete(session, _brand_form())

        assert store.get_inquiry("INQ-001").status == InquiryStatus.APPROVED

    def test_complete_without_pending_inquiry(self, store, session_for):
        pipeline = OnboardingPipeline(store, mark_inquiry_approved=True)
        session, _ = session_for("ops@fulfillo.com")

        brand = pipeline.complete(session, _brand_form(name="Walk-in"))

        assert brand.name == "Walk-in"
        assert store.get_inquiry("INQ-001").status == InquiryStatus.NEW

    def test_cancel_clears_slot(self, onboarding, session_for):
        session, _ = session_for("admin@fulfillo.com")
        onboarding.approve(session, "INQ-001")

        onboarding.cancel(session)

        assert session.pending_onboarding is None
