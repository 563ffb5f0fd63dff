"""
Partner Onboarding Pipeline

    join request -> NEW inquiry
    admin review -> reject (REJECTED, terminal)
                 -> approve (inquiry data parked in the session's pending slot,
                             session moved to the brands page)
    brands page  -> brand form pre-filled from the slot; submitting creates
                    the brand and clears the slot

Approving does not change the inquiry's status. When
``mark_inquiry_approved`` is enabled, completing the brand form sets the
originating inquiry to APPROVED.
"""

from typing import Dict, Optional

import structlog
from pydantic import BaseModel

from fulfillo.domain.enums import InquiryStatus, Page
from fulfillo.domain.exceptions import InquiryClosedError
from fulfillo.domain.models import Brand, BrandFields, InquiryFields, PartnerInquiry
from fulfillo.services.auth import Session
from fulfillo.store import DashboardStore

logger = structlog.get_logger(__name__)


class OnboardingPayload(BaseModel):
    """Inquiry data handed from the review screen to the brand form"""
    inquiry_id: str
    brand: str
    email: str
    phone: str = ""


class OnboardingPipeline:
    """Inquiry review and brand creation"""

    def __init__(self, store: DashboardStore, mark_inquiry_approved: bool = False):
        self.store = store
        self.mark_inquiry_approved = mark_inquiry_approved

    def submit(self, fields: InquiryFields) -> PartnerInquiry:
        """Public join request"""
        inquiry = self.store.submit_inquiry(fields)
        logger.info("Partner inquiry submitted", inquiry_id=inquiry.id)
        return inquiry

    def _open_inquiry(self, inquiry_id: str) -> Optional[PartnerInquiry]:
        inquiry = self.store.get_inquiry(inquiry_id)
        if inquiry is not None and inquiry.status != InquiryStatus.NEW:
            raise InquiryClosedError(inquiry.id, inquiry.status.value)
        return inquiry

    def approve(self, session: Session, inquiry_id: str) -> Optional[OnboardingPayload]:
        """Park the inquiry in the session's pending slot and go to brands"""
        inquiry = self._open_inquiry(inquiry_id)
        if inquiry is None:
            return None

        payload = OnboardingPayload(
            inquiry_id=inquiry.id,
            brand=inquiry.brand,
            email=inquiry.email,
            phone=inquiry.phone,
        )
        session.pending_onboarding = payload
        session.active_page = Page.BRANDS
        logger.info("Inquiry approved for onboarding", inquiry_id=inquiry.id)
        return payload

    def reject(self, inquiry_id: str) -> Optional[PartnerInquiry]:
        inquiry = self._open_inquiry(inquiry_id)
        if inquiry is None:
            return None
        return self.store.update_inquiry_status(inquiry.id, InquiryStatus.REJECTED)

    def prefill(self, session: Session) -> Optional[Dict[str, str]]:
        """Brand form defaults for the pending inquiry, if any"""
        payload = session.pending_onboarding
        if payload is None:
            return None
        return {
            "name": payload.brand,
            "admin_email": payload.email,
            "admin_phone": payload.phone,
        }

    def complete(self, session: Session, fields: BrandFields) -> Brand:
        """Create the brand and clear the pending slot"""
        payload = session.pending_onboarding
        brand = self.store.add_brand(fields)
        session.pending_onboarding = None

        if payload is not None and self.mark_inquiry_approved:
            self.store.update_inquiry_status(payload.inquiry_id, InquiryStatus.APPROVED)

        logger.info(
            "Brand onboarded",
            brand_id=brand.id,
            inquiry_id=payload.inquiry_id if payload else None,
        )
        return brand

    def cancel(self, session: Session) -> None:
        session.pending_onboarding = None
