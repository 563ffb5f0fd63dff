"""
Partner Inquiry Endpoints

The public join form and the admin review queue.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from fulfillo.domain.enums import InquiryStatus, Locale, Page
from fulfillo.domain.models import InquiryFields, PartnerInquiry
from fulfillo.i18n import translate
from fulfillo.serving.api.dependencies import (
    Identity,
    get_onboarding,
    get_store,
    require_capability,
)
from fulfillo.services.onboarding import OnboardingPayload, OnboardingPipeline
from fulfillo.store import DashboardStore

router = APIRouter()


class JoinResponse(BaseModel):
    """Acknowledgement shown to the applicant"""
    inquiry_id: str
    message: str


class ApprovalResponse(BaseModel):
    """Pending onboarding payload and the page the session moved to"""
    onboarding: OnboardingPayload
    active_page: Page


def _found(inquiry: Optional[PartnerInquiry]) -> PartnerInquiry:
    if inquiry is None:
        raise HTTPException(status_code=404, detail="Inquiry not found")
    return inquiry


@router.post("/join", response_model=JoinResponse, status_code=201)
async def join(
    body: InquiryFields,
    locale: Locale = Query(Locale.EN),
    onboarding: OnboardingPipeline = Depends(get_onboarding),
) -> JoinResponse:
    """Public partner application; no session required"""
    inquiry = onboarding.submit(body)
    return JoinResponse(inquiry_id=inquiry.id, message=translate(locale, "joinThanks"))


@router.get("", response_model=List[PartnerInquiry])
async def list_inquiries(
    status: Optional[InquiryStatus] = Query(None),
    identity: Identity = Depends(require_capability("review_inquiries")),
    store: DashboardStore = Depends(get_store),
) -> List[PartnerInquiry]:
    return [i for i in store.inquiries if status is None or i.status == status]


@router.post("/{inquiry_id}/approve", response_model=ApprovalResponse)
async def approve(
    inquiry_id: str,
    identity: Identity = Depends(require_capability("review_inquiries")),
    onboarding: OnboardingPipeline = Depends(get_onboarding),
) -> ApprovalResponse:
    """
    Start onboarding from a NEW inquiry.

    The inquiry keeps its status; the session gets a pre-filled brand form
    and moves to the brands page.
    """
    payload = onboarding.approve(identity.session, inquiry_id)
    if payload is None:
        raise HTTPException(status_code=404, detail="Inquiry not found")
    return ApprovalResponse(onboarding=payload, active_page=identity.session.active_page)


@router.post("/{inquiry_id}/reject", response_model=PartnerInquiry)
async def reject(
    inquiry_id: str,
    identity: Identity = Depends(require_capability("review_inquiries")),
    onboarding: OnboardingPipeline = Depends(get_onboarding),
) -> PartnerInquiry:
    return _found(onboarding.reject(inquiry_id))
