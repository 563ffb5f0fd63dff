"""
Brands API Endpoints

Brand listing, creation through the onboarding form, and brand
administration (rename, delete, profile, integration).
"""

from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel, Field

from fulfillo.domain.enums import Page
from fulfillo.domain.models import Brand, BrandFields
from fulfillo.serving.api.dependencies import (
    Identity,
    get_onboarding,
    get_store,
    require_capability,
    require_page,
)
from fulfillo.services import views
from fulfillo.services.onboarding import OnboardingPipeline
from fulfillo.store import DashboardStore

router = APIRouter()


class BrandRename(BaseModel):
    name: str = Field(min_length=1)


class IntegrationToggle(BaseModel):
    integrated: bool


class OnboardingForm(BaseModel):
    """Pending onboarding slot of the session"""
    inquiry_id: Optional[str] = None
    form: Optional[Dict[str, str]] = None


def _summary(store: DashboardStore, brand: Brand) -> views.BrandSummary:
    return views.brand_summaries([brand], store.orders)[0]


def _brand_or_404(brand: Optional[Brand]) -> Brand:
    if brand is None:
        raise HTTPException(status_code=404, detail="Brand not found")
    return brand


@router.get("", response_model=List[views.BrandSummary])
async def list_brands(
    identity: Identity = Depends(require_page(Page.BRANDS)),
    store: DashboardStore = Depends(get_store),
) -> List[views.BrandSummary]:
    return views.brand_summaries(store.brands, store.orders)


@router.post("", response_model=views.BrandSummary, status_code=201)
async def create_brand(
    body: BrandFields,
    identity: Identity = Depends(require_capability("create_brands")),
    store: DashboardStore = Depends(get_store),
    onboarding: OnboardingPipeline = Depends(get_onboarding),
) -> views.BrandSummary:
    """Create a brand; clears the session's pending onboarding slot"""
    brand = onboarding.complete(identity.session, body)
    return _summary(store, brand)


@router.get("/onboarding", response_model=OnboardingForm)
async def pending_onboarding(
    identity: Identity = Depends(require_capability("create_brands")),
    onboarding: OnboardingPipeline = Depends(get_onboarding),
) -> OnboardingForm:
    """Pre-filled brand form for an approved inquiry, if one is pending"""
    payload = identity.session.pending_onboarding
    return OnboardingForm(
        inquiry_id=payload.inquiry_id if payload else None,
        form=onboarding.prefill(identity.session),
    )


@router.delete("/onboarding", status_code=204, response_class=Response)
async def cancel_onboarding(
    identity: Identity = Depends(require_capability("create_brands")),
    onboarding: OnboardingPipeline = Depends(get_onboarding),
) -> Response:
    onboarding.cancel(identity.session)
    return Response(status_code=204)


@router.get("/{brand_id}/profile", response_model=Brand)
async def brand_profile(
    brand_id: str,
    identity: Identity = Depends(require_capability("administer_brands")),
    store: DashboardStore = Depends(get_store),
) -> Brand:
    """Full brand record including contact details and credentials"""
    return _brand_or_404(store.get_brand(brand_id))


@router.delete("/{brand_id}", status_code=204, response_class=Response)
async def delete_brand(
    brand_id: str,
    identity: Identity = Depends(require_capability("administer_brands")),
    store: DashboardStore = Depends(get_store),
) -> Response:
    """Remove the brand record; its orders and inventory are kept"""
    _brand_or_404(store.delete_brand(brand_id))
    return Response(status_code=204)


@router.put("/{brand_id}/name", response_model=views.BrandSummary)
async def rename_brand(
    brand_id: str,
    body: BrandRename,
    identity: Identity = Depends(require_capability("administer_brands")),
    store: DashboardStore = Depends(get_store),
) -> views.BrandSummary:
    brand = _brand_or_404(store.rename_brand(brand_id, body.name))
    return _summary(store, brand)


@router.put("/{brand_id}/integration", response_model=views.BrandSummary)
async def set_integration(
    brand_id: str,
    body: IntegrationToggle,
    identity: Identity = Depends(require_capability("manage_integrations")),
    store: DashboardStore = Depends(get_store),
) -> views.BrandSummary:
    brand = _brand_or_404(store.set_brand_integration(brand_id, body.integrated))
    return _summary(store, brand)
