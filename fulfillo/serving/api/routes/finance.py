"""
Finance API Endpoints

Settlement summary and brand balance reconciliation.
"""

from decimal import Decimal

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from fulfillo.config import Settings
from fulfillo.domain.enums import Page
from fulfillo.serving.api.dependencies import (
    Identity,
    get_app_settings,
    get_page_router,
    get_store,
    require_capability,
    require_page,
    scoped_for,
)
from fulfillo.services.pages import PageRouter
from fulfillo.services.views import BrandFinance, FinanceSummary, finance_summary
from fulfillo.store import DashboardStore

router = APIRouter()


class Reconciliation(BaseModel):
    """Amount paid out to the brand"""
    amount: Decimal = Field(gt=0, decimal_places=2)


@router.get("/summary", response_model=FinanceSummary)
async def summary(
    identity: Identity = Depends(require_page(Page.REPORTS)),
    store: DashboardStore = Depends(get_store),
    pages: PageRouter = Depends(get_page_router),
    settings: Settings = Depends(get_app_settings),
) -> FinanceSummary:
    """
    Settled, projected and estimated-profit figures over the caller's scope.

    Brand owners only see their own brand's row.
    """
    scoped = scoped_for(identity, pages)
    return finance_summary(
        scoped.orders,
        pages.visible_brands(identity.user),
        settings.dashboard.profit_margin,
    )


@router.post("/brands/{brand_id}/reconcile", response_model=BrandFinance)
async def reconcile(
    brand_id: str,
    body: Reconciliation,
    identity: Identity = Depends(require_capability("reconcile")),
    store: DashboardStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> BrandFinance:
    """
    Add a payout to the brand's previous balance.

    Orders are not marked reconciled, so the current account balance is
    unchanged.
    """
    brand = store.reconcile_brand_balance(brand_id, body.amount)
    if brand is None:
        raise HTTPException(status_code=404, detail="Brand not found")
    return finance_summary(store.orders, [brand], settings.dashboard.profit_margin).brands[0]
