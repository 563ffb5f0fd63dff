"""
Customers API Endpoints

Customer records with aggregates computed from the caller's visible orders.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from fulfillo.domain.enums import Page
from fulfillo.domain.models import CustomerSummary, OrderView
from fulfillo.serving.api.dependencies import (
    Identity,
    get_page_router,
    get_store,
    require_page,
    scoped_for,
)
from fulfillo.services import views
from fulfillo.services.pages import PageRouter
from fulfillo.store import DashboardStore

router = APIRouter()


@router.get("", response_model=List[CustomerSummary])
async def list_customers(
    identity: Identity = Depends(require_page(Page.CUSTOMERS)),
    store: DashboardStore = Depends(get_store),
    pages: PageRouter = Depends(get_page_router),
) -> List[CustomerSummary]:
    """Customers with order count, total spent and last order date"""
    scoped = scoped_for(identity, pages)
    return views.customer_summaries(store.customers, scoped.orders)


@router.get("/{customer_id}/orders", response_model=List[OrderView])
async def customer_orders(
    customer_id: str,
    identity: Identity = Depends(require_page(Page.CUSTOMERS)),
    store: DashboardStore = Depends(get_store),
    pages: PageRouter = Depends(get_page_router),
) -> List[OrderView]:
    """Order history of one customer within the caller's scope"""
    customer = next((c for c in store.customers if c.id == customer_id), None)
    if customer is None:
        raise HTTPException(status_code=404, detail="Customer not found")
    scoped = scoped_for(identity, pages)
    return views.customer_orders(customer.name, store.order_views(scoped.orders))
