"""
Orders API Endpoints

Order listing within the caller's scope, manual order entry, status updates
(force-set, validated advance and bulk) and print manifests.

Order ids contain ``#`` and must be URL-encoded in paths (``%23ORD-7720``).
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from fulfillo.domain.enums import OrderStatus, Page
from fulfillo.domain.models import OrderFields, OrderView
from fulfillo.domain.transitions import next_statuses
from fulfillo.serving.api.dependencies import (
    Identity,
    get_page_router,
    get_store,
    require_capability,
    require_page,
    scoped_for,
)
from fulfillo.services import views
from fulfillo.services.exports import render_print_manifest
from fulfillo.services.pages import PageRouter
from fulfillo.store import DashboardStore

router = APIRouter()


# =============================================================================
# REQUEST/RESPONSE MODELS
# =============================================================================

class StatusUpdate(BaseModel):
    """Target order status"""
    status: OrderStatus


class BulkStatusUpdate(BaseModel):
    """Status applied to each listed order"""
    order_ids: List[str] = Field(min_length=1)
    status: OrderStatus


class BulkStatusResult(BaseModel):
    """Outcome of a bulk status update"""
    updated: List[str]
    missing: List[str]
    status: OrderStatus


class OrderSelection(BaseModel):
    """Orders selected for printing"""
    order_ids: List[str] = Field(min_length=1)


class OrderDetail(OrderView):
    """Order with the statuses a validated advance may move it to"""
    next_statuses: List[OrderStatus]


class OrderListResponse(BaseModel):
    """Filtered order list with per-status counts"""
    items: List[OrderView]
    total: int
    counts: dict


def _view(store: DashboardStore, order) -> OrderView:
    return store.order_views([order])[0]


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.get("", response_model=OrderListResponse)
async def list_orders(
    status: str = Query(views.ALL_STATUSES, description="ALL or an order status"),
    q: str = Query("", description="Search id, customer or source"),
    identity: Identity = Depends(require_page(Page.ORDERS)),
    store: DashboardStore = Depends(get_store),
    pages: PageRouter = Depends(get_page_router),
) -> OrderListResponse:
    """List orders visible to the caller, filtered by status and search text"""
    scoped = scoped_for(identity, pages)
    items = views.search_orders(store.order_views(scoped.orders), status, q)
    return OrderListResponse(
        items=items,
        total=len(items),
        counts=views.status_counts(scoped.orders),
    )


@router.post("", response_model=OrderView, status_code=201)
async def create_order(
    body: OrderFields,
    identity: Identity = Depends(require_capability("manage_orders")),
    store: DashboardStore = Depends(get_store),
) -> OrderView:
    """Manual order entry; the order starts as NEW with source Manual"""
    if store.get_brand(body.brand_id) is None:
        raise HTTPException(status_code=404, detail="Brand not found")
    return _view(store, store.add_order(body))


@router.post("/bulk-status", response_model=BulkStatusResult)
async def bulk_update_status(
    body: BulkStatusUpdate,
    identity: Identity = Depends(require_capability("manage_orders")),
    store: DashboardStore = Depends(get_store),
) -> BulkStatusResult:
    updated, missing = store.bulk_update_order_status(body.order_ids, body.status)
    return BulkStatusResult(
        updated=[o.id for o in updated],
        missing=missing,
        status=body.status,
    )


@router.post("/print", response_class=PlainTextResponse)
async def print_manifest(
    body: OrderSelection,
    identity: Identity = Depends(require_page(Page.ORDERS)),
    store: DashboardStore = Depends(get_store),
    pages: PageRouter = Depends(get_page_router),
) -> PlainTextResponse:
    """Printable labels for the selected orders within the caller's scope"""
    selected = set(body.order_ids)
    scoped = scoped_for(identity, pages)
    orders = [o for o in store.order_views(scoped.orders) if o.id in selected]
    if not orders:
        raise HTTPException(status_code=404, detail="No matching orders")
    return PlainTextResponse(render_print_manifest(orders))


@router.get("/{order_id}", response_model=OrderDetail)
async def get_order(
    order_id: str,
    identity: Identity = Depends(require_page(Page.ORDERS)),
    store: DashboardStore = Depends(get_store),
    pages: PageRouter = Depends(get_page_router),
) -> OrderDetail:
    """Single order, if it is within the caller's scope"""
    scoped = scoped_for(identity, pages)
    order = next((o for o in scoped.orders if o.id == order_id), None)
    if order is None:
        raise HTTPException(status_code=404, detail="Order not found")
    view = _view(store, order)
    return OrderDetail(
        **view.model_dump(),
        next_statuses=sorted(next_statuses(order.status), key=list(OrderStatus).index),
    )


@router.put("/{order_id}/status", response_model=OrderView)
async def update_status(
    order_id: str,
    body: StatusUpdate,
    identity: Identity = Depends(require_capability("manage_orders")),
    store: DashboardStore = Depends(get_store),
) -> OrderView:
    """Force-set an order's status without a transition check"""
    order = store.update_order_status(order_id, body.status)
    if order is None:
        raise HTTPException(status_code=404, detail="Order not found")
    return _view(store, order)


@router.post("/{order_id}/advance", response_model=OrderView)
async def advance_status(
    order_id: str,
    body: StatusUpdate,
    identity: Identity = Depends(require_capability("manage_orders")),
    store: DashboardStore = Depends(get_store),
) -> OrderView:
    """Move an order along its lifecycle; out-of-order moves answer 409"""
    order = store.advance_order_status(order_id, body.status)
    if order is None:
        raise HTTPException(status_code=404, detail="Order not found")
    return _view(store, order)
