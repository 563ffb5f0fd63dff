"""
Inventory API Endpoints

Stock levels within the caller's scope, stock adjustments, inbound receipts
and the packaging queue.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from fulfillo.domain.enums import OrderStatus, Page
from fulfillo.domain.models import InventoryView, OrderView
from fulfillo.serving.api.dependencies import (
    Identity,
    get_page_router,
    get_store,
    require_capability,
    require_page,
    scoped_for,
)
from fulfillo.services import views
from fulfillo.services.pages import PageRouter
from fulfillo.store import DashboardStore

router = APIRouter()


class StockLevel(BaseModel):
    """Absolute stock level"""
    stock: int = Field(ge=0)


class StockReceipt(BaseModel):
    """Inbound quantity received at the warehouse"""
    quantity: int = Field(gt=0)


def _item_or_404(store: DashboardStore, item) -> InventoryView:
    if item is None:
        raise HTTPException(status_code=404, detail="Inventory item not found")
    return store.inventory_views([item])[0]


@router.get("", response_model=List[InventoryView])
async def list_inventory(
    identity: Identity = Depends(require_page(Page.INVENTORY)),
    store: DashboardStore = Depends(get_store),
    pages: PageRouter = Depends(get_page_router),
) -> List[InventoryView]:
    return store.inventory_views(scoped_for(identity, pages).inventory)


@router.get("/packaging-queue", response_model=List[OrderView])
async def packaging_queue(
    identity: Identity = Depends(require_page(Page.INVENTORY)),
    store: DashboardStore = Depends(get_store),
    pages: PageRouter = Depends(get_page_router),
) -> List[OrderView]:
    """Orders in NEW or PACKAGING within the caller's scope"""
    scoped = scoped_for(identity, pages)
    return views.packaging_queue(store.order_views(scoped.orders))


@router.post("/packaging-queue/{order_id}/pack", response_model=OrderView)
async def mark_packed(
    order_id: str,
    identity: Identity = Depends(require_capability("manage_inventory")),
    store: DashboardStore = Depends(get_store),
) -> OrderView:
    """Mark a queued order as PACKED"""
    order = store.update_order_status(order_id, OrderStatus.PACKED)
    if order is None:
        raise HTTPException(status_code=404, detail="Order not found")
    return store.order_views([order])[0]


@router.put("/{item_id}/stock", response_model=InventoryView)
async def set_stock(
    item_id: str,
    body: StockLevel,
    identity: Identity = Depends(require_capability("manage_inventory")),
    store: DashboardStore = Depends(get_store),
) -> InventoryView:
    return _item_or_404(store, store.adjust_stock(item_id, body.stock))


@router.post("/{item_id}/increment", response_model=InventoryView)
async def increment_stock(
    item_id: str,
    identity: Identity = Depends(require_capability("manage_inventory")),
    store: DashboardStore = Depends(get_store),
) -> InventoryView:
    return _item_or_404(store, store.increment_stock(item_id))


@router.post("/{item_id}/decrement", response_model=InventoryView)
async def decrement_stock(
    item_id: str,
    identity: Identity = Depends(require_capability("manage_inventory")),
    store: DashboardStore = Depends(get_store),
) -> InventoryView:
    """Decrease stock by one; stock already at zero stays at zero"""
    return _item_or_404(store, store.decrement_stock(item_id))


@router.post("/{item_id}/receive", response_model=InventoryView)
async def receive_stock(
    item_id: str,
    body: StockReceipt,
    identity: Identity = Depends(require_capability("manage_inventory")),
    store: DashboardStore = Depends(get_store),
) -> InventoryView:
    return _item_or_404(store, store.receive_stock(item_id, body.quantity))
