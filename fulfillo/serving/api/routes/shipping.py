"""
Shipping API Endpoints

Outbound and returns queues, CSV manifest export and bulk status updates.
"""

from typing import List

from fastapi import APIRouter, Depends, Query, Response

from fulfillo.domain.enums import Page, ShippingView
from fulfillo.domain.models import OrderView
from fulfillo.serving.api.dependencies import (
    Identity,
    get_page_router,
    get_store,
    require_capability,
    require_page,
    scoped_for,
)
from fulfillo.serving.api.routes.orders import BulkStatusResult, BulkStatusUpdate
from fulfillo.services import views
from fulfillo.services.exports import manifest_csv, manifest_filename
from fulfillo.services.pages import PageRouter
from fulfillo.store import DashboardStore

router = APIRouter()


def _queue(identity, store, pages, view, q) -> List[OrderView]:
    scoped = scoped_for(identity, pages)
    return views.shipping_queue(store.order_views(scoped.orders), view, q)


@router.get("", response_model=List[OrderView])
async def shipping_queue(
    view: ShippingView = Query(ShippingView.OUTBOUND),
    q: str = Query(""),
    identity: Identity = Depends(require_page(Page.SHIPPING)),
    store: DashboardStore = Depends(get_store),
    pages: PageRouter = Depends(get_page_router),
) -> List[OrderView]:
    return _queue(identity, store, pages, view, q)


@router.get("/export")
async def export_manifest(
    view: ShippingView = Query(ShippingView.OUTBOUND),
    q: str = Query(""),
    identity: Identity = Depends(require_page(Page.SHIPPING)),
    store: DashboardStore = Depends(get_store),
    pages: PageRouter = Depends(get_page_router),
) -> Response:
    """Download the filtered queue as CSV"""
    orders = _queue(identity, store, pages, view, q)
    filename = manifest_filename(view, store.today())
    return Response(
        content=manifest_csv(orders),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/bulk-status", response_model=BulkStatusResult)
async def bulk_update_status(
    body: BulkStatusUpdate,
    identity: Identity = Depends(require_capability("manage_shipping")),
    store: DashboardStore = Depends(get_store),
) -> BulkStatusResult:
    updated, missing = store.bulk_update_order_status(body.order_ids, body.status)
    return BulkStatusResult(
        updated=[o.id for o in updated],
        missing=missing,
        status=body.status,
    )
