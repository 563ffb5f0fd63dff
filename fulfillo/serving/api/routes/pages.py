"""
Page Endpoints

Renders the page a session navigates to. Unknown page keys and pages the role
cannot see fall back to the dashboard rather than failing.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from fulfillo.serving.api.dependencies import Identity, get_identity, get_page_router
from fulfillo.services.pages import PageRouter, PageView

router = APIRouter()


class BrandFilterRequest(BaseModel):
    """Brand name to filter by; empty or omitted clears the filter"""
    brand: Optional[str] = None


class BrandFilterResponse(BaseModel):
    brand_filter: Optional[str] = None


@router.get("", response_model=PageView)
async def current_page(
    identity: Identity = Depends(get_identity),
    pages: PageRouter = Depends(get_page_router),
) -> PageView:
    """Re-render the session's active page"""
    return pages.render(identity.session, identity.user)


@router.get("/{page_key}", response_model=PageView)
async def render_page(
    page_key: str,
    status: Optional[str] = Query(None, description="Orders page status filter"),
    q: Optional[str] = Query(None, description="Search text"),
    view: Optional[str] = Query(None, description="Shipping sub-view: OUTBOUND or RETURNS"),
    customer: Optional[str] = Query(None, description="Customer name for order history"),
    identity: Identity = Depends(get_identity),
    pages: PageRouter = Depends(get_page_router),
) -> PageView:
    params = {
        key: value
        for key, value in {"status": status, "q": q, "view": view, "customer": customer}.items()
        if value is not None
    }
    return pages.render(identity.session, identity.user, page_key, params)


@router.put("/brand-filter", response_model=BrandFilterResponse)
async def set_brand_filter(
    body: BrandFilterRequest,
    identity: Identity = Depends(get_identity),
    pages: PageRouter = Depends(get_page_router),
) -> BrandFilterResponse:
    """
    Set the ephemeral brand filter by name.

    Brand owners stay scoped to their own brand whatever is sent.
    """
    try:
        brand_id = pages.set_brand_filter(identity.session, identity.user, body.brand)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return BrandFilterResponse(brand_filter=brand_id)
