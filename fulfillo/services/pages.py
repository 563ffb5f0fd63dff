"""
Page Router

Maps a session's requested page key to a page the role may see, and builds
that page's payload from the role-scoped collections. Also carries the
per-role capability set that the API enforces on mutations.
"""

from dataclasses import asdict, dataclass, fields
from typing import Any, Callable, Dict, FrozenSet, List, Mapping, Optional

import structlog
from pydantic import BaseModel

from fulfillo.config.settings import DashboardSettings
from fulfillo.domain.enums import InquiryStatus, Locale, Page, ShippingView, UserRole
from fulfillo.domain.models import UserAccount
from fulfillo.i18n import text_direction, translate
from fulfillo.services import views
from fulfillo.services.auth import Session
from fulfillo.services.onboarding import OnboardingPipeline
from fulfillo.services.scoping import ScopedData, effective_brand_filter, scope_collections
from fulfillo.store import DashboardStore

logger = structlog.get_logger(__name__)

_ALL_ROLES = frozenset(UserRole)
_STAFF = _ALL_ROLES - {UserRole.BRAND_OWNER}


# Navigation order is the sidebar order
NAVIGATION: Dict[Page, FrozenSet[UserRole]] = {
    Page.DASHBOARD: frozenset({UserRole.ADMIN, UserRole.OPERATIONS, UserRole.BRAND_OWNER}),
    Page.BRANDS: frozenset({UserRole.ADMIN, UserRole.OPERATIONS}),
    Page.ORDERS: _ALL_ROLES,
    Page.INVENTORY: frozenset({
        UserRole.ADMIN, UserRole.OPERATIONS, UserRole.PACKAGING, UserRole.BRAND_OWNER,
    }),
    Page.CUSTOMERS: frozenset({UserRole.ADMIN, UserRole.SUPPORT, UserRole.BRAND_OWNER}),
    Page.SHIPPING: frozenset({UserRole.ADMIN, UserRole.OPERATIONS, UserRole.BRAND_OWNER}),
    Page.REPORTS: frozenset({UserRole.ADMIN, UserRole.BRAND_OWNER}),
    Page.SETTINGS: frozenset({UserRole.ADMIN}),
}

CAPABILITY_ROLES: Dict[str, FrozenSet[UserRole]] = {
    "manage_orders": _STAFF,
    "manage_inventory": frozenset({UserRole.ADMIN, UserRole.OPERATIONS, UserRole.PACKAGING}),
    "manage_shipping": frozenset({UserRole.ADMIN, UserRole.OPERATIONS}),
    "reconcile": frozenset({UserRole.ADMIN}),
    "create_brands": frozenset({UserRole.ADMIN, UserRole.OPERATIONS}),
    "administer_brands": frozenset({UserRole.ADMIN}),
    "manage_users": frozenset({UserRole.ADMIN}),
    "review_inquiries": frozenset({UserRole.ADMIN}),
    "manage_integrations": frozenset({UserRole.ADMIN}),
    "filter_brands": _STAFF,
}


@dataclass(frozen=True)
class Capabilities:
    """What a role may change; brand owners get an all-false, read-only set"""
    read_only: bool
    manage_orders: bool
    manage_inventory: bool
    manage_shipping: bool
    reconcile: bool
    create_brands: bool
    administer_brands: bool
    manage_users: bool
    review_inquiries: bool
    manage_integrations: bool
    filter_brands: bool

    @classmethod
    def for_role(cls, role: UserRole) -> "Capabilities":
        granted = {name: role in roles for name, roles in CAPABILITY_ROLES.items()}
        return cls(read_only=role == UserRole.BRAND_OWNER, **granted)

    def allows(self, capability: str) -> bool:
        if capability not in {f.name for f in fields(self)}:
            raise KeyError(f"Unknown capability: {capability}")
        return bool(getattr(self, capability))

    def as_dict(self) -> Dict[str, bool]:
        return asdict(self)


def can_view(page: Page, role: UserRole) -> bool:
    return role in NAVIGATION[page]


def navigation_for(role: UserRole) -> List[Page]:
    """Pages offered in the sidebar for a role"""
    return [page for page, roles in NAVIGATION.items() if role in roles]


def resolve_page(page_key: Optional[str], role: UserRole) -> Page:
    """Requested page if known and visible to the role, else the dashboard"""
    try:
        page = Page(page_key)
    except ValueError:
        return Page.DASHBOARD
    return page if can_view(page, role) else Page.DASHBOARD


class PageView(BaseModel):
    """Rendered page payload"""
    page: Page
    requested: Optional[str] = None
    title: str
    locale: Locale
    direction: str
    navigation: List[Page]
    capabilities: Dict[str, bool]
    brand_filter: Optional[str] = None
    data: Dict[str, Any]


PageBuilder = Callable[[Session, UserAccount, ScopedData, Mapping[str, str]], Dict[str, Any]]


class PageRouter:
    """
    Renders pages for a session.

    Rendering a page also makes it the session's active page.
    """

    def __init__(
        self,
        store: DashboardStore,
        settings: DashboardSettings,
        onboarding: OnboardingPipeline,
    ):
        self.store = store
        self.settings = settings
        self.onboarding = onboarding
        self._builders: Dict[Page, PageBuilder] = {
            Page.DASHBOARD: self._dashboard,
            Page.ORDERS: self._orders,
            Page.INVENTORY: self._inventory,
            Page.CUSTOMERS: self._customers,
            Page.SHIPPING: self._shipping,
            Page.REPORTS: self._reports,
            Page.BRANDS: self._brands,
            Page.SETTINGS: self._settings,
        }

    def scoped(self, session: Session, user: UserAccount) -> ScopedData:
        return scope_collections(
            self.store.orders, self.store.inventory, user, session.brand_filter
        )

    def visible_brands(self, user: UserAccount):
        """Brands a user may see figures for"""
        if user.role == UserRole.BRAND_OWNER:
            return tuple(b for b in self.store.brands if b.id == user.brand_id)
        return self.store.brands

    def render(
        self,
        session: Session,
        user: UserAccount,
        page_key: Optional[str] = None,
        params: Optional[Mapping[str, str]] = None,
    ) -> PageView:
        requested = page_key if page_key is not None else session.active_page.value
        page = resolve_page(requested, user.role)
        if page.value != requested:
            logger.info("Page fell back to dashboard", requested=requested, role=user.role.value)

        session.active_page = page
        scoped = self.scoped(session, user)
        data = self._builders[page](session, user, scoped, params or {})

        return PageView(
            page=page,
            requested=requested,
            title=translate(session.locale, page.value),
            locale=session.locale,
            direction=text_direction(session.locale),
            navigation=navigation_for(user.role),
            capabilities=Capabilities.for_role(user.role).as_dict(),
            brand_filter=effective_brand_filter(user, session.brand_filter),
            data=data,
        )

    def set_brand_filter(self, session: Session, user: UserAccount, brand_name: Optional[str]) -> Optional[str]:
        """
        Set or clear the ephemeral brand filter by brand name.

        Returns the effective brand id. Brand owners keep their own scope
        whatever is requested.

        Raises:
            LookupError: If no brand has that name
        """
        if user.role == UserRole.BRAND_OWNER:
            return user.brand_id

        if not brand_name:
            session.brand_filter = None
            return None

        brand = self.store.find_brand_by_name(brand_name)
        if brand is None:
            raise LookupError(f"Unknown brand: {brand_name}")
        session.brand_filter = brand.id
        return brand.id

    # =========================================================================
    # Page builders
    # =========================================================================

    def _dashboard(self, session, user, scoped, params):
        owner_view = user.role == UserRole.BRAND_OWNER
        stats = views.dashboard_stats(
            scoped.orders,
            scoped.inventory,
            self.visible_brands(user),
            self.settings.low_stock_threshold,
            owner_view=owner_view,
        )
        recent = self.store.order_views(scoped.orders[:5])
        return {"stats": stats.model_dump(mode="json"), "recent_orders": _dump(recent)}

    def _orders(self, session, user, scoped, params):
        status = params.get("status", views.ALL_STATUSES)
        query = params.get("q", "")
        matched = views.search_orders(self.store.order_views(scoped.orders), status, query)
        return {
            "status": status,
            "query": query,
            "counts": views.status_counts(scoped.orders),
            "orders": _dump(matched),
            "brands": [{"id": b.id, "name": b.name} for b in self.visible_brands(user)],
        }

    def _inventory(self, session, user, scoped, params):
        items = self.store.inventory_views(scoped.inventory)
        queue = views.packaging_queue(self.store.order_views(scoped.orders))
        threshold = self.settings.low_stock_threshold
        return {
            "items": _dump(items),
            "low_stock_threshold": threshold,
            "low_stock": [i.id for i in items if i.stock < threshold],
            "packaging_queue": _dump(queue),
        }

    def _customers(self, session, user, scoped, params):
        summaries = views.customer_summaries(self.store.customers, scoped.orders)
        data: Dict[str, Any] = {"customers": _dump(summaries)}
        selected = params.get("customer")
        if selected:
            history = views.customer_orders(selected, self.store.order_views(scoped.orders))
            data["selected"] = selected
            data["history"] = _dump(history)
        return data

    def _shipping(self, session, user, scoped, params):
        try:
            view = ShippingView(params.get("view", ShippingView.OUTBOUND.value).upper())
        except ValueError:
            view = ShippingView.OUTBOUND
        query = params.get("q", "")
        queue = views.shipping_queue(self.store.order_views(scoped.orders), view, query)
        return {
            "view": view.value,
            "query": query,
            "orders": _dump(queue),
            "returns_count": views.returns_count(scoped.orders),
        }

    def _reports(self, session, user, scoped, params):
        summary = views.finance_summary(
            scoped.orders, self.visible_brands(user), self.settings.profit_margin
        )
        return {"finance": summary.model_dump(mode="json")}

    def _brands(self, session, user, scoped, params):
        data: Dict[str, Any] = {
            "brands": _dump(views.brand_summaries(self.store.brands, self.store.orders)),
            "onboarding": None,
        }
        prefill = self.onboarding.prefill(session)
        if prefill is not None:
            data["onboarding"] = {
                "inquiry_id": session.pending_onboarding.inquiry_id,
                "form": prefill,
            }
        return data

    def _settings(self, session, user, scoped, params):
        inquiries = self.store.inquiries
        return {
            "profile": {
                "email": user.email,
                "name": user.name,
                "role": user.role.value,
                "department": user.department,
            },
            "integrations": [
                {"id": b.id, "name": b.name, "integrated": b.integrated}
                for b in self.store.brands
            ],
            "inquiries": {
                "new": _dump([i for i in inquiries if i.status == InquiryStatus.NEW]),
                "processed": _dump([i for i in inquiries if i.status != InquiryStatus.NEW]),
            },
            "users": _dump(views.user_summaries(self.store.users, user.email)),
        }


def _dump(models) -> List[Dict[str, Any]]:
    return [m.model_dump(mode="json") for m in models]
