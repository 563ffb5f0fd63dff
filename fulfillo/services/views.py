"""
Derived Views

Aggregations computed on read from the (already role-scoped) collections:
dashboard statistics, order search, the packaging queue, customer aggregates,
shipping queues and the finance summary.
"""

from collections import Counter
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Optional, Sequence

from pydantic import BaseModel

from fulfillo.domain.enums import (
    IN_TRANSIT_STATUSES,
    OUTBOUND_STATUSES,
    PENDING_PACKAGING_STATUSES,
    RETURN_STATUSES,
    OrderStatus,
    ShippingView,
)
from fulfillo.domain.models import (
    Brand,
    Customer,
    CustomerSummary,
    InventoryItem,
    Order,
    OrderView,
    UserAccount,
)

CENTS = Decimal("0.01")
ALL_STATUSES = "ALL"


def _money(value: Decimal) -> Decimal:
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


# =============================================================================
# RESPONSE MODELS
# =============================================================================

class BrandActivity(BaseModel):
    """Brand row on the dashboard"""
    brand_id: str
    name: str
    color: str
    order_count: int


class DashboardStats(BaseModel):
    """Headline dashboard numbers"""
    total_orders: int
    pending_packaging: int
    in_transit: int
    total_revenue: Decimal
    low_stock_items: int
    active_brands: int
    current_balance: Optional[Decimal] = None
    brands: List[BrandActivity] = []


class BrandFinance(BaseModel):
    """Per-brand settlement row"""
    brand_id: str
    name: str
    color: str
    previous_balance: Decimal
    current_account_balance: Decimal
    outstanding_balance: Decimal


class FinanceSummary(BaseModel):
    """Finance & reports page"""
    total_settled_revenue: Decimal
    total_projected_revenue: Decimal
    estimated_profit: Decimal
    average_order_value: Decimal
    brands: List[BrandFinance]


# =============================================================================
# DASHBOARD
# =============================================================================

def dashboard_stats(
    orders: Sequence[Order],
    inventory: Sequence[InventoryItem],
    brands: Sequence[Brand],
    low_stock_threshold: int,
    owner_view: bool = False,
) -> DashboardStats:
    """Compute dashboard headline statistics from scoped collections"""
    counts = Counter(o.brand_id for o in orders)
    total_revenue = sum((o.total for o in orders), Decimal("0"))

    return DashboardStats(
        total_orders=len(orders),
        pending_packaging=sum(1 for o in orders if o.status in PENDING_PACKAGING_STATUSES),
        in_transit=sum(1 for o in orders if o.status in IN_TRANSIT_STATUSES),
        total_revenue=_money(total_revenue),
        low_stock_items=sum(1 for i in inventory if i.stock < low_stock_threshold),
        active_brands=len(brands),
        current_balance=_money(total_revenue) if owner_view else None,
        brands=[] if owner_view else [
            BrandActivity(
                brand_id=b.id,
                name=b.name,
                color=b.color,
                order_count=counts.get(b.id, 0),
            )
            for b in brands
        ],
    )


# =============================================================================
# ORDERS
# =============================================================================

def search_orders(
    orders: Iterable[OrderView],
    status: str = ALL_STATUSES,
    query: str = "",
) -> List[OrderView]:
    """Filter by status (or ALL) and a case-insensitive id/customer/source search"""
    needle = query.strip().lower()
    results = []
    for o in orders:
        if status != ALL_STATUSES and o.status.value != status:
            continue
        if needle and not (
            needle in o.id.lower()
            or needle in o.customer.lower()
            or needle in o.source.lower()
        ):
            continue
        results.append(o)
    return results


def status_counts(orders: Iterable[Order]) -> Dict[str, int]:
    """Order count per status, plus ALL"""
    orders = list(orders)
    counts = {ALL_STATUSES: len(orders)}
    counts.update({s.value: 0 for s in OrderStatus})
    for o in orders:
        counts[o.status.value] += 1
    return counts


def packaging_queue(orders: Iterable[OrderView]) -> List[OrderView]:
    """Orders waiting to be packed"""
    return [o for o in orders if o.status in PENDING_PACKAGING_STATUSES]


# =============================================================================
# CUSTOMERS
# =============================================================================

def customer_summaries(customers: Iterable[Customer], orders: Sequence[Order]) -> List[CustomerSummary]:
    """
    Customers with order count, total spent and last order date computed
    from the order collection. Orders reference customers by name.
    """
    summaries = []
    for c in customers:
        theirs = [o for o in orders if o.customer == c.name]
        summaries.append(CustomerSummary(
            id=c.id,
            name=c.name,
            email=c.email,
            orders=len(theirs),
            total_spent=_money(sum((o.total for o in theirs), Decimal("0"))),
            last_order=max((o.created for o in theirs), default=None),
        ))
    return summaries


def customer_orders(name: str, orders: Iterable[OrderView]) -> List[OrderView]:
    return [o for o in orders if o.customer == name]


# =============================================================================
# SHIPPING
# =============================================================================

def shipping_queue(
    orders: Iterable[OrderView],
    view: ShippingView = ShippingView.OUTBOUND,
    query: str = "",
) -> List[OrderView]:
    """Outbound (packed/shipped/delivered) or returns (returned/exchange) queue"""
    statuses = RETURN_STATUSES if view == ShippingView.RETURNS else OUTBOUND_STATUSES
    needle = query.strip().lower()
    return [
        o for o in orders
        if o.status in statuses
        and (not needle or needle in o.id.lower() or needle in o.customer.lower())
    ]


def returns_count(orders: Iterable[Order]) -> int:
    return sum(1 for o in orders if o.status in RETURN_STATUSES)


# =============================================================================
# FINANCE
# =============================================================================

def _is_settled(order: Order) -> bool:
    return order.status == OrderStatus.DELIVERED and not order.reconciled


def finance_summary(
    orders: Sequence[Order],
    brands: Sequence[Brand],
    profit_margin: float,
) -> FinanceSummary:
    """
    Settlement figures.

    Settled revenue counts delivered, unreconciled orders; projected revenue
    counts packed and shipped orders.
    """
    settled = [o for o in orders if _is_settled(o)]
    pending = [o for o in orders if o.status in IN_TRANSIT_STATUSES]

    settled_total = sum((o.total for o in settled), Decimal("0"))
    projected_total = sum((o.total for o in pending), Decimal("0"))
    average = settled_total / len(settled) if settled else Decimal("0")

    rows = []
    for b in brands:
        rows.append(BrandFinance(
            brand_id=b.id,
            name=b.name,
            color=b.color,
            previous_balance=_money(b.previous_balance),
            current_account_balance=_money(
                sum((o.total for o in settled if o.brand_id == b.id), Decimal("0"))
            ),
            outstanding_balance=_money(
                sum((o.total for o in pending if o.brand_id == b.id), Decimal("0"))
            ),
        ))

    return FinanceSummary(
        total_settled_revenue=_money(settled_total),
        total_projected_revenue=_money(projected_total),
        estimated_profit=_money(settled_total * Decimal(str(profit_margin))),
        average_order_value=_money(average),
        brands=rows,
    )


# =============================================================================
# BRANDS & USERS
# =============================================================================

class BrandSummary(BaseModel):
    """Brand card without contact details or credentials"""
    id: str
    name: str
    category: str
    color: str
    integrated: bool
    order_count: int


class UserSummary(BaseModel):
    """User management row; passwords are never listed"""
    email: str
    name: str
    role: str
    department: str
    brand_id: Optional[str] = None
    active: bool
    is_self: bool = False


def brand_summaries(brands: Iterable[Brand], orders: Iterable[Order]) -> List[BrandSummary]:
    counts = Counter(o.brand_id for o in orders)
    return [
        BrandSummary(
            id=b.id,
            name=b.name,
            category=b.category,
            color=b.color,
            integrated=b.integrated,
            order_count=counts.get(b.id, 0),
        )
        for b in brands
    ]


def user_summaries(users: Iterable[UserAccount], current_email: Optional[str] = None) -> List[UserSummary]:
    return [
        UserSummary(
            email=u.email,
            name=u.name,
            role=u.role.value,
            department=u.department,
            brand_id=u.brand_id,
            active=u.active,
            is_self=u.email == current_email,
        )
        for u in users
    ]
