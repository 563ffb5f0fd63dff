"""
Role-Scoped Filter

Derives the orders and inventory visible to a session. Pure functions,
recomputed on every request.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from fulfillo.domain.enums import UserRole
from fulfillo.domain.models import InventoryItem, Order, UserAccount


@dataclass(frozen=True)
class ScopedData:
    """Visible subset of orders and inventory"""
    orders: Tuple[Order, ...]
    inventory: Tuple[InventoryItem, ...]
    brand_id: Optional[str]


def effective_brand_filter(identity: UserAccount, brand_filter: Optional[str]) -> Optional[str]:
    """The brand the view is limited to; ownership scope wins over the filter"""
    if identity.role == UserRole.BRAND_OWNER:
        return identity.brand_id
    return brand_filter


def scope_collections(
    orders: Iterable[Order],
    inventory: Iterable[InventoryItem],
    identity: UserAccount,
    brand_filter: Optional[str] = None,
) -> ScopedData:
    """
    Filter orders and inventory for an identity.

    - BRAND_OWNER: only records of the owner's brand, whatever the filter says
    - Other roles with a brand filter: records of that brand
    - Otherwise: everything
    """
    brand_id = effective_brand_filter(identity, brand_filter)

    if brand_id is None and identity.role != UserRole.BRAND_OWNER:
        return ScopedData(orders=tuple(orders), inventory=tuple(inventory), brand_id=None)

    return ScopedData(
        orders=tuple(o for o in orders if o.brand_id == brand_id),
        inventory=tuple(i for i in inventory if i.brand_id == brand_id),
        brand_id=brand_id,
    )
