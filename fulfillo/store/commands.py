"""
Store Commands

One command type per mutation entry point. Commands are plain frozen records;
the store looks up the handler for each type when a command is dispatched.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from fulfillo.domain.enums import InquiryStatus, OrderStatus
from fulfillo.domain.models import (
    BrandFields,
    InquiryFields,
    OrderFields,
    UserFields,
    UserPatch,
)


@dataclass(frozen=True)
class Command:
    """Base class for store commands"""

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def target(self) -> Optional[str]:
        """Key of the record the command addresses, if any"""
        return None


# =============================================================================
# ORDERS
# =============================================================================

@dataclass(frozen=True)
class UpdateOrderStatus(Command):
    """Force-set an order's status"""
    order_id: str
    status: OrderStatus

    @property
    def target(self) -> str:
        return self.order_id


@dataclass(frozen=True)
class AdvanceOrderStatus(Command):
    """Move an order along the transition table"""
    order_id: str
    status: OrderStatus

    @property
    def target(self) -> str:
        return self.order_id


@dataclass(frozen=True)
class AddOrder(Command):
    fields: OrderFields


# =============================================================================
# INVENTORY
# =============================================================================

@dataclass(frozen=True)
class AdjustStock(Command):
    """Replace an item's stock level; clamping is the caller's job"""
    item_id: str
    stock: int

    @property
    def target(self) -> str:
        return self.item_id


@dataclass(frozen=True)
class ReceiveStock(Command):
    """Add an inbound delivery to an item's stock"""
    item_id: str
    quantity: int

    @property
    def target(self) -> str:
        return self.item_id


# =============================================================================
# BRANDS
# =============================================================================

@dataclass(frozen=True)
class AddBrand(Command):
    fields: BrandFields


@dataclass(frozen=True)
class DeleteBrand(Command):
    brand_id: str

    @property
    def target(self) -> str:
        return self.brand_id


@dataclass(frozen=True)
class RenameBrand(Command):
    brand_id: str
    new_name: str

    @property
    def target(self) -> str:
        return self.brand_id


@dataclass(frozen=True)
class ReconcileBrandBalance(Command):
    """Accumulate a paid-out amount into the brand's previous balance"""
    brand_id: str
    amount: Decimal

    @property
    def target(self) -> str:
        return self.brand_id


@dataclass(frozen=True)
class SetBrandIntegration(Command):
    brand_id: str
    integrated: bool

    @property
    def target(self) -> str:
        return self.brand_id


# =============================================================================
# USERS
# =============================================================================

@dataclass(frozen=True)
class RegisterUser(Command):
    fields: UserFields

    @property
    def target(self) -> str:
        return self.fields.email


@dataclass(frozen=True)
class UpdateUser(Command):
    email: str
    patch: UserPatch

    @property
    def target(self) -> str:
        return self.email


@dataclass(frozen=True)
class ToggleUserActive(Command):
    email: str

    @property
    def target(self) -> str:
        return self.email


# =============================================================================
# INQUIRIES
# =============================================================================

@dataclass(frozen=True)
class SubmitInquiry(Command):
    fields: InquiryFields


@dataclass(frozen=True)
class UpdateInquiryStatus(Command):
    inquiry_id: str
    status: InquiryStatus

    @property
    def target(self) -> str:
        return self.inquiry_id
