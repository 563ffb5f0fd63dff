"""
Domain Models

Immutable entity records held by the dashboard store, the field sets used to
create or patch them, and the read-side projections built from them.

Entities are frozen pydantic models: a mutation never edits a record in place,
it replaces the record in its collection with an updated copy.
"""

import re
from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fulfillo.domain.enums import InquiryStatus, OrderStatus, UserRole


_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _check_email(value: str) -> str:
    value = value.strip()
    if not _EMAIL_PATTERN.match(value):
        raise ValueError("Invalid email address")
    return value


class Entity(BaseModel):
    """Base for stored records"""

    model_config = ConfigDict(frozen=True, use_enum_values=False)


# =============================================================================
# ENTITIES
# =============================================================================

class UserAccount(Entity):
    """Dashboard login account, keyed by email.

    Passwords are stored and compared as plaintext; this is a demo shortcut.
    """
    email: str
    password: str
    name: str
    role: UserRole
    department: str = ""
    brand_id: Optional[str] = None
    active: bool = True


class Brand(Entity):
    """Fulfillment partner"""
    id: str
    name: str
    category: str = "Brand Partner"
    color: str
    previous_balance: Decimal = Decimal("0.00")
    admin_email: str = ""
    admin_phone: str = ""
    description: str = ""
    brand_password: str = ""
    integrated: bool = False


class Order(Entity):
    """Customer order fulfilled on behalf of a brand"""
    id: str
    brand_id: str
    customer: str
    status: OrderStatus
    total: Decimal
    created: date
    source: str
    carrier: Optional[str] = None
    tracking: Optional[str] = None
    reconciled: bool = False
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None


class InventoryItem(Entity):
    """Warehoused product"""
    id: str
    name: str
    sku: str
    stock: int = Field(ge=0)
    price: Decimal
    brand_id: str


class Customer(Entity):
    """End customer; order aggregates are derived from the order collection"""
    id: str
    name: str
    email: str


class PartnerInquiry(Entity):
    """Unsolicited partner application"""
    id: str
    brand: str
    email: str
    phone: str
    shipping: str = ""
    products: str
    status: InquiryStatus = InquiryStatus.NEW


# =============================================================================
# FIELD SETS
# =============================================================================

class OrderFields(BaseModel):
    """Manual order form"""
    brand_id: str = Field(min_length=1)
    customer: str = Field(min_length=1)
    total: Decimal = Field(ge=0)
    carrier: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None


class BrandFields(BaseModel):
    """Brand creation form"""
    name: str = Field(min_length=1)
    category: str = "Brand Partner"
    admin_email: str
    admin_phone: str = ""
    description: str = ""
    brand_password: str = ""

    @field_validator("admin_email")
    @classmethod
    def validate_admin_email(cls, v: str) -> str:
        return _check_email(v)


class UserFields(BaseModel):
    """User registration form"""
    email: str
    password: str = Field(min_length=1)
    name: str = Field(min_length=1)
    role: UserRole
    department: str = ""
    brand_id: Optional[str] = None

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return _check_email(v)


class UserPatch(BaseModel):
    """Credential edit; only the provided fields are merged"""
    name: Optional[str] = Field(default=None, min_length=1)
    password: Optional[str] = Field(default=None, min_length=1)
    department: Optional[str] = None


class InquiryFields(BaseModel):
    """Public join request form"""
    brand: str = Field(min_length=1)
    email: str
    phone: str = Field(min_length=1)
    shipping: str = ""
    products: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return _check_email(v)


# =============================================================================
# PROJECTIONS
# =============================================================================

class OrderView(Order):
    """Order with its brand name resolved"""
    brand: str


class InventoryView(InventoryItem):
    """Inventory item with its brand name resolved"""
    brand: str


class CustomerSummary(BaseModel):
    """Customer with aggregates computed from orders"""
    id: str
    name: str
    email: str
    orders: int
    total_spent: Decimal
    last_order: Optional[date] = None
