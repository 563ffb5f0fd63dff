"""
Domain Module
"""
from .enums import InquiryStatus, Locale, OrderStatus, Page, ShippingView, UserRole
from .exceptions import (
    AuthenticationError,
    FulfilloError,
    InquiryClosedError,
    InvalidTransitionError,
    PermissionDeniedError,
)
from .models import (
    Brand,
    BrandFields,
    Customer,
    CustomerSummary,
    InquiryFields,
    InventoryItem,
    InventoryView,
    Order,
    OrderFields,
    OrderView,
    PartnerInquiry,
    UserAccount,
    UserFields,
    UserPatch,
)

__all__ = [
    "InquiryStatus",
    "Locale",
    "OrderStatus",
    "Page",
    "ShippingView",
    "UserRole",
    "AuthenticationError",
    "FulfilloError",
    "InquiryClosedError",
    "InvalidTransitionError",
    "PermissionDeniedError",
    "Brand",
    "BrandFields",
    "Customer",
    "CustomerSummary",
    "InquiryFields",
    "InventoryItem",
    "InventoryView",
    "Order",
    "OrderFields",
    "OrderView",
    "PartnerInquiry",
    "UserAccount",
    "UserFields",
    "UserPatch",
]
