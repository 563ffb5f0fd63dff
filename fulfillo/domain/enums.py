"""
Domain Enumerations

Fixed vocabularies shared by the store, the page router and the API.
"""

from enum import Enum


class UserRole(str, Enum):
    """Dashboard user roles"""
    ADMIN = "ADMIN"
    OPERATIONS = "OPERATIONS"
    PACKAGING = "PACKAGING"
    SUPPORT = "SUPPORT"
    BRAND_OWNER = "BRAND_OWNER"


class OrderStatus(str, Enum):
    """Order lifecycle status"""
    NEW = "NEW"
    PACKAGING = "PACKAGING"
    PACKED = "PACKED"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    RETURNED = "RETURNED"
    EXCHANGE = "EXCHANGE"


class InquiryStatus(str, Enum):
    """Partner inquiry review status"""
    NEW = "NEW"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class Locale(str, Enum):
    """Supported interface languages"""
    EN = "en"
    AR = "ar"


class Page(str, Enum):
    """Logical page keys understood by the page router"""
    DASHBOARD = "dashboard"
    ORDERS = "orders"
    INVENTORY = "inventory"
    CUSTOMERS = "customers"
    SHIPPING = "shipping"
    REPORTS = "reports"
    BRANDS = "brands"
    SETTINGS = "settings"


class ShippingView(str, Enum):
    """Sub-views of the shipping page"""
    OUTBOUND = "OUTBOUND"
    RETURNS = "RETURNS"


# Status groupings used by several derived views
PENDING_PACKAGING_STATUSES = frozenset({OrderStatus.NEW, OrderStatus.PACKAGING})
IN_TRANSIT_STATUSES = frozenset({OrderStatus.PACKED, OrderStatus.SHIPPED})
OUTBOUND_STATUSES = frozenset({OrderStatus.PACKED, OrderStatus.SHIPPED, OrderStatus.DELIVERED})
RETURN_STATUSES = frozenset({OrderStatus.RETURNED, OrderStatus.EXCHANGE})
