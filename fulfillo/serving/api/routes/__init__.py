"""
API Routes Module
"""
from .health import router as health_router
from .auth import router as auth_router
from .pages import router as pages_router
from .orders import router as orders_router
from .inventory import router as inventory_router
from .brands import router as brands_router
from .customers import router as customers_router
from .shipping import router as shipping_router
from .finance import router as finance_router
from .users import router as users_router
from .inquiries import router as inquiries_router

__all__ = [
    "health_router",
    "auth_router",
    "pages_router",
    "orders_router",
    "inventory_router",
    "brands_router",
    "customers_router",
    "shipping_router",
    "finance_router",
    "users_router",
    "inquiries_router",
]
