"""
FastAPI Application Factory

Creates and configures the API application: shared services on
``app.state``, middleware, domain exception handlers and routers.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
import structlog

from fulfillo.config import Settings, get_settings
from fulfillo.config.logging import configure_logging
from fulfillo.data import DemoDataGenerator
from fulfillo.domain.exceptions import (
    AuthenticationError,
    FulfilloError,
    InquiryClosedError,
    InvalidTransitionError,
    PermissionDeniedError,
)
from fulfillo.serving.api.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware
from fulfillo.serving.api.routes import (
    auth_router,
    brands_router,
    customers_router,
    finance_router,
    health_router,
    inquiries_router,
    inventory_router,
    orders_router,
    pages_router,
    shipping_router,
    users_router,
)
from fulfillo.services.auth import AuthGate, SessionRegistry
from fulfillo.services.onboarding import OnboardingPipeline
from fulfillo.services.pages import PageRouter
from fulfillo.store import DashboardStore

logger = structlog.get_logger(__name__)

API_PREFIX = "/api/v1"


def build_store(settings: Settings) -> DashboardStore:
    """The seed dataset, or a generated one when demo orders are configured"""
    if settings.dashboard.demo_orders > 0:
        generator = DemoDataGenerator(seed=settings.dashboard.demo_seed)
        return generator.build_store(orders=settings.dashboard.demo_orders)
    return DashboardStore.seeded()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    settings: Settings = app.state.settings
    configure_logging(settings=settings)

    store: DashboardStore = app.state.store
    logger.info(
        "Starting Fulfillo Operations Hub",
        environment=settings.app_env,
        users=len(store.users),
        brands=len(store.brands),
        orders=len(store.orders),
    )

    yield

    logger.info("Shutting down...", open_sessions=len(app.state.sessions))


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain exceptions to HTTP responses"""

    @app.exception_handler(AuthenticationError)
    async def authentication_error(request: Request, exc: AuthenticationError):
        return JSONResponse(
            status_code=401,
            content={"detail": str(exc)},
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(PermissionDeniedError)
    async def permission_denied(request: Request, exc: PermissionDeniedError):
        logger.warning("Permission denied", action=exc.action, role=exc.role, path=request.url.path)
        return JSONResponse(status_code=403, content={"detail": str(exc)})

    @app.exception_handler(InvalidTransitionError)
    async def invalid_transition(request: Request, exc: InvalidTransitionError):
        return JSONResponse(
            status_code=409,
            content={
                "detail": str(exc),
                "order_id": exc.order_id,
                "current": exc.current,
                "requested": exc.requested,
            },
        )

    @app.exception_handler(InquiryClosedError)
    async def inquiry_closed(request: Request, exc: InquiryClosedError):
        return JSONResponse(status_code=409, content={"detail": str(exc)})

    @app.exception_handler(FulfilloError)
    async def fulfillo_error(request: Request, exc: FulfilloError):
        logger.error("Unhandled domain error", error=str(exc), path=request.url.path)
        return JSONResponse(status_code=400, content={"detail": str(exc)})


def create_api_app(
    settings: Optional[Settings] = None,
    store: Optional[DashboardStore] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        settings: Application settings; defaults to the cached settings
        store: Dataset to serve; defaults to the seeded demo store

    Returns:
        Configured FastAPI app instance
    """
    settings = settings or get_settings()
    if store is None:
        store = build_store(settings)

    app = FastAPI(
        title="Fulfillo Operations Hub API",
        description="Internal operations dashboard for a third-party fulfillment provider",
        version=settings.version,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
        lifespan=lifespan,
    )

    sessions = SessionRegistry(token_bytes=settings.auth.token_bytes)
    onboarding = OnboardingPipeline(
        store, mark_inquiry_approved=settings.onboarding.mark_inquiry_approved
    )
    app.state.settings = settings
    app.state.store = store
    app.state.sessions = sessions
    app.state.auth = AuthGate(store, sessions, delay_seconds=settings.auth.login_delay_seconds)
    app.state.onboarding = onboarding
    app.state.pages = PageRouter(store, settings.dashboard, onboarding)

    # Add CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.security.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add compression
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # Custom middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(SecurityHeadersMiddleware, strict_transport=settings.is_production)

    register_exception_handlers(app)

    # API routes
    app.include_router(health_router, prefix=API_PREFIX, tags=["Health"])
    app.include_router(auth_router, prefix=f"{API_PREFIX}/auth", tags=["Auth"])
    app.include_router(pages_router, prefix=f"{API_PREFIX}/pages", tags=["Pages"])
    app.include_router(orders_router, prefix=f"{API_PREFIX}/orders", tags=["Orders"])
    app.include_router(inventory_router, prefix=f"{API_PREFIX}/inventory", tags=["Inventory"])
    app.include_router(brands_router, prefix=f"{API_PREFIX}/brands", tags=["Brands"])
    app.include_router(customers_router, prefix=f"{API_PREFIX}/customers", tags=["Customers"])
    app.include_router(shipping_router, prefix=f"{API_PREFIX}/shipping", tags=["Shipping"])
    app.include_router(finance_router, prefix=f"{API_PREFIX}/finance", tags=["Finance"])
    app.include_router(users_router, prefix=f"{API_PREFIX}/users", tags=["Users"])
    app.include_router(inquiries_router, prefix=f"{API_PREFIX}/inquiries", tags=["Inquiries"])

    return app
