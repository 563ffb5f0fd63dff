"""
Test Suite Configuration
"""
import random
from datetime import date
from typing import Callable, Dict

import pytest
from fastapi.testclient import TestClient

from fulfillo.config import Settings
from fulfillo.config.settings import AuthSettings, OnboardingSettings
from fulfillo.domain.enums import Locale, UserRole
from fulfillo.domain.models import UserFields
from fulfillo.serving.api import create_api_app
from fulfillo.services.auth import AuthGate, SessionRegistry
from fulfillo.services.onboarding import OnboardingPipeline
from fulfillo.services.pages import PageRouter
from fulfillo.store import DashboardStore

TODAY = date(2024, 3, 14)

CREDENTIALS: Dict[str, tuple] = {
    "ADMIN": ("admin@fulfillo.com", "admin-unique-7721"),
    "OPERATIONS": ("ops@fulfillo.com", "ops-secure-991"),
    "PACKAGING": ("pack@fulfillo.com", "warehouse-key-5"),
    "BRAND_OWNER": ("glowskin@brand.com", "glow-brand-secure"),
    "SUPPORT": ("support@fulfillo.com", "support-key-3"),
}


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def credentials() -> Dict[str, tuple]:
    return CREDENTIALS


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings"""
    return Settings(auth=AuthSettings(login_delay_ms=0))


@pytest.fixture
def store() -> DashboardStore:
    """Seeded store with a fixed clock and random source, plus a support agent"""
    store = DashboardStore.seeded(rng=random.Random(1234), clock=lambda: TODAY)
    store.register_user(UserFields(
        email="support@fulfillo.com",
        password="support-key-3",
        name="Nora Help",
        role=UserRole.SUPPORT,
        department="Customer Care",
    ))
    return store


@pytest.fixture
def sessions() -> SessionRegistry:
    return SessionRegistry()


@pytest.fixture
def auth_gate(store, sessions) -> AuthGate:
    return AuthGate(store, sessions)


@pytest.fixture
def onboarding(store) -> OnboardingPipeline:
    return OnboardingPipeline(store)


@pytest.fixture
def page_router(store, test_settings, onboarding) -> PageRouter:
    return PageRouter(store, test_settings.dashboard, onboarding)


@pytest.fixture
def session_for(store, sessions) -> Callable:
    """Open a session directly for the account with the given email"""
    def _open(email: str, locale: Locale = Locale.EN):
        user = store.get_user(email)
        return sessions.create(user, locale), user
    return _open


@pytest.fixture
def app(test_settings, store):
    return create_api_app(test_settings, store=store)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def login(client) -> Callable:
    """Log in as a role and return request headers carrying the bearer token"""
    def _login(role: str, locale: str = "en") -> Dict[str, str]:
        email, password = CREDENTIALS[role]
        response = client.post(
            "/api/v1/auth/login",
            json={"email": email, "password": password, "locale": locale},
        )
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}
    return _login


@pytest.fixture
def mark_approved_app(store):
    """App whose onboarding marks the originating inquiry APPROVED"""
    settings = Settings(
        auth=AuthSettings(login_delay_ms=0),
        onboarding=OnboardingSettings(mark_inquiry_approved=True),
    )
    return create_api_app(settings, store=store)
