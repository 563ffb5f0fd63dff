"""
Session and Authentication Gate

Validates credentials against the user collection, establishes sessions and
picks the landing page for the authenticated role.

Credentials are compared as plaintext. Hashing is outside the scope of this
demo and must be added before any real deployment.
"""

import asyncio
import hmac
import secrets
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Optional, Tuple, TYPE_CHECKING

import structlog

from fulfillo.domain.enums import Locale, Page, UserRole
from fulfillo.domain.exceptions import AuthenticationError
from fulfillo.domain.models import UserAccount
from fulfillo.i18n import translate
from fulfillo.store import DashboardStore

if TYPE_CHECKING:
    from fulfillo.services.onboarding import OnboardingPayload

logger = structlog.get_logger(__name__)


LANDING_PAGES: Dict[UserRole, Page] = {
    UserRole.PACKAGING: Page.INVENTORY,
}


def landing_page(role: UserRole) -> Page:
    """Initial page after login: inventory for packaging staff, else dashboard"""
    return LANDING_PAGES.get(role, Page.DASHBOARD)


@dataclass
class Session:
    """
    Server-side state of one logged-in user.

    Holds navigation state only. The identity is the account email; the
    account itself is re-read from the store on every request.
    """
    token: str
    email: str
    locale: Locale
    active_page: Page = Page.DASHBOARD
    brand_filter: Optional[str] = None
    pending_onboarding: Optional["OnboardingPayload"] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class SessionRegistry:
    """In-memory registry of active sessions keyed by opaque token"""

    def __init__(self, token_bytes: int = 32):
        self._token_bytes = token_bytes
        self._sessions: Dict[str, Session] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def create(self, user: UserAccount, locale: Locale) -> Session:
        token = secrets.token_urlsafe(self._token_bytes)
        session = Session(
            token=token,
            email=user.email,
            locale=locale,
            active_page=landing_page(user.role),
        )
        self._sessions[token] = session
        return session

    def get(self, token: str) -> Optional[Session]:
        return self._sessions.get(token)

    def discard(self, token: str) -> bool:
        return self._sessions.pop(token, None) is not None


class AuthGate:
    """
    Login, logout and session resolution.

    A wrong password, an unknown email and a suspended account all fail with
    the same localized message.
    """

    def __init__(
        self,
        store: DashboardStore,
        sessions: SessionRegistry,
        delay_seconds: float = 0.0,
    ):
        self.store = store
        self.sessions = sessions
        self.delay_seconds = delay_seconds

    def authenticate(self, email: str, password: str, locale: Locale = Locale.EN) -> UserAccount:
        """
        Find the active account matching both email and password.

        Raises:
            AuthenticationError: With the generic failure message
        """
        user = self.store.get_user(email)
        matched = user is not None and hmac.compare_digest(
            user.password.encode("utf-8"), password.encode("utf-8")
        )
        if not matched or not user.active:
            logger.info("Login rejected")
            raise AuthenticationError(translate(locale, "loginFailed"))
        return user

    async def login(self, email: str, password: str, locale: Locale = Locale.EN) -> Session:
        """Authenticate after the cosmetic delay and open a session"""
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)

        user = self.authenticate(email, password, locale)
        session = self.sessions.create(user, locale)
        logger.info(
            "Login succeeded",
            role=user.role.value,
            landing_page=session.active_page.value,
        )
        return session

    def logout(self, token: str) -> bool:
        return self.sessions.discard(token)

    def resolve(self, token: str) -> Tuple[Session, UserAccount]:
        """
        Resolve a bearer token to its session and current account record.

        Deactivating an account does not end its open sessions.

        Raises:
            AuthenticationError: If the token is unknown or the account is gone
        """
        session = self.sessions.get(token)
        if session is None:
            raise AuthenticationError("Session expired or unknown")
        user = self.store.get_user(session.email)
        if user is None:
            self.sessions.discard(token)
            raise AuthenticationError("Session expired or unknown")
        return session, user
