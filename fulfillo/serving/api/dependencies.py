"""
Request Dependencies

Bearer-token session resolution and the page / capability guards used by the
route modules. Shared services live on ``app.state``.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from fulfillo.config import Settings
from fulfillo.domain.enums import Page
from fulfillo.domain.exceptions import AuthenticationError, PermissionDeniedError
from fulfillo.domain.models import UserAccount
from fulfillo.services.auth import AuthGate, Session
from fulfillo.services.onboarding import OnboardingPipeline
from fulfillo.services.pages import Capabilities, PageRouter, can_view
from fulfillo.services.scoping import ScopedData
from fulfillo.store import DashboardStore

bearer_scheme = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> DashboardStore:
    return request.app.state.store


def get_auth_gate(request: Request) -> AuthGate:
    return request.app.state.auth


def get_page_router(request: Request) -> PageRouter:
    return request.app.state.pages


def get_onboarding(request: Request) -> OnboardingPipeline:
    return request.app.state.onboarding


@dataclass
class Identity:
    """The authenticated caller: session state plus current account record"""
    session: Session
    user: UserAccount

    @property
    def capabilities(self) -> Capabilities:
        return Capabilities.for_role(self.user.role)


async def get_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: AuthGate = Depends(get_auth_gate),
) -> Identity:
    """Resolve the bearer token; 401 when missing or unknown"""
    if credentials is None:
        raise AuthenticationError("Not authenticated")
    session, user = auth.resolve(credentials.credentials)
    return Identity(session=session, user=user)


def require_page(page: Page) -> Callable:
    """Dependency allowing only roles that can see ``page``"""

    async def guard(identity: Identity = Depends(get_identity)) -> Identity:
        if not can_view(page, identity.user.role):
            raise PermissionDeniedError(f"view {page.value}", identity.user.role.value)
        return identity

    return guard


def require_capability(capability: str) -> Callable:
    """Dependency allowing only roles granted ``capability``"""

    async def guard(identity: Identity = Depends(get_identity)) -> Identity:
        if not identity.capabilities.allows(capability):
            raise PermissionDeniedError(capability.replace("_", " "), identity.user.role.value)
        return identity

    return guard


def scoped_for(identity: Identity, pages: PageRouter) -> ScopedData:
    return pages.scoped(identity.session, identity.user)
