"""
Authentication Endpoints

Login, logout, the current identity and the interface locale.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel, Field

from fulfillo.config import Settings
from fulfillo.domain.enums import Locale, Page
from fulfillo.i18n import text_direction, toggle_locale
from fulfillo.serving.api.dependencies import (
    Identity,
    get_app_settings,
    get_auth_gate,
    get_identity,
)
from fulfillo.services.auth import AuthGate
from fulfillo.services.pages import Capabilities, navigation_for
from fulfillo.services.scoping import effective_brand_filter

router = APIRouter()


# =============================================================================
# REQUEST/RESPONSE MODELS
# =============================================================================

class LoginRequest(BaseModel):
    """Credentials; the locale selects the language of the failure message"""
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)
    locale: Optional[Locale] = None


class IdentityResponse(BaseModel):
    """The logged-in user and session state"""
    email: str
    name: str
    role: str
    department: str
    brand_id: Optional[str] = None
    active: bool
    locale: Locale
    direction: str
    active_page: Page
    brand_filter: Optional[str] = None
    navigation: List[Page]
    capabilities: dict


class LoginResponse(BaseModel):
    """Issued session token and landing page"""
    token: str
    token_type: str = "bearer"
    landing_page: Page
    identity: IdentityResponse


class LocaleRequest(BaseModel):
    """Target locale; omitted means toggle"""
    locale: Optional[Locale] = None


def _identity_response(identity: Identity) -> IdentityResponse:
    user, session = identity.user, identity.session
    return IdentityResponse(
        email=user.email,
        name=user.name,
        role=user.role.value,
        department=user.department,
        brand_id=user.brand_id,
        active=user.active,
        locale=session.locale,
        direction=text_direction(session.locale),
        active_page=session.active_page,
        brand_filter=effective_brand_filter(user, session.brand_filter),
        navigation=navigation_for(user.role),
        capabilities=Capabilities.for_role(user.role).as_dict(),
    )


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("/login", response_model=LoginResponse)
async def login(
    body: LoginRequest,
    auth: AuthGate = Depends(get_auth_gate),
    settings: Settings = Depends(get_app_settings),
) -> LoginResponse:
    """
    Open a session.

    A wrong password, an unknown email and a suspended account all answer
    401 with the same localized message.
    """
    locale = body.locale or Locale(settings.dashboard.default_locale)
    session = await auth.login(body.email, body.password, locale)
    _, user = auth.resolve(session.token)

    return LoginResponse(
        token=session.token,
        landing_page=session.active_page,
        identity=_identity_response(Identity(session=session, user=user)),
    )


@router.post("/logout", status_code=204, response_class=Response)
async def logout(
    identity: Identity = Depends(get_identity),
    auth: AuthGate = Depends(get_auth_gate),
) -> Response:
    auth.logout(identity.session.token)
    return Response(status_code=204)


@router.get("/me", response_model=IdentityResponse)
async def current_identity(identity: Identity = Depends(get_identity)) -> IdentityResponse:
    return _identity_response(identity)


@router.put("/locale", response_model=IdentityResponse)
async def set_locale(
    body: LocaleRequest,
    identity: Identity = Depends(get_identity),
) -> IdentityResponse:
    """Switch the session language; without a body locale, toggle en/ar"""
    session = identity.session
    session.locale = body.locale or toggle_locale(session.locale)
    return _identity_response(identity)
