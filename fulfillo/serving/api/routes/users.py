"""
User Management Endpoints

Admin-only listing, registration, credential edits and activation toggles
of other accounts.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from fulfillo.domain.models import UserFields, UserPatch
from fulfillo.serving.api.dependencies import Identity, get_store, require_capability
from fulfillo.services.views import UserSummary, user_summaries
from fulfillo.store import DashboardStore

router = APIRouter()


def _summary(user, identity: Identity) -> UserSummary:
    return user_summaries([user], identity.user.email)[0]


@router.get("", response_model=List[UserSummary])
async def list_users(
    identity: Identity = Depends(require_capability("manage_users")),
    store: DashboardStore = Depends(get_store),
) -> List[UserSummary]:
    return user_summaries(store.users, identity.user.email)


@router.post("", response_model=UserSummary, status_code=201)
async def register_user(
    body: UserFields,
    identity: Identity = Depends(require_capability("manage_users")),
    store: DashboardStore = Depends(get_store),
) -> UserSummary:
    """Register an active account; emails are unique"""
    user = store.register_user(body)
    if user is None:
        raise HTTPException(status_code=409, detail="A user with this email already exists")
    return _summary(user, identity)


@router.patch("/{email}", response_model=UserSummary)
async def update_user(
    email: str,
    body: UserPatch,
    identity: Identity = Depends(require_capability("manage_users")),
    store: DashboardStore = Depends(get_store),
) -> UserSummary:
    """Merge name, password and department; omitted fields are kept"""
    user = store.update_user(email, body)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return _summary(user, identity)


@router.post("/{email}/toggle-active", response_model=UserSummary)
async def toggle_active(
    email: str,
    identity: Identity = Depends(require_capability("manage_users")),
    store: DashboardStore = Depends(get_store),
) -> UserSummary:
    """Suspend or reactivate another account; the caller's own is refused"""
    if email == identity.user.email:
        raise HTTPException(status_code=409, detail="You cannot change your own account status")
    user = store.toggle_user_active(email)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return _summary(user, identity)
