"""
User directory API endpoints.

Listing is open. Creating and updating users requires the
caller to pass the AuthorizationGate.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from church_ledger.api.dependencies import (
    get_authorization_gate,
    get_caller_identity,
    get_credential_service,
    http_error,
)
from church_ledger.errors import LedgerError
from church_ledger.models.base import get_db
from church_ledger.services.authorization_service import (
    AuthorizationGate,
    CallerIdentity,
)
from church_ledger.services.credential_service import CredentialService
from church_ledger.services.user_service import UserService
from church_ledger.schemas.user import UserCreate, UserUpdate, UserResponse

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.get("", response_model=list[UserResponse])
def list_users(
    db: Session = Depends(get_db),
    credentials: CredentialService = Depends(get_credential_service),
):
    """All users in creation order, without password digests."""
    return UserService(db, credentials).list_users()


@router.post("", response_model=UserResponse, status_code=201)
def create_user(
    request: UserCreate,
    db: Session = Depends(get_db),
    credentials: CredentialService = Depends(get_credential_service),
    gate: AuthorizationGate = Depends(get_authorization_gate),
    caller: CallerIdentity = Depends(get_caller_identity),
):
    """Create a user. Admin only."""
    service = UserService(db, credentials)
    try:
        gate.require_admin(caller)
        user = service.create_user(request)
        db.commit()
        return user
    except LedgerError as e:
        db.rollback()
        raise http_error(e)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: int,
    request: UserUpdate,
    db: Session = Depends(get_db),
    credentials: CredentialService = Depends(get_credential_service),
    gate: AuthorizationGate = Depends(get_authorization_gate),
    caller: CallerIdentity = Depends(get_caller_identity),
):
    """
    Rename a user and optionally set a new password. Admin only.

    The username is required even when only the password changes.
    """
    service = UserService(db, credentials)
    try:
        gate.require_admin(caller)
        user = service.update_user(user_id, request)
        db.commit()
        return user
    except LedgerError as e:
        db.rollback()
        raise http_error(e)
