"""
Authentication API endpoints.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from church_ledger.api.dependencies import get_credential_service, http_error
from church_ledger.errors import LedgerError
from church_ledger.models.base import get_db
from church_ledger.services.auth_service import AuthService
from church_ledger.services.credential_service import CredentialService
from church_ledger.schemas.user import (
    LoginRequest,
    LoginResponse,
    ResetPasswordRequest,
    MessageResponse,
)

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("/login", response_model=LoginResponse)
def login(
    request: LoginRequest,
    db: Session = Depends(get_db),
    credentials: CredentialService = Depends(get_credential_service),
):
    """
    Check a username and password.

    Returns only the id and username of the user; the digest
    never leaves the server.
    """
    service = AuthService(db, credentials)
    try:
        return service.login(request.username, request.password)
    except LedgerError as e:
        raise http_error(e)


@router.post("/reset-password", response_model=MessageResponse)
def reset_password(
    request: ResetPasswordRequest,
    db: Session = Depends(get_db),
    credentials: CredentialService = Depends(get_credential_service),
):
    """Replace a user's password."""
    service = AuthService(db, credentials)
    try:
        service.reset_password(request.username, request.new_password)
        db.commit()
        return MessageResponse(message="Password reset successfully")
    except LedgerError as e:
        db.rollback()
        raise http_error(e)
