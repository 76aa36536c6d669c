"""
Shared FastAPI dependencies and error mapping.

Services and the authorization policy are handed to the routes
through Depends() so tests and deployments can override them.
"""

from functools import lru_cache

from fastapi import Header, HTTPException

from church_ledger.config import get_settings
from church_ledger.errors import (
    LedgerError,
    ValidationFailure,
    NotFoundFailure,
    ConflictFailure,
    AuthFailure,
    AuthorizationFailure,
)
from church_ledger.services.authorization_service import (
    AuthorizationGate,
    CallerIdentity,
)
from church_ledger.services.credential_service import CredentialService


STATUS_BY_ERROR: dict[type[LedgerError], int] = {
    ValidationFailure: 400,
    AuthFailure: 401,
    AuthorizationFailure: 403,
    NotFoundFailure: 404,
    ConflictFailure: 409,
}


def http_error(error: LedgerError) -> HTTPException:
    """Translate a domain failure into the matching HTTP error."""
    for error_type, status_code in STATUS_BY_ERROR.items():
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=str(error))
    return HTTPException(status_code=500, detail="Internal server error")


@lru_cache()
def get_credential_service() -> CredentialService:
    settings = get_settings()
    return CredentialService(min_length=settings.MIN_PASSWORD_LENGTH)


@lru_cache()
def get_authorization_gate() -> AuthorizationGate:
    settings = get_settings()
    return AuthorizationGate(
        admin_user_id=settings.ADMIN_USER_ID,
        admin_username=settings.ADMIN_USERNAME,
    )


def get_caller_identity(
    x_user_id: str | None = Header(default=None),
    x_username: str | None = Header(default=None),
) -> CallerIdentity:
    """
    Read the caller from the X-User-Id and X-Username headers.

    Nothing ties these headers to a previous login. A user id that
    is not a number is dropped rather than refused, so the gate
    can still decide on the username.
    """
    user_id = None
    if x_user_id is not None:
        try:
            user_id = int(x_user_id)
        except ValueError:
            user_id = None
    return CallerIdentity(user_id=user_id, username=x_username)
