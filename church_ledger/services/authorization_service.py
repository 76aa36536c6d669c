"""
Authorization gate for user management.

The caller identity comes straight from request headers and is
not bound to a login, so this is a capability check and not
authentication. The decision lives in AuthorizationGate alone;
replacing it with a token-backed policy does not touch the routes.
"""

import logging
from dataclasses import dataclass

from church_ledger.errors import AuthorizationFailure

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CallerIdentity:
    """Whatever the transport could extract about the caller."""
    user_id: int | None = None
    username: str | None = None


class AuthorizationGate:
    """
    Admin if the id is the reserved administrator id OR the
    username matches the administrator name, ignoring case.
    """

    def __init__(self, admin_user_id: int = 1, admin_username: str = "admin"):
        self.admin_user_id = admin_user_id
        self.admin_username = admin_username

    def is_admin(self, identity: CallerIdentity | None) -> bool:
        if identity is None:
            return False
        if identity.user_id is not None and identity.user_id == self.admin_user_id:
            return True
        if identity.username is not None:
            return identity.username.lower() == self.admin_username.lower()
        return False

    def require_admin(self, identity: CallerIdentity | None) -> None:
        """Raise AuthorizationFailure unless the caller is admin."""
        if not self.is_admin(identity):
            logger.warning(
                "Rejected admin operation for user_id=%s username=%r",
                identity.user_id if identity else None,
                identity.username if identity else None,
            )
            raise AuthorizationFailure(
                "Administrator privileges are required"
            )
