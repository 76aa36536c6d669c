"""Business logic services."""

from church_ledger.services.credential_service import CredentialService
from church_ledger.services.authorization_service import (
    AuthorizationGate,
    CallerIdentity,
)
from church_ledger.services.auth_service import AuthService
from church_ledger.services.user_service import UserService
from church_ledger.services.ledger_service import (
    LedgerService,
    LedgerKind,
    ENTRY_KIND,
    EXIT_KIND,
)
from church_ledger.services.bootstrap_service import ensure_schema

__all__ = [
    "CredentialService",
    "AuthorizationGate",
    "CallerIdentity",
    "AuthService",
    "UserService",
    "LedgerService",
    "LedgerKind",
    "ENTRY_KIND",
    "EXIT_KIND",
    "ensure_schema",
]
