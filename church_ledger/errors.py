"""
Domain errors raised by the services.

Services never raise HTTP errors. They raise one of these and
the API layer decides the status code. Every failure is a
ValueError so callers that only care about "the request was
refused" can catch the base class.
"""


class LedgerError(ValueError):
    """Base class for all domain failures."""


class ValidationFailure(LedgerError):
    """Malformed, missing or out-of-range input."""


class NotFoundFailure(LedgerError):
    """The referenced id or username does not exist."""


class ConflictFailure(LedgerError):
    """A uniqueness rule would be violated."""


class AuthFailure(LedgerError):
    """Bad credentials. Never says which half was wrong."""


class AuthorizationFailure(LedgerError):
    """The caller lacks the admin capability."""


class StoreFailure(LedgerError):
    """The database is unreachable or failed unexpectedly."""
