"""
Database models package.

All models must be imported here so that Base.metadata knows
every table when the schema is created.
"""

from church_ledger.models.base import Base
from church_ledger.models.enums import (
    OfferingType,
    OTHER_EXPENSE,
    OFFERING_TYPES,
    EXIT_TYPES,
)
from church_ledger.models.user import User
from church_ledger.models.ledger_record import Entry, Exit

__all__ = [
    "Base",
    "OfferingType",
    "OTHER_EXPENSE",
    "OFFERING_TYPES",
    "EXIT_TYPES",
    "User",
    "Entry",
    "Exit",
]
