"""
Shared enumerations for the ledger.

Record types are stored as plain strings so the permitted set
can be passed to the services as configuration. The enum is
the default set and the order the meta endpoint reports.
"""

import enum


class OfferingType(str, enum.Enum):
    """Closed set of classifications for incoming funds."""
    ORDINARY = "Offrande ordinaire"
    ADORATION = "Offrande d'adoration"
    THANKSGIVING = "Offrande d'action de grace"
    BUILDING = "Offrande de construction"
    TITHE = "Dime"
    TITHE_OF_OFFERINGS = "Dime des offrandes"


# Catch-all category only exits may use
OTHER_EXPENSE = "Autre Dépense"

OFFERING_TYPES: tuple[str, ...] = tuple(t.value for t in OfferingType)
EXIT_TYPES: tuple[str, ...] = OFFERING_TYPES + (OTHER_EXPENSE,)
