"""
Reference data for clients building entry forms.
"""

from fastapi import APIRouter

from church_ledger.models.enums import OFFERING_TYPES

router = APIRouter(prefix="/api/meta", tags=["Meta"])


@router.get("/offering-types", response_model=list[str])
def list_offering_types():
    """The permitted offering types, in display order."""
    return list(OFFERING_TYPES)
