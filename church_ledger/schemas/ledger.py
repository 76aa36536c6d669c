"""
Pydantic schemas for entries and exits.

These define the API contract. Required fields, lengths and
amount precision are checked here. Request strings are stripped
first, so a blank code or currency counts as missing. Membership
of the type in the permitted set is checked by the LedgerService
because the set is configuration.
"""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, Field


# --- Request Schemas ---

class EntryCreate(BaseModel):
    """An incoming offering or tithe."""
    model_config = {"str_strip_whitespace": True}

    code: str = Field(min_length=1, max_length=50)
    entry_date: date
    offering_type: str = Field(min_length=1, max_length=255)
    amount: Decimal = Field(ge=0, max_digits=15, decimal_places=2)
    currency: str = Field(min_length=1, max_length=10)
    witness: str | None = Field(default=None, max_length=255)
    comments: str | None = None
    user_id: int | None = None


class EntryUpdate(BaseModel):
    """
    Partial update of an entry.

    Only the fields present in the request are changed. The code
    and the owning user are fixed at creation.
    """
    model_config = {"str_strip_whitespace": True}

    entry_date: date | None = None
    offering_type: str | None = Field(default=None, min_length=1, max_length=255)
    amount: Decimal | None = Field(
        default=None, ge=0, max_digits=15, decimal_places=2
    )
    currency: str | None = Field(default=None, min_length=1, max_length=10)
    witness: str | None = Field(default=None, max_length=255)
    comments: str | None = None


class ExitCreate(BaseModel):
    """An outgoing expense. Comments are mandatory."""
    model_config = {"str_strip_whitespace": True}

    code: str = Field(min_length=1, max_length=50)
    exit_date: date
    transaction_type: str = Field(min_length=1, max_length=255)
    amount: Decimal = Field(ge=0, max_digits=15, decimal_places=2)
    currency: str = Field(min_length=1, max_length=10)
    witness: str | None = Field(default=None, max_length=255)
    comments: str = Field(min_length=1)
    user_id: int | None = None


class ExitUpdate(BaseModel):
    model_config = {"str_strip_whitespace": True}

    exit_date: date | None = None
    transaction_type: str | None = Field(
        default=None, min_length=1, max_length=255
    )
    amount: Decimal | None = Field(
        default=None, ge=0, max_digits=15, decimal_places=2
    )
    currency: str | None = Field(default=None, min_length=1, max_length=10)
    witness: str | None = Field(default=None, max_length=255)
    comments: str | None = Field(default=None, min_length=1)


# --- Response Schemas ---

class EntryResponse(BaseModel):
    id: int
    code: str
    entry_date: date
    offering_type: str
    amount: Decimal
    currency: str
    witness: str | None
    comments: str | None
    user_id: int | None
    created_at: datetime

    model_config = {"from_attributes": True}


class ExitResponse(BaseModel):
    id: int
    code: str
    exit_date: date
    transaction_type: str
    amount: Decimal
    currency: str
    witness: str | None
    comments: str
    user_id: int | None
    created_at: datetime

    model_config = {"from_attributes": True}
