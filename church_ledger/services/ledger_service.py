"""
Ledger service — entries and exits.

Entries and exits follow the same rules and differ only in their
model, the names of their date and type columns, and the types
they accept. A LedgerKind captures those differences so one
service handles both:

1. The record type must belong to the kind's permitted set
2. Codes are unique per kind
3. Listing is newest first (record date, then id)
4. Updates never change the code or the owner
5. Deletes are hard deletes

The caller controls the commit.
"""

import logging
import warnings
from dataclasses import dataclass

from pydantic import BaseModel
from sqlalchemy import select, delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from church_ledger.errors import (
    ConflictFailure,
    NotFoundFailure,
    ValidationFailure,
)
from church_ledger.models.enums import OFFERING_TYPES, EXIT_TYPES
from church_ledger.models.ledger_record import Entry, Exit
from church_ledger.models.user import User

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LedgerKind:
    """Describes one kind of ledger record."""
    label: str
    model: type
    date_field: str
    type_field: str
    permitted_types: tuple[str, ...]
    # Columns an update may change but never clear
    required_fields: frozenset[str]


ENTRY_KIND = LedgerKind(
    label="Entry",
    model=Entry,
    date_field="entry_date",
    type_field="offering_type",
    permitted_types=OFFERING_TYPES,
    required_fields=frozenset(
        {"entry_date", "offering_type", "amount", "currency"}
    ),
)

EXIT_KIND = LedgerKind(
    label="Exit",
    model=Exit,
    date_field="exit_date",
    type_field="transaction_type",
    permitted_types=EXIT_TYPES,
    required_fields=frozenset(
        {"exit_date", "transaction_type", "amount", "currency", "comments"}
    ),
)


class LedgerService:
    """
    CRUD over one kind of ledger record.

    strict_types=False restores the old behaviour of admitting an
    unknown type with a logged warning. It is deprecated and only
    kept for exits recorded by older clients.
    """

    def __init__(self, db: Session, kind: LedgerKind, strict_types: bool = True):
        self.db = db
        self.kind = kind
        self.strict_types = strict_types
        if not strict_types:
            warnings.warn(
                f"Lenient {kind.label.lower()} type checking is deprecated; "
                "unknown types will be rejected in a future release",
                DeprecationWarning,
                stacklevel=2,
            )

    @property
    def _model(self):
        return self.kind.model

    def _check_type(self, value: str) -> None:
        if value in self.kind.permitted_types:
            return
        if self.strict_types:
            raise ValidationFailure(
                f"Invalid {self.kind.label.lower()} type '{value}'"
            )
        logger.warning(
            "Non-standard %s type %r admitted", self.kind.label.lower(), value
        )

    def _check_owner(self, user_id: int | None) -> None:
        if user_id is not None and self.db.get(User, user_id) is None:
            raise ValidationFailure(f"User {user_id} not found")

    def _flush(self, code: str) -> None:
        try:
            self.db.flush()
        except IntegrityError as e:
            self.db.rollback()
            raise ConflictFailure(
                f"{self.kind.label} with code '{code}' already exists"
            ) from e

    def create_record(self, request: BaseModel):
        """
        Validate and insert a new record.

        Raises ValidationFailure for a type outside the permitted
        set or an unknown owner, ConflictFailure for a duplicate code.
        Nothing is written when a check fails.
        """
        data = request.model_dump()
        self._check_type(data[self.kind.type_field])
        self._check_owner(data.get("user_id"))

        existing = self.db.execute(
            select(self._model.id).where(self._model.code == data["code"])
        ).first()
        if existing:
            raise ConflictFailure(
                f"{self.kind.label} with code '{data['code']}' already exists"
            )

        record = self._model(**data)
        self.db.add(record)
        self._flush(data["code"])
        return record

    def list_records(self) -> list:
        """All records, most recent date first, latest insert wins ties."""
        date_column = getattr(self._model, self.kind.date_field)
        records = self.db.execute(
            select(self._model).order_by(
                date_column.desc(), self._model.id.desc()
            )
        ).scalars().all()
        return list(records)

    def get_record(self, record_id: int):
        record = self.db.get(self._model, record_id)
        if not record:
            raise NotFoundFailure(f"{self.kind.label} {record_id} not found")
        return record

    def update_record(self, record_id: int, request: BaseModel):
        """
        Apply the fields present in the request.

        The code and the owner are not part of the update schemas
        and cannot be changed here.
        """
        record = self.get_record(record_id)
        changes = request.model_dump(exclude_unset=True)

        for field in self.kind.required_fields:
            if field in changes and changes[field] is None:
                raise ValidationFailure(f"{field} cannot be empty")

        if self.kind.type_field in changes:
            self._check_type(changes[self.kind.type_field])

        for field, value in changes.items():
            setattr(record, field, value)

        self._flush(record.code)
        return record

    def delete_record(self, record_id: int) -> None:
        """Hard delete. NotFoundFailure when no row was removed."""
        result = self.db.execute(
            delete(self._model).where(self._model.id == record_id)
        )
        if result.rowcount == 0:
            raise NotFoundFailure(f"{self.kind.label} {record_id} not found")
