"""
Ledger API endpoints for entries and exits.

Both resources expose the same four operations, so the router is
built from the LedgerKind and the schemas of each resource. The
API layer is thin: it handles status codes and transactions and
delegates the rules to the LedgerService.
"""

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from church_ledger.api.dependencies import http_error
from church_ledger.config import get_settings
from church_ledger.errors import LedgerError
from church_ledger.models.base import get_db
from church_ledger.services.ledger_service import (
    LedgerService,
    LedgerKind,
    ENTRY_KIND,
    EXIT_KIND,
)
from church_ledger.schemas.ledger import (
    EntryCreate,
    EntryUpdate,
    EntryResponse,
    ExitCreate,
    ExitUpdate,
    ExitResponse,
)


def build_ledger_router(
    prefix: str,
    kind: LedgerKind,
    create_schema,
    update_schema,
    response_schema,
    strict_types: bool = True,
    tag: str | None = None,
) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=[tag or kind.label])

    def get_service(db: Session = Depends(get_db)) -> LedgerService:
        return LedgerService(db, kind, strict_types=strict_types)

    @router.get("", response_model=list[response_schema])
    def list_records(service: LedgerService = Depends(get_service)):
        """All records, newest date first."""
        return service.list_records()

    @router.post("", response_model=response_schema, status_code=201)
    def create_record(
        request: create_schema,
        service: LedgerService = Depends(get_service),
    ):
        try:
            record = service.create_record(request)
            service.db.commit()
            return record
        except LedgerError as e:
            service.db.rollback()
            raise http_error(e)

    @router.put("/{record_id}", response_model=response_schema)
    def update_record(
        record_id: int,
        request: update_schema,
        service: LedgerService = Depends(get_service),
    ):
        """Change date, type, amount, currency, witness or comments."""
        try:
            record = service.update_record(record_id, request)
            service.db.commit()
            return record
        except LedgerError as e:
            service.db.rollback()
            raise http_error(e)

    @router.delete("/{record_id}", status_code=204)
    def delete_record(
        record_id: int,
        service: LedgerService = Depends(get_service),
    ):
        try:
            service.delete_record(record_id)
            service.db.commit()
        except LedgerError as e:
            service.db.rollback()
            raise http_error(e)
        return Response(status_code=204)

    return router


entries_router = build_ledger_router(
    "/api/entries",
    ENTRY_KIND,
    EntryCreate,
    EntryUpdate,
    EntryResponse,
    tag="Entries",
)

exits_router = build_ledger_router(
    "/api/sorties",
    EXIT_KIND,
    ExitCreate,
    ExitUpdate,
    ExitResponse,
    strict_types=not get_settings().LEDGER_LENIENT_EXIT_TYPES,
    tag="Exits",
)
