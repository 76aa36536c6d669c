"""
Entry and exit models.

Entries record incoming funds (offerings, tithes). Exits record
outgoing funds. Both share the same columns except for the
names of their date and type fields, and exits require a comment.
"""

from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import String, Date, DateTime, Numeric, Text, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship, declared_attr

from church_ledger.models.base import Base


class LedgerRecordMixin:
    """Columns common to entries and exits."""

    id: Mapped[int] = mapped_column(primary_key=True)
    code: Mapped[str] = mapped_column(
        String(50), unique=True, nullable=False
    )
    amount: Mapped[Decimal] = mapped_column(
        Numeric(15, 2), nullable=False
    )
    currency: Mapped[str] = mapped_column(String(10), nullable=False)
    witness: Mapped[str | None] = mapped_column(
        String(255), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )

    @declared_attr
    def user_id(cls) -> Mapped[int | None]:
        return mapped_column(
            ForeignKey("users.id", ondelete="SET NULL"),
            nullable=True,
            index=True,
        )


class Entry(LedgerRecordMixin, Base):
    __tablename__ = "entries"

    entry_date: Mapped[date] = mapped_column(Date, nullable=False)
    offering_type: Mapped[str] = mapped_column(String(255), nullable=False)
    comments: Mapped[str | None] = mapped_column(Text, nullable=True)

    user: Mapped["User | None"] = relationship(back_populates="entries")

    def __repr__(self) -> str:
        return (
            f"<Entry {self.code} {self.offering_type} "
            f"{self.amount} {self.currency}>"
        )


class Exit(LedgerRecordMixin, Base):
    __tablename__ = "exits"

    exit_date: Mapped[date] = mapped_column(Date, nullable=False)
    transaction_type: Mapped[str] = mapped_column(
        String(255), nullable=False
    )
    comments: Mapped[str] = mapped_column(Text, nullable=False)

    user: Mapped["User | None"] = relationship(back_populates="exits")

    def __repr__(self) -> str:
        return (
            f"<Exit {self.code} {self.transaction_type} "
            f"{self.amount} {self.currency}>"
        )
