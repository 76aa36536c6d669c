"""
User model.

A named operator of the cash register. The first account,
seeded at bootstrap, is the administrator.
"""

from datetime import datetime

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from church_ledger.models.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)
    username: Mapped[str] = mapped_column(
        String(255), unique=True, nullable=False
    )
    # Salted digest, never the plaintext
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )

    # No delete cascade: removing a user keeps their records
    # and clears the owner reference instead.
    entries: Mapped[list["Entry"]] = relationship(back_populates="user")
    exits: Mapped[list["Exit"]] = relationship(back_populates="user")

    def __repr__(self) -> str:
        return f"<User {self.id} {self.username}>"
