from __future__ import annotations

from datetime import date
from typing import Optional

from sqlalchemy import Date, Index, Text
from sqlalchemy.orm import Mapped, mapped_column

from scheduling_api.db.base import Base, IntegerPkMixin, TenantMixin, TimestampMixin


class Client(IntegerPkMixin, TenantMixin, TimestampMixin, Base):
    """Client (customer) record owned by a single tenant."""
    __tablename__ = "clients"
    __table_args__ = (
        Index("ix_clients_user_id_name", "user_id", "name"),
    )

    name: Mapped[str] = mapped_column(Text, nullable=False)
    phone: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    email: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    birth_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)  # day precision
    gender: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
