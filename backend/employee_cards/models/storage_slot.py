"""Storage Slot ORM — one durable named value per key.

Invariants:
    - key is the primary key (one row per named slot)
    - value holds the full serialized payload (overwritten, never patched)
    - updated_at set on every write

Design Decisions:
    - Text column over JSON column: the stored text is exactly what was
      written, so a corrupt payload stays observable instead of failing on load
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from employee_cards.db.base import Base


class StorageSlotRow(Base):
    """Named key-value slot."""
    __tablename__ = "storage_slots"

    key: Mapped[str] = mapped_column(String(100), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False, default="")
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
