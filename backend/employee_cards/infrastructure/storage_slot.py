"""SQL Storage Slot — StorageSlot protocol over the storage_slots table.

Invariants:
    - read() returns the stored text or None when the key has no row
    - write() overwrites the whole value and commits (upsert by primary key)
    - Every SQLAlchemy failure is rolled back and raised as DatabaseError
    - No compare-and-swap: concurrent writers race, last write wins

Design Decisions:
    - Bound to the request's AsyncSession so reads and writes of one request
      share a connection
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from employee_cards.core.errors import DatabaseError
from employee_cards.models.storage_slot import StorageSlotRow

logger = logging.getLogger(__name__)


class SqlStorageSlot:
    """Named slots persisted as rows of storage_slots."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def read(self, key: str) -> str | None:
        try:
            result = await self.db.execute(
                select(StorageSlotRow.value).where(StorageSlotRow.key == key),
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Slot read failed: {e}", extra={"storage_key": key})
            raise DatabaseError("Slot read failed", "read")

    async def write(self, key: str, value: str) -> None:
        try:
            row = await self.db.get(StorageSlotRow, key)
            if row is None:
                self.db.add(StorageSlotRow(key=key, value=value))
            else:
                row.value = value
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Slot write failed: {e}", extra={"storage_key": key})
            raise DatabaseError("Slot write failed", "write")
