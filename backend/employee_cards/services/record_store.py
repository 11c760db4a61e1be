"""Record Store — ordered employee list persisted as one JSON value in a storage slot.

Invariants:
    - load(): absent (or empty) slot → mirror contents (the seed until the first
      save), persisted immediately; corrupt slot → [] and an ERROR log, no seed
      fallback; unreadable slot → [] and an ERROR log
    - save(): overwrites the whole slot and always refreshes the mirror, even
      when the write fails
    - Entries the caller did not rebuild are written back exactly as loaded:
      unknown keys, numeric values and omitted keys survive a save
    - Persistence errors are logged and reported as a False return, never raised
    - No locking or compare-and-swap: two writers race and the last one wins

Design Decisions:
    - RecordMirror is the process-wide stand-in for the page-global list that
      other views read in the same session; it is created from the seed at startup
    - Stored JSON uses compact separators and camelCase keys so the slot stays
      readable by the browser pages
"""

import json
import logging
from typing import Sequence

from employee_cards.core.catalog_defaults import CatalogDefaults
from employee_cards.core.employee_record import EmployeeRecord
from employee_cards.core.errors import DatabaseError
from employee_cards.core.record_lookup import find_by_index, find_by_key
from employee_cards.core.repository_protocols import StorageSlot

logger = logging.getLogger(__name__)


class RecordMirror:
    """In-memory copy of the latest list (seed until the first save)."""

    def __init__(self, records: Sequence[EmployeeRecord] = ()):
        self._records = list(records)

    def snapshot(self) -> list[EmployeeRecord]:
        return list(self._records)

    def replace(self, records: Sequence[EmployeeRecord]) -> None:
        self._records = list(records)


class RecordStore:
    """Load/save the ordered record sequence; lookups by key and by position."""

    find_by_key = staticmethod(find_by_key)
    find_by_index = staticmethod(find_by_index)

    def __init__(
        self, slot: StorageSlot, defaults: CatalogDefaults, mirror: RecordMirror,
    ):
        self.slot = slot
        self.defaults = defaults
        self.mirror = mirror

    @property
    def key(self) -> str:
        return self.defaults.storage_key

    async def load(self) -> list[EmployeeRecord]:
        try:
            stored = await self.slot.read(self.key)
        except DatabaseError as e:
            logger.error(
                f"Record list unreadable: {e.message}",
                extra={"storage_key": self.key, "error_code": e.code},
            )
            return []
        if not stored:
            records = self.mirror.snapshot()
            logger.info(
                f"Slot empty, persisting {len(records)} default records",
                extra={"storage_key": self.key},
            )
            await self._persist(records)
            return records
        return self._parse(stored)

    async def save(self, records: Sequence[EmployeeRecord]) -> bool:
        """Overwrite the slot with the full sequence. False if the write failed."""
        self.mirror.replace(records)
        return await self._persist(records)

    async def _persist(self, records: Sequence[EmployeeRecord]) -> bool:
        payload = json.dumps(
            [r.to_stored() for r in records],
            ensure_ascii=False, separators=(",", ":"),
        )
        try:
            await self.slot.write(self.key, payload)
        except DatabaseError as e:
            logger.error(
                f"Record list not persisted: {e.message}",
                extra={"storage_key": self.key, "error_code": e.code},
            )
            return False
        return True

    def _parse(self, stored: str) -> list[EmployeeRecord]:
        try:
            data = json.loads(stored)
        except ValueError as e:
            logger.error(
                f"Stored record list is not valid JSON: {e}",
                extra={"storage_key": self.key},
            )
            return []
        if not isinstance(data, list):
            logger.error(
                "Stored record list is not a JSON array",
                extra={"storage_key": self.key},
            )
            return []
        records = []
        for position, item in enumerate(data):
            if not isinstance(item, dict):
                logger.warning(
                    f"Stored entry {position} is not an object, skipped",
                    extra={"storage_key": self.key, "record_index": position},
                )
                continue
            records.append(EmployeeRecord.from_dict(item))
        return records
