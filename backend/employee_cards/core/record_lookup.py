"""Record Lookup — the two identity schemes over an ordered record sequence.

Invariants:
    - find_by_key matches ec_no by exact string equality; first match wins,
      duplicates are tolerated (not an error)
    - find_by_index is bounds-checked: negative or out-of-range → None
    - parse_index accepts only a plain decimal integer; anything else → None
    - The two schemes are never reconciled: an index can point at a different
      record after the list is overwritten

Design Decisions:
    - Two named functions over one overloaded accessor: callers cannot pass an
      index where a key is expected
"""

import re
from typing import Sequence

from employee_cards.core.employee_record import EmployeeRecord

_INTEGER = re.compile(r"[+-]?\d+")


def find_by_key(
    records: Sequence[EmployeeRecord], ec_no: str | None,
) -> EmployeeRecord | None:
    """First record whose ec_no equals the key, or None."""
    if ec_no is None:
        return None
    return next((r for r in records if r.ec_no == ec_no), None)


def find_by_index(
    records: Sequence[EmployeeRecord], index: int | None,
) -> EmployeeRecord | None:
    """Record at a valid position, or None."""
    if index is None or isinstance(index, bool):
        return None
    if 0 <= index < len(records):
        return records[index]
    return None


def parse_index(raw: str | int | None) -> int | None:
    """Parse a query-string index. None when absent or not an integer."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    text = raw.strip()
    if not _INTEGER.fullmatch(text):
        return None
    return int(text)
