"""ORM Models — SQLAlchemy declarative models for persisted state.

Invariants:
    - All models inherit from Base (db/base.py)
    - The employee list is NOT a table: it is one JSON value in a storage slot

Design Decisions:
    - All models imported here so Base.metadata is complete before create_all
      or Alembic autogenerate runs
"""

from employee_cards.models.storage_slot import StorageSlotRow  # noqa: F401
