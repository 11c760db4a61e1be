"""Employee List — the ordered record sequence as the list view reads it.

Invariants:
    - Items are returned in stored order; index is the edit identity used by
      POST /api/v1/forms?index=N
    - Read-only: records change only through form submit

Design Decisions:
    - The full stored record rides along so the list page needs no second call
"""

from fastapi import APIRouter, Depends

from employee_cards.api.dependencies import get_record_store
from employee_cards.schemas.employee import EmployeeListItem
from employee_cards.services.record_store import RecordStore

router = APIRouter(prefix="/api/v1/employees", tags=["employees"])


@router.get("", response_model=list[EmployeeListItem])
async def list_employees(store: RecordStore = Depends(get_record_store)):
    """List all employee records with their positions."""
    records = await store.load()
    return [
        EmployeeListItem(
            index=i, ec_no=r.ec_no, name=r.name,
            ec_date=r.ec_date, record=r.to_dict(),
        )
        for i, r in enumerate(records)
    ]
