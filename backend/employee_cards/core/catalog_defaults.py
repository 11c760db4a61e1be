"""Catalog Defaults — explicit process-wide configuration for store and renderer.

Invariants:
    - Built once at startup, read-only afterwards (frozen)
    - seed_records is used only when the persisted slot is empty
    - logo_green / logo_purple are the fallbacks for logoRight / logoLeft

Design Decisions:
    - Passed into RecordStore and CardRenderer instead of module globals, so
      tests construct their own without patching
    - BUILTIN_SEED and the default logos live here as plain data; the shell may
      replace them from settings (seed_path, LOGO_GREEN, LOGO_PURPLE)
"""

from dataclasses import dataclass, field

from employee_cards.core.employee_record import EmployeeRecord

DEFAULT_STORAGE_KEY = "employees"

DEFAULT_LOGO_GREEN = (
    "data:image/svg+xml,%3Csvg xmlns='http://www.w3.org/2000/svg' "
    "width='64' height='64'%3E%3Ccircle cx='32' cy='32' r='30' "
    "fill='%232e7d32'/%3E%3C/svg%3E"
)
DEFAULT_LOGO_PURPLE = (
    "data:image/svg+xml,%3Csvg xmlns='http://www.w3.org/2000/svg' "
    "width='64' height='64'%3E%3Ccircle cx='32' cy='32' r='30' "
    "fill='%236a1b9a'/%3E%3C/svg%3E"
)

BUILTIN_SEED: tuple[EmployeeRecord, ...] = (
    EmployeeRecord(
        ec_no="EC-0001",
        name="Md. Rahim Uddin",
        ec_date="30/Sep/2025",
        birth_date="1994-03-12",
        passport_no="A01234567",
        passport_issue_date="2023-01-15",
        passport_expire_date="2033-01-14",
        visa_no="V-998877",
        visa_issue_date="2025-06-01",
        visa_expire_date="2027-05-31",
        referral_no="RF-1021",
        recruiting_agency="Green Line Overseas",
        employer="Al Noor Construction",
        country="Saudi Arabia",
        bmet_no="BMET-55120",
        gender="Male",
        blood_group="B+",
        nid="1994123456789",
        passport_name="MD RAHIM UDDIN",
        passport_no1="A01234567",
    ),
)


@dataclass(frozen=True)
class CatalogDefaults:
    """Seed dataset, default logos and the slot name for one process."""
    storage_key: str = DEFAULT_STORAGE_KEY
    seed_records: tuple[EmployeeRecord, ...] = field(default=BUILTIN_SEED)
    logo_green: str = DEFAULT_LOGO_GREEN
    logo_purple: str = DEFAULT_LOGO_PURPLE
