"""Employee Record — the canonical card entity and its stored JSON shape.

Invariants:
    - Every text field is a str ("" when missing), never None
    - ec_date is stored in display form (DD/Mon/YYYY); the other dates are ISO
    - Optional image keys (photoData, photo, logoLeft, logoRight) are omitted
      from to_dict() when empty — absence drives the fallback chains
    - from_dict() is lenient: unknown keys are ignored, missing keys default,
      non-string scalars are stringified
    - A record loaded with from_dict() keeps its stored mapping; to_stored()
      writes that mapping back unchanged until the record is rebuilt

Design Decisions:
    - Frozen dataclass, not ORM or Pydantic: the core stays free of IO and
      framework imports; the API boundary has its own Pydantic schemas
    - Python attributes are snake_case; the stored/wire keys are camelCase and
      listed once in TEXT_FIELDS / IMAGE_FIELDS
"""

from dataclasses import dataclass, field, replace
from typing import Any, Mapping

# (attribute, stored key) in stored field order
TEXT_FIELDS: tuple[tuple[str, str], ...] = (
    ("ec_no", "ecNo"),
    ("name", "name"),
    ("ec_date", "ecDate"),
    ("birth_date", "birthDate"),
    ("passport_no", "passportNo"),
    ("passport_issue_date", "passportIssueDate"),
    ("passport_expire_date", "passportExpireDate"),
    ("visa_no", "visaNo"),
    ("visa_issue_date", "visaIssueDate"),
    ("visa_expire_date", "visaExpireDate"),
    ("referral_no", "referralNo"),
    ("recruiting_agency", "recruitingAgency"),
    ("employer", "employer"),
    ("country", "country"),
    ("bmet_no", "bmetNo"),
    ("gender", "gender"),
    ("blood_group", "bloodGroup"),
    ("nid", "nid"),
    ("passport_name", "passportName"),
    ("passport_no1", "passportNo1"),
)

IMAGE_FIELDS: tuple[tuple[str, str], ...] = (
    ("photo_data", "photoData"),
    ("photo", "photo"),
    ("logo_left", "logoLeft"),
    ("logo_right", "logoRight"),
)

# Date-picker fields: submitted as-is, never trimmed
ISO_DATE_KEYS: frozenset[str] = frozenset({
    "birthDate", "passportIssueDate", "passportExpireDate",
    "visaIssueDate", "visaExpireDate",
})


@dataclass(frozen=True)
class EmployeeRecord:
    """One employee identity card. Pure value object, no IO."""

    ec_no: str = ""
    name: str = ""
    ec_date: str = ""
    birth_date: str = ""
    passport_no: str = ""
    passport_issue_date: str = ""
    passport_expire_date: str = ""
    visa_no: str = ""
    visa_issue_date: str = ""
    visa_expire_date: str = ""
    referral_no: str = ""
    recruiting_agency: str = ""
    employer: str = ""
    country: str = ""
    bmet_no: str = ""
    gender: str = ""
    blood_group: str = ""
    nid: str = ""
    passport_name: str = ""
    passport_no1: str = ""

    # === Images (None = key absent) ===
    photo_data: str | None = None
    photo: str | None = None
    logo_left: str | None = None
    logo_right: str | None = None

    # Mapping this record was loaded from (None for records built in memory)
    stored: Mapping[str, Any] | None = field(
        default=None, compare=False, repr=False,
    )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EmployeeRecord":
        """Build a record from a stored/wire dict. Never raises on shape."""
        values: dict[str, str | None] = {}
        for attr, key in TEXT_FIELDS:
            values[attr] = _as_text(data.get(key))
        for attr, key in IMAGE_FIELDS:
            values[attr] = _as_text(data.get(key)) or None
        return cls(**values, stored=dict(data))

    def to_dict(self) -> dict[str, str]:
        """Serialize to the stored camelCase shape, omitting empty image keys."""
        out = {key: getattr(self, attr) for attr, key in TEXT_FIELDS}
        for attr, key in IMAGE_FIELDS:
            value = getattr(self, attr)
            if value:
                out[key] = value
        return out

    def to_stored(self) -> dict[str, Any]:
        """Mapping to persist: the loaded mapping as-is, else to_dict()."""
        if self.stored is not None:
            return dict(self.stored)
        return self.to_dict()

    def with_images(self, **images: str | None) -> "EmployeeRecord":
        """Copy with image attributes replaced; empty values become absent."""
        return replace(
            self, stored=None, **{k: (v or None) for k, v in images.items()},
        )


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""
