"""Image Assets — classification and fallback resolution for card images.

Invariants:
    - Photo priority: photoData, then photo, then nothing (None — caller hides the image)
    - Logos resolve independently: GREEN → logoRight or the green default,
      PURPLE → logoLeft or the purple default. There is no referenced form for logos
    - Empty string and absent are equivalent for every image value

Design Decisions:
    - ImageAsset carries the kind next to the value so the display layer can
      tell an embedded data URL from an external locator without re-parsing
"""

from dataclasses import dataclass

from employee_cards.core.domain_types import ImageKind, LogoSide
from employee_cards.core.employee_record import EmployeeRecord

_DATA_URL_PREFIX = "data:"


@dataclass(frozen=True)
class ImageAsset:
    """Resolved image value with its carrying kind."""
    kind: ImageKind
    value: str | None = None

    @classmethod
    def from_value(cls, value: str | None) -> "ImageAsset":
        if not value:
            return cls(ImageKind.ABSENT)
        if value.startswith(_DATA_URL_PREFIX):
            return cls(ImageKind.EMBEDDED, value)
        return cls(ImageKind.REFERENCED, value)

    @property
    def is_absent(self) -> bool:
        return self.kind is ImageKind.ABSENT

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "src": self.value}


@dataclass(frozen=True)
class LogoPair:
    """Green and purple logos for one card region (header or section title)."""
    green: str
    purple: str

    def to_dict(self) -> dict:
        return {LogoSide.GREEN.value: self.green, LogoSide.PURPLE.value: self.purple}


def resolve_photo(record: EmployeeRecord) -> str | None:
    """Embedded photo if present, else referenced photo, else None."""
    if record.photo_data:
        return record.photo_data
    if record.photo:
        return record.photo
    return None


def resolve_logo(
    record: EmployeeRecord, side: LogoSide, global_green: str, global_purple: str,
) -> str:
    """Record logo for the given side, falling back to the matching default."""
    if side is LogoSide.GREEN:
        return record.logo_right or global_green
    return record.logo_left or global_purple


def resolve_logo_pair(
    record: EmployeeRecord, global_green: str, global_purple: str,
) -> LogoPair:
    return LogoPair(
        green=resolve_logo(record, LogoSide.GREEN, global_green, global_purple),
        purple=resolve_logo(record, LogoSide.PURPLE, global_green, global_purple),
    )
