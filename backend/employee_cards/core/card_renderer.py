"""Card Renderer — resolves a located record into the printable card model.

Invariants:
    - Pure: same record + defaults → same DisplayModel, no IO
    - Section order is Personal, BMET, Passport; row order within each is fixed
    - highlighted is True only for Recruiting Agency, Employer, Country (Personal)
    - Missing values render as "" — never "None", never an exception
    - A lookup miss yields found=False, the not-found marker and zero sections
    - Header and section logos use the same resolution (record logo or default)

Design Decisions:
    - Row layout as a table of (label, attribute, highlighted) tuples: the order
      is data, not control flow, and tests assert against the same table
    - BMET Name is the uppercased name; the Passport Name is passportName as typed
"""

from dataclasses import dataclass, field

from employee_cards.core.catalog_defaults import CatalogDefaults
from employee_cards.core.domain_types import CardSection, ImageKind, NOT_FOUND_MARKER
from employee_cards.core.employee_record import EmployeeRecord
from employee_cards.core.image_assets import (
    ImageAsset, LogoPair, resolve_logo_pair, resolve_photo,
)

SECTION_TITLES: dict[CardSection, str] = {
    CardSection.PERSONAL: "Personal",
    CardSection.BMET: "BMET",
    CardSection.PASSPORT: "Passport",
}

# (label, EmployeeRecord attribute, highlighted)
SECTION_LAYOUT: dict[CardSection, tuple[tuple[str, str, bool], ...]] = {
    CardSection.PERSONAL: (
        ("Birth Date", "birth_date", False),
        ("Passport No", "passport_no", False),
        ("Passport Issue Date", "passport_issue_date", False),
        ("Passport Expire Date", "passport_expire_date", False),
        ("Visa No", "visa_no", False),
        ("Visa Issue Date", "visa_issue_date", False),
        ("Visa Expire Date", "visa_expire_date", False),
        ("Referral No", "referral_no", False),
        ("Recruiting Agency", "recruiting_agency", True),
        ("Employer", "employer", True),
        ("Country", "country", True),
    ),
    CardSection.BMET: (
        ("BMET No", "bmet_no", False),
        ("Name", "name", False),
        ("Birth Date", "birth_date", False),
        ("Gender", "gender", False),
        ("Blood Group", "blood_group", False),
        ("NID", "nid", False),
    ),
    CardSection.PASSPORT: (
        ("Name", "passport_name", False),
        ("Passport No 1", "passport_no1", False),
    ),
}

_UPPERCASED: frozenset[tuple[CardSection, str]] = frozenset({
    (CardSection.BMET, "name"),
})


@dataclass(frozen=True)
class DisplayRow:
    label: str
    value: str
    highlighted: bool = False

    def to_dict(self) -> dict:
        return {
            "label": self.label, "value": self.value,
            "highlighted": self.highlighted,
        }


@dataclass(frozen=True)
class DisplaySection:
    section: CardSection
    title: str
    rows: tuple[DisplayRow, ...]

    def to_dict(self) -> dict:
        return {
            "section": self.section.value,
            "title": self.title,
            "rows": [row.to_dict() for row in self.rows],
        }


@dataclass(frozen=True)
class DisplayModel:
    """Fully resolved card: header, photo, logos and detail sections."""
    found: bool
    title: str
    ec_no_label: str = ""
    ec_date_label: str = ""
    photo: ImageAsset = field(default_factory=lambda: ImageAsset(ImageKind.ABSENT))
    header_logos: LogoPair | None = None
    section_logos: LogoPair | None = None
    sections: tuple[DisplaySection, ...] = ()

    @property
    def row_count(self) -> int:
        return sum(len(s.rows) for s in self.sections)

    def to_dict(self) -> dict:
        return {
            "found": self.found,
            "title": self.title,
            "ecNoLabel": self.ec_no_label,
            "ecDateLabel": self.ec_date_label,
            "photo": self.photo.to_dict(),
            "headerLogos": self.header_logos.to_dict() if self.header_logos else None,
            "sectionLogos": (
                self.section_logos.to_dict() if self.section_logos else None
            ),
            "sections": [s.to_dict() for s in self.sections],
        }


def not_found_model() -> DisplayModel:
    """Degraded model for a lookup miss: marker only, no rows."""
    return DisplayModel(found=False, title=NOT_FOUND_MARKER)


def render_card(
    record: EmployeeRecord | None, defaults: CatalogDefaults,
) -> DisplayModel:
    """Resolve a record (or a lookup miss) into a DisplayModel. Pure, no IO."""
    if record is None:
        return not_found_model()
    logos = resolve_logo_pair(record, defaults.logo_green, defaults.logo_purple)
    return DisplayModel(
        found=True,
        title=record.name,
        ec_no_label=f"EC No: {record.ec_no}",
        ec_date_label=f"EC Date: {record.ec_date}",
        photo=ImageAsset.from_value(resolve_photo(record)),
        header_logos=logos,
        section_logos=logos,
        sections=tuple(_build_section(record, s) for s in SECTION_LAYOUT),
    )


class CardRenderer:
    """Renderer bound to one set of catalog defaults."""

    def __init__(self, defaults: CatalogDefaults):
        self.defaults = defaults

    def render(self, record: EmployeeRecord | None) -> DisplayModel:
        return render_card(record, self.defaults)


def _build_section(record: EmployeeRecord, section: CardSection) -> DisplaySection:
    rows = tuple(
        DisplayRow(
            label=label,
            value=_row_value(record, section, attr),
            highlighted=highlighted,
        )
        for label, attr, highlighted in SECTION_LAYOUT[section]
    )
    return DisplaySection(section=section, title=SECTION_TITLES[section], rows=rows)


def _row_value(record: EmployeeRecord, section: CardSection, attr: str) -> str:
    value = getattr(record, attr, "") or ""
    if (section, attr) in _UPPERCASED:
        return value.upper()
    return value
