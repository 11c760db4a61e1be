"""Card Renderer — display model for found records and lookup misses.

Tests:
    - Header labels, photo and logos on a found record
    - Section order, row order, highlighted rows and BMET uppercasing
    - A miss renders the not-found marker with zero rows
    - Missing values render as "" instead of failing
"""

from employee_cards.core.card_renderer import (
    SECTION_LAYOUT, CardRenderer, render_card,
)
from employee_cards.core.catalog_defaults import CatalogDefaults
from employee_cards.core.domain_types import CardSection, ImageKind, NOT_FOUND_MARKER
from employee_cards.core.employee_record import EmployeeRecord

DEFAULTS = CatalogDefaults(seed_records=(), logo_green="G", logo_purple="P")


def _record(**overrides) -> EmployeeRecord:
    values = dict(
        ec_no="E1", name="Md. Rahim", ec_date="05/Jan/2025",
        recruiting_agency="Agency", employer="Employer", country="KSA",
        passport_name="MD RAHIM", passport_no1="A1",
    )
    values.update(overrides)
    return EmployeeRecord(**values)


def test_header_labels():
    model = render_card(_record(), DEFAULTS)
    assert model.found is True
    assert model.title == "Md. Rahim"
    assert model.ec_no_label == "EC No: E1"
    assert model.ec_date_label == "EC Date: 05/Jan/2025"


def test_sections_in_fixed_order():
    model = render_card(_record(), DEFAULTS)
    assert [s.section for s in model.sections] == [
        CardSection.PERSONAL, CardSection.BMET, CardSection.PASSPORT,
    ]
    assert [s.title for s in model.sections] == ["Personal", "BMET", "Passport"]


def test_rows_follow_layout():
    model = render_card(_record(), DEFAULTS)
    for section in model.sections:
        labels = [row.label for row in section.rows]
        assert labels == [label for label, _, _ in SECTION_LAYOUT[section.section]]
    assert model.row_count == 19


def test_only_agency_employer_country_are_highlighted():
    model = render_card(_record(), DEFAULTS)
    highlighted = [
        row.label for s in model.sections for row in s.rows if row.highlighted
    ]
    assert highlighted == ["Recruiting Agency", "Employer", "Country"]


def test_bmet_name_is_uppercased():
    bmet = render_card(_record(), DEFAULTS).sections[1]
    name_row = next(row for row in bmet.rows if row.label == "Name")
    assert name_row.value == "MD. RAHIM"


def test_passport_name_is_as_typed():
    passport = render_card(_record(passport_name="Md Rahim"), DEFAULTS).sections[2]
    assert passport.rows[0].value == "Md Rahim"
    assert passport.rows[1].value == "A1"


def test_missing_values_render_empty():
    model = render_card(EmployeeRecord(ec_no="E1"), DEFAULTS)
    values = [row.value for s in model.sections for row in s.rows]
    assert all(v == "" for v in values)
    assert model.title == ""
    assert model.ec_date_label == "EC Date: "


def test_logos_fall_back_to_defaults():
    model = render_card(_record(logo_left="L"), DEFAULTS)
    assert model.header_logos.green == "G"
    assert model.header_logos.purple == "L"
    assert model.section_logos == model.header_logos


def test_photo_kinds():
    embedded = render_card(_record(photo_data="data:image/png;base64,AA"), DEFAULTS)
    referenced = render_card(_record(photo="photos/e1.png"), DEFAULTS)
    absent = render_card(_record(), DEFAULTS)
    assert embedded.photo.kind is ImageKind.EMBEDDED
    assert referenced.photo.kind is ImageKind.REFERENCED
    assert absent.photo.is_absent


def test_miss_renders_marker_and_no_rows():
    model = CardRenderer(DEFAULTS).render(None)
    assert model.found is False
    assert model.title == NOT_FOUND_MARKER
    assert model.row_count == 0
    assert model.photo.is_absent


def test_to_dict_shape():
    out = render_card(_record(), DEFAULTS).to_dict()
    assert out["found"] is True
    assert out["ecNoLabel"] == "EC No: E1"
    assert out["headerLogos"] == {"green": "G", "purple": "P"}
    assert out["photo"] == {"kind": "absent", "src": None}
    assert out["sections"][0]["section"] == "personal"
    assert out["sections"][0]["rows"][8] == {
        "label": "Recruiting Agency", "value": "Agency", "highlighted": True,
    }


def test_miss_to_dict_has_no_logos_or_sections():
    out = render_card(None, DEFAULTS).to_dict()
    assert out["title"] == NOT_FOUND_MARKER
    assert out["headerLogos"] is None
    assert out["sections"] == []
