"""Image Assets — photo priority chain and per-side logo defaults."""

from employee_cards.core.domain_types import ImageKind, LogoSide
from employee_cards.core.employee_record import EmployeeRecord
from employee_cards.core.image_assets import (
    ImageAsset, resolve_logo, resolve_logo_pair, resolve_photo,
)

G = "green-default"
P = "purple-default"


def test_photo_data_wins_over_photo():
    assert resolve_photo(EmployeeRecord(photo_data="A", photo="B")) == "A"


def test_photo_used_when_no_photo_data():
    assert resolve_photo(EmployeeRecord(photo="B")) == "B"


def test_no_photo_resolves_to_none():
    assert resolve_photo(EmployeeRecord()) is None


def test_empty_photo_data_falls_through():
    record = EmployeeRecord.from_dict({"photoData": "", "photo": "B"})
    assert resolve_photo(record) == "B"


def test_green_uses_logo_right():
    assert resolve_logo(EmployeeRecord(logo_right="X"), LogoSide.GREEN, G, P) == "X"


def test_green_defaults_when_logo_right_missing():
    assert resolve_logo(EmployeeRecord(), LogoSide.GREEN, G, P) == G


def test_purple_defaults_when_logo_left_missing():
    assert resolve_logo(EmployeeRecord(), LogoSide.PURPLE, G, P) == P


def test_purple_uses_logo_left_not_logo_right():
    record = EmployeeRecord(logo_left="L", logo_right="R")
    assert resolve_logo(record, LogoSide.PURPLE, G, P) == "L"
    assert resolve_logo(record, LogoSide.GREEN, G, P) == "R"


def test_logo_sides_resolve_independently():
    pair = resolve_logo_pair(EmployeeRecord(logo_left="L"), G, P)
    assert pair.purple == "L"
    assert pair.green == G
    assert pair.to_dict() == {"green": G, "purple": "L"}


def test_image_asset_classifies_values():
    assert ImageAsset.from_value("data:image/png;base64,AA").kind is ImageKind.EMBEDDED
    assert ImageAsset.from_value("https://cdn/p.png").kind is ImageKind.REFERENCED
    assert ImageAsset.from_value(None).is_absent
    assert ImageAsset.from_value("").to_dict() == {"kind": "absent", "src": None}
