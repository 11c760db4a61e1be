"""Cards API — card model by EC No, misses and logo fallbacks."""

import pytest

from employee_cards.core.catalog_defaults import CatalogDefaults
from employee_cards.core.domain_types import NOT_FOUND_MARKER
from employee_cards.core.employee_record import EmployeeRecord


@pytest.fixture
def catalog():
    return CatalogDefaults(
        seed_records=(
            EmployeeRecord(
                ec_no="E1", name="Md. Rahim", ec_date="30/Sep/2025",
                employer="Al Noor", photo="photos/e1.png", logo_left="L",
            ),
            EmployeeRecord(ec_no="E1", name="Duplicate"),
        ),
        logo_green="G", logo_purple="P",
    )


async def test_card_for_known_ec_no(client):
    response = await client.get("/api/v1/cards", params={"ecNo": "E1"})
    assert response.status_code == 200
    card = response.json()
    assert card["found"] is True
    assert card["title"] == "Md. Rahim"
    assert card["ecNoLabel"] == "EC No: E1"
    assert card["ecDateLabel"] == "EC Date: 30/Sep/2025"
    assert card["photo"] == {"kind": "referenced", "src": "photos/e1.png"}
    assert card["headerLogos"] == {"green": "G", "purple": "L"}
    assert [s["title"] for s in card["sections"]] == ["Personal", "BMET", "Passport"]


async def test_duplicate_ec_no_returns_first(client):
    card = (await client.get("/api/v1/cards", params={"ecNo": "E1"})).json()
    assert card["title"] == "Md. Rahim"


async def test_bmet_name_uppercased(client):
    card = (await client.get("/api/v1/cards", params={"ecNo": "E1"})).json()
    bmet = card["sections"][1]
    assert {"label": "Name", "value": "MD. RAHIM", "highlighted": False} in bmet["rows"]


@pytest.mark.parametrize("params", [{"ecNo": "NOPE"}, {}])
async def test_miss_returns_marker_without_rows(client, params):
    response = await client.get("/api/v1/cards", params=params)
    assert response.status_code == 200
    card = response.json()
    assert card["found"] is False
    assert card["title"] == NOT_FOUND_MARKER
    assert card["sections"] == []
