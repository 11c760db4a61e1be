"""Catalog Loader — settings and seed file into CatalogDefaults."""

import json

from employee_cards.config import Settings
from employee_cards.core.catalog_defaults import BUILTIN_SEED, DEFAULT_LOGO_GREEN
from employee_cards.infrastructure.catalog_loader import load_catalog_defaults


def _settings(**overrides) -> Settings:
    return Settings(database_url="sqlite+aiosqlite:///:memory:", **overrides)


def test_defaults_use_builtin_seed():
    defaults = load_catalog_defaults(_settings())
    assert defaults.seed_records == BUILTIN_SEED
    assert defaults.storage_key == "employees"
    assert defaults.logo_green == DEFAULT_LOGO_GREEN


def test_settings_override_logos_and_key():
    defaults = load_catalog_defaults(
        _settings(logo_green="g.png", logo_purple="p.png", storage_key="staff"),
    )
    assert (defaults.logo_green, defaults.logo_purple) == ("g.png", "p.png")
    assert defaults.storage_key == "staff"


def test_seed_file_replaces_builtin(tmp_path):
    path = tmp_path / "seed.json"
    path.write_text(json.dumps([{"ecNo": "F1", "name": "File"}, 3, {"ecNo": "F2"}]))
    defaults = load_catalog_defaults(_settings(seed_path=str(path)))
    assert [r.ec_no for r in defaults.seed_records] == ["F1", "F2"]


def test_empty_seed_file_gives_empty_seed(tmp_path):
    path = tmp_path / "seed.json"
    path.write_text("[]")
    assert load_catalog_defaults(_settings(seed_path=str(path))).seed_records == ()


def test_unreadable_seed_falls_back(tmp_path):
    missing = load_catalog_defaults(_settings(seed_path=str(tmp_path / "nope.json")))
    assert missing.seed_records == BUILTIN_SEED

    bad = tmp_path / "bad.json"
    bad.write_text('{"ecNo": "not a list"}')
    assert load_catalog_defaults(_settings(seed_path=str(bad))).seed_records == BUILTIN_SEED


def test_postgres_url_is_converted():
    settings = Settings(database_url="postgresql://u:p@host/db")
    assert settings.database_url == "postgresql+asyncpg://u:p@host/db"
