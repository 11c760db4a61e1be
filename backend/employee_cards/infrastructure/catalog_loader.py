"""Catalog Loader — builds CatalogDefaults from settings and an optional seed file.

Invariants:
    - A seed file must hold a JSON array of record objects; anything else is
      logged and the built-in seed is used instead
    - Non-object array entries are skipped with a warning
    - Called once during startup, after logging is configured

Design Decisions:
    - Seed read synchronously: a small local file read once before serving
"""

import json
import logging
from pathlib import Path

from employee_cards.config import Settings
from employee_cards.core.catalog_defaults import BUILTIN_SEED, CatalogDefaults
from employee_cards.core.employee_record import EmployeeRecord

logger = logging.getLogger(__name__)


def load_catalog_defaults(settings: Settings) -> CatalogDefaults:
    seed = BUILTIN_SEED
    if settings.seed_path:
        loaded = _read_seed_file(Path(settings.seed_path))
        if loaded is not None:
            seed = loaded
    return CatalogDefaults(
        storage_key=settings.storage_key,
        seed_records=seed,
        logo_green=settings.logo_green,
        logo_purple=settings.logo_purple,
    )


def _read_seed_file(path: Path) -> tuple[EmployeeRecord, ...] | None:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.error(f"Seed file {path} unreadable, using built-in seed: {e}")
        return None
    if not isinstance(data, list):
        logger.error(f"Seed file {path} is not a JSON array, using built-in seed")
        return None
    records = []
    for position, item in enumerate(data):
        if not isinstance(item, dict):
            logger.warning(
                f"Seed entry {position} is not an object, skipped",
                extra={"record_index": position},
            )
            continue
        records.append(EmployeeRecord.from_dict(item))
    logger.info(f"Loaded {len(records)} seed records from {path}")
    return tuple(records)
