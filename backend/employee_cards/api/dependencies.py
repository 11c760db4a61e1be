"""API Dependencies — process singletons and per-request service wiring.

Invariants:
    - init_catalog() runs once in the lifespan, after init_db()
    - The RecordMirror starts as the seed dataset and is shared by all requests
    - Every request gets its own RecordStore bound to its own DB session

Design Decisions:
    - Module-level singletons like db_manager: initialized on startup, never at import
    - Services built through Depends so tests override get_db only
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from employee_cards.config import get_settings
from employee_cards.core.card_renderer import CardRenderer
from employee_cards.core.catalog_defaults import CatalogDefaults
from employee_cards.infrastructure.database import get_db
from employee_cards.infrastructure.image_editor import SquareImageEditor
from employee_cards.infrastructure.storage_slot import SqlStorageSlot
from employee_cards.services.form_service import FormService
from employee_cards.services.record_store import RecordMirror, RecordStore

# Singletons (initialized on startup)
catalog_defaults: CatalogDefaults | None = None
record_mirror: RecordMirror | None = None


def init_catalog(defaults: CatalogDefaults) -> None:
    global catalog_defaults, record_mirror
    catalog_defaults = defaults
    record_mirror = RecordMirror(defaults.seed_records)


def get_catalog() -> CatalogDefaults:
    if catalog_defaults is None:
        raise RuntimeError("Catalog defaults not initialized")
    return catalog_defaults


def get_mirror() -> RecordMirror:
    if record_mirror is None:
        raise RuntimeError("Record mirror not initialized")
    return record_mirror


def get_record_store(
    db: AsyncSession = Depends(get_db),
    defaults: CatalogDefaults = Depends(get_catalog),
    mirror: RecordMirror = Depends(get_mirror),
) -> RecordStore:
    return RecordStore(SqlStorageSlot(db), defaults, mirror)


def get_card_renderer(
    defaults: CatalogDefaults = Depends(get_catalog),
) -> CardRenderer:
    return CardRenderer(defaults)


def get_form_service(
    store: RecordStore = Depends(get_record_store),
) -> FormService:
    settings = get_settings()
    editor = SquareImageEditor(
        size=settings.image_edit_size, max_source_bytes=settings.max_image_bytes,
    )
    return FormService(
        store, editor, settings.list_view_path,
        max_open_forms=settings.max_open_forms,
    )
