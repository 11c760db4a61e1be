"""Card View — printable card model looked up by EC No.

Invariants:
    - Lookup is exact ecNo match, first record wins
    - A miss (or a missing ecNo parameter) is a 200 with found=false and the
      not-found marker, never a 404

Design Decisions:
    - Rendering is the pure CardRenderer; the route only loads and looks up
"""

import logging

from fastapi import APIRouter, Depends, Query

from employee_cards.api.dependencies import get_card_renderer, get_record_store
from employee_cards.core.card_renderer import CardRenderer
from employee_cards.services.record_store import RecordStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/cards", tags=["cards"])


@router.get("")
async def get_card(
    ec_no: str | None = Query(None, alias="ecNo"),
    store: RecordStore = Depends(get_record_store),
    renderer: CardRenderer = Depends(get_card_renderer),
):
    """Render the card for one EC No."""
    records = await store.load()
    record = store.find_by_key(records, ec_no)
    if record is None:
        logger.info("Card lookup miss", extra={"ec_no": ec_no})
    return renderer.render(record).to_dict()
