"""Form Service — drives FormState sessions against the record store and image editor.

Invariants:
    - One FormState per open form, keyed by form_id, in _open_forms
    - Mode and index are captured when the form opens and never change
    - An image slot changes only after the editor returns a complete image;
      a failed edit leaves the prior value in place
    - submit() reloads the list, applies the record, saves the full sequence,
      closes the form and returns the list-view path to navigate to
    - close() drops a form without saving; at most max_open_forms stay open,
      opening one more evicts the oldest

Design Decisions:
    - _open_forms as module-level dict: single-process server, forms are lost
      on restart (the browser simply reopens the form)
    - The list is re-read at submit rather than kept from open: still
      read-then-write without locking, but the window for lost updates is smaller
"""

import logging
import uuid
from dataclasses import dataclass
from typing import Any, Mapping

from employee_cards.core.domain_types import FormId, FormMode, ImageSlot
from employee_cards.core.employee_record import EmployeeRecord
from employee_cards.core.errors import ErrorContext, ImageEditError, ResourceNotFoundError
from employee_cards.core.form_controller import (
    FormState, accept_image, apply_submit, build_record, open_form,
)
from employee_cards.core.repository_protocols import ImageEditor
from employee_cards.infrastructure.image_editor import Crop, decode_data_url
from employee_cards.services.record_store import RecordStore

logger = logging.getLogger(__name__)

_open_forms: dict[FormId, FormState] = {}


@dataclass(frozen=True)
class SubmitResult:
    record: EmployeeRecord
    index: int
    persisted: bool
    navigate_to: str


class FormService:
    """Open, edit images of, and submit employee forms."""

    def __init__(
        self, store: RecordStore, editor: ImageEditor, list_view_path: str,
        max_open_forms: int = 100,
    ):
        self.store = store
        self.editor = editor
        self.list_view_path = list_view_path
        self.max_open_forms = max_open_forms

    async def open(self, raw_index: str | None) -> tuple[FormId, FormState]:
        records = await self.store.load()
        state = open_form(records, raw_index)
        form_id = FormId(uuid.uuid4().hex)
        self._evict_oldest()
        _open_forms[form_id] = state
        logger.info(
            f"Form opened in {state.mode.value} mode",
            extra={"form_id": form_id, "record_index": state.index},
        )
        return form_id, state

    def get(self, form_id: str) -> FormState:
        state = _open_forms.get(FormId(form_id))
        if state is None:
            raise ResourceNotFoundError(
                "Form", form_id, ErrorContext(form_id=form_id),
            )
        return state

    def close(self, form_id: str) -> None:
        """Discard an open form without saving."""
        self.get(form_id)
        _open_forms.pop(FormId(form_id), None)
        logger.info("Form closed", extra={"form_id": form_id})

    def _evict_oldest(self) -> None:
        # dicts keep insertion order: the first key is the oldest form
        while _open_forms and len(_open_forms) >= self.max_open_forms:
            oldest = next(iter(_open_forms))
            _open_forms.pop(oldest)
            logger.warning(
                "Open form limit reached, oldest form evicted",
                extra={"form_id": oldest},
            )

    async def attach_image(
        self, form_id: str, slot: ImageSlot, source: str, crop: Crop | None = None,
    ) -> FormState:
        """Run the image editor on a data URL source and store the result in the slot."""
        self.get(form_id)
        try:
            edited = await self.editor.edit(decode_data_url(source, slot.value), crop)
        except ImageEditError as e:
            e.slot = slot.value
            e.context.image_slot = slot.value
            e.context.form_id = form_id
            raise
        # The form may have been submitted while the editor was running
        state = self.get(form_id)
        if accept_image(state, slot, edited):
            logger.info(
                "Image slot updated",
                extra={"form_id": form_id, "image_slot": slot.value},
            )
        return state

    async def submit(self, form_id: str, raw_fields: Mapping[str, Any]) -> SubmitResult:
        state = self.get(form_id)
        record = build_record(state, raw_fields)
        records = await self.store.load()
        outcome = apply_submit(records, state, record)
        if state.mode is FormMode.EDIT and not outcome.replaced:
            logger.warning(
                f"Edit index {state.index} no longer exists, record appended",
                extra={"form_id": form_id, "record_index": outcome.index},
            )
        persisted = await self.store.save(outcome.records)
        _open_forms.pop(FormId(form_id), None)
        logger.info(
            "Form submitted",
            extra={
                "form_id": form_id, "record_index": outcome.index,
                "ec_no": record.ec_no,
            },
        )
        return SubmitResult(
            record=record, index=outcome.index,
            persisted=persisted, navigate_to=self.list_view_path,
        )
