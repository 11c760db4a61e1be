"""Form Controller — create/edit state machine for the employee form.

Invariants:
    - Mode is decided once, in open_form: EDIT only when the index resolves to
      an existing record, CREATE otherwise. Nothing changes it afterwards
    - EDIT prefill reverse-maps the record; ecDate goes through to_iso so the
      date control can edit it
    - build_record trims free text, leaves date-picker values as submitted,
      converts ecDate back with to_display, and sets image keys only when the
      slot holds a value
    - accept_image only overwrites a slot with a non-empty edited image;
      until then the prior value stays
    - apply_submit never mutates its input list

Design Decisions:
    - FormState is a plain dataclass like the other in-memory states: the shell
      keeps one per open form and drives it through these pure functions
    - The photo slot prefills from photoData, else photo, and is always
      written back as photoData
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from employee_cards.core.date_format import to_display, to_iso
from employee_cards.core.domain_types import FormMode, ImageSlot, ImageSlotStatus
from employee_cards.core.employee_record import (
    EmployeeRecord, ISO_DATE_KEYS, TEXT_FIELDS,
)
from employee_cards.core.record_lookup import find_by_index, parse_index

EC_DATE_KEY = "ecDate"


def empty_fields() -> dict[str, str]:
    return {key: "" for _, key in TEXT_FIELDS}


def empty_images() -> dict[ImageSlot, str]:
    return {slot: "" for slot in ImageSlot}


@dataclass
class FormState:
    """Per-form session state — pure dataclass, no IO."""

    mode: FormMode = FormMode.CREATE
    index: int | None = None
    fields: dict[str, str] = field(default_factory=empty_fields)
    images: dict[ImageSlot, str] = field(default_factory=empty_images)
    image_status: dict[ImageSlot, ImageSlotStatus] = field(
        default_factory=lambda: {slot: ImageSlotStatus.EMPTY for slot in ImageSlot},
    )

    @property
    def is_editing(self) -> bool:
        return self.mode is FormMode.EDIT

    @property
    def title(self) -> str:
        return "Edit Employee" if self.is_editing else "Add Employee"

    @property
    def submit_label(self) -> str:
        return "Update" if self.is_editing else "Save"


@dataclass(frozen=True)
class SubmitOutcome:
    """Result of applying a submitted record to the sequence."""
    records: list[EmployeeRecord]
    index: int
    replaced: bool


def open_form(
    records: Sequence[EmployeeRecord], raw_index: str | int | None,
) -> FormState:
    """Start a form session. A resolvable index selects EDIT mode."""
    index = parse_index(raw_index)
    record = find_by_index(records, index)
    if record is None:
        return FormState()
    state = FormState(mode=FormMode.EDIT, index=index, fields=prefill_fields(record))
    prefilled = {
        ImageSlot.PHOTO: record.photo_data or record.photo or "",
        ImageSlot.LOGO_LEFT: record.logo_left or "",
        ImageSlot.LOGO_RIGHT: record.logo_right or "",
    }
    for slot, value in prefilled.items():
        if value:
            state.images[slot] = value
            state.image_status[slot] = ImageSlotStatus.LOADED
    return state


def prefill_fields(record: EmployeeRecord) -> dict[str, str]:
    """Form field values for an existing record (ecDate as ISO)."""
    values = {key: getattr(record, attr) or "" for attr, key in TEXT_FIELDS}
    values[EC_DATE_KEY] = to_iso(record.ec_date)
    return values


def accept_image(state: FormState, slot: ImageSlot, encoded: str | None) -> bool:
    """Store a completed image edit. Returns False (slot untouched) when empty."""
    if not encoded:
        return False
    state.images[slot] = encoded
    state.image_status[slot] = ImageSlotStatus.SELECTED
    return True


def build_record(
    state: FormState, raw_fields: Mapping[str, Any],
) -> EmployeeRecord:
    """Build the record to persist from raw submitted values and the image slots."""
    values: dict[str, str] = {}
    for attr, key in TEXT_FIELDS:
        raw = raw_fields.get(key)
        text = raw if isinstance(raw, str) else ""
        if key == EC_DATE_KEY:
            values[attr] = to_display(text)
        elif key in ISO_DATE_KEYS:
            values[attr] = text
        else:
            values[attr] = text.strip()
    return EmployeeRecord(**values).with_images(
        photo_data=state.images.get(ImageSlot.PHOTO),
        logo_left=state.images.get(ImageSlot.LOGO_LEFT),
        logo_right=state.images.get(ImageSlot.LOGO_RIGHT),
    )


def apply_submit(
    records: Sequence[EmployeeRecord], state: FormState, record: EmployeeRecord,
) -> SubmitOutcome:
    """EDIT replaces the captured position; CREATE appends.

    An EDIT whose captured index no longer exists in records is appended
    (replaced=False) so the submitted data is not lost.
    """
    updated = list(records)
    if state.is_editing and state.index is not None and 0 <= state.index < len(updated):
        updated[state.index] = record
        return SubmitOutcome(records=updated, index=state.index, replaced=True)
    updated.append(record)
    return SubmitOutcome(records=updated, index=len(updated) - 1, replaced=False)
