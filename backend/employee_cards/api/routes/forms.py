"""Employee Form — open, image intake and submit for create/edit form sessions.

Invariants:
    - POST /forms?index=N opens EDIT mode only for a valid position; any other
      index (absent, non-integer, out of range) opens CREATE mode
    - Image uploads change a slot only when the edit succeeds
    - Submit persists the full list and returns the list-view path to navigate to
    - Unknown form ids → 404 with the structured error envelope
    - DELETE discards a form without saving

Design Decisions:
    - index arrives as a raw string and is parsed by the core, so a bad value
      means CREATE mode instead of a 422
    - Header logos on the form are always the global defaults
"""

from fastapi import APIRouter, Depends, Query, status

from employee_cards.api.dependencies import get_catalog, get_form_service
from employee_cards.core.catalog_defaults import CatalogDefaults
from employee_cards.core.domain_types import ImageSlot, LogoSide
from employee_cards.core.form_controller import FormState
from employee_cards.schemas.employee import (
    FormResponse, FormSubmission, ImageEditRequest, ImageSlotView, SubmitResponse,
)
from employee_cards.services.form_service import FormService

router = APIRouter(prefix="/api/v1/forms", tags=["forms"])


def _form_response(
    form_id: str, state: FormState, defaults: CatalogDefaults,
) -> FormResponse:
    return FormResponse(
        form_id=form_id,
        mode=state.mode,
        index=state.index,
        title=state.title,
        submit_label=state.submit_label,
        fields=dict(state.fields),
        images={
            slot.value: ImageSlotView(
                value=state.images[slot], status=state.image_status[slot],
            )
            for slot in ImageSlot
        },
        header_logos={
            LogoSide.GREEN.value: defaults.logo_green,
            LogoSide.PURPLE.value: defaults.logo_purple,
        },
    )


@router.post(
    "", response_model=FormResponse, status_code=status.HTTP_201_CREATED,
)
async def open_employee_form(
    index: str | None = Query(None),
    service: FormService = Depends(get_form_service),
    defaults: CatalogDefaults = Depends(get_catalog),
):
    """Open a form session (EDIT when index resolves, CREATE otherwise)."""
    form_id, state = await service.open(index)
    return _form_response(form_id, state, defaults)


@router.get("/{form_id}", response_model=FormResponse)
async def get_employee_form(
    form_id: str,
    service: FormService = Depends(get_form_service),
    defaults: CatalogDefaults = Depends(get_catalog),
):
    """Current state of an open form."""
    return _form_response(form_id, service.get(form_id), defaults)


@router.delete("/{form_id}", status_code=status.HTTP_204_NO_CONTENT)
async def close_employee_form(
    form_id: str,
    service: FormService = Depends(get_form_service),
):
    """Discard an open form (cancel or navigate away). Nothing is saved."""
    service.close(form_id)


@router.post("/{form_id}/images/{slot}", response_model=FormResponse)
async def upload_form_image(
    form_id: str,
    slot: ImageSlot,
    body: ImageEditRequest,
    service: FormService = Depends(get_form_service),
    defaults: CatalogDefaults = Depends(get_catalog),
):
    """Crop/scale a source image into the slot (photo, logoLeft, logoRight)."""
    crop = body.crop.as_tuple() if body.crop else None
    state = await service.attach_image(form_id, slot, body.source, crop)
    return _form_response(form_id, state, defaults)


@router.post("/{form_id}/submit", response_model=SubmitResponse)
async def submit_employee_form(
    form_id: str,
    body: FormSubmission,
    service: FormService = Depends(get_form_service),
):
    """Save the record (append or replace) and close the form."""
    result = await service.submit(form_id, body.raw_fields())
    return SubmitResponse(
        index=result.index,
        persisted=result.persisted,
        navigate_to=result.navigate_to,
        record=result.record.to_dict(),
    )
