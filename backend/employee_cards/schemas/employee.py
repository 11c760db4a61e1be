"""Employee Schemas — Pydantic models for the form, list and image endpoints.

Invariants:
    - FormSubmission accepts every record text field under its camelCase key;
      missing fields default to "", null becomes "", numbers are stringified,
      unknown keys are ignored
    - Trimming and date conversion are NOT done here: the form controller owns them
    - CropBox coordinates are source pixels; width/height at least 1

Design Decisions:
    - alias_generator=to_camel with populate_by_name: snake_case attributes,
      camelCase JSON, same names as the core EmployeeRecord attributes
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from employee_cards.core.domain_types import FormMode, ImageSlotStatus


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore",
    )


class FormSubmission(CamelModel):
    """Raw form field values as typed by the operator."""
    ec_no: str = ""
    name: str = ""
    ec_date: str = ""
    birth_date: str = ""
    passport_no: str = ""
    passport_issue_date: str = ""
    passport_expire_date: str = ""
    visa_no: str = ""
    visa_issue_date: str = ""
    visa_expire_date: str = ""
    referral_no: str = ""
    recruiting_agency: str = ""
    employer: str = ""
    country: str = ""
    bmet_no: str = ""
    gender: str = ""
    blood_group: str = ""
    nid: str = ""
    passport_name: str = ""
    passport_no1: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def coerce_to_text(cls, v: Any) -> str:
        if v is None:
            return ""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    def raw_fields(self) -> dict[str, str]:
        """Values keyed by stored (camelCase) field name."""
        return self.model_dump(by_alias=True)


class CropBox(BaseModel):
    left: int = Field(0, ge=0)
    top: int = Field(0, ge=0)
    width: int = Field(ge=1)
    height: int = Field(ge=1)

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.left, self.top, self.width, self.height)


class ImageEditRequest(BaseModel):
    """Source image as a browser FileReader data URL, plus optional crop."""
    source: str = Field(min_length=1)
    crop: CropBox | None = None


class ImageSlotView(BaseModel):
    value: str = ""
    status: ImageSlotStatus = ImageSlotStatus.EMPTY


class FormResponse(CamelModel):
    """Form view model: mode, prefilled values, image slots and header logos."""
    form_id: str
    mode: FormMode
    index: int | None = None
    title: str
    submit_label: str
    fields: dict[str, str]
    images: dict[str, ImageSlotView]
    header_logos: dict[str, str]


class SubmitResponse(CamelModel):
    status: Literal["saved"] = "saved"
    index: int
    persisted: bool
    navigate_to: str
    record: dict[str, str]


class EmployeeListItem(CamelModel):
    index: int
    ec_no: str
    name: str
    ec_date: str
    record: dict[str, str]
