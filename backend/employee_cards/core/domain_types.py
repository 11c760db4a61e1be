"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - FormId identifies one open form session (opaque hex token)
    - LogoSide mapping is fixed: GREEN ↔ logoRight, PURPLE ↔ logoLeft
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

FormId = NewType("FormId", str)


# ─── Enums ───────────────────────────────────────────────────────

class LogoSide(str, Enum):
    """Logo colour slot on the card. Right logo is green, left logo is purple."""
    GREEN = "green"
    PURPLE = "purple"


class ImageKind(str, Enum):
    """How an image value is carried."""
    EMBEDDED = "embedded"       # self-contained data URL
    REFERENCED = "referenced"   # external locator resolved by the display layer
    ABSENT = "absent"


class ImageSlot(str, Enum):
    """The three image inputs of the employee form (values are record keys)."""
    PHOTO = "photo"
    LOGO_LEFT = "logoLeft"
    LOGO_RIGHT = "logoRight"


class ImageSlotStatus(str, Enum):
    """Form-side status of an image slot."""
    EMPTY = "empty"
    LOADED = "loaded"       # prefilled from the record being edited
    SELECTED = "selected"   # replaced by a completed image edit


class FormMode(str, Enum):
    """Form session mode — fixed when the session opens."""
    CREATE = "create"
    EDIT = "edit"


class CardSection(str, Enum):
    """Detail sections of the printed card, in display order."""
    PERSONAL = "personal"
    BMET = "bmet"
    PASSPORT = "passport"


# ─── Constants ───────────────────────────────────────────────────

NOT_FOUND_MARKER = "Employee not found"
IMAGE_EDIT_SIZE = 300
