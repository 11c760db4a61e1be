"""Square Image Editor — ImageEditor protocol implemented with Pillow.

Invariants:
    - Output is always a size×size PNG data URL (default 300×300)
    - Without an explicit crop box the largest centred square is used
    - Crop boxes are clamped to the source bounds
    - Undecodable or oversized input raises ImageEditError; nothing is returned
      half-written
    - Pillow work runs in a worker thread so the event loop stays responsive

Design Decisions:
    - PNG output keeps logo transparency; photos are small enough at 300px
    - decode_data_url lives here: the form receives files the way a browser
      FileReader produces them (data URLs)
"""

import asyncio
import base64
import binascii
import logging
from io import BytesIO

from PIL import Image, UnidentifiedImageError

from employee_cards.core.domain_types import IMAGE_EDIT_SIZE
from employee_cards.core.errors import ImageEditError

logger = logging.getLogger(__name__)

Crop = tuple[int, int, int, int]


def decode_data_url(source: str, slot: str) -> bytes:
    """Decode a base64 data URL ("data:<mime>;base64,<payload>") to raw bytes."""
    header, sep, payload = source.partition(",")
    if not sep or not header.startswith("data:") or not header.endswith(";base64"):
        raise ImageEditError("source is not a base64 data URL", slot)
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ImageEditError(f"invalid base64 payload ({e})", slot)


class SquareImageEditor:
    """Crops to a square and scales to a fixed size."""

    def __init__(self, size: int = IMAGE_EDIT_SIZE, max_source_bytes: int = 10_000_000):
        self.size = size
        self.max_source_bytes = max_source_bytes

    async def edit(self, source: bytes, crop: Crop | None = None) -> str:
        if len(source) > self.max_source_bytes:
            raise ImageEditError(
                f"source exceeds {self.max_source_bytes} bytes", "source",
            )
        return await asyncio.to_thread(self._edit_sync, source, crop)

    def _edit_sync(self, source: bytes, crop: Crop | None) -> str:
        try:
            with Image.open(BytesIO(source)) as img:
                img.load()
                box = _clamp_box(crop, img.width, img.height) if crop else _centre_square(
                    img.width, img.height,
                )
                edited = img.crop(box).convert("RGBA").resize(
                    (self.size, self.size), Image.Resampling.LANCZOS,
                )
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
            logger.warning(f"Image decode failed: {e}")
            raise ImageEditError("source is not a readable image", "source")

        buffer = BytesIO()
        edited.save(buffer, format="PNG", optimize=True)
        encoded = base64.b64encode(buffer.getvalue()).decode("ascii")
        return f"data:image/png;base64,{encoded}"


def _centre_square(width: int, height: int) -> Crop:
    side = min(width, height)
    left = (width - side) // 2
    top = (height - side) // 2
    return (left, top, left + side, top + side)


def _clamp_box(crop: Crop, width: int, height: int) -> Crop:
    """(left, top, w, h) → Pillow (left, top, right, bottom) inside the image."""
    left, top, w, h = crop
    left = min(max(left, 0), max(width - 1, 0))
    top = min(max(top, 0), max(height - 1, 0))
    right = min(left + max(w, 1), width)
    bottom = min(top + max(h, 1), height)
    return (left, top, right, bottom)
