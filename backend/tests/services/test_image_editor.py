"""Square Image Editor — Pillow crop/scale to a fixed-size PNG data URL."""

import base64
from io import BytesIO

import pytest
from PIL import Image

from employee_cards.core.errors import ImageEditError
from employee_cards.infrastructure.image_editor import (
    SquareImageEditor, _clamp_box, _centre_square, decode_data_url,
)


def _raw(data_url: str) -> bytes:
    return decode_data_url(data_url, "photo")


async def test_landscape_source_becomes_square(png_data_url, decode_png):
    out = await SquareImageEditor().edit(_raw(png_data_url(640, 480)))
    assert out.startswith("data:image/png;base64,")
    assert decode_png(out).size == (300, 300)


async def test_custom_output_size(png_data_url, decode_png):
    out = await SquareImageEditor(size=64).edit(_raw(png_data_url(30, 90)))
    assert decode_png(out).size == (64, 64)


async def test_crop_box_is_applied(decode_png):
    img = Image.new("RGB", (100, 100), (255, 0, 0))
    img.paste((0, 0, 255), (50, 0, 100, 100))
    buffer = BytesIO()
    img.save(buffer, format="PNG")

    out = await SquareImageEditor(size=10).edit(buffer.getvalue(), crop=(60, 10, 30, 30))

    assert decode_png(out).convert("RGB").getpixel((5, 5)) == (0, 0, 255)


async def test_garbage_bytes_raise():
    with pytest.raises(ImageEditError):
        await SquareImageEditor().edit(b"definitely not an image")


async def test_oversized_source_raises(png_data_url):
    with pytest.raises(ImageEditError):
        await SquareImageEditor(max_source_bytes=10).edit(_raw(png_data_url(20, 20)))


def test_decode_data_url_roundtrips_payload():
    payload = base64.b64encode(b"\x89PNG").decode()
    assert decode_data_url(f"data:image/png;base64,{payload}", "photo") == b"\x89PNG"


@pytest.mark.parametrize("source", [
    "no comma here",
    "https://host/image.png,abc",
    "data:image/png,plain",
    "data:image/png;base64,###",
])
def test_decode_data_url_rejects_other_forms(source):
    with pytest.raises(ImageEditError) as exc:
        decode_data_url(source, "logoLeft")
    assert exc.value.slot == "logoLeft"


def test_centre_square():
    assert _centre_square(400, 200) == (100, 0, 300, 200)
    assert _centre_square(200, 400) == (0, 100, 200, 300)


def test_clamp_box_stays_inside_image():
    assert _clamp_box((-5, -5, 50, 50), 30, 30) == (0, 0, 30, 30)
    assert _clamp_box((10, 10, 5, 5), 100, 100) == (10, 10, 15, 15)
