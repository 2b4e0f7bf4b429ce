"""
Measure text tooltip content in px using Pillow. 1 pt = 1 px at 72 DPI.
Used as the default measure for text overlays.
"""

from __future__ import annotations

import warnings

from tipplace.core.config import CONTENT_PADDING_PX, DEFAULT_FONT_FAMILY, DEFAULT_FONT_SIZE_PT
from tipplace.core.types import ZERO_SIZE, Size

_font_warning_emitted: set[str] = set()


def _load_font(font_family: str, font_size_pt: float):
    """Load PIL ImageFont; fallback with warning if font not found."""
    from PIL import ImageFont

    size = max(1, int(round(font_size_pt)))
    candidates = [
        font_family + ".ttf",
        font_family.replace(" ", "") + ".ttf",
        "DejaVuSans.ttf",
        "arial.ttf",
        "Arial.ttf",
    ]
    for name in candidates:
        try:
            return ImageFont.truetype(name, size=size)
        except OSError:
            continue
    if font_family not in _font_warning_emitted:
        _font_warning_emitted.add(font_family)
        warnings.warn(f"Font not found: {font_family!r}; using default.", UserWarning)
    return ImageFont.load_default()


def measure_text_px(text: str, font_family: str, font_size_pt: float) -> tuple[float, float]:
    """Return (width_px, height_px) of the rendered text, multi-line aware."""
    from PIL import Image, ImageDraw

    font = _load_font(font_family, font_size_pt)
    img = Image.new("RGB", (1, 1))
    draw = ImageDraw.Draw(img)
    bbox = draw.multiline_textbbox((0, 0), text, font=font)
    return (float(bbox[2] - bbox[0]), float(bbox[3] - bbox[1]))


def measure_content_size(
    content: object,
    font_family: str = DEFAULT_FONT_FAMILY,
    font_size_pt: float = DEFAULT_FONT_SIZE_PT,
    padding_px: float = CONTENT_PADDING_PX,
) -> Size:
    """
    Size of a text overlay including padding on every side.
    Empty or non-text content measures as {0, 0}, which keeps the overlay off screen.
    """
    if not isinstance(content, str) or not content.strip():
        return ZERO_SIZE
    w, h = measure_text_px(content, font_family, font_size_pt)
    return Size(w + 2 * padding_px, h + 2 * padding_px)
