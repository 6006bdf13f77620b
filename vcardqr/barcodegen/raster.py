"""
RU: Растеризация матрицы QR: тёмные модули цветом, светлые и поле тишины белым
EN: QR matrix rasterizer: dark modules in the resolved color on white

The output image only ever contains two colors. Light modules are never
painted, so the symbol stays color-on-white.

Requirements: Pillow
"""

from __future__ import annotations

import logging
from typing import Final

from PIL import Image, ImageDraw

from vcardqr.barcodegen.symbol import ModuleMatrix
from vcardqr.model.color import WHITE, RGBColor

logger = logging.getLogger(__name__)

__all__ = [
    "PixelBuffer",
    "QUIET_ZONE",
    "MODULE_SCALE",
    "composite",
    "image_side",
]

# Поле тишины (в модулях) и масштаб (пикселей на модуль)
QUIET_ZONE: Final[int] = 4
MODULE_SCALE: Final[int] = 8

PixelBuffer = Image.Image


def image_side(matrix_size: int) -> int:
    """Pixel side length of the composited image for a given symbol side."""
    return (matrix_size + 2 * QUIET_ZONE) * MODULE_SCALE


def composite(matrix: ModuleMatrix, color: RGBColor) -> PixelBuffer:
    """Render the module matrix into an RGB image.

    Args:
        matrix: QR module matrix.
        color: Color for dark modules.

    Returns:
        RGB image of side ``(matrix.size + 2 * QUIET_ZONE) * MODULE_SCALE``.

    Example:
        >>> img = composite(matrix, RGBColor(255, 0, 0))
        >>> img.getpixel((0, 0))
        (255, 255, 255)
    """
    side = image_side(matrix.size)
    img = Image.new("RGB", (side, side), tuple(WHITE))
    draw = ImageDraw.Draw(img)
    fill = tuple(color)

    for row_idx, row in enumerate(matrix.modules):
        y0 = (row_idx + QUIET_ZONE) * MODULE_SCALE
        for col_idx, dark in enumerate(row):
            if not dark:
                continue
            x0 = (col_idx + QUIET_ZONE) * MODULE_SCALE
            # rectangle включает правую/нижнюю границу
            draw.rectangle(
                (x0, y0, x0 + MODULE_SCALE - 1, y0 + MODULE_SCALE - 1),
                fill=fill,
            )

    logger.debug("QR composited: %dx%d px, color %s", side, side, color.to_hex())
    return img
