import pytest
from PIL import Image

from vcardqr.barcodegen.raster import MODULE_SCALE, QUIET_ZONE, composite, image_side
from vcardqr.barcodegen.symbol import ModuleMatrix, encode_symbol
from vcardqr.model.color import DEFAULT_COLOR, WHITE, RGBColor
from vcardqr.model.enums import ErrorCorrectionLevel

RED = RGBColor(255, 0, 0)


def make_matrix() -> ModuleMatrix:
    return ModuleMatrix(
        modules=((True, False), (False, True)),
        version=1,
        error_correction=ErrorCorrectionLevel.M,
    )


def test_constants() -> None:
    assert QUIET_ZONE == 4
    assert MODULE_SCALE == 8
    assert image_side(21) == (21 + 8) * 8


def test_dimensions_and_mode() -> None:
    img = composite(make_matrix(), RED)
    assert isinstance(img, Image.Image)
    assert img.mode == "RGB"
    assert img.size == ((2 + 2 * QUIET_ZONE) * MODULE_SCALE,) * 2


def test_module_blocks() -> None:
    img = composite(make_matrix(), RED)
    origin = QUIET_ZONE * MODULE_SCALE
    s = MODULE_SCALE
    # модуль (0, 0) тёмный
    assert img.getpixel((origin, origin)) == tuple(RED)
    assert img.getpixel((origin + s - 1, origin + s - 1)) == tuple(RED)
    # модуль (0, 1) светлый: x = столбец, y = строка
    assert img.getpixel((origin + s, origin)) == tuple(WHITE)
    assert img.getpixel((origin, origin + s)) == tuple(WHITE)
    # модуль (1, 1) тёмный
    assert img.getpixel((origin + s, origin + s)) == tuple(RED)
    assert img.getpixel((origin + 2 * s - 1, origin + 2 * s - 1)) == tuple(RED)
    # поле тишины
    assert img.getpixel((origin + 2 * s, origin + 2 * s)) == tuple(WHITE)
    assert img.getpixel((origin - 1, origin - 1)) == tuple(WHITE)


def test_quiet_zone_is_white() -> None:
    matrix = encode_symbol("quiet zone")
    img = composite(matrix, DEFAULT_COLOR)
    side = img.width
    margin = QUIET_ZONE * MODULE_SCALE
    for i in range(side):
        for j in list(range(margin)) + list(range(side - margin, side)):
            assert img.getpixel((i, j)) == tuple(WHITE)
            assert img.getpixel((j, i)) == tuple(WHITE)


@pytest.mark.parametrize(
    "color",
    [RGBColor(0, 0, 0), RGBColor(255, 0, 0), RGBColor(18, 52, 86)],
)
def test_only_two_colors(color: RGBColor) -> None:
    matrix = encode_symbol("two colors only")
    img = composite(matrix, color)
    colors = img.getcolors()
    assert colors is not None
    counts = {c: n for n, c in colors}
    assert set(counts) == {tuple(color), tuple(WHITE)}
    assert counts[tuple(color)] == matrix.dark_count() * MODULE_SCALE * MODULE_SCALE


def test_white_foreground_is_not_inverted() -> None:
    # светлые модули никогда не закрашиваются: белый цвет даёт полностью белое изображение
    img = composite(encode_symbol("white"), WHITE)
    assert img.getcolors() == [(img.width * img.height, tuple(WHITE))]
