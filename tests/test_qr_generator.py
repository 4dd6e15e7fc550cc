import pytest
from qrcode.exceptions import DataOverflowError

from qr_link_generator import QUIET_ZONE
from qr_link_generator.qr_generator import (
    build_qr, get_bitmap, render_png, to_terminal_string,
)

URL = "https://www.example.com"


def test_bitmap_is_square_with_quiet_zone():
    bitmap = get_bitmap(build_qr(URL, "M"))
    dim = len(bitmap)
    assert all(len(row) == dim for row in bitmap)
    # version v symbols are 4v + 17 modules wide, plus the border
    assert (dim - 2 * QUIET_ZONE - 17) % 4 == 0
    assert not any(bitmap[0])
    assert not any(bitmap[-1])
    assert not any(row[0] for row in bitmap)
    assert all(isinstance(cell, bool) for row in bitmap for cell in row)


def test_finder_pattern_corner_is_dark():
    bitmap = get_bitmap(build_qr(URL, "L"))
    assert bitmap[QUIET_ZONE][QUIET_ZONE] is True


def test_higher_level_never_smaller():
    low = build_qr("https://example.com/" + "a" * 100, "L")
    high = build_qr("https://example.com/" + "a" * 100, "H")
    assert high.version >= low.version


def test_invalid_level_rejected():
    with pytest.raises(ValueError):
        build_qr(URL, "Z")


def test_overflow_at_highest_level():
    with pytest.raises(DataOverflowError):
        build_qr("https://example.com/" + "a" * 2020, "H")


def test_longest_url_fits_at_low_level():
    qr = build_qr("https://example.com/" + "a" * 2020, "L")
    assert qr.version > 20


@pytest.mark.parametrize("size", [100, 257, 4096])
def test_render_png_exact_size(size):
    img = render_png(build_qr(URL, "M"), size)
    assert img.size == (size, size)
    assert img.mode == "RGB"


def test_render_png_colors():
    img = render_png(build_qr(URL, "M"), 400)
    assert img.getpixel((0, 0)) == (255, 255, 255)
    colors = {color for _, color in img.getcolors()}
    assert colors == {(0, 0, 0), (255, 255, 255)}


def test_terminal_string_rows():
    qr = build_qr(URL, "M")
    text = to_terminal_string(qr)
    dim = len(get_bitmap(qr))
    lines = text.splitlines()
    assert len(lines) == (dim + 1) // 2
    assert all(len(line) == dim for line in lines)
