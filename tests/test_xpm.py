import pytest

from cubmap.xpm import (
    Image,
    XpmError,
    parse_xpm,
    pixel_code,
    quoted_lines,
    strip_comments,
    text_to_rgb,
    xpm_file_to_image,
    xpm_to_image,
)

XPM_FILE = """/* XPM */
static char *test[] = {
/* columns rows colors chars-per-pixel */
"2 1 2 1",
"  c None",
". c red",
/* pixels */
" .",
};
// trailing note
"""


def test_image_round_trip():
    image = Image(3, 2)
    image.set_pixel(2, 1, 0x123456)
    assert image.get_pixel(2, 1) == 0x123456
    assert image.get_pixel(0, 0) == 0


def test_image_geometry():
    image = Image(5, 3)
    assert image.size_line == 5 * 4
    assert len(image.data) == image.size_line * image.height


def test_byte_order_layout():
    little = Image(1, 1)
    big = Image(1, 1, big_endian=True)
    little.set_pixel(0, 0, 0x11223344)
    big.set_pixel(0, 0, 0x11223344)
    assert bytes(big.data) == bytes([0x11, 0x22, 0x33, 0x44])
    assert bytes(little.data) == bytes(reversed(big.data))
    assert big.get_pixel(0, 0) == little.get_pixel(0, 0) == 0x11223344


def test_pixel_out_of_range():
    image = Image(2, 2)
    with pytest.raises(IndexError):
        image.set_pixel(2, 0, 0)
    with pytest.raises(IndexError):
        image.get_pixel(0, -1)


def test_text_to_rgb_hex_and_names():
    assert text_to_rgb("#ff00ff", None) == 0xFF00FF
    assert text_to_rgb("RED", None) == 0xFF0000
    assert text_to_rgb("light", "blue") == 0xADD8E6
    assert text_to_rgb("None", None) == -1
    assert text_to_rgb("nosuchcolour", None) == 0


def test_pixel_code_orders_characters():
    assert pixel_code("a") == ord("a")
    assert pixel_code("ab") != pixel_code("ba")
    assert pixel_code("ab") >> 8 == pixel_code("a")


def test_quoted_lines():
    assert list(quoted_lines('x "one", "two" "three')) == ["one", "two"]


def test_strip_comments_keeps_quoted_markers():
    text = '"a/*b" /* c */'
    stripped = strip_comments(text)
    assert stripped == '"a/*b"' + " " * 8
    assert len(stripped) == len(text)


def test_strip_line_comment():
    stripped = strip_comments('"x"// gone\n"y"')
    assert list(quoted_lines(stripped)) == ["x", "y"]


def test_xpm_to_image_pixels():
    image = xpm_to_image(["2 2 2 1", ". c #000000", "# c #FFFFFF", ".#", "#."])
    assert (image.width, image.height) == (2, 2)
    assert image.get_pixel(0, 0) == 0x000000
    assert image.get_pixel(1, 0) == 0xFFFFFF
    assert image.get_pixel(0, 1) == 0xFFFFFF
    assert image.get_pixel(1, 1) == 0x000000


def test_none_is_transparent():
    image = xpm_to_image(["1 1 1 1", "x c None", "x"])
    assert image.get_pixel(0, 0) == 0xFF000000


def test_short_codes_later_definition_wins():
    image = xpm_to_image(["1 1 2 1", "a c #111111", "a c #222222", "a"])
    assert image.get_pixel(0, 0) == 0x222222


def test_long_codes_first_definition_wins():
    image = xpm_to_image(["1 1 2 3", "abc c #111111", "abc c #222222", "abc"])
    assert image.get_pixel(0, 0) == 0x111111


def test_undefined_long_code_is_black():
    image = xpm_to_image(["1 1 1 3", "abc c #111111", "xyz"])
    assert image.get_pixel(0, 0) == 0


def test_file_with_comments(tmp_path):
    path = tmp_path / "open.xpm"
    path.write_text(XPM_FILE)
    image = xpm_file_to_image(path)
    assert (image.width, image.height) == (2, 1)
    assert image.get_pixel(0, 0) == 0xFF000000
    assert image.get_pixel(1, 0) == 0xFF0000


def test_missing_file(tmp_path):
    with pytest.raises(XpmError):
        xpm_file_to_image(tmp_path / "missing.xpm")


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["0 1 1 1", ". c red", "."],
        ["1 1 1"],
        ["1 1 1 1", ". red", "."],
        ["1 1 1 1", ". c", "."],
        ["1 2 1 1", ". c red", "."],
        ["2 1 1 1", ". c red", "."],
        ["1 1 2 1", ". c red"],
    ],
)
def test_malformed_data(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)