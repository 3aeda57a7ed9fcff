import pytest

from cubmap.pixelformat import get_color_value, mask_shifts

TRUECOLOR_MASKS = (0xFF0000, 0x00FF00, 0x0000FF)
RGB565_MASKS = (0xF800, 0x07E0, 0x001F)


def _color_map(w, h, kind):
    """Colours drawn by the source's test program for its images."""
    for y in range(h):
        for x in range(w):
            if kind == 2:
                yield (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
            else:
                yield (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def test_truecolor_shifts():
    assert mask_shifts(*TRUECOLOR_MASKS) == (16, 8, 8, 8, 0, 8)


def test_rgb565_shifts():
    assert mask_shifts(*RGB565_MASKS) == (11, 5, 5, 6, 0, 5)


def test_shift_fields_are_named():
    shifts = mask_shifts(*RGB565_MASKS)
    assert shifts.green_bits == 6
    assert shifts.red_shift == 11


@pytest.mark.parametrize("kind", [1, 2])
def test_depth_24_keeps_colour(kind):
    shifts = mask_shifts(*TRUECOLOR_MASKS)
    for color in _color_map(42, 42, kind):
        assert get_color_value(color, 24, shifts) == color


@pytest.mark.parametrize("kind", [1, 2])
def test_eight_bit_channels_round_trip_below_depth_24(kind):
    shifts = mask_shifts(*TRUECOLOR_MASKS)
    for color in _color_map(24, 24, kind):
        assert get_color_value(color, 16, shifts) == color


@pytest.mark.parametrize(
    "color, expected",
    [
        (0xFFFFFF, 0xFFFF),
        (0xFF0000, 0xF800),
        (0x00FF00, 0x07E0),
        (0x0000FF, 0x001F),
        (0x000000, 0x0000),
    ],
)
def test_rgb565_values(color, expected):
    shifts = mask_shifts(*RGB565_MASKS)
    assert get_color_value(color, 16, shifts) == expected


def test_zero_mask_is_rejected():
    with pytest.raises(ValueError):
        mask_shifts(0xFF0000, 0, 0xFF)