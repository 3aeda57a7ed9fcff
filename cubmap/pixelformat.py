"""Conversion of 0xRRGGBB colours to the pixel values of a visual."""

from __future__ import annotations

from typing import NamedTuple


class ChannelShifts(NamedTuple):
    """Bit position and width of each colour channel in a pixel value."""

    red_shift: int
    red_bits: int
    green_shift: int
    green_bits: int
    blue_shift: int
    blue_bits: int


def _channel(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"channel mask must be a positive bit mask, got {mask!r}")
    shift = (mask & -mask).bit_length() - 1
    run = mask >> shift
    bits = (~run & (run + 1)).bit_length() - 1
    return shift, bits


def mask_shifts(red_mask: int, green_mask: int, blue_mask: int) -> ChannelShifts:
    """Work out where each channel sits from the visual's channel masks.

    For each mask the shift is the number of low zero bits and the width
    is the length of the run of one bits that follows them.
    """
    return ChannelShifts(*_channel(red_mask), *_channel(green_mask), *_channel(blue_mask))


def get_color_value(color: int, depth: int, shifts: tuple[int, ...]) -> int:
    """Return the pixel value for ``color`` on a visual of the given depth.

    At depth 24 or more the colour is used as it is; below that each
    8-bit channel is narrowed to its width and moved to its position.
    """
    if depth >= 24:
        return color
    red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits = shifts
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - red_bits)) << red_shift)
        + ((green >> (16 - green_bits)) << green_shift)
        + ((blue >> (16 - blue_bits)) << blue_shift)
    )