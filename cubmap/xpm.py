"""Reading XPM pixmaps into in-memory images."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from functools import reduce
from pathlib import Path

from cubmap.colornames import lookup_color
from cubmap.wordtab import find, find_outside_quotes, str_to_wordtab

TRANSPARENT = 0xFF000000
_MAX_NAME = 63

_ATOI = re.compile(r"[ \t\n\r\f\v]*([+-]?[0-9]+)")
_HEX = re.compile(r"[ \t\n\r\f\v]*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read."""


@dataclass
class Image:
    """A packed pixel buffer, one row after another."""

    width: int
    height: int
    bits_per_pixel: int = 32
    big_endian: bool = False
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"image size must be positive, got {self.width}x{self.height}")
        if self.bits_per_pixel <= 0 or self.bits_per_pixel % 8:
            raise ValueError(f"bits per pixel must be a positive multiple of 8: {self.bits_per_pixel}")
        self.data = bytearray(self.size_line * self.height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    @property
    def size_line(self) -> int:
        """Number of bytes in one row of pixels."""
        return self.width * self.bytes_per_pixel

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * self.bytes_per_pixel

    @property
    def _byteorder(self) -> str:
        return "big" if self.big_endian else "little"

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Store the low bytes of ``color`` at pixel (x, y)."""
        offset = self._offset(x, y)
        opp = self.bytes_per_pixel
        value = color & ((1 << (8 * opp)) - 1)
        self.data[offset:offset + opp] = value.to_bytes(opp, self._byteorder)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the value stored at pixel (x, y)."""
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset:offset + self.bytes_per_pixel], self._byteorder)


def _blank(text: str, begin: int, count: int) -> str:
    count = min(count, len(text) - begin)
    return text[:begin] + " " * count + text[begin + count:]


def strip_comments(text: str) -> str:
    """Blank out C comments lying outside quoted strings, keeping the length."""
    for opener, closer, extra in (("/*", "*/", 4), ("//", "\n", 3)):
        while (begin := find_outside_quotes(text, opener)) != -1:
            end = find(text[begin + 2:], closer)
            text = _blank(text, begin, end + extra)
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of each double-quoted string in ``text`` in order."""
    pos = 0
    while (start := text.find('"', pos)) != -1:
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        pos = end + 1


def _atoi(word: str) -> int:
    match = _ATOI.match(word)
    return int(match.group(1)) if match else 0


def _parse_hex(text: str) -> int:
    match = _HEX.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits, 16)
    return -value if sign == "-" else value


def text_to_rgb(name: str, suffix: str | None) -> int:
    """Return the colour a colour word stands for.

    ``#`` starts a hexadecimal value. Otherwise ``name`` and ``suffix``
    joined by a space are looked up by name; an unknown name gives 0.
    """
    if name.startswith("#"):
        return _parse_hex(name[1:])
    if suffix is not None:
        name = f"{name} {suffix}"[:_MAX_NAME]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def pixel_code(chars: str) -> int:
    """Pack the characters of a pixel code into one integer key."""
    return reduce(lambda acc, char: (acc << 8) + ord(char), chars, 0)


def _header(line: str | None) -> tuple[int, int, int, int]:
    if line is None:
        raise XpmError("missing XPM header")
    words = str_to_wordtab(line)
    if len(words) < 4:
        raise XpmError(f"XPM header needs four values: {line!r}")
    values = tuple(_atoi(word) for word in words[:4])
    if any(value <= 0 for value in values):
        raise XpmError(f"invalid XPM header: {line!r}")
    return values  # type: ignore[return-value]


def _color_entry(line: str, cpp: int) -> tuple[int, int]:
    words = str_to_wordtab(line[cpp:])
    try:
        key = words.index("c")
    except ValueError:
        raise XpmError(f"colour definition without a 'c' key: {line!r}") from None
    if key + 1 >= len(words):
        raise XpmError(f"colour definition without a colour: {line!r}")
    suffix = words[key + 2] if key + 2 < len(words) else None
    return pixel_code(line[:cpp]), text_to_rgb(words[key + 1], suffix)


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from the strings of an XPM pixmap.

    With one or two characters per pixel a later colour definition of a
    code replaces an earlier one; with more, the first one is kept.
    Codes without a definition give colour 0, and ``None`` gives the
    transparent value 0xFF000000.
    """
    rows = iter(lines)
    width, height, ncolors, cpp = _header(next(rows, None))

    colors: dict[int, int] = {}
    for _ in range(ncolors):
        line = next(rows, None)
        if line is None:
            raise XpmError("XPM data ends inside the colour table")
        code, rgb = _color_entry(line, cpp)
        if cpp <= 2:
            colors[code] = rgb
        else:
            colors.setdefault(code, rgb)

    image = Image(width, height)
    for y in range(height):
        line = next(rows, None)
        if line is None:
            raise XpmError("XPM data ends before the last pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {y} is shorter than {width} pixels")
        for x in range(width):
            color = colors.get(pixel_code(line[x * cpp:(x + 1) * cpp]), 0)
            image.set_pixel(x, y, TRANSPARENT if color == -1 else color)
    return image


def xpm_file_to_image(path: str | Path) -> Image:
    """Read an XPM file, ignoring its comments, into an image."""
    try:
        text = Path(path).read_bytes().decode("latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read XPM file {path}: {exc}") from exc
    return parse_xpm(quoted_lines(strip_comments(text)))


def xpm_to_image(lines: Iterable[str]) -> Image:
    """Build an image from XPM strings already held in memory."""
    return parse_xpm(lines)