"""Glyph layout of bitmap fonts described by a character position file."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from os import PathLike
import re

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")


def _leading_uint(token: str) -> int:
    match = _INT_PREFIX.match(token)
    if match is None:
        raise ValueError(f"invalid integer {token!r}")
    value = int(match.group())
    if value < 0:
        raise ValueError(f"coordinate must not be negative: {token!r}")
    return value


@dataclass(frozen=True)
class CharPosition:
    """Where one character sits in the font image, in pixels."""

    char: str
    top_left: tuple[int, int]
    bottom_right: tuple[int, int]

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise ValueError("a glyph is named by exactly one character")
        if (self.bottom_right[0] < self.top_left[0]
                or self.bottom_right[1] < self.top_left[1]):
            raise ValueError("bottom right corner lies before the top left corner")

    @property
    def width(self) -> int:
        return self.bottom_right[0] - self.top_left[0]

    @property
    def height(self) -> int:
        return self.bottom_right[1] - self.top_left[1]


def _tokens(line: str) -> list[str]:
    """Split on single spaces the way a delimiter-based line reader does."""
    tokens = line.split(" ")
    if tokens and tokens[-1] == "":
        tokens.pop()
    return tokens


def load_positions(filename: str | PathLike) -> list[CharPosition]:
    """Read glyph positions from a text file.

    Each line holds a character followed by the four corner coordinates,
    separated by single spaces. A line of six fields describes the space
    character. Other lines are skipped; an unreadable file yields no glyphs.
    """
    try:
        with open(filename, encoding="latin-1") as handle:
            lines = handle.read().split("\n")
    except OSError:
        return []

    positions: list[CharPosition] = []
    for line in lines:
        values = _tokens(line)
        if len(values) == 5:
            char = values[0][0] if values[0] else "\0"
            coords = [_leading_uint(v) for v in values[1:]]
        elif len(values) == 6:
            char = " "
            coords = [_leading_uint(v) for v in values[2:]]
        else:
            continue
        positions.append(
            CharPosition(char, (coords[0], coords[1]), (coords[2], coords[3]))
        )
    return positions


def _signed_char_key(char: str) -> int:
    code = ord(char)
    return code - 256 if 127 < code < 256 else code


@dataclass
class FontLayout:
    """Measures text set in a bitmap font."""

    positions: list[CharPosition] = field(default_factory=list)

    @classmethod
    def from_file(cls, filename: str | PathLike) -> "FontLayout":
        return cls(load_positions(filename))

    def find(self, char: str) -> CharPosition:
        """Glyph of a character; unknown characters use the first glyph."""
        for position in self.positions:
            if position.char == char:
                return position
        if not self.positions:
            raise LookupError("the font has no glyphs")
        return self.positions[0]

    def text_size(self, text: str) -> tuple[int, int]:
        """Pixel width and height of the image that renders the text."""
        glyphs = [self.find(c) for c in text]
        return (sum(g.width for g in glyphs),
                max((g.height for g in glyphs), default=0))

    def char_scales(self) -> dict[str, tuple[float, float]]:
        """Width and height of every glyph relative to the largest glyph."""
        max_width = max((p.width for p in self.positions), default=0)
        max_height = max((p.height for p in self.positions), default=0)
        if max_width == 0 or max_height == 0:
            raise ValueError("the font has no glyph of non-zero size")
        scales = {}
        for position in self.positions:
            width, height = self.text_size(position.char)
            scales[position.char] = (width / max_width, height / max_height)
        return scales

    def _total_width(self, text: str) -> float:
        scales = self.char_scales()
        total = 0.0
        for char in text:
            if char not in scales:
                char = "_"
            if char not in scales:
                raise KeyError("the font has no '_' glyph to stand in for missing ones")
            total += scales[char][0]
        return total

    def engine_size(self, text: str, win_aspect: float, height: float) -> tuple[float, float]:
        """Screen size of text drawn at a given height."""
        return height * self._total_width(text) / win_aspect, height

    def engine_size_fixed_width(self, text: str, win_aspect: float,
                                width: float) -> tuple[float, float]:
        """Screen size of text stretched to a given width."""
        total = self._total_width(text)
        if total == 0:
            raise ValueError("text has no width")
        return width, width * win_aspect / total

    def all_chars(self) -> str:
        """Every character the font holds, in byte order."""
        return "".join(sorted({p.char for p in self.positions}, key=_signed_char_key))