"""Parsing of ANSI SGR colour escape sequences into coloured text segments."""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = [
    "Color",
    "TextSegment",
    "background_8_color",
    "background_16_color",
    "color_8",
    "color_16",
    "color_256",
    "parse_ansi",
]

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"-?\d+")


@dataclass(frozen=True)
class Color:
    """RGBA colour with components in the range 0..1."""

    r: float
    g: float
    b: float
    a: float = 1.0


WHITE = Color(1.0, 1.0, 1.0, 1.0)
TRANSPARENT = Color(0.0, 0.0, 0.0, 0.0)


@dataclass(frozen=True)
class TextSegment:
    """A run of text drawn with one foreground and background colour."""

    text: str
    fg: Color
    bg: Color


_BACKGROUND_8 = (
    Color(0.0, 0.0, 0.0),
    Color(0.5, 0.0, 0.0),
    Color(0.0, 0.5, 0.0),
    Color(0.5, 0.5, 0.0),
    Color(0.0, 0.0, 0.5),
    Color(0.5, 0.0, 0.5),
    Color(0.0, 0.5, 0.5),
    Color(0.75, 0.75, 0.75),
)

_BRIGHT = (
    Color(0.5, 0.5, 0.5),
    Color(1.0, 0.0, 0.0),
    Color(0.0, 1.0, 0.0),
    Color(1.0, 1.0, 0.0),
    Color(0.0, 0.0, 1.0),
    Color(1.0, 0.0, 1.0),
    Color(0.0, 1.0, 1.0),
    Color(1.0, 1.0, 1.0),
)

_FOREGROUND_8 = (
    Color(0.0, 0.0, 0.0),
    Color(0.9, 0.1, 0.1),
    Color(0.0, 0.5, 0.0),
    Color(0.9, 0.9, 0.1),
    Color(0.0, 0.0, 0.5),
    Color(0.5, 0.0, 0.5),
    Color(0.0, 0.5, 0.5),
    Color(0.75, 0.75, 0.75),
)

_CUBE_LEVELS = (0, 95, 135, 175, 215, 255)


def background_8_color(index: int) -> Color:
    """Background colour for SGR 40-47 (index 0-7); transparent otherwise."""
    return _BACKGROUND_8[index] if 0 <= index < 8 else TRANSPARENT


def background_16_color(index: int) -> Color:
    """Background colour for SGR 100-107 (index 0-7); transparent otherwise."""
    return _BRIGHT[index] if 0 <= index < 8 else TRANSPARENT


def color_8(index: int) -> Color:
    """Foreground colour for index 0-7; white otherwise."""
    return _FOREGROUND_8[index] if 0 <= index < 8 else WHITE


def color_16(index: int) -> Color:
    """Bright foreground colour for index 8-15; white otherwise."""
    return _BRIGHT[index - 8] if 8 <= index < 16 else WHITE


def color_256(index: int) -> Color:
    """Colour from the xterm 256-colour palette; the index is clamped to 0-255."""
    index = max(0, min(index, 255))
    if index < 16:
        return color_8(index) if index < 8 else color_16(index)
    if index < 232:
        cube = index - 16
        r, g, b = cube // 36, (cube % 36) // 6, cube % 6
        return Color(
            _CUBE_LEVELS[r] / 255.0,
            _CUBE_LEVELS[g] / 255.0,
            _CUBE_LEVELS[b] / 255.0,
        )
    intensity = (8 + (index - 232) * 10) / 255.0
    return Color(intensity, intensity, intensity)


def _parse_params(body: str) -> list[int]:
    params = []
    for part in body.split(";"):
        match = _LEADING_INT.match(part)
        if match is None:
            continue
        value = int(match.group())
        if _INT_MIN <= value <= _INT_MAX:
            params.append(value)
    return params


def _extended(params: list[int], i: int) -> tuple[Color | None, int]:
    """Read a 5;n or 2;r;g;b extended colour starting at *i*."""
    if i >= len(params):
        return None, i
    kind = params[i]
    i += 1
    if kind == 5 and i < len(params):
        return color_256(params[i]), i + 1
    if kind == 2 and i + 2 < len(params):
        r, g, b = params[i : i + 3]
        return Color(r / 255.0, g / 255.0, b / 255.0), i + 3
    return None, i


def _apply(params: list[int], fg: Color, bg: Color) -> tuple[Color, Color]:
    i = 0
    while i < len(params):
        p = params[i]
        i += 1
        if p == 0:
            fg, bg = WHITE, TRANSPARENT
        elif p == 1:
            fg = Color(min(fg.r * 1.2, 1.0), min(fg.g * 1.2, 1.0), min(fg.b * 1.2, 1.0), fg.a)
        elif 30 <= p <= 37:
            fg = color_8(p - 30)
        elif 90 <= p <= 97:
            fg = color_16(p - 90 + 8)
        elif p == 38:
            color, i = _extended(params, i)
            if color is not None:
                fg = color
        elif 40 <= p <= 47:
            bg = background_8_color(p - 40)
        elif 100 <= p <= 107:
            bg = background_16_color(p - 100)
        elif p == 48:
            color, i = _extended(params, i)
            if color is not None:
                bg = color
        elif p == 49:
            bg = TRANSPARENT
    return fg, bg


def parse_ansi(text: str) -> list[TextSegment]:
    """Split *text* into coloured segments, interpreting SGR escape codes.

    Raises ValueError if an escape sequence is not terminated by ``m``.
    """
    segments: list[TextSegment] = []
    fg, bg = WHITE, TRANSPARENT
    pos = 0
    while pos < len(text):
        start = text.find("\x1b", pos)
        if start == -1:
            segments.append(TextSegment(text[pos:], fg, bg))
            break
        if start > pos:
            segments.append(TextSegment(text[pos:start], fg, bg))

        end = text.find("m", start)
        if end == -1:
            raise ValueError(
                f"Detected ANSI escape code is not closed [{text!r}] at pos [{start}]"
            )

        code = text[start:end]
        if len(code) > 2 and code[1] == "[":
            fg, bg = _apply(_parse_params(code[2:]), fg, bg)
        pos = end + 1
    return segments