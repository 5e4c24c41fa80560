import pytest

from glutkit.ansi import (
    Color,
    TextSegment,
    background_8_color,
    background_16_color,
    color_8,
    color_16,
    color_256,
    parse_ansi,
)

DEFAULT_FG = Color(1.0, 1.0, 1.0, 1.0)
DEFAULT_BG = Color(0.0, 0.0, 0.0, 0.0)


def test_plain_text_single_segment():
    assert parse_ansi("hello") == [TextSegment("hello", DEFAULT_FG, DEFAULT_BG)]


def test_empty_text():
    assert parse_ansi("") == []


def test_foreground_8():
    segments = parse_ansi("\x1b[31mred")
    assert segments == [TextSegment("red", color_8(1), DEFAULT_BG)]


def test_bright_foreground():
    (segment,) = parse_ansi("\x1b[92mgo")
    assert segment.fg == color_16(10)


def test_reset_restores_defaults():
    segments = parse_ansi("\x1b[31;44ma\x1b[0mb")
    assert segments[0] == TextSegment("a", color_8(1), background_8_color(4))
    assert segments[1] == TextSegment("b", DEFAULT_FG, DEFAULT_BG)


def test_bright_background():
    (segment,) = parse_ansi("\x1b[103mx")
    assert segment.bg == background_16_color(3)


def test_background_reset_49():
    segments = parse_ansi("\x1b[41ma\x1b[49mb")
    assert segments[0].bg == background_8_color(1)
    assert segments[1].bg == DEFAULT_BG


def test_extended_256_colors():
    (segment,) = parse_ansi("\x1b[38;5;196;48;5;9mx")
    assert segment.fg == color_256(196)
    assert segment.bg == color_16(9)


def test_truecolor_foreground():
    (segment,) = parse_ansi("\x1b[38;2;255;0;0mx")
    assert segment.fg == Color(1.0, 0.0, 0.0, 1.0)


def test_truecolor_incomplete_is_ignored():
    (segment,) = parse_ansi("\x1b[38;2;255;0mx")
    assert segment.fg == DEFAULT_FG


def test_bold_brightens_and_caps():
    (segment,) = parse_ansi("\x1b[31;1mx")
    base = color_8(1)
    assert segment.fg.r == pytest.approx(min(base.r * 1.2, 1.0))
    assert segment.fg.g == pytest.approx(base.g * 1.2)
    assert segment.fg.r <= 1.0


def test_non_csi_escape_is_dropped():
    segments = parse_ansi("a\x1bXmb")
    assert [s.text for s in segments] == ["a", "b"]
    assert all(s.fg == DEFAULT_FG for s in segments)


def test_unclosed_escape_raises():
    with pytest.raises(ValueError):
        parse_ansi("abc\x1b[31")


def test_segments_concatenate_to_stripped_text():
    text = "one \x1b[32mtwo\x1b[0m three \x1b[1;34mfour"
    assert "".join(s.text for s in parse_ansi(text)) == "one two three four"


def test_palette_defaults_outside_range():
    assert color_8(8) == DEFAULT_FG
    assert color_16(7) == DEFAULT_FG
    assert background_8_color(-1) == DEFAULT_BG
    assert background_16_color(8) == DEFAULT_BG


def test_color_256_low_indices_match_palettes():
    assert color_256(3) == color_8(3)
    assert color_256(12) == color_16(12)


def test_color_256_cube_corners():
    assert color_256(16) == Color(0.0, 0.0, 0.0, 1.0)
    assert color_256(231) == Color(1.0, 1.0, 1.0, 1.0)


def test_color_256_clamps():
    assert color_256(-5) == color_256(0)
    assert color_256(300) == color_256(255)


def test_color_256_grayscale_is_gray_and_increasing():
    grays = [color_256(i) for i in range(232, 256)]
    assert all(c.r == c.g == c.b for c in grays)
    assert all(a.r < b.r for a, b in zip(grays, grays[1:]))
    assert grays[0].r == pytest.approx(8 / 255.0)