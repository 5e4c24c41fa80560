"""Width-limited text wrapping and widget label helpers."""

from __future__ import annotations

from collections.abc import Callable

__all__ = [
    "is_delim_char",
    "wrap_text",
    "wrap_text_at_underscore",
    "hidden_label",
    "display_label",
]

Measure = Callable[[str], float]

_DELIMITERS = frozenset(" _-/\\.")
_ELLIPSIS = "..."


def is_delim_char(c: str) -> bool:
    """Return True if *c* is a character after which a line may be broken."""
    return c in _DELIMITERS


def _char_count(text: str) -> float:
    return float(len(text))


def wrap_text(
    text: str,
    wrap_width: float,
    measure: Measure = _char_count,
    max_lines: int = -1,
) -> str:
    """Insert line breaks so that each line fits within *wrap_width*.

    Lines are broken after the last delimiter character of the line. A line
    without a delimiter is forced to break: its overflowing character is
    replaced by ``-`` and a newline follows. When *max_lines* is positive and
    the last allowed line overflows, it is shortened and ends in ``...``;
    the rest of the text is dropped.
    """
    out: list[str] = []
    line_start = 0
    last_delim: int | None = None
    line_count = 0

    def line(end: int | None = None) -> str:
        return "".join(out[line_start:end])

    for c in text:
        out.append(c)
        if is_delim_char(c):
            last_delim = len(out)

        if measure(line()) <= wrap_width:
            continue

        if max_lines > 0 and line_count + 1 == max_lines:
            end = len(out)
            ellipsis_width = measure(_ELLIPSIS)
            while end > line_start and measure(line(end)) + ellipsis_width > wrap_width:
                end -= 1
            return "".join(out[:end]) + _ELLIPSIS

        if last_delim is not None and last_delim > line_start:
            out.insert(last_delim, "\n")
            line_start = last_delim + 1
        else:
            out[-1] = "-"
            out.append("\n")
            line_start = len(out)
        line_count += 1
        last_delim = None

    return "".join(out)


def _underscore_segments(text: str) -> list[str]:
    if not text:
        return []
    segments = text.split("_")
    if text.endswith("_"):
        segments.pop()
    return segments


def wrap_text_at_underscore(
    text: str,
    wrap_width: float,
    measure: Measure = _char_count,
) -> str:
    """Wrap *text* by starting a new line before an underscore-separated segment
    that would not fit. A trailing underscore is dropped."""
    wrapped = ""
    text_width = 0.0
    for segment in _underscore_segments(text):
        if text_width + measure(segment) > wrap_width:
            wrapped += "\n"
            text_width = 0.0
        wrapped += segment + "_"
        text_width += measure(wrapped + "_")

    if wrapped.endswith("_"):
        wrapped = wrapped[:-1]
    return wrapped


def hidden_label(label: str) -> str:
    """Return an invisible widget identifier: ``##`` followed by *label* without whitespace."""
    return "##" + "".join(c for c in label if not c.isspace())


def display_label(label: str) -> str:
    """Return the visible part of *label*, everything before the first ``##``."""
    visible, _, _ = label.partition("##")
    return visible