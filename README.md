# glutkit

A handful of small helpers for tools and editors. They need nothing outside the standard library.

- **`glutkit.helpers`** has three functions:
  - `contains(mapping, key)` reports whether the key is in the mapping.
  - `ptr_validity_check(obj)` returns `"valid"` or `"invalid"`, depending on whether `obj` is `None`.
  - `bit(x)` returns `1 << x`. It raises `ValueError` for a negative `x`.
- **`glutkit.stopwatch`** measures time.
  - `Stopwatch` starts when it is created. `stop()` stores the elapsed time in `result` and returns it, in the chosen `DurationPrecision` (`MICROSECONDS`, `MILLISECONDS` or `SECONDS`). `restart()` starts the measurement again.
  - Used in a `with` block, a `Stopwatch` stops when the block exits.
  - A clock function returning nanoseconds can be passed in to replace the default clock.
  - `SimpleProfiler` collects a fixed number of samples. It logs their average through `logging` when the last one arrives.
  - `profile_loop` calls a function a number of times, then logs the average time per call and returns it.
- **`glutkit.instrumentor`** writes trace-event JSON files in the format that Chrome's `about:tracing` and Perfetto read.
  - `Instrumentor.get()` returns the instrumentor shared by the whole process. Its open session is closed when the process exits.
  - `begin_session` opens a file and closes any session that is already open. `end_session` closes the open session.
  - `InstrumentorTimer`, or `profile_scope(name)`, times a `with` block and writes the result as a `ProfileResult`.
  - `begin_session` raises `OSError` if the file cannot be opened.
- **`glutkit.ansi`** handles colour escape codes.
  - `parse_ansi` splits text that holds ANSI SGR escape codes into `TextSegment`s. Each segment has `text`, `fg` and `bg` fields, and `fg` and `bg` are `Color`s.
  - It supports reset, bold, the 8 and bright colours, 256-colour codes (`38;5;n` / `48;5;n`) and truecolour codes (`38;2;r;g;b` / `48;2;r;g;b`).
  - An escape sequence that is not closed raises `ValueError`.
  - The palette lookups are also available as functions: `color_8`, `color_16`, `color_256`, `background_8_color` and `background_16_color`.
- **`glutkit.text_layout`** wraps text and prepares labels.
  - `wrap_text` inserts line breaks by measured width. It breaks after delimiters (`space _ - / \ .`). Where a line has no delimiter, it forces a hyphenated break.
  - With a positive `max_lines`, `wrap_text` cuts the text short with `...`.
  - `wrap_text_at_underscore` starts a new line before any underscore-separated segment that would not fit.
  - Both wrapping functions take a measuring function. By default, width is the number of characters.
  - `hidden_label` builds an invisible `##` identifier with whitespace removed.
  - `display_label` returns the part of a label before `##`.
- **`glutkit.layout`** does placement geometry.
  - `Vec2` is a vector type with element-wise arithmetic.
  - `WindowPos` names where a window is anchored.
  - `next_window_placement` and `placement_in_window` return a `Placement`, which is a position and a pivot. They return `None` for `WindowPos.CUSTOM`.
  - `adjust_popup_to_bounds` keeps a popup inside a window.
  - `is_point_in_rect` is a hit test.

## Installation

```
pip install .
```

## Examples

Time a block of code:

```python
from glutkit.stopwatch import Stopwatch, DurationPrecision

with Stopwatch(DurationPrecision.MILLISECONDS) as sw:
    do_work()
print(sw.result)
```

Record a trace:

```python
from glutkit.instrumentor import Instrumentor, profile_scope

tracer = Instrumentor.get()
tracer.begin_session("startup", "profiles", "startup.json")
with profile_scope("load_assets"):
    load_assets()
tracer.end_session()
```

Parse coloured terminal output:

```python
from glutkit.ansi import parse_ansi

for segment in parse_ansi("\033[31merror\033[0m: file missing"):
    print(repr(segment.text), segment.fg, segment.bg)
```

Wrap text by width:

```python
from glutkit.text_layout import wrap_text

print(wrap_text("some_long_identifier_name", 80.0, lambda s: 7.0 * len(s)))
```

Anchor a window to the bottom-right corner of a work area:

```python
from glutkit.layout import Vec2, WindowPos, next_window_placement

placement = next_window_placement(WindowPos.BOTTOM_RIGHT, Vec2(0, 0), Vec2(1280, 720))
print(placement.pos, placement.pivot)
```

## What it does not do

glutkit only computes values. It draws nothing: it has no widgets, no rendering and no input handling.

- It does not track mouse or button state.
- Text is measured by a function the caller supplies.
- The caller draws the coloured segments and places the windows.

## Running the tests

```
pip install .[test]
pytest
```