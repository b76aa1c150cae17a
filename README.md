# vtkit

Building blocks for a terminal emulator written in Python: color space
math, a cache of terminal color pairs, mapping of a guest program's private
colors onto free terminal colors, mouse report encoding, a small
cooperative scheduler and a stopwatch. There are no dependencies beyond the
standard library.

## Modules

### `vtkit.color_math`

Color conversions with RGB channels in the 0-255 range:

- `rgb_to_lab(r, g, b)` returns CIELAB `(l, a, b)`.
- `rgb_to_hsl(r, g, b)` returns `(h, s, l)`, each in 0-1.
- `hsl_to_rgb(h, s, l)` returns `(r, g, b)` in 0-255, using the helper
  `hue_to_rgb(v1, v2, vh)`.
- `cie76_delta(l1, a1, b1, l2, a2, b2)` is the 1976 perceptual distance
  between two CIELAB colors.
- `cielab_to_hue(a, b)` is the hue angle in degrees.

### `vtkit.stringv`

- `split_string(string, delim)` splits on every occurrence of `delim`,
  keeping the (possibly empty) text after the last one. It raises
  `ValueError` for an empty delimiter or a string shorter than it.
- `copy_strings(array, limit=0)` copies a list of strings; a positive
  `limit` keeps the first `limit + 1` items.

### `vtkit.ctimer`

`Timer(clock=None)` measures time since creation or the last `reset()`.
`elapsed()` returns a `timedelta` truncated to microseconds, and
`compare(threshold)` returns 1, 0 or -1 as the elapsed time is greater
than, equal to or less than `threshold` (a `timedelta` or seconds). The
clock defaults to `time.monotonic_ns` and may be replaced by any callable
returning nanoseconds.

### `vtkit.protothread`

A `Scheduler` of cooperative `Thread`s built on generators. Inside a thread,
a bare `yield` lets other ready threads run, and `yield channel` waits until
`signal(channel)` (wakes the oldest waiter) or `broadcast(channel)` (wakes
all). `run()` runs the oldest ready thread up to its next `yield` and
returns whether more threads are ready. `kill(thread)` removes a ready or
waiting thread and calls its `atexit`; `set_ready_function(func)` installs
a callback for when a thread becomes ready on an idle scheduler; `close()`
raises `RuntimeError` if any thread is still running, ready or waiting.

```python
from vtkit.protothread import Scheduler

def worker(log):
    log.append("start")
    yield "go"            # wait on the channel "go"
    log.append("woke")
    return "finished"

log = []
scheduler = Scheduler()
thread = scheduler.create(worker, log)
scheduler.run()            # log == ["start"]
scheduler.signal("go")
scheduler.run()            # log == ["start", "woke"]
assert thread.done and thread.result == "finished"
scheduler.close()
```

### `vtkit.palette`

`Palette` is the interface to a terminal's color pairs and colors
(components in 0-1000): `colors`, `pairs`, `init_pair`, `init_color`,
`pair_content` and `color_content`. Failures raise `ValueError`.

- `MemoryPalette(colors=256, pairs=256, rgb=None)` keeps everything in
  memory. Undefined colors read as black, undefined pairs as black on
  black, and pair 0 starts as white on black.
- `CursesPalette(backend=None)` uses the running `curses` session (or any
  object offering the same color functions).

### `vtkit.color_cache`

`ColorCache(palette)` snapshots the palette's pairs into a host palette and
an active palette (`PaletteId.HOST`, `PaletteId.ACTIVE`) of `ColorPair`
records holding each pair's colors with their RGB and HSL values. Lookups
(`find_pair`, `find_exact_color`, `split_pair`) move hits to the front of
the active palette. `add_pair(origin, fg, bg)` takes an unused
(black-on-black) pair or else the least recently used custom pair and
returns its number, or 0 when none is available; `free_pairs(origin)`
resets the pairs an owner added. The cache is reference counted through
`acquire()` and `release()`. `ncurses_rgb(value)` scales a 0-1000
component to 0-255.

```python
from vtkit.palette import MemoryPalette
from vtkit.color_cache import ColorCache

cache = ColorCache(MemoryPalette())
pair = cache.add_pair(None, 2, 0)
assert cache.find_pair(2, 0) == pair
assert cache.split_pair(pair) == (2, 0)
```

### `vtkit.color_map`

`ColorMap(palette)` gives a guest program's private colors free slots in
the terminal color table. `add(color, red, green, blue)` (0-255 components,
`color` may be -1 for an unnumbered color) returns the terminal color to
use: the eight basic colors pass through unchanged, black RGB maps to
black, and -1 means the table is full. `lookup(color)` and
`lookup_rgb(red, green, blue)` find existing mappings, and `clear()` frees
every slot. Entries are `MappedColor` records.

```python
from vtkit.palette import MemoryPalette
from vtkit.color_map import ColorMap

colors = ColorMap(MemoryPalette())
slot = colors.add(20, 255, 128, 0)   # 8, the first free slot
assert colors.lookup(20) == slot
```

### `vtkit.mouse`

`encode_vt200(event, window=None)` and `encode_sgr(event, mode, window=None)`
turn a `MouseEvent(x, y, bstate)` into the report bytes a guest expects.
`bstate` combines `MouseButton` flags; `MouseMode.ALTSCROLL` makes the SGR
encoder report the wheel as cursor keys. When a `Window` is given, screen
coordinates are made window-relative and 1-based, and events outside the
window produce no bytes. `MouseDriver(mode, window)` reports events through
`handle(event)` only between `start()` and `stop()`.

```python
from vtkit.mouse import MouseButton, MouseEvent, Window, encode_sgr

event = MouseEvent(x=4, y=2, bstate=MouseButton.BUTTON1_PRESSED)
assert encode_sgr(event) == b"\x1b[<0;4;2M"
assert encode_sgr(event, window=Window(0, 0, 24, 80)) == b"\x1b[<0;5;3M"
```

## What it does not do

vtkit is a set of parts, not a terminal emulator. It does not parse escape
sequences, keep a screen or history buffer, start programs on a
pseudo-terminal, read the keyboard or draw anything. There is no command to
run.

## Tests

```
pip install -e .[test]
pytest
```