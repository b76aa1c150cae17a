"""A shared cache of terminal colour pairs.

The cache keeps two snapshots of the terminal's colour pairs: the host
palette as it was found and the active palette in use. Pairs in the
active palette are kept in most-recently-used order, so lookups move a
hit to the front and new pairs are taken from unused slots or, failing
that, from the least recently used custom pair.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import Any

from .color_math import rgb_to_hsl
from .palette import Palette

MAX_PAIRS = 0x7FFF

_RGB = tuple[int, int, int]
_HSL = tuple[float, float, float]


def ncurses_rgb(value: float) -> float:
    """Scale a curses colour component (0-1000) to the 0-255 range."""
    return (value / 1000.0) * 255.0


class PaletteId(IntEnum):
    """The palettes the cache keeps."""

    HOST = 0
    ACTIVE = 1


@dataclass
class ColorPair:
    """One colour pair with the RGB and HSL values of its two colours.

    ``rgb`` and ``hsl`` hold the foreground values first and the
    background values second. ``origin`` is the owner that added the
    pair; ``custom`` marks pairs not taken from the host palette.
    """

    num: int
    fg: int = 0
    bg: int = 0
    rgb: tuple[_RGB, _RGB] = ((0, 0, 0), (0, 0, 0))
    hsl: tuple[_HSL, _HSL] = ((0.0, 0.0, 0.0), (0.0, 0.0, 0.0))
    origin: Any = field(default=None, compare=False)
    custom: bool = False


class ColorCache:
    """Reference-counted cache of the colour pairs of a :class:`Palette`.

    Creating the cache takes the first reference, snapshots the host
    palette and copies it into the active palette.
    """

    def __init__(self, palette: Palette, max_pairs: int = MAX_PAIRS) -> None:
        self.palette = palette
        self._max_pairs = max_pairs
        self.ref_count = 0
        self.reserved_pair = -1
        self.term_colors = 0
        self.term_pairs = 0
        self.palettes: dict[PaletteId, list[ColorPair]] = {
            pid: [] for pid in PaletteId
        }
        self._initialize()

    def _initialize(self) -> None:
        self.ref_count = 1
        self.term_colors = self.palette.colors
        self.term_pairs = min(self.palette.pairs, self._max_pairs)
        self.save_palette(PaletteId.HOST)
        self.copy_palette(PaletteId.HOST, PaletteId.ACTIVE)

    def acquire(self) -> ColorCache:
        """Take another reference; a fully released cache is set up afresh."""
        if self.ref_count <= 0:
            self._initialize()
        else:
            self.ref_count += 1
        return self

    def release(self) -> bool:
        """Drop a reference. Returns true once the last one is gone.

        Releasing the last reference frees every palette.
        """
        if self.ref_count <= 0:
            raise RuntimeError("colour cache already released")
        self.ref_count -= 1
        if self.ref_count > 0:
            return False
        for pid in PaletteId:
            self.free_palette(pid)
        return True

    def _active(self) -> list[ColorPair]:
        return self.palettes[PaletteId.ACTIVE]

    def _color_rgb(self, color: int) -> _RGB:
        try:
            return self.palette.color_content(color)
        except ValueError:
            return (0, 0, 0)

    def _profile_pair(self, pair: ColorPair) -> None:
        try:
            pair.fg, pair.bg = self.palette.pair_content(pair.num)
        except ValueError:
            pass

        fg_rgb = self._color_rgb(pair.fg)
        bg_rgb = self._color_rgb(pair.bg)
        pair.rgb = (fg_rgb, bg_rgb)
        pair.hsl = (
            rgb_to_hsl(*(ncurses_rgb(c) for c in fg_rgb)),
            rgb_to_hsl(*(ncurses_rgb(c) for c in bg_rgb)),
        )

    def _reset_pair(self, pair: ColorPair) -> None:
        pair.origin = None
        pair.fg = 0
        pair.bg = 0
        pair.rgb = ((0, 0, 0), (0, 0, 0))
        pair.hsl = ((0.0, 0.0, 0.0), (0.0, 0.0, 0.0))
        self.palette.init_pair(pair.num, 0, 0)

    def save_palette(self, cache_id: PaletteId) -> None:
        """Snapshot every pair of the terminal into palette ``cache_id``.

        The first pair found as black on black becomes the reserved pair.
        """
        self.free_palette(cache_id)
        self.reserved_pair = -1

        saved = []
        for num in range(self.term_pairs):
            pair = ColorPair(num=num)
            self._profile_pair(pair)
            if pair.fg == 0 and pair.bg == 0 and self.reserved_pair == -1:
                self.reserved_pair = num
            saved.append(pair)
        self.palettes[PaletteId(cache_id)] = saved

    def copy_palette(self, source: PaletteId, target: PaletteId) -> None:
        """Replace palette ``target`` with a copy of ``source``, if it is not empty."""
        pairs = self.palettes[PaletteId(source)]
        if not pairs:
            return
        self.palettes[PaletteId(target)] = [replace(pair) for pair in pairs]

    def load_palette(self, cache_id: PaletteId) -> None:
        """Make palette ``cache_id`` the active one and program its pairs."""
        pairs = self.palettes[PaletteId(cache_id)]
        if not pairs:
            return
        self.palettes[PaletteId.ACTIVE] = [replace(pair) for pair in pairs]
        for pair in pairs:
            try:
                self.palette.init_pair(pair.num, pair.fg, pair.bg)
            except ValueError:
                continue

    def free_palette(self, cache_id: PaletteId) -> None:
        """Empty palette ``cache_id``."""
        self.palettes[PaletteId(cache_id)] = []

    def find_unused_pair(self) -> int:
        """Search backwards for a black-on-black pair; 0 if none is found."""
        for num in range(self.term_pairs - 1, 0, -1):
            try:
                fg, bg = self.palette.pair_content(num)
            except ValueError:
                continue
            if num == self.reserved_pair:
                continue
            if fg == 0 and bg == 0:
                return num
        return 0

    def find_lru_pair(self) -> int:
        """Return the least recently used custom pair, or -1 if there is none.

        The reserved pair, pair 0 and the most recent entry are never chosen.
        """
        for pair in reversed(self._active()[1:]):
            if pair.num == self.reserved_pair or pair.num == 0:
                continue
            if pair.custom:
                return pair.num
        return -1

    def _move_to_front(self, pair: ColorPair) -> None:
        active = self._active()
        active.remove(pair)
        active.insert(0, pair)

    def add_pair(self, origin: Any, fg: int, bg: int) -> int:
        """Define a new pair ``fg`` on ``bg`` owned by ``origin``.

        Returns the pair number, or 0 when no pair could be allocated.
        """
        num = self.find_unused_pair()
        if num <= 0:
            num = self.find_lru_pair()
        if num <= 0:
            return 0

        pair = next((p for p in self._active() if p.num == num), None)
        if pair is None:
            return 0

        pair.origin = origin
        pair.custom = True
        self.palette.init_pair(num, fg, bg)
        self._profile_pair(pair)
        self._move_to_front(pair)
        return num

    def free_pairs(self, origin: Any) -> None:
        """Reset every custom pair added by ``origin`` to black on black."""
        if origin is None:
            return
        for pair in self._active():
            if pair.custom and pair.origin is origin:
                self._reset_pair(pair)

    def find_exact_color(self, r: int, g: int, b: int) -> int:
        """Return the colour whose pair has ``(r, g, b)`` on both sides, or -1.

        The colour is the foreground of a pair whose foreground and
        background both have exactly these components.
        """
        wanted = (r, g, b)
        for pair in self._active():
            if pair.rgb[0] == wanted and pair.rgb[1] == wanted:
                self._move_to_front(pair)
                return pair.num
        return -1

    def find_pair(self, fg: int, bg: int) -> int:
        """Return the number of the pair ``fg`` on ``bg``, or -1."""
        for pair in self._active():
            if pair.fg == fg and pair.bg == bg:
                self._move_to_front(pair)
                return pair.num
        return -1

    def split_pair(self, pair_num: int) -> tuple[int, int]:
        """Return ``(fg, bg)`` of pair ``pair_num``.

        Raises ``KeyError`` if the pair is not in the active palette.
        """
        for pair in self._active():
            if pair.num == pair_num:
                self._move_to_front(pair)
                return pair.fg, pair.bg
        raise KeyError(pair_num)