"""Map a guest application's private colour numbers onto terminal colours.

A guest may define colours by RGB value under its own numbers. Each such
colour is given a free slot in the terminal's colour table; a slot is
free while it reads back as black. The eight basic colours cannot be
redefined and are passed through unchanged.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .palette import COLOR_BLACK, COLOR_WHITE, RGB_MAX, Palette

MAX_COLOR = 0x7FFF
ANONYMOUS = -1


@dataclass
class MappedColor:
    """One private colour and the terminal colour it was given."""

    global_color: int
    private_color: int
    red: float
    green: float
    blue: float


def _clamp(value: float) -> float:
    return min(max(value, 0.0), 255.0)


class ColorMap:
    """The colours one terminal instance has defined in a :class:`Palette`."""

    def __init__(self, palette: Palette) -> None:
        self.palette = palette
        self._entries: list[MappedColor] = []

    def __iter__(self) -> Iterator[MappedColor]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, color: int, red: float, green: float, blue: float) -> int:
        """Map private ``color`` with RGB components in 0-255.

        ``color`` may be -1 for a colour without a private number.
        Returns the terminal colour to use, or -1 when no free colour is
        left in the terminal's table.
        """
        if COLOR_BLACK <= color <= COLOR_WHITE:
            return color

        red, green, blue = (max(c, 0.0) for c in (red, green, blue))
        if red + green + blue == 0.0:
            return COLOR_BLACK
        red, green, blue = (_clamp(c) for c in (red, green, blue))

        if color != ANONYMOUS:
            found = self.lookup(color)
            if found != -1:
                return found

        found = self.lookup_rgb(red, green, blue)
        if found != -1:
            return found

        global_color = COLOR_WHITE + 1
        while True:
            try:
                r, g, b = self.palette.color_content(global_color)
            except ValueError:
                return -1
            if r + g + b == 0:
                break
            if global_color == MAX_COLOR:
                return -1
            global_color += 1

        self._entries.append(
            MappedColor(
                global_color=global_color,
                private_color=color,
                red=red,
                green=green,
                blue=blue,
            )
        )
        self.palette.init_color(
            global_color,
            int(red / 255.0 * RGB_MAX),
            int(green / 255.0 * RGB_MAX),
            int(blue / 255.0 * RGB_MAX),
        )
        return global_color

    def lookup_rgb(self, red: float, green: float, blue: float) -> int:
        """Return the terminal colour mapped with these components, or -1.

        Components are compared after truncation to integers.
        """
        wanted = (int(red), int(green), int(blue))
        for entry in self._entries:
            if (int(entry.red), int(entry.green), int(entry.blue)) == wanted:
                return entry.global_color
        return -1

    def lookup(self, color: int) -> int:
        """Return the terminal colour mapped to private ``color``, or -1."""
        if color == ANONYMOUS:
            return -1
        for entry in self._entries:
            if entry.private_color == color:
                return entry.global_color
        return -1

    def clear(self) -> None:
        """Release every mapped colour, setting its slot back to black."""
        for entry in self._entries:
            self.palette.init_color(entry.global_color, 0, 0, 0)
        self._entries.clear()