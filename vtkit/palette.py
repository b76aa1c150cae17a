"""Access to a terminal's colour pairs and colour definitions.

Colour components use the curses range 0-1000. Failures such as an
out-of-range pair or colour raise :class:`ValueError`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

COLOR_BLACK = 0
COLOR_WHITE = 7
RGB_MAX = 1000


class Palette(ABC):
    """Interface to a table of colour pairs and colour definitions."""

    @property
    @abstractmethod
    def colors(self) -> int:
        """Number of colours the terminal supports."""

    @property
    @abstractmethod
    def pairs(self) -> int:
        """Number of colour pairs the terminal supports."""

    @abstractmethod
    def init_pair(self, pair: int, fg: int, bg: int) -> None:
        """Define colour pair ``pair`` as ``fg`` on ``bg``."""

    @abstractmethod
    def init_color(self, color: int, r: int, g: int, b: int) -> None:
        """Define colour ``color`` with components in 0-1000."""

    @abstractmethod
    def pair_content(self, pair: int) -> tuple[int, int]:
        """Return the ``(fg, bg)`` colours of ``pair``."""

    @abstractmethod
    def color_content(self, color: int) -> tuple[int, int, int]:
        """Return the ``(r, g, b)`` components of ``color``."""


class MemoryPalette(Palette):
    """A palette held in memory, for use without a real terminal.

    Undefined colours read as black and undefined pairs as black on
    black; pair 0 starts as white on black. ``rgb`` optionally gives
    initial colour definitions as ``{color: (r, g, b)}``.
    """

    def __init__(
        self,
        colors: int = 256,
        pairs: int = 256,
        rgb: Mapping[int, tuple[int, int, int]] | None = None,
    ) -> None:
        if colors <= 0 or pairs <= 0:
            raise ValueError("colour and pair counts must be positive")
        self._colors = colors
        self._pairs = pairs
        self._rgb: dict[int, tuple[int, int, int]] = {}
        self._pair_table: dict[int, tuple[int, int]] = {0: (COLOR_WHITE, COLOR_BLACK)}
        for color, (r, g, b) in (rgb or {}).items():
            self.init_color(color, r, g, b)

    @property
    def colors(self) -> int:
        return self._colors

    @property
    def pairs(self) -> int:
        return self._pairs

    def _check_pair(self, pair: int) -> None:
        if not 0 <= pair < self._pairs:
            raise ValueError(f"pair {pair} out of range 0..{self._pairs - 1}")

    def _check_color(self, color: int, allow_default: bool = False) -> None:
        low = -1 if allow_default else 0
        if not low <= color < self._colors:
            raise ValueError(f"colour {color} out of range {low}..{self._colors - 1}")

    def init_pair(self, pair: int, fg: int, bg: int) -> None:
        self._check_pair(pair)
        self._check_color(fg, allow_default=True)
        self._check_color(bg, allow_default=True)
        self._pair_table[pair] = (fg, bg)

    def init_color(self, color: int, r: int, g: int, b: int) -> None:
        self._check_color(color)
        for component in (r, g, b):
            if not 0 <= component <= RGB_MAX:
                raise ValueError(f"component {component} out of range 0..{RGB_MAX}")
        self._rgb[color] = (r, g, b)

    def pair_content(self, pair: int) -> tuple[int, int]:
        self._check_pair(pair)
        return self._pair_table.get(pair, (COLOR_BLACK, COLOR_BLACK))

    def color_content(self, color: int) -> tuple[int, int, int]:
        self._check_color(color)
        return self._rgb.get(color, (0, 0, 0))


class CursesPalette(Palette):
    """The palette of the running curses session.

    ``backend`` is the curses module or an object with the same colour
    functions; by default the standard ``curses`` module is used.
    """

    def __init__(self, backend: Any = None) -> None:
        if backend is None:
            import curses

            backend = curses
        self._backend = backend

    @contextmanager
    def _translate_errors(self) -> Iterator[None]:
        try:
            yield
        except self._backend.error as exc:
            raise ValueError(str(exc)) from exc

    @property
    def colors(self) -> int:
        return int(getattr(self._backend, "COLORS", 0))

    @property
    def pairs(self) -> int:
        return int(getattr(self._backend, "COLOR_PAIRS", 0))

    def init_pair(self, pair: int, fg: int, bg: int) -> None:
        with self._translate_errors():
            self._backend.init_pair(pair, fg, bg)

    def init_color(self, color: int, r: int, g: int, b: int) -> None:
        with self._translate_errors():
            self._backend.init_color(color, r, g, b)

    def pair_content(self, pair: int) -> tuple[int, int]:
        with self._translate_errors():
            fg, bg = self._backend.pair_content(pair)
        return fg, bg

    def color_content(self, color: int) -> tuple[int, int, int]:
        with self._translate_errors():
            r, g, b = self._backend.color_content(color)
        return r, g, b