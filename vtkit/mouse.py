"""Translate mouse events into the escape sequences a guest expects.

Two reporting formats are supported: the classic VT200 (X10-style)
encoding, in which button and coordinates are single bytes offset by 32,
and the SGR encoding with decimal parameters.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag

_WHEEL_UP = b"\x1bOA"
_WHEEL_DOWN = b"\x1bOB"


class MouseButton(IntFlag):
    """Button and modifier state of a mouse event."""

    BUTTON1_PRESSED = 1 << 0
    BUTTON1_RELEASED = 1 << 1
    BUTTON4_PRESSED = 1 << 2
    BUTTON5_PRESSED = 1 << 3
    SHIFT = 1 << 4
    CTRL = 1 << 5
    ALT = 1 << 6


class MouseMode(IntFlag):
    """Mouse reporting modes a guest may request."""

    VT200 = 1 << 0
    SGR = 1 << 1
    ALTSCROLL = 1 << 2


@dataclass(frozen=True)
class MouseEvent:
    """A mouse event in screen coordinates (0-based)."""

    x: int
    y: int
    bstate: MouseButton


@dataclass(frozen=True)
class Window:
    """A rectangular area of the screen."""

    begin_y: int
    begin_x: int
    height: int
    width: int

    def transform(self, y: int, x: int) -> tuple[int, int] | None:
        """Convert screen ``(y, x)`` to window-relative coordinates.

        Returns ``None`` when the point lies outside the window.
        """
        if not (self.begin_y <= y < self.begin_y + self.height):
            return None
        if not (self.begin_x <= x < self.begin_x + self.width):
            return None
        return y - self.begin_y, x - self.begin_x


def _position(event: MouseEvent, window: Window | None) -> tuple[int, int] | None:
    """Return the reported ``(x, y)``; 1-based when relative to a window."""
    if window is None:
        return event.x, event.y
    relative = window.transform(event.y, event.x)
    if relative is None:
        return None
    y, x = relative
    return x + 1, y + 1


def encode_vt200(event: MouseEvent, window: Window | None = None) -> bytes:
    """Encode ``event`` in VT200 format; empty if there is nothing to report."""
    position = _position(event, window)
    if position is None:
        return b""
    x, y = position

    def report(button: int) -> bytes:
        return b"\x1b[M" + bytes(((32 + button) & 0xFF, (32 + x) & 0xFF, (32 + y) & 0xFF))

    if event.bstate & MouseButton.BUTTON1_PRESSED:
        return report(0x0)
    if event.bstate & MouseButton.BUTTON1_RELEASED:
        return report(0x3)
    if event.bstate & MouseButton.BUTTON4_PRESSED:
        return _WHEEL_UP
    if event.bstate & MouseButton.BUTTON5_PRESSED:
        return _WHEEL_DOWN
    return b""


def encode_sgr(
    event: MouseEvent, mode: MouseMode = MouseMode.SGR, window: Window | None = None
) -> bytes:
    """Encode ``event`` in SGR format; empty if there is nothing to report.

    With :attr:`MouseMode.ALTSCROLL` in ``mode`` the wheel is reported as
    cursor up and down keys instead.
    """
    position = _position(event, window)
    if position is None:
        return b""
    x, y = position

    button = 0
    if event.bstate & MouseButton.SHIFT:
        button |= 4
    if event.bstate & MouseButton.CTRL:
        button |= 8
    if event.bstate & MouseButton.ALT:
        button |= 16

    def report(code: int, final: str) -> bytes:
        return f"\x1b[<{code};{x};{y}{final}".encode("ascii")

    if event.bstate & MouseButton.BUTTON1_PRESSED:
        return report(0, "M")
    if event.bstate & MouseButton.BUTTON1_RELEASED:
        return report(0, "m")
    if event.bstate & MouseButton.BUTTON4_PRESSED:
        if mode & MouseMode.ALTSCROLL:
            return _WHEEL_UP
        return report(button + 64 + 4, "M")
    if event.bstate & MouseButton.BUTTON5_PRESSED:
        if mode & MouseMode.ALTSCROLL:
            return _WHEEL_DOWN
        return report(button + 64 + 5, "M")
    return b""


class MouseDriver:
    """Per-terminal mouse reporting state.

    Events are only reported while the driver is running; otherwise they
    are discarded.
    """

    def __init__(self, mode: MouseMode = MouseMode(0), window: Window | None = None) -> None:
        self.mode = MouseMode(mode)
        self.window = window
        self.running = False

    def start(self) -> None:
        """Begin reporting events."""
        self.running = True

    def stop(self) -> None:
        """Stop reporting and clear the requested mode."""
        self.mode = MouseMode(0)
        self.running = False

    def handle(self, event: MouseEvent) -> bytes:
        """Return the bytes to send to the guest for ``event``."""
        if not self.running:
            return b""
        if self.mode & MouseMode.SGR:
            return encode_sgr(event, self.mode, self.window)
        if self.mode & MouseMode.VT200:
            return encode_vt200(event, self.window)
        return b""