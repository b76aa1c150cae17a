"""Cooperative threads built on generators.

A thread is a generator. Each ``yield`` hands control back to the
scheduler:

* ``yield`` (or ``yield None``) lets the other ready threads run, then
  resumes this one;
* ``yield channel`` parks the thread until :meth:`Scheduler.signal` or
  :meth:`Scheduler.broadcast` is called with that channel.

A channel is any hashable object. Nested functions that may wait are
called with ``yield from``; their return value is passed back as usual.
"""

from __future__ import annotations

import inspect
from collections import deque
from collections.abc import Callable, Generator
from typing import Any


class Thread:
    """One cooperative thread managed by a :class:`Scheduler`.

    ``atexit`` may be set to a callable taking no arguments; it is
    called when the thread is killed. ``done`` turns true once the
    generator has finished, and ``result`` then holds its return value.
    """

    def __init__(self, generator: Generator[Any, None, Any]) -> None:
        self._generator = generator
        self.channel: Any = None
        self.atexit: Callable[[], None] | None = None
        self.done = False
        self.result: Any = None

    def __repr__(self) -> str:
        state = "done" if self.done else "live"
        return f"<Thread {self._generator.__name__} {state}>"


class Scheduler:
    """Run queue and wait queues for cooperative threads."""

    def __init__(self) -> None:
        self._ready: deque[Thread] = deque()
        self._waiting: dict[Any, deque[Thread]] = {}
        self._running: Thread | None = None
        self._ready_function: Callable[[], None] | None = None

    def _add_ready(self, thread: Thread) -> None:
        if self._ready_function is not None and not self._ready and self._running is None:
            self._ready_function()
        self._ready.append(thread)

    def _enqueue_wait(self, thread: Thread, channel: Any) -> None:
        thread.channel = channel
        self._waiting.setdefault(channel, deque()).append(thread)

    def create(self, func: Callable[..., Generator[Any, None, Any]], *args: Any) -> Thread:
        """Start ``func(*args)`` as a new thread and put it on the ready queue."""
        generator = func(*args)
        if not inspect.isgenerator(generator):
            raise TypeError(f"{func!r} did not return a generator")
        thread = Thread(generator)
        self._add_ready(thread)
        return thread

    def run(self) -> bool:
        """Run the oldest ready thread until it yields.

        Returns true if more threads are ready to run afterwards.
        """
        if self._running is not None:
            raise RuntimeError("run() called from inside a running thread")
        if not self._ready:
            return False

        thread = self._ready.popleft()
        self._running = thread
        try:
            try:
                request = next(thread._generator)
            except StopIteration as stop:
                thread.done = True
                thread.result = stop.value
            except BaseException:
                thread.done = True
                raise
            else:
                if request is None:
                    self._add_ready(thread)
                else:
                    self._enqueue_wait(thread, request)
        finally:
            self._running = None

        return bool(self._ready)

    def _wake(self, channel: Any, wake_one: bool) -> None:
        queue = self._waiting.get(channel)
        if not queue:
            return
        while queue:
            thread = queue.popleft()
            thread.channel = None
            self._add_ready(thread)
            if wake_one:
                break
        if not queue:
            del self._waiting[channel]

    def signal(self, channel: Any) -> None:
        """Make the oldest thread waiting on ``channel`` ready, if any."""
        self._wake(channel, wake_one=True)

    def broadcast(self, channel: Any) -> None:
        """Make every thread waiting on ``channel`` ready."""
        self._wake(channel, wake_one=False)

    def kill(self, thread: Thread) -> bool:
        """Stop ``thread`` from being scheduled again.

        Returns true if the thread was found on the ready or a wait queue.
        The running thread cannot be killed.
        """
        if thread is self._running:
            raise RuntimeError("cannot kill the running thread")

        try:
            self._ready.remove(thread)
        except ValueError:
            queue = self._waiting.get(thread.channel)
            if queue is None or thread not in queue:
                return False
            queue.remove(thread)
            if not queue:
                del self._waiting[thread.channel]

        thread.channel = None
        thread._generator.close()
        thread.done = True
        if thread.atexit is not None:
            thread.atexit()
        return True

    def set_ready_function(self, func: Callable[[], None] | None) -> None:
        """Set a callable invoked when a thread becomes ready on an idle scheduler.

        It is typically used to arrange for :meth:`run` to be called.
        """
        self._ready_function = func

    def close(self) -> None:
        """Check that no thread is left running, ready or waiting."""
        if self._running is not None:
            raise RuntimeError("a thread is still running")
        if self._ready:
            raise RuntimeError(f"{len(self._ready)} thread(s) still ready")
        if self._waiting:
            count = sum(len(queue) for queue in self._waiting.values())
            raise RuntimeError(f"{count} thread(s) still waiting")