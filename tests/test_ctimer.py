from datetime import timedelta

from vtkit.ctimer import Timer


class FakeClock:
    def __init__(self, start=0):
        self.now = start

    def __call__(self):
        return self.now


def test_elapsed_follows_clock():
    clock = FakeClock(5_000_000_000)
    timer = Timer(clock)
    clock.now += 1_500_000_000
    assert timer.elapsed() == timedelta(seconds=1, microseconds=500_000)


def test_elapsed_is_zero_initially():
    timer = Timer(FakeClock(123_456_789))
    assert timer.elapsed() == timedelta(0)


def test_elapsed_truncates_to_microseconds():
    clock = FakeClock(999)
    timer = Timer(clock)
    clock.now = 1999
    assert timer.elapsed() == timedelta(microseconds=1)


def test_reset_restarts_measurement():
    clock = FakeClock(0)
    timer = Timer(clock)
    clock.now = 10_000_000_000
    timer.reset()
    clock.now += 2_000_000
    assert timer.elapsed() == timedelta(microseconds=2000)


def test_compare_against_frame_interval():
    clock = FakeClock(0)
    timer = Timer(clock)
    interval = timedelta(microseconds=30000)
    clock.now = 29_999_000
    assert timer.compare(interval) == -1
    clock.now = 30_000_000
    assert timer.compare(interval) == 0
    clock.now = 30_001_000
    assert timer.compare(interval) == 1


def test_compare_accepts_seconds():
    clock = FakeClock(0)
    timer = Timer(clock)
    clock.now = 2_000_000_000
    assert timer.compare(1.5) == 1
    assert timer.compare(2) == 0
    assert timer.compare(3) == -1


def test_default_clock_is_monotonic():
    timer = Timer()
    first = timer.elapsed()
    second = timer.elapsed()
    assert timedelta(0) <= first <= second