"""Monotonic clock helpers. Times and durations are integer nanoseconds."""

from __future__ import annotations

import time


def now() -> int:
    """Current monotonic time in nanoseconds."""
    return time.monotonic_ns()


def sleep_for(duration: int) -> None:
    """Sleep for ``duration`` nanoseconds; non-positive durations return at once."""
    if duration <= 0:
        return
    sleep_until(now() + duration)


def sleep_until(target: int) -> None:
    """Sleep until the monotonic clock reaches ``target``; past targets return at once."""
    remaining = target - now()
    while remaining > 0:
        time.sleep(remaining / 1e9)
        remaining = target - now()