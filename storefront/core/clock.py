"""Process-wide time source with scoped overrides.

Business functions that need the current instant either receive a
ClockPort through their constructor or resolve current_clock() on each
call. use_clock() swaps the process-wide clock for the duration of a
with-block and always restores the previous one on exit.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import UTC, datetime, tzinfo

from .ports import ClockPort


class SystemClock(ClockPort):
    """Reads the real system time as an aware UTC datetime."""

    def now(self) -> datetime:
        return datetime.now(UTC)


_default_clock: ClockPort = SystemClock()
_active_clock: ContextVar[ClockPort | None] = ContextVar(
    "storefront_active_clock", default=None
)


def current_clock() -> ClockPort:
    """Return the clock in effect for the current context."""
    clock = _active_clock.get()
    if clock is None:
        return _default_clock
    return clock


@contextmanager
def use_clock(clock: ClockPort) -> Iterator[ClockPort]:
    """Install clock as the process-wide time source within a block.

    Overrides nest; leaving a block reinstates whatever clock was active
    when it was entered, including when the block raises.

    Example:
        with use_clock(FixedClock(datetime(2024, 12, 25, 0, 1))):
            assert pricing.get_discount() == 0.2
    """
    token = _active_clock.set(clock)
    try:
        yield clock
    finally:
        _active_clock.reset(token)


def to_reference_time(reading: datetime, zone: tzinfo) -> datetime:
    """Express a clock reading in the reference timezone.

    Naive readings are taken to already be in that zone.
    """
    if reading.tzinfo is None:
        return reading.replace(tzinfo=zone)
    return reading.astimezone(zone)


__all__ = ["SystemClock", "current_clock", "to_reference_time", "use_clock"]
