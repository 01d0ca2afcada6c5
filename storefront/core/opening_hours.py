"""Opening-hours check for customer support."""

from datetime import UTC, tzinfo

from .clock import current_clock, to_reference_time
from .ports import ClockPort


class OpeningHours:
    """Decides whether support is online at the current instant.

    The window is closed at open_hour and open at close_hour, so with the
    defaults 08:00 is online and 20:00 is not.
    """

    def __init__(
        self,
        clock: ClockPort | None = None,
        zone: tzinfo = UTC,
        open_hour: int = 8,
        close_hour: int = 20,
    ):
        if not 0 <= open_hour < close_hour <= 24:
            raise ValueError(
                f"opening hours must satisfy 0 <= open < close <= 24, "
                f"got {open_hour}..{close_hour}"
            )
        self.clock = clock
        self.zone = zone
        self.open_hour = open_hour
        self.close_hour = close_hour

    def is_online(self) -> bool:
        clock = self.clock if self.clock is not None else current_clock()
        hour = to_reference_time(clock.now(), self.zone).hour
        return self.open_hour <= hour < self.close_hour
