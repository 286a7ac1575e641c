"""
One-record-per-second downsampling.

The capture log is written every frame; the converted log keeps the first
record, then one record each time the elapsed clock ticks into a new second.
"""

from datetime import timedelta
from enum import Enum
from typing import Iterable

from mirrorlog.utils.timing import clock_components


class DownsamplerState(Enum):
    AWAITING_FIRST = "awaiting_first"
    STEADY = "steady"


class Downsampler:
    """
    Decides which records reach the output.

    Works on the (minutes, seconds) clock components of the elapsed time,
    not the total, so the seconds value drops back when a minute rolls over.
    A record is kept when either:
    - its seconds component is greater than the last kept one, or
    - its seconds component is smaller but its minutes component is greater
      (59 s -> 1 min 0 s)
    """

    def __init__(self):
        self.state = DownsamplerState.AWAITING_FIRST
        self.last_second = 0
        self.last_minute = 0

    def offer(self, elapsed: timedelta) -> bool:
        """Return True if the record at this elapsed time should be emitted."""
        if self.state is DownsamplerState.AWAITING_FIRST:
            self.state = DownsamplerState.STEADY
            return True

        minute, second = clock_components(elapsed)
        emit = False

        if second > self.last_second:
            self.last_second = second
            self.last_minute = minute
            emit = True

        # Seconds wrapped back past 0 but the minute moved on
        if second < self.last_second and minute > self.last_minute:
            self.last_second = second
            self.last_minute = minute
            emit = True

        return emit


def select_indices(total_seconds: Iterable[int]) -> list[int]:
    """
    Run a fresh downsampler over integer elapsed seconds.

    Args:
        total_seconds: Whole elapsed seconds per record, in log order

    Returns:
        Indices of the records that would be kept
    """
    downsampler = Downsampler()
    return [
        i
        for i, seconds in enumerate(total_seconds)
        if downsampler.offer(timedelta(seconds=int(seconds)))
    ]
