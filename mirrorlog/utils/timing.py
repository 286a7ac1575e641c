"""
Timestamp utilities.

Parses the capture platform's wall-clock timestamps and turns them into
elapsed durations measured from the first data record.
"""

import re
from datetime import datetime, timedelta
from typing import Optional

from mirrorlog.errors import TimestampParseError


# dd-MM-yyyy HH-mm-ss-fff
TIMESTAMP_FORMAT = "%d-%m-%Y %H-%M-%S-%f"
TIMESTAMP_PATTERN = re.compile(r"\d{2}-\d{2}-\d{4} \d{2}-\d{2}-\d{2}-\d{3}")

ONE_SECOND = timedelta(seconds=1)


def parse_timestamp(value: str, line_number: Optional[int] = None) -> datetime:
    """
    Parse a log timestamp such as ``24-03-2015 14-05-09-250``.

    Args:
        value: Timestamp field from the log
        line_number: Line the value came from, for error reporting

    Returns:
        Naive datetime with millisecond precision

    Raises:
        TimestampParseError: If the value does not match the pattern or is
            not a valid calendar time
    """
    if not TIMESTAMP_PATTERN.fullmatch(value):
        raise TimestampParseError(f"timestamp {value!r} does not match dd-MM-yyyy HH-mm-ss-fff", line_number)
    try:
        return datetime.strptime(value, TIMESTAMP_FORMAT)
    except ValueError as e:
        raise TimestampParseError(f"invalid timestamp {value!r}: {e}", line_number) from e


def elapsed_whole_seconds(elapsed: timedelta) -> int:
    """Total elapsed seconds with the fractional part discarded."""
    return elapsed // ONE_SECOND


def clock_components(elapsed: timedelta) -> tuple[int, int]:
    """
    Split an elapsed duration into its (minutes, seconds) clock components.

    Both components wrap at 60, so 61.5 s gives (1, 1) and 3601 s gives (0, 1).
    """
    total = elapsed_whole_seconds(elapsed)
    return (total // 60) % 60, total % 60


class TimeNormalizer:
    """Converts absolute timestamps to durations since the first record."""

    def __init__(self):
        self._epoch: Optional[datetime] = None

    @property
    def epoch(self) -> Optional[datetime]:
        return self._epoch

    def elapsed(self, timestamp: str, line_number: Optional[int] = None) -> timedelta:
        current = parse_timestamp(timestamp, line_number)

        # First record defines the epoch and is exactly zero
        if self._epoch is None:
            self._epoch = current
            return timedelta(0)

        elapsed = current - self._epoch
        if elapsed < timedelta(0):
            raise TimestampParseError(
                f"timestamp {timestamp!r} precedes the first record", line_number
            )
        return elapsed
