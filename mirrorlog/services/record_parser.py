"""
Mirrorshades log parser.

Reads tab-delimited logs exported by the Mirrorshades platform and decodes
each data line into a RawRecord. Conversion happens in
mirrorlog.services.converter.
"""

from pathlib import Path

from mirrorlog.errors import MalformedRecord
from mirrorlog.models.raw import (
    DELTA_X,
    DELTA_Z,
    FRAME,
    LEFT_ROTATION,
    MIN_FIELD_COUNT,
    ORIGINAL_POSITION,
    POSITION,
    RIGHT_ROTATION,
    TIMESTAMP,
    TRAILING_START,
    RawRecord,
)


FIELD_SEPARATOR = "\t"


def read_log_lines(filepath: Path) -> list[str]:
    """Read the whole log into memory, one entry per line."""
    with open(filepath, "r", encoding="utf-8-sig") as f:
        return f.read().splitlines()


def split_lines(lines: list[str]) -> tuple[str, list[tuple[int, str]]]:
    """
    Separate the header from the data lines.

    Args:
        lines: Every line of the log, header first

    Returns:
        Tuple of (header, [(line_number, line), ...]) with 1-based line numbers.
        Blank lines at the end of the file are dropped.

    Raises:
        MalformedRecord: If the log has no data lines
    """
    end = len(lines)
    while end > 0 and not lines[end - 1].strip():
        end -= 1

    if end < 2:
        raise MalformedRecord("log contains no data records")

    data = [(i + 1, lines[i]) for i in range(1, end)]
    return lines[0], data


def parse_record(line: str, line_number: int) -> RawRecord:
    """
    Decode one data line into a RawRecord.

    Fields are kept exactly as written; decoding of timestamps and
    orientations is left to the converter.
    """
    fields = line.split(FIELD_SEPARATOR)
    if len(fields) < MIN_FIELD_COUNT:
        raise MalformedRecord(
            f"expected at least {MIN_FIELD_COUNT} tab-separated fields, found {len(fields)}",
            line_number,
        )

    return RawRecord(
        line_number=line_number,
        frame=fields[FRAME],
        timestamp=fields[TIMESTAMP],
        original_position=fields[ORIGINAL_POSITION],
        position=fields[POSITION],
        delta_x=fields[DELTA_X],
        delta_z=fields[DELTA_Z],
        left_rotation=fields[LEFT_ROTATION],
        right_rotation=fields[RIGHT_ROTATION],
        trailing=tuple(fields[TRAILING_START:]),
    )
