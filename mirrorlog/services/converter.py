"""
Log converter.

Turns a per-frame Mirrorshades log with absolute timestamps and quaternion
orientations into a one-record-per-second log with elapsed seconds and
Euler angles.
"""

import logging
import time
from pathlib import Path
from typing import Optional

from mirrorlog.models.elapsed import ElapsedLog, OutputRecord
from mirrorlog.models.raw import RawRecord
from mirrorlog.models.report import ConversionReport
from mirrorlog.services.downsampler import Downsampler
from mirrorlog.services.emitter import output_path_for, write_log
from mirrorlog.services.record_parser import parse_record, read_log_lines, split_lines
from mirrorlog.utils.orientation import decode_orientation
from mirrorlog.utils.timing import TimeNormalizer, elapsed_whole_seconds


logger = logging.getLogger(__name__)


def convert_record(record: RawRecord, elapsed_seconds: int) -> OutputRecord:
    """Decode both orientations of a record and build its output row."""
    left = decode_orientation(record.left_rotation, signed=True, line_number=record.line_number)
    right = decode_orientation(record.right_rotation, signed=False, line_number=record.line_number)

    return OutputRecord(
        frame=record.frame,
        elapsed_seconds=elapsed_seconds,
        passthrough=record.passthrough,
        left=left,
        right_rotation=record.right_rotation,
        right=right,
        trailing=record.trailing,
    )


def convert_lines(lines: list[str]) -> ElapsedLog:
    """
    Convert a whole log held in memory.

    Every data line is parsed and decoded, including the ones the
    downsampler drops, so a malformed line anywhere aborts the run.

    Args:
        lines: Every line of the input log, header first

    Returns:
        ElapsedLog with the accepted records in input order
    """
    _, data = split_lines(lines)

    normalizer = TimeNormalizer()
    downsampler = Downsampler()
    log = ElapsedLog()

    for line_number, line in data:
        record = parse_record(line, line_number)
        elapsed = normalizer.elapsed(record.timestamp, line_number)
        seconds = elapsed_whole_seconds(elapsed)
        converted = convert_record(record, seconds)
        log.records_read += 1
        log.duration_s = seconds

        if downsampler.offer(elapsed):
            log.append(converted)
        else:
            logger.debug(f"Dropped frame {record.frame} at {elapsed} (line {line_number})")

    return log


def convert_file(input_path: Path, output_path: Optional[Path] = None) -> ConversionReport:
    """
    Convert a log file and write the result next to it.

    Args:
        input_path: Mirrorshades log to convert
        output_path: Destination (optional, defaults to ``<stem>_elapsed.log``)

    Returns:
        ConversionReport describing the run
    """
    started = time.perf_counter()
    input_path = Path(input_path)
    if output_path is None:
        output_path = output_path_for(input_path)
    output_path = Path(output_path)
    if output_path.resolve() == input_path.resolve():
        raise ValueError(f"Refusing to overwrite input log: {input_path}")

    logger.info(f"Converting {input_path}")
    lines = read_log_lines(input_path)
    log = convert_lines(lines)
    write_log(log, output_path)

    report = ConversionReport(
        source_file=str(input_path),
        output_file=str(output_path),
        records_read=log.records_read,
        records_emitted=len(log),
        duration_s=log.duration_s,
        processing_time_s=time.perf_counter() - started,
    )
    logger.info(
        f"Wrote {report.records_emitted} of {report.records_read} records "
        f"({report.duration_s} s) to {output_path}"
    )
    return report
