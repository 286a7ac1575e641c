"""
Converted log writer.

Writes the whole converted log in one go. Output goes to a temporary file in
the destination directory that is renamed into place only once every line has
been written, so a failed run never leaves a partial log behind.
"""

import logging
import os
import tempfile
from pathlib import Path

from mirrorlog.models.elapsed import ElapsedLog


logger = logging.getLogger(__name__)


OUTPUT_SUFFIX = "_elapsed.log"


def output_path_for(input_path: Path) -> Path:
    """
    Derive the converted log's path from the input log's path.

    The name is cut at its first ``.`` and suffixed, so ``session.2.log``
    becomes ``session_elapsed.log`` in the same directory.
    """
    input_path = Path(input_path)
    stem = input_path.name.split(".")[0]
    return input_path.with_name(stem + OUTPUT_SUFFIX)


def write_log(log: ElapsedLog, destination: Path) -> Path:
    """
    Atomically write a converted log.

    Args:
        log: Header and accepted records
        destination: Final path of the converted log

    Returns:
        The destination path
    """
    destination = Path(destination)
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{destination.name}.", suffix=".tmp", dir=destination.parent
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            for line in log.to_lines():
                f.write(line)
                f.write("\n")
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, destination)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise

    logger.debug(f"Wrote {len(log)} records to {destination}")
    return destination
