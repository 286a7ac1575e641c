"""
Converted log reader.

Loads ``_elapsed.log`` files into pandas for analysis and plotting.
Library API only; the ``mirrorlog`` command does not call it.
"""

from pathlib import Path

import numpy as np
import pandas as pd

from mirrorlog.models.elapsed import ANGLE_COLUMNS
from mirrorlog.services.downsampler import select_indices
from mirrorlog.services.record_parser import FIELD_SEPARATOR, read_log_lines


EXTRA_COLUMN_PREFIX = "extra_"


def read_elapsed_log(filepath: Path) -> pd.DataFrame:
    """
    Read a converted log.

    Column names are unquoted. ``timestamp`` holds whole elapsed seconds as
    integers and the six angle columns are floats; every other column is
    kept as text exactly as written.

    Rows may be wider than the header when the input carried extra trailing
    fields; those land in ``extra_1``, ``extra_2``, ... Missing trailing
    fields are read as empty strings.
    """
    lines = [line for line in read_log_lines(filepath) if line.strip()]
    if not lines:
        raise ValueError(f"Converted log is empty: {filepath}")

    columns = [name.strip().strip('"') for name in lines[0].split(FIELD_SEPARATOR)]
    rows = [line.split(FIELD_SEPARATOR) for line in lines[1:]]

    width = max([len(columns)] + [len(row) for row in rows])
    columns += [f"{EXTRA_COLUMN_PREFIX}{i}" for i in range(1, width - len(columns) + 1)]
    rows = [row + [""] * (width - len(row)) for row in rows]

    df = pd.DataFrame(rows, columns=columns, dtype=str)

    if "timestamp" not in df.columns:
        raise ValueError(f"No timestamp column found in {filepath}")

    df["timestamp"] = pd.to_numeric(df["timestamp"]).astype(np.int64)
    for col in ANGLE_COLUMNS:
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce").astype(np.float64)
    return df


def redownsample(df: pd.DataFrame) -> list[int]:
    """
    Downsample a converted log again, using its integer elapsed seconds.

    A log that is already at one record per second keeps every row.
    """
    return select_indices(df["timestamp"].tolist())
