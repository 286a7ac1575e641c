"""
Shared fixtures for building Mirrorshades logs.
"""

import math

import pytest


INPUT_COLUMNS = [
    "frame",
    "timestamp",
    "original_position",
    "position",
    "delta_x",
    "delta_z",
    "left_rotation",
    "right_rotation",
    "base_opacity",
    "left_opacity",
    "right_opacity",
    "auto_tick",
    "auto_duration",
    "auto_spacing",
    "framerate",
    "A_button",
    "B_button",
    "right_trigger",
]

IDENTITY = "(0.0, 0.0, 0.0, 1.0)"

TRAILING = ["1", "0.5", "0.5", "False", "2", "5", "75.3", "False", "False", "0"]


def axis_quaternion(axis: str, degrees: float) -> str:
    """Literal for a rotation about a single axis, scalar-last."""
    half = math.radians(degrees) / 2
    s, c = math.sin(half), math.cos(half)
    x, y, z = {"x": (s, 0.0, 0.0), "y": (0.0, s, 0.0), "z": (0.0, 0.0, s)}[axis]
    return f"({x}, {y}, {z}, {c})"


def make_line(frame, timestamp, left=IDENTITY, right=IDENTITY, trailing=None) -> str:
    fields = [
        str(frame),
        timestamp,
        "(0.0, 1.7, 0.0)",
        "(0.5, 1.7, 0.2)",
        "0.5",
        "0.2",
        left,
        right,
    ]
    fields.extend(TRAILING if trailing is None else trailing)
    return "\t".join(fields)


def make_log(lines: list[str]) -> str:
    header = "\t".join(f'"{name}"' for name in INPUT_COLUMNS)
    return "\n".join([header] + lines) + "\n"


@pytest.fixture
def sample_lines():
    """Header plus five frames spread over two seconds."""
    return make_log([
        make_line(1, "24-03-2015 14-05-10-000", left=axis_quaternion("x", 30)),
        make_line(2, "24-03-2015 14-05-10-400", left=axis_quaternion("x", 31)),
        make_line(3, "24-03-2015 14-05-10-900", left=axis_quaternion("x", 32)),
        make_line(4, "24-03-2015 14-05-11-000", left=axis_quaternion("z", -45)),
        make_line(5, "24-03-2015 14-05-12-050", right=axis_quaternion("y", -90)),
    ]).splitlines()


@pytest.fixture
def sample_log_file(sample_lines, tmp_path):
    """Write the sample log to a temporary file."""
    log_file = tmp_path / "session.log"
    log_file.write_text("\n".join(sample_lines) + "\n")
    return log_file
