"""
Converted log data model.

Output rows carry elapsed seconds instead of wall-clock timestamps and
per-axis Euler angles next to the raw orientation literals:
- left angles are signed, (-180, 180]
- right angles are left unsigned, [0, 360)
"""

from dataclasses import dataclass, field

import numpy as np


OUTPUT_COLUMNS: tuple[str, ...] = (
    "frame",
    "timestamp",
    "original_position",
    "position",
    "delta_x",
    "delta_z",
    "left_rotation",
    "left_x",
    "left_y",
    "left_z",
    "right_rotation",
    "right_x",
    "right_y",
    "right_z",
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
)

ANGLE_COLUMNS: tuple[str, ...] = ("left_x", "left_y", "left_z", "right_x", "right_y", "right_z")

NUMBER_FORMAT = "%.7g"


def format_angle(value: float) -> str:
    return NUMBER_FORMAT % value


@dataclass(frozen=True)
class EulerAngles:
    """Rotation about each axis, in degrees."""

    x: float
    y: float
    z: float

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def format(self) -> tuple[str, str, str]:
        return (format_angle(self.x), format_angle(self.y), format_angle(self.z))


@dataclass(frozen=True)
class OutputRecord:
    """One accepted, converted log row."""

    frame: str
    elapsed_seconds: int
    passthrough: tuple[str, ...]
    left: EulerAngles
    right_rotation: str
    right: EulerAngles
    trailing: tuple[str, ...] = ()

    def fields(self) -> list[str]:
        return [
            self.frame,
            str(self.elapsed_seconds),
            *self.passthrough,
            *self.left.format(),
            self.right_rotation,
            *self.right.format(),
            *self.trailing,
        ]

    def to_line(self) -> str:
        return "\t".join(self.fields())


@dataclass
class ElapsedLog:
    """Header plus the ordered sequence of accepted records."""

    records: list[OutputRecord] = field(default_factory=list)
    columns: tuple[str, ...] = OUTPUT_COLUMNS

    # Input statistics, including dropped records
    records_read: int = 0
    duration_s: int = 0  # whole elapsed seconds of the last input record

    @property
    def header(self) -> str:
        return "\t".join(f'"{name}"' for name in self.columns)

    def append(self, record: OutputRecord) -> None:
        self.records.append(record)

    def to_lines(self) -> list[str]:
        return [self.header] + [record.to_line() for record in self.records]

    def __len__(self) -> int:
        return len(self.records)
