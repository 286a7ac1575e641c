"""
Raw log record model (source-format, unconverted).

The parser decodes each data line into this structure before conversion.
"""

from dataclasses import dataclass


# Input field positions (0-based)
FRAME = 0
TIMESTAMP = 1
ORIGINAL_POSITION = 2
POSITION = 3
DELTA_X = 4
DELTA_Z = 5
LEFT_ROTATION = 6
RIGHT_ROTATION = 7
TRAILING_START = 8

# Fewest fields that still reach the right orientation
MIN_FIELD_COUNT = RIGHT_ROTATION + 1


@dataclass(frozen=True)
class RawRecord:
    """One data line of a Mirrorshades log, split into named fields."""

    line_number: int

    frame: str
    timestamp: str  # dd-MM-yyyy HH-mm-ss-fff
    original_position: str
    position: str
    delta_x: str
    delta_z: str
    left_rotation: str  # (x, y, z, w)
    right_rotation: str  # (x, y, z, w)

    # opacities, auto-tick settings, framerate, button states
    trailing: tuple[str, ...] = ()

    @property
    def passthrough(self) -> tuple[str, ...]:
        """Fields copied verbatim between the elapsed time and the left angles."""
        return (
            self.original_position,
            self.position,
            self.delta_x,
            self.delta_z,
            self.left_rotation,
        )
