"""
Orientation utilities.

Decodes the quaternion literals written by the capture platform into per-axis
Euler angles.

Convention:
- Literals are scalar-last: ``(x, y, z, w)``
- Angles come from an intrinsic Y-X-Z decomposition (equivalently: roll about
  Z, then pitch about X, then yaw about Y, in the fixed frame)
- Raw angles are reported in [0, 360); signed angles in (-180, 180]
"""

import math
from typing import Optional

import numpy as np
from numpy.typing import NDArray
from scipy.spatial.transform import Rotation

from mirrorlog.errors import OrientationParseError
from mirrorlog.models.elapsed import NUMBER_FORMAT, EulerAngles


EULER_SEQUENCE = "YXZ"  # intrinsic yaw, pitch, roll


def parse_orientation(literal: str, line_number: Optional[int] = None) -> NDArray[np.float64]:
    """
    Parse an orientation literal like ``(0.0, 0.7, 0.0, 0.7)``.

    Args:
        literal: Parenthesized, comma-separated quaternion components
        line_number: Line the literal came from, for error reporting

    Returns:
        Array of the four components in literal order

    Raises:
        OrientationParseError: On missing parentheses, a component count other
            than four, or non-numeric components
    """
    text = literal.strip()
    if not (text.startswith("(") and text.endswith(")")):
        raise OrientationParseError(f"orientation {literal!r} is not parenthesized", line_number)

    parts = text[1:-1].split(",")
    if len(parts) != 4:
        raise OrientationParseError(
            f"orientation {literal!r} has {len(parts)} components, expected 4", line_number
        )

    components = []
    for part in parts:
        try:
            value = float(part.strip())
        except ValueError as e:
            raise OrientationParseError(
                f"orientation {literal!r} has non-numeric component {part.strip()!r}", line_number
            ) from e
        if not math.isfinite(value):
            raise OrientationParseError(
                f"orientation {literal!r} has non-finite component {part.strip()!r}", line_number
            )
        components.append(value)

    return np.array(components, dtype=np.float64)


def quaternion_to_euler(quat: NDArray[np.float64], line_number: Optional[int] = None) -> EulerAngles:
    """
    Convert a scalar-last quaternion to Euler angles in [0, 360).

    Angles are rounded to the precision they are written with.
    The quaternion is normalized first, so any non-zero scale is accepted.
    """
    try:
        rotation = Rotation.from_quat(quat)
    except ValueError as e:
        raise OrientationParseError(f"orientation {np.asarray(quat).tolist()} is not a rotation: {e}", line_number) from e

    yaw, pitch, roll = rotation.as_euler(EULER_SEQUENCE, degrees=True)
    angles = np.mod(np.array([pitch, yaw, roll]), 360.0)
    # Round to the written precision first so 359.9999999 is stored as 0, not 360
    angles = np.array([float(NUMBER_FORMAT % a) for a in angles])
    angles = np.where(angles >= 360.0, angles - 360.0, angles)
    return EulerAngles(x=float(angles[0]), y=float(angles[1]), z=float(angles[2]))


def remap_signed(values: NDArray[np.float64]) -> NDArray[np.float64]:
    """Map angles from [0, 360) onto (-180, 180]: anything above 180 loses 360."""
    values = np.asarray(values, dtype=np.float64)
    return np.where(values > 180, values - 360, values)


def signed_angles(angles: EulerAngles) -> EulerAngles:
    x, y, z = remap_signed(angles.as_array())
    return EulerAngles(x=float(x), y=float(y), z=float(z))


def decode_orientation(
    literal: str,
    signed: bool = False,
    line_number: Optional[int] = None,
) -> EulerAngles:
    """Parse an orientation literal and convert it to Euler angles."""
    angles = quaternion_to_euler(parse_orientation(literal, line_number), line_number)
    if signed:
        return signed_angles(angles)
    return angles
