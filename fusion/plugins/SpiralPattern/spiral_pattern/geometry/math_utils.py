"""
Title         : math_utils.py
Author        : Bardia Samiee
Project       : Parametric Forge
License       : MIT
Path          : fusion/plugins/SpiralPattern/spiral_pattern/geometry/math_utils.py

Description
----------------------------------------------------------------------------
General-purpose vector math used by the axis resolver and transform generator.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np
import numpy.typing as npt

from ..constants import Constants


Vec3 = tuple[float, float, float]


# --- Clamp ----------------------------------------------------------------
def clamp(value: float, minimum: float, maximum: float) -> float:
    """Clamp a value between minimum and maximum bounds.

    Args:
        value: The value to clamp
        minimum: Lower bound
        maximum: Upper bound

    Returns:
        Clamped value within [minimum, maximum]
    """
    return max(minimum, min(maximum, value))


# --- Vector Coercion ------------------------------------------------------
def as_vec3(values: Sequence[float]) -> Vec3:
    """Coerce a 3-element sequence into a float tuple.

    Raises:
        ValueError: If the sequence does not hold exactly three finite numbers
    """
    if len(values) != 3:
        raise ValueError(f"Expected 3 coordinates, got {len(values)}.")
    x, y, z = (float(v) for v in values)
    if not (math.isfinite(x) and math.isfinite(y) and math.isfinite(z)):
        raise ValueError(f"Coordinates must be finite: {(x, y, z)}")
    return (x, y, z)


def to_array(values: Sequence[float]) -> npt.NDArray[np.float64]:
    return np.asarray(values, dtype=np.float64)


# --- Normalize ------------------------------------------------------------
def _largest_component(vec: npt.NDArray[np.float64]) -> float:
    return float(np.max(np.abs(vec)))


def is_zero_vector(values: Sequence[float]) -> bool:
    return _largest_component(to_array(values)) == 0.0


def normalize(values: Sequence[float]) -> npt.NDArray[np.float64]:
    """Return the unit vector along `values`.

    The vector is divided by its largest component before the norm is taken,
    so neither huge nor tiny inputs overflow or underflow.

    Raises:
        ValueError: If the vector has zero length or is not finite
    """
    vec = to_array(values)
    scale = _largest_component(vec)
    if not math.isfinite(scale):
        raise ValueError(f"Cannot normalize a non-finite vector: {tuple(vec)}")
    if scale == 0.0:
        raise ValueError("Cannot normalize a zero-length vector.")
    scaled = vec / scale
    return scaled / float(np.linalg.norm(scaled))


# --- Rotation -------------------------------------------------------------
def rotation_matrix(unit_axis: npt.NDArray[np.float64], angle: float) -> npt.NDArray[np.float64]:
    """Rotation matrix for a right-handed rotation about a unit axis.

    Uses the Rodrigues formula R = I + sin(a) K + (1 - cos(a)) K^2, where K is
    the cross-product matrix of the axis.

    Args:
        unit_axis: Normalized rotation axis
        angle: Rotation angle in radians

    Returns:
        3x3 rotation matrix
    """
    x, y, z = unit_axis
    k = np.array(
        [
            [0.0, -z, y],
            [z, 0.0, -x],
            [-y, x, 0.0],
        ],
    )
    return np.eye(3) + math.sin(angle) * k + (1.0 - math.cos(angle)) * (k @ k)


def perpendicular(unit_axis: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    """Return a unit vector perpendicular to `unit_axis`."""
    # Cross with the world axis least aligned to avoid a near-zero result.
    helper = np.zeros(3)
    helper[int(np.argmin(np.abs(unit_axis)))] = 1.0
    perp = np.cross(unit_axis, helper)
    return perp / np.linalg.norm(perp)


def signed_angle_about(
    unit_axis: npt.NDArray[np.float64],
    start: npt.NDArray[np.float64],
    end: npt.NDArray[np.float64],
) -> float:
    """Angle from `start` to `end` measured about `unit_axis`, in [0, 2*pi)."""
    sin_a = float(np.dot(np.cross(start, end), unit_axis))
    cos_a = float(np.dot(start, end))
    angle = math.atan2(sin_a, cos_a)
    return angle % (2.0 * math.pi)
