"""
Title         : specs.py
Author        : Bardia Samiee
Project       : Parametric Forge
License       : MIT
Path          : fusion/plugins/SpiralPattern/spiral_pattern/specs.py

Description
----------------------------------------------------------------------------
Immutable pattern data structures shared across the SpiralPattern add-in.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from .exceptions import DegenerateAxisError, InvalidGeometryError, InvalidParameterRangeError
from .geometry.math_utils import Vec3, as_vec3, is_zero_vector, normalize


# --- Axis -----------------------------------------------------------------
@dataclass(frozen=True)
class Axis:
    """A 3-D line used as rotation and translation reference.

    The direction does not need to be normalized; consumers call
    `unit_direction` before using it.
    """

    origin: Vec3
    direction: Vec3

    def __post_init__(self) -> None:
        try:
            origin = as_vec3(self.origin)
            direction = as_vec3(self.direction)
        except (TypeError, ValueError) as exc:
            raise InvalidGeometryError(
                f"Axis coordinates are invalid: {exc}",
                context={"origin": self.origin, "direction": self.direction},
            ) from exc
        if is_zero_vector(direction):
            raise DegenerateAxisError("Axis direction has zero length.", context={"direction": direction})
        object.__setattr__(self, "origin", origin)
        object.__setattr__(self, "direction", direction)

    @property
    def unit_direction(self) -> npt.NDArray[np.float64]:
        """Normalized direction as a numpy array."""
        return normalize(self.direction)

    @classmethod
    def from_points(cls, start: Sequence[float], end: Sequence[float]) -> Axis:
        """Build an axis running from `start` towards `end`."""
        s = as_vec3(start)
        e = as_vec3(end)
        return cls(origin=s, direction=(e[0] - s[0], e[1] - s[1], e[2] - s[2]))


# --- Pattern Parameters ---------------------------------------------------
@dataclass(frozen=True)
class PatternParameters:
    """Pattern inputs for one command invocation.

    Attributes:
        count: Total instances including the original (emits count - 1 copies)
        step_distance: Linear offset per step along the axis, in document units
        step_angle: Rotation per step about the axis, in radians
    """

    count: int
    step_distance: float
    step_angle: float

    def __post_init__(self) -> None:
        if isinstance(self.count, bool) or not isinstance(self.count, (int, np.integer)):
            raise InvalidParameterRangeError(
                f"Pattern count must be an integer (got {self.count!r}).",
                context={"count": self.count},
            )
        if self.count < 2:
            raise InvalidParameterRangeError(
                f"Pattern count must be at least 2 (got {self.count}).",
                context={"count": self.count},
            )
        for name in ("step_distance", "step_angle"):
            value = getattr(self, name)
            try:
                number = float(value)
            except (TypeError, ValueError) as exc:
                raise InvalidParameterRangeError(f"{name} must be a number (got {value!r}).") from exc
            if not math.isfinite(number):
                raise InvalidParameterRangeError(f"{name} must be finite (got {value!r}).", context={name: value})
            object.__setattr__(self, name, number)
        object.__setattr__(self, "count", int(self.count))

    @property
    def copies(self) -> int:
        """Number of placements the generator emits."""
        return self.count - 1

    @property
    def total_height(self) -> float:
        """Axial distance between the original and the last copy."""
        return self.step_distance * self.copies

    # --- Factory Methods --------------------------------------------------
    @classmethod
    def from_degrees(cls, count: int, step_distance: float, step_angle_deg: float) -> PatternParameters:
        """Build parameters from a per-step angle given in degrees."""
        return cls(count=count, step_distance=step_distance, step_angle=math.radians(step_angle_deg))

    @classmethod
    def from_total_height(cls, count: int, total_height: float, step_angle: float) -> PatternParameters:
        """Build parameters spreading `total_height` evenly over `count - 1` steps."""
        if isinstance(count, bool) or not isinstance(count, (int, np.integer)) or count < 2:
            raise InvalidParameterRangeError(
                f"Pattern count must be an integer of at least 2 (got {count!r}).",
                context={"count": count},
            )
        return cls(count=count, step_distance=total_height / (count - 1), step_angle=step_angle)
