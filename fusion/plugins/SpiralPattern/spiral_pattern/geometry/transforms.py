"""
Title         : transforms.py
Author        : Bardia Samiee
Project       : Parametric Forge
License       : MIT
Path          : fusion/plugins/SpiralPattern/spiral_pattern/geometry/transforms.py

Description
----------------------------------------------------------------------------
Rigid transforms and the spiral transform generator.

Step i of a pattern rotates the source by step_angle * i about the axis line
and then translates it by step_distance * i along the unit axis direction.
Every step is computed directly from the axis; steps never compound on the
previous placement.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator, Sequence

import numpy as np
import numpy.typing as npt

from ..constants import Constants
from ..exceptions import DegenerateAxisError, InvalidGeometryError, InvalidParameterRangeError
from ..specs import Axis, PatternParameters
from .math_utils import is_zero_vector, normalize, perpendicular, rotation_matrix, signed_angle_about


logger = logging.getLogger(__name__)


# --- Transform ------------------------------------------------------------
class Transform:
    """Rigid motion stored as a 4x4 homogeneous matrix.

    Attributes:
        matrix: Read-only 4x4 float array
        step: Pattern step index that produced this transform (0 when not from a pattern)
    """

    __slots__ = ("matrix", "step")

    def __init__(self, matrix: npt.ArrayLike, step: int = 0) -> None:
        array = np.array(matrix, dtype=np.float64)
        if array.shape != (4, 4):
            raise ValueError(f"Transform matrix must be 4x4, got shape {array.shape}.")
        array.setflags(write=False)
        self.matrix = array
        self.step = step

    def __repr__(self) -> str:
        return f"Transform(step={self.step}, translation={self.translation.tolist()})"

    def __matmul__(self, other: Transform) -> Transform:
        return self.compose(other)

    @classmethod
    def identity(cls) -> Transform:
        return cls(np.eye(4))

    @classmethod
    def from_parts(
        cls,
        rotation: npt.ArrayLike,
        translation: Sequence[float],
        step: int = 0,
    ) -> Transform:
        """Build a transform from a 3x3 rotation and a translation vector."""
        matrix = np.eye(4)
        matrix[:3, :3] = rotation
        matrix[:3, 3] = translation
        return cls(matrix, step=step)

    # --- Accessors --------------------------------------------------------
    @property
    def rotation(self) -> npt.NDArray[np.float64]:
        return self.matrix[:3, :3]

    @property
    def translation(self) -> npt.NDArray[np.float64]:
        return self.matrix[:3, 3]

    def to_cells(self) -> list[float]:
        """Return the 16 matrix cells in row-major order."""
        return [float(v) for v in self.matrix.ravel()]

    # --- Operations -------------------------------------------------------
    def compose(self, other: Transform) -> Transform:
        """Return the transform applying `other` first and then `self`."""
        return Transform(self.matrix @ other.matrix, step=self.step)

    def apply(self, point: Sequence[float]) -> npt.NDArray[np.float64]:
        """Transform a point."""
        return self.rotation @ np.asarray(point, dtype=np.float64) + self.translation

    def rotation_angle_about(self, direction: Sequence[float]) -> float:
        """Rotation angle about `direction`, in [0, 2*pi).

        Only meaningful when the rotation axis is parallel to `direction`.
        """
        unit = normalize(direction)
        probe = perpendicular(unit)
        return signed_angle_about(unit, probe, self.rotation @ probe)

    # --- Comparison -------------------------------------------------------
    def allclose(self, other: Transform, tolerance: float = Constants.COMPARE_TOLERANCE) -> bool:
        return bool(np.allclose(self.matrix, other.matrix, rtol=0.0, atol=tolerance))

    def is_identity(self, tolerance: float = Constants.COMPARE_TOLERANCE) -> bool:
        return bool(np.allclose(self.matrix, np.eye(4), rtol=0.0, atol=tolerance))


# --- Validation -----------------------------------------------------------
def _validate(axis: Axis, params: PatternParameters) -> None:
    if params.count < 2:
        raise InvalidParameterRangeError(
            f"Pattern count must be at least 2 (got {params.count}).",
            context={"count": params.count},
        )
    if not (math.isfinite(params.step_distance) and math.isfinite(params.step_angle)):
        raise InvalidParameterRangeError(
            "Step distance and angle must be finite.",
            context={"step_distance": params.step_distance, "step_angle": params.step_angle},
        )
    if not all(math.isfinite(float(v)) for v in (*axis.origin, *axis.direction)):
        raise InvalidGeometryError(
            "Axis coordinates must be finite.",
            context={"origin": axis.origin, "direction": axis.direction},
        )
    if is_zero_vector(axis.direction):
        raise DegenerateAxisError("Axis direction has zero length.", context={"direction": axis.direction})


# --- Step Transform -------------------------------------------------------
def _step_transform(
    origin: npt.NDArray[np.float64],
    unit_direction: npt.NDArray[np.float64],
    params: PatternParameters,
    step: int,
) -> Transform:
    # Rotation about the line through o is R(p - o) + o; adding d * u gives
    # a translation column of o - R o + d * u.
    rotation = rotation_matrix(unit_direction, params.step_angle * step)
    offset = unit_direction * (params.step_distance * step)
    translation = origin - rotation @ origin + offset
    return Transform.from_parts(rotation, translation, step=step)


def step_transform(axis: Axis, params: PatternParameters, step: int) -> Transform:
    """Transform for a single pattern step.

    Args:
        axis: Pattern axis
        params: Pattern parameters
        step: Step index, 1 for the first copy up to count - 1

    Returns:
        Transform placing copy `step`

    Raises:
        InvalidParameterRangeError: If `step` is outside 1..count-1
    """
    _validate(axis, params)
    if isinstance(step, bool) or not isinstance(step, int) or not 1 <= step < params.count:
        raise InvalidParameterRangeError(
            f"Step must be between 1 and {params.count - 1} (got {step!r}).",
            context={"step": step, "count": params.count},
        )
    return _step_transform(np.asarray(axis.origin, dtype=np.float64), normalize(axis.direction), params, step)


# --- Spiral Transforms ----------------------------------------------------
class SpiralTransforms:
    """Lazy, restartable sequence of pattern transforms.

    Each iteration recomputes the transforms from the axis and parameters, so
    repeated iteration yields identical matrices.
    """

    def __init__(self, axis: Axis, params: PatternParameters) -> None:
        _validate(axis, params)
        self.axis = axis
        self.params = params
        self._origin = np.asarray(axis.origin, dtype=np.float64)
        self._unit_direction = normalize(axis.direction)

    def __len__(self) -> int:
        return self.params.count - 1

    def __iter__(self) -> Iterator[Transform]:
        for step in range(1, self.params.count):
            yield _step_transform(self._origin, self._unit_direction, self.params, step)

    def __getitem__(self, index: int) -> Transform:
        if index < 0:
            index += len(self)
        if not 0 <= index < len(self):
            raise IndexError("SpiralTransforms index out of range")
        return _step_transform(self._origin, self._unit_direction, self.params, index + 1)

    def __repr__(self) -> str:
        return f"SpiralTransforms(axis={self.axis!r}, params={self.params!r})"


def generate(axis: Axis, params: PatternParameters) -> SpiralTransforms:
    """Generate the transforms placing the `count - 1` additional copies.

    Validation happens here, before any transform is computed.

    Raises:
        InvalidParameterRangeError: If count < 2 or step values are not finite
        DegenerateAxisError: If the axis direction is zero
    """
    return SpiralTransforms(axis, params)


# --- Generator Class ------------------------------------------------------
class SpiralTransformGenerator:
    """Generate spiral placements with optional logging of each invocation."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self.log = log or logger

    def generate(self, axis: Axis, params: PatternParameters) -> SpiralTransforms:
        transforms = generate(axis, params)
        self.log.info(
            "Generating %d spiral placement(s): distance=%g angle=%g rad",
            len(transforms),
            params.step_distance,
            params.step_angle,
        )
        return transforms

    def generate_list(self, axis: Axis, params: PatternParameters) -> list[Transform]:
        """Materialize all transforms at once."""
        return list(self.generate(axis, params))

    def preview(self, axis: Axis, params: PatternParameters, point: Sequence[float]) -> list[npt.NDArray[np.float64]]:
        """Positions a point would take at each pattern step."""
        return [transform.apply(point) for transform in self.generate(axis, params)]
