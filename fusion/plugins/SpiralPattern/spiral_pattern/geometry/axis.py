"""
Title         : axis.py
Author        : Bardia Samiee
Project       : Parametric Forge
License       : MIT
Path          : fusion/plugins/SpiralPattern/spiral_pattern/geometry/axis.py

Description
----------------------------------------------------------------------------
Axis sources and the resolver that turns a selected edge, construction axis,
or cylindrical face into a canonical origin/direction pair.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from ..exceptions import InvalidGeometryError, UnsupportedGeometryKindError
from ..specs import Axis
from .math_utils import Vec3, as_vec3


logger = logging.getLogger(__name__)


# --- Axis Source Kind Enum ------------------------------------------------
class AxisSourceKind(Enum):
    """Selectable geometry kinds that define an axis."""

    CIRCULAR_EDGE = "circular_edge"
    STRAIGHT_EDGE = "straight_edge"
    CONSTRUCTION_AXIS = "construction_axis"
    CYLINDRICAL_FACE = "cylindrical_face"


# --- Axis Sources ---------------------------------------------------------
@dataclass(frozen=True)
class CircularEdge:
    """Circle or arc edge. The axis passes through the center along the plane normal."""

    center: Vec3
    normal: Vec3

    kind = AxisSourceKind.CIRCULAR_EDGE


@dataclass(frozen=True)
class StraightEdge:
    """Line segment edge. The axis runs from start towards end."""

    start: Vec3
    end: Vec3

    kind = AxisSourceKind.STRAIGHT_EDGE


@dataclass(frozen=True)
class ConstructionAxis:
    """Construction axis wrapping an infinite line."""

    origin: Vec3
    direction: Vec3

    kind = AxisSourceKind.CONSTRUCTION_AXIS


@dataclass(frozen=True)
class CylindricalFace:
    """Cylindrical face. The radius is optional and only checked when present."""

    origin: Vec3
    axis: Vec3
    radius: float | None = None

    kind = AxisSourceKind.CYLINDRICAL_FACE


AxisSource = Union[CircularEdge, StraightEdge, ConstructionAxis, CylindricalFace]


# --- Resolver -------------------------------------------------------------
def _point(source: Any, name: str, values: Sequence[float]) -> Vec3:
    try:
        return as_vec3(values)
    except (TypeError, ValueError) as exc:
        raise InvalidGeometryError(
            f"{type(source).__name__}.{name} is not a valid point or vector: {exc}",
            context={"source": source, "field": name},
        ) from exc


def _resolve_circular_edge(source: CircularEdge) -> Axis:
    return Axis(origin=_point(source, "center", source.center), direction=_point(source, "normal", source.normal))


def _resolve_straight_edge(source: StraightEdge) -> Axis:
    return Axis.from_points(_point(source, "start", source.start), _point(source, "end", source.end))


def _resolve_construction_axis(source: ConstructionAxis) -> Axis:
    return Axis(
        origin=_point(source, "origin", source.origin),
        direction=_point(source, "direction", source.direction),
    )


def _resolve_cylindrical_face(source: CylindricalFace) -> Axis:
    if source.radius is not None:
        try:
            radius = float(source.radius)
        except (TypeError, ValueError) as exc:
            raise InvalidGeometryError("Cylinder radius is not a number.", context={"radius": source.radius}) from exc
        if not math.isfinite(radius) or radius <= 0.0:
            raise InvalidGeometryError(
                "Face is not a valid cylinder: radius must be positive.",
                context={"radius": source.radius},
            )
    return Axis(origin=_point(source, "origin", source.origin), direction=_point(source, "axis", source.axis))


_RESOLVERS = {
    CircularEdge: _resolve_circular_edge,
    StraightEdge: _resolve_straight_edge,
    ConstructionAxis: _resolve_construction_axis,
    CylindricalFace: _resolve_cylindrical_face,
}


def resolve_axis(source: AxisSource) -> Axis:
    """Resolve a selected axis source into a canonical Axis.

    The concrete class of `source` selects the branch; subclasses and look-alike
    objects are rejected rather than cast.

    Args:
        source: One of CircularEdge, StraightEdge, ConstructionAxis, CylindricalFace

    Returns:
        Axis with a finite origin and a non-zero (not necessarily unit) direction

    Raises:
        UnsupportedGeometryKindError: If `source` is not a recognized axis source
        InvalidGeometryError: If a coordinate is missing or non-finite
        DegenerateAxisError: If the resulting direction is zero
    """
    resolver = _RESOLVERS.get(type(source))
    if resolver is None:
        raise UnsupportedGeometryKindError(
            f"Unsupported axis geometry: {type(source).__name__}",
            context={"type": type(source).__name__},
        )
    axis = resolver(source)
    logger.debug("Resolved %s to axis origin=%s direction=%s", source.kind.value, axis.origin, axis.direction)
    return axis
