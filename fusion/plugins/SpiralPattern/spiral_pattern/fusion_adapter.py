"""
Title         : fusion_adapter.py
Author        : Bardia Samiee
Project       : Parametric Forge
License       : MIT
Path          : fusion/plugins/SpiralPattern/spiral_pattern/fusion_adapter.py

Description
----------------------------------------------------------------------------
Bridge between Fusion API objects and the host-free pattern core.

Entities are inspected through their `objectType` strings and attribute
access only, so this module never imports `adsk` at import time and can be
exercised with plain stand-in objects.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any

import numpy as np
import numpy.typing as npt

from .constants import Constants
from .exceptions import InvalidGeometryError, PlacementError, UnsupportedGeometryKindError
from .geometry.axis import AxisSource, CircularEdge, ConstructionAxis, CylindricalFace, StraightEdge
from .geometry.math_utils import Vec3


logger = logging.getLogger(__name__)


# --- Primitive Conversion -------------------------------------------------
def point_tuple(obj: Any) -> Vec3:
    """Read a Fusion Point3D or Vector3D into a float tuple.

    Raises:
        InvalidGeometryError: If the object has no numeric x, y, z
    """
    if obj is None:
        raise InvalidGeometryError("Geometry query returned no point or vector.")
    try:
        return (float(obj.x), float(obj.y), float(obj.z))
    except (AttributeError, TypeError, ValueError) as exc:
        raise InvalidGeometryError(
            f"Cannot read coordinates from {type(obj).__name__}.",
            context={"type": type(obj).__name__},
        ) from exc


vector_tuple = point_tuple


def object_type(obj: Any) -> str:
    """Return the Fusion objectType string, or an empty string when unavailable."""
    value = getattr(obj, "objectType", "")
    return value if isinstance(value, str) else ""


def _geometry(entity: Any) -> Any:
    try:
        geometry = entity.geometry
    except (AttributeError, RuntimeError) as exc:
        raise InvalidGeometryError(
            f"Cannot query geometry of {object_type(entity) or type(entity).__name__}.",
            context={"type": object_type(entity)},
        ) from exc
    if geometry is None:
        raise InvalidGeometryError("Selected entity has no geometry.", context={"type": object_type(entity)})
    return geometry


# --- Axis Sources ---------------------------------------------------------
def _edge_source(entity: Any) -> AxisSource:
    geometry = _geometry(entity)
    geometry_type = object_type(geometry)
    if geometry_type in (Constants.TYPE_CIRCLE, Constants.TYPE_ARC):
        return CircularEdge(center=point_tuple(geometry.center), normal=vector_tuple(geometry.normal))
    if geometry_type == Constants.TYPE_LINE:
        return StraightEdge(start=point_tuple(geometry.startPoint), end=point_tuple(geometry.endPoint))
    raise UnsupportedGeometryKindError(
        f"Unsupported edge geometry: {geometry_type or type(geometry).__name__}",
        context={"type": geometry_type},
    )


def _construction_axis_source(entity: Any) -> AxisSource:
    geometry = _geometry(entity)
    geometry_type = object_type(geometry)
    if geometry_type != Constants.TYPE_INFINITE_LINE:
        raise InvalidGeometryError(
            f"Construction axis geometry is not an infinite line: {geometry_type}",
            context={"type": geometry_type},
        )
    return ConstructionAxis(origin=point_tuple(geometry.origin), direction=vector_tuple(geometry.direction))


def _face_source(entity: Any) -> AxisSource:
    geometry = _geometry(entity)
    geometry_type = object_type(geometry)
    if geometry_type != Constants.TYPE_CYLINDER:
        raise InvalidGeometryError(
            f"Selected face is not cylindrical: {geometry_type}",
            context={"type": geometry_type},
        )
    return CylindricalFace(
        origin=point_tuple(geometry.origin),
        axis=vector_tuple(geometry.axis),
        radius=getattr(geometry, "radius", None),
    )


_SOURCE_BUILDERS: dict[str, Callable[[Any], AxisSource]] = {
    Constants.TYPE_BREP_EDGE: _edge_source,
    Constants.TYPE_CONSTRUCTION_AXIS: _construction_axis_source,
    Constants.TYPE_BREP_FACE: _face_source,
}


def axis_source_from_entity(entity: Any) -> AxisSource:
    """Convert a selected Fusion entity into an axis source.

    Raises:
        UnsupportedGeometryKindError: If the entity is not an edge, construction axis, or face
        InvalidGeometryError: If the entity's geometry cannot be read or does not match its type
    """
    entity_type = object_type(entity)
    builder = _SOURCE_BUILDERS.get(entity_type)
    if builder is None:
        raise UnsupportedGeometryKindError(
            f"Unsupported axis selection: {entity_type or type(entity).__name__}",
            context={"type": entity_type},
        )
    source = builder(entity)
    logger.debug("Selection %s mapped to %s", entity_type, source.kind.value)
    return source


# --- Matrices -------------------------------------------------------------
def matrix_from_cells(cells: Sequence[float]) -> npt.NDArray[np.float64]:
    """Convert 16 row-major cells (Matrix3D.asArray) into a 4x4 array."""
    array = np.asarray(list(cells), dtype=np.float64)
    if array.size != 16:
        raise InvalidGeometryError(f"Expected 16 matrix cells, got {array.size}.")
    return array.reshape(4, 4)


def matrix_cells(matrix: npt.ArrayLike) -> list[float]:
    """Flatten a 4x4 matrix into 16 row-major cells for Matrix3D.setWithArray."""
    return [float(v) for v in np.asarray(matrix, dtype=np.float64).ravel()]


# --- Targets --------------------------------------------------------------
@dataclass(frozen=True)
class FusionPlacementTarget:
    """Occurrence wrapper exposing what the placement loop needs."""

    handle: Any

    @property
    def name(self) -> str:
        return str(getattr(self.handle, "name", ""))

    @property
    def kind(self) -> str:
        return object_type(self.handle)

    @property
    def transform(self) -> npt.NDArray[np.float64] | None:
        matrix = getattr(self.handle, "transform2", None) or getattr(self.handle, "transform", None)
        if matrix is None:
            return None
        return matrix_from_cells(matrix.asArray())


def targets_from_entities(entities: Iterable[Any]) -> list[FusionPlacementTarget]:
    """Wrap the selected entities that are occurrences, in selection order."""
    targets = []
    for entity in entities:
        if object_type(entity) == Constants.TYPE_OCCURRENCE:
            targets.append(FusionPlacementTarget(entity))
        else:
            logger.debug("Skipping non-occurrence selection: %s", object_type(entity))
    return targets


# --- Occurrence Host ------------------------------------------------------
class FusionOccurrenceHost:
    """Create occurrences of existing components in a parent component.

    Args:
        parent: Component receiving the new occurrences (usually the root)
        matrix_factory: Callable returning a fresh Matrix3D
    """

    def __init__(self, parent: Any, matrix_factory: Callable[[], Any]) -> None:
        self.parent = parent
        self.matrix_factory = matrix_factory

    def add_occurrence(self, handle: Any, matrix: npt.ArrayLike) -> Any:
        host_matrix = self.matrix_factory()
        if not host_matrix.setWithArray(matrix_cells(matrix)):
            raise PlacementError("Host rejected placement matrix.", context={"target": getattr(handle, "name", None)})
        occurrence = self.parent.occurrences.addExistingComponent(handle.component, host_matrix)
        if occurrence is None:
            raise PlacementError("Host failed to create occurrence.", context={"target": getattr(handle, "name", None)})
        return occurrence
