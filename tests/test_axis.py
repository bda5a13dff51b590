"""Tests for axis sources and the axis resolver."""

from __future__ import annotations

import math
from dataclasses import dataclass
from types import SimpleNamespace

import numpy as np
import pytest

from spiral_pattern.exceptions import (
    DegenerateAxisError,
    ErrorKind,
    InvalidGeometryError,
    UnsupportedGeometryKindError,
)
from spiral_pattern.geometry.axis import (
    AxisSourceKind,
    CircularEdge,
    ConstructionAxis,
    CylindricalFace,
    StraightEdge,
    resolve_axis,
)
from spiral_pattern.specs import Axis


def test_circular_edge_resolves_to_center_and_normal():
    axis = resolve_axis(CircularEdge(center=(5.0, 0.0, 0.0), normal=(0.0, 1.0, 0.0)))

    assert axis == Axis(origin=(5.0, 0.0, 0.0), direction=(0.0, 1.0, 0.0))


def test_straight_edge_direction_is_not_normalized():
    axis = resolve_axis(StraightEdge(start=(1.0, 2.0, 3.0), end=(4.0, 6.0, 9.0)))

    assert axis.origin == (1.0, 2.0, 3.0)
    assert axis.direction == (3.0, 4.0, 6.0)
    assert np.linalg.norm(axis.unit_direction) == pytest.approx(1.0)


def test_construction_axis_passes_line_through():
    axis = resolve_axis(ConstructionAxis(origin=(0.0, 0.0, 2.0), direction=(1.0, 0.0, 0.0)))

    assert axis.origin == (0.0, 0.0, 2.0)
    assert axis.direction == (1.0, 0.0, 0.0)


def test_cylindrical_face_uses_cylinder_axis():
    axis = resolve_axis(CylindricalFace(origin=(1.0, 1.0, 0.0), axis=(0.0, 0.0, 2.0), radius=0.5))

    assert axis.origin == (1.0, 1.0, 0.0)
    assert axis.direction == (0.0, 0.0, 2.0)


def test_cylindrical_face_without_radius_is_accepted():
    axis = resolve_axis(CylindricalFace(origin=(0.0, 0.0, 0.0), axis=(0.0, 1.0, 0.0)))

    assert axis.direction == (0.0, 1.0, 0.0)


@pytest.mark.parametrize("radius", [0.0, -1.0, math.nan, "wide"])
def test_cylindrical_face_with_bad_radius_is_invalid_geometry(radius):
    with pytest.raises(InvalidGeometryError):
        resolve_axis(CylindricalFace(origin=(0.0, 0.0, 0.0), axis=(0.0, 0.0, 1.0), radius=radius))


def test_coincident_straight_edge_endpoints_are_degenerate():
    with pytest.raises(DegenerateAxisError) as info:
        resolve_axis(StraightEdge(start=(1.0, 1.0, 1.0), end=(1.0, 1.0, 1.0)))

    assert info.value.kind is ErrorKind.DEGENERATE_AXIS


def test_zero_circle_normal_is_degenerate():
    with pytest.raises(DegenerateAxisError):
        resolve_axis(CircularEdge(center=(0.0, 0.0, 0.0), normal=(0.0, 0.0, 0.0)))


@pytest.mark.parametrize(
    "source",
    [
        CircularEdge(center=(math.nan, 0.0, 0.0), normal=(0.0, 0.0, 1.0)),
        StraightEdge(start=(0.0, 0.0), end=(1.0, 0.0, 0.0)),
        ConstructionAxis(origin=None, direction=(0.0, 0.0, 1.0)),
        CylindricalFace(origin=(0.0, 0.0, 0.0), axis=(math.inf, 0.0, 0.0)),
    ],
)
def test_malformed_coordinates_are_invalid_geometry(source):
    with pytest.raises(InvalidGeometryError):
        resolve_axis(source)


def test_unknown_object_is_unsupported():
    with pytest.raises(UnsupportedGeometryKindError) as info:
        resolve_axis(object())

    assert info.value.kind is ErrorKind.UNSUPPORTED_GEOMETRY_KIND


def test_look_alike_is_not_treated_as_straight_edge():
    look_alike = SimpleNamespace(start=(0.0, 0.0, 0.0), end=(0.0, 0.0, 1.0), kind=AxisSourceKind.STRAIGHT_EDGE)

    with pytest.raises(UnsupportedGeometryKindError):
        resolve_axis(look_alike)


def test_subclass_is_not_cast_to_its_base_kind():
    @dataclass(frozen=True)
    class TaggedEdge(StraightEdge):
        pass

    with pytest.raises(UnsupportedGeometryKindError):
        resolve_axis(TaggedEdge(start=(0.0, 0.0, 0.0), end=(0.0, 0.0, 1.0)))


def test_each_source_reports_its_kind():
    assert CircularEdge((0, 0, 0), (0, 0, 1)).kind is AxisSourceKind.CIRCULAR_EDGE
    assert StraightEdge((0, 0, 0), (0, 0, 1)).kind is AxisSourceKind.STRAIGHT_EDGE
    assert ConstructionAxis((0, 0, 0), (0, 0, 1)).kind is AxisSourceKind.CONSTRUCTION_AXIS
    assert CylindricalFace((0, 0, 0), (0, 0, 1)).kind is AxisSourceKind.CYLINDRICAL_FACE
