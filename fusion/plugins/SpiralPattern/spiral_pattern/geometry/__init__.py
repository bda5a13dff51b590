"""
Title         : __init__.py
Author        : Bardia Samiee
Project       : Parametric Forge
License       : MIT
Path          : fusion/plugins/SpiralPattern/spiral_pattern/geometry/__init__.py

Description
----------------------------------------------------------------------------
Geometry package for spiral pattern calculations.
Exports vector utilities, axis sources with their resolver, and the transform generator.
"""

from .axis import (
    AxisSource,
    AxisSourceKind,
    CircularEdge,
    ConstructionAxis,
    CylindricalFace,
    StraightEdge,
    resolve_axis,
)
from .math_utils import clamp, normalize, rotation_matrix, signed_angle_about
from .transforms import (
    SpiralTransformGenerator,
    SpiralTransforms,
    Transform,
    generate,
    step_transform,
)


__all__ = [  # noqa: RUF022
    # Axis sources
    "AxisSource",
    "AxisSourceKind",
    "CircularEdge",
    "StraightEdge",
    "ConstructionAxis",
    "CylindricalFace",
    "resolve_axis",
    # Transforms
    "Transform",
    "SpiralTransforms",
    "SpiralTransformGenerator",
    "generate",
    "step_transform",
    # Math utilities
    "clamp",
    "normalize",
    "rotation_matrix",
    "signed_angle_about",
]
