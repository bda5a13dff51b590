"""
Title         : __init__.py
Author        : Bardia Samiee
Project       : Parametric Forge
License       : MIT
Path          : fusion/plugins/SpiralPattern/spiral_pattern/__init__.py

Description
----------------------------------------------------------------------------
Package initializer exporting the public API for the SpiralPattern add-in.
"""

from .command_framework import fusion_command
from .config import SpiralPatternConfig, load_config
from .constants import Constants, Strings
from .exceptions import (
    ConfigurationError,
    DegenerateAxisError,
    EmptyTargetSetError,
    ErrorKind,
    InvalidGeometryError,
    InvalidParameterRangeError,
    PlacementError,
    SpiralPatternError,
    UnsupportedGeometryKindError,
    UserCancelledError,
)
from .geometry import (
    AxisSource,
    AxisSourceKind,
    CircularEdge,
    ConstructionAxis,
    CylindricalFace,
    SpiralTransformGenerator,
    SpiralTransforms,
    StraightEdge,
    Transform,
    generate,
    resolve_axis,
    step_transform,
)
from .inputs import PatternInputs
from .logging_config import setup_logging
from .placement import PlacementRequest, filter_targets, plan_placements, run_spiral_pattern
from .specs import Axis, PatternParameters


__all__ = [
    "Axis",
    "AxisSource",
    "AxisSourceKind",
    "CircularEdge",
    "ConfigurationError",
    "ConstructionAxis",
    "Constants",
    "CylindricalFace",
    "DegenerateAxisError",
    "EmptyTargetSetError",
    "ErrorKind",
    "InvalidGeometryError",
    "InvalidParameterRangeError",
    "PatternInputs",
    "PatternParameters",
    "PlacementError",
    "PlacementRequest",
    "SpiralPatternConfig",
    "SpiralPatternError",
    "SpiralTransformGenerator",
    "SpiralTransforms",
    "StraightEdge",
    "Strings",
    "Transform",
    "UnsupportedGeometryKindError",
    "UserCancelledError",
    "filter_targets",
    "fusion_command",
    "generate",
    "load_config",
    "plan_placements",
    "resolve_axis",
    "run_spiral_pattern",
    "setup_logging",
    "step_transform",
]
