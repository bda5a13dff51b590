"""
Title         : exceptions.py
Author        : Bardia Samiee
Project       : Parametric Forge
License       : MIT
Path          : fusion/plugins/SpiralPattern/spiral_pattern/exceptions.py

Description
----------------------------------------------------------------------------
Centralized exception hierarchy for the SpiralPattern add-in. Every exception
inherits from SpiralPatternError and carries an ErrorKind so the command layer
can present a specific message without inspecting exception types.
"""

from __future__ import annotations

from abc import ABC
from enum import Enum
from typing import Any, ClassVar


# --- Error Kind Enum ------------------------------------------------------
class ErrorKind(Enum):
    """Structured error categories surfaced to the host."""

    UNSUPPORTED_GEOMETRY_KIND = "unsupported_geometry_kind"
    DEGENERATE_AXIS = "degenerate_axis"
    INVALID_GEOMETRY = "invalid_geometry"
    INVALID_PARAMETER_RANGE = "invalid_parameter_range"
    EMPTY_TARGET_SET = "empty_target_set"
    USER_CANCELLED = "user_cancelled"
    CONFIGURATION = "configuration"
    PLACEMENT = "placement"


# --- Base Exception -------------------------------------------------------
class SpiralPatternError(Exception, ABC):
    """Base exception for all SpiralPattern errors.

    Attributes:
        message: Human-readable error description
        context: Optional context information (entity types, parameters, etc.)
        kind: Structured category of the failure

    Example:
        >>> raise DegenerateAxisError("Axis direction is zero", context={"direction": (0, 0, 0)})
    """

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str, context: Any | None = None) -> None:
        """Initialize error with message and optional context.

        Args:
            message: Error description shown to user
            context: Optional context information for debugging
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """Return formatted error message."""
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Return a structured representation for logging and host messaging."""
        return {"kind": self.kind.value, "message": self.message, "context": self.context}


# --- Geometry Exceptions --------------------------------------------------
class UnsupportedGeometryKindError(SpiralPatternError):
    """Raised when a selection is not one of the recognized axis sources.

    Example:
        >>> resolve_axis(planar_face)
        Traceback (most recent call last):
        UnsupportedGeometryKindError: Unsupported axis geometry: PlanarFace
    """

    kind = ErrorKind.UNSUPPORTED_GEOMETRY_KIND


class DegenerateAxisError(SpiralPatternError):
    """Raised when a resolved or supplied axis direction is the zero vector.

    Example:
        >>> resolve_axis(StraightEdge(start=(1, 1, 1), end=(1, 1, 1)))
        Traceback (most recent call last):
        DegenerateAxisError: Axis direction has zero length.
    """

    kind = ErrorKind.DEGENERATE_AXIS


class InvalidGeometryError(SpiralPatternError):
    """Raised when a geometry query fails or returns inconsistent data.

    This covers missing or non-finite coordinates and faces whose surface is
    not actually cylindrical despite being offered as an axis source.
    """

    kind = ErrorKind.INVALID_GEOMETRY


# --- Parameter Exceptions -------------------------------------------------
class InvalidParameterRangeError(SpiralPatternError):
    """Raised when pattern parameters are out of range.

    Example:
        >>> PatternParameters(count=1, step_distance=1.0, step_angle=0.0)
        Traceback (most recent call last):
        InvalidParameterRangeError: Pattern count must be at least 2 (got 1).
    """

    kind = ErrorKind.INVALID_PARAMETER_RANGE


class EmptyTargetSetError(SpiralPatternError):
    """Raised when no target objects remain to be patterned."""

    kind = ErrorKind.EMPTY_TARGET_SET


# --- Operation Exceptions -------------------------------------------------
class UserCancelledError(SpiralPatternError):
    """Raised when the user cancels the command.

    The @fusion_command decorator treats this as a normal exit, not an error.
    """

    kind = ErrorKind.USER_CANCELLED


class ConfigurationError(SpiralPatternError):
    """Raised when the add-in configuration file cannot be read or is invalid."""

    kind = ErrorKind.CONFIGURATION


class PlacementError(SpiralPatternError):
    """Raised when the host fails to create a patterned occurrence.

    Example:
        >>> if not matrix.setWithArray(cells):
        ...     raise PlacementError("Host rejected placement matrix", context={"target": name})
    """

    kind = ErrorKind.PLACEMENT
