"""
Title         : constants.py
Author        : Bardia Samiee
Project       : Parametric Forge
License       : MIT
Path          : fusion/plugins/SpiralPattern/spiral_pattern/constants.py

Description
----------------------------------------------------------------------------
Centralize command ids, dialog defaults, tolerances, and string messages.
"""

from typing import ClassVar


# --- Constants Section ----------------------------------------------------
class Constants:
    """Application-wide constants for the SpiralPattern command."""

    # Command Definition
    COMMAND_ID = "SpiralPatternCmd"
    BUTTON_ID = "SpiralPattern"
    BUTTON_NAME = "Spiral Pattern"
    BUTTON_TOOLTIP = "Creates pattern along spiral path"

    # Dialog Input Ids
    INPUT_OBJECTS = f"{COMMAND_ID}_objects"
    INPUT_AXIS = f"{COMMAND_ID}_axis"
    INPUT_NUMBER = f"{COMMAND_ID}_number"
    INPUT_HEIGHT = f"{COMMAND_ID}_height"
    INPUT_DISTANCE = f"{COMMAND_ID}_distance"
    INPUT_ANGLE = f"{COMMAND_ID}_angle"

    # Selection Filters
    OBJECT_FILTERS: ClassVar[list[str]] = ["Occurrences"]
    AXIS_FILTERS: ClassVar[list[str]] = [
        "CylindricalFaces",
        "LinearEdges",
        "ConstructionLines",
        "CircularEdges",
    ]

    # Count Slider Range (total instances including the original)
    MIN_COUNT = 2
    MAX_COUNT = 100

    # Units
    LENGTH_UNIT_HEIGHT = "m"
    LENGTH_UNIT_DISTANCE = "mm"
    ANGLE_UNIT = "deg"

    # Tolerances
    COMPARE_TOLERANCE = 1e-9

    # Fusion Object Types
    TYPE_OCCURRENCE = "adsk::fusion::Occurrence"
    TYPE_BREP_EDGE = "adsk::fusion::BRepEdge"
    TYPE_BREP_FACE = "adsk::fusion::BRepFace"
    TYPE_CONSTRUCTION_AXIS = "adsk::fusion::ConstructionAxis"
    TYPE_ARC = "adsk::core::Arc3D"
    TYPE_CIRCLE = "adsk::core::Circle3D"
    TYPE_LINE = "adsk::core::Line3D"
    TYPE_INFINITE_LINE = "adsk::core::InfiniteLine3D"
    TYPE_CYLINDER = "adsk::core::Cylinder"


# --- Strings Section ------------------------------------------------------
class Strings:
    """User-facing labels and messages."""

    # Dialog Labels
    LABEL_OBJECTS = "Select Component"
    TOOLTIP_OBJECTS = "Select bodies or occurrences"
    LABEL_AXIS = "Select axis"
    TOOLTIP_AXIS = "Select edge or axis of rotation"
    LABEL_NUMBER = "Number of Occurrences"
    LABEL_HEIGHT = "Height Total"
    LABEL_DISTANCE = "Occurrences Distance"
    LABEL_ANGLE = "Occurrences Angle"

    # Messages
    MSG_NO_COMPONENTS = "No Components were selected!"
    MSG_NO_AXIS = "No Axis was selected!"
    MSG_INVALID_EXPRESSION = "Invalid value expression for '{label}'."
    MSG_PATTERN_CREATED = "Spiral pattern created: {count} occurrence(s) added."
    MSG_PLUGIN_ERROR = "SpiralPattern error: {message}"
    MSG_UNEXPECTED_ERROR = "Unexpected error:\n{trace}"
