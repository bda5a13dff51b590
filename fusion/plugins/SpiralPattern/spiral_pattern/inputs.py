"""
Title         : inputs.py
Author        : Bardia Samiee
Project       : Parametric Forge
License       : MIT
Path          : fusion/plugins/SpiralPattern/spiral_pattern/inputs.py

Description
----------------------------------------------------------------------------
Invocation-scoped dialog state for the SpiralPattern command.

The dialog offers both a total height and a per-step distance. They are kept
consistent with the count: editing the count or the height recomputes the
distance, editing the distance recomputes the height.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from .constants import Constants
from .exceptions import InvalidParameterRangeError
from .geometry.math_utils import clamp
from .specs import PatternParameters


logger = logging.getLogger(__name__)


# --- Pattern Inputs -------------------------------------------------------
@dataclass(frozen=True)
class PatternInputs:
    """Snapshot of the dialog values in internal units.

    Attributes:
        count: Total number of instances (slider value)
        height: Total axial height from the original to the last copy
        distance: Axial distance per step
        angle: Rotation per step in radians
    """

    count: int
    height: float
    distance: float
    angle: float

    @property
    def steps(self) -> int:
        return max(self.count - 1, 1)

    def with_count(self, count: int) -> PatternInputs:
        """Return a copy with the count clamped to the slider range."""
        return replace(self, count=int(clamp(count, Constants.MIN_COUNT, Constants.MAX_COUNT)))

    def reconcile(self, changed_id: str) -> PatternInputs:
        """Return inputs made consistent after the input `changed_id` was edited.

        Args:
            changed_id: Id of the dialog input that changed

        Returns:
            Updated inputs; unchanged when `changed_id` does not affect height or distance
        """
        if changed_id in (Constants.INPUT_NUMBER, Constants.INPUT_HEIGHT):
            updated = replace(self, distance=self.height / self.steps)
        elif changed_id == Constants.INPUT_DISTANCE:
            updated = replace(self, height=self.distance * self.steps)
        else:
            return self
        logger.debug("Reconciled %s: height=%g distance=%g", changed_id, updated.height, updated.distance)
        return updated

    def to_parameters(self) -> PatternParameters:
        """Convert to generator parameters.

        Raises:
            InvalidParameterRangeError: If the count is outside the slider range
        """
        if not Constants.MIN_COUNT <= self.count <= Constants.MAX_COUNT:
            raise InvalidParameterRangeError(
                f"Number of occurrences must be between {Constants.MIN_COUNT} and {Constants.MAX_COUNT}.",
                context={"count": self.count},
            )
        return PatternParameters(count=self.count, step_distance=self.distance, step_angle=self.angle)
