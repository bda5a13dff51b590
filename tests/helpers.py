"""
Title         : helpers.py
Author        : Bardia Samiee
Project       : Parametric Forge
License       : MIT
Path          : tests/helpers.py

Description
----------------------------------------------------------------------------
Stand-ins for Fusion host objects and small assertion helpers.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from types import SimpleNamespace
from typing import Any

import numpy as np


# --- Host Stand-ins -------------------------------------------------------
def vec(x: float, y: float, z: float) -> SimpleNamespace:
    """Fusion Point3D/Vector3D look-alike."""
    return SimpleNamespace(x=x, y=y, z=z)


def entity(object_type: str, geometry: Any = None) -> SimpleNamespace:
    return SimpleNamespace(objectType=object_type, geometry=geometry)


@dataclass(frozen=True)
class FakeTarget:
    name: str
    kind: str = "adsk::fusion::Occurrence"
    transform: Any = None

    @property
    def handle(self) -> str:
        return self.name


class RecordingHost:
    """Collects add_occurrence calls instead of mutating a document."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, np.ndarray]] = []

    def add_occurrence(self, handle: Any, matrix: np.ndarray) -> Any:
        self.calls.append((handle, np.array(matrix)))
        return handle


# --- Helpers --------------------------------------------------------------
def angle_difference(a: float, b: float) -> float:
    """Smallest absolute difference between two angles."""
    diff = (a - b) % (2.0 * math.pi)
    return min(diff, 2.0 * math.pi - diff)
