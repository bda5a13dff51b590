"""
Title         : conftest.py
Author        : Bardia Samiee
Project       : Parametric Forge
License       : MIT
Path          : tests/conftest.py

Description
----------------------------------------------------------------------------
Shared fixtures for the SpiralPattern test suite.
"""

from __future__ import annotations

import math

import pytest
from helpers import RecordingHost

from spiral_pattern.specs import Axis, PatternParameters


# --- Fixtures -------------------------------------------------------------
@pytest.fixture
def z_axis() -> Axis:
    return Axis(origin=(0.0, 0.0, 0.0), direction=(0.0, 0.0, 1.0))


@pytest.fixture
def quarter_turn_params() -> PatternParameters:
    return PatternParameters(count=3, step_distance=10.0, step_angle=math.pi / 2)


@pytest.fixture
def recording_host() -> RecordingHost:
    return RecordingHost()
