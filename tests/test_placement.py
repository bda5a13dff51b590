"""Tests for the placement loop and the full pattern pipeline."""

from __future__ import annotations

import math

import numpy as np
import pytest
from helpers import FakeTarget

from spiral_pattern.exceptions import DegenerateAxisError, EmptyTargetSetError, UnsupportedGeometryKindError
from spiral_pattern.geometry.axis import CircularEdge, StraightEdge
from spiral_pattern.geometry.transforms import Transform, generate
from spiral_pattern.placement import filter_targets, is_root, plan_placements, run_spiral_pattern
from spiral_pattern.specs import PatternParameters


ROOT = ("Root", "adsk::fusion::Component")


def translated(x: float, y: float, z: float) -> np.ndarray:
    matrix = np.eye(4)
    matrix[:3, 3] = (x, y, z)
    return matrix


# --- Filtering ------------------------------------------------------------
def test_root_requires_name_and_kind_match():
    assert is_root(FakeTarget("Root", kind="adsk::fusion::Component"), *ROOT)
    assert not is_root(FakeTarget("Root"), *ROOT)
    assert not is_root(FakeTarget("Bolt", kind="adsk::fusion::Component"), *ROOT)
    assert not is_root(FakeTarget("Root", kind="adsk::fusion::Component"), None, None)


def test_filter_drops_root_and_keeps_order():
    targets = [FakeTarget("B"), FakeTarget("Root", kind="adsk::fusion::Component"), FakeTarget("A")]

    assert [t.name for t in filter_targets(targets, *ROOT)] == ["B", "A"]


def test_filter_raises_when_nothing_remains():
    with pytest.raises(EmptyTargetSetError):
        filter_targets([FakeTarget("Root", kind="adsk::fusion::Component")], *ROOT)
    with pytest.raises(EmptyTargetSetError):
        filter_targets([])


# --- Planning -------------------------------------------------------------
def test_requests_iterate_steps_then_targets(z_axis, quarter_turn_params):
    targets = [FakeTarget("A"), FakeTarget("B")]

    requests = plan_placements(generate(z_axis, quarter_turn_params), targets)

    assert [(r.step, r.target.name) for r in requests] == [(1, "A"), (1, "B"), (2, "A"), (2, "B")]


def test_request_applies_pattern_on_top_of_original_placement(z_axis, quarter_turn_params):
    target = FakeTarget("A", transform=translated(1.0, 0.0, 0.0))

    requests = plan_placements(generate(z_axis, quarter_turn_params), [target])

    origin_of_copy = [Transform(r.matrix).apply((0.0, 0.0, 0.0)) for r in requests]
    assert np.allclose(origin_of_copy[0], [0.0, 1.0, 10.0], atol=1e-9)
    assert np.allclose(origin_of_copy[1], [-1.0, 0.0, 20.0], atol=1e-9)


def test_later_steps_do_not_compound_on_earlier_copies(z_axis):
    params = PatternParameters(count=3, step_distance=1.0, step_angle=0.5)
    placement = translated(2.0, 0.0, 0.0)
    transforms = list(generate(z_axis, params))

    requests = plan_placements(transforms, [FakeTarget("A", transform=placement)])

    assert np.allclose(requests[1].matrix, transforms[1].matrix @ placement, atol=1e-12)


def test_missing_target_placement_is_identity(z_axis, quarter_turn_params):
    requests = plan_placements(generate(z_axis, quarter_turn_params), [FakeTarget("A")])

    assert requests[0].transform.allclose(next(iter(generate(z_axis, quarter_turn_params))))


# --- Pipeline -------------------------------------------------------------
def test_pipeline_places_every_copy(recording_host):
    source = CircularEdge(center=(0.0, 0.0, 0.0), normal=(0.0, 0.0, 1.0))
    params = PatternParameters(count=4, step_distance=5.0, step_angle=math.pi / 3)
    targets = [FakeTarget("A"), FakeTarget("Root", kind="adsk::fusion::Component"), FakeTarget("B")]

    requests = run_spiral_pattern(source, params, targets, recording_host, *ROOT)

    assert len(requests) == 6
    assert [handle for handle, _ in recording_host.calls] == ["A", "B", "A", "B", "A", "B"]
    assert np.allclose(recording_host.calls[-1][1][:3, 3], [0.0, 0.0, 15.0], atol=1e-9)


def test_pipeline_fails_before_touching_host(recording_host):
    params = PatternParameters(count=3, step_distance=1.0, step_angle=0.0)

    with pytest.raises(DegenerateAxisError):
        run_spiral_pattern(StraightEdge((1.0, 1.0, 1.0), (1.0, 1.0, 1.0)), params, [FakeTarget("A")], recording_host)
    with pytest.raises(UnsupportedGeometryKindError):
        run_spiral_pattern(object(), params, [FakeTarget("A")], recording_host)
    with pytest.raises(EmptyTargetSetError):
        run_spiral_pattern(StraightEdge((0.0, 0.0, 0.0), (0.0, 0.0, 1.0)), params, [], recording_host)

    assert recording_host.calls == []
