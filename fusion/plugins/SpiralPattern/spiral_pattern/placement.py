"""
Title         : placement.py
Author        : Bardia Samiee
Project       : Parametric Forge
License       : MIT
Path          : fusion/plugins/SpiralPattern/spiral_pattern/placement.py

Description
----------------------------------------------------------------------------
Turn pattern transforms into placement requests for the host and run the
full resolve/generate/place pipeline.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

import numpy as np
import numpy.typing as npt

from .exceptions import EmptyTargetSetError
from .geometry.axis import AxisSource, resolve_axis
from .geometry.transforms import Transform, generate
from .specs import PatternParameters


logger = logging.getLogger(__name__)


# --- Host Protocols -------------------------------------------------------
class PlacementTarget(Protocol):
    """A host object that can be replicated by the pattern."""

    @property
    def name(self) -> str: ...

    @property
    def kind(self) -> str: ...

    @property
    def handle(self) -> Any: ...

    @property
    def transform(self) -> npt.ArrayLike | None: ...


class OccurrenceHost(Protocol):
    """Scene-graph collaborator that creates new placed instances."""

    def add_occurrence(self, handle: Any, matrix: npt.NDArray[np.float64]) -> Any: ...


# --- Placement Request ----------------------------------------------------
@dataclass(frozen=True)
class PlacementRequest:
    """A single instance the host should create."""

    target: PlacementTarget
    step: int
    transform: Transform

    @property
    def matrix(self) -> npt.NDArray[np.float64]:
        return self.transform.matrix


# --- Target Filtering -----------------------------------------------------
def is_root(target: PlacementTarget, root_name: str | None, root_kind: str | None) -> bool:
    """True when `target` is the root/container object itself (name and kind match)."""
    if root_name is None or root_kind is None:
        return False
    return target.name == root_name and target.kind == root_kind


def filter_targets(
    targets: Iterable[PlacementTarget],
    root_name: str | None = None,
    root_kind: str | None = None,
) -> list[PlacementTarget]:
    """Drop the root/container object and return the remaining targets in order.

    Raises:
        EmptyTargetSetError: If no targets remain
    """
    selected = [target for target in targets if not is_root(target, root_name, root_kind)]
    if not selected:
        raise EmptyTargetSetError("No valid target objects selected.", context={"root": root_name})
    return selected


def _placement_of(target: PlacementTarget) -> Transform:
    matrix = target.transform
    if matrix is None:
        return Transform.identity()
    return Transform(matrix)


# --- Planning -------------------------------------------------------------
def plan_placements(
    transforms: Iterable[Transform],
    targets: Sequence[PlacementTarget],
    root_name: str | None = None,
    root_kind: str | None = None,
) -> list[PlacementRequest]:
    """Combine every pattern transform with every non-root target.

    Transforms form the outer loop in step order and targets the inner loop
    in selection order. Each request applies the pattern transform on top of
    the target's original placement.
    """
    selected = filter_targets(targets, root_name, root_kind)
    placements = [_placement_of(target) for target in selected]

    requests: list[PlacementRequest] = []
    for transform in transforms:
        for target, placement in zip(selected, placements):
            requests.append(PlacementRequest(target=target, step=transform.step, transform=transform @ placement))
    return requests


# --- Pipeline -------------------------------------------------------------
def run_spiral_pattern(
    source: AxisSource,
    params: PatternParameters,
    targets: Sequence[PlacementTarget],
    host: OccurrenceHost,
    root_name: str | None = None,
    root_kind: str | None = None,
) -> list[PlacementRequest]:
    """Resolve the axis, generate transforms, and ask the host to place copies.

    All validation and planning happens before the first host call, so an
    invalid input never leaves a partially built pattern.

    Returns:
        The placement requests that were sent to the host
    """
    axis = resolve_axis(source)
    transforms = generate(axis, params)
    requests = plan_placements(transforms, targets, root_name, root_kind)

    logger.info("Placing %d occurrence(s) for %d step(s)", len(requests), len(transforms))
    for request in requests:
        host.add_occurrence(request.target.handle, request.matrix)
    return requests
