"""Pairwise disc repulsion between blips."""

from __future__ import annotations

import logging
import math
from typing import Sequence

import numpy as np
from scipy.spatial import cKDTree

from ..model import Entry
from ..sampler import DeterministicSampler
from .model import SimulationOptions

logger = logging.getLogger(__name__)


def _positions(entries: Sequence[Entry], *, predicted: bool = False) -> np.ndarray:
    if predicted:
        return np.array([(e.x + e.vx, e.y + e.vy) for e in entries], dtype=float).reshape(-1, 2)
    return np.array([(e.x, e.y) for e in entries], dtype=float).reshape(-1, 2)


def collide(
    entries: Sequence[Entry],
    options: SimulationOptions,
    sampler: DeterministicSampler,
) -> int:
    """Apply one collision pass to the velocities of ``entries``.

    Candidate pairs come from a k-d tree over predicted positions
    (``x + vx``); each pair is then resolved in index order against the
    velocities updated so far, as a Gauss-Seidel sweep. All discs share one
    radius, so each side of a pair takes half of the push. Returns the
    number of pairs that were pushed apart.
    """

    if len(entries) < 2:
        return 0

    reach = 2.0 * options.collision_radius
    tree = cKDTree(_positions(entries, predicted=True))
    pairs = tree.query_pairs(reach, output_type="ndarray")
    if pairs.size == 0:
        return 0
    pairs = pairs[np.lexsort((pairs[:, 1], pairs[:, 0]))]

    hits = 0
    current = -1
    xi = yi = 0.0
    for i, j in pairs:
        node = entries[int(i)]
        other = entries[int(j)]
        if i != current:
            current = i
            xi = node.x + node.vx
            yi = node.y + node.vy

        x = xi - other.x - other.vx
        y = yi - other.y - other.vy
        dist_sq = x * x + y * y
        if dist_sq >= reach * reach:
            continue
        if x == 0.0:
            x = sampler.jiggle()
            dist_sq += x * x
        if y == 0.0:
            y = sampler.jiggle()
            dist_sq += y * y

        dist = math.sqrt(dist_sq)
        push = (reach - dist) / dist * options.strength
        x *= push
        y *= push
        node.vx += x * 0.5
        node.vy += y * 0.5
        other.vx -= x * 0.5
        other.vy -= y * 0.5
        hits += 1

    return hits


def max_overlap(entries: Sequence[Entry], radius: float) -> float:
    """Largest disc interpenetration depth among ``entries`` (0 when none overlap)."""

    if len(entries) < 2:
        return 0.0
    points = _positions(entries)
    reach = 2.0 * radius
    pairs = cKDTree(points).query_pairs(reach, output_type="ndarray")
    if pairs.size == 0:
        return 0.0
    gaps = np.linalg.norm(points[pairs[:, 0]] - points[pairs[:, 1]], axis=1)
    return float(max(0.0, reach - float(gaps.min())))


__all__ = ["collide", "max_overlap"]
