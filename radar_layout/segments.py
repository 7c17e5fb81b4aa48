"""Quadrant x ring cells and the clip/sample operations defined on them."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple

from .model import INNER_RADIUS, QUADRANTS, RINGS, SEGMENT_PADDING
from .sampler import DeterministicSampler
from .transform import (
    Point,
    PolarPoint,
    clamp_box,
    clamp_ring,
    clamp_scalar,
    to_cartesian,
    to_polar,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Segment:
    """Geometric bounds of one ``(quadrant, ring)`` cell.

    ``r_min``/``r_max`` are the raw ring bounds used for sampling; clipping
    insets them by ``padding``. The cartesian box keeps points on the
    quadrant's side of both axes.
    """

    quadrant: int
    ring: int
    angle_min: float
    angle_max: float
    r_min: float
    r_max: float
    box_min: Point
    box_max: Point
    padding: float = SEGMENT_PADDING

    @property
    def key(self) -> Tuple[int, int]:
        return (self.quadrant, self.ring)

    @property
    def clip_r_min(self) -> float:
        return self.r_min + self.padding

    @property
    def clip_r_max(self) -> float:
        return self.r_max - self.padding

    def clip(self, point: Point) -> Point:
        """Return the nearest admissible position for ``point``.

        The box clamp pins the point to its quadrant, the ring clamp fixes
        the radius. Pulling a far-out point inward can drop it below the
        axis padding again, so the angle is finally clamped to the arc whose
        points keep ``padding`` distance from both axes at that radius.
        """

        boxed = clamp_box(point, self.box_min, self.box_max)
        polar = clamp_ring(to_polar(boxed), self.clip_r_min, self.clip_r_max)
        if polar.radius <= 0.0:
            return to_cartesian(polar)
        margin = math.asin(min(1.0, self.padding / polar.radius))
        angle = clamp_scalar(polar.angle, self.angle_min + margin, self.angle_max - margin)
        return to_cartesian(PolarPoint(angle=angle, radius=polar.radius))

    def contains(self, point: Point, tol: float = 1e-6) -> bool:
        clipped = self.clip(point)
        return math.hypot(clipped.x - point.x, clipped.y - point.y) <= tol

    def sample(self, sampler: DeterministicSampler) -> Point:
        """Draw an initial position: flat in angle, mid-ring biased in radius."""

        angle = sampler.uniform(self.angle_min, self.angle_max)
        radius = sampler.triangular(self.r_min, self.r_max)
        return to_cartesian(PolarPoint(angle=angle, radius=radius))


@lru_cache(maxsize=len(QUADRANTS) * len(RINGS))
def segment_for(quadrant: int, ring: int) -> Segment:
    """Return the shared :class:`Segment` for ``(quadrant, ring)``."""

    q = QUADRANTS[quadrant]
    outermost = RINGS[-1].radius
    segment = Segment(
        quadrant=quadrant,
        ring=ring,
        angle_min=q.radial_min * math.pi,
        angle_max=q.radial_max * math.pi,
        r_min=INNER_RADIUS if ring == 0 else RINGS[ring - 1].radius,
        r_max=RINGS[ring].radius,
        box_min=Point(SEGMENT_PADDING * q.factor_x, SEGMENT_PADDING * q.factor_y),
        box_max=Point(outermost * q.factor_x, outermost * q.factor_y),
    )
    logger.debug("Built segment %s", segment)
    return segment


def viewbox(quadrant: int) -> Tuple[float, float, float, float]:
    """SVG viewBox that frames a single quadrant when the radar is zoomed."""

    q = QUADRANTS[quadrant]
    outermost = RINGS[-1].radius
    return (
        max(0.0, q.factor_x * outermost) - 420.0,
        max(0.0, q.factor_y * outermost) - 420.0,
        440.0,
        440.0,
    )


__all__ = ["Segment", "segment_for", "viewbox"]
