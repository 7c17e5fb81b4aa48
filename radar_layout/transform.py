"""Polar/cartesian conversions and clamping helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass(frozen=True)
class PolarPoint:
    """Polar coordinates; ``angle`` in radians, ``radius`` non-negative."""

    angle: float
    radius: float


def to_polar(point: Point) -> PolarPoint:
    return PolarPoint(
        angle=math.atan2(point.y, point.x),
        radius=math.sqrt(point.x * point.x + point.y * point.y),
    )


def to_cartesian(polar: PolarPoint) -> Point:
    return Point(
        x=polar.radius * math.cos(polar.angle),
        y=polar.radius * math.sin(polar.angle),
    )


def clamp_scalar(value: float, lo: float, hi: float) -> float:
    """Clamp ``value`` into the interval spanned by ``lo`` and ``hi`` (any order)."""

    low = min(lo, hi)
    high = max(lo, hi)
    return min(max(value, low), high)


def clamp_box(point: Point, lo: Point, hi: Point) -> Point:
    return Point(
        x=clamp_scalar(point.x, lo.x, hi.x),
        y=clamp_scalar(point.y, lo.y, hi.y),
    )


def clamp_ring(polar: PolarPoint, r_min: float, r_max: float) -> PolarPoint:
    return PolarPoint(angle=polar.angle, radius=clamp_scalar(polar.radius, r_min, r_max))


__all__ = [
    "Point",
    "PolarPoint",
    "to_polar",
    "to_cartesian",
    "clamp_scalar",
    "clamp_box",
    "clamp_ring",
]
