"""Core data structures shared by the layout pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Tuple

from .transform import Point

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from .segments import Segment


@dataclass(frozen=True)
class Quadrant:
    """Angular range (multiples of pi) and the axis signs of its screen corner."""

    radial_min: float
    radial_max: float
    factor_x: int
    factor_y: int


@dataclass(frozen=True)
class Ring:
    radius: float


QUADRANTS: Tuple[Quadrant, ...] = (
    Quadrant(radial_min=0.0, radial_max=0.5, factor_x=1, factor_y=1),
    Quadrant(radial_min=0.5, radial_max=1.0, factor_x=-1, factor_y=1),
    Quadrant(radial_min=-1.0, radial_max=-0.5, factor_x=-1, factor_y=-1),
    Quadrant(radial_min=-0.5, radial_max=0.0, factor_x=1, factor_y=-1),
)

RINGS: Tuple[Ring, ...] = (
    Ring(radius=130.0),
    Ring(radius=220.0),
    Ring(radius=310.0),
    Ring(radius=400.0),
)

INNER_RADIUS = 30.0
SEGMENT_PADDING = 15.0
ID_QUADRANT_ORDER: Tuple[int, ...] = (2, 3, 1, 0)

DEFAULT_RING_COLORS: Tuple[str, ...] = ("#5ba300", "#009eb0", "#c7ba00", "#e09b96")
DEFAULT_INACTIVE_COLOR = "#ddd"


@dataclass
class RingStyle:
    name: str
    color: str


@dataclass
class QuadrantStyle:
    name: str


@dataclass
class Entry:
    """One radar item plus the fields the layout pass fills in."""

    label: str
    quadrant: int
    ring: int
    active: bool = True
    description: Optional[str] = None
    link: Optional[str] = None
    moved: int = 0
    id: Optional[int] = None
    segment: Optional["Segment"] = field(default=None, repr=False, compare=False)
    color: Optional[str] = None
    x: float = 0.0
    y: float = 0.0
    vx: float = field(default=0.0, repr=False)
    vy: float = field(default=0.0, repr=False)

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)

    @position.setter
    def position(self, point: Point) -> None:
        self.x = float(point.x)
        self.y = float(point.y)

    @property
    def display_id(self) -> str:
        """Two-digit label drawn on the blip and in the legend."""

        if self.id is None:
            return ""
        return f"{self.id:02d}"


@dataclass
class RadarConfig:
    entries: List[Entry] = field(default_factory=list)
    rings: List[RingStyle] = field(
        default_factory=lambda: [
            RingStyle(name=f"Ring {idx}", color=color) for idx, color in enumerate(DEFAULT_RING_COLORS)
        ]
    )
    quadrants: List[QuadrantStyle] = field(
        default_factory=lambda: [QuadrantStyle(name=f"Quadrant {idx}") for idx in range(len(QUADRANTS))]
    )
    inactive_color: str = DEFAULT_INACTIVE_COLOR
    print_layout: bool = False
    zoomed_quadrant: Optional[int] = None


__all__ = [
    "Quadrant",
    "Ring",
    "QUADRANTS",
    "RINGS",
    "INNER_RADIUS",
    "SEGMENT_PADDING",
    "ID_QUADRANT_ORDER",
    "DEFAULT_RING_COLORS",
    "DEFAULT_INACTIVE_COLOR",
    "RingStyle",
    "QuadrantStyle",
    "Entry",
    "RadarConfig",
]
