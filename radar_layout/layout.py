"""End-to-end layout pass: validate, place, number, relax."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .logging_utils import debug_log_call
from .model import Entry, RadarConfig
from .placement import Partition, assign_ids, place_entries
from .sampler import DEFAULT_SEED, DeterministicSampler
from .segments import viewbox
from .simulation import CollisionSimulation, SimulationOptions, SimulationReport
from .validate import validate_config

logger = logging.getLogger(__name__)


@dataclass
class RadarLayout:
    config: RadarConfig
    segmented: Partition
    report: SimulationReport

    @property
    def entries(self) -> List[Entry]:
        return self.config.entries

    def legend(self, quadrant: int, ring: int) -> List[Entry]:
        """Entries of one segment in legend (id) order."""

        return list(self.segmented[quadrant][ring])

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready description of the layout for an external renderer."""

        payload: Dict[str, Any] = {
            "entries": [_entry_to_dict(entry) for entry in self.entries],
            "print_layout": self.config.print_layout,
            "simulation": {
                "ticks": self.report.ticks,
                "converged": self.report.converged,
                "kinetic_energy": self.report.kinetic_energy,
                "max_overlap": self.report.max_overlap,
            },
        }
        if self.config.zoomed_quadrant is not None:
            payload["zoomed_quadrant"] = self.config.zoomed_quadrant
            payload["viewbox"] = list(viewbox(self.config.zoomed_quadrant))
        return payload


def _entry_to_dict(entry: Entry) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "id": entry.id,
        "display_id": entry.display_id,
        "label": entry.label,
        "quadrant": entry.quadrant,
        "ring": entry.ring,
        "active": entry.active,
        "moved": entry.moved,
        "x": entry.x,
        "y": entry.y,
        "color": entry.color,
    }
    if entry.description is not None:
        data["description"] = entry.description
    if entry.link is not None:
        data["link"] = entry.link
    return data


@debug_log_call(logger, log_result=False)
def layout_radar(
    config: RadarConfig,
    options: Optional[SimulationOptions] = None,
    *,
    seed: int = DEFAULT_SEED,
) -> RadarLayout:
    """Lay out ``config.entries`` in place and return the finished layout.

    A fresh sampler seeded with ``seed`` drives both the initial placement
    and the collision jiggle, so identical input gives identical output.
    """

    validate_config(config)
    sampler = DeterministicSampler(seed)
    place_entries(config, sampler)
    segmented = assign_ids(config.entries)
    report = CollisionSimulation(config.entries, options, sampler).run()
    logger.info(
        "Laid out %d entries in %d tick(s) (converged=%s)",
        len(config.entries),
        report.ticks,
        report.converged,
    )
    return RadarLayout(config=config, segmented=segmented, report=report)


__all__ = ["RadarLayout", "layout_radar"]
