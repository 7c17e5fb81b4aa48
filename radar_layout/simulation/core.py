"""Tick loop that spreads blips apart while keeping them in their segments."""

from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional

import numpy as np

from ..model import Entry
from ..sampler import DeterministicSampler
from ..segments import segment_for
from .collide import collide, max_overlap
from .config import get_simulation_options
from .model import SimulationOptions, SimulationReport

logger = logging.getLogger(__name__)


class CollisionSimulation:
    """Explicit form of a collide-only force simulation.

    One :meth:`tick` is a physics :meth:`step` followed by :meth:`clip_all`;
    the clipped positions of tick N are the only input of tick N+1. Entries
    never change segment, only position and velocity.
    """

    def __init__(
        self,
        entries: Iterable[Entry],
        options: Optional[SimulationOptions] = None,
        sampler: Optional[DeterministicSampler] = None,
    ) -> None:
        self.entries: List[Entry] = list(entries)
        self.options = options if options is not None else get_simulation_options()
        self.sampler = sampler if sampler is not None else DeterministicSampler()
        self.alpha = self.options.alpha
        self.ticks = 0
        self.collisions = 0
        self.energy = math.inf
        for entry in self.entries:
            if entry.segment is None:
                entry.segment = segment_for(entry.quadrant, entry.ring)

    def step(self) -> int:
        """Advance the physics by one tick without clipping."""

        opts = self.options
        self.alpha += (opts.alpha_target - self.alpha) * opts.alpha_decay
        hits = collide(self.entries, opts, self.sampler)

        retain = 1.0 - opts.velocity_decay
        for entry in self.entries:
            entry.vx *= retain
            entry.vy *= retain
            entry.x += entry.vx
            entry.y += entry.vy

        self.ticks += 1
        self.collisions += hits
        return hits

    def clip_all(self) -> None:
        for entry in self.entries:
            entry.position = entry.segment.clip(entry.position)

    def kinetic_energy(self) -> float:
        if not self.entries:
            return 0.0
        velocities = np.array([(e.vx, e.vy) for e in self.entries], dtype=float)
        return float(0.5 * np.sum(velocities * velocities))

    @property
    def converged(self) -> bool:
        if self.ticks == 0:
            return False
        return self.energy < self.options.energy_threshold or self.alpha < self.options.alpha_min

    def tick(self) -> int:
        hits = self.step()
        self.clip_all()
        self.energy = self.kinetic_energy()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "tick=%d alpha=%.4f collisions=%d energy=%.3e",
                self.ticks,
                self.alpha,
                hits,
                self.energy,
            )
        return hits

    def run(self) -> SimulationReport:
        while not self.converged and self.ticks < self.options.max_ticks:
            self.tick()

        report = SimulationReport(
            ticks=self.ticks,
            converged=self.converged,
            kinetic_energy=0.0 if math.isinf(self.energy) else self.energy,
            alpha=self.alpha,
            max_overlap=max_overlap(self.entries, self.options.collision_radius),
            collisions=self.collisions,
        )
        logger.info(
            "Simulation finished: ticks=%d converged=%s energy=%.3e max_overlap=%.3f",
            report.ticks,
            report.converged,
            report.kinetic_energy,
            report.max_overlap,
        )
        return report


def run_simulation(
    entries: Iterable[Entry],
    options: Optional[SimulationOptions] = None,
    sampler: Optional[DeterministicSampler] = None,
) -> SimulationReport:
    return CollisionSimulation(entries, options, sampler).run()


__all__ = ["CollisionSimulation", "run_simulation"]
