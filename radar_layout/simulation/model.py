"""Option and report records for the collision simulation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SimulationOptions:
    """Simulation knobs; defaults mirror a standard force-layout cooling schedule."""

    collision_radius: float = 12.0
    strength: float = 0.85
    velocity_decay: float = 0.19
    alpha: float = 1.0
    alpha_min: float = 0.001
    alpha_decay: float = 1.0 - 0.001 ** (1.0 / 300.0)
    alpha_target: float = 0.0
    max_ticks: int = 300
    energy_threshold: float = 1e-6


@dataclass
class SimulationReport:
    ticks: int
    converged: bool
    kinetic_energy: float
    alpha: float
    max_overlap: float
    collisions: int = 0
