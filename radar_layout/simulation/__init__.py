"""Collision relaxation for placed radar entries."""

from __future__ import annotations

from .collide import collide, max_overlap
from .config import get_simulation_options, reset_simulation_options, set_simulation_options
from .core import CollisionSimulation, run_simulation
from .model import SimulationOptions, SimulationReport

__all__ = [
    "CollisionSimulation",
    "SimulationOptions",
    "SimulationReport",
    "collide",
    "get_simulation_options",
    "max_overlap",
    "reset_simulation_options",
    "run_simulation",
    "set_simulation_options",
]
