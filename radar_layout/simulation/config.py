"""Default :class:`SimulationOptions` used when a caller passes none.

Callers always receive a private copy, so tweaking the returned options
never leaks into later layouts.
"""

from __future__ import annotations

import copy

from .model import SimulationOptions

_DEFAULT_OPTIONS = SimulationOptions()


def get_simulation_options() -> SimulationOptions:
    """Return a copy of the options a default :class:`CollisionSimulation` uses."""

    return copy.deepcopy(_DEFAULT_OPTIONS)


def set_simulation_options(options: SimulationOptions) -> None:
    global _DEFAULT_OPTIONS
    _DEFAULT_OPTIONS = copy.deepcopy(options)


def reset_simulation_options() -> None:
    """Restore the built-in collision radius, decay and tick budget."""

    set_simulation_options(SimulationOptions())


__all__ = ["get_simulation_options", "reset_simulation_options", "set_simulation_options"]
