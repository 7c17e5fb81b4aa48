from .transform import Point, PolarPoint, to_polar, to_cartesian, clamp_scalar, clamp_box, clamp_ring
from .model import Entry, RadarConfig, RingStyle, QuadrantStyle, QUADRANTS, RINGS
from .sampler import DeterministicSampler
from .segments import Segment, segment_for, viewbox
from .placement import place_entries, partition_entries, assign_ids, label_sort_key
from .simulation import (
    CollisionSimulation,
    SimulationOptions,
    SimulationReport,
    get_simulation_options,
    reset_simulation_options,
    run_simulation,
    set_simulation_options,
)
from .validate import validate_config, validate_entry, ValidationError, InvalidIndex
from .loader import config_from_mapping
from .layout import RadarLayout, layout_radar

__all__ = [
    'Point',
    'PolarPoint',
    'to_polar',
    'to_cartesian',
    'clamp_scalar',
    'clamp_box',
    'clamp_ring',
    'Entry',
    'RadarConfig',
    'RingStyle',
    'QuadrantStyle',
    'QUADRANTS',
    'RINGS',
    'DeterministicSampler',
    'Segment',
    'segment_for',
    'viewbox',
    'place_entries',
    'partition_entries',
    'assign_ids',
    'label_sort_key',
    'CollisionSimulation',
    'SimulationOptions',
    'SimulationReport',
    'get_simulation_options',
    'reset_simulation_options',
    'set_simulation_options',
    'run_simulation',
    'validate_config',
    'validate_entry',
    'ValidationError',
    'InvalidIndex',
    'config_from_mapping',
    'RadarLayout',
    'layout_radar',
]
