import numbers
from typing import Optional

from .model import QUADRANTS, RINGS, Entry, RadarConfig


class ValidationError(Exception):
    pass


class InvalidIndex(ValidationError):
    """Quadrant, ring or zoom selector outside its fixed enumeration."""


def _check_index(value: object, upper: int, what: str, where: str) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidIndex(f'{where}: {what} must be an integer, got {value!r}')
    if not 0 <= int(value) < upper:
        raise InvalidIndex(f'{where}: {what} must be in 0..{upper - 1}, got {value}')


def validate_entry(entry: Entry, index: Optional[int] = None) -> None:
    where = f'entry {index}' if index is not None else 'entry'
    if not isinstance(entry.label, str):
        raise ValidationError(f'{where}: label must be a string, got {entry.label!r}')
    where = f'{where} ({entry.label!r})'
    _check_index(entry.quadrant, len(QUADRANTS), 'quadrant', where)
    _check_index(entry.ring, len(RINGS), 'ring', where)
    if not isinstance(entry.active, bool):
        raise ValidationError(f'{where}: active must be true or false, got {entry.active!r}')
    if isinstance(entry.moved, bool) or not isinstance(entry.moved, numbers.Integral):
        raise ValidationError(f'{where}: moved must be an integer, got {entry.moved!r}')


def validate_config(config: RadarConfig) -> None:
    if len(config.rings) != len(RINGS):
        raise ValidationError(f'expected {len(RINGS)} ring styles, got {len(config.rings)}')
    if len(config.quadrants) != len(QUADRANTS):
        raise ValidationError(f'expected {len(QUADRANTS)} quadrant styles, got {len(config.quadrants)}')
    if config.zoomed_quadrant is not None:
        _check_index(config.zoomed_quadrant, len(QUADRANTS), 'zoomed_quadrant', 'config')
    for idx, entry in enumerate(config.entries):
        validate_entry(entry, idx)
