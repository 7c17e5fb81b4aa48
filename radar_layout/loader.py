"""Build :class:`RadarConfig` objects from plain mappings (e.g. parsed JSON)."""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional

from .logging_utils import debug_log_call
from .model import (
    DEFAULT_INACTIVE_COLOR,
    DEFAULT_RING_COLORS,
    QUADRANTS,
    RINGS,
    Entry,
    QuadrantStyle,
    RadarConfig,
    RingStyle,
)
from .validate import ValidationError

logger = logging.getLogger(__name__)


def _require_mapping(value: Any, where: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ValidationError(f"{where} must be an object, got {type(value).__name__}")
    return value


def _entry_from_mapping(data: Any, index: int) -> Entry:
    item = _require_mapping(data, f"entry {index}")
    missing = [key for key in ("label", "quadrant", "ring") if key not in item]
    if missing:
        raise ValidationError(f"entry {index} is missing {', '.join(missing)}")
    return Entry(
        label=item["label"],
        quadrant=item["quadrant"],
        ring=item["ring"],
        active=item.get("active", False),
        description=item.get("description"),
        link=item.get("link"),
        moved=item.get("moved", 0),
    )


def _ring_styles(data: Optional[List[Any]]) -> List[RingStyle]:
    if data is None:
        return RadarConfig().rings
    styles = []
    for idx, raw in enumerate(data):
        item = _require_mapping(raw, f"ring {idx}")
        fallback = DEFAULT_RING_COLORS[idx] if idx < len(DEFAULT_RING_COLORS) else DEFAULT_INACTIVE_COLOR
        styles.append(RingStyle(name=str(item.get("name", f"Ring {idx}")), color=str(item.get("color", fallback))))
    return styles


def _quadrant_styles(data: Optional[List[Any]]) -> List[QuadrantStyle]:
    if data is None:
        return RadarConfig().quadrants
    return [
        QuadrantStyle(name=str(_require_mapping(raw, f"quadrant {idx}").get("name", f"Quadrant {idx}")))
        for idx, raw in enumerate(data)
    ]


@debug_log_call(logger)
def config_from_mapping(data: Mapping[str, Any]) -> RadarConfig:
    """Translate a radar input document into a :class:`RadarConfig`.

    Only structure is checked here; index ranges are left to
    :func:`radar_layout.validate.validate_config`.
    """

    data = _require_mapping(data, "radar config")
    raw_entries = data.get("entries", [])
    if not isinstance(raw_entries, list):
        raise ValidationError("entries must be a list")

    colors = _require_mapping(data.get("colors", {}), "colors")
    config = RadarConfig(
        entries=[_entry_from_mapping(item, idx) for idx, item in enumerate(raw_entries)],
        rings=_ring_styles(data.get("rings")),
        quadrants=_quadrant_styles(data.get("quadrants")),
        inactive_color=str(colors.get("inactive", DEFAULT_INACTIVE_COLOR)),
        print_layout=bool(data.get("print_layout", False)),
        zoomed_quadrant=data.get("zoomed_quadrant"),
    )
    if len(config.rings) != len(RINGS) or len(config.quadrants) != len(QUADRANTS):
        logger.warning(
            "Radar config declares %d ring(s) and %d quadrant(s)",
            len(config.rings),
            len(config.quadrants),
        )
    logger.info("Loaded radar config with %d entries", len(config.entries))
    return config


__all__ = ["config_from_mapping"]
