"""Initial blip placement and stable id numbering."""

from __future__ import annotations

import logging
import unicodedata
from typing import Iterable, List, Sequence, Tuple

from .model import ID_QUADRANT_ORDER, QUADRANTS, RINGS, Entry, RadarConfig
from .sampler import DeterministicSampler
from .segments import segment_for

logger = logging.getLogger(__name__)

Partition = List[List[List[Entry]]]


def _strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def label_sort_key(label: str) -> Tuple[str, str, str]:
    """Collation key approximating a locale-aware comparison.

    Base letters compare first, ignoring case and accents; accents break ties
    next, then case with lowercase ordered before uppercase.
    """

    folded = unicodedata.normalize("NFKD", label).casefold()
    return (_strip_accents(label).casefold(), folded, label.swapcase())


def entry_color(entry: Entry, config: RadarConfig) -> str:
    if entry.active or config.print_layout:
        return config.rings[entry.ring].color
    return config.inactive_color


def place_entries(config: RadarConfig, sampler: DeterministicSampler) -> List[Entry]:
    """Attach segment, color and a sampled start position to every entry.

    Entries are visited in input order, so the sampler stream is consumed
    identically for identical inputs.
    """

    for entry in config.entries:
        entry.segment = segment_for(entry.quadrant, entry.ring)
        entry.position = entry.segment.sample(sampler)
        entry.vx = 0.0
        entry.vy = 0.0
        entry.color = entry_color(entry, config)

    logger.info("Placed %d entries using %d sampler draws", len(config.entries), sampler.draws)
    return config.entries


def partition_entries(entries: Iterable[Entry]) -> Partition:
    segmented: Partition = [[[] for _ in RINGS] for _ in QUADRANTS]
    for entry in entries:
        segmented[entry.quadrant][entry.ring].append(entry)
    return segmented


def assign_ids(entries: Sequence[Entry]) -> Partition:
    """Number entries 1..N by quadrant order, ring, then label.

    Returns the partition with every group sorted, which is also the legend
    order.
    """

    segmented = partition_entries(entries)
    next_id = 1
    for quadrant in ID_QUADRANT_ORDER:
        for ring in range(len(RINGS)):
            group = segmented[quadrant][ring]
            group.sort(key=lambda e: label_sort_key(e.label))
            for entry in group:
                entry.id = next_id
                next_id += 1

    logger.info("Assigned ids 1..%d", next_id - 1)
    return segmented


__all__ = [
    "Partition",
    "label_sort_key",
    "entry_color",
    "place_entries",
    "partition_entries",
    "assign_ids",
]
