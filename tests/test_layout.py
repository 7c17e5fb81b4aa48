import json
import math

import pytest

from radar_layout import (
    Entry,
    RadarConfig,
    SimulationOptions,
    get_simulation_options,
    layout_radar,
    reset_simulation_options,
    set_simulation_options,
    to_polar,
)


def _config(**kwargs):
    entries = [
        Entry(label="Zeta", quadrant=1, ring=0),
        Entry(label="Alpha", quadrant=1, ring=0),
        Entry(label="Kafka", quadrant=2, ring=1, description="Streaming", link="https://kafka.apache.org"),
        Entry(label="Scala", quadrant=3, ring=3, active=False, moved=-1),
        Entry(label="Python", quadrant=0, ring=0, moved=1),
        Entry(label="Go", quadrant=0, ring=0),
        Entry(label="Rust", quadrant=0, ring=0),
    ]
    return RadarConfig(entries=entries, **kwargs)


def test_single_entry_lands_in_padded_segment():
    layout = layout_radar(RadarConfig(entries=[Entry(label="solo", quadrant=0, ring=0)]))
    polar = to_polar(layout.entries[0].position)
    assert 0.0 <= polar.angle <= 0.5 * math.pi
    assert 45.0 - 1e-9 <= polar.radius <= 115.0 + 1e-9
    assert layout.entries[0].id == 1


def test_layout_enriches_every_entry():
    layout = layout_radar(_config())
    ids = sorted(e.id for e in layout.entries)
    assert ids == list(range(1, 8))
    for entry in layout.entries:
        assert entry.segment is not None
        assert entry.segment.contains(entry.position)
        assert entry.color is not None
    by_label = {e.label: e for e in layout.entries}
    assert by_label["Kafka"].id == 1
    assert by_label["Scala"].id == 2
    assert by_label["Alpha"].id == 3
    assert by_label["Zeta"].id == 4
    assert [e.label for e in layout.legend(0, 0)] == ["Go", "Python", "Rust"]
    assert by_label["Scala"].color == layout.config.inactive_color


def test_layout_is_reproducible():
    first = layout_radar(_config())
    second = layout_radar(_config())
    assert [(e.id, e.x, e.y) for e in first.entries] == [(e.id, e.x, e.y) for e in second.entries]


def test_seed_changes_positions_not_ids():
    first = layout_radar(_config(), seed=42)
    second = layout_radar(_config(), seed=7)
    assert [e.id for e in first.entries] == [e.id for e in second.entries]
    assert [(e.x, e.y) for e in first.entries] != [(e.x, e.y) for e in second.entries]


def test_independent_layouts_do_not_share_state():
    baseline = layout_radar(_config())
    layout_radar(RadarConfig(entries=[Entry(label="other", quadrant=2, ring=2)]))
    again = layout_radar(_config())
    assert [(e.x, e.y) for e in baseline.entries] == [(e.x, e.y) for e in again.entries]


def test_to_dict_is_json_ready():
    layout = layout_radar(_config(zoomed_quadrant=2))
    payload = json.loads(json.dumps(layout.to_dict()))
    assert payload["viewbox"] == [-420.0, -420.0, 440.0, 440.0]
    assert payload["zoomed_quadrant"] == 2
    kafka = next(item for item in payload["entries"] if item["label"] == "Kafka")
    assert kafka["display_id"] == "01"
    assert kafka["link"] == "https://kafka.apache.org"
    assert kafka["description"] == "Streaming"
    assert "link" not in next(item for item in payload["entries"] if item["label"] == "Go")
    assert payload["simulation"]["ticks"] >= 1


def test_default_options_are_used_when_none_given():
    try:
        set_simulation_options(SimulationOptions(max_ticks=2))
        layout = layout_radar(_config())
        assert layout.report.ticks <= 2
    finally:
        reset_simulation_options()
    assert get_simulation_options() == SimulationOptions()


def test_default_options_are_handed_out_as_copies():
    options = get_simulation_options()
    options.max_ticks = 1
    assert get_simulation_options().max_ticks == 300


def test_print_layout_colors_inactive_with_ring():
    layout = layout_radar(_config(print_layout=True))
    scala = next(e for e in layout.entries if e.label == "Scala")
    assert scala.color == layout.config.rings[3].color


@pytest.mark.parametrize("count", [1, 12, 40])
def test_dense_segment_still_contained(count):
    config = RadarConfig(entries=[Entry(label=f"e{i:02d}", quadrant=3, ring=0) for i in range(count)])
    layout = layout_radar(config)
    assert all(e.segment.contains(e.position) for e in layout.entries)
