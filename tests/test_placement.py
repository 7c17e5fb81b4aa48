import math

from radar_layout.model import ID_QUADRANT_ORDER, Entry, RadarConfig
from radar_layout.placement import (
    assign_ids,
    entry_color,
    label_sort_key,
    partition_entries,
    place_entries,
)
from radar_layout.sampler import DeterministicSampler
from radar_layout.segments import segment_for
from radar_layout.transform import to_polar


def _mixed_entries():
    labels = ["Kotlin", "Go", "Rust", "Elm", "Zig", "Ada", "Nim", "Lua", "C", "Java", "Perl", "Dart"]
    return [
        Entry(label=label, quadrant=idx % 4, ring=(idx * 3) % 4)
        for idx, label in enumerate(labels)
    ]


def test_label_sort_key_is_locale_like():
    labels = ["banana", "Zulu", "Éclair", "Apple", "eclair", "apple"]
    assert sorted(labels, key=label_sort_key) == ["apple", "Apple", "banana", "eclair", "Éclair", "Zulu"]


def test_ids_sorted_by_label_within_group():
    entries = [Entry(label="Zeta", quadrant=1, ring=0), Entry(label="Alpha", quadrant=1, ring=0)]
    assign_ids(entries)
    assert {e.label: e.id for e in entries} == {"Alpha": 1, "Zeta": 2}


def test_ids_follow_quadrant_traversal_order():
    entries = [
        Entry(label="first-listed", quadrant=0, ring=0),
        Entry(label="outer", quadrant=2, ring=3),
        Entry(label="inner", quadrant=2, ring=0),
        Entry(label="three", quadrant=3, ring=1),
        Entry(label="one", quadrant=1, ring=2),
    ]
    assign_ids(entries)
    by_label = {e.label: e.id for e in entries}
    assert by_label == {"inner": 1, "outer": 2, "three": 3, "one": 4, "first-listed": 5}


def test_ids_form_permutation_and_increase_along_traversal():
    entries = _mixed_entries()
    assign_ids(entries)
    ids = sorted(e.id for e in entries)
    assert ids == list(range(1, len(entries) + 1))

    def traversal_key(entry):
        return (ID_QUADRANT_ORDER.index(entry.quadrant), entry.ring, label_sort_key(entry.label))

    ordered = sorted(entries, key=traversal_key)
    assert [e.id for e in ordered] == list(range(1, len(entries) + 1))


def test_assign_ids_ignores_input_order():
    forward = _mixed_entries()
    backward = list(reversed(_mixed_entries()))
    assign_ids(forward)
    assign_ids(backward)
    assert {e.label: e.id for e in forward} == {e.label: e.id for e in backward}


def test_assign_ids_returns_sorted_partition():
    entries = _mixed_entries()
    segmented = assign_ids(entries)
    assert len(segmented) == 4 and all(len(row) == 4 for row in segmented)
    for quadrant in range(4):
        for ring in range(4):
            group = segmented[quadrant][ring]
            assert all(e.quadrant == quadrant and e.ring == ring for e in group)
            assert [e.id for e in group] == sorted(e.id for e in group)
    assert sum(len(group) for row in segmented for group in row) == len(entries)


def test_partition_keeps_input_order():
    entries = [Entry(label="b", quadrant=3, ring=2), Entry(label="a", quadrant=3, ring=2)]
    segmented = partition_entries(entries)
    assert [e.label for e in segmented[3][2]] == ["b", "a"]


def test_place_entries_samples_inside_raw_segment():
    config = RadarConfig(entries=_mixed_entries())
    sampler = DeterministicSampler()
    place_entries(config, sampler)
    assert sampler.draws == 3 * len(config.entries)
    for entry in config.entries:
        assert entry.segment is segment_for(entry.quadrant, entry.ring)
        polar = to_polar(entry.position)
        assert entry.segment.r_min - 1e-9 <= polar.radius <= entry.segment.r_max + 1e-9
        assert entry.segment.angle_min - 1e-9 <= polar.angle <= entry.segment.angle_max + 1e-9


def test_place_entries_is_reproducible():
    first = RadarConfig(entries=_mixed_entries())
    second = RadarConfig(entries=_mixed_entries())
    place_entries(first, DeterministicSampler())
    place_entries(second, DeterministicSampler())
    assert [(e.x, e.y) for e in first.entries] == [(e.x, e.y) for e in second.entries]


def test_single_entry_initial_angle_in_first_quadrant():
    config = RadarConfig(entries=[Entry(label="solo", quadrant=0, ring=0)])
    place_entries(config, DeterministicSampler())
    polar = to_polar(config.entries[0].position)
    assert 0.0 <= polar.angle <= 0.5 * math.pi


def test_entry_color_rules():
    config = RadarConfig(inactive_color="#eee")
    active = Entry(label="a", quadrant=0, ring=2, active=True)
    inactive = Entry(label="b", quadrant=0, ring=2, active=False)
    assert entry_color(active, config) == config.rings[2].color
    assert entry_color(inactive, config) == "#eee"
    config.print_layout = True
    assert entry_color(inactive, config) == config.rings[2].color
