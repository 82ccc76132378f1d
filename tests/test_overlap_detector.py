import random

from space_allocation.core.overlap_detector import detect_overlaps, detect_overlaps_pairwise


def _id_pairs(pairs):
    return [(pair.first.product_id, pair.second.product_id) for pair in pairs]


def test_reference_overlap_is_reported_once(make_slot, config):
    a = make_slot("A", 10.0, width=30.0)
    b = make_slot("B", 20.0, width=10.0)

    pairs = detect_overlaps([a, b], config)

    assert _id_pairs(pairs) == [("A", "B")]
    assert pairs[0].overlap_start == 20.0
    assert pairs[0].overlap_end == 30.0
    assert pairs[0].overlap_width == 10.0


def test_touching_slots_do_not_overlap(make_slot, config):
    slots = [make_slot("A", 0.0, width=10.0), make_slot("B", 10.0, width=10.0)]
    assert detect_overlaps(slots, config) == []


def test_overlap_detection_is_symmetric(make_slot, config):
    a = make_slot("A", 10.0, width=30.0)
    b = make_slot("B", 20.0, width=10.0)
    forward = {frozenset(pair.product_ids) for pair in detect_overlaps([a, b], config)}
    backward = {frozenset(pair.product_ids) for pair in detect_overlaps([b, a], config)}
    assert forward == backward == {frozenset({"A", "B"})}


def test_pairs_follow_input_order(make_slot, config):
    a = make_slot("A", 10.0, width=30.0)
    b = make_slot("B", 20.0, width=10.0)
    assert _id_pairs(detect_overlaps([b, a], config)) == [("B", "A")]


def test_long_slot_overlaps_each_nested_slot(make_slot, config):
    slots = [
        make_slot("A", 0.0, width=50.0),
        make_slot("B", 10.0, width=10.0),
        make_slot("C", 30.0, width=10.0),
    ]
    assert _id_pairs(detect_overlaps(slots, config)) == [("A", "B"), ("A", "C")]


def test_same_start_position_overlaps(make_slot, config):
    slots = [make_slot("A", 0.0, width=10.0), make_slot("B", 0.0, width=5.0)]
    assert _id_pairs(detect_overlaps(slots, config)) == [("A", "B")]


def test_default_width_applies_to_overlap(make_slot, config):
    slots = [make_slot("A", 0.0, width=None), make_slot("B", 9.0, width=2.0)]
    assert _id_pairs(detect_overlaps(slots, config)) == [("A", "B")]


def test_allow_overlap_skips_detection(make_slot, config):
    permissive = config.with_overrides(allow_overlap=True)
    slots = [make_slot("A", 0.0, width=30.0), make_slot("B", 10.0, width=30.0)]
    assert detect_overlaps(slots, permissive) == []
    assert detect_overlaps_pairwise(slots, permissive) == []


def test_separated_slots_never_overlap(make_slot, config):
    rng = random.Random(3)
    for _ in range(30):
        slots = []
        cursor = 0.0
        for index in range(rng.randint(1, 12)):
            width = float(rng.randint(1, 20))
            slots.append(make_slot(f"P{index}", cursor, width=width))
            cursor += width + rng.choice([0, 0, 2, 5])
        rng.shuffle(slots)
        assert detect_overlaps(slots, config) == []


def test_sweep_matches_pairwise_reference(make_slot, config):
    rng = random.Random(11)
    for _ in range(200):
        slots = [
            make_slot(f"P{index}", float(rng.randint(0, 80)),
                      width=float(rng.randint(1, 25)), facings=rng.randint(1, 2))
            for index in range(rng.randint(0, 15))
        ]
        assert _id_pairs(detect_overlaps(slots, config)) == _id_pairs(detect_overlaps_pairwise(slots, config))
