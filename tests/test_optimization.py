from space_allocation.core.gap_detector import detect_gaps
from space_allocation.core.overlap_detector import detect_overlaps
from space_allocation.models import ActionType, GapType, Shelf, SlotLocation, SuggestionType
from space_allocation.optimization import compress_positions, generate_optimization_suggestions


def _apply_moves(slots, suggestion):
    targets = {action.product_id: action.to_location.position_x for action in suggestion.actions}
    return [slot.with_position(targets.get(slot.product_id, slot.position_x)) for slot in slots]


def test_compress_and_redistribute_for_sparse_shelf(shelf, make_slot, config):
    slots = [make_slot("A", 10.0, width=20.0), make_slot("B", 50.0, width=10.0)]

    suggestions = generate_optimization_suggestions([shelf], slots, config)

    assert [s.type for s in suggestions] == [SuggestionType.COMPRESS, SuggestionType.REDISTRIBUTE]
    compress, redistribute = suggestions

    assert [(a.product_id, a.action) for a in compress.actions] == [
        ("A", ActionType.MOVE),
        ("B", ActionType.MOVE),
    ]
    assert compress.actions[0].from_location == SlotLocation("S1", 10.0)
    assert compress.actions[0].to_location == SlotLocation("S1", 0.0)
    assert compress.actions[1].to_location == SlotLocation("S1", 20.0)
    assert compress.expected_improvement.current_utilization == 30.0
    assert compress.expected_improvement.projected_utilization == 30.0
    assert compress.expected_improvement.gaps_reduced == 2

    assert redistribute.expected_improvement.projected_utilization == config.optimal_threshold
    assert len(redistribute.actions) == 1
    assert redistribute.actions[0].product_id == "A"
    assert redistribute.actions[0].action is ActionType.RESIZE


def test_packed_shelf_gets_no_compress(shelf, make_slot, config):
    suggestions = generate_optimization_suggestions([shelf], [make_slot("A", 0.0, width=50.0)], config)
    assert [s.type for s in suggestions] == [SuggestionType.REDISTRIBUTE]


def test_well_used_shelf_gets_no_suggestions(shelf, make_slot, config):
    slots = [make_slot("A", 0.0, width=40.0), make_slot("B", 45.0, width=40.0)]
    assert generate_optimization_suggestions([shelf], slots, config) == []


def test_empty_shelf_gets_no_suggestions(shelf, config):
    assert generate_optimization_suggestions([shelf], [], config) == []


def test_compression_leaves_only_a_trailing_gap(shelf, make_slot, fine_config):
    slots = [
        make_slot("A", 5.0, width=20.0),
        make_slot("B", 40.0, width=15.0),
        make_slot("C", 70.0, width=10.0),
    ]
    suggestions = generate_optimization_suggestions([shelf], slots, fine_config)
    compress = next(s for s in suggestions if s.type is SuggestionType.COMPRESS)

    compressed = _apply_moves(slots, compress)
    gaps = detect_gaps(shelf, compressed, fine_config)

    assert [gap.type for gap in gaps] == [GapType.END]
    assert gaps[0].start_x == 45.0


def test_compression_is_idempotent(shelf, make_slot, fine_config):
    slots = [make_slot("A", 5.0, width=20.0), make_slot("B", 40.0, width=15.0)]
    first = generate_optimization_suggestions([shelf], slots, fine_config)
    compress = next(s for s in first if s.type is SuggestionType.COMPRESS)

    second = generate_optimization_suggestions([shelf], _apply_moves(slots, compress), fine_config)

    assert SuggestionType.COMPRESS not in [s.type for s in second]


def test_full_shelf_compresses_to_no_gaps(make_slot, fine_config):
    shelf = Shelf("S1", 1, 60.0)
    slots = [make_slot("A", 0.0, width=20.0), make_slot("B", 30.0, width=20.0)]
    packed = compress_positions(slots + [make_slot("C", 50.0, width=20.0)], fine_config)
    assert [slot.position_x for slot in packed] == [0.0, 20.0, 40.0]
    assert detect_gaps(shelf, packed, fine_config) == []


def test_compress_positions_sorts_and_resolves_overlaps(make_slot, config):
    slots = [make_slot("B", 20.0, width=10.0), make_slot("A", 10.0, width=30.0)]

    packed = compress_positions(slots, config)

    assert [(slot.product_id, slot.position_x) for slot in packed] == [("A", 0.0), ("B", 30.0)]
    assert detect_overlaps(packed, config) == []
    assert slots[0].position_x == 20.0


def test_suggestions_are_per_shelf(make_slot, config):
    shelves = [Shelf("S1", 1, 100.0), Shelf("S2", 2, 100.0)]
    slots = [
        make_slot("A", 0.0, width=85.0, shelf_id="S1"),
        make_slot("B", 60.0, width=20.0, shelf_id="S2"),
    ]
    suggestions = generate_optimization_suggestions(shelves, slots, config)
    assert {s.shelf_id for s in suggestions} == {"S2"}
    assert [s.type for s in suggestions] == [SuggestionType.COMPRESS, SuggestionType.REDISTRIBUTE]
