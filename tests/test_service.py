from space_allocation import SpaceValidator
from space_allocation.config import DEFAULT_SPACE_CONFIG
from space_allocation.models import Interval, RejectionReason, Shelf, SuggestionType
from space_allocation.validation import validate


def test_service_uses_default_config():
    assert SpaceValidator().config is DEFAULT_SPACE_CONFIG


def test_service_matches_module_functions(shelf, make_slot, config):
    slots = [make_slot("A", 10.0, width=30.0), make_slot("B", 20.0, width=10.0)]
    service = SpaceValidator(config)
    assert service.validate([shelf], slots) == validate([shelf], slots, config)
    assert service.calculate_shelf_utilization(shelf, slots).used_width == 40.0


def test_service_placement_helpers(shelf, make_slot, config):
    service = SpaceValidator(config)
    existing = [make_slot("A", 10.0, width=30.0)]

    assert service.find_available_space(shelf, existing, 10.0) == Interval(0.0, 10.0)
    assert service.can_add_slot(shelf, existing, make_slot("B", 20.0, width=10.0)).reason_code is RejectionReason.OVERLAP
    assert service.auto_adjust_slot_position(shelf, existing, make_slot("B", 20.0, width=10.0)).position_x == 0.0
    assert service.add_slot([shelf], existing, make_slot("B", 50.0, width=10.0)).success


def test_lookup_by_shelf_id(shelf, make_slot, config):
    service = SpaceValidator(config)
    shelves = [shelf, Shelf("S2", 2, 50.0)]
    slots = [make_slot("A", 0.0, width=50.0, shelf_id="S2")]

    missing = service.can_add_slot_to_shelf(shelves, slots, "S9", make_slot("B", 0.0, width=5.0))
    assert missing.reason_code is RejectionReason.SHELF_NOT_FOUND
    full = service.can_add_slot_to_shelf(shelves, slots, "S2", make_slot("B", 0.0, width=5.0, shelf_id="S2"))
    assert full.reason_code is RejectionReason.OVERLAP
    assert service.find_space_on_shelf(shelves, slots, "S2", 5.0) is None
    assert service.find_space_on_shelf(shelves, slots, "S1", 5.0) == Interval(0.0, 5.0)
    assert service.find_space_on_shelf(shelves, slots, "S9", 5.0) is None


def test_service_suggestions(shelf, make_slot, config):
    service = SpaceValidator(config)
    suggestions = service.generate_optimization_suggestions([shelf], [make_slot("A", 30.0, width=20.0)])
    assert [s.type for s in suggestions] == [SuggestionType.COMPRESS, SuggestionType.REDISTRIBUTE]
