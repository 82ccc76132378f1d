import math

from space_allocation.core.geometry import (
    classify_gap,
    classify_status,
    occupied_width,
    slot_interval,
    sort_slots,
    utilization_percentage,
)
from space_allocation.models import GapSeverity, ProductSlot, UtilizationStatus


def test_occupied_width_multiplies_facings(make_slot):
    assert occupied_width(make_slot("A", 0.0, width=5.0, facings=3), 10.0) == 15.0


def test_occupied_width_falls_back_to_default_width(make_slot):
    assert occupied_width(make_slot("A", 0.0, width=None, facings=2), 10.0) == 20.0
    assert occupied_width(make_slot("A", 0.0, width=0.0), 10.0) == 10.0
    assert occupied_width(make_slot("A", 0.0, width=-4.0), 10.0) == 10.0


def test_occupied_width_clamps_facings_to_one(make_slot):
    assert occupied_width(make_slot("A", 0.0, width=7.0, facings=0), 10.0) == 7.0
    assert occupied_width(make_slot("A", 0.0, width=7.0, facings=-2), 10.0) == 7.0
    assert occupied_width(make_slot("A", 0.0, width=7.0, facings=None), 10.0) == 7.0


def test_slot_interval_is_half_open_span(make_slot):
    interval = slot_interval(make_slot("A", 12.0, width=4.0, facings=2), 10.0)
    assert interval.start_x == 12.0
    assert interval.end_x == 20.0
    assert interval.width == 8.0


def test_utilization_percentage():
    assert utilization_percentage(50.0, 100.0) == 50.0
    assert utilization_percentage(150.0, 100.0) == 150.0
    assert utilization_percentage(10.0, 0.0) == 0.0
    assert utilization_percentage(10.0, -5.0) == 0.0


def test_classify_status_bands(config):
    assert classify_status(0.0, config) is UtilizationStatus.EMPTY
    assert classify_status(0.5, config) is UtilizationStatus.UNDERUTILIZED
    assert classify_status(69.9, config) is UtilizationStatus.UNDERUTILIZED
    assert classify_status(70.0, config) is UtilizationStatus.OPTIMAL
    assert classify_status(85.0, config) is UtilizationStatus.OPTIMAL
    assert classify_status(85.1, config) is UtilizationStatus.OVERUTILIZED
    assert classify_status(100.0, config) is UtilizationStatus.OVERUTILIZED
    assert classify_status(100.1, config) is UtilizationStatus.EXCEEDED


def test_classify_status_is_monotonic_in_used_width(config):
    shelf_width = 100.0
    ranks = [
        classify_status(utilization_percentage(used / 2.0, shelf_width), config).rank
        for used in range(0, 300)
    ]
    assert ranks == sorted(ranks)
    assert ranks[0] == UtilizationStatus.EMPTY.rank
    assert ranks[-1] == UtilizationStatus.EXCEEDED.rank


def test_classify_status_follows_custom_thresholds(config):
    custom = config.with_overrides(underutilized_threshold=40.0, optimal_threshold=60.0,
                                   overutilized_threshold=90.0)
    assert classify_status(50.0, custom) is UtilizationStatus.OPTIMAL
    assert classify_status(75.0, custom) is UtilizationStatus.OVERUTILIZED
    assert classify_status(95.0, custom) is UtilizationStatus.EXCEEDED


def test_classify_gap(config):
    assert classify_gap(0.0, config) is None
    assert classify_gap(-3.0, config) is None
    assert classify_gap(1.9, config) is None
    assert classify_gap(2.0, config) is GapSeverity.MINOR
    assert classify_gap(19.9, config) is GapSeverity.MINOR
    assert classify_gap(20.0, config) is GapSeverity.MAJOR


def test_sort_slots_breaks_ties_by_product_id():
    slots = [
        ProductSlot("B", "S1", 10.0, 5.0),
        ProductSlot("A", "S1", 10.0, 5.0),
        ProductSlot("C", "S1", 0.0, 5.0),
    ]
    assert [slot.product_id for slot in sort_slots(slots)] == ["C", "A", "B"]
    assert [slot.product_id for slot in slots] == ["B", "A", "C"]


def test_interval_widths_are_exact_for_fractional_sizes(make_slot):
    interval = slot_interval(make_slot("A", 0.1, width=0.2, facings=3), 10.0)
    assert math.isclose(interval.width, 0.6)
