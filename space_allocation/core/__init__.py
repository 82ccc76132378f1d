from .geometry import (
    occupied_width, slot_interval, utilization_percentage, classify_status,
    classify_gap, slots_for_shelf, sort_slots,
)
from .gap_detector import detect_gaps, free_intervals
from .overlap_detector import OverlapPair, detect_overlaps, detect_overlaps_pairwise
from .utilization import calculate_shelf_utilization, used_width

__all__ = [
    'occupied_width', 'slot_interval', 'utilization_percentage', 'classify_status',
    'classify_gap', 'slots_for_shelf', 'sort_slots',
    'detect_gaps', 'free_intervals',
    'OverlapPair', 'detect_overlaps', 'detect_overlaps_pairwise',
    'calculate_shelf_utilization', 'used_width',
]
