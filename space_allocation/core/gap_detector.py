from typing import List, Sequence, Tuple

from space_allocation.config import SpaceAllocationConfig
from space_allocation.models.gap import Gap, GapSeverity, GapType, Interval
from space_allocation.models.shelf import Shelf
from space_allocation.models.slot import ProductSlot
from .geometry import classify_gap, occupied_width, slots_for_shelf, sort_slots

def free_intervals(shelf: Shelf, slots: Sequence[ProductSlot],
                   config: SpaceAllocationConfig) -> List[Tuple[GapType, Interval]]:
    """Every positive free interval on the shelf, left to right, unfiltered.

    Intervals are clipped to ``[0, shelf.width]``. The scan tracks the furthest
    slot end seen so far, so overlapping or nested slots never yield a gap.
    """
    if shelf.width <= 0:
        return []
    
    ordered = sort_slots(slots_for_shelf(shelf, slots))
    if not ordered:
        return [(GapType.START, Interval(0.0, shelf.width))]
    
    intervals = []
    first_start = min(ordered[0].position_x, shelf.width)
    if first_start > 0:
        intervals.append((GapType.START, Interval(0.0, first_start)))
    
    cursor = ordered[0].position_x + occupied_width(ordered[0], config.default_product_width)
    for slot in ordered[1:]:
        start = max(cursor, 0.0)
        end = min(slot.position_x, shelf.width)
        if end > start:
            intervals.append((GapType.MIDDLE, Interval(start, end)))
        cursor = max(cursor, slot.position_x + occupied_width(slot, config.default_product_width))
    
    tail_start = max(cursor, 0.0)
    if tail_start < shelf.width:
        intervals.append((GapType.END, Interval(tail_start, shelf.width)))
    
    return intervals

def detect_gaps(shelf: Shelf, slots: Sequence[ProductSlot],
                config: SpaceAllocationConfig) -> List[Gap]:
    """Significant gaps on the shelf, classified by position and severity.

    An empty shelf always reports its full width as one START gap, however narrow.
    """
    if shelf.width > 0 and not slots_for_shelf(shelf, slots):
        severity = GapSeverity.MAJOR if shelf.width >= config.major_gap_width else GapSeverity.MINOR
        return [Gap(0.0, shelf.width, shelf.width, GapType.START, severity)]
    
    gaps = []
    for gap_type, interval in free_intervals(shelf, slots, config):
        severity = classify_gap(interval.width, config)
        if severity is None:
            continue
        gaps.append(Gap(
            start_x=interval.start_x,
            end_x=interval.end_x,
            width=interval.width,
            type=gap_type,
            severity=severity
        ))
    return gaps
