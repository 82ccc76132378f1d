from dataclasses import dataclass
from typing import List, Sequence, Tuple

from space_allocation.config import SpaceAllocationConfig
from space_allocation.models.slot import ProductSlot
from .geometry import slot_interval

@dataclass(frozen=True)
class OverlapPair:
    """Two slots whose occupied intervals intersect; ``first`` comes first in the input"""
    first: ProductSlot
    second: ProductSlot
    overlap_start: float
    overlap_end: float
    
    @property
    def overlap_width(self) -> float:
        return self.overlap_end - self.overlap_start
    
    @property
    def product_ids(self) -> Tuple[str, str]:
        return (self.first.product_id, self.second.product_id)

def _make_pair(slots, intervals, i: int, j: int) -> OverlapPair:
    a, b = intervals[i], intervals[j]
    return OverlapPair(
        first=slots[i],
        second=slots[j],
        overlap_start=max(a.start_x, b.start_x),
        overlap_end=min(a.end_x, b.end_x)
    )

def detect_overlaps(slots: Sequence[ProductSlot], config: SpaceAllocationConfig) -> List[OverlapPair]:
    """Every intersecting pair among ``slots`` (assumed to share one shelf).

    Sweep over the slots ordered by start: a slot overlaps exactly those earlier
    slots whose end lies beyond its start. Pairs come back ordered by input
    position, matching :func:`detect_overlaps_pairwise`.
    """
    if config.allow_overlap or len(slots) < 2:
        return []
    
    intervals = [slot_interval(slot, config.default_product_width) for slot in slots]
    order = sorted(range(len(slots)), key=lambda idx: (intervals[idx].start_x, idx))
    
    active = []  # indices whose interval may still reach later starts
    found = []
    for idx in order:
        start = intervals[idx].start_x
        active = [other for other in active if intervals[other].end_x > start]
        for other in active:
            found.append((min(idx, other), max(idx, other)))
        active.append(idx)
    
    found.sort()
    return [_make_pair(slots, intervals, i, j) for i, j in found]

def detect_overlaps_pairwise(slots: Sequence[ProductSlot], config: SpaceAllocationConfig) -> List[OverlapPair]:
    """Reference O(n^2) overlap scan"""
    if config.allow_overlap:
        return []
    
    intervals = [slot_interval(slot, config.default_product_width) for slot in slots]
    pairs = []
    for i in range(len(slots)):
        for j in range(i + 1, len(slots)):
            if intervals[i].intersects(intervals[j]):
                pairs.append(_make_pair(slots, intervals, i, j))
    return pairs
