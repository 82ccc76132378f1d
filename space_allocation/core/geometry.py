"""Leaf geometry helpers shared by every component.

The missing-width fallback is defined once, in :func:`occupied_width`.
"""
from typing import Iterable, List, Optional

from space_allocation.config import SpaceAllocationConfig
from space_allocation.models.gap import GapSeverity, Interval
from space_allocation.models.results import UtilizationStatus
from space_allocation.models.shelf import Shelf
from space_allocation.models.slot import ProductSlot

def occupied_width(slot: ProductSlot, default_width: float) -> float:
    """Width the slot takes on the shelf: per-facing width times facings"""
    per_facing = slot.width if slot.width is not None and slot.width > 0 else default_width
    facings = max(1, slot.facings or 1)
    return per_facing * facings

def slot_interval(slot: ProductSlot, default_width: float) -> Interval:
    return Interval(slot.position_x, slot.position_x + occupied_width(slot, default_width))

def utilization_percentage(used: float, total: float) -> float:
    """Used share of ``total`` in percent; not capped at 100"""
    if total <= 0:
        return 0.0
    return used / total * 100

def classify_status(percentage: float, config: SpaceAllocationConfig) -> UtilizationStatus:
    if percentage <= 0:
        return UtilizationStatus.EMPTY
    if percentage > config.overutilized_threshold:
        return UtilizationStatus.EXCEEDED
    if percentage > config.optimal_threshold:
        return UtilizationStatus.OVERUTILIZED
    if percentage < config.underutilized_threshold:
        return UtilizationStatus.UNDERUTILIZED
    return UtilizationStatus.OPTIMAL

def classify_gap(width: float, config: SpaceAllocationConfig) -> Optional[GapSeverity]:
    """Severity of a free interval, or None when it is too small to report"""
    if width <= 0 or width < config.min_significant_gap_width:
        return None
    if width >= config.major_gap_width:
        return GapSeverity.MAJOR
    return GapSeverity.MINOR

def slots_for_shelf(shelf: Shelf, slots: Iterable[ProductSlot]) -> List[ProductSlot]:
    return [slot for slot in slots if slot.shelf_id == shelf.shelf_id]

def sort_slots(slots: Iterable[ProductSlot]) -> List[ProductSlot]:
    """Slots by position, ties broken by product and slot id for stable output"""
    return sorted(slots, key=lambda s: (s.position_x, str(s.product_id), str(s.slot_id or '')))
