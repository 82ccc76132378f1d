from typing import Sequence

import numpy as np

from space_allocation.config import SpaceAllocationConfig
from space_allocation.models.results import ShelfUtilization
from space_allocation.models.shelf import Shelf
from space_allocation.models.slot import ProductSlot
from .gap_detector import detect_gaps
from .geometry import classify_status, occupied_width, slots_for_shelf, utilization_percentage

def used_width(slots: Sequence[ProductSlot], config: SpaceAllocationConfig) -> float:
    """Total occupied width of ``slots``"""
    if not slots:
        return 0.0
    widths = np.fromiter(
        (occupied_width(slot, config.default_product_width) for slot in slots),
        dtype=float,
        count=len(slots)
    )
    return float(widths.sum())

def calculate_shelf_utilization(shelf: Shelf, slots: Sequence[ProductSlot],
                                config: SpaceAllocationConfig) -> ShelfUtilization:
    """Space usage of one shelf; slots on other shelves are ignored"""
    shelf_slots = slots_for_shelf(shelf, slots)
    used = used_width(shelf_slots, config)
    percentage = utilization_percentage(used, shelf.width)
    
    return ShelfUtilization(
        shelf_id=shelf.shelf_id,
        shelf_level=shelf.level,
        total_width=shelf.width,
        used_width=used,
        available_width=max(0.0, shelf.width - used),
        utilization_percentage=percentage,
        status=classify_status(percentage, config),
        gaps=detect_gaps(shelf, shelf_slots, config),
        slot_count=len(shelf_slots)
    )
