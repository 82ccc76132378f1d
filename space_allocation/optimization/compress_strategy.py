import math
from typing import List, Optional, Sequence

import numpy as np

from space_allocation.config import SpaceAllocationConfig
from space_allocation.core.gap_detector import detect_gaps
from space_allocation.core.geometry import occupied_width, sort_slots
from space_allocation.models.optimization import (
    ActionType, ExpectedImprovement, OptimizationAction, OptimizationSuggestion,
    SlotLocation, SuggestionType,
)
from space_allocation.models.results import ShelfUtilization
from space_allocation.models.shelf import Shelf
from space_allocation.models.slot import ProductSlot
from space_allocation.utils import constants
from .base_strategy import BaseSuggestionStrategy

# cm; packed positions closer than this to the current one are not moves
POSITION_TOLERANCE = 1e-9

def compress_positions(slots: Sequence[ProductSlot], config: SpaceAllocationConfig) -> List[ProductSlot]:
    """Left-pack ``slots`` in position order: each starts where the previous one ends"""
    ordered = sort_slots(slots)
    if not ordered:
        return []
    widths = np.array([occupied_width(slot, config.default_product_width) for slot in ordered], dtype=float)
    starts = np.concatenate(([0.0], np.cumsum(widths)[:-1]))
    return [slot.with_position(float(start)) for slot, start in zip(ordered, starts)]

class CompressStrategy(BaseSuggestionStrategy):
    """Remove gaps by packing products towards the start of the shelf"""
    
    def applies_to(self, utilization: ShelfUtilization, shelf_slots: Sequence[ProductSlot]) -> bool:
        return bool(shelf_slots) and bool(utilization.major_gaps)
    
    def build(self, shelf: Shelf, utilization: ShelfUtilization,
              shelf_slots: Sequence[ProductSlot]) -> Optional[OptimizationSuggestion]:
        ordered = sort_slots(shelf_slots)
        packed = compress_positions(ordered, self.config)
        
        actions = [
            OptimizationAction(
                product_id=before.product_id,
                action=ActionType.MOVE,
                reason=constants.REASON_REMOVE_GAP,
                from_location=SlotLocation(shelf.shelf_id, before.position_x),
                to_location=SlotLocation(shelf.shelf_id, after.position_x),
                slot_id=before.slot_id
            )
            for before, after in zip(ordered, packed)
            if not math.isclose(before.position_x, after.position_x, abs_tol=POSITION_TOLERANCE)
        ]
        if not actions:
            return None
        
        remaining_gaps = detect_gaps(shelf, packed, self.config)
        return OptimizationSuggestion(
            type=SuggestionType.COMPRESS,
            description=f"Compress products on shelf {shelf.level} to remove gaps",
            shelf_id=shelf.shelf_id,
            expected_improvement=ExpectedImprovement(
                current_utilization=utilization.utilization_percentage,
                projected_utilization=utilization.utilization_percentage,
                gaps_reduced=max(0, len(utilization.gaps) - len(remaining_gaps))
            ),
            actions=actions
        )
