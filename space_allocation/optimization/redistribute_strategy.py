from typing import Optional, Sequence

from space_allocation.core.geometry import sort_slots
from space_allocation.models.optimization import (
    ActionType, ExpectedImprovement, OptimizationAction, OptimizationSuggestion, SuggestionType,
)
from space_allocation.models.results import ShelfUtilization, UtilizationStatus
from space_allocation.models.shelf import Shelf
from space_allocation.models.slot import ProductSlot
from space_allocation.utils import constants
from .base_strategy import BaseSuggestionStrategy

class RedistributeStrategy(BaseSuggestionStrategy):
    """Raise utilization of sparse shelves by adding facings"""
    
    def applies_to(self, utilization: ShelfUtilization, shelf_slots: Sequence[ProductSlot]) -> bool:
        return utilization.status is UtilizationStatus.UNDERUTILIZED and bool(shelf_slots)
    
    def build(self, shelf: Shelf, utilization: ShelfUtilization,
              shelf_slots: Sequence[ProductSlot]) -> Optional[OptimizationSuggestion]:
        representative = sort_slots(shelf_slots)[0]
        return OptimizationSuggestion(
            type=SuggestionType.REDISTRIBUTE,
            description=f"Redistribute products on shelf {shelf.level} for better use of space",
            shelf_id=shelf.shelf_id,
            expected_improvement=ExpectedImprovement(
                current_utilization=utilization.utilization_percentage,
                projected_utilization=self.config.optimal_threshold,
                gaps_reduced=0
            ),
            actions=[
                OptimizationAction(
                    product_id=representative.product_id,
                    action=ActionType.RESIZE,
                    reason=constants.REASON_INCREASE_FACINGS,
                    slot_id=representative.slot_id
                )
            ]
        )
