from typing import List, Optional, Sequence

from space_allocation.config import DEFAULT_SPACE_CONFIG, SpaceAllocationConfig
from space_allocation.core.geometry import slots_for_shelf
from space_allocation.core.utilization import calculate_shelf_utilization
from space_allocation.models.gap import Interval
from space_allocation.models.optimization import OptimizationSuggestion
from space_allocation.models.placement import AddSlotResponse, PlacementDecision, RejectionReason
from space_allocation.models.results import ShelfUtilization, ValidationResult
from space_allocation.models.shelf import Shelf
from space_allocation.models.slot import ProductSlot
from space_allocation.optimization.optimization_advisor import generate_optimization_suggestions
from space_allocation.placement import placement_advisor
from space_allocation.validation.validator import validate

class SpaceValidator:
    """Binds one SpaceAllocationConfig to every entry point.

    Holds no state besides the immutable config, so one instance can serve
    concurrent callers.
    """
    
    def __init__(self, config: Optional[SpaceAllocationConfig] = None):
        self.config = config or DEFAULT_SPACE_CONFIG
    
    def validate(self, shelves: Sequence[Shelf], slots: Sequence[ProductSlot]) -> ValidationResult:
        return validate(shelves, slots, self.config)
    
    def calculate_shelf_utilization(self, shelf: Shelf, slots: Sequence[ProductSlot]) -> ShelfUtilization:
        return calculate_shelf_utilization(shelf, slots, self.config)
    
    def can_add_slot(self, shelf: Shelf, existing_slots: Sequence[ProductSlot],
                     new_slot: ProductSlot) -> PlacementDecision:
        return placement_advisor.can_add_slot(shelf, existing_slots, new_slot, self.config)
    
    def find_available_space(self, shelf: Shelf, existing_slots: Sequence[ProductSlot],
                             required_width: float) -> Optional[Interval]:
        return placement_advisor.find_available_space(shelf, existing_slots, required_width, self.config)
    
    def auto_adjust_slot_position(self, shelf: Shelf, existing_slots: Sequence[ProductSlot],
                                  new_slot: ProductSlot) -> Optional[ProductSlot]:
        return placement_advisor.auto_adjust_slot_position(shelf, existing_slots, new_slot, self.config)
    
    def add_slot(self, shelves: Sequence[Shelf], slots: Sequence[ProductSlot], new_slot: ProductSlot,
                 auto_adjust: bool = False, run_validation: bool = True) -> AddSlotResponse:
        return placement_advisor.add_slot(shelves, slots, new_slot, self.config, auto_adjust, run_validation)
    
    def generate_optimization_suggestions(self, shelves: Sequence[Shelf],
                                          slots: Sequence[ProductSlot]) -> List[OptimizationSuggestion]:
        return generate_optimization_suggestions(shelves, slots, self.config)
    
    # Lookups by shelf id, for editors that only track the selected shelf id
    
    def can_add_slot_to_shelf(self, shelves: Sequence[Shelf], slots: Sequence[ProductSlot],
                              shelf_id: str, new_slot: ProductSlot) -> PlacementDecision:
        shelf = _find_shelf(shelves, shelf_id)
        if shelf is None:
            return PlacementDecision.reject(RejectionReason.SHELF_NOT_FOUND, f"Shelf {shelf_id} not found")
        return self.can_add_slot(shelf, slots_for_shelf(shelf, slots), new_slot)
    
    def find_space_on_shelf(self, shelves: Sequence[Shelf], slots: Sequence[ProductSlot],
                            shelf_id: str, required_width: float) -> Optional[Interval]:
        shelf = _find_shelf(shelves, shelf_id)
        if shelf is None:
            return None
        return self.find_available_space(shelf, slots, required_width)

def _find_shelf(shelves: Sequence[Shelf], shelf_id: str) -> Optional[Shelf]:
    return next((shelf for shelf in shelves if shelf.shelf_id == shelf_id), None)
