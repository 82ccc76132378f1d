from abc import ABC, abstractmethod
from typing import Optional, Sequence

from space_allocation.config import SpaceAllocationConfig
from space_allocation.models.optimization import OptimizationSuggestion
from space_allocation.models.results import ShelfUtilization
from space_allocation.models.shelf import Shelf
from space_allocation.models.slot import ProductSlot
from space_allocation.utils.logger import get_logger

class BaseSuggestionStrategy(ABC):
    """Base class for shelf-level remediation strategies"""
    
    def __init__(self, config: SpaceAllocationConfig):
        self.config = config
        self.logger = get_logger()
    
    @abstractmethod
    def applies_to(self, utilization: ShelfUtilization, shelf_slots: Sequence[ProductSlot]) -> bool:
        """Whether the shelf qualifies for this strategy"""
        pass
    
    @abstractmethod
    def build(self, shelf: Shelf, utilization: ShelfUtilization,
              shelf_slots: Sequence[ProductSlot]) -> Optional[OptimizationSuggestion]:
        """Suggestion for one qualifying shelf, or None when there is nothing to do"""
        pass
    
    def suggest(self, shelf: Shelf, utilization: ShelfUtilization,
                shelf_slots: Sequence[ProductSlot]) -> Optional[OptimizationSuggestion]:
        if not self.applies_to(utilization, shelf_slots):
            return None
        suggestion = self.build(shelf, utilization, shelf_slots)
        if suggestion is not None:
            self.logger.debug(f"{type(self).__name__}: {suggestion.description} "
                              f"({len(suggestion.actions)} actions)")
        return suggestion
