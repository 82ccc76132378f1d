from typing import List, Sequence

from space_allocation.config import SpaceAllocationConfig
from space_allocation.core.geometry import slots_for_shelf
from space_allocation.core.utilization import calculate_shelf_utilization
from space_allocation.models.optimization import OptimizationSuggestion
from space_allocation.models.shelf import Shelf
from space_allocation.models.slot import ProductSlot
from space_allocation.utils.error_handler import handle_errors
from space_allocation.utils.logger import get_logger
from space_allocation.utils.monitor import monitor
from .compress_strategy import CompressStrategy
from .redistribute_strategy import RedistributeStrategy

@monitor.time_it
@handle_errors(raise_on_error=True)
def generate_optimization_suggestions(shelves: Sequence[Shelf], slots: Sequence[ProductSlot],
                                      config: SpaceAllocationConfig) -> List[OptimizationSuggestion]:
    """Heuristic remediation proposals, shelf by shelf; nothing is applied"""
    strategies = [CompressStrategy(config), RedistributeStrategy(config)]
    suggestions = []
    
    for shelf in shelves:
        shelf_slots = slots_for_shelf(shelf, slots)
        utilization = calculate_shelf_utilization(shelf, shelf_slots, config)
        for strategy in strategies:
            suggestion = strategy.suggest(shelf, utilization, shelf_slots)
            if suggestion is not None:
                suggestions.append(suggestion)
    
    get_logger().info(f"Generated {len(suggestions)} optimization suggestions for {len(shelves)} shelves")
    return suggestions
