from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

class SuggestionType(Enum):
    COMPRESS = "COMPRESS"
    REDISTRIBUTE = "REDISTRIBUTE"

class ActionType(Enum):
    MOVE = "MOVE"
    RESIZE = "RESIZE"

@dataclass(frozen=True)
class SlotLocation:
    shelf_id: str
    position_x: float

@dataclass(frozen=True)
class OptimizationAction:
    product_id: str
    action: ActionType
    reason: str
    from_location: Optional[SlotLocation] = None
    to_location: Optional[SlotLocation] = None
    slot_id: Optional[str] = None

@dataclass(frozen=True)
class ExpectedImprovement:
    current_utilization: float
    projected_utilization: float
    gaps_reduced: int

@dataclass(frozen=True)
class OptimizationSuggestion:
    """Shelf-level remediation proposal; advisory only"""
    type: SuggestionType
    description: str
    shelf_id: str
    expected_improvement: ExpectedImprovement
    actions: List[OptimizationAction] = field(default_factory=list)
