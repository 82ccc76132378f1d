from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .results import ValidationResult
from .slot import ProductSlot

class RejectionReason(Enum):
    NEGATIVE_POSITION = "negative_position"
    OUT_OF_BOUNDS = "out_of_bounds"
    OVERLAP = "overlap"
    CAPACITY_EXCEEDED = "capacity_exceeded"
    SHELF_NOT_FOUND = "shelf_not_found"

@dataclass(frozen=True)
class PlacementDecision:
    """Whether a slot may be placed, and where to put it instead if not"""
    can_add: bool
    reason_code: Optional[RejectionReason] = None
    reason: Optional[str] = None
    suggested_position: Optional[float] = None
    
    @classmethod
    def accept(cls) -> 'PlacementDecision':
        return cls(can_add=True)
    
    @classmethod
    def reject(cls, reason_code: RejectionReason, reason: str,
               suggested_position: Optional[float] = None) -> 'PlacementDecision':
        return cls(False, reason_code, reason, suggested_position)

@dataclass(frozen=True)
class AdjustedPosition:
    original_x: float
    new_x: float
    reason: str

@dataclass(frozen=True)
class AddSlotResponse:
    """Result of an add-slot request; the caller applies ``slot`` on success"""
    success: bool
    decision: PlacementDecision
    slot: Optional[ProductSlot] = None
    validation: Optional[ValidationResult] = None
    adjusted_position: Optional[AdjustedPosition] = None
