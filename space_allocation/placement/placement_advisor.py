import math
import numbers
from typing import List, Optional, Sequence

from space_allocation.config import SpaceAllocationConfig
from space_allocation.core.gap_detector import free_intervals
from space_allocation.core.geometry import classify_status, occupied_width, slots_for_shelf, utilization_percentage
from space_allocation.core.overlap_detector import detect_overlaps
from space_allocation.core.utilization import used_width
from space_allocation.models.gap import Interval
from space_allocation.models.placement import (
    AddSlotResponse, AdjustedPosition, PlacementDecision, RejectionReason,
)
from space_allocation.models.results import UtilizationStatus
from space_allocation.models.shelf import Shelf
from space_allocation.models.slot import ProductSlot
from space_allocation.utils.error_handler import ContractViolationError
from space_allocation.utils.logger import get_logger
from space_allocation.validation.validator import validate

# Rejections auto-adjust can repair by moving the slot
_MOVABLE_REJECTIONS = (
    RejectionReason.NEGATIVE_POSITION,
    RejectionReason.OUT_OF_BOUNDS,
    RejectionReason.OVERLAP,
)

def _other_slots(shelf: Shelf, existing_slots: Sequence[ProductSlot],
                 new_slot: ProductSlot) -> List[ProductSlot]:
    """Slots already on the shelf, minus the previous placement of ``new_slot`` when it has a slot id"""
    slots = slots_for_shelf(shelf, existing_slots)
    if new_slot.slot_id is None:
        return slots
    return [slot for slot in slots if slot.slot_id != new_slot.slot_id]

def find_available_space(shelf: Shelf, existing_slots: Sequence[ProductSlot],
                         required_width: float, config: SpaceAllocationConfig) -> Optional[Interval]:
    """First (leftmost) free interval of at least ``required_width``, trimmed to that width"""
    if isinstance(required_width, bool) or not isinstance(required_width, numbers.Real) \
            or not math.isfinite(required_width) or required_width <= 0:
        raise ContractViolationError(f"required_width must be a positive number, got {required_width!r}")
    
    for _, interval in free_intervals(shelf, existing_slots, config):
        if interval.width >= required_width:
            return Interval(interval.start_x, interval.start_x + required_width)
    return None

def can_add_slot(shelf: Shelf, existing_slots: Sequence[ProductSlot], new_slot: ProductSlot,
                 config: SpaceAllocationConfig) -> PlacementDecision:
    """Decide whether ``new_slot`` can go on ``shelf`` at its current position.

    The slot is evaluated on ``shelf`` whatever its own ``shelf_id``. Bounds and
    overlap rejections carry the first free position wide enough for the slot,
    when there is one.
    """
    logger = get_logger()
    width = occupied_width(new_slot, config.default_product_width)
    others = _other_slots(shelf, existing_slots, new_slot)
    
    if new_slot.position_x < 0:
        return PlacementDecision.reject(
            RejectionReason.NEGATIVE_POSITION,
            "Position X cannot be negative"
        )
    
    slot_end = new_slot.position_x + width
    if slot_end > shelf.width:
        space = find_available_space(shelf, others, width, config)
        if space is not None:
            logger.debug(f"{new_slot.product_id} does not fit at {new_slot.position_x:.1f}cm on {shelf.shelf_id}, "
                         f"suggesting {space.start_x:.1f}cm")
            return PlacementDecision.reject(
                RejectionReason.OUT_OF_BOUNDS,
                f"Product does not fit at position {new_slot.position_x:.1f}cm (exceeds shelf width)",
                space.start_x
            )
        return PlacementDecision.reject(
            RejectionReason.OUT_OF_BOUNDS,
            f"Product does not fit on the shelf (required width: {width:.1f}cm, "
            f"shelf width: {shelf.width:.1f}cm)"
        )
    
    candidate = new_slot.on_shelf(shelf.shelf_id)
    overlaps = [pair for pair in detect_overlaps(others + [candidate], config)
                if pair.second is candidate]
    if overlaps:
        blocking = ", ".join(pair.first.product_id for pair in overlaps)
        space = find_available_space(shelf, others, width, config)
        if space is not None:
            logger.debug(f"{new_slot.product_id} overlaps {blocking} on {shelf.shelf_id}, "
                         f"suggesting {space.start_x:.1f}cm")
            return PlacementDecision.reject(
                RejectionReason.OVERLAP,
                f"Product overlaps another product ({blocking})",
                space.start_x
            )
        return PlacementDecision.reject(
            RejectionReason.OVERLAP,
            f"Product overlaps another product ({blocking}) and there is no free space"
        )
    
    if config.strict_mode:
        percentage = utilization_percentage(used_width(others + [candidate], config), shelf.width)
        if classify_status(percentage, config) is UtilizationStatus.EXCEEDED:
            return PlacementDecision.reject(
                RejectionReason.CAPACITY_EXCEEDED,
                f"Adding this product would fill {percentage:.1f}% of the shelf"
            )
    
    return PlacementDecision.accept()

def auto_adjust_slot_position(shelf: Shelf, existing_slots: Sequence[ProductSlot], new_slot: ProductSlot,
                              config: SpaceAllocationConfig) -> Optional[ProductSlot]:
    """Copy of ``new_slot`` moved to the first free interval that fits it"""
    width = occupied_width(new_slot, config.default_product_width)
    space = find_available_space(shelf, _other_slots(shelf, existing_slots, new_slot), width, config)
    if space is None:
        return None
    return new_slot.with_position(space.start_x)

def add_slot(shelves: Sequence[Shelf], slots: Sequence[ProductSlot], new_slot: ProductSlot,
             config: SpaceAllocationConfig, auto_adjust: bool = False,
             run_validation: bool = True) -> AddSlotResponse:
    """Check (and optionally reposition) a slot for the shelf named by its ``shelf_id``.

    Returns the slot to apply and the validation of the resulting layout. A slot
    with a ``slot_id`` already present in ``slots`` is treated as a move.
    """
    logger = get_logger()
    shelf = next((s for s in shelves if s.shelf_id == new_slot.shelf_id), None)
    if shelf is None:
        decision = PlacementDecision.reject(
            RejectionReason.SHELF_NOT_FOUND,
            f"Shelf {new_slot.shelf_id} not found"
        )
        validation = validate(shelves, slots, config) if run_validation else None
        return AddSlotResponse(success=False, decision=decision, validation=validation)
    
    decision = can_add_slot(shelf, slots, new_slot, config)
    placed = new_slot
    adjusted = None
    
    if not decision.can_add and auto_adjust and decision.reason_code in _MOVABLE_REJECTIONS:
        moved = auto_adjust_slot_position(shelf, slots, new_slot, config)
        if moved is not None:
            retry = can_add_slot(shelf, slots, moved, config)
            if retry.can_add:
                adjusted = AdjustedPosition(
                    original_x=new_slot.position_x,
                    new_x=moved.position_x,
                    reason=decision.reason
                )
                logger.debug(f"Auto-adjusted {new_slot.product_id} from {new_slot.position_x:.1f}cm "
                             f"to {moved.position_x:.1f}cm")
                decision, placed = retry, moved
    
    if not decision.can_add:
        logger.debug(f"Rejected {new_slot.product_id} on {shelf.shelf_id}: {decision.reason}")
        validation = validate(shelves, slots, config) if run_validation else None
        return AddSlotResponse(success=False, decision=decision, validation=validation)
    
    layout = list(slots)
    if placed.slot_id is not None:
        layout = [slot for slot in layout if slot.slot_id != placed.slot_id]
    layout.append(placed)
    validation = validate(shelves, layout, config) if run_validation else None
    return AddSlotResponse(
        success=True,
        decision=decision,
        slot=placed,
        validation=validation,
        adjusted_position=adjusted
    )
