from typing import List, Sequence, Tuple

from space_allocation.config import SpaceAllocationConfig
from space_allocation.core.geometry import occupied_width, slots_for_shelf
from space_allocation.core.overlap_detector import detect_overlaps
from space_allocation.core.utilization import calculate_shelf_utilization
from space_allocation.models.results import (
    IssueSeverity, IssueType, ShelfUtilization, UtilizationStatus,
    ValidationIssue, ValidationResult, ValidationSummary,
)
from space_allocation.models.shelf import Shelf
from space_allocation.models.slot import ProductSlot
from space_allocation.utils import constants
from space_allocation.utils.error_handler import handle_errors
from space_allocation.utils.logger import get_logger
from space_allocation.utils.monitor import monitor

Issues = Tuple[List[ValidationIssue], List[ValidationIssue]]

def _error(issue_type: IssueType, message: str, shelf_id=None, product_ids=()) -> ValidationIssue:
    return ValidationIssue(issue_type, message, IssueSeverity.ERROR, shelf_id, tuple(product_ids))

def _validate_bounds(shelf: Shelf, shelf_slots: Sequence[ProductSlot],
                     config: SpaceAllocationConfig) -> List[ValidationIssue]:
    """Slots starting before the shelf or running past its end"""
    errors = []
    for slot in shelf_slots:
        end = slot.position_x + occupied_width(slot, config.default_product_width)
        if slot.position_x < 0:
            errors.append(_error(
                IssueType.OUT_OF_BOUNDS,
                f"Product {slot.product_id} starts before shelf {shelf.level} ({slot.position_x:.1f}cm)",
                shelf.shelf_id, [slot.product_id]
            ))
        elif end > shelf.width:
            errors.append(_error(
                IssueType.OUT_OF_BOUNDS,
                f"Product {slot.product_id} ends at {end:.1f}cm, past the {shelf.width:.1f}cm "
                f"width of shelf {shelf.level}",
                shelf.shelf_id, [slot.product_id]
            ))
    return errors

def _validate_shelf(shelf: Shelf, utilization: ShelfUtilization, shelf_slots: Sequence[ProductSlot],
                    config: SpaceAllocationConfig) -> Issues:
    """Errors and warnings for one shelf"""
    errors = []
    warnings = []
    percentage = utilization.utilization_percentage
    
    if utilization.status is UtilizationStatus.EXCEEDED:
        errors.append(_error(
            IssueType.SPACE_EXCEEDED,
            f"Shelf {shelf.level} uses {percentage:.1f}% of the available width",
            shelf.shelf_id
        ))
    
    errors.extend(_validate_bounds(shelf, shelf_slots, config))
    
    for pair in detect_overlaps(shelf_slots, config):
        errors.append(_error(
            IssueType.OVERLAP,
            f"Products overlap on shelf {shelf.level}: {pair.first.product_id} and {pair.second.product_id} "
            f"({pair.overlap_start:.1f}-{pair.overlap_end:.1f}cm)",
            shelf.shelf_id, pair.product_ids
        ))
    
    for gap in utilization.major_gaps:
        warnings.append(ValidationIssue(
            IssueType.LARGE_GAP,
            f"{gap.width:.1f}cm gap on shelf {shelf.level} (position {gap.start_x:.1f}cm)",
            IssueSeverity.WARNING,
            shelf.shelf_id,
            suggestion=constants.SUGGESTION_LARGE_GAP
        ))
    
    if utilization.status is UtilizationStatus.UNDERUTILIZED:
        warnings.append(ValidationIssue(
            IssueType.UNDERUTILIZED,
            f"Shelf {shelf.level} is underutilized ({percentage:.1f}%)",
            IssueSeverity.INFO,
            shelf.shelf_id,
            suggestion=constants.SUGGESTION_UNDERUTILIZED
        ))
        if shelf.eye_level:
            warnings.append(ValidationIssue(
                IssueType.EYE_LEVEL_UNDERUSED,
                f"Eye level shelf {shelf.level} is underutilized ({percentage:.1f}%)",
                IssueSeverity.WARNING,
                shelf.shelf_id,
                suggestion=constants.SUGGESTION_EYE_LEVEL
            ))
    elif utilization.status is UtilizationStatus.OVERUTILIZED:
        warnings.append(ValidationIssue(
            IssueType.TIGHT_FIT,
            f"Shelf {shelf.level} is nearly full ({percentage:.1f}%)",
            IssueSeverity.INFO,
            shelf.shelf_id,
            suggestion=constants.SUGGESTION_TIGHT_FIT
        ))
    
    return errors, warnings

def _validate_orphans(shelves: Sequence[Shelf], slots: Sequence[ProductSlot]) -> List[ValidationIssue]:
    """Slots referencing a shelf that is not part of the input"""
    shelf_ids = {shelf.shelf_id for shelf in shelves}
    return [
        _error(
            IssueType.ORPHAN_SLOT,
            f"Product {slot.product_id} references unknown shelf {slot.shelf_id}",
            slot.shelf_id, [slot.product_id]
        )
        for slot in slots if slot.shelf_id not in shelf_ids
    ]

def _summarize(shelves: Sequence[Shelf], slots: Sequence[ProductSlot],
               utilizations: Sequence[ShelfUtilization]) -> ValidationSummary:
    average = (
        sum(util.utilization_percentage for util in utilizations) / len(utilizations)
        if utilizations else 0.0
    )
    return ValidationSummary(
        total_shelves=len(shelves),
        total_slots=len(slots),
        total_space_available=sum(shelf.width for shelf in shelves),
        total_space_used=sum(util.used_width for util in utilizations),
        total_space_remaining=sum(util.available_width for util in utilizations),
        average_utilization=average
    )

@monitor.time_it
@handle_errors(raise_on_error=True)
def validate(shelves: Sequence[Shelf], slots: Sequence[ProductSlot],
             config: SpaceAllocationConfig) -> ValidationResult:
    """Validate every shelf of a planogram (or a section of one).

    Expected problems are reported in the result, never raised. ``valid`` is
    false as soon as there is an error; ``can_add`` stays true in non-strict
    mode, where errors are advisory.
    """
    logger = get_logger()
    errors = []
    warnings = []
    utilizations = []
    
    for shelf in shelves:
        shelf_slots = slots_for_shelf(shelf, slots)
        utilization = calculate_shelf_utilization(shelf, shelf_slots, config)
        utilizations.append(utilization)
        
        shelf_errors, shelf_warnings = _validate_shelf(shelf, utilization, shelf_slots, config)
        errors.extend(shelf_errors)
        warnings.extend(shelf_warnings)
        logger.debug(f"Shelf {shelf.shelf_id}: {utilization.utilization_percentage:.1f}% "
                     f"({utilization.status.value}), {len(utilization.gaps)} gaps, "
                     f"{len(shelf_errors)} errors")
    
    errors.extend(_validate_orphans(shelves, slots))
    
    valid = len(errors) == 0
    summary = _summarize(shelves, slots, utilizations)
    logger.info(f"Validated {summary.total_shelves} shelves / {summary.total_slots} slots: "
                f"{len(errors)} errors, {len(warnings)} warnings, "
                f"average utilization {summary.average_utilization:.1f}%")
    
    return ValidationResult(
        valid=valid,
        can_add=valid or not config.strict_mode,
        errors=errors,
        warnings=warnings,
        space_utilization=utilizations,
        summary=summary
    )
