"""Shelf space allocation and validation for planograms.

Pure functions over immutable Shelf/ProductSlot records: validation, per-shelf
utilization, free-space search, placement checks and layout suggestions.
"""
from .config import SpaceAllocationConfig, DEFAULT_SPACE_CONFIG
from .models import (
    Shelf, ProductSlot, Gap, GapType, GapSeverity, Interval,
    UtilizationStatus, ShelfUtilization, IssueType, IssueSeverity,
    ValidationIssue, ValidationSummary, ValidationResult,
    RejectionReason, PlacementDecision, AdjustedPosition, AddSlotResponse,
    SuggestionType, ActionType, SlotLocation, OptimizationAction,
    ExpectedImprovement, OptimizationSuggestion,
)
from .core import (
    occupied_width, utilization_percentage, classify_status,
    calculate_shelf_utilization, detect_gaps, detect_overlaps,
)
from .validation import validate
from .placement import find_available_space, can_add_slot, auto_adjust_slot_position, add_slot
from .optimization import generate_optimization_suggestions, compress_positions
from .service import SpaceValidator
from .utils.error_handler import (
    SpaceAllocationError, ConfigurationError, ContractViolationError,
    InvalidShelfError, RecordConversionError,
)

__version__ = "0.1.0"

__all__ = [
    'SpaceAllocationConfig', 'DEFAULT_SPACE_CONFIG',
    'Shelf', 'ProductSlot', 'Gap', 'GapType', 'GapSeverity', 'Interval',
    'UtilizationStatus', 'ShelfUtilization', 'IssueType', 'IssueSeverity',
    'ValidationIssue', 'ValidationSummary', 'ValidationResult',
    'RejectionReason', 'PlacementDecision', 'AdjustedPosition', 'AddSlotResponse',
    'SuggestionType', 'ActionType', 'SlotLocation', 'OptimizationAction',
    'ExpectedImprovement', 'OptimizationSuggestion',
    'occupied_width', 'utilization_percentage', 'classify_status',
    'calculate_shelf_utilization', 'detect_gaps', 'detect_overlaps',
    'validate', 'find_available_space', 'can_add_slot', 'auto_adjust_slot_position', 'add_slot',
    'generate_optimization_suggestions', 'compress_positions', 'SpaceValidator',
    'SpaceAllocationError', 'ConfigurationError', 'ContractViolationError',
    'InvalidShelfError', 'RecordConversionError',
]
