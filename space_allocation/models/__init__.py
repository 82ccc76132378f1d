from .shelf import Shelf
from .slot import ProductSlot
from .gap import Gap, GapType, GapSeverity, Interval
from .results import (
    UtilizationStatus, ShelfUtilization, IssueType, IssueSeverity,
    ValidationIssue, ValidationSummary, ValidationResult, to_plain,
)
from .placement import RejectionReason, PlacementDecision, AdjustedPosition, AddSlotResponse
from .optimization import (
    SuggestionType, ActionType, SlotLocation, OptimizationAction,
    ExpectedImprovement, OptimizationSuggestion,
)

__all__ = [
    'Shelf', 'ProductSlot', 'Gap', 'GapType', 'GapSeverity', 'Interval',
    'UtilizationStatus', 'ShelfUtilization', 'IssueType', 'IssueSeverity',
    'ValidationIssue', 'ValidationSummary', 'ValidationResult', 'to_plain',
    'RejectionReason', 'PlacementDecision', 'AdjustedPosition', 'AddSlotResponse',
    'SuggestionType', 'ActionType', 'SlotLocation', 'OptimizationAction',
    'ExpectedImprovement', 'OptimizationSuggestion',
]
