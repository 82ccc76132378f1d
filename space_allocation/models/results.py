from dataclasses import dataclass, field, fields, is_dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .gap import Gap

class UtilizationStatus(Enum):
    EMPTY = "empty"
    UNDERUTILIZED = "underutilized"
    OPTIMAL = "optimal"
    OVERUTILIZED = "overutilized"
    EXCEEDED = "exceeded"
    
    @property
    def rank(self) -> int:
        """Ordering from empty (0) to exceeded (4)"""
        return _STATUS_ORDER.index(self)

_STATUS_ORDER = [
    UtilizationStatus.EMPTY,
    UtilizationStatus.UNDERUTILIZED,
    UtilizationStatus.OPTIMAL,
    UtilizationStatus.OVERUTILIZED,
    UtilizationStatus.EXCEEDED,
]

class IssueType(Enum):
    # errors
    SPACE_EXCEEDED = "SPACE_EXCEEDED"
    OVERLAP = "OVERLAP"
    ORPHAN_SLOT = "ORPHAN_SLOT"
    OUT_OF_BOUNDS = "OUT_OF_BOUNDS"
    # warnings
    LARGE_GAP = "LARGE_GAP"
    UNDERUTILIZED = "UNDERUTILIZED"
    EYE_LEVEL_UNDERUSED = "EYE_LEVEL_UNDERUSED"
    TIGHT_FIT = "TIGHT_FIT"

class IssueSeverity(Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

def to_plain(obj: Any) -> Any:
    """Recursively convert dataclasses, enums and tuples into JSON-ready values"""
    if is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: to_plain(getattr(obj, f.name)) for f in fields(obj)}
    if isinstance(obj, dict):
        return {(k.value if isinstance(k, Enum) else k): to_plain(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_plain(item) for item in obj]
    if isinstance(obj, Enum):
        return obj.value
    return obj

@dataclass(frozen=True)
class ShelfUtilization:
    """Space usage of one shelf"""
    shelf_id: str
    shelf_level: int
    total_width: float
    used_width: float
    available_width: float
    utilization_percentage: float
    status: UtilizationStatus
    gaps: List[Gap] = field(default_factory=list)
    slot_count: int = 0
    
    @property
    def major_gaps(self) -> List[Gap]:
        return [gap for gap in self.gaps if gap.is_major]

@dataclass(frozen=True)
class ValidationIssue:
    """A structured validation error or warning"""
    type: IssueType
    message: str
    severity: IssueSeverity
    shelf_id: Optional[str] = None
    product_ids: Tuple[str, ...] = ()
    suggestion: Optional[str] = None
    
    @property
    def is_error(self) -> bool:
        return self.severity is IssueSeverity.ERROR

@dataclass(frozen=True)
class ValidationSummary:
    total_shelves: int = 0
    total_slots: int = 0
    total_space_available: float = 0.0
    total_space_used: float = 0.0
    total_space_remaining: float = 0.0
    average_utilization: float = 0.0

@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a set of shelves and slots"""
    valid: bool
    can_add: bool
    errors: List[ValidationIssue] = field(default_factory=list)
    warnings: List[ValidationIssue] = field(default_factory=list)
    space_utilization: List[ShelfUtilization] = field(default_factory=list)
    summary: ValidationSummary = field(default_factory=ValidationSummary)
    
    @property
    def total_utilization(self) -> float:
        return self.summary.average_utilization
    
    @property
    def issues(self) -> List[ValidationIssue]:
        return list(self.errors) + list(self.warnings)
    
    def errors_of_type(self, issue_type: IssueType) -> List[ValidationIssue]:
        return [issue for issue in self.errors if issue.type is issue_type]
    
    def warnings_of_type(self, issue_type: IssueType) -> List[ValidationIssue]:
        return [issue for issue in self.warnings if issue.type is issue_type]
    
    def get_shelf_utilization(self, shelf_id: str) -> Optional[ShelfUtilization]:
        return next((util for util in self.space_utilization if util.shelf_id == shelf_id), None)
    
    def to_dict(self) -> Dict[str, Any]:
        data = to_plain(self)
        data['total_utilization'] = self.total_utilization
        return data
