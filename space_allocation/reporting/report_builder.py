from datetime import datetime
from typing import Any, Optional, Sequence

import pandas as pd

from space_allocation.models.optimization import OptimizationSuggestion
from space_allocation.models.results import IssueSeverity, ValidationResult, to_plain

UTILIZATION_COLUMNS = [
    'shelf_id', 'shelf_level', 'total_width', 'used_width', 'available_width',
    'utilization_percentage', 'status', 'slot_count', 'gap_count', 'major_gap_count', 'largest_gap',
]
ISSUE_COLUMNS = ['type', 'severity', 'shelf_id', 'product_ids', 'message', 'suggestion']
SUGGESTION_COLUMNS = [
    'type', 'shelf_id', 'product_id', 'action', 'from_x', 'to_x', 'current_utilization',
    'projected_utilization', 'reason',
]

def result_to_dict(result: Any) -> Any:
    """JSON-ready structure for a result, suggestion list or any model"""
    if isinstance(result, ValidationResult):
        return result.to_dict()
    return to_plain(result)

def utilization_frame(result: ValidationResult) -> pd.DataFrame:
    """One row per shelf"""
    rows = []
    for util in result.space_utilization:
        rows.append({
            'shelf_id': util.shelf_id,
            'shelf_level': util.shelf_level,
            'total_width': util.total_width,
            'used_width': util.used_width,
            'available_width': util.available_width,
            'utilization_percentage': round(util.utilization_percentage, 2),
            'status': util.status.value,
            'slot_count': util.slot_count,
            'gap_count': len(util.gaps),
            'major_gap_count': len(util.major_gaps),
            'largest_gap': max((gap.width for gap in util.gaps), default=0.0)
        })
    return pd.DataFrame(rows, columns=UTILIZATION_COLUMNS)

def issues_frame(result: ValidationResult) -> pd.DataFrame:
    """Errors first, then warnings, in reporting order"""
    rows = [
        {
            'type': issue.type.value,
            'severity': issue.severity.value,
            'shelf_id': issue.shelf_id,
            'product_ids': ", ".join(issue.product_ids),
            'message': issue.message,
            'suggestion': issue.suggestion
        }
        for issue in result.issues
    ]
    return pd.DataFrame(rows, columns=ISSUE_COLUMNS)

def suggestions_frame(suggestions: Sequence[OptimizationSuggestion]) -> pd.DataFrame:
    """One row per action"""
    rows = []
    for suggestion in suggestions:
        improvement = suggestion.expected_improvement
        for action in suggestion.actions:
            rows.append({
                'type': suggestion.type.value,
                'shelf_id': suggestion.shelf_id,
                'product_id': action.product_id,
                'action': action.action.value,
                'from_x': action.from_location.position_x if action.from_location else None,
                'to_x': action.to_location.position_x if action.to_location else None,
                'current_utilization': improvement.current_utilization,
                'projected_utilization': improvement.projected_utilization,
                'reason': action.reason
            })
    return pd.DataFrame(rows, columns=SUGGESTION_COLUMNS)

def generate_validation_report(result: ValidationResult, title: str = "SHELF SPACE VALIDATION REPORT",
                               generated_at: Optional[datetime] = None) -> str:
    """Plain-text report of a validation result"""
    summary = result.summary
    generated_at = generated_at or datetime.now()
    
    report = []
    report.append(title)
    report.append("=" * 50)
    report.append(f"Generated: {generated_at.strftime('%Y-%m-%d %H:%M:%S')}")
    report.append(f"Shelves: {summary.total_shelves} | Slots: {summary.total_slots}")
    report.append(f"Space used: {summary.total_space_used:.1f}cm of {summary.total_space_available:.1f}cm "
                  f"({summary.total_space_remaining:.1f}cm free)")
    report.append(f"Average utilization: {summary.average_utilization:.1f}%")
    report.append("")
    
    if result.space_utilization:
        report.append("SHELVES:")
        report.append("-" * 30)
        for util in result.space_utilization:
            report.append(f"  Level {util.shelf_level} ({util.shelf_id}): "
                          f"{util.utilization_percentage:.1f}% {util.status.value}, {len(util.gaps)} gaps")
        report.append("")
    
    if result.errors:
        report.append(f"ERRORS ({len(result.errors)}):")
        report.append("-" * 30)
        for error in result.errors:
            report.append(f"❌ {error.message}")
        report.append("")
    
    if result.warnings:
        report.append(f"WARNINGS ({len(result.warnings)}):")
        report.append("-" * 30)
        for warning in result.warnings:
            marker = "ℹ️ " if warning.severity is IssueSeverity.INFO else "⚠️ "
            line = f"{marker} {warning.message}"
            if warning.suggestion:
                line += f" -> {warning.suggestion}"
            report.append(line)
        report.append("")
    
    if not result.errors and not result.warnings:
        report.append("✅ All validations passed!")
    
    return "\n".join(report)
