from .report_builder import (
    result_to_dict,
    utilization_frame,
    issues_frame,
    suggestions_frame,
    generate_validation_report,
)

__all__ = [
    'result_to_dict', 'utilization_frame', 'issues_frame',
    'suggestions_frame', 'generate_validation_report',
]
