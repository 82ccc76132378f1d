import math
import numbers
from dataclasses import dataclass, asdict, fields, replace
from typing import Any, Dict, Mapping

from space_allocation.utils import constants
from space_allocation.utils.error_handler import ConfigurationError

# camelCase names used by the editor/API payloads
_CAMEL_CASE_ALIASES = {
    'underutilizedThreshold': 'underutilized_threshold',
    'optimalThreshold': 'optimal_threshold',
    'overutilizedThreshold': 'overutilized_threshold',
    'minSignificantGapWidth': 'min_significant_gap_width',
    'majorGapWidth': 'major_gap_width',
    'defaultProductWidth': 'default_product_width',
    'strictMode': 'strict_mode',
    'allowOverlap': 'allow_overlap',
}

@dataclass(frozen=True)
class SpaceAllocationConfig:
    """Tunable thresholds and policy flags for shelf space validation.

    Utilization bands, in percent of shelf width:

    * ``0``                                   -> empty
    * ``(0, underutilized_threshold)``        -> underutilized
    * ``[underutilized_threshold, optimal_threshold]`` -> optimal
    * ``(optimal_threshold, overutilized_threshold]``  -> overutilized
    * ``> overutilized_threshold``            -> exceeded

    Gaps narrower than ``min_significant_gap_width`` are not reported, gaps at or
    above ``major_gap_width`` are major. Widths are in centimeters.
    """
    underutilized_threshold: float = constants.UNDERUTILIZED_THRESHOLD
    optimal_threshold: float = constants.OPTIMAL_THRESHOLD
    overutilized_threshold: float = constants.OVERUTILIZED_THRESHOLD
    min_significant_gap_width: float = constants.MIN_SIGNIFICANT_GAP_WIDTH
    major_gap_width: float = constants.MAJOR_GAP_WIDTH
    default_product_width: float = constants.DEFAULT_PRODUCT_WIDTH
    strict_mode: bool = constants.STRICT_MODE
    allow_overlap: bool = constants.ALLOW_OVERLAP

    def __post_init__(self):
        self.validate()

    def validate(self):
        """Raise ConfigurationError if the thresholds are inconsistent"""
        numeric = {
            'underutilized_threshold': self.underutilized_threshold,
            'optimal_threshold': self.optimal_threshold,
            'overutilized_threshold': self.overutilized_threshold,
            'min_significant_gap_width': self.min_significant_gap_width,
            'major_gap_width': self.major_gap_width,
            'default_product_width': self.default_product_width,
        }
        for name, value in numeric.items():
            if isinstance(value, bool) or not isinstance(value, numbers.Real) or not math.isfinite(value):
                raise ConfigurationError(f"{name} must be a finite number, got {value!r}")
            if value < 0:
                raise ConfigurationError(f"{name} cannot be negative ({value})")

        if not (self.underutilized_threshold <= self.optimal_threshold <= self.overutilized_threshold):
            raise ConfigurationError(
                "Utilization thresholds must be monotonic: "
                f"underutilized ({self.underutilized_threshold}) <= optimal ({self.optimal_threshold}) "
                f"<= overutilized ({self.overutilized_threshold})"
            )
        if self.default_product_width <= 0:
            raise ConfigurationError("default_product_width must be positive")
        if self.min_significant_gap_width > self.major_gap_width:
            raise ConfigurationError(
                f"min_significant_gap_width ({self.min_significant_gap_width}) cannot exceed "
                f"major_gap_width ({self.major_gap_width})"
            )

    def with_overrides(self, **changes) -> 'SpaceAllocationConfig':
        """Return a copy with some fields replaced"""
        unknown = set(changes) - {f.name for f in fields(self)}
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {sorted(unknown)}")
        return replace(self, **changes)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any],
                  base: 'SpaceAllocationConfig' = None) -> 'SpaceAllocationConfig':
        """Build a config from a partial mapping layered over ``base`` (defaults if omitted)"""
        changes = {}
        for key, value in data.items():
            changes[_CAMEL_CASE_ALIASES.get(key, key)] = value
        return (base or cls()).with_overrides(**changes)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

DEFAULT_SPACE_CONFIG = SpaceAllocationConfig()
