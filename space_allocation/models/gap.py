from dataclasses import dataclass
from enum import Enum

class GapType(Enum):
    START = "start"
    MIDDLE = "middle"
    END = "end"

class GapSeverity(Enum):
    MINOR = "minor"
    MAJOR = "major"

@dataclass(frozen=True)
class Interval:
    """Half-open interval [start_x, end_x) on a shelf, in cm"""
    start_x: float
    end_x: float
    
    @property
    def width(self) -> float:
        return self.end_x - self.start_x
    
    def intersects(self, other: 'Interval') -> bool:
        return self.start_x < other.end_x and other.start_x < self.end_x

@dataclass(frozen=True)
class Gap:
    """Free interval on one shelf"""
    start_x: float
    end_x: float
    width: float
    type: GapType
    severity: GapSeverity
    
    @property
    def is_major(self) -> bool:
        return self.severity is GapSeverity.MAJOR
    
    def as_interval(self) -> Interval:
        return Interval(self.start_x, self.end_x)
