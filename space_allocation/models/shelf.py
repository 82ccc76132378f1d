import math
import numbers
from dataclasses import dataclass
from typing import Dict, Optional

from space_allocation.utils.error_handler import InvalidShelfError

@dataclass(frozen=True)
class Shelf:
    """One horizontal level of a fixture with a fixed usable width"""
    shelf_id: str
    level: int
    width: float  # cm, usable interior width
    eye_level: bool = False  # customer eye height; affects warnings only
    name: Optional[str] = None
    
    def __post_init__(self):
        """Reject widths no layout can have"""
        if isinstance(self.width, bool) or not isinstance(self.width, numbers.Real):
            raise InvalidShelfError(f"Shelf {self.shelf_id} width must be a number, got {self.width!r}")
        if not math.isfinite(self.width) or self.width < 0:
            raise InvalidShelfError(f"Shelf {self.shelf_id} has invalid width ({self.width})")
    
    @property
    def display_name(self) -> str:
        return self.name or f"Shelf {self.level}"
    
    def to_dict(self) -> Dict:
        """Convert shelf to dictionary for export"""
        return {
            'shelf_id': self.shelf_id,
            'level': self.level,
            'width': self.width,
            'eye_level': self.eye_level,
            'name': self.name
        }
