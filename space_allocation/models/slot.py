from dataclasses import dataclass, replace
from typing import Dict, Optional

@dataclass(frozen=True)
class ProductSlot:
    """One product's placement on one shelf"""
    product_id: str
    shelf_id: str
    position_x: float  # cm, left edge offset from the shelf start
    width: Optional[float] = None  # cm per facing; config default applies when missing
    facings: Optional[int] = 1
    slot_id: Optional[str] = None
    product_name: Optional[str] = None
    
    def with_position(self, position_x: float) -> 'ProductSlot':
        """Copy of this slot moved to ``position_x``"""
        return replace(self, position_x=position_x)
    
    def on_shelf(self, shelf_id: str, position_x: Optional[float] = None) -> 'ProductSlot':
        """Copy of this slot assigned to another shelf"""
        if position_x is None:
            return replace(self, shelf_id=shelf_id)
        return replace(self, shelf_id=shelf_id, position_x=position_x)
    
    @property
    def label(self) -> str:
        return self.product_name or self.product_id
    
    def to_dict(self) -> Dict:
        return {
            'product_id': self.product_id,
            'shelf_id': self.shelf_id,
            'position_x': self.position_x,
            'width': self.width,
            'facings': self.facings,
            'slot_id': self.slot_id,
            'product_name': self.product_name
        }
