from .placement_advisor import (
    find_available_space,
    can_add_slot,
    auto_adjust_slot_position,
    add_slot,
)

__all__ = ['find_available_space', 'can_add_slot', 'auto_adjust_slot_position', 'add_slot']
