from .record_converter import (
    shelf_from_record,
    slot_from_record,
    shelves_from_records,
    slots_from_records,
    shelves_from_dataframe,
    slots_from_dataframe,
    slots_to_records,
)

__all__ = [
    'shelf_from_record', 'slot_from_record', 'shelves_from_records', 'slots_from_records',
    'shelves_from_dataframe', 'slots_from_dataframe', 'slots_to_records',
]
