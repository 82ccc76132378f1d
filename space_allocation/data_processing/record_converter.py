"""Conversion of plain records (API payloads, DataFrame rows) into models.

Keys may use the editor's camelCase names (``positionX``, ``eyeLevel``) or the
snake_case field names.
"""
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

import pandas as pd

from space_allocation.models.shelf import Shelf
from space_allocation.models.slot import ProductSlot
from space_allocation.utils.error_handler import InvalidShelfError, RecordConversionError

SHELF_FIELDS = {
    'shelf_id': ('shelf_id', 'shelfId', 'id'),
    'level': ('level',),
    'width': ('width',),
    'eye_level': ('eye_level', 'eyeLevel'),
    'name': ('name', 'shelf_name'),
}

SLOT_FIELDS = {
    'product_id': ('product_id', 'productId'),
    'shelf_id': ('shelf_id', 'shelfId'),
    'position_x': ('position_x', 'positionX', 'x_position'),
    'width': ('width',),
    'facings': ('facings',),
    'slot_id': ('slot_id', 'slotId', 'id'),
    'product_name': ('product_name', 'productName'),
}

def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False

def _pick(record: Mapping[str, Any], aliases: Sequence[str]) -> Optional[Any]:
    for key in aliases:
        if key in record and not _is_missing(record[key]):
            return record[key]
    return None

def _require(record: Mapping[str, Any], field_name: str, aliases: Sequence[str], kind: str) -> Any:
    value = _pick(record, aliases)
    if value is None:
        raise RecordConversionError(f"{kind} record is missing '{field_name}': {dict(record)}")
    return value

def _as_float(value: Any, field_name: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise RecordConversionError(f"'{field_name}' must be numeric, got {value!r}") from e

def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ('true', '1', 'yes', 'y')
    return bool(value)

def shelf_from_record(record: Mapping[str, Any]) -> Shelf:
    """Build a Shelf from a mapping; a negative width still raises InvalidShelfError"""
    shelf_id = _require(record, 'shelf_id', SHELF_FIELDS['shelf_id'], 'Shelf')
    width = _as_float(_require(record, 'width', SHELF_FIELDS['width'], 'Shelf'), 'width')
    level = _pick(record, SHELF_FIELDS['level'])
    name = _pick(record, SHELF_FIELDS['name'])
    try:
        return Shelf(
            shelf_id=str(shelf_id),
            level=int(level) if level is not None else 0,
            width=width,
            eye_level=_as_bool(_pick(record, SHELF_FIELDS['eye_level']) or False),
            name=str(name) if name is not None else None
        )
    except InvalidShelfError:
        raise
    except (TypeError, ValueError) as e:
        raise RecordConversionError(f"Invalid shelf record {dict(record)}: {e}") from e

def slot_from_record(record: Mapping[str, Any]) -> ProductSlot:
    """Build a ProductSlot from a mapping; missing width stays None, missing facings is 1"""
    width = _pick(record, SLOT_FIELDS['width'])
    facings = _pick(record, SLOT_FIELDS['facings'])
    slot_id = _pick(record, SLOT_FIELDS['slot_id'])
    name = _pick(record, SLOT_FIELDS['product_name'])
    try:
        return ProductSlot(
            product_id=str(_require(record, 'product_id', SLOT_FIELDS['product_id'], 'Slot')),
            shelf_id=str(_require(record, 'shelf_id', SLOT_FIELDS['shelf_id'], 'Slot')),
            position_x=_as_float(_require(record, 'position_x', SLOT_FIELDS['position_x'], 'Slot'), 'position_x'),
            width=_as_float(width, 'width') if width is not None else None,
            facings=int(facings) if facings is not None else 1,
            slot_id=str(slot_id) if slot_id is not None else None,
            product_name=str(name).strip() if name is not None else None
        )
    except (TypeError, ValueError) as e:
        raise RecordConversionError(f"Invalid slot record {dict(record)}: {e}") from e

def shelves_from_records(records: Iterable[Mapping[str, Any]]) -> List[Shelf]:
    return [shelf_from_record(record) for record in records]

def slots_from_records(records: Iterable[Mapping[str, Any]]) -> List[ProductSlot]:
    return [slot_from_record(record) for record in records]

def shelves_from_dataframe(df: pd.DataFrame) -> List[Shelf]:
    """Convert DataFrame rows to Shelf objects"""
    return [shelf_from_record(row.to_dict()) for _, row in df.iterrows()]

def slots_from_dataframe(df: pd.DataFrame) -> List[ProductSlot]:
    """Convert DataFrame rows to ProductSlot objects; NaN cells count as missing"""
    return [slot_from_record(row.to_dict()) for _, row in df.iterrows()]

def slots_to_records(slots: Iterable[ProductSlot]) -> List[Dict[str, Any]]:
    return [slot.to_dict() for slot in slots]
