import pytest

from space_allocation import DEFAULT_SPACE_CONFIG, ProductSlot, Shelf


@pytest.fixture
def config():
    return DEFAULT_SPACE_CONFIG


@pytest.fixture
def fine_config():
    """Reports every gap of 1cm or more; 10cm and up are major"""
    return DEFAULT_SPACE_CONFIG.with_overrides(min_significant_gap_width=1.0, major_gap_width=10.0)


@pytest.fixture
def shelf():
    return Shelf(shelf_id="S1", level=1, width=100.0)


@pytest.fixture
def make_slot():
    def _make(product_id, position_x, width=None, facings=1, shelf_id="S1", slot_id=None):
        return ProductSlot(
            product_id=product_id,
            shelf_id=shelf_id,
            position_x=position_x,
            width=width,
            facings=facings,
            slot_id=slot_id,
        )

    return _make
