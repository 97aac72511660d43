"""
==============================================================================
Catalog Model Tests
==============================================================================

Tests for derived display record fields and record validation.

==============================================================================
"""

import pytest
from decimal import Decimal
from pydantic import ValidationError as SchemaValidationError

from shoestore.catalog.models import (
    CatalogCriteria,
    DisplayRecord,
    FilterMode,
    ProductRecord,
    SortMode,
)


class TestFinalPrice:
    """Tests for discount application."""

    def test_no_discount_keeps_price(self, record_factory):
        """Test final price equals price without discount."""
        record = record_factory(1, "Runner", 100, discount=0)
        assert record.final_price == Decimal("100")

    def test_discount_reduces_price(self, record_factory):
        """Test 20% off 80 is 64."""
        record = record_factory(2, "Trail", 80, discount=20)
        assert record.final_price == Decimal("64")

    def test_fractional_discount(self, record_factory):
        """Test a non-integer discount percentage."""
        record = record_factory(3, "Sandal", "1000.00", discount="12.5")
        assert record.final_price == Decimal("875")

    @pytest.mark.parametrize("discount", ["0", "1", "15", "50", "99.99", "100"])
    def test_final_price_never_exceeds_price(self, record_factory, discount):
        """Test final price stays within [0, price] for any valid discount."""
        record = record_factory(4, "Boot", "4990.00", discount=discount)
        assert Decimal("0") <= record.final_price <= record.price

    def test_full_discount_is_free(self, record_factory):
        """Test a 100% discount yields zero."""
        record = record_factory(5, "Slipper", 500, discount=100)
        assert record.final_price == 0


class TestDerivedFlags:
    """Tests for discount and stock flags."""

    def test_discount_flags(self, record_factory):
        """Test has_discount and has_high_discount thresholds."""
        none = record_factory(1, "A", 10, discount=0)
        small = record_factory(2, "B", 10, discount=15)
        high = record_factory(3, "C", 10, discount="15.01")

        assert (none.has_discount, none.has_high_discount) == (False, False)
        assert (small.has_discount, small.has_high_discount) == (True, False)
        assert (high.has_discount, high.has_high_discount) == (True, True)

    def test_out_of_stock(self, record_factory):
        """Test is_out_of_stock only when quantity is zero."""
        assert record_factory(1, "A", 10, stock=0).is_out_of_stock is True
        assert record_factory(2, "B", 10, stock=1).is_out_of_stock is False

    def test_photo_path_placeholder(self, record_factory):
        """Test missing and empty photos resolve to the placeholder."""
        record = record_factory(1, "A", 10)
        assert record.photo_path == "/Resources/picture.png"
        assert record.model_copy(update={"photo": ""}).photo_path == "/Resources/picture.png"

    def test_photo_path_resource(self, record_factory):
        """Test a photo name is resolved inside the resources directory."""
        record = record_factory(1, "A", 10).model_copy(update={"photo": "7.jpg"})
        assert record.photo_path == "/Resources/7.jpg"

    def test_computed_fields_serialized(self, record_factory):
        """Test derived fields appear in model_dump for renderers."""
        data = record_factory(2, "Trail", 80, discount=20, stock=0).model_dump()
        assert data["final_price"] == Decimal("64")
        assert data["has_discount"] is True
        assert data["is_out_of_stock"] is True


class TestRecordValidation:
    """Tests for ProductRecord field constraints."""

    def _raw(self, **overrides):
        values = dict(
            id=1, name="Boot", category_name="C", manufacturer_name="M",
            supplier_name="S", unit_name="шт.", price=Decimal("10"),
        )
        values.update(overrides)
        return values

    def test_defaults(self):
        """Test optional fields default to empty values."""
        record = ProductRecord(**self._raw())
        assert record.discount == 0
        assert record.stock_quantity == 0
        assert record.article_number is None

    @pytest.mark.parametrize("field,value", [
        ("price", Decimal("-1")),
        ("discount", Decimal("101")),
        ("discount", Decimal("-5")),
        ("stock_quantity", -1),
        ("category_name", ""),
    ])
    def test_invalid_values_rejected(self, field, value):
        """Test out-of-range values fail validation."""
        with pytest.raises(SchemaValidationError):
            ProductRecord(**self._raw(**{field: value}))

    def test_records_are_frozen(self, record_factory):
        """Test display records cannot be mutated."""
        record = record_factory(1, "A", 10)
        with pytest.raises(SchemaValidationError):
            record.price = Decimal("1")

    def test_from_record(self):
        """Test a raw record converts to a display record."""
        display = DisplayRecord.from_record(ProductRecord(**self._raw(discount=Decimal("50"))))
        assert display.final_price == Decimal("5")


class TestCriteria:
    """Tests for criteria defaults and labels."""

    def test_defaults(self):
        """Test criteria default to no search, filter or sort."""
        criteria = CatalogCriteria()
        assert criteria.search_text == ""
        assert criteria.filter_mode == FilterMode.NONE
        assert criteria.sort_mode == SortMode.NONE

    def test_labels(self):
        """Test filter and sort display labels."""
        assert FilterMode.IN_STOCK.display_name == "Товары в наличии"
        assert SortMode.NAME_DESC.display_name == "По наименованию (Я-А)"
