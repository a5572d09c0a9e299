"""Tests for Sale and SaleItem entities."""

from datetime import datetime
from decimal import Decimal

import pytest

from bodega.core.entities.sale import Sale, SaleItem
from bodega.core.exceptions import ValidationError


class TestSaleItem:
    """Tests for SaleItem entity."""

    def test_line_total(self):
        assert SaleItem(quantity=3, unit_price=250).line_total == 750

    def test_zero_quantity_rejected(self):
        with pytest.raises(ValidationError):
            SaleItem(quantity=0, unit_price=250)

    def test_negative_unit_price_rejected(self):
        with pytest.raises(ValidationError):
            SaleItem(quantity=1, unit_price=-1)


class TestSale:
    """Tests for Sale totals."""

    def test_reference_example(self):
        """Test 2 x 1050 + 1 x 500 with a 300 discount."""
        sale = Sale(
            id=1,
            items=[
                {"quantity": 2, "unit_price": 1050},
                {"quantity": 1, "unit_price": 500},
            ],
        )
        assert sale.subtotal == 2600
        assert sale.tax == 468
        assert sale.total == 3068

        sale.apply_discount(300)
        assert sale.discount == 300
        assert sale.total == 2600 + 468 - 300

    def test_items_coerced_from_dicts(self):
        sale = Sale(id=1, items=[{"quantity": 1, "unit_price": 100}])
        assert isinstance(sale.items[0], SaleItem)

    @pytest.mark.parametrize(
        "item",
        [{"quantity": 2}, {"unit_price": 500}, {}],
    )
    def test_item_missing_fields_rejected(self, item):
        with pytest.raises(ValidationError):
            Sale(id=1, items=[item])

    def test_empty_sale(self):
        sale = Sale(id=1)
        assert sale.subtotal == 0
        assert sale.tax == 0
        assert sale.total == 0
        assert sale.customer_id is None

    def test_tax_rounds_half_up(self):
        # 1 x 25 -> 4.5 centavos of IGV
        assert Sale(id=1, items=[{"quantity": 1, "unit_price": 25}]).tax == 5
        # 1 x 24 -> 4.32 centavos
        assert Sale(id=1, items=[{"quantity": 1, "unit_price": 24}]).tax == 4

    def test_discount_is_idempotent(self, sample_sale):
        sample_sale.apply_discount(300)
        first = sample_sale.total
        sample_sale.apply_discount(300)
        assert sample_sale.total == first

    def test_discount_replaces_previous(self, sample_sale):
        sample_sale.apply_discount(300)
        sample_sale.apply_discount(100)
        assert sample_sale.total == sample_sale.subtotal + sample_sale.tax - 100

    def test_negative_discount_rejected(self, sample_sale):
        with pytest.raises(ValidationError):
            sample_sale.apply_discount(-1)
        assert sample_sale.discount == 0

    def test_total_identity_holds(self, sample_sale):
        for discount in (0, 1, 250, 3068):
            sample_sale.apply_discount(discount)
            assert sample_sale.total == (
                sample_sale.subtotal + sample_sale.tax - sample_sale.discount
            )

    def test_subtotal_is_exact_sum(self):
        items = [{"quantity": q, "unit_price": p} for q, p in [(3, 333), (7, 1), (1, 9_999_999)]]
        sale = Sale(id=1, items=items)
        assert sale.subtotal == 3 * 333 + 7 + 9_999_999

    def test_major_units(self, sample_sale):
        assert sample_sale.subtotal_major == Decimal("26")
        assert sample_sale.tax_major == Decimal("4.68")
        assert sample_sale.total_major == Decimal("30.68")

    def test_references_product(self, sample_sale):
        assert sample_sale.references_product(1) is True
        assert sample_sale.references_product(99) is False

    def test_derived_amounts_are_read_only(self, sample_sale):
        with pytest.raises(AttributeError):
            sample_sale.total = 1


class TestSaleImmutability:
    """Only the discount changes after a sale is built."""

    def test_items_cannot_be_reassigned(self, sample_sale):
        sample_sale.apply_discount(300)
        with pytest.raises(ValidationError) as exc_info:
            sample_sale.items = [SaleItem(quantity=1, unit_price=100)]
        assert exc_info.value.field == "items"
        assert sample_sale.subtotal == 2600
        assert sample_sale.total == 2600 + 468 - 300

    def test_items_cannot_be_appended(self, sample_sale):
        with pytest.raises(AttributeError):
            sample_sale.items.append({"quantity": 1, "unit_price": 500})
        assert sample_sale.subtotal == 2600

    def test_items_stored_as_tuple(self):
        sale = Sale(id=1, items=[{"quantity": 1, "unit_price": 100}])
        assert isinstance(sale.items, tuple)

    @pytest.mark.parametrize(
        "field,value",
        [("id", 2), ("customer_id", 7), ("date", datetime(2025, 2, 1))],
    )
    def test_identity_fields_frozen(self, sample_sale, field, value):
        original = getattr(sample_sale, field)
        with pytest.raises(ValidationError):
            setattr(sample_sale, field, value)
        assert getattr(sample_sale, field) == original

    def test_item_fields_frozen(self, sample_sale):
        with pytest.raises(ValidationError):
            sample_sale.items[0].quantity = 50
        assert sample_sale.items[0].quantity == 2
