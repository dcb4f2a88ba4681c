"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, Quantity, ShippingAddress


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_int(self):
        assert Money.of(10).amount == Decimal("10")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten dollars")

    def test_zero_is_allowed(self):
        assert Money.zero().amount == Decimal("0")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(10.5)

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_multiplication(self):
        assert Money.of("10.00") * 3 == Money.of("30.00")

    def test_multiplication_by_non_int_rejected(self):
        with pytest.raises(TypeError):
            Money.of("10.00") * 1.5

    def test_currency_mismatch(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("1"), "USD") + Money(Decimal("1"), "EUR")

    def test_str_formats_two_decimals(self):
        assert str(Money.of("5")) == "$5.00"

    def test_equality_ignores_trailing_zeros(self):
        assert Money.of("20") == Money.of("20.00")


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid(self):
        assert Quantity(5).value == 5

    @pytest.mark.parametrize("value", [0, -1])
    def test_below_one_rejected(self, value):
        with pytest.raises(ValidationError, match="at least 1"):
            Quantity(value)

    def test_non_integer_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity("3")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError):
            Quantity(True)

    def test_addition(self):
        assert Quantity(2) + Quantity(3) == Quantity(5)


# ── ShippingAddress ──────────────────────────────────────────────────────────


class TestShippingAddress:

    def test_of_trims_fields(self):
        address = ShippingAddress.of(" 1 Main St ", "Springfield", "IL", "62701", "US")
        assert address.street == "1 Main St"

    def test_blank_field_rejected(self):
        with pytest.raises(ValidationError, match="Shipping city is required"):
            ShippingAddress.of("1 Main St", "  ", "IL", "62701", "US")

    def test_missing_zip_rejected(self):
        with pytest.raises(ValidationError, match="zip code"):
            ShippingAddress.of("1 Main St", "Springfield", "IL", "", "US")

    def test_str(self):
        address = ShippingAddress.of("1 Main St", "Springfield", "IL", "62701", "US")
        assert str(address) == "1 Main St, Springfield, IL 62701, US"
