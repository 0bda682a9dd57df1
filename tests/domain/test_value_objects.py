"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from marketplace.domain.exceptions import ErrorKind, ValidationError
from marketplace.domain.model.value_objects import Money, PageRequest


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

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    @pytest.mark.parametrize("raw", ["Infinity", "-Infinity", "NaN"])
    def test_non_finite_amount_rejected(self, raw):
        with pytest.raises(ValidationError, match="must be finite"):
            Money.of(raw)

    @pytest.mark.parametrize("raw", ["1e20", "1000000000000"])
    def test_amount_beyond_column_range_rejected(self, raw):
        with pytest.raises(ValidationError, match="cannot exceed"):
            Money.of(raw)

    def test_largest_storable_amount_allowed(self):
        assert Money.of("999999999999.99").amount == Decimal("999999999999.99")

    @pytest.mark.parametrize("raw", ["0.125", "10.001"])
    def test_sub_cent_amount_rejected(self, raw):
        with pytest.raises(ValidationError, match="2 decimal places"):
            Money.of(raw)

    def test_trailing_zeros_are_not_sub_cent(self):
        assert Money.of("1.500") == Money.of("1.50")

    def test_product_overflowing_range_rejected(self):
        with pytest.raises(ValidationError, match="cannot exceed"):
            Money.of("999999999999.99") * 2

    def test_zero_is_allowed(self):
        assert Money.of("0").is_zero

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("7.50") * 1.5

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("9.5")) == "$9.50"


# ── PageRequest ──────────────────────────────────────────────────────────────


class TestPageRequest:

    def test_offset(self):
        assert PageRequest(page=3, limit=10).offset == 20

    @pytest.mark.parametrize("page,limit", [(0, 10), (1, 0), (-1, 5), (1, -5)])
    def test_out_of_range_rejected(self, page, limit):
        with pytest.raises(ValidationError) as info:
            PageRequest(page=page, limit=limit)
        assert info.value.kind is ErrorKind.INVALID_ARGUMENT

    @pytest.mark.parametrize(
        "total,limit,expected",
        [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (25, 4, 7)],
    )
    def test_total_pages_is_ceiling(self, total, limit, expected):
        assert PageRequest(page=1, limit=limit).total_pages(total) == expected
