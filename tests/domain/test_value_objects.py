"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from shopcart.domain.exceptions import (
    CurrencyMismatchError,
    InvalidAmountError,
    InvalidDiscountError,
    InvalidQuantityError,
    ValidationError,
)
from shopcart.domain.model.value_objects import (
    DEFAULT_CURRENCY,
    Currency,
    Money,
    validate_discount_percent,
)


# ── Currency ─────────────────────────────────────────────────────────────────


class TestCurrency:

    def test_code_and_label(self):
        assert Currency.BRL.code == "BRL"
        assert Currency.BRL.label == "Real Brasileiro"
        assert Currency.EUR.label == "Euro"

    def test_default_is_brl(self):
        assert DEFAULT_CURRENCY is Currency.BRL


# ── Money construction ───────────────────────────────────────────────────────


class TestMoneyCreation:

    def test_creation(self):
        m = Money(Decimal("10.50"), Currency.USD)
        assert m.amount == Decimal("10.50")
        assert m.currency is Currency.USD

    def test_of_factory_from_string(self):
        m = Money.of("25.99", Currency.EUR)
        assert m.amount == Decimal("25.99")
        assert m.currency is Currency.EUR

    def test_of_factory_from_int(self):
        m = Money.of(10)
        assert m.amount == Decimal("10")
        assert m.currency is DEFAULT_CURRENCY

    @pytest.mark.parametrize("amount", ["0", "0.01", "2500.00", "123456789.123456789"])
    def test_of_preserves_amount_exactly(self, amount):
        assert Money.of(amount, Currency.USD).amount == Decimal(amount)

    def test_zero_allowed(self):
        assert Money.of(0).is_zero()

    @pytest.mark.parametrize("amount", ["-1", "-0.01", -5, Decimal("-100")])
    def test_negative_amount_rejected(self, amount):
        with pytest.raises(InvalidAmountError, match="cannot be negative"):
            Money.of(amount)

    def test_negative_amount_rejected_on_direct_construction(self):
        with pytest.raises(InvalidAmountError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_invalid_amount_is_a_validation_error(self):
        assert issubclass(InvalidAmountError, ValidationError)

    def test_unparseable_amount_rejected(self):
        with pytest.raises(InvalidAmountError, match="Invalid money amount"):
            Money.of("ten reais")

    @pytest.mark.parametrize("amount", ["NaN", "Infinity"])
    def test_non_finite_amount_rejected(self, amount):
        with pytest.raises(InvalidAmountError):
            Money.of(amount)

    def test_float_rejected(self):
        with pytest.raises(TypeError, match="got float"):
            Money.of(0.1)

    def test_direct_construction_requires_decimal(self):
        with pytest.raises(TypeError, match="must be a Decimal"):
            Money(10)  # type: ignore[arg-type]

    def test_currency_must_be_enum_member(self):
        with pytest.raises(TypeError, match="must be a Currency"):
            Money.of("10", "USD")  # type: ignore[arg-type]

    def test_is_immutable(self):
        m = Money.of("10")
        with pytest.raises(AttributeError):
            m.amount = Decimal("20")  # type: ignore[misc]


# ── Equality ─────────────────────────────────────────────────────────────────


class TestMoneyEquality:

    def test_equal_regardless_of_scale(self):
        assert Money.of("10.0") == Money.of("10.00")
        assert Money.of("100") == Money.of("100.00")

    def test_hash_consistent_with_equality(self):
        assert hash(Money.of("10.0")) == hash(Money.of("10.00"))
        assert len({Money.of("1"), Money.of("1.0"), Money.of("1.000")}) == 1

    def test_different_amounts_not_equal(self):
        assert Money.of("100.00") != Money.of("200.00")

    def test_different_currencies_not_equal(self):
        assert Money.of("10", Currency.USD) != Money.of("10", Currency.EUR)


# ── Arithmetic ───────────────────────────────────────────────────────────────


class TestMoneyArithmetic:

    def test_addition(self):
        result = Money.of("10").add(Money.of("5.50"))
        assert result == Money.of("15.50")

    def test_addition_operator(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_addition_is_exact(self):
        total = Money.of("0.1").add(Money.of("0.2"))
        assert total.amount == Decimal("0.3")

    def test_addition_is_commutative(self):
        a, b = Money.of("19.99"), Money.of("0.01")
        assert a.add(b) == b.add(a)

    def test_addition_is_associative(self):
        a, b, c = Money.of("1.10"), Money.of("2.20"), Money.of("3.30")
        assert a.add(b).add(c) == a.add(b.add(c))

    def test_addition_keeps_currency(self):
        result = Money.of("1", Currency.EUR).add(Money.of("2", Currency.EUR))
        assert result.currency is Currency.EUR

    def test_currency_mismatch_rejected(self):
        with pytest.raises(CurrencyMismatchError, match="Cannot combine USD with EUR"):
            Money.of("10", Currency.USD).add(Money.of("5", Currency.EUR))

    def test_multiplication_by_int(self):
        assert Money.of("10").multiply(3) == Money.of("30")
        assert Money.of("7.50") * 3 == Money.of("22.50")

    @pytest.mark.parametrize("factor", [0, -1])
    def test_non_positive_multiplier_rejected(self, factor):
        with pytest.raises(InvalidQuantityError, match="must be positive"):
            Money.of("10").multiply(factor)

    def test_non_int_multiplier_rejected(self):
        with pytest.raises(TypeError, match="multiply Money by int"):
            Money.of("10").multiply(1.5)  # type: ignore[arg-type]

    def test_operations_leave_operands_untouched(self):
        a = Money.of("10")
        a.add(Money.of("5"))
        a.multiply(2)
        a.apply_discount(10)
        assert a == Money.of("10")

    def test_large_sum_is_exact(self):
        total = Money.of("1234567890123456789012345678.9").add(Money.of("0.01"))
        assert total.amount == Decimal("1234567890123456789012345678.91")

    def test_large_product_is_exact(self):
        result = Money.of("99999999999999999999999999.99").multiply(3)
        assert result.amount == Decimal("299999999999999999999999999.97")


# ── Discount ─────────────────────────────────────────────────────────────────


class TestMoneyDiscount:

    def test_quarter_off(self):
        result = Money.of("100").apply_discount(25)
        assert result.amount == Decimal("75.00")
        assert str(result) == "BRL 75.00"

    def test_accepts_string_and_decimal_percent(self):
        assert Money.of("200.00").apply_discount("25") == Money.of("150.00")
        assert Money.of("200.00").apply_discount(Decimal("25")) == Money.of("150.00")

    def test_zero_percent_rounds_to_cents(self):
        assert str(Money.of("10").apply_discount(0)) == "BRL 10.00"

    def test_maximum_discount_accepted(self):
        assert Money.of("100").apply_discount(30) == Money.of("70")

    @pytest.mark.parametrize("percent", ["30.01", "31", -1, "-0.01"])
    def test_out_of_range_rejected(self, percent):
        with pytest.raises(InvalidDiscountError):
            Money.of("100").apply_discount(percent)

    def test_unparseable_percent_rejected(self):
        with pytest.raises(InvalidDiscountError, match="Invalid discount percentage"):
            Money.of("100").apply_discount("lots")

    def test_discount_rounds_half_to_even_down(self):
        # 1% of 2.50 is 0.025 -> 0.02 (half-up would give 0.03)
        assert Money.of("2.50").apply_discount(1).amount == Decimal("2.48")

    def test_discount_rounds_half_to_even_up(self):
        # 1% of 3.50 is 0.035 -> 0.04
        assert Money.of("3.50").apply_discount(1).amount == Decimal("3.46")

    def test_float_percent_accepted(self):
        assert Money.of("100").apply_discount(25.0).amount == Decimal("75.00")
        assert Money.of("100").apply_discount(12.5).amount == Decimal("87.50")

    @pytest.mark.parametrize("percent", [30.01, 40.0, -1.0])
    def test_float_percent_out_of_range_rejected(self, percent):
        with pytest.raises(InvalidDiscountError):
            Money.of("100").apply_discount(percent)

    def test_large_amount_discount(self):
        amount = "1" + "0" * 28
        result = Money.of(amount).apply_discount(10)
        assert result.amount == Decimal("9" + "0" * 27 + ".00")

    def test_large_amount_discount_rounds_half_to_even(self):
        # 1% of 1e28 + 0.50 is 1e26 + 0.005, whose half cent rounds down to even
        result = Money.of("1" + "0" * 28 + ".50").apply_discount(1)
        assert result.amount == Decimal("99" + "0" * 26 + ".50")

    def test_discount_result_keeps_currency(self):
        assert Money.of("10", Currency.USD).apply_discount(10).currency is Currency.USD


class TestValidateDiscountPercent:

    def test_returns_decimal(self):
        assert validate_discount_percent("15") == Decimal("15")

    def test_boundaries(self):
        assert validate_discount_percent(0) == Decimal("0")
        assert validate_discount_percent(30) == Decimal("30")

    def test_float_converted_through_repr(self):
        assert validate_discount_percent(30.0) == Decimal("30")
        assert validate_discount_percent(0.1) == Decimal("0.1")

    def test_float_above_maximum_rejected(self):
        with pytest.raises(InvalidDiscountError, match="cannot exceed 30%"):
            validate_discount_percent(30.01)

    def test_above_maximum_message(self):
        with pytest.raises(InvalidDiscountError, match="cannot exceed 30%"):
            validate_discount_percent(40)


# ── Display ──────────────────────────────────────────────────────────────────


class TestMoneyDisplay:

    def test_str_formatting(self):
        assert str(Money.of("2979.70")) == "BRL 2979.70"
        assert str(Money.of("9.5", Currency.USD)) == "USD 9.5"

    def test_rounded_is_half_up(self):
        assert Money.of("0.125").rounded().amount == Decimal("0.13")
        assert str(Money.of("9.5", Currency.USD).rounded()) == "USD 9.50"
