"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import (
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    Context,
    Decimal,
    InvalidOperation,
)
from enum import Enum

from shopcart.domain.exceptions import (
    CurrencyMismatchError,
    InvalidAmountError,
    InvalidDiscountError,
    InvalidQuantityError,
    ValidationError,
)


class Currency(Enum):
    """Supported currencies. The value is the human-readable label."""

    BRL = "Real Brasileiro"
    USD = "Dólar Americano"
    EUR = "Euro"

    @property
    def code(self) -> str:
        return self.name

    @property
    def label(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
DEFAULT_CURRENCY = Currency.BRL
MAX_DISCOUNT_PERCENT = Decimal("30")

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")
_CENT = Decimal("0.01")
_MIN_PRECISION = 28


def to_decimal(
    value: str | int | Decimal,
    error: type[ValidationError],
    label: str,
) -> Decimal:
    """Coerce *value* to an exact Decimal.

    Floats are refused outright: ``Decimal(0.1)`` carries the binary
    representation error we are trying to keep out of monetary sums.
    """
    if isinstance(value, (bool, float)) or not isinstance(value, (str, int, Decimal)):
        raise TypeError(
            f"{label} must be a str, int or Decimal, got {type(value).__name__}"
        )
    try:
        result = Decimal(value)
    except (InvalidOperation, ValueError) as exc:
        raise error(f"Invalid {label}: {value!r}") from exc
    if not result.is_finite():
        raise error(f"Invalid {label}: {value!r}")
    return result


def _exact_context(*values: Decimal) -> Context:
    """A context with enough precision that +, * and /100 on *values* never round.

    The default context keeps 28 significant digits; Money amounts are not
    bounded, so the precision is sized from the operands instead.
    """
    digits = 0
    for value in values:
        exponent = value.as_tuple().exponent
        digits += max(value.adjusted(), 0) - min(exponent, 0) + 1
    return Context(prec=max(digits + 3, _MIN_PRECISION))


def validate_discount_percent(percent: str | int | float | Decimal) -> Decimal:
    """Return *percent* as a Decimal, or raise if outside ``[0, 30]``.

    Floats are accepted here and converted through their shortest repr, so
    ``30.01`` means ``Decimal("30.01")``.
    """
    if isinstance(percent, float):
        percent = str(percent)
    result = to_decimal(percent, InvalidDiscountError, "discount percentage")
    if result < _ZERO:
        raise InvalidDiscountError(
            f"Discount percentage cannot be negative, got {result}"
        )
    if result > MAX_DISCOUNT_PERCENT:
        raise InvalidDiscountError(
            f"Discount cannot exceed {MAX_DISCOUNT_PERCENT}%, got {result}%"
        )
    return result


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.  Equality ignores the scale
    of the amount (``10.0 == 10.00``) and the hash agrees with it.
    """

    amount: Decimal
    currency: Currency = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise TypeError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not isinstance(self.currency, Currency):
            raise TypeError(
                f"Money currency must be a Currency, got {type(self.currency).__name__}"
            )
        if not self.amount.is_finite():
            raise InvalidAmountError(f"Money amount must be finite, got {self.amount}")
        if self.amount < _ZERO:
            raise InvalidAmountError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic -----------------------------------------------------------

    def add(self, other: Money) -> Money:
        self._assert_same_currency(other)
        ctx = _exact_context(self.amount, other.amount)
        return Money(ctx.add(self.amount, other.amount), self.currency)

    def multiply(self, factor: int) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        if factor <= 0:
            raise InvalidQuantityError(f"Multiplier must be positive, got {factor}")
        multiplier = Decimal(factor)
        ctx = _exact_context(self.amount, multiplier)
        return Money(ctx.multiply(self.amount, multiplier), self.currency)

    def apply_discount(self, percent: str | int | float | Decimal) -> Money:
        """Return this amount reduced by *percent* (0 to 30).

        Both the discount and the discounted amount are rounded to cents
        with ROUND_HALF_EVEN (banker's rounding).
        """
        rate = validate_discount_percent(percent)
        ctx = _exact_context(self.amount, rate, _HUNDRED)
        discount = ctx.divide(ctx.multiply(self.amount, rate), _HUNDRED).quantize(
            _CENT, rounding=ROUND_HALF_EVEN, context=ctx
        )
        result = ctx.subtract(self.amount, discount).quantize(
            _CENT, rounding=ROUND_HALF_EVEN, context=ctx
        )
        return Money(result, self.currency)

    def rounded(self) -> Money:
        """Round to cents, half-up. Used for display, not for discounts."""
        ctx = _exact_context(self.amount)
        return Money(
            self.amount.quantize(_CENT, rounding=ROUND_HALF_UP, context=ctx),
            self.currency,
        )

    def is_zero(self) -> bool:
        return self.amount == _ZERO

    def __add__(self, other: Money) -> Money:
        return self.add(other)

    def __mul__(self, factor: int) -> Money:
        return self.multiply(factor)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.currency.code} {self.amount:f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency is not other.currency:
            raise CurrencyMismatchError(
                f"Cannot combine {self.currency.code} with {other.currency.code}"
            )

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(
        amount: str | int | Decimal,
        currency: Currency = DEFAULT_CURRENCY,
    ) -> Money:
        """Convenient factory that coerces to Decimal exactly."""
        return Money(to_decimal(amount, InvalidAmountError, "money amount"), currency)
