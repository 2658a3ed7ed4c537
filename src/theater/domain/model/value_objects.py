"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from theater.domain.exceptions import ValidationError

CENTS_PER_UNIT = 100

_CURRENCY_SYMBOLS = {
    "USD": "$",
    "CAD": "CA$",
    "EUR": "€",
    "GBP": "£",
}


def format_money(cents: int, currency: str = "USD") -> str:
    """Render an amount in minor units as a currency string.

    Uses U.S. numeric conventions: comma thousands separator, period
    decimal point, two decimal places (``123456`` -> ``$1,234.56``).
    """
    amount = Decimal(cents) / CENTS_PER_UNIT
    symbol = _CURRENCY_SYMBOLS.get(currency)
    if symbol is None:
        return f"{currency} {amount:,.2f}"
    return f"{symbol}{amount:,.2f}"


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Stored as an integer number of minor units (cents) so sums of
    line amounts are exact.
    """

    cents: int
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.cents, int) or isinstance(self.cents, bool):
            raise ValidationError(
                f"Money cents must be an int, got {type(self.cents).__name__}"
            )
        if self.cents < 0:
            raise ValidationError(
                f"Money amount cannot be negative, got {self.cents} cents"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.cents + other.cents, self.currency)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return format_money(self.cents, self.currency)

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def zero(currency: str = "USD") -> Money:
        return Money(0, currency)


@dataclass(frozen=True)
class Audience:
    """A non-negative seat count.

    Zero is allowed (an empty house is still billed the base amount).
    """

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Audience must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 0:
            raise ValidationError(f"Audience cannot be negative, got {self.value}")
