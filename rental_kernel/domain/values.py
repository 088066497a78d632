"""
Values -- Immutable, self-validating domain value objects.

Responsibility:
    Provides the monetary value type used for every charge the kernel
    computes. Amounts are always ``Decimal`` and always travel with their
    currency code.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.

Failure modes:
    - ValueError on construction with a float amount, an unparseable amount,
      or a malformed currency code.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    Context,
    Decimal,
    InvalidOperation,
    localcontext,
)


def validate_currency_code(code: str) -> str:
    """Normalize a three-letter currency code, raising ValueError if malformed."""
    normalized = code.upper().strip() if isinstance(code, str) else ""
    if len(normalized) != 3 or not normalized.isalpha():
        raise ValueError(f"Invalid currency code: {code!r}")
    return normalized


# Products of a Decimal and an int are never rounded under this context
_EXACT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)


@dataclass(frozen=True, slots=True)
class Money:
    """
    Monetary amount value object.

    Contract:
        Pairs a Decimal amount with its currency code -- they are NEVER
        separated.

    Guarantees:
        - Immutable and hashable (frozen dataclass with slots)
        - amount is always a Decimal (never float)
        - currency is always an uppercase three-letter code
        - Scaling by an integer is exact at any magnitude
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if isinstance(self.amount, float):
            raise ValueError("Money amount must not be a float")
        if not isinstance(self.amount, Decimal):
            try:
                object.__setattr__(self, "amount", Decimal(str(self.amount)))
            except (InvalidOperation, ValueError) as e:
                raise ValueError(f"Invalid amount: {self.amount}") from e
        object.__setattr__(self, "currency", validate_currency_code(self.currency))

    @classmethod
    def of(cls, amount: Decimal | str | int, currency: str = "USD") -> Money:
        """Factory method for creating Money."""
        return cls(amount=amount, currency=currency)

    @classmethod
    def zero(cls, currency: str = "USD") -> Money:
        return cls(amount=Decimal("0"), currency=currency)

    @property
    def is_negative(self) -> bool:
        return self.amount < 0

    def times(self, quantity: int) -> Money:
        """Scale this amount by an integer quantity, without rounding."""
        with localcontext(_EXACT):
            amount = self.amount * quantity
        return Money(amount=amount, currency=self.currency)

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"
