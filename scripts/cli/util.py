"""CLI utilities: formatting."""

from rental_kernel.domain.values import Money

_SYMBOLS = {"USD": "$"}


def fmt_amount(money: Money) -> str:
    """Format a charge for display (e.g. $300, $12.50, 300 EUR)."""
    d = money.amount
    text = f"{d:.0f}" if d == d.to_integral_value() else f"{d:.2f}"
    symbol = _SYMBOLS.get(money.currency)
    if symbol is None:
        return f"{text} {money.currency}"
    return f"{symbol}{text}"
