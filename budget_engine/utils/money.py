"""Money rounding and display helpers"""

from decimal import Decimal, ROUND_HALF_UP

CENT = Decimal("0.01")

_PT_BR_SEPARATORS = str.maketrans(",.", ".,")


def quantize_money(value: Decimal) -> Decimal:
    """Round to 2 fractional digits (half up) for display"""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def format_currency(value: Decimal, symbol: str = "R$") -> str:
    """
    Format using pt-BR separators.

    Example:
        Decimal("1234.5") -> "R$ 1.234,50"
        Decimal("-3800")  -> "R$ -3.800,00"
    """
    formatted = f"{quantize_money(value):,.2f}".translate(_PT_BR_SEPARATORS)
    return f"{symbol} {formatted}"
