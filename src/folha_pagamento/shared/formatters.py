"""Value formatters for display."""

from decimal import Decimal


def format_currency(value: Decimal, symbol: str = "R$") -> str:
    """
    Format decimal as Brazilian currency.

    Args:
        value: Decimal value to format
        symbol: Currency symbol (default: R$)

    Returns:
        Formatted string like "R$ 1.234,56"
    """
    negative = value < 0
    value = abs(value)

    formatted = f"{value:,.2f}"

    # Brazilian format: . for thousands, , for decimals
    formatted = formatted.replace(",", "X").replace(".", ",").replace("X", ".")

    result = f"{symbol} {formatted}"
    return f"-{result}" if negative else result


def format_rate(value: Decimal, decimals: int = 1) -> str:
    """
    Format a fractional rate as percentage.

    Args:
        value: Rate as fraction (e.g., 0.075 for 7,5%)
        decimals: Number of decimal places

    Returns:
        Formatted string like "7,5%"
    """
    formatted = f"{value * 100:.{decimals}f}".replace(".", ",")
    return f"{formatted}%"
