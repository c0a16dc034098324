"""Decimal helpers for monetary amounts.

Every derived payroll figure is quantized to cents with ROUND_HALF_UP.
Binary floats are converted through ``str`` so no float artefacts leak in.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional, Union

CENTAVO = Decimal("0.01")
ZERO = Decimal("0")

Numeric = Union[Decimal, int, float, str]


def to_decimal(value: Optional[Numeric]) -> Decimal:
    """Convert a value to a finite Decimal, mapping None to zero."""
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, float):
        result = Decimal(repr(value))
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as e:
            raise ValueError(f"Valor monetário inválido: {value!r}") from e
    if not result.is_finite():
        raise ValueError(f"Valor monetário inválido: {value!r}")
    return result


def round_money(value: Decimal) -> Decimal:
    """Round to 2 decimal places, half-up."""
    return value.quantize(CENTAVO, rounding=ROUND_HALF_UP)


def nz(value: Optional[Decimal]) -> Decimal:
    """Defensive zero for optional amounts."""
    return ZERO if value is None else value
