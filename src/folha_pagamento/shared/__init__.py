"""Shared utilities for the payroll core."""

from folha_pagamento.shared.formatters import format_currency, format_rate
from folha_pagamento.shared.money import CENTAVO, ZERO, nz, round_money, to_decimal
from folha_pagamento.shared.validators import clean_cpf, parse_reference_month

__all__ = [
    # Money
    "CENTAVO",
    "ZERO",
    "nz",
    "round_money",
    "to_decimal",
    # Formatters
    "format_currency",
    "format_rate",
    # Validators
    "clean_cpf",
    "parse_reference_month",
]
