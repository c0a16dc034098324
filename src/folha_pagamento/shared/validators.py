"""Validators for payroll inputs."""

import re
from datetime import date

from folha_pagamento.shared.exceptions import InputValidationError

_REFERENCE_MONTH = re.compile(r"^(\d{4})-(\d{2})$")


def parse_reference_month(value: str) -> date:
    """Parse a "YYYY-MM" reference month into the first day of that month.

    Raises:
        InputValidationError: If the value is not a valid year-month.
    """
    match = _REFERENCE_MONTH.match(value.strip()) if value else None
    if not match:
        raise InputValidationError(
            "Mês de referência deve estar no formato AAAA-MM",
            {"referenceMonth": value},
        )
    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        raise InputValidationError(
            f"Mês de referência inválido: {value}",
            {"referenceMonth": value},
        )
    return date(year, month, 1)


def clean_cpf(cpf: str) -> str:
    """Strip formatting from a CPF, requiring 11 digits."""
    digits = "".join(filter(str.isdigit, cpf))
    if len(digits) != 11:
        raise ValueError("CPF deve ter 11 dígitos")
    return digits
