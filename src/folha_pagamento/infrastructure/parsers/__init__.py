"""File parsers for employee data."""

from folha_pagamento.infrastructure.parsers.employee_file import (
    parse_employee_file,
    parse_employees,
)

__all__ = [
    "parse_employee_file",
    "parse_employees",
]
