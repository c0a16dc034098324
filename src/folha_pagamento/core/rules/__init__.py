"""Fiscal tables for payroll calculation."""

from folha_pagamento.core.rules.tax_tables import (
    TABELA_2024,
    TABELA_2025,
    TABLES,
    InssBracket,
    IrpfBracket,
    TaxTable,
    available_years,
    get_tax_table,
)

__all__ = [
    "TABELA_2024",
    "TABELA_2025",
    "TABLES",
    "InssBracket",
    "IrpfBracket",
    "TaxTable",
    "available_years",
    "get_tax_table",
]
