"""Employer charge (FGTS) and optional plan co-payments."""

from decimal import Decimal
from typing import Optional

from folha_pagamento.core.rules.tax_tables import TaxTable
from folha_pagamento.shared.money import ZERO, round_money


def calculate_fgts(gross_salary: Optional[Decimal], table: TaxTable) -> Decimal:
    """FGTS: 8% of the full gross salary, never of the reduced tax base."""
    if gross_salary is None or gross_salary <= 0:
        return ZERO
    return round_money(gross_salary * table.fgts_rate)


def plan_discount(enabled: bool, value: Optional[Decimal]) -> Decimal:
    """Health, dental or gym co-payment; zero when not enrolled."""
    if not enabled or value is None or value <= 0:
        return ZERO
    return round_money(value)
