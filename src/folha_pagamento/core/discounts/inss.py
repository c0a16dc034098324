"""INSS employee contribution."""

from decimal import Decimal
from typing import Optional

from folha_pagamento.core.discounts.base import DiscountStrategy
from folha_pagamento.core.models.context import CalculationContext
from folha_pagamento.core.models.enums import DiscountKind
from folha_pagamento.core.rules.tax_tables import TaxTable
from folha_pagamento.shared.money import ZERO, round_money


def calculate_inss(salary: Optional[Decimal], table: TaxTable) -> Decimal:
    """Progressive INSS contribution over the full salary.

    Each bracket taxes only the slice of salary between the previous limit
    and its own; the walk stops when the salary is exhausted or the
    brackets run out. The total is clamped to the table's ceiling.
    """
    if salary is None or salary <= 0:
        return ZERO

    total = ZERO
    remaining = salary
    previous_limit = ZERO

    for bracket in table.inss_brackets:
        if remaining <= 0:
            break
        taxable = min(remaining, bracket.limit - previous_limit)
        total += taxable * bracket.rate
        remaining -= taxable
        previous_limit = bracket.limit

    if table.inss_ceiling is not None:
        total = min(total, table.inss_ceiling)

    return round_money(total)


class InssDiscountStrategy(DiscountStrategy):
    """Runs first, against gross salary, and narrows the IRRF base."""

    kind = DiscountKind.INSS
    priority = 1

    def calculate(self, context: CalculationContext) -> Decimal:
        inss = calculate_inss(context.gross_salary, context.table)
        if inss > 0:
            context.apply_discount(inss)
        return inss
