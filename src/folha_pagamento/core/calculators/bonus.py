"""Earnings additions: hourly wage, hazard, unhealthy, overtime, meal voucher."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from folha_pagamento.core.models.enums import UnhealthyLevel
from folha_pagamento.core.rules.tax_tables import TaxTable
from folha_pagamento.shared.money import CENTAVO, ZERO, round_money


class BonusCalculator:
    """Computes additions independent of the discount chain.

    Missing optional inputs resolve to zero instead of raising; only the
    core salary figures are validated by the payroll service.
    """

    def __init__(self, table: TaxTable):
        self.table = table

    def hourly_wage(self, salary: Optional[Decimal], weekly_hours: Optional[int]) -> Decimal:
        """Salary divided by monthly hours (weekly hours × weeks per month)."""
        if salary is None or salary <= 0 or not weekly_hours or weekly_hours <= 0:
            return ZERO
        monthly_hours = Decimal(weekly_hours) * self.table.weeks_per_month
        return (salary / monthly_hours).quantize(CENTAVO, rounding=ROUND_HALF_UP)

    def dangerous_bonus(self, base_salary: Optional[Decimal], enabled: bool = True) -> Decimal:
        """Adicional de periculosidade: 30% of base salary."""
        if not enabled or base_salary is None or base_salary <= 0:
            return ZERO
        return round_money(base_salary * self.table.dangerous_rate)

    def unhealthy_bonus(self, level: Optional[UnhealthyLevel]) -> Decimal:
        """Adicional de insalubridade: 10/20/40% of the minimum wage."""
        if level is None or level == UnhealthyLevel.NONE:
            return ZERO
        return round_money(self.table.minimum_wage * self.table.unhealthy_rate(level))

    def overtime_value(
        self,
        hourly_wage: Decimal,
        hours: Optional[Decimal],
        eligible: bool = True,
    ) -> Decimal:
        """Overtime hours paid at 150% of the hourly wage."""
        if not eligible or hours is None or hours <= 0 or hourly_wage <= 0:
            return ZERO
        return round_money(hourly_wage * self.table.overtime_multiplier * hours)

    def meal_voucher(self, daily_value: Optional[Decimal], worked_days: Optional[int]) -> Decimal:
        """Vale-alimentação: daily value × worked days."""
        if daily_value is None or daily_value <= 0 or not worked_days or worked_days <= 0:
            return ZERO
        return round_money(daily_value * worked_days)
