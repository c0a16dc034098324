"""Read-side queries over stored payroll results."""

from collections import defaultdict
from decimal import Decimal
from typing import Optional

from folha_pagamento.core.models.payroll import PayrollResult
from folha_pagamento.core.services.repositories import PayrollRepository
from folha_pagamento.shared.money import ZERO


class PayrollQueryService:
    """History, filters and audit views used by reports and dashboards."""

    def __init__(self, payrolls: PayrollRepository):
        self.payrolls = payrolls

    def employee_payrolls(self, employee_id: int) -> list[PayrollResult]:
        """All results for one employee, oldest month first."""
        results = [
            p for p in self.payrolls.find_by_employee(employee_id)
            if p is not None and p.employee_id == employee_id
        ]
        return sorted(results, key=lambda p: p.reference_month)

    def all_payrolls(self) -> list[PayrollResult]:
        return [p for p in self.payrolls.find_all() if p is not None]

    def filter_by_net_salary(
        self,
        minimum: Optional[Decimal] = None,
        maximum: Optional[Decimal] = None,
    ) -> list[PayrollResult]:
        """Results whose net salary lies within the inclusive bounds."""
        return [
            p
            for p in self.all_payrolls()
            if (minimum is None or p.net_salary >= minimum)
            and (maximum is None or p.net_salary <= maximum)
        ]

    def group_by_month(self) -> dict[str, list[PayrollResult]]:
        grouped: dict[str, list[PayrollResult]] = defaultdict(list)
        for payroll in self.all_payrolls():
            grouped[payroll.reference_month].append(payroll)
        return dict(sorted(grouped.items()))

    def find_edge_cases(self) -> list[PayrollResult]:
        """Results with non-positive gross or discounts consuming all of it.

        The payroll service never produces these; they flag records written
        by other systems into the same store.
        """
        return [p for p in self.all_payrolls() if p.is_edge_case]

    def total_discounts_for_employee(self, employee_id: int) -> Decimal:
        """INSS + IRRF + transport + FGTS across the employee's history."""
        return sum(
            (
                p.inss_discount + p.irrf_discount + p.transport_discount + p.fgts_value
                for p in self.employee_payrolls(employee_id)
            ),
            ZERO,
        )
