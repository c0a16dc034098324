"""Persistence ports consumed by the payroll services.

Implementations raise :class:`DataIntegrityError` when a second result is
stored for the same employee and month, and :class:`DatabaseConnectionError`
when the store is unreachable. The services let both propagate.
"""

from typing import Optional, Protocol

from folha_pagamento.core.models.employee import Employee
from folha_pagamento.core.models.payroll import PayrollResult


class EmployeeRepository(Protocol):
    def find_by_id(self, employee_id: int) -> Optional[Employee]: ...


class PayrollRepository(Protocol):
    def find_by_employee_and_month(
        self, employee_id: int, reference_month: str
    ) -> Optional[PayrollResult]: ...

    def find_by_employee(self, employee_id: int) -> list[PayrollResult]: ...

    def find_all(self) -> list[PayrollResult]: ...

    def save(self, result: PayrollResult) -> PayrollResult: ...
