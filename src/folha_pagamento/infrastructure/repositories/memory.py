"""In-memory implementations of the persistence ports."""

import itertools
import threading
from collections.abc import Iterable
from typing import Optional

from folha_pagamento.core.models.employee import Employee
from folha_pagamento.core.models.payroll import PayrollResult
from folha_pagamento.shared.exceptions import DataIntegrityError


class InMemoryEmployeeRepository:
    """Employee snapshots keyed by id."""

    def __init__(self, employees: Iterable[Employee] = ()):
        self._employees: dict[int, Employee] = {}
        for employee in employees:
            self.add(employee)

    def add(self, employee: Employee) -> None:
        if employee.id in self._employees:
            raise DataIntegrityError(
                f"Funcionário já cadastrado: {employee.id}",
                {"employeeId": employee.id},
            )
        self._employees[employee.id] = employee

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._employees.get(employee_id)

    def find_all(self) -> list[Employee]:
        return list(self._employees.values())


class InMemoryPayrollRepository:
    """Payroll results with a unique (employee, reference month) key.

    Writes are serialized by a lock so a concurrent duplicate insert fails
    with :class:`DataIntegrityError`, as a database unique index would.
    """

    def __init__(self) -> None:
        self._results: dict[tuple[int, str], PayrollResult] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def find_by_employee_and_month(
        self, employee_id: int, reference_month: str
    ) -> Optional[PayrollResult]:
        return self._results.get((employee_id, reference_month))

    def find_by_employee(self, employee_id: int) -> list[PayrollResult]:
        return [r for (emp, _), r in self._results.items() if emp == employee_id]

    def find_all(self) -> list[PayrollResult]:
        return list(self._results.values())

    def save(self, result: PayrollResult) -> PayrollResult:
        key = (result.employee_id, result.reference_month)
        with self._lock:
            if key in self._results:
                raise DataIntegrityError(
                    "Folha já registrada para o funcionário no mês",
                    {"employeeId": result.employee_id, "referenceMonth": result.reference_month},
                )
            stored = result.model_copy(update={"id": next(self._ids)})
            self._results[key] = stored
        return stored
