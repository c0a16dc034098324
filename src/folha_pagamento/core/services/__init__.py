"""Domain services for payroll calculation."""

from folha_pagamento.core.services.payroll_queries import PayrollQueryService
from folha_pagamento.core.services.payroll_service import PayrollService
from folha_pagamento.core.services.repositories import EmployeeRepository, PayrollRepository

__all__ = [
    "EmployeeRepository",
    "PayrollQueryService",
    "PayrollRepository",
    "PayrollService",
]
