"""Domain models for payroll calculation."""

from folha_pagamento.core.models.context import CalculationContext
from folha_pagamento.core.models.employee import Employee
from folha_pagamento.core.models.enums import DiscountKind, UnhealthyLevel
from folha_pagamento.core.models.payroll import PayrollResult

__all__ = [
    "CalculationContext",
    "DiscountKind",
    "Employee",
    "PayrollResult",
    "UnhealthyLevel",
]
