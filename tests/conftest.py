"""Pytest configuration and fixtures."""

from datetime import datetime
from decimal import Decimal

import pytest

from folha_pagamento.config import Settings
from folha_pagamento.core.models import CalculationContext, Employee
from folha_pagamento.core.rules import TABELA_2024, TaxTable
from folha_pagamento.core.services import PayrollService
from folha_pagamento.infrastructure.repositories import (
    InMemoryEmployeeRepository,
    InMemoryPayrollRepository,
)

FIXED_NOW = datetime(2024, 6, 5, 9, 30)


@pytest.fixture
def table() -> TaxTable:
    """2024 fiscal table."""
    return TABELA_2024


@pytest.fixture
def make_context(table: TaxTable):
    """Factory for calculation contexts over the 2024 table."""

    def _make(gross: str, **kwargs) -> CalculationContext:
        return CalculationContext(gross_salary=Decimal(gross), table=table, **kwargs)

    return _make


@pytest.fixture
def settings() -> Settings:
    """Settings independent of the environment."""
    return Settings(
        _env_file=None,
        default_weekly_hours=40,
        default_worked_days=22,
        deduct_fgts_from_net=True,
    )


@pytest.fixture
def employee() -> Employee:
    """Employee earning R$ 3.000,00 with a R$ 150,00 transport voucher."""
    return Employee(
        id=1,
        name="Maria Souza",
        cpf="529.982.247-25",
        base_salary=Decimal("3000.00"),
        weekly_hours=40,
        transport_voucher=True,
        transport_voucher_value=Decimal("150.00"),
    )


@pytest.fixture
def employee_repo(employee: Employee) -> InMemoryEmployeeRepository:
    return InMemoryEmployeeRepository([employee])


@pytest.fixture
def payroll_repo() -> InMemoryPayrollRepository:
    return InMemoryPayrollRepository()


@pytest.fixture
def service(
    employee_repo: InMemoryEmployeeRepository,
    payroll_repo: InMemoryPayrollRepository,
    settings: Settings,
) -> PayrollService:
    return PayrollService(employee_repo, payroll_repo, settings=settings, clock=lambda: FIXED_NOW)
