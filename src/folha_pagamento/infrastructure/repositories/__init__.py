"""Repository implementations."""

from folha_pagamento.infrastructure.repositories.memory import (
    InMemoryEmployeeRepository,
    InMemoryPayrollRepository,
)

__all__ = [
    "InMemoryEmployeeRepository",
    "InMemoryPayrollRepository",
]
