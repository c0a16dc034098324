"""Mutable state shared by the discount strategies of one payroll run."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from folha_pagamento.shared.money import ZERO

if TYPE_CHECKING:
    from folha_pagamento.core.rules.tax_tables import TaxTable


@dataclass
class CalculationContext:
    """Per-run calculation state.

    Created once per calculation and discarded afterwards. Strategies that
    belong to the tax chain read ``running_taxable_base`` and narrow it with
    :meth:`apply_discount`, so an earlier discount shrinks the base seen by
    a later one. The pension alimony is taken off the base on creation.
    """

    gross_salary: Optional[Decimal]
    table: "TaxTable"
    dependents: int = 0
    pension_alimony: Decimal = ZERO
    transport_voucher_enabled: bool = False
    transport_voucher_value: Optional[Decimal] = None
    running_taxable_base: Decimal = field(init=False)

    def __post_init__(self) -> None:
        if self.dependents < 0:
            raise ValueError("Número de dependentes não pode ser negativo")
        if self.pension_alimony is None:
            self.pension_alimony = ZERO
        self.running_taxable_base = self.gross_salary if self.gross_salary is not None else ZERO
        if self.pension_alimony > 0:
            self.apply_discount(self.pension_alimony)

    def apply_discount(self, amount: Decimal) -> None:
        """Subtract ``amount`` from the running taxable base."""
        if amount < 0:
            raise ValueError(f"Desconto negativo não pode ser aplicado: {amount}")
        self.running_taxable_base -= amount
