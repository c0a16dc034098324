"""IRRF (imposto de renda retido na fonte) withholding.

Two formulas compute the same progressive tax:

- ``tax_by_deduction_parcel``: ``base × rate − parcel`` using the parcel
  exactly as published in the table. This is what withholding agents apply
  and is the value the payroll uses.
- ``tax_by_marginal_brackets``: sums every bracket's slice at its own rate.

The published parcels are rounded to cents, so the two formulas differ by
the tabulation residue of the selected bracket (``parcel_residue``), always
less than one cent before rounding.
"""

from decimal import Decimal

from folha_pagamento.core.discounts.base import DiscountStrategy
from folha_pagamento.core.models.context import CalculationContext
from folha_pagamento.core.models.enums import DiscountKind
from folha_pagamento.core.rules.tax_tables import IrpfBracket, TaxTable
from folha_pagamento.shared.money import ZERO, round_money


def irrf_taxable_base(running_base: Decimal, dependents: int, table: TaxTable) -> Decimal:
    """Running taxable base minus the per-dependent deduction."""
    return running_base - table.dependent_deduction * dependents


def find_bracket(base: Decimal, table: TaxTable) -> int:
    """Index of the first bracket whose limit is >= ``base``.

    The top bracket has no limit and catches everything above.
    """
    for index, bracket in enumerate(table.irpf_brackets):
        if bracket.limit is None or base <= bracket.limit:
            return index
    return len(table.irpf_brackets) - 1


def tax_by_deduction_parcel(base: Decimal, table: TaxTable) -> Decimal:
    """Unrounded tax via the tabulated deduction parcel, floored at zero."""
    if base <= table.irpf_exemption_limit:
        return ZERO
    bracket = table.irpf_brackets[find_bracket(base, table)]
    return max(base * bracket.rate - bracket.deduction, ZERO)


def tax_by_marginal_brackets(base: Decimal, table: TaxTable) -> Decimal:
    """Unrounded tax by summing each bracket's slice at its marginal rate."""
    if base <= table.irpf_exemption_limit:
        return ZERO

    total = ZERO
    lower = ZERO
    for bracket in table.irpf_brackets:
        upper = base if bracket.limit is None else min(base, bracket.limit)
        if upper > lower:
            total += (upper - lower) * bracket.rate
        if bracket.limit is None or base <= bracket.limit:
            break
        lower = bracket.limit
    return total


def exact_parcel(index: int, table: TaxTable) -> Decimal:
    """Deduction parcel derived from the lower brackets, without rounding.

    ``parcel[i] = parcel[i-1] + limit[i-1] × (rate[i] − rate[i-1])``
    """
    brackets: tuple[IrpfBracket, ...] = table.irpf_brackets
    parcel = ZERO
    for i in range(1, index + 1):
        parcel += brackets[i - 1].limit * (brackets[i].rate - brackets[i - 1].rate)  # type: ignore[operator]
    return parcel


def parcel_residue(index: int, table: TaxTable) -> Decimal:
    """Exact parcel minus tabulated parcel for bracket ``index``."""
    return exact_parcel(index, table) - table.irpf_brackets[index].deduction


def calculate_irrf(running_base: Decimal, dependents: int, table: TaxTable) -> Decimal:
    """IRRF due for a base already reduced by INSS and pension alimony."""
    base = irrf_taxable_base(running_base, dependents, table)
    return round_money(tax_by_deduction_parcel(base, table))


class IrrfDiscountStrategy(DiscountStrategy):
    """Runs after INSS, on the base INSS already narrowed."""

    kind = DiscountKind.IRRF
    priority = 2

    def calculate(self, context: CalculationContext) -> Decimal:
        if context.running_taxable_base <= 0:
            return ZERO
        tax = calculate_irrf(context.running_taxable_base, context.dependents, context.table)
        if tax > 0:
            context.apply_discount(tax)
        return tax
