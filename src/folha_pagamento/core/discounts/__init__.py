"""Discount strategies applied over a calculation context."""

from folha_pagamento.core.discounts.base import DiscountStrategy
from folha_pagamento.core.discounts.inss import InssDiscountStrategy, calculate_inss
from folha_pagamento.core.discounts.irrf import (
    IrrfDiscountStrategy,
    calculate_irrf,
    exact_parcel,
    find_bracket,
    irrf_taxable_base,
    parcel_residue,
    tax_by_deduction_parcel,
    tax_by_marginal_brackets,
)
from folha_pagamento.core.discounts.transport import (
    TransportDiscountStrategy,
    calculate_transport_discount,
)


def default_strategies() -> tuple[DiscountStrategy, ...]:
    """Standard payroll chain: INSS, IRRF, transport voucher."""
    return (
        InssDiscountStrategy(),
        IrrfDiscountStrategy(),
        TransportDiscountStrategy(),
    )


__all__ = [
    "DiscountStrategy",
    "InssDiscountStrategy",
    "IrrfDiscountStrategy",
    "TransportDiscountStrategy",
    "calculate_inss",
    "calculate_irrf",
    "calculate_transport_discount",
    "default_strategies",
    "exact_parcel",
    "find_bracket",
    "irrf_taxable_base",
    "parcel_residue",
    "tax_by_deduction_parcel",
    "tax_by_marginal_brackets",
]
