"""Calculators outside the discount chain."""

from folha_pagamento.core.calculators.bonus import BonusCalculator
from folha_pagamento.core.calculators.charges import calculate_fgts, plan_discount

__all__ = [
    "BonusCalculator",
    "calculate_fgts",
    "plan_discount",
]
