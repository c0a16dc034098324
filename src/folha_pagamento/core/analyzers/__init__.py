"""Analysis engines over the payroll formulas."""

from folha_pagamento.core.analyzers.formula_equivalence import (
    EquivalenceReport,
    FormulaDivergence,
    FormulaEquivalenceAnalyzer,
)

__all__ = [
    "EquivalenceReport",
    "FormulaDivergence",
    "FormulaEquivalenceAnalyzer",
]
