"""Cross-check of the two IRRF formulas over a salary range."""

from decimal import Decimal

from pydantic import BaseModel, Field

from folha_pagamento.core.discounts.inss import calculate_inss
from folha_pagamento.core.discounts.irrf import (
    find_bracket,
    irrf_taxable_base,
    parcel_residue,
    tax_by_deduction_parcel,
    tax_by_marginal_brackets,
)
from folha_pagamento.core.rules.tax_tables import TaxTable
from folha_pagamento.shared.money import ZERO, round_money


class FormulaDivergence(BaseModel):
    """A salary where the formulas round to different cents."""

    gross_salary: Decimal
    taxable_base: Decimal
    by_parcel: Decimal
    by_marginal: Decimal

    @property
    def difference(self) -> Decimal:
        return self.by_parcel - self.by_marginal


class EquivalenceReport(BaseModel):
    """Outcome of a sweep."""

    year: int
    checked: int = Field(default=0)
    unexplained: int = Field(
        default=0, description="Salaries whose gap differs from the bracket residue"
    )
    max_rounded_gap: Decimal = Field(default=ZERO)
    divergences: list[FormulaDivergence] = Field(default_factory=list)

    @property
    def equivalent(self) -> bool:
        """True when every gap is the tabulation residue and below one cent."""
        return self.unexplained == 0 and self.max_rounded_gap <= Decimal("0.01")


class FormulaEquivalenceAnalyzer:
    """Runs INSS then both IRRF formulas for every salary of a range.

    For each salary the unrounded gap between the deduction-parcel result
    and the marginal-bracket result must equal the residue of the bracket
    selected; the rounded results are recorded when they differ.
    """

    def __init__(self, table: TaxTable, dependents: int = 0):
        self.table = table
        self.dependents = dependents

    def analyze(
        self,
        start: Decimal = Decimal("0"),
        stop: Decimal = Decimal("20000"),
        step: Decimal = Decimal("1.00"),
    ) -> EquivalenceReport:
        if step <= 0:
            raise ValueError("Passo deve ser positivo")

        report = EquivalenceReport(year=self.table.year)
        salary = start
        while salary <= stop:
            self._check(salary, report)
            salary += step
        return report

    def _check(self, salary: Decimal, report: EquivalenceReport) -> None:
        report.checked += 1

        inss = calculate_inss(salary, self.table)
        base = irrf_taxable_base(salary - inss, self.dependents, self.table)
        by_parcel = tax_by_deduction_parcel(base, self.table)
        by_marginal = tax_by_marginal_brackets(base, self.table)

        expected_gap = ZERO
        if base > self.table.irpf_exemption_limit:
            expected_gap = parcel_residue(find_bracket(base, self.table), self.table)
        if by_parcel - by_marginal != expected_gap:
            report.unexplained += 1

        rounded_parcel = round_money(by_parcel)
        rounded_marginal = round_money(by_marginal)
        if rounded_parcel != rounded_marginal:
            gap = abs(rounded_parcel - rounded_marginal)
            report.max_rounded_gap = max(report.max_rounded_gap, gap)
            report.divergences.append(
                FormulaDivergence(
                    gross_salary=salary,
                    taxable_base=base,
                    by_parcel=rounded_parcel,
                    by_marginal=rounded_marginal,
                )
            )
