"""Tests for the IRRF formula cross-check."""

from decimal import Decimal

import pytest

from folha_pagamento.core.analyzers import FormulaEquivalenceAnalyzer
from folha_pagamento.core.rules import TABELA_2024, TABELA_2025


class TestFormulaEquivalenceAnalyzer:
    """Sweeps of INSS + IRRF over the salary range."""

    @pytest.mark.parametrize("tax_table", [TABELA_2024, TABELA_2025], ids=["2024", "2025"])
    def test_full_range_is_equivalent(self, tax_table):
        """Test every gap from 0 to 20000 is the bracket residue, at most one cent."""
        report = FormulaEquivalenceAnalyzer(tax_table).analyze()

        assert report.year == tax_table.year
        assert report.checked == 20001
        assert report.unexplained == 0
        assert report.max_rounded_gap <= Decimal("0.01")
        assert report.equivalent

    def test_with_dependents(self, table):
        report = FormulaEquivalenceAnalyzer(table, dependents=2).analyze(
            stop=Decimal("10000"), step=Decimal("3.17")
        )

        assert report.unexplained == 0
        assert report.equivalent

    def test_records_known_divergence(self, table):
        """Test 8000 gross rounds to 1054.07 by parcel and 1054.06 by brackets."""
        report = FormulaEquivalenceAnalyzer(table).analyze(
            start=Decimal("7990"), stop=Decimal("8010")
        )

        divergence = next(d for d in report.divergences if d.gross_salary == Decimal("8000"))
        assert divergence.taxable_base == Decimal("7091.15")
        assert divergence.by_parcel == Decimal("1054.07")
        assert divergence.by_marginal == Decimal("1054.06")
        assert divergence.difference == Decimal("0.01")

    def test_divergences_are_single_cent(self, table):
        report = FormulaEquivalenceAnalyzer(table).analyze(stop=Decimal("12000"))

        assert report.divergences
        assert all(abs(d.difference) == Decimal("0.01") for d in report.divergences)

    def test_exempt_range_has_no_divergence(self, table):
        report = FormulaEquivalenceAnalyzer(table).analyze(stop=Decimal("2000"))

        assert report.checked == 2001
        assert report.divergences == []
        assert report.max_rounded_gap == Decimal("0")

    @pytest.mark.parametrize("step", [Decimal("0"), Decimal("-1")])
    def test_invalid_step(self, table, step):
        with pytest.raises(ValueError):
            FormulaEquivalenceAnalyzer(table).analyze(step=step)
