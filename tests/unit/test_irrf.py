"""Tests for IRRF withholding."""

from decimal import Decimal

import pytest

from folha_pagamento.core.discounts import (
    InssDiscountStrategy,
    IrrfDiscountStrategy,
    calculate_irrf,
    exact_parcel,
    find_bracket,
    irrf_taxable_base,
    parcel_residue,
    tax_by_deduction_parcel,
    tax_by_marginal_brackets,
)
from folha_pagamento.core.models import DiscountKind
from folha_pagamento.shared.money import round_money


def _run_chain(context):
    inss = InssDiscountStrategy().calculate(context)
    irrf = IrrfDiscountStrategy().calculate(context)
    return inss, irrf


class TestFindBracket:
    """Tests for bracket selection."""

    @pytest.mark.parametrize(
        "base,index",
        [
            ("0", 0),
            ("2259.20", 0),
            ("2259.21", 1),
            ("2826.65", 1),
            ("2826.66", 2),
            ("4664.68", 3),
            ("4664.69", 4),
            ("100000", 4),
        ],
    )
    def test_inclusive_upper_limits(self, table, base, index):
        assert find_bracket(Decimal(base), table) == index


class TestDeductionParcel:
    """Tests for the tabulated-parcel formula."""

    def test_exempt_at_limit(self, table):
        """Test base equal to the exemption limit pays nothing."""
        assert tax_by_deduction_parcel(Decimal("2259.20"), table) == Decimal("0")

    def test_just_above_exemption(self, table):
        """Test the first cent above the limit rounds to zero tax."""
        tax = tax_by_deduction_parcel(Decimal("2259.21"), table)
        assert tax > 0
        assert round_money(tax) == Decimal("0.00")

    def test_negative_base(self, table):
        assert tax_by_deduction_parcel(Decimal("-50"), table) == Decimal("0")

    def test_taxable_base_subtracts_dependents(self, table):
        assert irrf_taxable_base(Decimal("2741.18"), 2, table) == Decimal("2362.00")


class TestMarginalBrackets:
    """Tests for the bracket-walk formula."""

    def test_top_bracket(self, table):
        """Test 8000 gross: base 7091.15, parcel 1054.07 vs marginal 1054.06."""
        base = Decimal("7091.15")

        by_parcel = tax_by_deduction_parcel(base, table)
        by_marginal = tax_by_marginal_brackets(base, table)

        assert round_money(by_parcel) == Decimal("1054.07")
        assert round_money(by_marginal) == Decimal("1054.06")
        assert by_parcel - by_marginal == parcel_residue(4, table)

    def test_matches_parcel_in_second_bracket(self, table):
        """Test the second bracket's parcel is exact."""
        base = Decimal("2741.18")
        assert tax_by_marginal_brackets(base, table) == tax_by_deduction_parcel(base, table)

    def test_exempt(self, table):
        assert tax_by_marginal_brackets(Decimal("1000"), table) == Decimal("0")


class TestParcelResidue:
    """Tests for tabulation residues of the 2024 table."""

    def test_exact_parcels(self, table):
        assert exact_parcel(0, table) == Decimal("0")
        assert exact_parcel(1, table) == Decimal("169.44")
        assert exact_parcel(4, table) == Decimal("896.0015")

    def test_residues(self, table):
        assert parcel_residue(1, table) == Decimal("0")
        assert parcel_residue(2, table) == Decimal("-0.00125")
        assert parcel_residue(3, table) == Decimal("-0.0025")
        assert parcel_residue(4, table) == Decimal("0.0015")

    def test_residues_under_one_cent(self, table):
        for index in range(len(table.irpf_brackets)):
            assert abs(parcel_residue(index, table)) < Decimal("0.01")


class TestCalculateIrrf:
    """Tests for the rounded withholding."""

    @pytest.mark.parametrize(
        "running_base,dependents,expected",
        [
            ("2741.18", 0, "36.15"),
            ("2741.18", 2, "7.71"),
            ("2741.18", 3, "0.00"),
            ("7091.15", 0, "1054.07"),
        ],
    )
    def test_known_values(self, table, running_base, dependents, expected):
        assert calculate_irrf(Decimal(running_base), dependents, table) == Decimal(expected)


class TestIrrfStrategy:
    """Tests for the IRRF strategy inside the chain."""

    def test_metadata(self):
        strategy = IrrfDiscountStrategy()
        assert strategy.kind == DiscountKind.IRRF
        assert strategy.priority == 2

    def test_runs_on_base_after_inss(self, make_context):
        """Test IRRF sees gross minus INSS."""
        context = make_context("3000.00")

        inss, irrf = _run_chain(context)

        assert inss == Decimal("258.82")
        assert irrf == Decimal("36.15")
        assert context.running_taxable_base == Decimal("2705.03")

    def test_dependents(self, make_context):
        context = make_context("3000.00", dependents=2)

        _, irrf = _run_chain(context)

        assert irrf == Decimal("7.71")

    def test_pension_reduces_base(self, make_context):
        """Test pension alimony comes off the base before INSS: 2441.18 taxable."""
        context = make_context("3000.00", pension_alimony=Decimal("300.00"))

        _, irrf = _run_chain(context)

        assert irrf == Decimal("13.65")

    def test_exempt_salary_leaves_base(self, make_context):
        context = make_context("2000.00")

        inss, irrf = _run_chain(context)

        assert irrf == Decimal("0")
        assert context.running_taxable_base == Decimal("2000.00") - inss

    def test_non_positive_base(self, make_context):
        """Test a pension larger than gross yields no tax."""
        context = make_context("1000.00", pension_alimony=Decimal("1500.00"))

        assert IrrfDiscountStrategy().calculate(context) == Decimal("0")
        assert context.running_taxable_base == Decimal("-500.00")
