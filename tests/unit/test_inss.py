"""Tests for the INSS contribution."""

from decimal import Decimal

import pytest

from folha_pagamento.core.discounts import InssDiscountStrategy, calculate_inss
from folha_pagamento.core.models import DiscountKind
from folha_pagamento.core.rules import TABELA_2025


class TestCalculateInss:
    """Tests for the progressive bracket walk."""

    @pytest.mark.parametrize(
        "salary,expected",
        [
            ("1000.00", "75.00"),
            ("1412.00", "105.90"),
            ("3000.00", "258.82"),
            ("8000.00", "908.85"),
        ],
    )
    def test_known_values(self, table, salary, expected):
        """Test hand-checked 2024 contributions."""
        assert calculate_inss(Decimal(salary), table) == Decimal(expected)

    def test_ceiling_clamps_top_bracket(self, table):
        """Test the unclamped walk (908.8618) is cut to the published ceiling."""
        assert calculate_inss(Decimal("7786.02"), table) == Decimal("908.85")
        assert calculate_inss(Decimal("50000"), table) == Decimal("908.85")

    @pytest.mark.parametrize("salary", [None, Decimal("0"), Decimal("-100")])
    def test_non_positive_salary_is_zero(self, table, salary):
        """Test missing or non-positive salary yields no contribution."""
        assert calculate_inss(salary, table) == Decimal("0")

    def test_monotonic_and_bounded(self, table):
        """Test contribution never decreases and never exceeds the ceiling."""
        previous = Decimal("0")
        for cents in range(0, 1_000_000, 737):
            inss = calculate_inss(Decimal(cents) / 100, table)
            assert inss >= previous
            assert inss <= table.inss_ceiling
            previous = inss

    def test_2025_table_without_ceiling(self):
        """Test 2025 brackets: 113.85 + 114.83 + 24.73."""
        assert calculate_inss(Decimal("3000.00"), TABELA_2025) == Decimal("253.41")


class TestInssStrategy:
    """Tests for the INSS strategy."""

    def test_metadata(self):
        strategy = InssDiscountStrategy()
        assert strategy.kind == DiscountKind.INSS
        assert strategy.priority == 1
        assert strategy.name == "InssDiscountStrategy"

    def test_narrows_running_base(self, make_context):
        """Test the contribution is taken off the running base."""
        context = make_context("3000.00")

        result = InssDiscountStrategy().calculate(context)

        assert result == Decimal("258.82")
        assert context.running_taxable_base == Decimal("2741.18")

    def test_uses_gross_not_running_base(self, make_context):
        """Test pension does not change the contribution itself."""
        context = make_context("3000.00", pension_alimony=Decimal("500.00"))

        result = InssDiscountStrategy().calculate(context)

        assert result == Decimal("258.82")
        assert context.running_taxable_base == Decimal("2241.18")

    def test_zero_gross_leaves_base(self, make_context):
        context = make_context("0")

        assert InssDiscountStrategy().calculate(context) == Decimal("0")
        assert context.running_taxable_base == Decimal("0")
