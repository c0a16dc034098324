"""Tests for bonus and employer-charge calculators."""

from decimal import Decimal

import pytest

from folha_pagamento.core.calculators import BonusCalculator, calculate_fgts, plan_discount
from folha_pagamento.core.models import UnhealthyLevel


@pytest.fixture
def bonus(table) -> BonusCalculator:
    return BonusCalculator(table)


class TestHourlyWage:
    """Tests for hourly wage."""

    def test_forty_hour_week(self, bonus):
        """Test 3000 / (40 × 4.33) = 17.32."""
        assert bonus.hourly_wage(Decimal("3000.00"), 40) == Decimal("17.32")

    def test_forty_four_hour_week(self, bonus):
        """Test 2000 / 190.52 = 10.4976 rounds to 10.50."""
        assert bonus.hourly_wage(Decimal("2000.00"), 44) == Decimal("10.50")

    @pytest.mark.parametrize(
        "salary,hours",
        [(None, 40), (Decimal("0"), 40), (Decimal("3000"), None), (Decimal("3000"), 0)],
    )
    def test_missing_inputs(self, bonus, salary, hours):
        assert bonus.hourly_wage(salary, hours) == Decimal("0")


class TestDangerousBonus:
    """Tests for adicional de periculosidade."""

    def test_thirty_percent(self, bonus):
        assert bonus.dangerous_bonus(Decimal("3000.00")) == Decimal("900.00")

    def test_disabled(self, bonus):
        assert bonus.dangerous_bonus(Decimal("3000.00"), enabled=False) == Decimal("0")

    def test_missing_base(self, bonus):
        assert bonus.dangerous_bonus(None) == Decimal("0")


class TestUnhealthyBonus:
    """Tests for adicional de insalubridade over the minimum wage."""

    @pytest.mark.parametrize(
        "level,expected",
        [
            (UnhealthyLevel.NONE, "0"),
            (UnhealthyLevel.LOW, "141.20"),
            (UnhealthyLevel.MEDIUM, "282.40"),
            (UnhealthyLevel.HIGH, "564.80"),
            (None, "0"),
        ],
    )
    def test_levels(self, bonus, level, expected):
        assert bonus.unhealthy_bonus(level) == Decimal(expected)


class TestOvertime:
    """Tests for overtime."""

    def test_time_and_a_half(self, bonus):
        """Test 17.32 × 1.5 × 10 = 259.80."""
        assert bonus.overtime_value(Decimal("17.32"), Decimal("10")) == Decimal("259.80")

    def test_not_eligible(self, bonus):
        assert bonus.overtime_value(Decimal("17.32"), Decimal("10"), eligible=False) == Decimal("0")

    @pytest.mark.parametrize("hours", [None, Decimal("0")])
    def test_no_hours(self, bonus, hours):
        assert bonus.overtime_value(Decimal("17.32"), hours) == Decimal("0")

    def test_no_hourly_wage(self, bonus):
        assert bonus.overtime_value(Decimal("0"), Decimal("10")) == Decimal("0")


class TestMealVoucher:
    """Tests for vale-alimentação."""

    def test_daily_value_times_days(self, bonus):
        assert bonus.meal_voucher(Decimal("35.00"), 22) == Decimal("770.00")

    @pytest.mark.parametrize("daily,days", [(None, 22), (Decimal("35"), 0), (Decimal("35"), None)])
    def test_missing_inputs(self, bonus, daily, days):
        assert bonus.meal_voucher(daily, days) == Decimal("0")


class TestFgts:
    """Tests for the FGTS employer charge."""

    def test_eight_percent(self, table):
        assert calculate_fgts(Decimal("3000.00"), table) == Decimal("240.00")

    def test_rounding(self, table):
        """Test 8% of 3039.90 = 243.192."""
        assert calculate_fgts(Decimal("3039.90"), table) == Decimal("243.19")

    @pytest.mark.parametrize("gross", [None, Decimal("0"), Decimal("-5")])
    def test_non_positive(self, table, gross):
        assert calculate_fgts(gross, table) == Decimal("0")


class TestPlanDiscount:
    """Tests for optional plan co-payments."""

    def test_enrolled(self):
        assert plan_discount(True, Decimal("150")) == Decimal("150.00")

    def test_not_enrolled(self):
        assert plan_discount(False, Decimal("150")) == Decimal("0")

    def test_missing_value(self):
        assert plan_discount(True, None) == Decimal("0")
