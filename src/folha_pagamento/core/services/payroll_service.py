"""Payroll orchestration: from an employee snapshot to a stored result."""

from collections.abc import Callable, Iterable
from datetime import datetime
from decimal import Decimal
from typing import Optional

from loguru import logger

from folha_pagamento.config import Settings, get_settings
from folha_pagamento.core.calculators.bonus import BonusCalculator
from folha_pagamento.core.calculators.charges import calculate_fgts, plan_discount
from folha_pagamento.core.discounts import DiscountStrategy, default_strategies
from folha_pagamento.core.models.context import CalculationContext
from folha_pagamento.core.models.employee import Employee
from folha_pagamento.core.models.enums import DiscountKind
from folha_pagamento.core.models.payroll import PayrollResult
from folha_pagamento.core.rules.tax_tables import TaxTable, get_tax_table
from folha_pagamento.core.services.repositories import EmployeeRepository, PayrollRepository
from folha_pagamento.shared.exceptions import InputValidationError, NotFoundError
from folha_pagamento.shared.money import ZERO, nz, round_money
from folha_pagamento.shared.validators import parse_reference_month


class PayrollService:
    """Computes and stores one employee's payroll for one reference month.

    The discount strategies are sorted once on construction and executed in
    that order for every run, each run over its own fresh context. The
    service holds no per-run state, so runs for different employee/month
    pairs may execute in parallel. Duplicate runs for the same pair are
    resolved by the idempotency lookup plus the store's uniqueness
    constraint.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        payrolls: PayrollRepository,
        strategies: Optional[Iterable[DiscountStrategy]] = None,
        settings: Optional[Settings] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.employees = employees
        self.payrolls = payrolls
        self.strategies = self._order_strategies(
            strategies if strategies is not None else default_strategies()
        )
        self.settings = settings or get_settings()
        self._clock = clock

    @staticmethod
    def _order_strategies(strategies: Iterable[DiscountStrategy]) -> tuple[DiscountStrategy, ...]:
        """Sort by priority, rejecting duplicate kinds and an IRRF ahead of INSS."""
        ordered = tuple(sorted(strategies, key=lambda s: s.priority))

        kinds = [s.kind for s in ordered]
        if len(kinds) != len(set(kinds)):
            raise ValueError(f"Estratégias de desconto duplicadas: {kinds}")

        by_kind = {s.kind: s for s in ordered}
        inss = by_kind.get(DiscountKind.INSS)
        irrf = by_kind.get(DiscountKind.IRRF)
        if inss is not None and irrf is not None and not inss.priority < irrf.priority:
            raise ValueError("INSS deve ser calculado antes do IRRF")

        return ordered

    def calculate_payroll(
        self,
        employee_id: int,
        reference_month: str,
        created_by: Optional[int] = None,
    ) -> PayrollResult:
        """Return the payroll for ``employee_id`` in ``reference_month``.

        An already stored result is returned unchanged. Otherwise the payroll
        is computed, persisted and the stored copy returned.

        Raises:
            InputValidationError: Malformed month, missing or non-positive base
                salary, or discounts that consume the whole gross salary.
            NotFoundError: Employee does not exist.
            PersistenceError: Propagated from the repositories.
        """
        period = parse_reference_month(reference_month)

        existing = self.payrolls.find_by_employee_and_month(employee_id, reference_month)
        if existing is not None:
            logger.info(
                "Folha já calculada para funcionário {} em {} (id={})",
                employee_id,
                reference_month,
                existing.id,
            )
            return existing

        employee = self.employees.find_by_id(employee_id)
        if employee is None:
            raise NotFoundError(
                f"Funcionário não encontrado: {employee_id}",
                {"employeeId": employee_id},
            )

        result = self.compute(
            employee,
            reference_month,
            table=get_tax_table(period.year),
            created_by=created_by,
        )
        saved = self.payrolls.save(result)
        logger.info(
            "Folha calculada para funcionário {} em {}: bruto={} líquido={}",
            employee_id,
            reference_month,
            saved.gross_salary,
            saved.net_salary,
        )
        return saved

    def compute(
        self,
        employee: Employee,
        reference_month: str,
        table: Optional[TaxTable] = None,
        created_by: Optional[int] = None,
    ) -> PayrollResult:
        """Compute the payroll without touching the store."""
        if table is None:
            table = get_tax_table(parse_reference_month(reference_month).year)

        base_salary = employee.base_salary
        if base_salary is None or base_salary <= 0:
            logger.warning(
                "Folha rejeitada para funcionário {} em {}: salário base {}",
                employee.id,
                reference_month,
                base_salary,
            )
            raise InputValidationError(
                "Salário base deve ser maior que zero",
                {"baseSalary": base_salary},
            )

        bonus = BonusCalculator(table)
        weekly_hours = employee.weekly_hours or self.settings.default_weekly_hours

        # Earnings
        hourly_wage = bonus.hourly_wage(base_salary, weekly_hours)
        dangerous = bonus.dangerous_bonus(base_salary, enabled=employee.dangerous_work)
        unhealthy = bonus.unhealthy_bonus(employee.unhealthy_level)
        overtime = bonus.overtime_value(
            hourly_wage, employee.overtime_hours, eligible=employee.overtime_eligible
        )
        gross = round_money(base_salary + dangerous + unhealthy + overtime)

        # Discount chain
        context = CalculationContext(
            gross_salary=gross,
            table=table,
            dependents=employee.dependents,
            pension_alimony=nz(employee.pension_alimony),
            transport_voucher_enabled=employee.transport_voucher,
            transport_voucher_value=employee.transport_voucher_value,
        )
        outcomes = self.run_discounts(context)
        mandatory = sum(
            (amount for kind, amount in outcomes.items() if kind.mandatory), ZERO
        )
        transport = outcomes.get(DiscountKind.TRANSPORT, ZERO)

        # Outside the chain
        fgts = calculate_fgts(gross, table)
        meal = (
            bonus.meal_voucher(
                employee.meal_voucher_daily_value,
                employee.worked_days
                if employee.worked_days is not None
                else self.settings.default_worked_days,
            )
            if employee.meal_voucher
            else ZERO
        )
        health = plan_discount(employee.health_plan, employee.health_plan_value)
        dental = plan_discount(employee.dental_plan, employee.dental_plan_value)
        gym = plan_discount(employee.gym, employee.gym_value)

        total_discounts = mandatory + transport + health + dental + gym
        if self.settings.deduct_fgts_from_net:
            total_discounts += fgts

        self._validate_totals(employee.id, reference_month, gross, total_discounts)

        return PayrollResult(
            employee_id=employee.id,
            reference_month=reference_month,
            gross_salary=gross,
            hourly_wage=hourly_wage,
            dangerous_bonus=dangerous,
            unhealthy_bonus=unhealthy,
            overtime_value=overtime,
            meal_voucher_value=meal,
            inss_discount=outcomes.get(DiscountKind.INSS, ZERO),
            irrf_discount=outcomes.get(DiscountKind.IRRF, ZERO),
            transport_discount=transport,
            fgts_value=fgts,
            health_plan_discount=health,
            dental_plan_discount=dental,
            gym_discount=gym,
            total_mandatory_discounts=round_money(mandatory),
            total_discounts=round_money(total_discounts),
            net_salary=round_money(gross - total_discounts),
            created_at=self._clock(),
            created_by=created_by,
        )

    def run_discounts(self, context: CalculationContext) -> dict[DiscountKind, Decimal]:
        """Execute every strategy in priority order over ``context``."""
        outcomes: dict[DiscountKind, Decimal] = {}
        for strategy in self.strategies:
            amount = strategy.calculate(context)
            outcomes[strategy.kind] = amount
            logger.debug(
                "{} = {} (base restante {})",
                strategy.name,
                amount,
                context.running_taxable_base,
            )
        return outcomes

    @staticmethod
    def _validate_totals(
        employee_id: int,
        reference_month: str,
        gross: Decimal,
        total_discounts: Decimal,
    ) -> None:
        """Reject the calculation instead of producing a non-positive net."""
        if gross <= 0:
            logger.warning(
                "Folha rejeitada para funcionário {} em {}: bruto {}",
                employee_id,
                reference_month,
                gross,
            )
            raise InputValidationError(
                "Salário bruto deve ser maior que zero",
                {"grossSalary": gross},
            )
        if total_discounts >= gross:
            logger.warning(
                "Folha rejeitada para funcionário {} em {}: descontos {} >= bruto {}",
                employee_id,
                reference_month,
                total_discounts,
                gross,
            )
            raise InputValidationError(
                "Descontos não podem ser maiores ou iguais ao salário bruto",
                {"grossSalary": gross, "totalDiscounts": total_discounts},
            )
