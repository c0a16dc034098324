"""Payroll result model."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class PayrollResult(BaseModel):
    """Holerite: every figure of one employee's payroll for one month.

    All monetary values are rounded half-up to cents. ``id`` is assigned by
    the persistence collaborator on save.
    """

    id: Optional[int] = Field(default=None, description="Assigned by the store")
    employee_id: int = Field(...)
    reference_month: str = Field(..., description="AAAA-MM")

    # Earnings
    gross_salary: Decimal = Field(..., description="Base salary plus bonuses")
    hourly_wage: Decimal = Field(default=Decimal("0.00"))
    dangerous_bonus: Decimal = Field(default=Decimal("0.00"))
    unhealthy_bonus: Decimal = Field(default=Decimal("0.00"))
    overtime_value: Decimal = Field(default=Decimal("0.00"))
    meal_voucher_value: Decimal = Field(default=Decimal("0.00"))

    # Discounts
    inss_discount: Decimal = Field(default=Decimal("0.00"))
    irrf_discount: Decimal = Field(default=Decimal("0.00"))
    transport_discount: Decimal = Field(default=Decimal("0.00"))
    fgts_value: Decimal = Field(default=Decimal("0.00"), description="Employer contribution")
    health_plan_discount: Decimal = Field(default=Decimal("0.00"))
    dental_plan_discount: Decimal = Field(default=Decimal("0.00"))
    gym_discount: Decimal = Field(default=Decimal("0.00"))

    total_mandatory_discounts: Decimal = Field(default=Decimal("0.00"))
    total_discounts: Decimal = Field(default=Decimal("0.00"))
    net_salary: Decimal = Field(...)

    # Audit
    created_at: Optional[datetime] = Field(default=None)
    created_by: Optional[int] = Field(default=None)

    @property
    def total_bonuses(self) -> Decimal:
        """Sum of hazard, unhealthy and overtime additions."""
        return self.dangerous_bonus + self.unhealthy_bonus + self.overtime_value

    @property
    def is_edge_case(self) -> bool:
        """True when gross is non-positive or discounts consume it entirely."""
        tracked = (
            self.inss_discount
            + self.irrf_discount
            + self.transport_discount
            + self.fgts_value
        )
        return self.gross_salary <= 0 or tracked >= self.gross_salary

    model_config = {"frozen": True}
