"""Employee snapshot consumed by the payroll pipeline."""

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from folha_pagamento.core.models.enums import UnhealthyLevel
from folha_pagamento.shared.validators import clean_cpf


class Employee(BaseModel):
    """Employee data as provided by the employee collaborator.

    Optional benefit and bonus fields may be left empty; the calculators
    treat a missing value as zero.
    """

    id: int = Field(..., description="Employee identifier")
    name: str = Field(default="", description="Full name")
    cpf: Optional[str] = Field(default=None, description="CPF (digits only)")
    admission_date: Optional[date] = Field(default=None)

    base_salary: Optional[Decimal] = Field(default=None, description="Monthly base salary")
    weekly_hours: Optional[int] = Field(default=None, gt=0)
    dependents: int = Field(default=0, ge=0, description="IRRF dependents")
    pension_alimony: Optional[Decimal] = Field(default=None, ge=0)

    # Benefits
    transport_voucher: bool = Field(default=False)
    transport_voucher_value: Optional[Decimal] = Field(default=None, ge=0)
    meal_voucher: bool = Field(default=False)
    meal_voucher_daily_value: Optional[Decimal] = Field(default=None, ge=0)
    worked_days: Optional[int] = Field(default=None, ge=0, le=31)
    health_plan: bool = Field(default=False)
    health_plan_value: Optional[Decimal] = Field(default=None, ge=0)
    dental_plan: bool = Field(default=False)
    dental_plan_value: Optional[Decimal] = Field(default=None, ge=0)
    gym: bool = Field(default=False)
    gym_value: Optional[Decimal] = Field(default=None, ge=0)

    # Bonuses
    dangerous_work: bool = Field(default=False, description="Periculosidade")
    unhealthy_level: UnhealthyLevel = Field(default=UnhealthyLevel.NONE)
    overtime_eligible: bool = Field(default=False)
    overtime_hours: Optional[Decimal] = Field(default=None, ge=0)

    @field_validator("cpf")
    @classmethod
    def validate_cpf_format(cls, v: Optional[str]) -> Optional[str]:
        """Validate CPF format (11 digits)."""
        if v is None:
            return None
        return clean_cpf(v)

    @field_validator("unhealthy_level", mode="before")
    @classmethod
    def default_unhealthy_level(cls, v: object) -> object:
        """Map a missing level to NONE and accept Portuguese labels."""
        if v is None or v == "":
            return UnhealthyLevel.NONE
        if isinstance(v, str):
            return UnhealthyLevel(v)
        return v

    model_config = {"frozen": True}
