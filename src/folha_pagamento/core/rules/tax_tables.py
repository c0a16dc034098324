"""Tax tables and flat rates for monthly payroll.

Values follow the Brazilian federal rules for each fiscal year.
Sources:
- INSS: Portaria Interministerial MPS/MF (annual contribution table)
- IRRF: https://www.gov.br/receitafederal/pt-br/assuntos/meu-imposto-de-renda/tabelas

Tables are immutable and looked up by year, so strategies never hard-code
a bracket. Adding a fiscal year means adding one ``TaxTable`` to ``TABLES``.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from folha_pagamento.core.models.enums import UnhealthyLevel
from folha_pagamento.shared.exceptions import UnsupportedYearError


class InssBracket(BaseModel):
    """INSS bracket: salary slice up to ``limit`` taxed at ``rate``."""

    limit: Decimal = Field(..., gt=0)
    rate: Decimal = Field(..., ge=0, lt=1)

    model_config = {"frozen": True}


class IrpfBracket(BaseModel):
    """IRRF bracket with its tabulated deduction parcel.

    ``limit`` is the inclusive upper bound of the bracket; ``None`` marks the
    open-ended top bracket.
    """

    limit: Optional[Decimal] = Field(default=None, gt=0)
    rate: Decimal = Field(..., ge=0, lt=1)
    deduction: Decimal = Field(default=Decimal("0"), ge=0)

    model_config = {"frozen": True}


class TaxTable(BaseModel):
    """All constants used by one fiscal year's payroll."""

    year: int = Field(..., description="Fiscal year")

    inss_brackets: tuple[InssBracket, ...] = Field(..., min_length=1)
    inss_ceiling: Optional[Decimal] = Field(
        default=None, gt=0, description="Maximum monthly INSS contribution"
    )

    irpf_brackets: tuple[IrpfBracket, ...] = Field(..., min_length=2)
    dependent_deduction: Decimal = Field(..., ge=0)

    minimum_wage: Decimal = Field(..., gt=0)
    fgts_rate: Decimal = Field(default=Decimal("0.08"))
    transport_cap_rate: Decimal = Field(default=Decimal("0.06"))
    dangerous_rate: Decimal = Field(default=Decimal("0.30"))
    unhealthy_rates: dict[UnhealthyLevel, Decimal] = Field(
        default_factory=lambda: {
            UnhealthyLevel.NONE: Decimal("0"),
            UnhealthyLevel.LOW: Decimal("0.10"),
            UnhealthyLevel.MEDIUM: Decimal("0.20"),
            UnhealthyLevel.HIGH: Decimal("0.40"),
        }
    )
    overtime_multiplier: Decimal = Field(default=Decimal("1.5"))
    weeks_per_month: Decimal = Field(default=Decimal("4.33"))

    @model_validator(mode="after")
    def check_brackets(self) -> "TaxTable":
        """Brackets must be ascending; only the last IRRF bracket is open-ended."""
        inss_limits = [b.limit for b in self.inss_brackets]
        if inss_limits != sorted(set(inss_limits)):
            raise ValueError("Faixas de INSS devem estar em ordem crescente")

        *closed, top = self.irpf_brackets
        if top.limit is not None or any(b.limit is None for b in closed):
            raise ValueError("Somente a última faixa de IRRF pode ser aberta")
        irpf_limits = [b.limit for b in closed]
        if irpf_limits != sorted(set(irpf_limits)):
            raise ValueError("Faixas de IRRF devem estar em ordem crescente")
        if closed[0].rate != 0:
            raise ValueError("Primeira faixa de IRRF deve ser isenta")
        return self

    @property
    def irpf_exemption_limit(self) -> Decimal:
        """Upper bound of the exempt IRRF bracket."""
        return self.irpf_brackets[0].limit  # type: ignore[return-value]

    def unhealthy_rate(self, level: UnhealthyLevel) -> Decimal:
        return self.unhealthy_rates.get(level, Decimal("0"))

    model_config = {"frozen": True}


# === 2024 ===

# Format: (limite, aliquota)
FAIXAS_INSS_2024 = (
    InssBracket(limit=Decimal("1412.00"), rate=Decimal("0.075")),  # até 1 salário mínimo
    InssBracket(limit=Decimal("2666.68"), rate=Decimal("0.09")),
    InssBracket(limit=Decimal("4000.03"), rate=Decimal("0.12")),
    InssBracket(limit=Decimal("7786.02"), rate=Decimal("0.14")),  # teto
)

# Format: (limite, aliquota, parcela a deduzir) - vigente a partir de fev/2024
FAIXAS_IRRF_2024 = (
    IrpfBracket(limit=Decimal("2259.20"), rate=Decimal("0"), deduction=Decimal("0")),  # Isento
    IrpfBracket(limit=Decimal("2826.65"), rate=Decimal("0.075"), deduction=Decimal("169.44")),
    IrpfBracket(limit=Decimal("3751.05"), rate=Decimal("0.15"), deduction=Decimal("381.44")),
    IrpfBracket(limit=Decimal("4664.68"), rate=Decimal("0.225"), deduction=Decimal("662.77")),
    IrpfBracket(limit=None, rate=Decimal("0.275"), deduction=Decimal("896.00")),
)

TABELA_2024 = TaxTable(
    year=2024,
    inss_brackets=FAIXAS_INSS_2024,
    inss_ceiling=Decimal("908.85"),
    irpf_brackets=FAIXAS_IRRF_2024,
    dependent_deduction=Decimal("189.59"),
    minimum_wage=Decimal("1412.00"),
)

# === 2025 ===

FAIXAS_INSS_2025 = (
    InssBracket(limit=Decimal("1518.00"), rate=Decimal("0.075")),
    InssBracket(limit=Decimal("2793.88"), rate=Decimal("0.09")),
    InssBracket(limit=Decimal("4190.83"), rate=Decimal("0.12")),
    InssBracket(limit=Decimal("8157.41"), rate=Decimal("0.14")),
)

# Vigente a partir de mai/2025 (MP 1.294/2025)
FAIXAS_IRRF_2025 = (
    IrpfBracket(limit=Decimal("2428.80"), rate=Decimal("0"), deduction=Decimal("0")),
    IrpfBracket(limit=Decimal("2826.65"), rate=Decimal("0.075"), deduction=Decimal("182.16")),
    IrpfBracket(limit=Decimal("3751.05"), rate=Decimal("0.15"), deduction=Decimal("394.16")),
    IrpfBracket(limit=Decimal("4664.68"), rate=Decimal("0.225"), deduction=Decimal("675.49")),
    IrpfBracket(limit=None, rate=Decimal("0.275"), deduction=Decimal("908.73")),
)

TABELA_2025 = TaxTable(
    year=2025,
    inss_brackets=FAIXAS_INSS_2025,
    irpf_brackets=FAIXAS_IRRF_2025,
    dependent_deduction=Decimal("189.59"),
    minimum_wage=Decimal("1518.00"),
)

TABLES: dict[int, TaxTable] = {
    TABELA_2024.year: TABELA_2024,
    TABELA_2025.year: TABELA_2025,
}


def get_tax_table(year: int) -> TaxTable:
    """Return the table in force for ``year``.

    Years after the newest table reuse the newest table.

    Raises:
        UnsupportedYearError: If ``year`` predates every known table.
    """
    candidates = [y for y in TABLES if y <= year]
    if not candidates:
        raise UnsupportedYearError(
            f"Tabela fiscal não disponível para {year}",
            {"year": year, "available": sorted(TABLES)},
        )
    return TABLES[max(candidates)]


def available_years() -> list[int]:
    return sorted(TABLES)
