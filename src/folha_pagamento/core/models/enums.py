"""Enumerations for payroll domain models."""

from enum import Enum


class UnhealthyLevel(str, Enum):
    """Grau de insalubridade."""

    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def _missing_(cls, value: object) -> "UnhealthyLevel | None":
        # Portuguese labels used by the HR front end
        aliases = {
            "nenhum": cls.NONE,
            "baixo": cls.LOW,
            "medio": cls.MEDIUM,
            "médio": cls.MEDIUM,
            "alto": cls.HIGH,
        }
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
            return aliases.get(normalized)
        return None


class DiscountKind(str, Enum):
    """Tag carried by every discount strategy.

    Mandatory kinds belong to the statutory tax chain and are summed into
    ``total_mandatory_discounts``; the others are routed to their own field.
    """

    INSS = "inss"
    IRRF = "irrf"
    TRANSPORT = "transport"

    @property
    def mandatory(self) -> bool:
        return self in (DiscountKind.INSS, DiscountKind.IRRF)
