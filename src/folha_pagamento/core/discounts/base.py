"""Discount strategy contract."""

from abc import ABC, abstractmethod
from decimal import Decimal

from folha_pagamento.core.models.context import CalculationContext
from folha_pagamento.core.models.enums import DiscountKind


class DiscountStrategy(ABC):
    """A stateless discount computed over a :class:`CalculationContext`.

    Strategies run ascending by ``priority``. Those in the tax chain narrow
    the context's running taxable base themselves.
    """

    kind: DiscountKind
    priority: int

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def calculate(self, context: CalculationContext) -> Decimal:
        """Return the discount amount, rounded to cents."""

    def __repr__(self) -> str:
        return f"{self.name}(kind={self.kind.value}, priority={self.priority})"
