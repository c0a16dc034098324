"""Transport voucher (vale-transporte) co-payment."""

from decimal import Decimal
from typing import Optional

from folha_pagamento.core.discounts.base import DiscountStrategy
from folha_pagamento.core.models.context import CalculationContext
from folha_pagamento.core.models.enums import DiscountKind
from folha_pagamento.core.rules.tax_tables import TaxTable
from folha_pagamento.shared.money import ZERO, round_money


def calculate_transport_discount(
    gross_salary: Optional[Decimal],
    voucher_value: Optional[Decimal],
    table: TaxTable,
    enabled: bool = True,
) -> Decimal:
    """Employee share of the voucher: the voucher value capped at 6% of gross."""
    if not enabled or gross_salary is None or voucher_value is None:
        return ZERO

    cap = gross_salary * table.transport_cap_rate
    return round_money(max(min(voucher_value, cap), ZERO))


class TransportDiscountStrategy(DiscountStrategy):
    """Flat benefit cost-share; leaves the taxable base untouched."""

    kind = DiscountKind.TRANSPORT
    priority = 3

    def calculate(self, context: CalculationContext) -> Decimal:
        return calculate_transport_discount(
            context.gross_salary,
            context.transport_voucher_value,
            context.table,
            enabled=context.transport_voucher_enabled,
        )
