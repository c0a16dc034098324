"""Folha de pagamento: cálculo mensal de proventos, descontos e líquido."""

__version__ = "0.1.0"
