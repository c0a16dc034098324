"""Payroll core: models, fiscal tables, discount chain and services."""
