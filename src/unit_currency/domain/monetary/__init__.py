"""Monetary domain package.

This package models money as a unit of measure: a fixed catalog of currencies, each tied
to the base currency (USD) by a linear coefficient, and a `Measurement` that converts
amounts between them.
"""

from unit_currency.domain.monetary.currency_code import CurrencyCode
from unit_currency.domain.monetary.currency_unit import CurrencyUnit
from unit_currency.domain.monetary.currency_registry import USD, EUR, GBP, RUR, JPY, AUD, CAD, AMD
from unit_currency.domain.monetary.linear_unit import LinearUnit
from unit_currency.domain.monetary.measurement import Measurement

__all__ = ["CurrencyCode", "CurrencyUnit", "LinearUnit", "Measurement", "USD", "EUR", "GBP", "RUR", "JPY", "AUD", "CAD", "AMD"]
