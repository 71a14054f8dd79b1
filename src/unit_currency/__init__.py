__version__ = "0.0.1"

from unit_currency.domain.errors import DecodeFailure
from unit_currency.domain.monetary import CurrencyCode, CurrencyUnit, Measurement
from unit_currency.coding import KeyedArchiver, KeyedUnarchiver

__all__ = ["CurrencyCode", "CurrencyUnit", "DecodeFailure", "KeyedArchiver", "KeyedUnarchiver", "Measurement"]
