from unit_currency.domain.monetary.currency_code import CurrencyCode
from unit_currency.domain.monetary.currency_unit import CurrencyUnit


# Base currency
USD = CurrencyUnit("$", CurrencyCode.USD, 1.0)

# Coefficients are USD per 1 unit of the currency
EUR = CurrencyUnit("€", CurrencyCode.EUR, 1.123349)
GBP = CurrencyUnit("£", CurrencyCode.GBP, 1.25025)
RUR = CurrencyUnit("₽", CurrencyCode.RUR, 0.01587)
JPY = CurrencyUnit("¥", CurrencyCode.JPY, 0.009283)
AUD = CurrencyUnit("A$", CurrencyCode.AUD, 0.7042)
CAD = CurrencyUnit("C$", CurrencyCode.CAD, 0.764905)
AMD = CurrencyUnit("֏", CurrencyCode.AMD, 0.00209872)

# Register all predefined currencies
CurrencyUnit.register(USD)
CurrencyUnit.register(EUR)
CurrencyUnit.register(GBP)
CurrencyUnit.register(RUR)
CurrencyUnit.register(JPY)
CurrencyUnit.register(AUD)
CurrencyUnit.register(CAD)
CurrencyUnit.register(AMD)
