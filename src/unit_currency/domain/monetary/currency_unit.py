from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, List

from unit_currency.domain.monetary.currency_code import CurrencyCode
from unit_currency.utils.float_tools import ieee_divide

if TYPE_CHECKING:
    from unit_currency.coding.protocol import KeyedDecoder, KeyedEncoder

logger = logging.getLogger(__name__)


class CurrencyUnit:
    """A unit of measure for money.

    Each currency is tied to the base currency (USD) by a single linear $coefficient:
    1 unit of this currency equals $coefficient USD. Amounts are converted between any two
    currencies by pivoting through USD, see `convert_value`.

    Two currencies are equal if their $code and $symbol match; $coefficient is not compared.
    If you create two currencies with equal codes and symbols but different coefficients,
    converting between them (or against the catalog constant) is undefined.

    Attributes:
        symbol (str): Display symbol (e.g., "$", "€").
        code (CurrencyCode): ISO 4217 code of the currency.
        coefficient (float): Amount of USD equal to 1 unit of this currency.
    """

    __slots__ = ("_symbol", "_code", "_coefficient")

    # Canonical instance per code, filled by `currency_registry` at import
    _registry: Dict[CurrencyCode, CurrencyUnit] = {}

    CODING_KEY = "code"

    def __init__(self, symbol: str, code: CurrencyCode, coefficient: float) -> None:
        """Initialize a currency with specified symbol, code and coefficient.

        No validation is performed: a non-empty $symbol and a positive $coefficient are the
        caller's responsibility.

        Args:
            symbol: The symbol used to represent the currency.
            code: A `CurrencyCode` of the currency.
            coefficient: Amount of USD equal to 1 unit of the currency.
        """
        self._symbol = symbol
        self._code = code
        self._coefficient = float(coefficient)

    # region Properties

    @property
    def symbol(self) -> str:
        """Get the currency symbol."""
        return self._symbol

    @property
    def code(self) -> CurrencyCode:
        """Get the currency code."""
        return self._code

    @property
    def coefficient(self) -> float:
        """Get the amount of USD equal to 1 unit of this currency."""
        return self._coefficient

    @property
    def name(self) -> str:
        return self._code.display_name

    # endregion

    # region Catalog

    @classmethod
    def base_unit(cls) -> CurrencyUnit:
        """Returns the base currency, which is `USD`."""
        return cls.from_code(CurrencyCode.USD)

    @classmethod
    def register(cls, unit: CurrencyUnit) -> None:
        """Register $unit as the canonical instance for its code.

        A registered canonical instance is never replaced, so the catalog constants (and the
        base currency) stay fixed for the process lifetime.

        Args:
            unit: The currency to register.

        Raises:
            TypeError: If $unit is not a `CurrencyUnit`.
            ValueError: If a currency with the same code is already registered.
        """
        # Raise: only currency units can be registered
        if not isinstance(unit, CurrencyUnit):
            raise TypeError(f"Cannot call `CurrencyUnit.register` because $unit is not CurrencyUnit (got type '{type(unit).__name__}')")

        # Raise: keep exactly one canonical instance per code
        if unit.code in cls._registry:
            raise ValueError(f"Cannot call `CurrencyUnit.register` because currency with $code '{unit.code}' is already registered as {cls._registry[unit.code]!r}")

        logger.debug(f"Registered currency {unit!r}")
        cls._registry[unit.code] = unit

    @classmethod
    def from_code(cls, code: CurrencyCode) -> CurrencyUnit:
        """Get the canonical currency for $code.

        Raises:
            ValueError: If no currency is registered for $code.
        """
        try:
            return cls._registry[code]
        except KeyError as e:
            raise ValueError(f"Cannot call `CurrencyUnit.from_code` because no currency is registered for $code '{code}'") from e

    @classmethod
    def from_str(cls, code: str) -> CurrencyUnit:
        """Get the canonical currency for a code string like "EUR".

        Raises:
            TypeError: If $code is not a string.
            ValueError: If $code is not a supported or registered currency code.
        """
        return cls.from_code(CurrencyCode.from_str(code))

    @classmethod
    def all_units(cls) -> List[CurrencyUnit]:
        """Return all registered canonical currencies in `CurrencyCode` order."""
        return [cls._registry[code] for code in CurrencyCode if code in cls._registry]

    # endregion

    # region Conversion

    def convert_value(self, value: float, to: CurrencyUnit) -> float:
        """Convert an amount of this currency into currency $to.

        Uses `amount * (self.coefficient / to.coefficient)`. If $to equals this currency the
        amount is returned unchanged. A zero $to.coefficient gives an infinite (or NaN) result.

        Args:
            value: Amount in this currency.
            to: Target currency.

        Returns:
            Amount in currency $to.
        """
        if to == self:
            return value

        return value * ieee_divide(self._coefficient, to.coefficient)

    # endregion

    # region Coding

    def encode(self, encoder: KeyedEncoder) -> None:
        """Write the currency code under the "code" key.

        Symbol and coefficient are not stored; decoding takes them from the catalog.
        """
        encoder.encode_str(self._code.value, self.CODING_KEY)

    @classmethod
    def decode(cls, decoder: KeyedDecoder) -> CurrencyUnit | None:
        """Rebuild a currency from the "code" key of $decoder.

        The stored string must match a code exactly (no case or whitespace folding). The result
        is the canonical catalog currency for that code.

        Returns:
            The currency, or None if the code is missing, unknown or not registered.
        """
        code_str = decoder.decode_str(cls.CODING_KEY)
        if code_str is None:
            logger.debug(f"Cannot decode CurrencyUnit because key '{cls.CODING_KEY}' is missing")
            return None

        try:
            return cls.from_code(CurrencyCode(code_str))
        except ValueError:
            logger.debug(f"Cannot decode CurrencyUnit because $code ('{code_str}') is not a known currency")
            return None

    # endregion

    # region Magic methods

    def __eq__(self, other) -> bool:
        """Check equality with another currency by $code and $symbol."""
        if not isinstance(other, CurrencyUnit):
            return False
        return self._code == other._code and self._symbol == other._symbol

    def __hash__(self) -> int:
        """Hash based on code and symbol."""
        return hash((self._code, self._symbol))

    def __str__(self) -> str:
        return self._code.value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self._symbol}', {self._code.value}, {self._coefficient})"

    # endregion
