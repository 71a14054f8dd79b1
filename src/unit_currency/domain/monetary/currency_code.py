from __future__ import annotations

from enum import Enum


class CurrencyCode(Enum):
    """ISO 4217 codes of the supported currencies.

    Each member's value is its own string form, which is also what gets persisted.
    """

    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    RUR = "RUR"
    JPY = "JPY"
    AUD = "AUD"
    CAD = "CAD"
    AMD = "AMD"

    @property
    def display_name(self) -> str:
        """Human readable currency name (e.g. "US Dollar")."""
        return _DISPLAY_NAMES[self]

    @classmethod
    def from_str(cls, code: str) -> CurrencyCode:
        """Map a code string back to its member.

        Args:
            code: Code string like "EUR". Surrounding whitespace and case are ignored.

        Returns:
            The matching member.

        Raises:
            TypeError: If $code is not a string.
            ValueError: If $code does not name a supported currency.
        """
        # Raise: only strings can be mapped back
        if not isinstance(code, str):
            raise TypeError(f"Cannot call `CurrencyCode.from_str` because $code is not str (got type '{type(code).__name__}')")

        normalized = code.strip().upper()
        try:
            return cls(normalized)
        except ValueError as e:
            raise ValueError(f"Cannot call `CurrencyCode.from_str` because $code ('{code}') is not supported. Available codes: {[member.value for member in cls]}") from e

    def __str__(self) -> str:
        return self.value


_DISPLAY_NAMES = {
    CurrencyCode.USD: "US Dollar",
    CurrencyCode.EUR: "Euro",
    CurrencyCode.GBP: "Pound Sterling",
    CurrencyCode.RUR: "Russian Ruble",
    CurrencyCode.JPY: "Japanese Yen",
    CurrencyCode.AUD: "Australian Dollar",
    CurrencyCode.CAD: "Canadian Dollar",
    CurrencyCode.AMD: "Armenian Dram",
}
