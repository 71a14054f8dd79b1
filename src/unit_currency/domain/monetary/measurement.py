from __future__ import annotations

from typing import TYPE_CHECKING

from unit_currency.domain.errors import DecodeFailure
from unit_currency.domain.monetary.currency_unit import CurrencyUnit
from unit_currency.domain.monetary.linear_unit import LinearUnit
from unit_currency.utils.float_tools import FloatLike, ieee_divide

if TYPE_CHECKING:
    from unit_currency.coding.protocol import KeyedDecoder, KeyedEncoder


class Measurement:
    """Represents a numeric amount together with its unit.

    The amount is a plain float; no rounding to currency precision is applied. Arithmetic and
    ordering require both operands to share the same unit, use `convert` or `converted` first.

    Measurements are mutable (see `convert`) and therefore not hashable.
    """

    __slots__ = ("_value", "_unit")

    VALUE_KEY = "value"
    UNIT_KEY = "unit"

    def __init__(self, value: FloatLike, unit: LinearUnit):
        """Initialize Measurement with value and unit.

        Args:
            value: Numeric amount (float-like scalar).
            unit: Unit of the amount, typically a `CurrencyUnit`.

        Raises:
            ValueError: If $value cannot be converted to float.
            TypeError: If $unit does not provide `coefficient` and `base_unit`.
        """
        # Raise: unit must support linear conversion
        if not isinstance(unit, LinearUnit):
            raise TypeError(f"Cannot init `Measurement` because $unit is not LinearUnit (got type '{type(unit).__name__}')")

        # Raise: $value must be convertible to float
        try:
            float_value = float(value)
        except (ValueError, TypeError) as e:
            raise ValueError(f"Cannot init `Measurement` because $value ({value}) cannot be converted to float") from e

        self._value = float_value
        self._unit = unit

    @property
    def value(self) -> float:
        """Get the amount."""
        return self._value

    @property
    def unit(self) -> LinearUnit:
        """Get the unit."""
        return self._unit

    # region Conversion

    def convert(self, to: LinearUnit) -> None:
        """Convert this measurement in place into unit $to.

        The amount is rescaled by `self.unit.coefficient / to.coefficient` and the unit is
        replaced. If $to equals the current unit only the unit is replaced and the amount is kept.

        Args:
            to: Target unit.

        Raises:
            ValueError: If $to does not share the base unit of the current unit.
        """
        if to == self._unit:
            self._unit = to
            return

        # Raise: conversion pivots through the base unit, so both units must share it
        if to.base_unit() != self._unit.base_unit():
            raise ValueError(f"Cannot call `convert` because $to ({to}) and $unit ({self._unit}) have different base units")

        self._value = self._value * ieee_divide(self._unit.coefficient, to.coefficient)
        self._unit = to

    def converted(self, to: LinearUnit) -> Measurement:
        """Return a new measurement in unit $to, leaving this one untouched."""
        result = self.__class__(self._value, self._unit)
        result.convert(to)
        return result

    def _check_same_unit(self, other: Measurement) -> None:
        """Check if two measurements have the same unit.

        Raises:
            ValueError: If units don't match.
        """
        if self._unit != other._unit:
            raise ValueError(f"Cannot operate on different units: {self._unit} and {other._unit}")

    # endregion

    # region Coding

    def encode(self, encoder: KeyedEncoder) -> None:
        """Write the amount (as its repr string) and the nested unit."""
        encoder.encode_str(repr(self._value), self.VALUE_KEY)
        encoder.encode_object(self._unit, self.UNIT_KEY)

    @classmethod
    def decode(cls, decoder: KeyedDecoder) -> Measurement | None:
        """Rebuild a currency measurement, or return None if any field is missing or invalid."""
        value_str = decoder.decode_str(cls.VALUE_KEY)
        if value_str is None:
            return None

        try:
            value = float(value_str)
            unit = decoder.decode_object(cls.UNIT_KEY, CurrencyUnit)
        except (ValueError, DecodeFailure):
            return None

        return cls(value, unit)

    # endregion

    # region Comparison operators (same unit required)

    def __eq__(self, other) -> bool:
        """Check equality with another Measurement."""
        if not isinstance(other, Measurement):
            return False
        if self._unit != other._unit:
            return False
        return self._value == other._value

    def __lt__(self, other) -> bool:
        if not isinstance(other, Measurement):
            return NotImplemented
        self._check_same_unit(other)
        return self._value < other._value

    def __le__(self, other) -> bool:
        if not isinstance(other, Measurement):
            return NotImplemented
        self._check_same_unit(other)
        return self._value <= other._value

    def __gt__(self, other) -> bool:
        if not isinstance(other, Measurement):
            return NotImplemented
        self._check_same_unit(other)
        return self._value > other._value

    def __ge__(self, other) -> bool:
        if not isinstance(other, Measurement):
            return NotImplemented
        self._check_same_unit(other)
        return self._value >= other._value

    __hash__ = None

    # endregion

    # region Arithmetic operations

    def __add__(self, other):
        """Add two measurements of the same unit."""
        if not isinstance(other, Measurement):
            return NotImplemented
        self._check_same_unit(other)
        return self.__class__(self._value + other._value, self._unit)

    def __sub__(self, other):
        """Subtract two measurements of the same unit."""
        if not isinstance(other, Measurement):
            return NotImplemented
        self._check_same_unit(other)
        return self.__class__(self._value - other._value, self._unit)

    def __mul__(self, other):
        """Multiply by a number (returns Measurement)."""
        if isinstance(other, Measurement):
            return NotImplemented  # Measurement * Measurement has no meaning for money
        try:
            return self.__class__(self._value * float(other), self._unit)
        except (ValueError, TypeError):
            return NotImplemented

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        """Divide by a number (returns Measurement) or by a same-unit Measurement (returns float)."""
        if isinstance(other, Measurement):
            self._check_same_unit(other)
            if other._value == 0:
                raise ZeroDivisionError("Cannot divide by zero Measurement")
            return self._value / other._value
        try:
            divisor = float(other)
        except (ValueError, TypeError):
            return NotImplemented
        if divisor == 0:
            raise ZeroDivisionError("Cannot divide Measurement by zero")
        return self.__class__(self._value / divisor, self._unit)

    def __neg__(self):
        return self.__class__(-self._value, self._unit)

    def __abs__(self):
        return self.__class__(abs(self._value), self._unit)

    # endregion

    # region String representations

    def __str__(self) -> str:
        """Return string like '500.0 AMD'."""
        return f"{self._value} {self._unit}"

    def __repr__(self) -> str:
        """Return string like 'Measurement(500.0, AMD)'."""
        return f"{self.__class__.__name__}({self._value}, {self._unit})"

    @classmethod
    def from_str(cls, value_str: str) -> Measurement:
        """Parse a currency measurement from string like '500.0 AMD'.

        Raises:
            ValueError: If string format is invalid or the currency code is unknown.
        """
        value_str = value_str.strip()
        if not value_str:
            raise ValueError("Value string with $value_str = '' cannot be empty")

        parts = value_str.split()
        if len(parts) != 2:
            raise ValueError(f"Value string with $value_str = '{value_str}' must be in format 'value currency_code'")

        value_part, code_part = parts

        try:
            value = float(value_part)
        except ValueError as e:
            raise ValueError(f"Invalid value part '{value_part}' in string '{value_str}'") from e

        try:
            unit = CurrencyUnit.from_str(code_part)
        except ValueError as e:
            raise ValueError(f"Invalid currency part '{code_part}' in string '{value_str}'") from e

        return cls(value, unit)

    # endregion
