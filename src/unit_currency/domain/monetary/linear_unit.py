from __future__ import annotations

from typing import Protocol, runtime_checkable


# region Interface


@runtime_checkable
class LinearUnit(Protocol):
    """Unit that converts to its family's base unit by a single scale factor.

    `Measurement` only talks to units through this interface: it reads $coefficient of the
    source and target units and asks for the shared pivot via `base_unit`.
    """

    @property
    def coefficient(self) -> float:
        """Amount of the base unit equal to 1 of this unit."""
        ...

    @classmethod
    def base_unit(cls) -> LinearUnit:
        """Return the pivot unit of this family (coefficient 1.0)."""
        ...


# endregion
