from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

C = TypeVar("C", bound="KeyedCodable")


# region Interface


class KeyedEncoder(Protocol):
    """Write side of a keyed archive: named fields, each stored under a string key."""

    def encode_str(self, value: str, key: str) -> None:
        """Store string $value under $key, replacing any previous value."""
        ...

    def encode_object(self, obj: KeyedCodable, key: str) -> None:
        """Store $obj as a nested archive under $key by calling `obj.encode`."""
        ...


class KeyedDecoder(Protocol):
    """Read side of a keyed archive."""

    def contains(self, key: str) -> bool:
        """Return True if anything is stored under $key."""
        ...

    def decode_str(self, key: str) -> str | None:
        """Return the string stored under $key, or None if it is missing or not a string."""
        ...

    def decode_object(self, key: str, cls: type[C]) -> C:
        """Rebuild the object stored under $key using `cls.decode`."""
        ...


@runtime_checkable
class KeyedCodable(Protocol):
    """Object that can write itself to a `KeyedEncoder` and be rebuilt from a `KeyedDecoder`.

    `decode` returns None when the stored fields do not describe a valid object.
    """

    def encode(self, encoder: KeyedEncoder) -> None:
        ...

    @classmethod
    def decode(cls, decoder: KeyedDecoder) -> KeyedCodable | None:
        ...


# endregion
