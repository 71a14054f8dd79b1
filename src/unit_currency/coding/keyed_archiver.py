from __future__ import annotations

import json
import logging
from typing import Any, Dict, TypeVar

from unit_currency.coding.protocol import KeyedCodable
from unit_currency.domain.errors import DecodeFailure

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=KeyedCodable)


class KeyedArchiver:
    """Collects keyed fields of encoded objects and serializes them to JSON bytes.

    Nested objects are stored as nested JSON objects, so an archive of a `Measurement` looks like
    `{"amount": {"value": "500.0", "unit": {"code": "AMD"}}}`.
    """

    def __init__(self) -> None:
        self._fields: Dict[str, Any] = {}

    def encode_str(self, value: str, key: str) -> None:
        # Raise: only string fields are supported
        if not isinstance(value, str):
            raise TypeError(f"Cannot call `encode_str` because $value is not str (got type '{type(value).__name__}') for $key '{key}'")
        self._fields[key] = value

    def encode_object(self, obj: KeyedCodable, key: str) -> None:
        # Raise: object must know how to encode itself
        if not isinstance(obj, KeyedCodable):
            raise TypeError(f"Cannot call `encode_object` because $obj is not KeyedCodable (got type '{type(obj).__name__}') for $key '{key}'")

        nested = KeyedArchiver()
        obj.encode(nested)
        self._fields[key] = nested._fields

    @property
    def fields(self) -> Dict[str, Any]:
        """Return a copy of the collected fields."""
        return json.loads(json.dumps(self._fields))

    @property
    def encoded_data(self) -> bytes:
        """Return the archive as UTF-8 encoded JSON."""
        return json.dumps(self._fields, ensure_ascii=False, sort_keys=True).encode("utf-8")


class KeyedUnarchiver:
    """Reads fields written by `KeyedArchiver`.

    Args:
        data: Archive bytes as produced by `KeyedArchiver.encoded_data`.

    Raises:
        DecodeFailure: If $data is not a JSON object.
    """

    def __init__(self, data: bytes) -> None:
        # Raise: archives are bytes as produced by `KeyedArchiver.encoded_data`
        if not isinstance(data, (bytes, bytearray)):
            raise DecodeFailure(f"Cannot init `KeyedUnarchiver` because $data is not bytes (got type '{type(data).__name__}')")

        try:
            fields = json.loads(data.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise DecodeFailure(f"Cannot init `KeyedUnarchiver` because $data is not valid UTF-8 JSON: {e}") from e

        # Raise: archive root must be a keyed object
        if not isinstance(fields, dict):
            raise DecodeFailure(f"Cannot init `KeyedUnarchiver` because archive root is not an object (got type '{type(fields).__name__}')")

        self._fields: Dict[str, Any] = fields

    @classmethod
    def _from_fields(cls, fields: Dict[str, Any]) -> KeyedUnarchiver:
        result = cls.__new__(cls)
        result._fields = fields
        return result

    def contains(self, key: str) -> bool:
        return key in self._fields

    def decode_str(self, key: str) -> str | None:
        value = self._fields.get(key)
        if not isinstance(value, str):
            return None
        return value

    def decode_object(self, key: str, cls: type[C]) -> C:
        """Rebuild the object stored under $key with `cls.decode`.

        Raises:
            DecodeFailure: If nothing usable is stored under $key or `cls.decode` returns None.
        """
        nested = self._fields.get(key)

        # Raise: nested archive must exist
        if not isinstance(nested, dict):
            raise DecodeFailure(f"Cannot call `decode_object` because no archived object is stored under $key '{key}'")

        result = cls.decode(KeyedUnarchiver._from_fields(nested))

        # Raise: never fall back to a default object
        if result is None:
            logger.debug(f"Decoding {cls.__name__} under $key '{key}' produced no value from fields {nested}")
            raise DecodeFailure(f"Cannot call `decode_object` because {cls.__name__} could not be decoded from $key '{key}'")

        return result
