from unit_currency.coding.keyed_archiver import KeyedArchiver, KeyedUnarchiver
from unit_currency.coding.protocol import KeyedCodable, KeyedDecoder, KeyedEncoder

__all__ = ["KeyedArchiver", "KeyedUnarchiver", "KeyedCodable", "KeyedDecoder", "KeyedEncoder"]
