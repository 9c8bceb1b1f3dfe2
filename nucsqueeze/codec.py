"""2-bit nucleotide codes and packed segment keys.

Each symbol of the alphabet maps to a 2-bit code (``A=0, T=1, C=2, G=3``).
A segment of ``segment_len`` symbols packs into an integer key of
``2 * segment_len`` bits, earliest symbol in the most significant bits.
"""

from __future__ import annotations

from .errors import InvalidSymbolError, OutOfBoundsError
from .types import SegmentKey, Symbol

ALPHABET = b"ATCG"
BITS_PER_SYMBOL = 2
CODE_MASK = (1 << BITS_PER_SYMBOL) - 1

_INVALID = 0xFF
_ENCODE_TABLE = bytearray([_INVALID]) * 256
for _code, _byte in enumerate(ALPHABET):
    _ENCODE_TABLE[_byte] = _code
_ENCODE_TABLE = bytes(_ENCODE_TABLE)


def _as_byte(symbol: Symbol) -> int:
    if isinstance(symbol, str):
        if len(symbol) != 1 or not symbol.isascii():
            raise InvalidSymbolError(symbol)
        return ord(symbol)
    if isinstance(symbol, int) and 0 <= symbol < 256:
        return symbol
    raise InvalidSymbolError(symbol)


def encode_symbol(symbol: Symbol) -> int:
    code = _ENCODE_TABLE[_as_byte(symbol)]
    if code == _INVALID:
        raise InvalidSymbolError(symbol)
    return code


def decode_symbol(code: int) -> str:
    if not 0 <= code <= CODE_MASK:
        raise ValueError(f"Symbol code out of range: {code}.")
    return chr(ALPHABET[code])


def encode_segment(buffer, start: int, segment_len: int, length: int | None = None) -> SegmentKey:
    """Pack ``buffer[start:start + segment_len]`` into a key."""
    limit = len(buffer) if length is None else length
    if start < 0 or start + segment_len > limit:
        raise OutOfBoundsError(
            f"Segment [{start}, {start + segment_len}) exceeds sequence length {limit}."
        )
    key = 0
    for pos in range(start, start + segment_len):
        code = _ENCODE_TABLE[buffer[pos]]
        if code == _INVALID:
            raise InvalidSymbolError(chr(buffer[pos]), pos)
        key = (key << BITS_PER_SYMBOL) | code
    return key


def decode_key(key: SegmentKey, segment_len: int) -> bytes:
    if key < 0 or key >> (BITS_PER_SYMBOL * segment_len):
        raise ValueError(f"Segment key {key} does not fit {segment_len} symbols.")
    out = bytearray(segment_len)
    # Slice from the least-significant end backwards.
    for pos in range(segment_len - 1, -1, -1):
        out[pos] = ALPHABET[key & CODE_MASK]
        key >>= BITS_PER_SYMBOL
    return bytes(out)


def validate_symbols(buffer, length: int | None = None) -> None:
    """Raise ``InvalidSymbolError`` for the first byte outside the alphabet."""
    limit = len(buffer) if length is None else length
    data = bytes(buffer[:limit])
    if not data.translate(None, ALPHABET):
        return
    for pos, byte in enumerate(data):
        if _ENCODE_TABLE[byte] == _INVALID:
            raise InvalidSymbolError(chr(byte), pos)
