"""Mutable symbol buffer with an explicit logical length."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .codec import validate_symbols
from .errors import InvalidSymbolError

SequenceInput = Union[str, bytes, bytearray, memoryview]


def _to_bytes(data: SequenceInput) -> bytes:
    if isinstance(data, str):
        try:
            return data.encode("ascii")
        except UnicodeEncodeError as exc:
            raise InvalidSymbolError(data[exc.start], exc.start) from exc
    return bytes(data)


@dataclass
class SymbolSequence:
    buffer: bytearray
    length: int

    def __post_init__(self) -> None:
        if not 0 <= self.length <= len(self.buffer):
            raise ValueError("Sequence length exceeds buffer capacity.")

    @classmethod
    def from_data(cls, data: SequenceInput, capacity: int | None = None) -> "SymbolSequence":
        raw = _to_bytes(data)
        size = len(raw) if capacity is None else capacity
        if size < len(raw):
            raise ValueError("Capacity is smaller than the input sequence.")
        buffer = bytearray(size)
        buffer[: len(raw)] = raw
        return cls(buffer=buffer, length=len(raw))

    @property
    def capacity(self) -> int:
        return len(self.buffer)

    def validate(self) -> None:
        validate_symbols(self.buffer, self.length)

    def symbols(self) -> bytes:
        return bytes(self.buffer[: self.length])

    def text(self) -> str:
        return self.symbols().decode("ascii")

    def __len__(self) -> int:
        return self.length
