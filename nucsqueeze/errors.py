"""Error kinds raised by the compressor."""

from __future__ import annotations

from typing import Optional


class InvalidSymbolError(ValueError):
    def __init__(self, symbol: object, position: Optional[int] = None):
        self.symbol = symbol
        self.position = position
        if position is None:
            message = f"Invalid nucleotide symbol {symbol!r}."
        else:
            message = f"Invalid nucleotide symbol {symbol!r} at position {position}."
        super().__init__(message)


class OutOfBoundsError(IndexError):
    """A segment window extends past the logical end of the sequence."""


class SequenceTooShortError(ValueError):
    """Fewer than ``segment_len`` symbols remain."""


class NoSegmentsError(ValueError):
    """The frequency index holds no segment keys."""
