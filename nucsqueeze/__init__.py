"""nucsqueeze: greedy repeat elimination for nucleotide sequences."""

from .compressor import compress, compress_in_place, decompress, decompress_buffer, decompress_result
from .config import CompressionConfig
from .engine import CompressionEngine, default_engine
from .errors import InvalidSymbolError, NoSegmentsError, OutOfBoundsError, SequenceTooShortError
from .sequence import SymbolSequence
from .serialization import SerializedOutput, deserialize_table, format_table, serialize, serialize_table
from .types import CompressionResult, SelectionRecord

__all__ = [
    "compress",
    "compress_in_place",
    "decompress",
    "decompress_buffer",
    "decompress_result",
    "CompressionConfig",
    "CompressionEngine",
    "default_engine",
    "CompressionResult",
    "SelectionRecord",
    "SymbolSequence",
    "SerializedOutput",
    "serialize",
    "serialize_table",
    "deserialize_table",
    "format_table",
    "InvalidSymbolError",
    "OutOfBoundsError",
    "SequenceTooShortError",
    "NoSegmentsError",
]
