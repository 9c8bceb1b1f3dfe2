"""Greedy repeat-elimination driver."""

from __future__ import annotations

from dataclasses import dataclass
import warnings

from .compaction import remove_occurrences
from .config import CompressionConfig
from .discovery import FrequencyIndex, build_dense_index, build_index
from .errors import NoSegmentsError, SequenceTooShortError
from .selection import select_segment
from .types import SelectionRecord
from .validation import require_valid_config


@dataclass(frozen=True)
class IndexStage:
    name: str

    def build(self, buffer, length: int, segment_len: int) -> FrequencyIndex:
        raise NotImplementedError


@dataclass(frozen=True)
class MapIndexStage(IndexStage):
    def build(self, buffer, length: int, segment_len: int) -> FrequencyIndex:
        return build_index(buffer, length, segment_len)


@dataclass(frozen=True)
class DenseIndexStage(IndexStage):
    def build(self, buffer, length: int, segment_len: int) -> FrequencyIndex:
        return build_dense_index(buffer, length, segment_len)


@dataclass(frozen=True)
class CompressionEngine:
    index_stage: IndexStage
    last_rounds_completed: int = 0

    def select_round(self, buffer, length: int, segment_len: int) -> SelectionRecord:
        if length < segment_len:
            raise SequenceTooShortError(f"{length} symbols remain, fewer than segment_len={segment_len}.")
        return select_segment(self.index_stage.build(buffer, length, segment_len))

    def compress_buffer(
        self,
        buffer: bytearray,
        length: int,
        config: CompressionConfig,
    ) -> tuple[int, list[SelectionRecord]]:
        """Run up to ``config.segment_count`` rounds on ``buffer`` in place.

        Stops early once fewer than ``segment_len`` symbols remain. Returns
        the reduced length and the records in selection order.
        """
        for warning in require_valid_config(config):
            warnings.warn(warning.message, RuntimeWarning)
        segment_len = config.segment_len
        table: list[SelectionRecord] = []

        for _ in range(config.segment_count):
            try:
                record = self.select_round(buffer, length, segment_len)
            except (SequenceTooShortError, NoSegmentsError):
                break
            table.append(record)
            length = remove_occurrences(buffer, length, record.positions, segment_len)

        object.__setattr__(self, "last_rounds_completed", len(table))
        return length, table


def default_engine(config: CompressionConfig) -> CompressionEngine:
    if config.segment_len <= config.dense_index_max_len:
        return CompressionEngine(DenseIndexStage(name="dense"))
    return CompressionEngine(MapIndexStage(name="map"))
