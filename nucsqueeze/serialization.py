"""Record-table serialization.

A table serializes as one ``{"segment_key": int, "positions": [int, ...]}``
mapping per round, in selection order. ``SerializedOutput`` bundles that
with the reduced sequence for JSON transport.
"""

from __future__ import annotations

from dataclasses import dataclass
import json
from typing import Any, Iterable, Mapping, Sequence

from .codec import BITS_PER_SYMBOL, decode_key
from .types import CompressionResult, CompressionTable, SelectionRecord


def serialize_table(table: Iterable[SelectionRecord]) -> list[dict[str, Any]]:
    return [{"segment_key": record.key, "positions": list(record.positions)} for record in table]


def _parse_record(item: Mapping[str, Any], segment_len: int) -> SelectionRecord:
    if not isinstance(item, Mapping):
        raise ValueError("Serialized record must be a mapping.")
    try:
        key = item["segment_key"]
        positions = item["positions"]
    except KeyError as exc:
        raise ValueError(f"Serialized record missing field {exc.args[0]!r}.") from exc
    if not isinstance(key, int) or isinstance(key, bool):
        raise ValueError("Segment key must be an integer.")
    if key < 0 or key >> (BITS_PER_SYMBOL * segment_len):
        raise ValueError(f"Segment key {key} does not fit {segment_len} symbols.")
    if not isinstance(positions, (list, tuple)):
        raise ValueError("Positions must be a list.")
    previous = None
    for pos in positions:
        if not isinstance(pos, int) or isinstance(pos, bool) or pos < 0:
            raise ValueError("Positions must be non-negative integers.")
        if previous is not None and pos < previous + segment_len:
            raise ValueError("Positions must be ascending and non-overlapping.")
        previous = pos
    return SelectionRecord(key=key, positions=tuple(positions))


def deserialize_table(records: Sequence[Mapping[str, Any]], segment_len: int) -> CompressionTable:
    if not isinstance(records, (list, tuple)):
        raise ValueError("Serialized table must be a list of records.")
    return tuple(_parse_record(item, segment_len) for item in records)


def format_table(table: Iterable[SelectionRecord], segment_len: int) -> str:
    lines = []
    for record in table:
        segment = decode_key(record.key, segment_len).decode("ascii")
        lines.append(" ".join([segment, *(str(pos) for pos in record.positions)]))
    return "\n".join(lines)


@dataclass(frozen=True)
class SerializedOutput:
    segment_len: int
    table: CompressionTable
    sequence: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "segment_len": self.segment_len,
            "table": serialize_table(self.table),
            "sequence": self.sequence,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "SerializedOutput":
        try:
            segment_len = payload["segment_len"]
            records = payload["table"]
            sequence = payload["sequence"]
        except KeyError as exc:
            raise ValueError(f"Serialized output missing field {exc.args[0]!r}.") from exc
        if not isinstance(segment_len, int) or isinstance(segment_len, bool) or segment_len < 1:
            raise ValueError("segment_len must be a positive integer.")
        if not isinstance(sequence, str):
            raise ValueError("Serialized sequence must be a string.")
        return cls(segment_len=segment_len, table=deserialize_table(records, segment_len), sequence=sequence)

    @classmethod
    def from_json(cls, text: str) -> "SerializedOutput":
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValueError("Serialized output is not valid JSON.") from exc
        if not isinstance(payload, dict):
            raise ValueError("Serialized output must be a JSON object.")
        return cls.from_dict(payload)


def serialize(result: CompressionResult) -> SerializedOutput:
    return SerializedOutput(
        segment_len=result.segment_len,
        table=result.table,
        sequence=result.sequence.decode("ascii"),
    )
