"""Configuration checks."""

from __future__ import annotations

from dataclasses import dataclass

from .config import CompressionConfig

DENSE_INDEX_WARN_LEN = 10


@dataclass(frozen=True)
class ValidationIssue:
    level: str
    message: str


def validate_config(config: CompressionConfig) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    if config.segment_len < 1:
        issues.append(ValidationIssue("error", "segment_len must be at least 1."))
    if config.segment_count < 0:
        issues.append(ValidationIssue("error", "segment_count must not be negative."))
    if config.dense_index_max_len < 0:
        issues.append(ValidationIssue("error", "dense_index_max_len must not be negative."))
    if config.segment_count == 0:
        issues.append(ValidationIssue("warning", "segment_count is 0; compression will not remove anything."))
    if DENSE_INDEX_WARN_LEN < config.segment_len <= config.dense_index_max_len:
        slots = 4 ** config.segment_len
        issues.append(
            ValidationIssue("warning", f"Dense index allocates {slots} slots per round; consider a smaller dense_index_max_len.")
        )
    return issues


def require_valid_config(config: CompressionConfig) -> list[ValidationIssue]:
    """Raise ``ValueError`` on the first error and return the remaining warnings."""
    issues = validate_config(config)
    for issue in issues:
        if issue.level == "error":
            raise ValueError(issue.message)
    return [issue for issue in issues if issue.level == "warning"]
