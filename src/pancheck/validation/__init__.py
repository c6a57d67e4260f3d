"""PAN validation rule engine."""

from pancheck.validation.core import (
    PanStatus,
    RuleChecks,
    ValidationOutcome,
    check_rules,
    classify,
    validate,
)
from pancheck.validation.patterns import has_adjacent_repeat, is_strict_sequence
from pancheck.validation.structure import PAN_PATTERN, matches_structure, split_blocks

__all__ = [
    "PAN_PATTERN",
    "PanStatus",
    "RuleChecks",
    "ValidationOutcome",
    "check_rules",
    "classify",
    "has_adjacent_repeat",
    "is_strict_sequence",
    "matches_structure",
    "split_blocks",
    "validate",
]
