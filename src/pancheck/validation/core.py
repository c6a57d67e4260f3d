"""
Core PAN validation logic.

Combines the structural check with the pattern detectors applied
separately to the letter block and the digit block. A clean record is
valid only if the structure matches and neither block contains an
adjacent repeat or a strict sequence.
"""

from dataclasses import dataclass
from enum import Enum

from pancheck.validation.patterns import has_adjacent_repeat, is_strict_sequence
from pancheck.validation.structure import matches_structure, split_blocks


class PanStatus(str, Enum):
    """Classification of a clean PAN record."""

    VALID = "Valid PAN"
    INVALID = "Invalid PAN"


@dataclass(frozen=True)
class ValidationOutcome:
    """A clean record paired with its status."""

    pan_number: str
    status: PanStatus

    @property
    def is_valid(self) -> bool:
        """Whether the record was classified as valid."""
        return self.status is PanStatus.VALID


@dataclass(frozen=True)
class RuleChecks:
    """
    Per-rule breakdown for a single clean record.

    Pattern fields are None when the structure check failed, since the
    detectors only run on exactly-sized blocks.
    """

    pan_number: str
    structure_ok: bool
    letters_repeat: bool | None = None
    letters_sequence: bool | None = None
    digits_repeat: bool | None = None
    digits_sequence: bool | None = None

    @property
    def failed_rules(self) -> list[str]:
        """Names of the rules that failed, in evaluation order."""
        if not self.structure_ok:
            return ["structure"]
        flags = {
            "letters_repeat": self.letters_repeat,
            "letters_sequence": self.letters_sequence,
            "digits_repeat": self.digits_repeat,
            "digits_sequence": self.digits_sequence,
        }
        return [name for name, failed in flags.items() if failed]

    @property
    def status(self) -> PanStatus:
        """Overall status implied by the individual rules."""
        return PanStatus.INVALID if self.failed_rules else PanStatus.VALID


def validate(clean: str) -> PanStatus:
    """
    Classify a clean PAN record.

    Evaluation short-circuits: once a rule fails the remaining ones are
    skipped, which does not change the result.

    Args:
        clean: Normalized (trimmed, upper-cased) record.

    Returns:
        PanStatus.VALID or PanStatus.INVALID.
    """
    if not matches_structure(clean):
        return PanStatus.INVALID

    letters, digits = split_blocks(clean)
    if has_adjacent_repeat(letters) or is_strict_sequence(letters):
        return PanStatus.INVALID
    if has_adjacent_repeat(digits) or is_strict_sequence(digits):
        return PanStatus.INVALID
    return PanStatus.VALID


def check_rules(clean: str) -> RuleChecks:
    """
    Evaluate every rule for a clean record without short-circuiting.

    Args:
        clean: Normalized record.

    Returns:
        RuleChecks with one flag per rule.
    """
    if not matches_structure(clean):
        return RuleChecks(pan_number=clean, structure_ok=False)

    letters, digits = split_blocks(clean)
    return RuleChecks(
        pan_number=clean,
        structure_ok=True,
        letters_repeat=has_adjacent_repeat(letters),
        letters_sequence=is_strict_sequence(letters),
        digits_repeat=has_adjacent_repeat(digits),
        digits_sequence=is_strict_sequence(digits),
    )


def classify(clean: str) -> ValidationOutcome:
    """Validate a clean record and pair it with its status."""
    return ValidationOutcome(pan_number=clean, status=validate(clean))
