"""
Structural PAN format check.

A PAN is exactly ten characters: five uppercase Latin letters, four
decimal digits and one uppercase Latin letter (e.g. AXBCE1923F).
"""

import re

PAN_PATTERN = re.compile(r"^[A-Z]{5}[0-9]{4}[A-Z]$", flags=re.ASCII)

PAN_LENGTH = 10

# Zero-based slices of the blocks checked for repeats and sequences
LETTER_BLOCK = slice(0, 5)
DIGIT_BLOCK = slice(5, 9)


def matches_structure(value: str) -> bool:
    """
    Check that a value matches the PAN layout exactly.

    Case is not folded: lowercase letters fail. ``fullmatch`` is used so a
    trailing newline cannot satisfy the ``$`` anchor.
    """
    return PAN_PATTERN.fullmatch(value) is not None


def split_blocks(value: str) -> tuple[str, str]:
    """
    Split a structurally valid PAN into its letter and digit blocks.

    Args:
        value: A value for which matches_structure() is True.

    Returns:
        Tuple of (letter block, digit block), e.g. ("AXBCE", "1923").

    Raises:
        ValueError: If the value is not a structurally valid PAN.
    """
    if not matches_structure(value):
        msg = f"Not a structurally valid PAN: {value!r}"
        raise ValueError(msg)
    return value[LETTER_BLOCK], value[DIGIT_BLOCK]
