"""
Character pattern detectors.

Both detectors scan every adjacent pair (i, i+1) of a string and work on
character code points, so 'A'..'Z' and '0'..'9' compare the same way
regardless of locale.
"""


def has_adjacent_repeat(value: str) -> bool:
    """
    Check whether two consecutive characters are identical.

    Strings shorter than two characters have no adjacent pair and
    return False.

    Examples:
        >>> has_adjacent_repeat("ZZOVO")
        True
        >>> has_adjacent_repeat("ZOVXY")
        False
    """
    return any(value[i] == value[i + 1] for i in range(len(value) - 1))


def is_strict_sequence(value: str) -> bool:
    """
    Check whether every character is exactly one code point above the previous one.

    Strings shorter than two characters are vacuously sequential and
    return True.

    Examples:
        >>> is_strict_sequence("ABCDE")
        True
        >>> is_strict_sequence("ABCXE")
        False
    """
    return all(ord(value[i + 1]) - ord(value[i]) == 1 for i in range(len(value) - 1))
