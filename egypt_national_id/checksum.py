"""
Check digit computation for Egyptian national IDs.

The 14th digit is derived from the first 13 with a fixed positional
weight vector: each digit is multiplied by its weight, the products are
summed, and the check digit is that sum modulo 10.
"""
import logging

logger = logging.getLogger(__name__)

WEIGHTS = (2, 7, 6, 5, 4, 3, 2, 7, 6, 5, 4, 3, 2)
MODULUS = 10

ID_LENGTH = 14
_ASCII_DIGITS = frozenset("0123456789")


def is_ascii_digits(value, length: int) -> bool:
    """True if ``value`` is a str of exactly ``length`` ASCII digits."""
    return (
        isinstance(value, str)
        and len(value) == length
        and all(char in _ASCII_DIGITS for char in value)
    )


def compute_check_digit(first_13: str) -> int:
    """
    Compute the expected check digit for the first 13 digits of an ID.

    Args:
        first_13: The 13 leading digits

    Returns:
        int: The check digit (0-9)

    Raises:
        ValueError: If the input is not exactly 13 ASCII digits

    Examples:
        >>> compute_check_digit("3010101012345")
        8
    """
    if not is_ascii_digits(first_13, len(WEIGHTS)):
        raise ValueError(f"expected {len(WEIGHTS)} ASCII digits, got {first_13!r}")

    total = sum(int(digit) * weight for digit, weight in zip(first_13, WEIGHTS))
    return total % MODULUS


def validate_checksum(raw: str) -> bool:
    """
    Check the trailing digit of a full 14-digit ID against its first 13.

    Never raises; anything that is not 14 ASCII digits is simply invalid.

    Examples:
        >>> validate_checksum("30101010123458")
        True
        >>> validate_checksum("30101010123459")
        False
    """
    if not is_ascii_digits(raw, ID_LENGTH):
        logger.debug(f"Checksum skipped for malformed input: {raw!r}")
        return False

    expected = compute_check_digit(raw[:-1])
    actual = int(raw[-1])
    if expected != actual:
        logger.debug(f"Invalid checksum for ID: {raw} (expected: {expected}, got: {actual})")
        return False
    return True
