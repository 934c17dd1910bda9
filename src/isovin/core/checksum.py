"""
VIN Checksum Engine
===================

ISO 3779 check digit: every character except position 9 is transliterated
to a number, multiplied by its position weight, and the sum is reduced
modulo 11. A remainder of 10 is written as 'X'.

Example:
    >>> calculate_check_digit("1HGBH41JXMN109186")
    'X'
    >>> apply_check_digit("1HGBH41J0MN109186")
    '1HGBH41JXMN109186'
"""

from typing import Optional

from .constants import VINConstants, VIN_LENGTH


def character_value(char: str) -> Optional[int]:
    """
    Transliterate a single VIN character to its checksum value.

    Returns:
        0-9 for digits and allowed letters, None for anything else
        (including I, O, Q and lowercase letters)
    """
    return VINConstants.CHAR_VALUES.get(char)


def calculate_check_digit(vin: str) -> Optional[str]:
    """
    Calculate the expected check digit for a VIN.

    The character currently at position 9 is never read, so the result
    does not depend on it.

    Args:
        vin: 17-character VIN

    Returns:
        Expected check digit ('0'-'9' or 'X'), or None if the length is
        wrong or a character has no checksum value
    """
    if len(vin) != VIN_LENGTH:
        return None

    total = 0
    for i, char in enumerate(vin):
        if i == VINConstants.CHECK_DIGIT_INDEX:
            continue
        value = character_value(char)
        if value is None:
            return None
        total += value * VINConstants.CHECKSUM_WEIGHTS[i]

    remainder = total % VINConstants.CHECKSUM_MODULUS
    return VINConstants.CHECKSUM_TEN if remainder == 10 else str(remainder)


def validate_checksum(vin: str) -> bool:
    """True if the character at position 9 matches the computed check digit."""
    expected = calculate_check_digit(vin)
    if expected is None:
        return False
    return vin[VINConstants.CHECK_DIGIT_INDEX] == expected


def apply_check_digit(vin: str) -> str:
    """
    Overwrite position 9 with the computed check digit.

    Returns the input unchanged when no check digit can be computed.
    """
    expected = calculate_check_digit(vin)
    if expected is None:
        return vin

    index = VINConstants.CHECK_DIGIT_INDEX
    return vin[:index] + expected + vin[index + 1:]
