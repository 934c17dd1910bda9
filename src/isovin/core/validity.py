"""
VIN Validity
============

Tri-state classification of a candidate string:

    INVALID              wrong length or a character outside the alphabet
    VALID                syntactically valid, check digit does not match
    VALID_WITH_CHECKSUM  syntactically valid and the check digit matches

classify() never raises; every string maps to exactly one state.
"""

from enum import Enum

from .checksum import validate_checksum
from .constants import VIN_LENGTH, VIN_VALID_CHARS


class Validity(str, Enum):
    """Validity state of a VIN."""
    INVALID = "invalid"
    VALID = "valid"
    VALID_WITH_CHECKSUM = "valid_with_checksum"

    @property
    def is_syntactically_valid(self) -> bool:
        """Whether the VIN has the correct length and characters."""
        return self in (Validity.VALID, Validity.VALID_WITH_CHECKSUM)

    @property
    def has_valid_checksum(self) -> bool:
        """Whether the VIN also carries a correct check digit."""
        return self is Validity.VALID_WITH_CHECKSUM


def has_valid_format(vin: str) -> bool:
    """Length and alphabet check only. Case sensitive: lowercase is rejected."""
    if len(vin) != VIN_LENGTH:
        return False
    return all(c in VIN_VALID_CHARS for c in vin)


def classify(vin: str) -> Validity:
    """Classify a string as INVALID, VALID or VALID_WITH_CHECKSUM."""
    if not has_valid_format(vin):
        return Validity.INVALID
    if validate_checksum(vin):
        return Validity.VALID_WITH_CHECKSUM
    return Validity.VALID


def is_syntactically_valid(vin: str) -> bool:
    return classify(vin).is_syntactically_valid


def has_valid_checksum(vin: str) -> bool:
    return classify(vin).has_valid_checksum
