"""
VIN Constants
=============

ISO 3779 VIN layout, alphabet and checksum tables.
Every other module reads these values from here.

Author: isovin Project
"""

from typing import Dict, FrozenSet, Tuple


class VINConstants:
    """Immutable VIN constants per ISO 3779."""

    LENGTH: int = 17

    # Valid characters (I, O, Q excluded to avoid confusion with 1, 0)
    VALID_CHARS: FrozenSet[str] = frozenset("ABCDEFGHJKLMNPRSTUVWXYZ0123456789")

    # Segment slices (0-based, end exclusive)
    WMI_SLICE: slice = slice(0, 3)
    VDS_SLICE: slice = slice(3, 9)
    VIS_SLICE: slice = slice(9, 17)

    # Check digit sits at position 9 (index 8), inside the VDS
    CHECK_DIGIT_INDEX: int = 8

    # Checksum weights by position
    CHECKSUM_WEIGHTS: Tuple[int, ...] = (8, 7, 6, 5, 4, 3, 2, 10, 0, 9, 8, 7, 6, 5, 4, 3, 2)
    CHECKSUM_MODULUS: int = 11
    CHECKSUM_TEN: str = 'X'

    # Character to value mapping for checksum (transliteration table)
    CHAR_VALUES: Dict[str, int] = {
        'A': 1, 'B': 2, 'C': 3, 'D': 4, 'E': 5, 'F': 6, 'G': 7, 'H': 8,
        'J': 1, 'K': 2, 'L': 3, 'M': 4, 'N': 5, 'P': 7, 'R': 9,
        'S': 2, 'T': 3, 'U': 4, 'V': 5, 'W': 6, 'X': 7, 'Y': 8, 'Z': 9,
        '0': 0, '1': 1, '2': 2, '3': 3, '4': 4, '5': 5, '6': 6, '7': 7, '8': 8, '9': 9
    }

    # Placeholder VIN for unknown vehicles (syntactically valid, checksum not guaranteed)
    UNKNOWN: str = "UNKNWN78901234567"

    # Used by the proposer when the input has no usable characters
    FALLBACK_TEMPLATE: str = "1VWAA7A30FC000001"
    PAD_CHAR: str = '0'


VIN_LENGTH = VINConstants.LENGTH
VIN_VALID_CHARS = VINConstants.VALID_CHARS
