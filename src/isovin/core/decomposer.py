"""
VIN Decomposer
==============

Fixed-offset segment extraction:

    WMI  positions 1-3   World Manufacturer Identifier
    VDS  positions 4-9   Vehicle Descriptor Section (includes check digit)
    VIS  positions 10-17 Vehicle Identification Section

Segments are only defined for syntactically valid VINs; anything else
yields an empty string. No case folding is applied.
"""

from typing import Optional

from .constants import VINConstants, VIN_LENGTH
from .validity import has_valid_format


def _segment(vin: str, part: slice) -> str:
    if not has_valid_format(vin):
        return ""
    return vin[part]


def wmi(vin: str) -> str:
    """World Manufacturer Identifier, or "" if the VIN is invalid."""
    return _segment(vin, VINConstants.WMI_SLICE)


def vds(vin: str) -> str:
    """Vehicle Descriptor Section, or "" if the VIN is invalid."""
    return _segment(vin, VINConstants.VDS_SLICE)


def vis(vin: str) -> str:
    """Vehicle Identification Section, or "" if the VIN is invalid."""
    return _segment(vin, VINConstants.VIS_SLICE)


def checksum_digit(vin: str) -> Optional[str]:
    """
    The character at position 9.

    Only the length is checked, so a 17-character string with
    disallowed characters still returns its 9th character.
    """
    if len(vin) != VIN_LENGTH:
        return None
    return vin[VINConstants.CHECK_DIGIT_INDEX]
