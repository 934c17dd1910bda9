"""
isovin
======

ISO 3779 Vehicle Identification Number validation, decomposition and repair.

Package Structure:
    isovin/
    ├── core/           # Constants, checksum, validity, segments, proposer, VIN value
    ├── lookup/         # WMI name lookup through pluggable resolvers
    ├── config.py       # Settings with VIN_* environment overrides
    ├── exceptions.py   # Errors raised outside the pure core
    └── cli.py          # `isovin` command line

Quick Start:
    from isovin import VIN, classify, propose

    classify("1HGBH41JXMN109186")        # Validity.VALID_WITH_CHECKSUM
    VIN("1HGBH41JXMN109186").wmi         # '1HG'
    propose("wba")                       # 'WBA00000200000000'

Version: 1.0.0
"""

__version__ = "1.0.0"

from .core import (
    VINConstants,
    VIN_LENGTH,
    VIN_VALID_CHARS,
    Validity,
    VIN,
    UNKNOWN_VIN,
    ProposalResult,
    VINProposer,
    classify,
    is_syntactically_valid,
    has_valid_checksum,
    checksum_digit,
    calculate_check_digit,
    wmi,
    vds,
    vis,
    propose,
)
from .exceptions import (
    VINError,
    LookupTableError,
    ConfigurationError,
    VINSerializationError,
)

__all__ = [
    "__version__",
    # Core
    "VINConstants",
    "VIN_LENGTH",
    "VIN_VALID_CHARS",
    "Validity",
    "VIN",
    "UNKNOWN_VIN",
    "ProposalResult",
    "VINProposer",
    "classify",
    "is_syntactically_valid",
    "has_valid_checksum",
    "checksum_digit",
    "calculate_check_digit",
    "wmi",
    "vds",
    "vis",
    "propose",
    # Errors
    "VINError",
    "LookupTableError",
    "ConfigurationError",
    "VINSerializationError",
]
