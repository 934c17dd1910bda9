"""
isovin Core Module
==================

VIN constants, validation, decomposition, checksum and proposal.
Pure functions over strings; nothing here performs I/O.
"""

from .constants import (
    VINConstants,
    VIN_LENGTH,
    VIN_VALID_CHARS,
)
from .checksum import (
    character_value,
    calculate_check_digit,
    validate_checksum,
    apply_check_digit,
)
from .validity import (
    Validity,
    classify,
    has_valid_format,
    is_syntactically_valid,
    has_valid_checksum,
)
from .decomposer import (
    wmi,
    vds,
    vis,
    checksum_digit,
)
from .proposer import (
    ProposalResult,
    VINProposer,
    propose_vin,
    get_proposer,
)
from .vin import VIN, UNKNOWN_VIN

# Short alias matching the other string-level operations
propose = propose_vin

__all__ = [
    # Constants
    "VINConstants",
    "VIN_LENGTH",
    "VIN_VALID_CHARS",
    # Checksum
    "character_value",
    "calculate_check_digit",
    "validate_checksum",
    "apply_check_digit",
    # Validation
    "Validity",
    "classify",
    "has_valid_format",
    "is_syntactically_valid",
    "has_valid_checksum",
    # Segments
    "wmi",
    "vds",
    "vis",
    "checksum_digit",
    # Proposal
    "ProposalResult",
    "VINProposer",
    "propose",
    "propose_vin",
    "get_proposer",
    # Value
    "VIN",
    "UNKNOWN_VIN",
]
