"""
VIN Value
=========

Immutable wrapper around a candidate VIN string. Construction never
validates; validity, segments and checksum are recomputed on every access.

Usage:
    from isovin import VIN

    vin = VIN("1HGBH41JXMN109186")
    vin.validity            # Validity.VALID_WITH_CHECKSUM
    vin.wmi, vin.vds, vin.vis
    VIN("wba").propose()    # VIN(content='WBA00000200000000')
"""

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Optional

from ..exceptions import VINSerializationError
from . import decomposer
from .checksum import validate_checksum
from .constants import VINConstants, VIN_LENGTH
from .proposer import get_proposer
from .validity import Validity, classify

if TYPE_CHECKING:
    from ..lookup.resolvers import WMIResolver


@dataclass(frozen=True)
class VIN:
    """The Vehicle Identification Number, as standardized in ISO 3779."""

    content: str

    NUMBER_OF_CHARACTERS: ClassVar[int] = VIN_LENGTH
    ALLOWED_CHARACTERS: ClassVar[frozenset] = VINConstants.VALID_CHARS
    UNKNOWN: ClassVar["VIN"]

    def __str__(self) -> str:
        return self.content

    @property
    def id(self) -> str:
        return self.content

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    @property
    def validity(self) -> Validity:
        return classify(self.content)

    @property
    def is_valid(self) -> bool:
        """Syntactically valid (length and characters), regardless of checksum."""
        return self.validity.is_syntactically_valid

    @property
    def is_checksum_valid(self) -> bool:
        """Whether the 9th character matches the computed check digit."""
        return validate_checksum(self.content)

    @staticmethod
    def validity_of(vin: str) -> Validity:
        return VIN(vin).validity

    @staticmethod
    def is_valid_vin(vin: str) -> bool:
        return VIN(vin).is_valid

    # -------------------------------------------------------------------------
    # Segments
    # -------------------------------------------------------------------------

    @property
    def wmi(self) -> str:
        """The world manufacturer identifier."""
        return decomposer.wmi(self.content)

    @property
    def vds(self) -> str:
        """The vehicle descriptor section."""
        return decomposer.vds(self.content)

    @property
    def vis(self) -> str:
        """The vehicle identification section."""
        return decomposer.vis(self.content)

    @property
    def checksum_digit(self) -> Optional[str]:
        """The 9th character, or None unless the VIN has 17 characters."""
        return decomposer.checksum_digit(self.content)

    # -------------------------------------------------------------------------
    # WMI lookup
    # -------------------------------------------------------------------------

    def wmi_region(self, resolver: "WMIResolver") -> str:
        from ..lookup.wmi import WMILookup
        return WMILookup(resolver).region(self)

    def wmi_country(self, resolver: "WMIResolver") -> str:
        from ..lookup.wmi import WMILookup
        return WMILookup(resolver).country(self)

    def wmi_manufacturer(self, resolver: "WMIResolver") -> str:
        from ..lookup.wmi import WMILookup
        return WMILookup(resolver).manufacturer(self)

    # -------------------------------------------------------------------------
    # Proposal
    # -------------------------------------------------------------------------

    def propose(self) -> "VIN":
        """Return a new VIN that is always valid with a correct checksum."""
        return VIN(get_proposer().propose(self.content))

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_value(self) -> str:
        return self.content

    @classmethod
    def from_value(cls, value: Any) -> "VIN":
        """Accept any string as content, without validation."""
        if not isinstance(value, str):
            raise VINSerializationError(
                f"VIN must be serialized as a string, got {type(value).__name__}"
            )
        return cls(value)

    def to_json(self) -> str:
        return json.dumps(self.content)

    @classmethod
    def from_json(cls, text: str) -> "VIN":
        try:
            value = json.loads(text)
        except json.JSONDecodeError as e:
            raise VINSerializationError(f"Invalid JSON for VIN: {e}") from e
        return cls.from_value(value)


VIN.UNKNOWN = VIN(VINConstants.UNKNOWN)
UNKNOWN_VIN = VIN.UNKNOWN
