"""
VIN Proposer
============

Turns any input string into a syntactically valid VIN with a correct
check digit.

Processing steps (fixed order):
1. Upper-case
2. Remove spaces
3. Substitute I -> 1, O -> 0, Q -> 0
4. Drop every remaining character outside the VIN alphabet
5. Fall back to a fixed template when nothing is left
6. Right-pad with '0' or truncate to 17 characters
7. Write the computed check digit at position 9

The check digit is always written, including for regions that do not
require one.

Usage:
    from isovin.core.proposer import propose_vin
    propose_vin("1hgbh41j0 mn109186")   # '1HGBH41JXMN109186'
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .checksum import apply_check_digit
from .constants import VINConstants, VIN_LENGTH, VIN_VALID_CHARS

logger = logging.getLogger(__name__)


@dataclass
class ProposalResult:
    """Result of a proposal with the corrections that produced it."""
    vin: str
    raw: str
    corrections: List[str] = field(default_factory=list)
    used_fallback: bool = False

    @property
    def correction_count(self) -> int:
        return len(self.corrections)

    def to_dict(self) -> Dict:
        return {
            'vin': self.vin,
            'raw': self.raw,
            'corrections': self.corrections,
            'correction_count': self.correction_count,
            'used_fallback': self.used_fallback,
        }


class VINProposer:
    """
    Deterministic VIN repair.

    Holds no per-call state; one instance can be shared across threads.
    """

    # Disallowed letters -> look-alike digits, applied in this order
    INVALID_CHAR_RULES: Tuple[Tuple[str, str], ...] = (
        ('I', '1'),  # I looks like 1
        ('O', '0'),  # O looks like 0
        ('Q', '0'),  # Q looks like 0 (round shape)
    )

    FALLBACK_TEMPLATE: str = VINConstants.FALLBACK_TEMPLATE
    PAD_CHAR: str = VINConstants.PAD_CHAR

    def propose(self, raw_text: str) -> str:
        """Return the proposed VIN string."""
        return self.propose_with_details(raw_text).vin

    def propose_with_details(self, raw_text: str) -> ProposalResult:
        """
        Run the proposal pipeline and record every step that changed the text.

        Args:
            raw_text: Arbitrary input, possibly empty

        Returns:
            ProposalResult whose vin is always 17 valid characters with a
            matching check digit
        """
        corrections = []

        # Step 1-2: Normalize
        text = raw_text.upper().replace(' ', '')
        if text != raw_text:
            corrections.append(f"Normalized: '{raw_text}' -> '{text}'")

        # Step 3: Substitute look-alikes
        text_before = text
        text = self._apply_substitutions(text)
        if text != text_before:
            corrections.append(f"Substituted I/O/Q: '{text_before}' -> '{text}'")

        # Step 4: Filter
        text_before = text
        text = ''.join(c for c in text if c in VIN_VALID_CHARS)
        if text != text_before:
            corrections.append(f"Removed invalid characters: '{text_before}' -> '{text}'")

        # Step 5: Fallback
        used_fallback = not text
        if used_fallback:
            text = self.FALLBACK_TEMPLATE
            corrections.append(f"No usable characters, using template '{text}'")
            logger.debug(f"Falling back to template for input {raw_text!r}")

        # Step 6: Length
        text_before = text
        text = self._fit_length(text)
        if text != text_before:
            corrections.append(f"Adjusted length {len(text_before)} -> {VIN_LENGTH}: '{text}'")

        # Step 7: Check digit
        text_before = text
        text = apply_check_digit(text)
        if text != text_before:
            corrections.append(
                f"Check digit '{text_before[VINConstants.CHECK_DIGIT_INDEX]}' -> "
                f"'{text[VINConstants.CHECK_DIGIT_INDEX]}'"
            )

        if corrections:
            logger.debug(f"Proposed {text} for {raw_text!r} ({len(corrections)} corrections)")

        return ProposalResult(
            vin=text,
            raw=raw_text,
            corrections=corrections,
            used_fallback=used_fallback,
        )

    def _apply_substitutions(self, text: str) -> str:
        for old, new in self.INVALID_CHAR_RULES:
            text = text.replace(old, new)
        return text

    def _fit_length(self, text: str) -> str:
        if len(text) < VIN_LENGTH:
            return text + self.PAD_CHAR * (VIN_LENGTH - len(text))
        return text[:VIN_LENGTH]


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

_default_proposer = VINProposer()


def propose_vin(raw_text: str) -> str:
    """Propose a valid VIN using the default proposer."""
    return _default_proposer.propose(raw_text)


def get_proposer() -> VINProposer:
    """Get the default proposer instance."""
    return _default_proposer
