"""
Tests for VIN classification and segment extraction.

Run with: pytest tests/test_validity.py -v
"""

import random

import pytest

from isovin import (
    Validity,
    checksum_digit,
    classify,
    has_valid_checksum,
    is_syntactically_valid,
    vds,
    vis,
    wmi,
)
from isovin.core.constants import VIN_VALID_CHARS

from samples import HONDA_VIN, HONDA_VIN_BAD_CHECKSUM, WIKIPEDIA_VIN


# =============================================================================
# CLASSIFICATION
# =============================================================================

class TestClassify:
    """Tests for classify."""

    def test_valid_with_checksum(self):
        assert classify(HONDA_VIN) is Validity.VALID_WITH_CHECKSUM
        assert classify(WIKIPEDIA_VIN) is Validity.VALID_WITH_CHECKSUM

    def test_valid_wrong_checksum(self):
        """Correct length and alphabet, check digit 0 instead of X."""
        assert classify(HONDA_VIN_BAD_CHECKSUM) is Validity.VALID

    def test_invalid_word(self):
        assert classify("INVALID") is Validity.INVALID

    def test_empty_string(self):
        assert classify("") is Validity.INVALID

    @pytest.mark.parametrize("length", [0, 1, 3, 16, 18, 40])
    def test_wrong_length(self, length):
        assert classify("1" * length) is Validity.INVALID

    @pytest.mark.parametrize("char", ['I', 'O', 'Q'])
    def test_disallowed_letters(self, char):
        for position in (0, 8, 16):
            candidate = HONDA_VIN[:position] + char + HONDA_VIN[position + 1:]
            assert classify(candidate) is Validity.INVALID

    def test_lowercase_is_invalid(self):
        """No case folding is applied."""
        assert classify(HONDA_VIN.lower()) is Validity.INVALID

    def test_whitespace_not_trimmed(self):
        assert classify(f" {HONDA_VIN}") is Validity.INVALID

    def test_unicode_lookalikes(self):
        """Cyrillic letters that look like Latin ones are rejected."""
        assert classify("ЅΑL1P9ЕU2ЅА606664") is Validity.INVALID


class TestValidityPredicates:
    """Tests for the derived boolean predicates."""

    def test_invalid(self):
        assert Validity.INVALID.is_syntactically_valid is False
        assert Validity.INVALID.has_valid_checksum is False

    def test_valid(self):
        assert Validity.VALID.is_syntactically_valid is True
        assert Validity.VALID.has_valid_checksum is False

    def test_valid_with_checksum(self):
        assert Validity.VALID_WITH_CHECKSUM.is_syntactically_valid is True
        assert Validity.VALID_WITH_CHECKSUM.has_valid_checksum is True

    def test_string_helpers(self):
        assert is_syntactically_valid(HONDA_VIN_BAD_CHECKSUM) is True
        assert has_valid_checksum(HONDA_VIN_BAD_CHECKSUM) is False
        assert has_valid_checksum(HONDA_VIN) is True
        assert is_syntactically_valid("INVALID") is False

    def test_value_is_string(self):
        assert Validity.VALID_WITH_CHECKSUM.value == "valid_with_checksum"


# =============================================================================
# SEGMENTS
# =============================================================================

class TestSegments:
    """Tests for WMI / VDS / VIS extraction."""

    def test_honda_segments(self):
        assert wmi(HONDA_VIN) == "1HG"
        assert vds(HONDA_VIN) == "BH41JX"
        assert vis(HONDA_VIN) == "MN109186"

    def test_segments_with_wrong_checksum(self):
        """Segments only require syntactic validity."""
        assert wmi(HONDA_VIN_BAD_CHECKSUM) == "1HG"
        assert vds(HONDA_VIN_BAD_CHECKSUM) == "BH41J0"

    @pytest.mark.parametrize("vin", ["", "INVALID", HONDA_VIN.lower(), HONDA_VIN + "1"])
    def test_invalid_vin_gives_empty_segments(self, vin):
        assert wmi(vin) == ""
        assert vds(vin) == ""
        assert vis(vin) == ""

    def test_segments_partition_random_vins(self):
        """WMI + VDS + VIS reproduces every syntactically valid VIN."""
        rng = random.Random(3779)
        alphabet = sorted(VIN_VALID_CHARS)
        for _ in range(200):
            vin = ''.join(rng.choice(alphabet) for _ in range(17))
            assert classify(vin) is not Validity.INVALID
            assert wmi(vin) + vds(vin) + vis(vin) == vin
            assert (len(wmi(vin)), len(vds(vin)), len(vis(vin))) == (3, 6, 8)


class TestChecksumDigit:
    """Tests for checksum_digit."""

    def test_returns_ninth_character(self):
        assert checksum_digit(HONDA_VIN) == 'X'
        assert checksum_digit(HONDA_VIN_BAD_CHECKSUM) == '0'

    def test_only_length_is_checked(self):
        assert checksum_digit(HONDA_VIN.lower()) == 'x'
        assert checksum_digit("IIIIIIIIQIIIIIIII") == 'Q'

    @pytest.mark.parametrize("vin", ["", "SHORT", HONDA_VIN + "0"])
    def test_wrong_length_returns_none(self, vin):
        assert checksum_digit(vin) is None


# =============================================================================
# PROPERTY-BASED TESTS
# =============================================================================

class TestPropertyBased:
    """Invariants over generated inputs."""

    def test_wrong_length_always_invalid(self):
        rng = random.Random(17)
        alphabet = sorted(VIN_VALID_CHARS)
        for _ in range(200):
            length = rng.choice([n for n in range(0, 30) if n != 17])
            vin = ''.join(rng.choice(alphabet) for _ in range(length))
            assert classify(vin) is Validity.INVALID

    def test_disallowed_letter_always_invalid(self):
        rng = random.Random(9)
        alphabet = sorted(VIN_VALID_CHARS)
        for _ in range(200):
            chars = [rng.choice(alphabet) for _ in range(17)]
            chars[rng.randrange(17)] = rng.choice("IOQ")
            assert classify(''.join(chars)) is Validity.INVALID

    def test_classify_never_raises(self):
        rng = random.Random(1)
        for _ in range(200):
            length = rng.randrange(0, 25)
            text = ''.join(chr(rng.randrange(0, 0x2FF)) for _ in range(length))
            assert isinstance(classify(text), Validity)
