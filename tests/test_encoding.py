"""
Tests for oligoprop.biophysics.encoding module.
"""

import pytest
from oligoprop.biophysics.encoding import (
    encode_sequence,
    decode_codes,
    count_symbols,
    codes_pair,
    normalize_sequence,
    SYMBOL_CODES,
)
from oligoprop.core.errors import InvalidSymbol


class TestEncode:
    """Tests for sequence encoding."""

    def test_codes(self):
        """Test A=0, C=1, G=2, T=3, N=4."""
        encoded = encode_sequence("ACGTN").unwrap()
        assert encoded.codes == (0, 1, 2, 3, 4)
        assert encoded.sequence == "ACGTN"

    def test_lowercase_normalized(self):
        """Test lower-case input is upper-cased."""
        encoded = encode_sequence("acgtn").unwrap()
        assert encoded.sequence == "ACGTN"
        assert encoded.codes == (0, 1, 2, 3, 4)

    def test_round_trip(self):
        """Test decoding reverses encoding."""
        assert decode_codes(encode_sequence("GATTACAN").unwrap().codes) == "GATTACAN"

    def test_counts(self):
        """Test symbol counts of an ambiguous sequence."""
        encoded = encode_sequence("ACGTAGAGGACGTN").unwrap()
        counts = encoded.counts
        assert (counts.a, counts.c, counts.g, counts.t, counts.n) == (4, 2, 5, 2, 1)
        assert encoded.is_ambiguous

    @pytest.mark.parametrize("seq", ["A", "ACGT", "NNNN", "GATTACA" * 7])
    def test_counts_sum_to_length(self, seq):
        """Test counts always add up to the sequence length."""
        assert count_symbols(seq).total == len(seq)


class TestValidation:
    """Tests for invalid input, reported as Err values."""

    def test_valid_sequence_is_ok(self):
        """Test a clean sequence gives Ok."""
        assert encode_sequence("ACGTN").is_ok()
        assert normalize_sequence("acgt").unwrap() == "ACGT"

    def test_uracil_rejected(self):
        """Test U is not accepted."""
        result = encode_sequence("ACGU")
        assert result.is_err()
        error = result.unwrap_err()
        assert isinstance(error, InvalidSymbol)
        assert error.symbols == ("U",)

    def test_multiple_invalid(self):
        """Test every offending symbol is named, sorted."""
        error = encode_sequence("AC-GRX").unwrap_err()
        assert error.symbols == ("-", "R", "X")

    def test_invalid_symbol_is_value_error(self):
        """Test InvalidSymbol can be caught as ValueError."""
        error = normalize_sequence("ACGT ").unwrap_err()
        assert isinstance(error, ValueError)

    def test_empty_rejected(self):
        """Test an empty sequence gives Err."""
        result = encode_sequence("")
        assert result.is_err()
        assert "Empty" in str(result.unwrap_err())

    def test_unwrap_raises(self):
        """Test unwrapping an Err raises the InvalidSymbol it holds."""
        with pytest.raises(InvalidSymbol):
            encode_sequence("ACGU").unwrap()


class TestPairing:
    """Tests for base pairing of codes."""

    @pytest.mark.parametrize("a, b", [("A", "T"), ("T", "A"), ("C", "G"), ("G", "C")])
    def test_watson_crick(self, a, b):
        """Test Watson-Crick partners pair."""
        assert codes_pair(SYMBOL_CODES[a], SYMBOL_CODES[b])

    @pytest.mark.parametrize("a, b", [("A", "A"), ("A", "C"), ("G", "T"), ("C", "C")])
    def test_mismatch(self, a, b):
        """Test non-complementary bases do not pair."""
        assert not codes_pair(SYMBOL_CODES[a], SYMBOL_CODES[b])

    @pytest.mark.parametrize("base", "ACGTN")
    def test_n_pairs_with_anything(self, base):
        """Test N pairs with every symbol in both positions."""
        assert codes_pair(SYMBOL_CODES["N"], SYMBOL_CODES[base])
        assert codes_pair(SYMBOL_CODES[base], SYMBOL_CODES["N"])
