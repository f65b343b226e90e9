"""
Integration tests for calculate_properties.
"""

import math
import warnings
import pytest
from oligoprop import (
    calculate_properties,
    calculate_properties_result,
    OligoConfig,
    InvalidSymbol,
    InvalidConfiguration,
    ShortSequenceWarning,
    ThermoMethod,
)
from oligoprop.biophysics.tm import nearest_neighbor_tm


def _all_quantities(props):
    yield props.gc
    yield props.molecular_weight
    yield from props.melting_temps
    for row in props.thermo:
        yield from row


class TestExactSequences:
    """Sequences without ambiguous symbols."""

    @pytest.mark.parametrize(
        "key", ["primer", "palindrome", "hairpin", "at_rich", "gc_rich"]
    )
    def test_all_deltas_zero(self, sample_sequences, key):
        """Test every quantity is exact without N."""
        props = calculate_properties(sample_sequences[key])
        assert all(q.delta == 0.0 for q in _all_quantities(props))

    def test_shape(self, sample_sequences):
        """Test six Tm estimates and a 4x3 thermodynamic table."""
        props = calculate_properties(sample_sequences["primer"])
        assert len(props.melting_temps) == 6
        assert len(props.thermo) == 4
        assert all(len(row) == 3 for row in props.thermo)

    def test_counts_sum(self, sample_sequences):
        """Test counts add up to the sequence length."""
        for seq in sample_sequences.values():
            props = calculate_properties(seq)
            assert props.counts.total == len(seq)

    def test_idempotent(self, sample_sequences):
        """Test repeated calls give equal results."""
        first = calculate_properties(sample_sequences["ambiguous"], salt=0.1)
        second = calculate_properties(sample_sequences["ambiguous"], salt=0.1)
        assert first == second
        assert first.to_dict() == second.to_dict()


class TestScenarios:
    """End-to-end scenarios."""

    def test_ambiguous_sequence(self):
        """Test GC and weight deltas for one N."""
        props = calculate_properties("ACGTAGAGGACGTN")
        assert props.counts.n == 1
        assert props.gc.delta > 0
        assert props.gc.delta == pytest.approx(100 * 0.5 / 14)
        assert props.molecular_weight.delta > 0
        assert props.molecular_weight.delta == pytest.approx((329.21 - 289.18) / 2)
        assert not props.self_complementary

    def test_poly_a(self):
        """Test AAAA has a basic Tm of 8 °C and no structures."""
        with pytest.warns(ShortSequenceWarning):
            props = calculate_properties("AAAA")
        assert props.melting_temps[0].value == 8
        assert props.melting_temps[0].delta == 0
        assert props.dimers == ()
        assert props.hairpins == ()

    def test_palindrome(self):
        """Test ACGTACGT dimerizes and carries the symmetry term."""
        props = calculate_properties("ACGTACGT")
        assert props.self_complementary
        assert "ACGTACGT" in props.dimers
        dh, ds, dg = props.thermo_for(ThermoMethod.SANTALUCIA_1998)
        assert ds.value == pytest.approx(-158.5)
        assert dg.value == pytest.approx(dh.value - 298.15 * ds.value / 1000)

    def test_self_complementary_uses_b_of_one(self):
        """Test NN Tm of ACGT uses b = 1."""
        with pytest.warns(ShortSequenceWarning):
            props = calculate_properties("ACGT")
        assert props.self_complementary
        for method in ThermoMethod:
            dh, ds, _ = props.thermo_for(method)
            expected = nearest_neighbor_tm(dh.value, ds.value, 0.05, 50e-6, True)
            assert props.tm_for(method).value == pytest.approx(expected)

    def test_hairpin(self):
        """Test GGGGAAACCCC forms one hairpin."""
        props = calculate_properties("GGGGAAACCCC")
        assert props.hairpins == ("GGGGaaaCCCC",)

    def test_gc_bounds(self):
        """Test the GC range stays within 0-100 for N-heavy sequences."""
        for seq in ["N", "NNNNNNNN", "GCGCNNNN", "ATATNNNN"]:
            with warnings.catch_warnings():
                warnings.simplefilter("ignore", ShortSequenceWarning)
                gc = calculate_properties(seq).gc
            assert gc.low >= 0
            assert gc.high <= 100


class TestOptions:
    """Configuration handling."""

    def test_keyword_options(self):
        """Test keyword options reach the Tm calculator."""
        props = calculate_properties("ATCGATCGATCGATCGATCG", salt=1.0)
        expected = 100.5 + 41 * 10 / 20 - 820 / 20 + 16.6 * math.log10(1.0)
        assert props.melting_temps[1].value == pytest.approx(expected)

    def test_config_object(self):
        """Test a config object sets the ΔG temperature."""
        config = OligoConfig(temperature=37)
        props = calculate_properties("ATCGATCGATCGATCGATCG", config)
        dh, ds, dg = props.thermo[0]
        assert dg.value == pytest.approx(dh.value - 310.15 * ds.value / 1000)

    def test_keyword_overrides_config(self):
        """Test keyword options take precedence over the config."""
        config = OligoConfig(hairpin_min_loop=4)
        assert calculate_properties("GGGGAAACCCC", config).hairpins == ()
        assert calculate_properties("GGGGAAACCCC", config, hairpin_min_loop=3).hairpins

    def test_structure_thresholds(self):
        """Test the dimer threshold is applied."""
        props = calculate_properties("ACGTACGT", dimer_min_length=5)
        assert props.dimers == ("ACGTACGT",)

    def test_defaults_on_short_sequence(self):
        """Default thresholds do not fail on sequences shorter than them."""
        with pytest.warns(ShortSequenceWarning):
            props = calculate_properties("ACG")
        assert props.dimers == ()


class TestErrors:
    """Validation failures."""

    def test_invalid_symbol(self):
        """Test invalid symbols raise InvalidSymbol."""
        with pytest.raises(InvalidSymbol):
            calculate_properties("ACGU")

    def test_negative_salt(self):
        """Test a negative salt raises InvalidConfiguration."""
        with pytest.raises(InvalidConfiguration) as excinfo:
            calculate_properties("ACGTACGTAC", salt=-1)
        assert excinfo.value.option == "salt"

    def test_threshold_not_below_length(self):
        """Test a threshold equal to the length is rejected."""
        with pytest.raises(InvalidConfiguration):
            calculate_properties("ACGTACGTAC", hairpin_min_stem=10)

    def test_unknown_option(self):
        """Test an unknown keyword option is rejected."""
        with pytest.raises(InvalidConfiguration):
            calculate_properties("ACGTACGTAC", magnesium=0.002)

    def test_fails_before_computation(self):
        """No short-sequence warning is issued when options are invalid."""
        with warnings.catch_warnings():
            warnings.simplefilter("error", ShortSequenceWarning)
            with pytest.raises(InvalidConfiguration):
                calculate_properties("ACG", salt=0)

    def test_result_variant(self):
        """Test the Result variant returns Ok or Err instead of raising."""
        assert calculate_properties_result("ACGTACGTAC").is_ok()
        result = calculate_properties_result("ACGU")
        assert result.is_err()
        assert isinstance(result.unwrap_err(), InvalidSymbol)
        result = calculate_properties_result("ACGTACGTAC", salt=-1)
        assert isinstance(result.unwrap_err(), InvalidConfiguration)
