"""
Oligonucleotide property aggregator.

Single entry point that validates options and sequence, runs every
calculator and assembles an immutable OligoProperties record. The encoder
and option validation report failures as Err values; this is the layer
where they are turned into exceptions. Validation always completes before
any computation, so a failure never yields a partial result.
"""

from __future__ import annotations
import logging
from typing import Any, Optional

from oligoprop.biophysics.alignment import complement_alignments
from oligoprop.biophysics.dimer import find_dimers
from oligoprop.biophysics.encoding import encode_sequence
from oligoprop.biophysics.gc import calculate_gc
from oligoprop.biophysics.hairpin import find_hairpins
from oligoprop.biophysics.thermo import calculate_thermo
from oligoprop.biophysics.tm import calculate_melting_temps
from oligoprop.biophysics.weight import calculate_molecular_weight
from oligoprop.core.config import OligoConfig
from oligoprop.core.errors import OligoPropError
from oligoprop.core.models import OligoProperties
from oligoprop.core.result import Result, try_oligoprop

logger = logging.getLogger(__name__)


def calculate_properties(
    sequence: str,
    config: Optional[OligoConfig] = None,
    **options: Any,
) -> OligoProperties:
    """
    Calculate all properties of a DNA oligonucleotide.

    Args:
        sequence: DNA sequence over A/C/G/T/N (any case)
        config: Options; keyword ``options`` override its fields
        **options: salt, primer_conc, temperature, hairpin_min_stem,
            hairpin_min_loop, dimer_min_length

    Returns:
        OligoProperties

    Raises:
        InvalidSymbol: sequence holds characters outside A/C/G/T/N
        InvalidConfiguration: an option is out of range or of the wrong type

    Warns:
        ShortSequenceWarning: sequence shorter than 8 bases

    Example:
        >>> props = calculate_properties("ACGTAGAGGACGTN")
        >>> round(props.gc.value, 2), round(props.gc.delta, 2)
        (53.57, 3.57)
    """
    config = (config or OligoConfig()).merged(**options)

    # Err.unwrap re-raises the InvalidSymbol / InvalidConfiguration it holds
    encoded = encode_sequence(sequence).unwrap()
    settings = config.validate(len(encoded)).unwrap()
    logger.debug(f"Analysing {encoded.sequence} ({len(encoded)} nt, N={encoded.counts.n})")

    thermo = calculate_thermo(encoded, settings.temperature)
    alignments = complement_alignments(encoded.codes)

    return OligoProperties(
        sequence=encoded.sequence,
        counts=encoded.counts,
        self_complementary=thermo.self_complementary,
        gc=calculate_gc(encoded.counts),
        molecular_weight=calculate_molecular_weight(encoded.counts),
        melting_temps=calculate_melting_temps(encoded.counts, thermo, settings),
        thermo=thermo.table,
        hairpins=find_hairpins(
            encoded,
            settings.hairpin_min_stem,
            settings.hairpin_min_loop,
            alignments,
        ),
        dimers=find_dimers(encoded, settings.dimer_min_length, alignments),
    )


def calculate_properties_result(
    sequence: str,
    config: Optional[OligoConfig] = None,
    **options: Any,
) -> Result[OligoProperties, OligoPropError]:
    """
    Result-returning variant of calculate_properties.

    Returns:
        Ok(OligoProperties) on success
        Err(InvalidSymbol | InvalidConfiguration) on invalid input
    """
    return try_oligoprop(calculate_properties, sequence, config, **options)
