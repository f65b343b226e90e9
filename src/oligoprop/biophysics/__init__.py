"""
Biophysical property calculators for DNA oligonucleotides.

Available calculators:
- Encoding: symbol validation, integer codes and counts
- GC content and molecular weight
- Nearest-neighbor thermodynamics: ΔH°, ΔS°, ΔG° for four parameter sets
- Melting temperature (Tm): six estimates
- Hairpin and self-dimer detection from self-complementary alignments

All numeric results are BoundedQuantity values so that ambiguous N symbols
carry their uncertainty. All functions are pure and thread-safe.
"""

from oligoprop.biophysics.encoding import (
    EncodedSequence,
    encode_sequence,
    decode_codes,
    count_symbols,
)
from oligoprop.biophysics.gc import calculate_gc
from oligoprop.biophysics.weight import calculate_molecular_weight
from oligoprop.biophysics.thermo import (
    ThermoResult,
    calculate_thermo,
    is_self_complementary,
)
from oligoprop.biophysics.tm import (
    calculate_melting_temps,
    basic_tm,
    salt_adjusted_tm,
    nearest_neighbor_tm,
)
from oligoprop.biophysics.alignment import Alignment, complement_alignments
from oligoprop.biophysics.hairpin import find_hairpins
from oligoprop.biophysics.dimer import find_dimers

__all__ = [
    # Encoding
    "EncodedSequence",
    "encode_sequence",
    "decode_codes",
    "count_symbols",
    # Composition
    "calculate_gc",
    "calculate_molecular_weight",
    # Thermodynamics
    "ThermoResult",
    "calculate_thermo",
    "is_self_complementary",
    # Melting temperature
    "calculate_melting_temps",
    "basic_tm",
    "salt_adjusted_tm",
    "nearest_neighbor_tm",
    # Secondary structure
    "Alignment",
    "complement_alignments",
    "find_hairpins",
    "find_dimers",
]
