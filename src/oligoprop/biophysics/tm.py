"""
Melting temperature (Tm) calculator.

Tm indicates the temperature at which 50% of duplexes dissociate. Six
estimates are reported, in this order:

- Basic (Marmur & Doty, 1962)
- Salt adjusted (Howley et al., 1979)
- Nearest-neighbor, one per parameter set (see ``nn_tables``)

The two empirical formulas switch regime at 14 bases: short oligos use the
Wallace rule (2 °C per A/T, 4 °C per G/C), longer ones a GC-fraction
formula. An N counts as the mean of both (3 °C) in the Wallace rule and as
half a G/C in the GC-fraction formula.

Nearest-neighbor Tm (Panjkovich & Melo, 2005):

    Tm = ΔH·1000 / (ΔS + R·ln(Ct/b)) + 16.6·log10([Na+]) - 273.15

with b = 1 for self-complementary oligos and 4 otherwise.
"""

from __future__ import annotations
import math

from oligoprop.biophysics.thermo import ThermoResult
from oligoprop.core.config import AnalysisSettings, DEFAULT_SALT
from oligoprop.core.models import BoundedQuantity, SymbolCounts

GAS_CONSTANT = 1.9872  # cal/(K·mol)
SHORT_OLIGO_LENGTH = 14


def salt_correction(salt: float) -> float:
    """16.6·log10([Na+]) term shared by the salt-aware formulas."""
    return 16.6 * math.log10(salt)


def basic_tm(counts: SymbolCounts) -> BoundedQuantity:
    """
    Basic Tm in °C.

    Example:
        >>> basic_tm(SymbolCounts(a=4)).value
        8.0
    """
    total = counts.total
    if total < SHORT_OLIGO_LENGTH:
        return BoundedQuantity(
            float(2 * counts.at + 4 * counts.gc + 3 * counts.n),
            float(counts.n),
        )
    return BoundedQuantity(
        64.9 + 41 * (counts.gc + counts.n / 2 - 16.4) / total,
        41 * (counts.n / 2) / total,
    )


def salt_adjusted_tm(counts: SymbolCounts, salt: float = DEFAULT_SALT) -> BoundedQuantity:
    """Salt-adjusted Tm in °C for a [Na+] of ``salt`` mol/L."""
    total = counts.total
    if total < SHORT_OLIGO_LENGTH:
        # Wallace rule is calibrated at 50 mM
        return basic_tm(counts) + (salt_correction(salt) - salt_correction(DEFAULT_SALT))
    return BoundedQuantity(
        100.5
        + 41 * (counts.gc + counts.n / 2) / total
        - 820 / total
        + salt_correction(salt),
        41 * (counts.n / 2) / total,
    )


def nearest_neighbor_tm(
    delta_h: float,
    delta_s: float,
    salt: float,
    primer_conc: float,
    self_complementary: bool,
) -> float:
    """
    Nearest-neighbor Tm in °C for one (ΔH, ΔS) pair.

    Args:
        delta_h: Enthalpy in kcal/mol
        delta_s: Entropy in cal/(K·mol)
        salt: [Na+] in mol/L
        primer_conc: Oligo concentration in mol/L
        self_complementary: Selects b = 1 (True) or b = 4 (False)
    """
    b = 1 if self_complementary else 4
    return (
        delta_h * 1000 / (delta_s + GAS_CONSTANT * math.log(primer_conc / b))
        + salt_correction(salt)
        - 273.15
    )


def calculate_melting_temps(
    counts: SymbolCounts,
    thermo: ThermoResult,
    settings: AnalysisSettings,
) -> tuple[BoundedQuantity, ...]:
    """
    Calculate all six Tm estimates.

    Args:
        counts: Symbol counts
        thermo: Nearest-neighbor result for the same sequence
        settings: Resolved salt and primer concentrations

    Returns:
        (basic, salt adjusted, Breslauer86, SantaLucia96, SantaLucia98,
        Sugimoto96), each as a BoundedQuantity
    """
    temps = [basic_tm(counts), salt_adjusted_tm(counts, settings.salt)]
    for (h1, s1), (h2, s2) in zip(thermo.gc_case, thermo.at_case):
        temps.append(BoundedQuantity.from_cases(
            nearest_neighbor_tm(h1, s1, settings.salt, settings.primer_conc,
                                thermo.self_complementary),
            nearest_neighbor_tm(h2, s2, settings.salt, settings.primer_conc,
                                thermo.self_complementary),
        ))
    return tuple(temps)
