"""
Molecular weight of a single-stranded DNA oligonucleotide.

Weights per nucleotide follow OligoCalc (Northwestern University); 61.96 is
subtracted for the missing 5' phosphate. An ambiguous N is counted as the
mean of G (heaviest) and C (lightest), so the delta spans every N being C
to every N being G.
"""

from __future__ import annotations

from oligoprop.core.models import BoundedQuantity, SymbolCounts

# g/mol per nucleotide
NUCLEOTIDE_WEIGHTS = {
    "A": 313.21,
    "C": 289.18,
    "G": 329.21,
    "T": 304.2,
}

END_GROUP_CORRECTION = 61.96


def calculate_molecular_weight(counts: SymbolCounts) -> BoundedQuantity:
    """
    Calculate molecular weight in g/mol.

    Args:
        counts: Symbol counts of a validated sequence

    Returns:
        BoundedQuantity (delta is 0.0 without N)
    """
    w = NUCLEOTIDE_WEIGHTS
    weight = (
        counts.a * w["A"]
        + counts.c * w["C"]
        + counts.g * w["G"]
        + counts.t * w["T"]
        - END_GROUP_CORRECTION
        + counts.n * (w["G"] + w["C"]) / 2
    )
    delta = counts.n * abs(w["G"] - w["C"]) / 2
    return BoundedQuantity(weight, delta)
