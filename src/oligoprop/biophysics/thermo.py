"""
Nearest-neighbor thermodynamics (ΔH°, ΔS°, ΔG°) for DNA duplexes.

For each of the four parameter sets the stacking contributions of every
adjacent base pair are summed, then corrected in a fixed order:

    1. composition initiation (A·T-only duplexes vs. duplexes with G·C)
    2. symmetry (self-complementary sequences)
    3. terminal initiation (SantaLucia 1998 only, per duplex end)

ΔG° is derived afterwards at the requested temperature:

    ΔG° = ΔH° - T·ΔS°/1000

Ambiguous sequences are evaluated twice, once resolving every N to G/C and
once to A/T, for the corrections that depend on base identity. The reported
value is the midpoint of the two cases and the delta half their difference.
The stacking sum itself uses the averaged N entries of the tables.
"""

from __future__ import annotations
import logging
import warnings
from dataclasses import dataclass
from functools import reduce
from typing import Callable

import numpy as np
from Bio.Seq import Seq

from oligoprop.biophysics.encoding import EncodedSequence, SYMBOL_CODES, N_CODE
from oligoprop.biophysics.nn_tables import (
    NN_TABLES,
    AT_ONLY_INITIATION,
    GC_INITIATION,
    SYMMETRY_CORRECTION,
    TERMINAL_GC,
    TERMINAL_AT,
)
from oligoprop.core.errors import ShortSequenceWarning
from oligoprop.core.models import BoundedQuantity, ThermoMethod, THERMO_METHODS

logger = logging.getLogger(__name__)

MIN_RELIABLE_LENGTH = 8

# (ΔH, ΔS) per method, in THERMO_METHODS order
Energies = tuple[tuple[float, float], ...]

_WEAK_CODES = frozenset({SYMBOL_CODES["A"], SYMBOL_CODES["T"]})
_SANTALUCIA_1998_ROW = THERMO_METHODS.index(ThermoMethod.SANTALUCIA_1998)


@dataclass(frozen=True, slots=True)
class CorrectionContext:
    """
    Sequence facts the correction steps depend on.

    Attributes:
        codes: Encoded sequence
        self_complementary: Sequence equals its reverse complement
        n_as_gc: Resolve N to G/C (True) or to A/T (False)
    """
    codes: tuple[int, ...]
    self_complementary: bool
    n_as_gc: bool

    def is_weak(self, code: int) -> bool:
        """A/T base, or an N resolved to A/T."""
        if code == N_CODE:
            return not self.n_as_gc
        return code in _WEAK_CODES

    @property
    def at_only(self) -> bool:
        return all(self.is_weak(code) for code in self.codes)


Correction = Callable[[Energies, CorrectionContext], Energies]


@dataclass(frozen=True, slots=True)
class ThermoResult:
    """
    Nearest-neighbor thermodynamics for one sequence.

    Attributes:
        self_complementary: Whether the symmetry correction was applied
        gc_case: Corrected (ΔH, ΔS) per method with every N read as G/C
        at_case: Corrected (ΔH, ΔS) per method with every N read as A/T
        table: 4x3 bounded ΔH, ΔS, ΔG per method
    """
    self_complementary: bool
    gc_case: Energies
    at_case: Energies
    table: tuple[tuple[BoundedQuantity, ...], ...]

    def row(self, method: ThermoMethod) -> tuple[BoundedQuantity, ...]:
        return self.table[THERMO_METHODS.index(ThermoMethod(method))]


def is_self_complementary(sequence: str) -> bool:
    """
    Check if a sequence equals its own reverse complement.

    Sequences containing N are never treated as self-complementary:
    the identity of the ambiguous positions cannot be proven to match.
    """
    if "N" in sequence:
        return False
    return str(Seq(sequence).reverse_complement()) == sequence


def warn_if_short(length: int) -> None:
    """Issue ShortSequenceWarning below MIN_RELIABLE_LENGTH bases."""
    if length < MIN_RELIABLE_LENGTH:
        message = (
            f"Sequence length {length} is below {MIN_RELIABLE_LENGTH}; "
            "nearest-neighbor corrections were fitted on longer oligos"
        )
        logger.warning(message)
        warnings.warn(message, ShortSequenceWarning, stacklevel=3)


def stacking_energies(codes: tuple[int, ...]) -> Energies:
    """Sum table entries over every adjacent base pair, per method."""
    index = np.asarray(codes, dtype=np.intp)
    first, second = index[:-1], index[1:]
    return tuple(
        (
            float(NN_TABLES[method].enthalpy[first, second].sum()),
            float(NN_TABLES[method].entropy[first, second].sum()),
        )
        for method in THERMO_METHODS
    )


def _add(energies: Energies, corrections: Energies) -> Energies:
    return tuple(
        (h + dh, s + ds) for (h, s), (dh, ds) in zip(energies, corrections)
    )


def composition_correction(energies: Energies, ctx: CorrectionContext) -> Energies:
    if ctx.at_only:
        return _add(energies, AT_ONLY_INITIATION)
    return _add(energies, GC_INITIATION)


def symmetry_correction(energies: Energies, ctx: CorrectionContext) -> Energies:
    if ctx.self_complementary:
        return _add(energies, SYMMETRY_CORRECTION)
    return energies


def terminal_correction(energies: Energies, ctx: CorrectionContext) -> Energies:
    dh, ds = 0.0, 0.0
    for code in (ctx.codes[0], ctx.codes[-1]):
        h, s = TERMINAL_AT if ctx.is_weak(code) else TERMINAL_GC
        dh += h
        ds += s

    corrections = [(0.0, 0.0)] * len(energies)
    corrections[_SANTALUCIA_1998_ROW] = (dh, ds)
    return _add(energies, tuple(corrections))


CORRECTIONS: tuple[Correction, ...] = (
    composition_correction,
    symmetry_correction,
    terminal_correction,
)


def apply_corrections(energies: Energies, ctx: CorrectionContext) -> Energies:
    """Thread the raw stacking energies through CORRECTIONS in order."""
    return reduce(lambda acc, correction: correction(acc, ctx), CORRECTIONS, energies)


def gibbs_energy(delta_h: float, delta_s: float, temperature: float) -> float:
    """ΔG° in kcal/mol at ``temperature`` °C."""
    return delta_h - (temperature + 273.15) * (delta_s / 1000)


def calculate_thermo(encoded: EncodedSequence, temperature: float = 25.0) -> ThermoResult:
    """
    Calculate ΔH°, ΔS° and ΔG° for all four parameter sets.

    Args:
        encoded: Validated, encoded sequence
        temperature: Temperature in °C used for ΔG°

    Returns:
        ThermoResult

    Warns:
        ShortSequenceWarning: for sequences shorter than 8 bases
    """
    warn_if_short(len(encoded))

    self_comp = is_self_complementary(encoded.sequence)
    raw = stacking_energies(encoded.codes)

    gc_case = apply_corrections(
        raw, CorrectionContext(encoded.codes, self_comp, n_as_gc=True)
    )
    at_case = apply_corrections(
        raw, CorrectionContext(encoded.codes, self_comp, n_as_gc=False)
    )

    table = []
    for (h1, s1), (h2, s2) in zip(gc_case, at_case):
        table.append((
            BoundedQuantity.from_cases(h1, h2),
            BoundedQuantity.from_cases(s1, s2),
            BoundedQuantity.from_cases(
                gibbs_energy(h1, s1, temperature),
                gibbs_energy(h2, s2, temperature),
            ),
        ))

    logger.debug(
        f"NN thermodynamics for {encoded.sequence} "
        f"(self-complementary={self_comp}): {table}"
    )
    return ThermoResult(
        self_complementary=self_comp,
        gc_case=gc_case,
        at_case=at_case,
        table=tuple(table),
    )
