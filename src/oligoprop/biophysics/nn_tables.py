"""
Nearest-neighbor thermodynamic parameter tables.

Stacking parameters for four DNA/DNA parameter sets, as compiled by
Panjkovich & Melo (2005):

    Breslauer KJ, Frank R, Blocker H, Marky LA. (1986)
        PNAS 83:3746-3750.
    SantaLucia J, Allawi HT, Seneviratne PA. (1996)
        Biochemistry 35:3555-3562.
    SantaLucia J. (1998)
        PNAS 95:1460-1465.
    Sugimoto N, Nakano S, Yoneyama M, Honda K. (1996)
        Nucleic Acids Res. 24(22):4501-4505.

Tables are 5x5 arrays indexed by (5' base code, 3' base code) with
A=0, C=1, G=2, T=3, N=4. The N row and column hold the mean over the
concrete bases they stand for. Arrays are write-protected module
constants and safe to share between threads.

Units:
    ΔH° in kcal/mol, ΔS° in cal/(K·mol)
"""

from __future__ import annotations
from typing import NamedTuple

import numpy as np

from oligoprop.core.models import ThermoMethod


class NNTable(NamedTuple):
    """Enthalpy and entropy stacking tables for one parameter set."""
    enthalpy: np.ndarray
    entropy: np.ndarray


def _with_ambiguity(table: list[list[float]]) -> np.ndarray:
    """Extend a 4x4 table with the N row/column (means) and freeze it."""
    core = np.asarray(table, dtype=float)
    extended = np.empty((5, 5), dtype=float)
    extended[:4, :4] = core
    extended[:4, 4] = core.mean(axis=1)
    extended[4, :4] = core.mean(axis=0)
    extended[4, 4] = core.mean()
    extended.setflags(write=False)
    return extended


# Rows: 5' base A, C, G, T; columns: 3' base A, C, G, T
NN_TABLES: dict[ThermoMethod, NNTable] = {
    ThermoMethod.BRESLAUER_1986: NNTable(
        enthalpy=_with_ambiguity([
            [-9.1, -6.5, -7.8, -8.6],
            [-5.8, -11.0, -11.9, -7.8],
            [-5.6, -11.1, -11.0, -6.5],
            [-6.0, -5.6, -5.8, -9.1],
        ]),
        entropy=_with_ambiguity([
            [-24.0, -17.3, -20.8, -23.9],
            [-12.9, -26.6, -27.8, -20.8],
            [-13.5, -26.7, -26.6, -17.3],
            [-16.9, -13.5, -12.9, -24.0],
        ]),
    ),
    ThermoMethod.SANTALUCIA_1996: NNTable(
        enthalpy=_with_ambiguity([
            [-8.4, -8.6, -6.1, -6.5],
            [-7.4, -6.7, -10.1, -6.1],
            [-7.7, -11.1, -6.7, -8.6],
            [-6.3, -7.7, -7.4, -8.4],
        ]),
        entropy=_with_ambiguity([
            [-23.6, -23.0, -16.1, -18.8],
            [-19.3, -15.6, -25.5, -16.1],
            [-20.3, -28.4, -15.6, -23.0],
            [-18.5, -20.3, -19.3, -23.6],
        ]),
    ),
    ThermoMethod.SANTALUCIA_1998: NNTable(
        enthalpy=_with_ambiguity([
            [-7.9, -8.4, -7.8, -7.2],
            [-8.5, -8.0, -10.6, -7.8],
            [-8.2, -9.8, -8.0, -8.4],
            [-7.2, -8.2, -8.5, -7.9],
        ]),
        entropy=_with_ambiguity([
            [-22.2, -22.4, -21.0, -20.4],
            [-22.7, -19.9, -27.2, -21.0],
            [-22.2, -24.4, -19.9, -22.4],
            [-21.3, -22.2, -22.7, -22.2],
        ]),
    ),
    ThermoMethod.SUGIMOTO_1996: NNTable(
        enthalpy=_with_ambiguity([
            [-8.0, -9.4, -6.6, -5.6],
            [-8.2, -10.9, -11.8, -6.6],
            [-8.8, -10.5, -10.9, -9.4],
            [-6.6, -8.8, -8.2, -8.0],
        ]),
        entropy=_with_ambiguity([
            [-21.9, -25.5, -16.4, -15.2],
            [-21.0, -28.4, -29.0, -16.4],
            [-23.5, -26.4, -28.4, -25.5],
            [-18.4, -23.5, -21.0, -21.9],
        ]),
    ),
}


# Corrections, one (ΔH, ΔS) pair per method in ThermoMethod order

# Initiation for duplexes made only of A·T pairs
AT_ONLY_INITIATION = ((0.0, -20.13), (0.0, -9.0), (0.0, 0.0), (0.6, -9.0))
# Initiation for duplexes with at least one G·C pair
GC_INITIATION = ((0.0, -16.77), (0.0, -5.9), (0.0, 0.0), (0.6, -9.0))
# Self-complementary duplexes
SYMMETRY_CORRECTION = ((0.0, -1.34), (0.0, -1.4), (0.0, -1.4), (0.0, -1.4))

# SantaLucia (1998) terminal initiation, applied per duplex end
TERMINAL_GC = (0.1, -2.8)
TERMINAL_AT = (2.3, 4.1)
