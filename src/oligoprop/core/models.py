"""
Core data models for oligoprop.

Defines immutable data classes for symbol counts, bounded (midpoint ± delta)
quantities and the aggregated property record. All models use frozen
dataclasses with slots.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterator
import pandas as pd


class ThermoMethod(str, Enum):
    """
    Nearest-neighbor parameter sets, in reporting order.

    The order is fixed: thermodynamic rows and the NN melting temperatures
    are always reported as Breslauer86, SantaLucia96, SantaLucia98,
    Sugimoto96.
    """

    BRESLAUER_1986 = "breslauer_1986"  # Breslauer et al. (1986)
    SANTALUCIA_1996 = "santalucia_1996"  # SantaLucia, Allawi & Seneviratne (1996)
    SANTALUCIA_1998 = "santalucia_1998"  # SantaLucia (1998), unified
    SUGIMOTO_1996 = "sugimoto_1996"  # Sugimoto et al. (1996)


THERMO_METHODS: tuple[ThermoMethod, ...] = tuple(ThermoMethod)

# Row labels for OligoProperties.melting_temps
TM_LABELS: tuple[str, ...] = (
    "basic",
    "salt_adjusted",
    *(method.value for method in THERMO_METHODS),
)

# Column labels for OligoProperties.thermo
THERMO_COLUMNS: tuple[str, ...] = ("delta_h", "delta_s", "delta_g")


@dataclass(frozen=True, slots=True)
class SymbolCounts:
    """
    Per-symbol counts of a validated DNA sequence.

    Attributes:
        a, c, g, t: Counts of the unambiguous bases
        n: Count of ambiguous 'N' symbols
    """
    a: int = 0
    c: int = 0
    g: int = 0
    t: int = 0
    n: int = 0

    @property
    def total(self) -> int:
        return self.a + self.c + self.g + self.t + self.n

    @property
    def gc(self) -> int:
        return self.g + self.c

    @property
    def at(self) -> int:
        return self.a + self.t

    @property
    def is_ambiguous(self) -> bool:
        return self.n > 0

    def __iter__(self) -> Iterator[int]:
        return iter((self.a, self.c, self.g, self.t, self.n))


@dataclass(frozen=True, slots=True)
class BoundedQuantity:
    """
    A value known to lie in [value - delta, value + delta].

    For sequences without ambiguous symbols every quantity is exact and
    delta is 0.0.

    Attributes:
        value: Midpoint estimate
        delta: Half-width of the range (>= 0)
    """
    value: float
    delta: float = 0.0

    def __post_init__(self) -> None:
        if self.delta < 0:
            raise ValueError(f"delta must be >= 0, got {self.delta}")

    @classmethod
    def exact(cls, value: float) -> BoundedQuantity:
        return cls(float(value), 0.0)

    @classmethod
    def from_cases(cls, first: float, second: float) -> BoundedQuantity:
        """Midpoint and half-spread of two fully resolved estimates."""
        return cls((first + second) / 2, abs(first - second) / 2)

    @property
    def low(self) -> float:
        return self.value - self.delta

    @property
    def high(self) -> float:
        return self.value + self.delta

    @property
    def is_exact(self) -> bool:
        return self.delta == 0

    def __add__(self, other: BoundedQuantity | float) -> BoundedQuantity:
        if isinstance(other, BoundedQuantity):
            return BoundedQuantity(self.value + other.value, self.delta + other.delta)
        return BoundedQuantity(self.value + other, self.delta)

    __radd__ = __add__

    def __sub__(self, other: BoundedQuantity | float) -> BoundedQuantity:
        if isinstance(other, BoundedQuantity):
            return BoundedQuantity(self.value - other.value, self.delta + other.delta)
        return BoundedQuantity(self.value - other, self.delta)

    def __mul__(self, factor: float) -> BoundedQuantity:
        return BoundedQuantity(self.value * factor, self.delta * abs(factor))

    __rmul__ = __mul__

    def __str__(self) -> str:
        if self.is_exact:
            return f"{self.value:.4f}"
        return f"{self.value:.4f} ± {self.delta:.4f}"


@dataclass(frozen=True, slots=True)
class OligoProperties:
    """
    Immutable record of all properties computed for one oligonucleotide.

    Attributes:
        sequence: Validated, upper-case sequence
        counts: Symbol counts (A, C, G, T, N)
        self_complementary: Whether the sequence equals its reverse complement
        gc: GC content in percent
        molecular_weight: Molecular weight in g/mol
        melting_temps: Six Tm estimates in °C, ordered as TM_LABELS
        thermo: 4x3 table, rows THERMO_METHODS, columns ΔH (kcal/mol),
            ΔS (cal/(K·mol)), ΔG (kcal/mol)
        hairpins: Rendered potential hairpin structures
        dimers: Rendered potential self-dimers
    """
    sequence: str
    counts: SymbolCounts
    self_complementary: bool
    gc: BoundedQuantity
    molecular_weight: BoundedQuantity
    melting_temps: tuple[BoundedQuantity, ...]
    thermo: tuple[tuple[BoundedQuantity, ...], ...]
    hairpins: tuple[str, ...] = ()
    dimers: tuple[str, ...] = ()

    @property
    def is_ambiguous(self) -> bool:
        return self.counts.is_ambiguous

    def tm_for(self, method: ThermoMethod) -> BoundedQuantity:
        """Nearest-neighbor Tm for a single parameter set."""
        return self.melting_temps[2 + THERMO_METHODS.index(ThermoMethod(method))]

    def thermo_for(self, method: ThermoMethod) -> tuple[BoundedQuantity, ...]:
        """(ΔH, ΔS, ΔG) row for a single parameter set."""
        return self.thermo[THERMO_METHODS.index(ThermoMethod(method))]

    def tm_frame(self) -> pd.DataFrame:
        """Melting temperatures as a DataFrame indexed by method label."""
        return pd.DataFrame(
            {
                "tm": [q.value for q in self.melting_temps],
                "tm_delta": [q.delta for q in self.melting_temps],
            },
            index=pd.Index(TM_LABELS, name="method"),
        )

    def thermo_frame(self) -> pd.DataFrame:
        """Thermodynamic table as a DataFrame with value/delta column pairs."""
        data: dict[str, list[float]] = {}
        for col, name in enumerate(THERMO_COLUMNS):
            data[name] = [row[col].value for row in self.thermo]
            data[f"{name}_delta"] = [row[col].delta for row in self.thermo]
        return pd.DataFrame(
            data,
            index=pd.Index([m.value for m in THERMO_METHODS], name="method"),
        )

    def to_frame(self) -> pd.DataFrame:
        """
        Every numeric property in long format.

        Columns: property, method, value, delta. ``method`` is empty for
        GC content and molecular weight.
        """
        rows = [
            ("gc", "", self.gc),
            ("molecular_weight", "", self.molecular_weight),
        ]
        rows += [("tm", label, q) for label, q in zip(TM_LABELS, self.melting_temps)]
        for method, row in zip(THERMO_METHODS, self.thermo):
            rows += [(name, method.value, q) for name, q in zip(THERMO_COLUMNS, row)]
        return pd.DataFrame(
            [(prop, method, q.value, q.delta) for prop, method, q in rows],
            columns=["property", "method", "value", "delta"],
        )

    def to_dict(self) -> dict:
        """Convert to a JSON-serialisable dictionary."""
        def pair(q: BoundedQuantity) -> dict:
            return {"value": q.value, "delta": q.delta}

        return {
            "sequence": self.sequence,
            "length": self.counts.total,
            "counts": dict(zip("ACGTN", self.counts)),
            "self_complementary": self.self_complementary,
            "gc": pair(self.gc),
            "molecular_weight": pair(self.molecular_weight),
            "melting_temps": {
                label: pair(q) for label, q in zip(TM_LABELS, self.melting_temps)
            },
            "thermo": {
                method.value: {
                    name: pair(q) for name, q in zip(THERMO_COLUMNS, row)
                }
                for method, row in zip(THERMO_METHODS, self.thermo)
            },
            "hairpins": list(self.hairpins),
            "dimers": list(self.dimers),
        }
