"""
Error taxonomy for oligonucleotide property calculation.

Fatal conditions are raised before any thermodynamic computation starts.
A short sequence is advisory only and is issued as a warning.
"""

from __future__ import annotations
from typing import Iterable


class OligoPropError(Exception):
    """Base class for all fatal property-engine errors."""


class InvalidSymbol(OligoPropError, ValueError):
    """Sequence contains characters outside A/C/G/T/N."""

    def __init__(self, symbols: Iterable[str], message: str | None = None) -> None:
        self.symbols = tuple(sorted(set(symbols)))
        if message is None:
            shown = ", ".join(repr(s) for s in self.symbols)
            message = f"Invalid symbols in DNA sequence: {shown} (allowed: A, C, G, T, N)"
        super().__init__(message)


class InvalidConfiguration(OligoPropError, ValueError):
    """A configuration option violates its documented constraint."""

    def __init__(self, option: str, reason: str) -> None:
        self.option = option
        self.reason = reason
        super().__init__(f"Invalid value for '{option}': {reason}")


class ShortSequenceWarning(UserWarning):
    """Sequence is shorter than 8 bases; NN corrections are less reliable."""
