"""
Symbol encoder for DNA oligonucleotides.

Maps the five accepted symbols to small integer codes used to index the
nearest-neighbor tables, and counts symbol occurrences. This is the only
place where input characters are validated; failures come back as
Err(InvalidSymbol). Every downstream calculator assumes a clean A/C/G/T/N
sequence.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence

from oligoprop.core.errors import InvalidSymbol
from oligoprop.core.models import SymbolCounts
from oligoprop.core.result import Result, Ok, Err

ALPHABET = "ACGTN"

# A=0, C=1, G=2, T=3, N=4
SYMBOL_CODES = {symbol: code for code, symbol in enumerate(ALPHABET)}
N_CODE = SYMBOL_CODES["N"]

# Watson-Crick partner of each unambiguous code
COMPLEMENT_CODES = (3, 2, 1, 0)


@dataclass(frozen=True, slots=True)
class EncodedSequence:
    """
    Validated sequence with its integer codes and symbol counts.

    Attributes:
        sequence: Upper-case sequence
        codes: Integer code per position
        counts: Symbol counts
    """
    sequence: str
    codes: tuple[int, ...]
    counts: SymbolCounts

    def __len__(self) -> int:
        return len(self.sequence)

    @property
    def is_ambiguous(self) -> bool:
        return self.counts.n > 0


def normalize_sequence(sequence: str) -> Result[str, InvalidSymbol]:
    """
    Upper-case a sequence and check it only holds A/C/G/T/N.

    Returns:
        Ok(upper-case sequence) on success
        Err(InvalidSymbol) if the sequence is empty or has other characters
    """
    if not sequence:
        return Err(InvalidSymbol((), "Empty sequence provided"))

    sequence = sequence.upper()
    invalid = set(sequence) - set(ALPHABET)
    if invalid:
        return Err(InvalidSymbol(invalid))
    return Ok(sequence)


def count_symbols(sequence: str) -> SymbolCounts:
    """Count A, C, G, T and N in an upper-case sequence."""
    return SymbolCounts(*(sequence.count(symbol) for symbol in ALPHABET))


def _encode(sequence: str) -> EncodedSequence:
    codes = tuple(SYMBOL_CODES[symbol] for symbol in sequence)
    return EncodedSequence(sequence=sequence, codes=codes, counts=count_symbols(sequence))


def encode_sequence(sequence: str) -> Result[EncodedSequence, InvalidSymbol]:
    """
    Validate and encode a DNA sequence.

    Args:
        sequence: DNA sequence over A/C/G/T/N, any case

    Returns:
        Ok(EncodedSequence) on success
        Err(InvalidSymbol) for empty input or characters outside A/C/G/T/N

    Example:
        >>> encode_sequence("acgn").unwrap().codes
        (0, 1, 2, 4)
        >>> encode_sequence("ACGU").unwrap_err().symbols
        ('U',)
    """
    return normalize_sequence(sequence).map(_encode)


def decode_codes(codes: Sequence[int]) -> str:
    """Inverse of the encoding."""
    return "".join(ALPHABET[code] for code in codes)


def codes_pair(first: int, second: int) -> bool:
    """
    True if two encoded bases can pair.

    Watson-Crick partners pair, and an N pairs with anything.
    """
    if first == N_CODE or second == N_CODE:
        return True
    return COMPLEMENT_CODES[first] == second
