"""
Self-dimer detector.

Self-dimers form when two copies of the same oligo anneal to each other.
Every alignment of the sequence against its reverse is scanned for a run
of consecutive complementary positions; an alignment whose longest run
reaches ``min_length`` is reported as a potential dimer.

Overlapping alignments are not merged: each qualifying offset is its own
row, in ascending offset order. In the rendered row every position that
pairs in that alignment is upper-case.
"""

from __future__ import annotations

from oligoprop.biophysics.alignment import (
    Alignment,
    complement_alignments,
    render_structure,
)
from oligoprop.biophysics.encoding import EncodedSequence
from oligoprop.core.config import DEFAULT_DIMER_MIN_LENGTH


def find_dimer_alignments(
    encoded: EncodedSequence,
    min_length: int = DEFAULT_DIMER_MIN_LENGTH,
    alignments: list[Alignment] | None = None,
) -> list[Alignment]:
    """
    Alignments that can form a self-dimer.

    Args:
        encoded: Validated, encoded sequence
        min_length: Minimum run of consecutive paired bases
        alignments: Precomputed alignments for ``encoded`` (optional)
    """
    if alignments is None:
        alignments = complement_alignments(encoded.codes)
    return [a for a in alignments if a.longest_run >= min_length]


def find_dimers(
    encoded: EncodedSequence,
    min_length: int = DEFAULT_DIMER_MIN_LENGTH,
    alignments: list[Alignment] | None = None,
) -> tuple[str, ...]:
    """
    Rendered potential self-dimers.

    Example:
        >>> find_dimers(encode_sequence("ACGTACGT").unwrap())
        ('ACGTacgt', 'ACGTACGT', 'acgtACGT')
    """
    return tuple(
        render_structure(encoded.sequence, a.mask)
        for a in find_dimer_alignments(encoded, min_length, alignments)
    )
