"""
Hairpin detector.

Hairpins form when an oligo folds back on itself: two complementary
stretches (the stem) pair up, separated by an unpaired loop. In an
alignment of the sequence against its reverse both halves of a stem show
up as runs of matches, mirrored around the fold point.

An alignment qualifies when the run ends of stems of at least ``min_stem``
bases lie at least ``min_stem + min_loop`` positions apart, i.e. the loop
between the two halves has at least ``min_loop`` bases. Only stem
positions are upper-cased in the rendering; loop bases stay lower-case.
"""

from __future__ import annotations

from oligoprop.biophysics.alignment import (
    Alignment,
    complement_alignments,
    render_structure,
)
from oligoprop.biophysics.encoding import EncodedSequence
from oligoprop.core.config import DEFAULT_HAIRPIN_MIN_STEM, DEFAULT_HAIRPIN_MIN_LOOP


def forms_hairpin(alignment: Alignment, min_stem: int, min_loop: int) -> bool:
    """Check whether a single alignment holds a stem-loop-stem pattern."""
    ends = alignment.run_ends(min_stem)
    if not ends:
        return False
    return max(ends) - min(ends) >= min_stem + min_loop


def find_hairpin_alignments(
    encoded: EncodedSequence,
    min_stem: int = DEFAULT_HAIRPIN_MIN_STEM,
    min_loop: int = DEFAULT_HAIRPIN_MIN_LOOP,
    alignments: list[Alignment] | None = None,
) -> list[Alignment]:
    if alignments is None:
        alignments = complement_alignments(encoded.codes)
    return [a for a in alignments if forms_hairpin(a, min_stem, min_loop)]


def find_hairpins(
    encoded: EncodedSequence,
    min_stem: int = DEFAULT_HAIRPIN_MIN_STEM,
    min_loop: int = DEFAULT_HAIRPIN_MIN_LOOP,
    alignments: list[Alignment] | None = None,
) -> tuple[str, ...]:
    """
    Rendered potential hairpin structures.

    Args:
        encoded: Validated, encoded sequence
        min_stem: Minimum paired bases per stem half
        min_loop: Minimum unpaired bases in the loop
        alignments: Precomputed alignments for ``encoded`` (optional)

    Returns:
        One string per qualifying alignment, in ascending offset order

    Example:
        >>> find_hairpins(encode_sequence("GGGGAAACCCC").unwrap())
        ('GGGGaaaCCCC',)
    """
    return tuple(
        render_structure(encoded.sequence, a.run_mask(min_stem))
        for a in find_hairpin_alignments(encoded, min_stem, min_loop, alignments)
    )
