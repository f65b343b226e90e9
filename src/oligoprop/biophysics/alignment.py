"""
Self-complementary alignments of a sequence against its own reverse.

The reversed sequence is slid across the forward strand one position at a time,
giving 2n-1 alignments for a sequence of length n. In alignment ``column``
position ``i`` faces position ``column - i``; the offset reported is
``column - (n - 1)``, so offset 0 is the full-length reverse-complement
alignment.

A position matches when it forms a Watson-Crick pair with the base it faces
or either base is N. Both the per-position mask and the running length of
consecutive matches are recorded, which is all the hairpin and dimer
detectors need. Memory stays O(n) per alignment.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence

from oligoprop.biophysics.encoding import codes_pair


@dataclass(frozen=True, slots=True)
class Alignment:
    """
    One offset of the sequence against its reverse.

    Attributes:
        offset: Shift in -(n-1)..(n-1)
        mask: Per-position match flag
        runs: Per-position length of the match run ending there (0 if unmatched)
    """
    offset: int
    mask: tuple[bool, ...]
    runs: tuple[int, ...]

    @property
    def longest_run(self) -> int:
        return max(self.runs, default=0)

    def run_ends(self, min_length: int) -> list[int]:
        """Positions where a run of at least ``min_length`` matches ends."""
        return [i for i, run in enumerate(self.runs) if run >= min_length]

    def run_mask(self, min_length: int) -> tuple[bool, ...]:
        """Mask of positions belonging to runs of at least ``min_length``."""
        selected = [False] * len(self.runs)
        for end in self.run_ends(min_length):
            for i in range(end - self.runs[end] + 1, end + 1):
                selected[i] = True
        return tuple(selected)


def complement_alignments(codes: Sequence[int]) -> list[Alignment]:
    """
    Build every alignment of an encoded sequence against its reverse.

    Args:
        codes: Encoded sequence (see ``encoding``)

    Returns:
        2n-1 alignments in ascending offset order
    """
    n = len(codes)
    alignments = []
    for column in range(2 * n - 1):
        mask = []
        runs = []
        run = 0
        for i in range(n):
            partner = column - i
            matched = 0 <= partner < n and codes_pair(codes[i], codes[partner])
            run = run + 1 if matched else 0
            mask.append(matched)
            runs.append(run)
        alignments.append(Alignment(column - (n - 1), tuple(mask), tuple(runs)))
    return alignments


def render_structure(sequence: str, mask: Sequence[bool]) -> str:
    """
    Upper-case masked positions, lower-case the rest.

    Example:
        >>> render_structure("GGGGAAACCCC", [True] * 4 + [False] * 3 + [True] * 4)
        'GGGGaaaCCCC'
    """
    return "".join(
        base.upper() if selected else base.lower()
        for base, selected in zip(sequence, mask)
    )
