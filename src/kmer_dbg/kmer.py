"""K-mer extraction and counting for DNA sequences.

Authors: kmer_dbg contributors
Date: 2026-10-19

A k-mer is a substring of length k taken from a sequence at a given start
offset. A sequence of length n has exactly n - k + 1 overlapping k-mers.
Example:
  k = 3
  Sequence: "ACGTACGT"
  K-mers (sliding-window order): ACG, CGT, GTA, TAC, ACG, CGT
  Counts: {ACG: 2, CGT: 2, GTA: 1, TAC: 1}

The k-mer list is materialized so that both the counter and the adjacency
builder (see graph.py) can consume the same windows independently.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, List

import pandas as pd

ALPHABET = ("A", "C", "G", "T")

FrequencyMap = Dict[str, int]


class InvalidWindowSize(ValueError):
    """Raised when k is smaller than 1 or larger than the sequence length."""

    def __init__(self, k: int, sequence_length: int):
        self.k = k
        self.sequence_length = sequence_length
        super().__init__(
            f"invalid k-mer size k={k} for a sequence of length {sequence_length} "
            f"(need 1 <= k <= {sequence_length})"
        )


def check_window(k: int, sequence_length: int) -> None:
    """Raise InvalidWindowSize unless 1 <= k <= sequence_length."""
    if k < 1 or k > sequence_length:
        raise InvalidWindowSize(k, sequence_length)


def extract_kmers(seq: str, k: int) -> List[str]:
    """
    Return every overlapping k-mer of seq, in sliding-window order.
    - The window size is checked before slicing, so k == 0, k > len(seq)
      and the empty sequence all raise InvalidWindowSize.
    - Characters are taken verbatim (no case folding, no filtering).
    """
    L = len(seq)
    check_window(k, L)
    return [seq[i:i + k] for i in range(L - k + 1)]


def count_kmers(kmers: Iterable[str]) -> FrequencyMap:
    """Count occurrences of each k-mer. Empty input gives an empty dict."""
    return dict(Counter(kmers))


def frequency_table(counts: FrequencyMap, sort: bool = False) -> pd.DataFrame:
    """
    Tabulate a frequency map as a two-column DataFrame (K-mer, Count).
    Row order follows the mapping unless sort=True, in which case rows are
    ordered by k-mer.
    """
    items = sorted(counts.items()) if sort else list(counts.items())
    return pd.DataFrame(items, columns=["K-mer", "Count"])
