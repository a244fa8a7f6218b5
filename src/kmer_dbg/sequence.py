"""Sequence source and sink: random synthesis plus plain-text persistence.

Authors: kmer_dbg contributors
Date: 2026-10-19

The random generator is injected per call (a numpy Generator or a seed), so
there is no process-wide random state and tests can ask for reproducible
sequences.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import numpy as np

from .kmer import ALPHABET

RngLike = Union[np.random.Generator, int, None]


def generate_random_sequence(length: int, rng: RngLike = None) -> str:
    """Draw `length` bases uniformly from A/C/G/T."""
    if length < 0:
        raise ValueError(f"sequence length must be >= 0, got {length}")
    if not isinstance(rng, np.random.Generator):
        rng = np.random.default_rng(rng)
    idx = rng.integers(0, len(ALPHABET), size=length)
    return "".join(ALPHABET[i] for i in idx)


def write_sequence(seq: str, path: Union[str, Path]) -> Path:
    """Write the sequence as raw text (no header, no trailing newline)."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8", newline="") as fh:
        fh.write(seq)
    return p


def read_sequence(path: Union[str, Path]) -> str:
    """Read the file back verbatim. Any trimming is up to the caller."""
    with Path(path).open("r", encoding="utf-8", newline="") as fh:
        return fh.read()


def invalid_characters(seq: str, alphabet: Optional[str] = None) -> set:
    """Return the set of characters in seq that are outside the alphabet."""
    allowed = set(alphabet) if alphabet is not None else set(ALPHABET)
    return set(seq) - allowed
