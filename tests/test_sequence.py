"""Tests for random sequence synthesis and sequence file I/O.
"""

import numpy as np
import pytest

from kmer_dbg.sequence import (
    generate_random_sequence,
    invalid_characters,
    read_sequence,
    write_sequence,
)


def test_generate_length_and_alphabet():
    """Test synthesized sequences have the requested length and only ACGT."""
    seq = generate_random_sequence(500, rng=np.random.default_rng(1))
    assert len(seq) == 500
    assert set(seq) <= set("ACGT")
    assert generate_random_sequence(0, rng=3) == ""


def test_generate_is_deterministic_with_seed():
    """Test the same seed gives the same sequence."""
    assert generate_random_sequence(64, rng=7) == generate_random_sequence(64, rng=7)
    a = generate_random_sequence(64, rng=np.random.default_rng(7))
    b = generate_random_sequence(64, rng=np.random.default_rng(7))
    assert a == b


def test_generate_negative_length():
    """Test a negative length is rejected."""
    with pytest.raises(ValueError):
        generate_random_sequence(-1)


def test_write_then_read_verbatim(tmp_path):
    """Test the file holds the raw sequence and reads back unchanged."""
    path = tmp_path / "nested" / "seq.txt"
    write_sequence("ACGT\n", path)
    assert path.read_bytes() == b"ACGT\n"
    assert read_sequence(path) == "ACGT\n"


def test_read_missing_file(tmp_path):
    """Test reading a missing file raises OSError."""
    with pytest.raises(OSError):
        read_sequence(tmp_path / "missing.txt")


def test_invalid_characters():
    """Test characters outside ACGT are reported."""
    assert invalid_characters("ACGT") == set()
    assert invalid_characters("ACGTN\n") == {"N", "\n"}
