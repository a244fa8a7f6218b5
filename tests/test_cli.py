"""Tests for the interactive command-line entry point.
"""

import io

import pytest

from kmer_dbg.cli import InputParseError, main, parse_int


def test_parse_int():
    """Test integers are parsed after stripping and junk is rejected."""
    assert parse_int(" 12\n", "k") == 12
    with pytest.raises(InputParseError):
        parse_int("twelve", "k")


def test_interactive_run(tmp_path, capsys):
    """Test length and k are read from stdin and all artifacts are written."""
    stdin = io.StringIO("30\n4\n")
    rc = main(["--out-dir", str(tmp_path), "--seed", "1", "--quiet"], stdin=stdin)
    assert rc == 0
    out = capsys.readouterr().out
    assert "Enter the length of the DNA sequence:" in out
    assert "Enter the size of k-mer:" in out
    for name in ("random_dna_sequence.txt", "kmer_counts.csv", "de_bruijn_graph.csv",
                 "de_bruijn_graph.dot", "kmer_histogram.png"):
        assert (tmp_path / name).exists()


def test_non_integer_length_is_fatal(tmp_path, capsys):
    """Test a non-numeric length ends the run before anything is written."""
    rc = main(["--out-dir", str(tmp_path)], stdin=io.StringIO("abc\n"))
    assert rc == 1
    assert "must be an integer" in capsys.readouterr().err
    assert not (tmp_path / "random_dna_sequence.txt").exists()


def test_non_integer_k_is_fatal(tmp_path, capsys):
    """Test a non-numeric k ends the run after the sequence is saved."""
    rc = main(["--out-dir", str(tmp_path), "--length", "20"], stdin=io.StringIO("x\n"))
    assert rc == 1
    assert (tmp_path / "random_dna_sequence.txt").exists()
    assert not (tmp_path / "kmer_counts.csv").exists()


def test_k_too_large(tmp_path, capsys):
    """Test k greater than the sequence length is reported, not raised."""
    rc = main(["--out-dir", str(tmp_path), "--length", "5", "--k", "6"], stdin=io.StringIO(""))
    assert rc == 1
    assert "invalid k-mer size" in capsys.readouterr().err


def test_config_file(tmp_path):
    """Test values come from a YAML config when no flags are given."""
    cfg = tmp_path / "run.yml"
    cfg.write_text(f"length: 40\nk: 3\nseed: 2\nout_dir: {tmp_path / 'out'}\nsort_exports: true\n")
    rc = main(["--config", str(cfg)], stdin=io.StringIO(""))
    assert rc == 0
    lines = (tmp_path / "out" / "kmer_counts.csv").read_text().splitlines()
    assert lines[0] == "K-mer,Count"
    assert lines[1:] == sorted(lines[1:])


def test_missing_config_file(tmp_path, capsys):
    """Test a missing config file is reported with exit code 1."""
    rc = main(["--config", str(tmp_path / "nope.yml")], stdin=io.StringIO(""))
    assert rc == 1
    assert "[ERROR] Failed to load config" in capsys.readouterr().err


@pytest.mark.parametrize("text", ["length: ten\nk: 3\n", "length: [1, 2\n", "- 1\n- 2\n"])
def test_bad_config_file(tmp_path, capsys, text):
    """Test non-integer values, broken YAML and non-mapping configs exit with code 1."""
    cfg = tmp_path / "bad.yml"
    cfg.write_text(text)
    rc = main(["--config", str(cfg)], stdin=io.StringIO(""))
    assert rc == 1
    assert "[ERROR] Failed to load config" in capsys.readouterr().err
