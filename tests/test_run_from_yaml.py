"""Tests for the YAML batch driver in scripts/.
"""

import importlib.util
import os

import pytest

from kmer_dbg import pipeline

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))


def _load_script():
    path = os.path.join(ROOT, "scripts", "run_from_yaml.py")
    spec = importlib.util.spec_from_file_location("run_from_yaml", path)
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


def test_ks_sweep_writes_one_dir_per_k(tmp_path):
    """Test a 'ks' list analyzes one sequence per k in its own sub-directory."""
    cfg = tmp_path / "sweep.yml"
    cfg.write_text(f"length: 30\nks: [2, 3]\nseed: 1\nout_dir: {tmp_path / 'out'}\n")
    assert _load_script().run_config(str(cfg)) is True
    assert (tmp_path / "out" / "k2" / "kmer_counts.csv").exists()
    assert (tmp_path / "out" / "k3" / "kmer_counts.csv").exists()


def test_bad_config_does_not_stop_batch(tmp_path, capsys):
    """Test missing and malformed configs are reported and later configs still run."""
    bad = tmp_path / "bad.yml"
    bad.write_text("length: ten\nk: 3\n")
    good = tmp_path / "good.yml"
    good.write_text(f"length: 20\nk: 3\nseed: 4\nout_dir: {tmp_path / 'good'}\n")
    with pytest.raises(SystemExit) as ei:
        _load_script().main([str(tmp_path / "missing.yml"), str(bad), str(good)])
    assert ei.value.code == 1
    err = capsys.readouterr().err
    assert "missing.yml" in err
    assert "'length' must be an integer" in err
    assert (tmp_path / "good" / "kmer_counts.csv").exists()


def test_unreadable_sequence_is_reported(tmp_path, monkeypatch, capsys):
    """Test a failing sequence read-back marks the config failed without raising."""
    def missing(path):
        raise FileNotFoundError(path)

    monkeypatch.setattr(pipeline.sequence, "read_sequence", missing)
    cfg = tmp_path / "run.yml"
    cfg.write_text(f"length: 10\nk: 3\nout_dir: {tmp_path}\n")
    assert _load_script().run_config(str(cfg)) is False
    assert "[ERROR] Failed to read DNA sequence from file" in capsys.readouterr().err
