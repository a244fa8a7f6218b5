#!/usr/bin/env python3
"""
scripts/run_from_yaml.py

Authors: kmer_dbg contributors
Date: 2026-10-19

Run the k-mer / adjacency pipeline once per YAML config file.

Each YAML file should look like:

  length: 1000        # required
  k: 5                # required
  seed: 42            # optional
  out_dir: results/len1000_k5
  concurrent: true    # optional
  # or sweep several k values over the same sequence:
  # ks: [3, 5, 7]

With 'ks', one sequence is synthesized and every k is analyzed in its own
sub-directory of out_dir (k3/, k5/, ...).

Usage examples:

  # Run one config
  PYTHONPATH=src python3 scripts/run_from_yaml.py experiments/len1000_k5.yml

  # Run several configs in sequence
  PYTHONPATH=src python3 scripts/run_from_yaml.py experiments/a.yml experiments/b.yml

  # Just show what would be run, without executing
  PYTHONPATH=src python3 scripts/run_from_yaml.py --dry-run experiments/a.yml
"""

import argparse
import os
import sys
from typing import Any, List, Optional

import yaml  # make sure pyyaml is installed in your environment

from kmer_dbg import pipeline
from kmer_dbg.config import config_from_dict
from kmer_dbg.kmer import InvalidWindowSize


def _normalize_ks(raw: Any) -> List[int]:
    """Accept a single int or a list of ints for the 'ks' sweep."""
    if isinstance(raw, int) and not isinstance(raw, bool):
        return [raw]
    if not isinstance(raw, list) or not raw:
        raise ValueError("'ks' must be an integer or a non-empty list of integers")
    out: List[int] = []
    for k in raw:
        if isinstance(k, bool) or not isinstance(k, int):
            raise ValueError(f"Unsupported k entry in YAML: {k!r}")
        out.append(k)
    return out


def run_config(config_path: str, dry_run: bool = False) -> bool:
    """Run one config file. Returns True when every run succeeded."""
    with open(config_path, "r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh)

    if not isinstance(raw, dict):
        raise ValueError(f"Top-level YAML in {config_path} must be a mapping")

    raw = dict(raw)
    ks = _normalize_ks(raw.pop("ks")) if "ks" in raw else None
    cfg = config_from_dict(raw, source=config_path)
    if cfg.length is None:
        raise ValueError(f"{config_path}: 'length' key is required")
    if ks is None:
        if cfg.k is None:
            raise ValueError(f"{config_path}: 'k' or 'ks' key is required")
        ks = [cfg.k]

    print(f"[CONFIG] {config_path}")
    print(f"  length = {cfg.length}, seed = {cfg.seed}")
    print(f"  ks     = {ks}")
    print(f"  out    = {cfg.out_dir}")
    if dry_run:
        return True

    try:
        seq = pipeline.prepare_sequence(cfg)
    except OSError as exc:
        print(f"[ERROR] Failed to read DNA sequence from file: {exc}", file=sys.stderr)
        return False

    ok = True
    for idx, k in enumerate(ks):
        out_dir = cfg.out_dir if len(ks) == 1 else os.path.join(cfg.out_dir, f"k{k}")
        run_cfg = cfg.with_overrides(k=k, out_dir=out_dir)
        print(f"\n[RUN {idx+1}/{len(ks)}] k={k} -> {out_dir}")
        try:
            result = pipeline.run_pipeline(seq, run_cfg)
        except InvalidWindowSize as exc:
            print(f"[ERROR] {exc}", file=sys.stderr)
            ok = False
            continue
        ok = ok and result.ok
    return ok


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="Run the k-mer pipeline for YAML config files.")
    ap.add_argument("configs", nargs="+", help="One or more YAML config files")
    ap.add_argument("--dry-run", action="store_true",
                    help="Print what would be run, but do not execute it.")
    args = ap.parse_args(argv)

    all_ok = True
    for cfg_path in args.configs:
        try:
            ok = run_config(cfg_path, dry_run=args.dry_run)
        except (OSError, ValueError, yaml.YAMLError) as exc:
            print(f"[ERROR] {cfg_path}: {exc}", file=sys.stderr)
            ok = False
        all_ok = ok and all_ok
    if not all_ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
