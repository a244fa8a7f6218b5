"""
Interactive entry point.

Authors: kmer_dbg contributors
Date: 2026-10-19

    kmer-dbg                       # prompts for length, then k
    kmer-dbg --length 1000 --k 5 --seed 42 --out-dir results/run1
    kmer-dbg --config experiments/small.yml

Flags and config values are used when given; anything still missing is read
from stdin. Input that is not an integer stops the run immediately.
"""

from __future__ import annotations

import argparse
import sys
from typing import Callable, List, Optional, TextIO

import yaml

from . import pipeline
from .config import PipelineConfig, load_config
from .kmer import InvalidWindowSize


class InputParseError(ValueError):
    """Raised when interactive input cannot be parsed as an integer."""


def parse_int(raw: str, what: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise InputParseError(f"{what} must be an integer, got {raw.strip()!r}") from None


def prompt_int(prompt: str, what: str, stdin: TextIO, stdout: TextIO) -> int:
    print(prompt, file=stdout)
    line = stdin.readline()
    if not line:
        raise InputParseError(f"no input for {what}")
    return parse_int(line, what)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        description="Generate a random DNA sequence, count its k-mers and build an adjacency graph."
    )
    ap.add_argument("--config", default=None, help="YAML config file (see kmer_dbg.config).")
    ap.add_argument("--length", type=int, default=None, help="Sequence length (prompted if omitted).")
    ap.add_argument("--k", type=int, default=None, help="k-mer size (prompted if omitted).")
    ap.add_argument("--seed", type=int, default=None, help="Random seed for sequence synthesis.")
    ap.add_argument("--out-dir", default=None, help="Directory for all output files (default: .).")
    ap.add_argument("--concurrent", action="store_true", default=None,
                    help="Count k-mers and build the graph on two threads.")
    ap.add_argument("--sort", dest="sort_exports", action="store_true", default=None,
                    help="Sort CSV rows by key.")
    ap.add_argument("--quiet", dest="verbose", action="store_false", default=None,
                    help="Do not echo k-mer counts and the adjacency dump.")
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None,
         stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None) -> int:
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    args = parse_args(argv)

    # interactive runs echo counts and the graph unless --quiet
    try:
        cfg = load_config(args.config) if args.config else PipelineConfig(verbose=True)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        print(f"[ERROR] Failed to load config {args.config}: {exc}", file=sys.stderr)
        return 1
    cfg = cfg.with_overrides(
        length=args.length, k=args.k, seed=args.seed, out_dir=args.out_dir,
        concurrent=args.concurrent, sort_exports=args.sort_exports, verbose=args.verbose,
    )

    ask: Callable[[str, str], int] = lambda prompt, what: prompt_int(prompt, what, stdin, stdout)
    try:
        if cfg.length is None:
            cfg = cfg.with_overrides(length=ask("Enter the length of the DNA sequence:", "sequence length"))
        try:
            seq = pipeline.prepare_sequence(cfg)
        except OSError as exc:
            print(f"[ERROR] Failed to read DNA sequence from file: {exc}", file=sys.stderr)
            return 1
        except ValueError as exc:
            print(f"[ERROR] {exc}", file=sys.stderr)
            return 1
        if cfg.k is None:
            cfg = cfg.with_overrides(k=ask("Enter the size of k-mer:", "k-mer size"))
    except InputParseError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1

    try:
        result = pipeline.run_pipeline(seq, cfg)
    except InvalidWindowSize as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1

    print(f"[INFO] Done in {result.runtime_seconds:.2f}s, "
          f"{len(result.artifacts)} artifacts written, {len(result.failures)} failed", file=stdout)
    return 0 if result.ok else 2


if __name__ == "__main__":
    sys.exit(main())
