"""
Pipeline configuration.

Authors: kmer_dbg contributors
Date: 2026-10-19

A YAML config file looks like:

  length: 1000          # sequence length to synthesize
  k: 5                  # k-mer size
  seed: 42              # optional, omit for a fresh random sequence
  out_dir: results/run1 # optional, default "."
  concurrent: true      # optional, count and build the graph on two threads
  sort_exports: false   # optional, sort CSV rows by key
  verbose: false        # optional, echo counts and the adjacency dump

Artifact file names (sequence_file, counts_csv, graph_csv, graph_dot,
histogram) may also be overridden; they are resolved relative to out_dir.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml


@dataclass(frozen=True)
class PipelineConfig:
    length: Optional[int] = None
    k: Optional[int] = None
    seed: Optional[int] = None
    out_dir: str = "."
    sequence_file: str = "random_dna_sequence.txt"
    counts_csv: str = "kmer_counts.csv"
    graph_csv: str = "de_bruijn_graph.csv"
    graph_dot: str = "de_bruijn_graph.dot"
    histogram: str = "kmer_histogram.png"
    concurrent: bool = False
    sort_exports: bool = False
    verbose: bool = False

    def artifact_path(self, name: str) -> Path:
        """Resolve an artifact file name against out_dir."""
        return Path(self.out_dir) / name

    def with_overrides(self, **overrides: Any) -> "PipelineConfig":
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


_INT_KEYS = ("length", "k", "seed")
_BOOL_KEYS = ("concurrent", "sort_exports", "verbose")


def config_from_dict(cfg: Dict[str, Any], source: str = "<dict>") -> PipelineConfig:
    """Validate a raw mapping and build a PipelineConfig from it."""
    if not isinstance(cfg, dict):
        raise ValueError(f"Top-level YAML in {source} must be a mapping")

    known = {f.name for f in fields(PipelineConfig)}
    unknown = sorted(set(cfg) - known)
    if unknown:
        raise ValueError(f"{source}: unknown config keys {unknown}")

    values: Dict[str, Any] = {}
    for key, val in cfg.items():
        if val is None:
            continue
        if key in _INT_KEYS:
            if isinstance(val, bool) or not isinstance(val, int):
                raise ValueError(f"{source}: '{key}' must be an integer, got {val!r}")
            values[key] = val
        elif key in _BOOL_KEYS:
            values[key] = bool(val)
        else:
            values[key] = str(val)
    return PipelineConfig(**values)


def load_config(path: Union[str, Path]) -> PipelineConfig:
    """Read a YAML config file into a PipelineConfig."""
    with open(path, "r", encoding="utf-8") as fh:
        cfg = yaml.safe_load(fh)
    if cfg is None:
        cfg = {}
    return config_from_dict(cfg, source=str(path))
