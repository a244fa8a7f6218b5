"""
End-to-end k-mer / adjacency pipeline.

Authors: kmer_dbg contributors
Date: 2026-10-19

Steps:
  1. Synthesize a random sequence and save it.
  2. Read it back from disk (a read failure ends the run).
  3. Extract k-mers (InvalidWindowSize ends the run before anything is built).
  4. Count k-mers and build the adjacency graph. The two stages only read
     the k-mer list, so with concurrent=True they run on two threads.
  5. Export each artifact independently: histogram, DOT, counts CSV,
     graph CSV. A failing export is reported and the others still run.
"""

from __future__ import annotations

import sys
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Tuple

from . import export, graph, kmer, plot, sequence
from .config import PipelineConfig


@dataclass
class PipelineResult:
    """Summary of one pipeline run.
    Attributes:
      sequence: Sequence that was read back from disk.
      k: K-mer size used.
      kmers: Extracted k-mers in sliding-window order.
      counts: K-mer -> occurrence count.
      adjacency: Node key -> edge labels.
      artifacts: Artifact name -> written path, for exports that succeeded.
      failures: Artifact name -> error message, for exports that failed.
      runtime_seconds: Wall-clock time of the run.
    """
    sequence: str
    k: int
    kmers: List[str]
    counts: kmer.FrequencyMap
    adjacency: graph.AdjacencyGraph
    artifacts: Dict[str, Path] = field(default_factory=dict)
    failures: Dict[str, str] = field(default_factory=dict)
    runtime_seconds: float = 0.0

    @property
    def ok(self) -> bool:
        return not self.failures


def count_and_build(kmers: List[str], concurrent: bool = False) -> Tuple[kmer.FrequencyMap, graph.AdjacencyGraph]:
    """Run the counter and the adjacency builder over the same k-mer list."""
    if not concurrent:
        return kmer.count_kmers(kmers), graph.build_adjacency(kmers)
    with ThreadPoolExecutor(max_workers=2) as pool:
        f_counts = pool.submit(kmer.count_kmers, kmers)
        f_graph = pool.submit(graph.build_adjacency, kmers)
        return f_counts.result(), f_graph.result()


def analyze_sequence(seq: str, k: int, concurrent: bool = False) -> Tuple[List[str], kmer.FrequencyMap, graph.AdjacencyGraph]:
    """Extract, count and build for an in-memory sequence. No I/O."""
    kmers = kmer.extract_kmers(seq, k)
    counts, adjacency = count_and_build(kmers, concurrent=concurrent)
    return kmers, counts, adjacency


def _export(result: PipelineResult, name: str, what: str, fn: Callable[[], Path]) -> None:
    try:
        result.artifacts[name] = fn()
    except Exception as exc:
        result.failures[name] = str(exc)
        print(f"[ERROR] Failed to {what}: {exc}", file=sys.stderr)
    else:
        print(f"[OK] {what[0].upper() + what[1:]} -> {result.artifacts[name]}")


def export_artifacts(result: PipelineResult, cfg: PipelineConfig) -> PipelineResult:
    """Write every artifact, reporting (not raising) per-artifact failures."""
    _export(result, "histogram", "plot k-mer histogram",
            lambda: plot.plot_kmer_histogram(result.counts, cfg.artifact_path(cfg.histogram)))
    _export(result, "graph_dot", "save graph to DOT file",
            lambda: export.write_graph_dot(graph.materialize(result.adjacency),
                                           cfg.artifact_path(cfg.graph_dot)))
    _export(result, "counts_csv", "write k-mer counts to CSV",
            lambda: export.write_kmer_counts_csv(result.counts, cfg.artifact_path(cfg.counts_csv),
                                                 sort=cfg.sort_exports))
    _export(result, "graph_csv", "write De Bruijn graph to CSV",
            lambda: export.write_graph_csv(result.adjacency, cfg.artifact_path(cfg.graph_csv),
                                           sort=cfg.sort_exports))
    return result


def prepare_sequence(cfg: PipelineConfig, rng: sequence.RngLike = None) -> str:
    """
    Synthesize cfg.length bases, save them to cfg.sequence_file and read the
    file back. A write failure is reported; the read-back decides whether the
    run can continue (OSError propagates).
    """
    if cfg.length is None:
        raise ValueError("sequence length is not set")
    seq_path = cfg.artifact_path(cfg.sequence_file)
    seq = sequence.generate_random_sequence(cfg.length, rng if rng is not None else cfg.seed)
    try:
        sequence.write_sequence(seq, seq_path)
    except OSError as exc:
        print(f"[ERROR] Failed to write DNA sequence to file: {exc}", file=sys.stderr)
    else:
        print(f"[OK] DNA sequence saved to {seq_path}")
    return sequence.read_sequence(seq_path)


def run_pipeline(seq: str, cfg: PipelineConfig) -> PipelineResult:
    """Analyze an already-loaded sequence with cfg.k and export all artifacts."""
    if cfg.k is None:
        raise ValueError("k-mer size is not set")
    t0 = time.time()

    bad = sequence.invalid_characters(seq)
    if bad:
        print(f"[WARN] Sequence contains characters outside A/C/G/T: {''.join(sorted(bad))!r}")

    kmers, counts, adjacency = analyze_sequence(seq, cfg.k, concurrent=cfg.concurrent)
    print(f"[INFO] {len(kmers)} k-mers (k={cfg.k}), {len(counts)} distinct, "
          f"{len(adjacency)} graph nodes")

    result = PipelineResult(sequence=seq, k=cfg.k, kmers=kmers, counts=counts, adjacency=adjacency)

    if cfg.verbose:
        for km, c in counts.items():
            print(f"{km}: {c}")
        for line in adjacency.display():
            print(line)

    export_artifacts(result, cfg)
    result.runtime_seconds = time.time() - t0
    return result


def run_from_config(cfg: PipelineConfig, rng: sequence.RngLike = None) -> PipelineResult:
    """Full run: synthesize, persist, read back, analyze, export."""
    if cfg.k is None:
        raise ValueError("k-mer size is not set")
    seq = prepare_sequence(cfg, rng=rng)
    return run_pipeline(seq, cfg)
