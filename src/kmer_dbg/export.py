"""
Writers for the pipeline's tabular and graph-description artifacts.

Authors: kmer_dbg contributors
Date: 2026-10-19

- kmer_counts.csv     : K-mer,Count
- de_bruijn_graph.csv : Node,Connected Nodes  (labels joined with ", ")
- de_bruijn_graph.dot : undirected graph, unlabeled edges

Row order follows the mappings' iteration order, which is not meaningful.
Pass sort=True to get a stable, key-sorted file.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Union

import pandas as pd

from .graph import AdjacencyGraph, MaterializedGraph
from .kmer import FrequencyMap, frequency_table

PathLike = Union[str, Path]


def _prepare(path: PathLike) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    return p


def write_kmer_counts_csv(counts: FrequencyMap, path: PathLike, sort: bool = False) -> Path:
    """Write one row per distinct k-mer with its count."""
    p = _prepare(path)
    frequency_table(counts, sort=sort).to_csv(p, index=False)
    return p


def graph_table(adjacency: AdjacencyGraph, sort: bool = False) -> pd.DataFrame:
    """Tabulate the adjacency as (Node, Connected Nodes) rows."""
    nodes = sorted(adjacency.edges) if sort else list(adjacency.edges)
    rows = [(node, ", ".join(adjacency.edges[node])) for node in nodes]
    return pd.DataFrame(rows, columns=["Node", "Connected Nodes"])


def write_graph_csv(adjacency: AdjacencyGraph, path: PathLike, sort: bool = False) -> Path:
    """Write one row per node; the second column lists its labels."""
    p = _prepare(path)
    # with k = 1 the only node key is "", written as an empty field
    graph_table(adjacency, sort=sort).to_csv(p, index=False)
    return p


def _dot_escape(s: str) -> str:
    return s.replace("\\", "\\\\").replace('"', '\\"')


def graph_to_dot(graph: MaterializedGraph) -> str:
    """Render a MaterializedGraph as an undirected DOT description."""
    G = graph.to_networkx()
    lines: List[str] = ["graph {"]
    for i, name in G.nodes(data="label"):
        lines.append(f'    {i} [ label = "{_dot_escape(name)}" ]')
    for a, b in G.edges():
        lines.append(f"    {a} -- {b} [ ]")
    lines.append("}")
    return "\n".join(lines) + "\n"


def write_graph_dot(graph: MaterializedGraph, path: PathLike) -> Path:
    p = _prepare(path)
    with p.open("w", encoding="utf-8") as fh:
        fh.write(graph_to_dot(graph))
    return p
