"""
Adjacency structure built from a k-mer list, and its node/edge materialization.

Authors: kmer_dbg contributors
Date: 2026-10-19

Each k-mer s contributes one entry:
    node  = s[:-1]   (the first k-1 characters)
    label = s[-1:]   (the final character only)

This is not the canonical De Bruijn construction, where the successor would
be the trailing (k-1)-mer s[1:]. Existing consumers of the adjacency CSV rely
on single-character labels, so the rule is kept as is.

Labels are always appended, never deduplicated: a node reached twice by k-mers
ending in the same character holds that character twice. With k = 1 every
k-mer collapses under the empty-string node and the k-mer itself becomes the
label.

Usage:

    from kmer_dbg import kmer, graph

    kmers = kmer.extract_kmers("ACGTACGT", 3)
    adj = graph.build_adjacency(kmers)
    adj["AC"]            # ['G', 'G']
    mg = graph.materialize(adj)
    mg.nodes             # ['AC', 'G', 'CG', 'T', 'GT', 'A', 'TA', 'C']
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

import networkx as nx


class AdjacencyGraph:
    """Mapping from node key to the ordered list of edge labels leaving it."""

    def __init__(self, edges: Optional[Dict[str, List[str]]] = None):
        self.edges: Dict[str, List[str]] = edges if edges is not None else {}

    def add(self, node: str, label: str) -> None:
        self.edges.setdefault(node, []).append(label)

    def nodes(self) -> List[str]:
        return list(self.edges)

    def edge_count(self) -> int:
        """Total number of labels across all nodes (equals the k-mer count)."""
        return sum(len(v) for v in self.edges.values())

    def display(self) -> List[str]:
        """One 'NODE -> [labels]' line per node, for console dumps."""
        return [f"{node} -> {labels!r}" for node, labels in self.edges.items()]

    def __getitem__(self, node: str) -> List[str]:
        return self.edges[node]

    def __contains__(self, node: object) -> bool:
        return node in self.edges

    def __iter__(self) -> Iterator[str]:
        return iter(self.edges)

    def __len__(self) -> int:
        return len(self.edges)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AdjacencyGraph):
            return self.edges == other.edges
        if isinstance(other, dict):
            return self.edges == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"AdjacencyGraph({self.edges!r})"


def build_adjacency(kmers: Iterable[str]) -> AdjacencyGraph:
    """Build the node -> labels structure from k-mers (see module docstring)."""
    graph = AdjacencyGraph()
    for kmer in kmers:
        # prefix is the node, last character is the label
        cut = len(kmer) - 1
        graph.add(kmer[:cut], kmer[cut:])
    return graph


@dataclass
class MaterializedGraph:
    """Explicit undirected multigraph: node arena plus index-pair edges.
    Attributes:
      nodes: Node strings in first-seen order; position is the node index.
      index: Node string -> position in `nodes`.
      edges: One (node_index, label_index) pair per adjacency entry.
    """
    nodes: List[str] = field(default_factory=list)
    index: Dict[str, int] = field(default_factory=dict)
    edges: List[Tuple[int, int]] = field(default_factory=list)

    def add_node(self, name: str) -> int:
        """Return the index of `name`, appending it to the arena if new."""
        idx = self.index.get(name)
        if idx is None:
            idx = len(self.nodes)
            self.nodes.append(name)
            self.index[name] = idx
        return idx

    def add_edge(self, a: int, b: int) -> None:
        self.edges.append((a, b))

    def to_networkx(self) -> nx.MultiGraph:
        """Convert to a networkx MultiGraph keyed by arena index, with a 'label' attribute."""
        G = nx.MultiGraph()
        for i, name in enumerate(self.nodes):
            G.add_node(i, label=name)
        G.add_edges_from(self.edges)
        return G


def materialize(adjacency: AdjacencyGraph) -> MaterializedGraph:
    """
    Turn an AdjacencyGraph into a MaterializedGraph.
    Every distinct node key and every distinct label becomes one node; a string
    that is both (e.g. "A" with k = 2) is a single node. Multi-edges are kept.
    """
    mg = MaterializedGraph()
    for node, labels in adjacency.edges.items():
        a = mg.add_node(node)
        for label in labels:
            b = mg.add_node(label)
            mg.add_edge(a, b)
    return mg
