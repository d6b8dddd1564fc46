"""Structural validation and sparse-matrix views of generated graphs.

The adjacency-list Graph is the source of truth; the scipy CSR view is an
independent representation used to cross-check reachability and
acyclicity with scipy.sparse.csgraph.
"""

import logging

import numpy as np
import scipy.sparse
from scipy.sparse.csgraph import breadth_first_order, connected_components

from src.config.explorer import GeneratorConfig
from src.graph.types import Graph

log = logging.getLogger(__name__)


def to_csr(graph: Graph, weighted: bool = True) -> scipy.sparse.csr_matrix:
    """Build an (n x n) CSR adjacency matrix.

    With weighted=True, entry (i, j) holds the weight of the first i -> j
    edge in insertion order (the same edge path costing uses). With
    weighted=False every present edge is stored as 1.0, which keeps
    zero- and negative-weight edges visible to csgraph routines.

    Args:
        graph: Graph to convert.
        weighted: Store first-edge weights instead of connectivity.

    Returns:
        Sparse CSR matrix of shape (n, n).
    """
    first: dict[tuple[int, int], int] = {}
    for src, dst, weight in graph.edges():
        first.setdefault((src, dst), weight)

    if first:
        rows, cols = (np.array(ix, dtype=np.int64) for ix in zip(*first))
        data = np.array(
            list(first.values()) if weighted else [1.0] * len(first),
            dtype=np.float64,
        )
    else:
        rows = cols = np.zeros(0, dtype=np.int64)
        data = np.zeros(0, dtype=np.float64)

    return scipy.sparse.csr_matrix(
        (data, (rows, cols)), shape=(graph.n, graph.n)
    )


def reachable_vertices(graph: Graph, start: int) -> set[int]:
    """Vertices reachable from start (start included), via csgraph BFS."""
    graph.check_vertex(start)
    order = breadth_first_order(
        to_csr(graph, weighted=False),
        start,
        directed=True,
        return_predecessors=False,
    )
    return set(order.tolist())


def has_directed_cycle(graph: Graph) -> bool:
    """Whether the graph contains any directed cycle, self-loops included.

    A digraph is cyclic iff it has a self-loop or a strongly connected
    component with more than one vertex.
    """
    if graph.n == 0:
        return False
    adj = to_csr(graph, weighted=False)
    if adj.diagonal().any():
        return True
    _, labels = connected_components(adj, directed=True, connection="strong")
    return bool(np.bincount(labels).max() > 1)


def validate_graph(graph: Graph, config: GeneratorConfig) -> list[str]:
    """Validate a generated graph against the generator bounds.

    Checks:
    1. Vertex count within [min_nodes, max_nodes]
    2. Edge count within [n, edge_factor * n]
    3. Every endpoint within [0, n)
    4. Every weight within [min_weight, max_weight]

    Args:
        graph: Generated graph.
        config: Bounds the generator was asked to honor.

    Returns:
        List of error strings (empty = valid graph).
    """
    errors: list[str] = []
    n = graph.n

    if not config.min_nodes <= n <= config.max_nodes:
        errors.append(
            f"Vertex count {n} outside [{config.min_nodes}, {config.max_nodes}]"
        )

    m = graph.num_edges
    if not n <= m <= config.edge_factor * n:
        errors.append(
            f"Edge count {m} outside [{n}, {config.edge_factor * n}]"
        )

    for src, dst, weight in graph.edges():
        if not (0 <= src < n and 0 <= dst < n):
            errors.append(f"Edge {src}->{dst} has an endpoint outside [0, {n})")
        if not config.min_weight <= weight <= config.max_weight:
            errors.append(
                f"Edge {src}->{dst} weight {weight} outside "
                f"[{config.min_weight}, {config.max_weight}]"
            )

    if errors:
        log.debug("Graph validation found %d errors", len(errors))
    return errors
