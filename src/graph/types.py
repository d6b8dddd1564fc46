"""Graph data structures: weighted edges and the adjacency-list digraph."""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Edge:
    """Outgoing edge owned by its source vertex's adjacency list."""

    to: int  # destination vertex index
    weight: int


class Graph:
    """Directed weighted multigraph over vertices 0..n-1.

    The vertex count is fixed at construction. Each vertex keeps its
    outgoing edges in insertion order; that order drives DFS exploration
    and therefore which path or cycle is found first. Self-loops and
    parallel edges are allowed.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"Vertex count must be non-negative, got {n}")
        self._n = n
        self._adj: list[list[Edge]] = [[] for _ in range(n)]

    @property
    def n(self) -> int:
        return self._n

    @property
    def num_edges(self) -> int:
        return sum(len(out) for out in self._adj)

    def check_vertex(self, v: int) -> None:
        """Raise IndexError unless v is a vertex index of this graph."""
        if not 0 <= v < self._n:
            raise IndexError(
                f"Vertex {v} out of range for graph with {self._n} vertices"
            )

    def add_edge(self, src: int, dst: int, weight: int) -> None:
        """Append a directed edge src -> dst. No weight constraint is applied."""
        self.check_vertex(src)
        self.check_vertex(dst)
        self._adj[src].append(Edge(dst, weight))

    def neighbors(self, v: int) -> Sequence[Edge]:
        """Outgoing edges of v in insertion order (empty tuple if none)."""
        self.check_vertex(v)
        return tuple(self._adj[v])

    def edges(self) -> Iterator[tuple[int, int, int]]:
        """Yield (src, dst, weight) in vertex order, then insertion order."""
        for src, out in enumerate(self._adj):
            for edge in out:
                yield src, edge.to, edge.weight

    def __repr__(self) -> str:
        return f"Graph(n={self._n}, edges={self.num_edges})"
