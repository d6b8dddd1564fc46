"""Graph model: adjacency-list digraph, BBS-driven generation, validation."""

from src.graph.generator import GraphGenerationError, generate_random_graph
from src.graph.types import Edge, Graph
from src.graph.validation import (
    has_directed_cycle,
    reachable_vertices,
    to_csr,
    validate_graph,
)

__all__ = [
    "Edge",
    "Graph",
    "GraphGenerationError",
    "generate_random_graph",
    "has_directed_cycle",
    "reachable_vertices",
    "to_csr",
    "validate_graph",
]
