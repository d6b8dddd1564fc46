"""Random digraph generator driven by a Blum-Blum-Shub bit stream.

This is the only place randomness enters graph construction: every
downstream query result is a deterministic function of the bits consumed
here. Draw order is fixed (vertex count, edge count, then from/to/weight
per edge) so a given generator state always yields the same graph.
"""

import logging

from src.config.explorer import GeneratorConfig
from src.graph.types import Graph
from src.graph.validation import has_directed_cycle, validate_graph
from src.prng.bbs import BlumBlumShub

log = logging.getLogger(__name__)


class GraphGenerationError(Exception):
    """Raised when a generated graph violates the configured bounds."""


def generate_random_graph(
    bits: BlumBlumShub, config: GeneratorConfig | None = None
) -> Graph:
    """Generate a random directed weighted graph.

    1. n drawn from [min_nodes, max_nodes]
    2. m drawn from [n, edge_factor * n]
    3. m times: from, to drawn from [0, n), weight from
       [min_weight, max_weight]; appended as a new edge

    Duplicates and self-loops are expected and kept.

    Args:
        bits: Bit source; its state advances by every draw.
        config: Generation bounds. Defaults to GeneratorConfig().

    Returns:
        The fully populated Graph.

    Raises:
        GraphGenerationError: If the result fails structural validation.
    """
    if config is None:
        config = GeneratorConfig()

    n = bits.next_int(config.min_nodes, config.max_nodes)
    graph = Graph(n)
    m = bits.next_int(n, n * config.edge_factor)

    for _ in range(m):
        src = bits.next_int(0, n - 1)
        dst = bits.next_int(0, n - 1)
        weight = bits.next_int(config.min_weight, config.max_weight)
        graph.add_edge(src, dst, weight)

    errors = validate_graph(graph, config)
    if errors:
        raise GraphGenerationError(
            f"Generated graph is invalid: {'; '.join(errors)}"
        )

    log.info(
        "Graph generated (n=%d, edges=%d, cyclic=%s)",
        graph.n,
        graph.num_edges,
        has_directed_cycle(graph),
    )
    return graph
