"""Explorer session: the single owner of the PRNG, current graph, and last results.

Replaces ambient program state with one explicit object. Graphs are never
mutated after generation; generating again replaces the graph and clears
the cached path and cycle.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import numpy as np

from src.config.explorer import SessionConfig
from src.graph.generator import generate_random_graph
from src.graph.types import Graph
from src.persistence.naming import backup_path
from src.persistence.report import save_report
from src.prng.bbs import BlumBlumShub
from src.search.cycle import find_cycle
from src.search.path import find_path, path_cost

log = logging.getLogger(__name__)


class NoGraphError(Exception):
    """Raised when a query needs a graph but none has been generated yet."""


@dataclass(frozen=True, slots=True)
class GenerateOutcome:
    """Result of a generate action.

    backup is the path of the saved report for the replaced graph, None if
    there was no prior graph or saving failed (see backup_error).
    """

    graph: Graph
    backup: Path | None = None
    backup_error: str | None = None


class GraphSession:
    """Session context passed to every explorer operation."""

    def __init__(
        self, config: SessionConfig, bits: BlumBlumShub | None = None
    ) -> None:
        self.config = config
        if bits is None:
            bits = BlumBlumShub.create(
                config.prng.bit_length,
                rng=np.random.default_rng(config.prng.seed),
                max_attempts=config.prng.max_prime_attempts,
            )
        self.bits = bits
        self.graph: Graph | None = None
        self.last_path: list[int] | None = None
        self.last_cycle: list[int] | None = None

    def require_graph(self) -> Graph:
        if self.graph is None:
            raise NoGraphError("No graph has been generated yet")
        return self.graph

    def save_backup(self) -> Path:
        """Save the current graph with its last path and cycle.

        Raises:
            NoGraphError: If there is no graph to save.
            OSError: If the backup cannot be written.
        """
        graph = self.require_graph()
        target = backup_path(self.config.save_dir)
        return save_report(graph, self.last_path, self.last_cycle, target)

    def generate(self) -> GenerateOutcome:
        """Back up the current graph (if any), then generate a fresh one.

        A failed backup is logged and reported in the outcome but does not
        stop generation.
        """
        backup = None
        backup_error = None
        if self.graph is not None:
            try:
                backup = self.save_backup()
            except OSError as e:
                log.error("Failed to save graph backup: %s", e)
                backup_error = str(e)

        self.graph = generate_random_graph(self.bits, self.config.generator)
        self.last_path = None
        self.last_cycle = None
        return GenerateOutcome(
            graph=self.graph, backup=backup, backup_error=backup_error
        )

    def find_path(
        self, start: int, end: int
    ) -> tuple[list[int] | None, int | None]:
        """Search for a path and remember it as the last path.

        Returns:
            (path, cost), or (None, None) when end is unreachable.
        """
        graph = self.require_graph()
        path = find_path(graph, start, end)
        self.last_path = path
        if path is None:
            log.debug("No path from %d to %d", start, end)
            return None, None
        return path, path_cost(graph, path)

    def find_cycle(self) -> list[int] | None:
        """Search for a cycle and remember it as the last cycle."""
        cycle = find_cycle(self.require_graph())
        self.last_cycle = cycle
        return cycle
