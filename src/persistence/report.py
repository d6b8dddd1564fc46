"""Plain-text graph reports: writing, parsing, and loading.

Report layout:

    ===== Saved Graph =====
    Number of nodes: 3

    Adjacency List:
    0 -> (2, w=5) (1, w=3)
    1 ->
    2 -> (0, w=7)

    ===== Last Path =====
    [0, 2]

    ===== Last Cycle =====
    None

Absent path or cycle is written as the literal ``None``.
"""

import ast
import logging
import re
from dataclasses import dataclass
from pathlib import Path

from src.graph.types import Graph

log = logging.getLogger(__name__)

GRAPH_HEADER = "===== Saved Graph ====="
PATH_HEADER = "===== Last Path ====="
CYCLE_HEADER = "===== Last Cycle ====="
ADJACENCY_HEADER = "Adjacency List:"

_NODES_RE = re.compile(r"^Number of nodes: (\d+)$")
_ROW_RE = re.compile(r"^(\d+) ->(.*)$")
_EDGE_RE = re.compile(r"\((\d+), w=(-?\d+)\)")


class ReportFormatError(Exception):
    """Raised when report text does not follow the saved-graph layout."""


@dataclass(frozen=True)
class SavedReport:
    """Contents recovered from a saved report."""

    graph: Graph
    last_path: list[int] | None
    last_cycle: list[int] | None


def _format_vertices(vertices: list[int] | None) -> str:
    return "None" if vertices is None else str(list(vertices))


def format_report(
    graph: Graph,
    last_path: list[int] | None,
    last_cycle: list[int] | None,
) -> str:
    """Render a graph with its last path and cycle as report text."""
    lines = [
        GRAPH_HEADER,
        f"Number of nodes: {graph.n}",
        "",
        ADJACENCY_HEADER,
    ]
    for v in range(graph.n):
        items = " ".join(f"({e.to}, w={e.weight})" for e in graph.neighbors(v))
        lines.append(f"{v} -> {items}".rstrip())
    lines += [
        "",
        PATH_HEADER,
        _format_vertices(last_path),
        "",
        CYCLE_HEADER,
        _format_vertices(last_cycle),
    ]
    return "\n".join(lines) + "\n"


def _section_value(lines: list[str], header: str) -> list[int] | None:
    """Parse the line after header as a vertex list or None."""
    try:
        value_line = lines[lines.index(header) + 1].strip()
    except (ValueError, IndexError):
        raise ReportFormatError(f"Missing section {header!r}") from None

    if value_line == "None":
        return None
    try:
        parsed = ast.literal_eval(value_line)
    except (ValueError, SyntaxError):
        raise ReportFormatError(
            f"Unreadable vertex list under {header!r}: {value_line!r}"
        ) from None
    if not isinstance(parsed, list) or not all(
        isinstance(v, int) for v in parsed
    ):
        raise ReportFormatError(
            f"Expected a list of vertex indices under {header!r}, "
            f"got {value_line!r}"
        )
    return parsed


def parse_report(text: str) -> SavedReport:
    """Rebuild the graph, last path, and last cycle from report text.

    Edges are re-added in the order they appear, so each vertex's
    adjacency list keeps the order it was saved in.

    Raises:
        ReportFormatError: If the text does not follow the report layout.
    """
    lines = text.splitlines()
    if GRAPH_HEADER not in lines:
        raise ReportFormatError(f"Missing {GRAPH_HEADER!r} header")

    n: int | None = None
    for line in lines:
        match = _NODES_RE.match(line.strip())
        if match:
            n = int(match.group(1))
            break
    if n is None:
        raise ReportFormatError("Missing 'Number of nodes' line")

    try:
        start = lines.index(ADJACENCY_HEADER) + 1
    except ValueError:
        raise ReportFormatError(f"Missing {ADJACENCY_HEADER!r} section") from None

    rows = lines[start:start + n]
    if len(rows) < n:
        raise ReportFormatError(
            f"Expected {n} adjacency rows, found {len(rows)}"
        )

    graph = Graph(n)
    for offset, line in enumerate(rows):
        match = _ROW_RE.match(line.strip())
        if match is None or int(match.group(1)) != offset:
            raise ReportFormatError(
                f"Expected adjacency row for vertex {offset}, got {line!r}"
            )
        for to, weight in _EDGE_RE.findall(match.group(2)):
            try:
                graph.add_edge(offset, int(to), int(weight))
            except IndexError as e:
                raise ReportFormatError(str(e)) from e

    return SavedReport(
        graph=graph,
        last_path=_section_value(lines, PATH_HEADER),
        last_cycle=_section_value(lines, CYCLE_HEADER),
    )


def save_report(
    graph: Graph,
    last_path: list[int] | None,
    last_cycle: list[int] | None,
    path: str | Path,
) -> Path:
    """Write a report to path, creating parent directories as needed.

    Raises:
        OSError: If the directory or file cannot be written.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(format_report(graph, last_path, last_cycle))
    log.info("Graph saved to %s", path)
    return path


def load_report(path: str | Path) -> SavedReport:
    """Read and parse a report file."""
    return parse_report(Path(path).read_text())
