"""Depth-first path search and path costing.

The search returns the first path DFS discovers when neighbors are
explored in edge-insertion order. It is not a shortest or cheapest path.
"""

from collections.abc import Iterator, Sequence

from src.graph.types import Edge, Graph


def find_path(graph: Graph, start: int, end: int) -> list[int] | None:
    """Find any path from start to end by depth-first search.

    Each vertex is visited at most once. A dead-end vertex is popped off
    the working path before the search resumes at its parent, so the
    returned path never contains abandoned branches.

    Args:
        graph: Graph to search.
        start: Source vertex.
        end: Destination vertex.

    Returns:
        Vertex list from start to end inclusive, [start] when start == end,
        or None if end is unreachable.
    """
    graph.check_vertex(start)
    graph.check_vertex(end)

    path = [start]
    if start == end:
        return path

    visited = [False] * graph.n
    visited[start] = True
    # frames[i] resumes the neighbor scan of path[i]
    frames: list[Iterator[Edge]] = [iter(graph.neighbors(start))]

    while frames:
        for edge in frames[-1]:
            if not visited[edge.to]:
                break
        else:
            frames.pop()
            path.pop()
            continue

        nxt = edge.to
        visited[nxt] = True
        path.append(nxt)
        if nxt == end:
            return path
        frames.append(iter(graph.neighbors(nxt)))

    return None


def path_cost(graph: Graph, path: Sequence[int]) -> int:
    """Sum edge weights along a path.

    For each consecutive pair the first matching edge in insertion order
    is used, so among parallel edges the earliest one is charged even if a
    later one is cheaper.

    Raises:
        ValueError: If a consecutive pair is not joined by any edge.
    """
    cost = 0
    for src, dst in zip(path, path[1:]):
        for edge in graph.neighbors(src):
            if edge.to == dst:
                cost += edge.weight
                break
        else:
            raise ValueError(f"No edge {src}->{dst} in path {list(path)}")
    return cost
