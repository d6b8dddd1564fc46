"""Directed cycle detection by depth-first search with on-stack marking.

Vertex states:
  unvisited  -- not reached yet
  on-stack   -- on the current DFS chain
  finished   -- fully explored; never re-entered or used as a root again

An edge into an on-stack vertex is a back edge and closes a cycle. The
working chain is trimmed to start at that vertex, so any acyclic prefix
walked before entering the cycle is discarded.
"""

from collections.abc import Iterator

from src.graph.types import Edge, Graph


def find_cycle(graph: Graph) -> list[int] | None:
    """Return the first directed cycle found, or None if the graph is acyclic.

    Roots are tried in index order and edges in insertion order. The
    returned list does not repeat its first vertex at the end; the closing
    edge runs from the last element back to the first. A self-loop yields
    a single-vertex cycle.
    """
    visited = [False] * graph.n
    on_stack = [False] * graph.n

    for root in range(graph.n):
        if visited[root]:
            continue

        visited[root] = on_stack[root] = True
        chain = [root]
        frames: list[Iterator[Edge]] = [iter(graph.neighbors(root))]

        while frames:
            for edge in frames[-1]:
                nxt = edge.to
                if not visited[nxt]:
                    break
                if on_stack[nxt]:
                    return chain[chain.index(nxt):]
            else:
                on_stack[chain.pop()] = False
                frames.pop()
                continue

            visited[nxt] = on_stack[nxt] = True
            chain.append(nxt)
            frames.append(iter(graph.neighbors(nxt)))

    return None
