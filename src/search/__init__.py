"""Graph queries: DFS path discovery with costing, and directed cycle detection."""

from src.search.cycle import find_cycle
from src.search.path import find_path, path_cost

__all__ = [
    "find_cycle",
    "find_path",
    "path_cost",
]
