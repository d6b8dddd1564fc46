"""Explorer session state and the interactive console driver."""

from src.session.console import format_graph, run_console
from src.session.session import GenerateOutcome, GraphSession, NoGraphError

__all__ = [
    "GenerateOutcome",
    "GraphSession",
    "NoGraphError",
    "format_graph",
    "run_console",
]
