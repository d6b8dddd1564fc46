"""Interactive menu driver and console formatting for explorer sessions."""

import logging
import sys
from typing import TextIO

from src.graph.types import Graph
from src.session.session import GraphSession, NoGraphError

log = logging.getLogger(__name__)

MENU = (
    "\n1. Generate New Graph\n"
    "2. Show Graph\n"
    "3. Find a Path\n"
    "4. Detect Cycle\n"
    "5. Exit"
)
RULE = "-" * 40


def format_graph(graph: Graph) -> str:
    """Render the adjacency list with vertex and edge counts."""
    lines = [
        f"Directed Weighted Graph: nodes={graph.n}, edges={graph.num_edges}",
        RULE,
    ]
    for v in range(graph.n):
        out = graph.neighbors(v)
        if not out:
            lines.append(f"{v:3d}:  (no outgoing edges)")
        else:
            items = ", ".join(f"-> {e.to}(w={e.weight})" for e in out)
            lines.append(f"{v:3d}: {items}")
    lines.append(RULE)
    return "\n".join(lines)


class _EndOfInput(Exception):
    """Input stream closed while the menu was waiting for a value."""


def _read_line(stdin: TextIO, stdout: TextIO, prompt: str = "") -> str:
    if prompt:
        stdout.write(prompt)
        stdout.flush()
    line = stdin.readline()
    if not line:
        raise _EndOfInput
    return line.strip()


def _read_int(stdin: TextIO, stdout: TextIO, prompt: str) -> int:
    return int(_read_line(stdin, stdout, prompt))


def _generate(session: GraphSession, stdout: TextIO) -> None:
    outcome = session.generate()
    if outcome.backup is not None:
        print(f"Graph saved to {outcome.backup}", file=stdout)
    elif outcome.backup_error is not None:
        print(f"Error saving file: {outcome.backup_error}", file=stdout)
    print("New graph generated!", file=stdout)


def _show(session: GraphSession, stdout: TextIO) -> None:
    if session.graph is None:
        print("No graph yet.", file=stdout)
        return
    print(format_graph(session.graph), file=stdout)


def _find_path(session: GraphSession, stdin: TextIO, stdout: TextIO) -> None:
    session.require_graph()
    start = _read_int(stdin, stdout, "Start: ")
    end = _read_int(stdin, stdout, "End: ")
    path, cost = session.find_path(start, end)
    if path is None:
        print("No path found.", file=stdout)
    else:
        print(f"Path: {path}", file=stdout)
        print(f"Cost: {cost}", file=stdout)


def _detect_cycle(session: GraphSession, stdout: TextIO) -> None:
    cycle = session.find_cycle()
    if cycle is None:
        print("No cycle found.", file=stdout)
    else:
        print(f"Cycle: {cycle}", file=stdout)


def run_console(
    session: GraphSession,
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
) -> None:
    """Run the menu loop until the user exits or input ends.

    Invalid choices and vertex indices are reported and the loop continues.
    """
    while True:
        print(MENU, file=stdout)
        try:
            choice = _read_line(stdin, stdout)
            if choice == "1":
                _generate(session, stdout)
            elif choice == "2":
                _show(session, stdout)
            elif choice == "3":
                _find_path(session, stdin, stdout)
            elif choice == "4":
                _detect_cycle(session, stdout)
            elif choice == "5":
                log.info("Exit requested")
                return
            else:
                print(f"Unknown option: {choice!r}", file=stdout)
        except _EndOfInput:
            log.info("Input closed, leaving menu")
            return
        except NoGraphError:
            print("Generate a graph first.", file=stdout)
        except ValueError:
            print("Please enter a whole number.", file=stdout)
        except IndexError as e:
            print(f"Invalid vertex: {e}", file=stdout)
