"""Package exposing search strategy implementations."""
from enum import Enum

from util import Coordinate
from .common import (
    HeuristicCost, SearchNode, SearchTree, Solution, Status,
    expand, initial_node, manhattan,
)
from .dfs import run_dfs
from .bfs import run_bfs
from .gbfs import run_gbfs
from .astar import run_astar
from .depth_limited import run_depth_limited
from .bidirectional import run_bidirectional


class Strategy(Enum):
    """Search methods selectable by name, e.g. Strategy("AS")."""
    DFS = "DFS"
    BFS = "BFS"
    GBFS = "GBFS"
    AS = "AS"
    CUS1 = "CUS1"    # depth-limited DFS
    CUS2 = "CUS2"    # bidirectional A*

    @property
    def run(self):
        """Search function run(problem, goal, root) -> Solution."""
        return _RUNNERS[self]


_RUNNERS = {
    Strategy.DFS: run_dfs,
    Strategy.BFS: run_bfs,
    Strategy.GBFS: run_gbfs,
    Strategy.AS: run_astar,
    Strategy.CUS1: run_depth_limited,
    Strategy.CUS2: run_bidirectional,
}


def select_strategy(method):
    """Returns the Strategy for a method name (case-insensitive) or Strategy member.

    Raises ValueError for unknown names.
    """
    if isinstance(method, Strategy):
        return method
    try:
        return Strategy(str(method).strip().upper())
    except ValueError:
        valid = ", ".join(s.value for s in Strategy)
        raise ValueError(f"Unknown method: {method} (expected one of {valid})") from None


def find_solution(problem, start, goal, method):
    """Runs one search of the given method from start to goal."""
    strategy = select_strategy(method)
    root = initial_node(start, goal)
    return strategy.run(problem, Coordinate(*goal), root)


__all__ = [
    "Strategy", "select_strategy", "find_solution",
    "run_dfs", "run_bfs", "run_gbfs", "run_astar", "run_depth_limited", "run_bidirectional",
    "HeuristicCost", "SearchNode", "SearchTree", "Solution", "Status",
    "expand", "initial_node", "manhattan",
]
