from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple, Optional

from util import Coordinate

# Compass order used for every expansion: (direction, dx, dy)
MOVES = [
    ("up", 0, -1),
    ("left", -1, 0),
    ("down", 0, 1),
    ("right", 1, 0),
]


class Status(Enum):
    FOUND = "found"
    FAIL = "fail"


class HeuristicCost(NamedTuple):
    """Heuristic bookkeeping carried by every node.

    from_current_node is the Manhattan distance from the node to the goal.
    from_starting_node is the parent's from_starting_node plus that distance,
    i.e. the sum of the distance-to-goal of every node on the branch.
    nodes_travelled is the number of ancestors of the node.
    """
    from_current_node: int
    from_starting_node: int
    nodes_travelled: int


@dataclass
class SearchNode:
    """A node of a search tree.

    parent is the insertion index of the parent node in the owning SearchTree
    (None for the root) and index is this node's own insertion index, set when
    the node is added to a tree.
    """
    direction: str
    coordinates: Coordinate
    is_goal: bool
    distance_to_goal: HeuristicCost
    depth: int = 0
    parent: Optional[int] = None
    index: Optional[int] = None


class SearchTree:
    """Every node generated during one search call, in generation order."""

    def __init__(self, root=None):
        self.nodes = []             # [SearchNode, ...] indexed by insertion order
        self._by_coordinates = {}   # {Coordinate: index}
        if root is not None:
            self.add(root)

    def add(self, node):
        """Appends a node and returns its insertion index."""
        node.index = len(self.nodes)
        self.nodes.append(node)
        self._by_coordinates[node.coordinates] = node.index
        return node.index

    def __len__(self):
        return len(self.nodes)

    def __getitem__(self, index):
        return self.nodes[index]

    def __iter__(self):
        return iter(self.nodes)

    def __contains__(self, coordinates):
        return coordinates in self._by_coordinates

    def find(self, coordinates):
        """Returns the node holding the given coordinates, or None."""
        index = self._by_coordinates.get(coordinates)
        return None if index is None else self.nodes[index]

    def ancestors(self, node):
        """Returns the ancestors of a node, root first, excluding the node itself."""
        chain = []
        while node.parent is not None:
            node = self.nodes[node.parent]
            chain.append(node)
        chain.reverse()
        return chain

    def path_to(self, node):
        """Returns the nodes from the root down to and including node."""
        return self.ancestors(node) + [node]


@dataclass
class Solution:
    status: Status
    path: List[SearchNode] = field(default_factory=list)
    search_tree: List[SearchNode] = field(default_factory=list)
    visited_goals: List[Coordinate] = field(default_factory=list)

    @property
    def found(self):
        return self.status is Status.FOUND

    @property
    def directions(self):
        return [node.direction for node in self.path]


def manhattan(a, b):
    """Manhattan distance between coordinates a and b."""
    return abs(a.x - b.x) + abs(a.y - b.y)


def calculate_manhattan(location, parent, goal):
    """Heuristic cost of reaching location from parent (None for a root)."""
    distance = manhattan(location, goal)
    if parent is None:
        return HeuristicCost(distance, distance, 0)
    return HeuristicCost(
        from_current_node=distance,
        from_starting_node=parent.distance_to_goal.from_starting_node + distance,
        nodes_travelled=parent.depth + 1,
    )


def initial_node(location, goal):
    """Builds the root node of a search from location towards goal."""
    location, goal = Coordinate(*location), Coordinate(*goal)
    return SearchNode(
        direction="start",
        coordinates=location,
        is_goal=location == goal,
        distance_to_goal=calculate_manhattan(location, None, goal),
        depth=0,
    )


def expand(parent, maze_size, goal, walls, search_tree):
    """Returns the legal successors of parent in compass order.

    A successor is dropped if it lies inside a wall, outside the maze, or on a
    coordinate already present anywhere in search_tree. Nothing is added to
    the tree; callers decide what to record.
    """
    goal = Coordinate(*goal)
    candidates = []
    for direction, dx, dy in MOVES:
        coordinates = Coordinate(parent.coordinates.x + dx, parent.coordinates.y + dy)
        if any(w.contains(coordinates) for w in walls):
            continue
        if not maze_size.contains(coordinates):
            continue
        if coordinates in search_tree:
            continue
        candidates.append(SearchNode(
            direction=direction,
            coordinates=coordinates,
            is_goal=coordinates == goal,
            distance_to_goal=calculate_manhattan(coordinates, parent, goal),
            depth=parent.depth + 1,
            parent=parent.index,
        ))
    return candidates


def step_direction(previous, current):
    """Direction label of the single orthogonal move from previous to current."""
    if manhattan(previous, current) != 1:
        raise AssertionError(f"Broken path: {previous} -> {current} is not a single orthogonal move")
    if previous.y > current.y:
        return "up"
    if previous.x > current.x:
        return "left"
    if previous.y < current.y:
        return "down"
    return "right"


def found_solution(search_tree, node, goal):
    """FOUND solution ending at node, path trimmed of the root."""
    return Solution(
        status=Status.FOUND,
        path=search_tree.path_to(node)[1:],
        search_tree=list(search_tree.nodes),
        visited_goals=[Coordinate(*goal)],
    )


def failed_solution(*search_trees):
    """FAIL solution carrying every node of the given trees."""
    nodes = []
    for tree in search_trees:
        nodes.extend(tree.nodes)
    return Solution(status=Status.FAIL, search_tree=nodes)
