import heapq
import itertools

from strategies.astar import push_by_cost
from strategies.common import (
    SearchNode, SearchTree, Solution, Status, calculate_manhattan, expand,
    failed_solution, found_solution, initial_node, step_direction,
)


def stitch_path(forward_tree, backward_tree, meeting, start, goal):
    """Joins both halves at the meeting coordinate into one start -> goal path.

    The backward half was grown from the goal, so its ancestors are reversed
    and every direction is recomputed from the preceding coordinate. Returns
    the path without its root.
    """
    forward_prefix = forward_tree.ancestors(forward_tree.find(meeting))
    backward_prefix = backward_tree.ancestors(backward_tree.find(meeting))

    coordinates = ([n.coordinates for n in forward_prefix]
                   + [meeting]
                   + [n.coordinates for n in reversed(backward_prefix)])

    stitched = SearchTree(initial_node(start, goal))
    for previous, current in zip(coordinates, coordinates[1:]):
        parent = stitched.nodes[-1]
        stitched.add(SearchNode(
            direction=step_direction(previous, current),
            coordinates=current,
            is_goal=current == goal,
            distance_to_goal=calculate_manhattan(current, parent, goal),
            depth=parent.depth + 1,
            parent=parent.index,
        ))
    return stitched.nodes[1:]


def run_bidirectional(problem, goal, root):
    """
    Bidirectional A* (CUS2).
    Args:
        problem: Problem holding maze size and walls
        goal: goal Coordinate
        root: root SearchNode built by initial_node
    Returns:
        Solution whose search_tree holds the forward tree followed by the backward tree

    A forward frontier grows from the start towards the goal and a backward
    frontier from the goal towards the start, both ordered as in A*. Each step
    pops one node per side; the search ends when a popped coordinate is
    already in the other side's tree, or when either frontier runs dry.
    """
    start = root.coordinates
    forward_tree = SearchTree(root)
    if root.is_goal:
        return found_solution(forward_tree, root, goal)

    reverse_root = initial_node(goal, start)
    backward_tree = SearchTree(reverse_root)

    forward_counter = itertools.count()
    backward_counter = itertools.count()
    forward = [(root.distance_to_goal.from_starting_node, next(forward_counter), root.index)]
    backward = [(reverse_root.distance_to_goal.from_starting_node, next(backward_counter), reverse_root.index)]

    while forward and backward:
        node = forward_tree[heapq.heappop(forward)[2]]
        reverse_node = backward_tree[heapq.heappop(backward)[2]]

        if node.coordinates in backward_tree:
            meeting = node.coordinates
        elif reverse_node.coordinates in forward_tree:
            meeting = reverse_node.coordinates
        else:
            meeting = None

        if meeting is not None:
            return Solution(
                status=Status.FOUND,
                path=stitch_path(forward_tree, backward_tree, meeting, start, goal),
                search_tree=forward_tree.nodes + backward_tree.nodes,
                visited_goals=[reverse_root.coordinates],
            )

        push_by_cost(forward, forward_counter, forward_tree,
                     expand(node, problem.maze_size, goal, problem.walls, forward_tree))
        push_by_cost(backward, backward_counter, backward_tree,
                     expand(reverse_node, problem.maze_size, start, problem.walls, backward_tree))

    return failed_solution(forward_tree, backward_tree)
