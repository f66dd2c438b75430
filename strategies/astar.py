import heapq
import itertools

from strategies.common import SearchTree, expand, failed_solution, found_solution


def push_by_cost(heap, counter, search_tree, candidates):
    """Records candidates in search_tree and pushes them keyed by from_starting_node."""
    for child in candidates:
        child_index = search_tree.add(child)
        heapq.heappush(heap, (child.distance_to_goal.from_starting_node, next(counter), child_index))


def run_astar(problem, goal, root):
    """
    Performs A* search from root towards goal.
    Args:
        problem: Problem holding maze size and walls
        goal: goal Coordinate
        root: root SearchNode built by initial_node
    Returns:
        Solution (FOUND with the path, or FAIL once the frontier is empty)

    Nodes are ordered by from_starting_node, the running sum of Manhattan
    distances to the goal along the branch; ties keep generation order.
    """
    search_tree = SearchTree(root)
    counter = itertools.count()
    heap = [(root.distance_to_goal.from_starting_node, next(counter), root.index)]  # (f, counter, index)

    while heap:
        _f, _cnt, index = heapq.heappop(heap)
        node = search_tree[index]
        if node.is_goal:
            return found_solution(search_tree, node, goal)

        push_by_cost(heap, counter, search_tree,
                     expand(node, problem.maze_size, goal, problem.walls, search_tree))

    return failed_solution(search_tree)
