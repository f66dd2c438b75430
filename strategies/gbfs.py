import heapq
import itertools

from strategies.common import SearchTree, expand, failed_solution, found_solution


def run_gbfs(problem, goal, root):
    """Greedy Best-First Search using the Manhattan distance to the goal as heuristic.

    The frontier always yields the node closest to the goal; nodes at equal
    distance come out in the order they were generated.
    """
    search_tree = SearchTree(root)
    counter = itertools.count()
    heap = [(root.distance_to_goal.from_current_node, next(counter), root.index)]  # (h, counter, index)

    while heap:
        _h, _cnt, index = heapq.heappop(heap)
        node = search_tree[index]
        if node.is_goal:
            return found_solution(search_tree, node, goal)

        for child in expand(node, problem.maze_size, goal, problem.walls, search_tree):
            child_index = search_tree.add(child)
            heapq.heappush(heap, (child.distance_to_goal.from_current_node, next(counter), child_index))

    return failed_solution(search_tree)
