import constants
from strategies.common import SearchTree, expand, failed_solution, found_solution


def run_depth_limited(problem, goal, root, depth_limit=None):
    """
    Depth-limited DFS (CUS1).
    Args:
        problem: Problem holding maze size and walls
        goal: goal Coordinate
        root: root SearchNode built by initial_node
        depth_limit: deepest node pushed onto the stack, defaults to constants.DEPTH_LIMIT
    Returns:
        Solution

    Every generated node is recorded in the search tree, but only nodes no
    deeper than depth_limit are pushed for expansion, so a returned path is
    never longer than depth_limit.
    """
    if depth_limit is None:
        depth_limit = constants.DEPTH_LIMIT

    search_tree = SearchTree(root)
    stack = [root.index]

    while stack:
        node = search_tree[stack.pop()]
        if node.is_goal:
            return found_solution(search_tree, node, goal)

        candidates = expand(node, problem.maze_size, goal, problem.walls, search_tree)
        for child in reversed(candidates):
            child_index = search_tree.add(child)
            if child.depth <= depth_limit:
                stack.append(child_index)

    return failed_solution(search_tree)
