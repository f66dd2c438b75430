from collections import deque

from strategies.common import SearchTree, expand, failed_solution, found_solution


def run_bfs(problem, goal, root):
    """Breadth-First Search from root towards goal: returns a Solution."""
    search_tree = SearchTree(root)
    q = deque([root.index])

    while q:
        node = search_tree[q.popleft()]
        if node.is_goal:
            return found_solution(search_tree, node, goal)

        # enqueue in compass order
        for child in expand(node, problem.maze_size, goal, problem.walls, search_tree):
            q.append(search_tree.add(child))

    return failed_solution(search_tree)
