from strategies.common import SearchTree, expand, failed_solution, found_solution


def run_dfs(problem, goal, root):
    """Depth-First Search from root towards goal: returns a Solution."""
    search_tree = SearchTree(root)
    stack = [root.index]  # indices into search_tree

    while stack:
        node = search_tree[stack.pop()]
        if node.is_goal:
            return found_solution(search_tree, node, goal)

        candidates = expand(node, problem.maze_size, goal, problem.walls, search_tree)
        # push in reverse compass order so "up" is expanded first
        for child in reversed(candidates):
            stack.append(search_tree.add(child))

    return failed_solution(search_tree)
