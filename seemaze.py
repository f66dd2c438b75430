import sys

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

import constants
from search import load_problem, search_maze


def draw_maze(problem, solution=None, ax=None):
    """Draw the maze, and the searched cells and path of a solution if given.

    Returns the matplotlib Axes drawn on.
    """
    if ax is None:
        _fig, ax = plt.subplots(figsize=(10, 8))

    rows, columns = problem.maze_size

    # Searched cells first so walls and path sit on top
    if solution is not None:
        for cell in dict.fromkeys(node.coordinates for node in solution.search_tree):
            ax.add_patch(Rectangle((cell.x, cell.y), 1, 1, facecolor="lightblue", edgecolor="none", zorder=1))

    for wall in problem.walls:
        ax.add_patch(Rectangle((wall.x, wall.y), wall.columns, wall.rows,
                               facecolor="dimgray", edgecolor="black", linewidth=1.5, zorder=2))

    if solution is not None and solution.path:
        xs = [problem.agent_location.x + 0.5] + [n.coordinates.x + 0.5 for n in solution.path]
        ys = [problem.agent_location.y + 0.5] + [n.coordinates.y + 0.5 for n in solution.path]
        ax.plot(xs, ys, color="red", linewidth=3, zorder=3)

    # Highlight origin + goals
    ax.scatter(problem.agent_location.x + 0.5, problem.agent_location.y + 0.5,
               s=400, color="lightgreen", edgecolor="darkgreen", linewidth=3, zorder=4)
    for goal in problem.goals:
        ax.scatter(goal.x + 0.5, goal.y + 0.5,
                   s=400, facecolors="lightcoral", edgecolor="darkred", linewidth=3, zorder=4)

    ax.set_xlim(0, columns)
    ax.set_ylim(rows, 0)   # row 0 at the top
    ax.set_xticks(range(columns + 1))
    ax.set_yticks(range(rows + 1))
    ax.set_aspect("equal")
    ax.grid(True, alpha=0.3, linestyle="--")
    return ax


def main(argv):
    """python seemaze.py [filename] [method] [allGoals]; returns the exit code."""
    if argv:
        filename = argv[0]
    else:
        filename = constants.DEFAULT_MAZE
        print(f"No file specified, using default: {filename}")

    problem = load_problem(filename)
    if problem is None:
        return 1

    solution = None
    title = "Maze Visualization"
    if len(argv) > 1:
        method = argv[1].upper()
        all_goals = len(argv) > 2 and argv[2].lower() == "allgoals"
        try:
            solution = search_maze(problem, method, all_goals)
        except ValueError as e:
            print(f"Error: {e}")
            return 1
        title = f"{method}: {solution.status.value}, {len(solution.search_tree)} nodes"

    ax = draw_maze(problem, solution)
    ax.set_title(title, fontsize=18, fontweight="bold", pad=20)
    plt.tight_layout()
    plt.show()
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
