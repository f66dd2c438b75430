import plotly.graph_objects as go


def _centre(coordinates):
    """Centre point of a cell, cells span [x, x+1) x [y, y+1)."""
    return coordinates.x + 0.5, coordinates.y + 0.5


###############################################################################
# Maze layers
###############################################################################

def draw_grid(fig, maze_size):
    """Draw the maze outline and cell grid lines

    Args:
        fig: Plotly figure object
        maze_size: MazeSize of the problem
    """
    for x in range(maze_size.columns + 1):
        fig.add_shape(type="line", x0=x, y0=0, x1=x, y1=maze_size.rows,
                      line=dict(color="lightgray", width=1), layer="below")
    for y in range(maze_size.rows + 1):
        fig.add_shape(type="line", x0=0, y0=y, x1=maze_size.columns, y1=y,
                      line=dict(color="lightgray", width=1), layer="below")


def draw_walls(fig, walls):
    """Draw every wall rectangle as a filled block

    Args:
        fig: Plotly figure object
        walls: iterable of Wall
    """
    for wall in walls:
        fig.add_shape(
            type="rect",
            x0=wall.x, y0=wall.y,
            x1=wall.x + wall.columns, y1=wall.y + wall.rows,
            fillcolor="dimgray",
            line=dict(color="black", width=1),
        )


def draw_search_tree(fig, search_tree):
    """Mark every cell present in the search tree

    Args:
        fig: Plotly figure object
        search_tree: list of SearchNode (duplicates across legs are drawn once)
    """
    cells = list(dict.fromkeys(node.coordinates for node in search_tree))
    if not cells:
        return
    xs, ys = zip(*(_centre(c) for c in cells))
    fig.add_trace(go.Scatter(
        x=xs, y=ys,
        mode="markers",
        marker=dict(size=14, color="lightblue", symbol="square"),
        name=f"Searched ({len(search_tree)} nodes)",
        hoverinfo="skip",
    ))


def draw_path(fig, start, path):
    """Draw the solution path as a line from the start through every path node

    Args:
        fig: Plotly figure object
        start: Coordinate the path leaves from
        path: list of SearchNode
    """
    if not path:
        return
    points = [_centre(start)] + [_centre(node.coordinates) for node in path]
    xs, ys = zip(*points)
    fig.add_trace(go.Scatter(
        x=xs, y=ys,
        mode="lines",
        line=dict(width=4, color="red"),
        text=["start"] + [node.direction for node in path],
        hoverinfo="text",
        name=f"Path ({len(path)} moves)",
    ))


def draw_markers(fig, problem):
    """Draw the agent start (green) and the goals (red)"""
    sx, sy = _centre(problem.agent_location)
    fig.add_trace(go.Scatter(
        x=[sx], y=[sy], mode="markers",
        marker=dict(size=18, color="green"),
        text=f"Start {problem.agent_location}", hoverinfo="text", name="Start",
    ))
    gx, gy = zip(*(_centre(g) for g in problem.goals))
    fig.add_trace(go.Scatter(
        x=gx, y=gy, mode="markers",
        marker=dict(size=18, color="red", symbol="star"),
        text=[f"Goal {g}" for g in problem.goals], hoverinfo="text", name="Goals",
    ))


def build_maze_figure(problem, solution=None):
    """Build a plotly figure of the maze, optionally with a solution drawn on top

    Args:
        problem: Problem to draw
        solution: Solution returned by a search, or None

    Returns:
        go.Figure
    """
    fig = go.Figure()
    draw_grid(fig, problem.maze_size)
    draw_walls(fig, problem.walls)
    if solution is not None:
        draw_search_tree(fig, solution.search_tree)
        draw_path(fig, problem.agent_location, solution.path)
    draw_markers(fig, problem)

    rows, columns = problem.maze_size
    fig.update_layout(
        autosize=True,
        height=max(300, 60 * rows),
        hovermode="closest",
        plot_bgcolor="white",
        margin={"r": 0, "t": 30, "l": 0, "b": 0},
        xaxis=dict(range=[0, columns], showgrid=False, zeroline=False, dtick=1),
        # row 0 at the top so "up" points up on screen
        yaxis=dict(range=[rows, 0], showgrid=False, zeroline=False, dtick=1,
                   scaleanchor="x", scaleratio=1),
        legend=dict(orientation="h", y=1.05),
    )
    return fig
