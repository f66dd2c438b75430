from typing import NamedTuple, Tuple


class Coordinate(NamedTuple):
    """A cell of the maze, x is the column and y the row."""
    x: int
    y: int

    def __repr__(self):
        return f"({self.x},{self.y})"


class MazeSize(NamedTuple):
    rows: int
    columns: int

    def contains(self, location):
        """Returns True if the location lies inside the maze bounds."""
        return 0 <= location.x < self.columns and 0 <= location.y < self.rows


class Wall(NamedTuple):
    """Rectangle anchored at its top-left cell (x, y)."""
    x: int
    y: int
    columns: int
    rows: int

    def contains(self, location):
        """Returns True if the location is covered by this wall."""
        return (self.x <= location.x < self.x + self.columns
                and self.y <= location.y < self.y + self.rows)


class Problem(NamedTuple):
    """Represents one maze query. Built once and never changed afterwards."""
    maze_size: MazeSize
    agent_location: Coordinate
    goals: Tuple[Coordinate, ...]
    walls: Tuple[Wall, ...] = ()

    @classmethod
    def build(cls, maze_size, agent_location, goals, walls=()):
        """Builds a Problem from plain tuples, e.g. Problem.build((5, 5), (0, 0), [(4, 4)])."""
        goals = tuple(Coordinate(*g) for g in goals)
        if not goals:
            raise ValueError("A problem needs at least one goal")
        return cls(
            maze_size=MazeSize(*maze_size),
            agent_location=Coordinate(*agent_location),
            goals=goals,
            walls=tuple(Wall(*w) for w in walls),
        )

    def is_wall(self, location):
        """Returns True if any wall covers the location."""
        return any(w.contains(location) for w in self.walls)

    def is_open(self, location):
        """Returns True if the agent may stand on the location."""
        return self.maze_size.contains(location) and not self.is_wall(location)


def format_bytes(n_bytes: int) -> str:
    """Convert number of bytes to human-readable in KB/MB with 2 decimals.

    Args:
        n_bytes (int): Number of bytes.

    Returns:
        str: Human-readable string representation.
    """
    if n_bytes < 1024:
        return f"{n_bytes} B"
    kb = n_bytes / 1024.0
    if kb < 1024:
        return f"{kb:.2f} KB"
    mb = kb / 1024.0
    if mb < 1024:
        return f"{mb:.2f} MB"
    gb = mb / 1024.0
    return f"{gb:.2f} GB"
