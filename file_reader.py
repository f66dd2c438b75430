import re
import sys

from util import Problem

_INT = re.compile(r"-?\d+")


def _numbers(line):
    return [int(n) for n in _INT.findall(line)]


def _expect(line, count, what, source):
    """Parse exactly `count` integers out of line or raise ValueError."""
    nums = _numbers(line)
    if len(nums) != count:
        raise ValueError(f"{source}: cannot parse {what} from '{line.strip()}' "
                         f"(expected {count} integers, got {len(nums)})")
    return nums


def parse_maze_text(text, source="<maze>"):
    """Parses a maze description into a Problem

    Args:
        text (string): Maze description, one item per line:
            [rows,columns]
            (agent_x,agent_y)
            (goal_x,goal_y) | (goal_x,goal_y) ...
            (wall_x,wall_y,wall_columns,wall_rows)   (zero or more lines)
        source (string): Name used in error messages

    Returns:
        Problem

    Raises:
        ValueError: if the size, agent or goal line is missing or malformed
    """
    lines = [line.strip() for line in text.splitlines()]
    lines = [line for line in lines if line and not line.startswith("#")]
    if len(lines) < 3:
        raise ValueError(f"{source}: expected maze size, agent and goal lines, got {len(lines)} line(s)")

    rows, columns = _expect(lines[0], 2, "maze size", source)
    agent = _expect(lines[1], 2, "agent location", source)
    goals = [_expect(part, 2, "goal", source) for part in lines[2].split("|") if part.strip()]
    if not goals:
        raise ValueError(f"{source}: no goal found in '{lines[2]}'")

    walls = []
    for line in lines[3:]:
        # Example: (2,0,2,2)
        nums = _numbers(line)
        if len(nums) != 4:
            print(f"Error parsing wall line '{line}': expected 4 integers, got {len(nums)}", file=sys.stderr)
            continue
        walls.append(nums)

    return Problem.build((rows, columns), agent, goals, walls)


def parse_maze_file(path):
    """Reads and parses a maze file, see parse_maze_text for the format."""
    with open(path, "r", encoding="utf-8") as f:
        return parse_maze_text(f.read(), source=path)
