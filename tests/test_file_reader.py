import os

import pytest

from file_reader import parse_maze_file, parse_maze_text
from util import Coordinate, MazeSize, Wall

from conftest import ROBOT_NAV_WALLS


class TestParseMazeText:

    def test_robot_nav_layout(self):
        text = "[5,11]\n(0,1)\n(7,0) | (10,3)\n" + "\n".join(
            f"({x},{y},{w},{h})" for x, y, w, h in ROBOT_NAV_WALLS)
        problem = parse_maze_text(text)
        assert problem.maze_size == MazeSize(rows=5, columns=11)
        assert problem.agent_location == Coordinate(0, 1)
        assert problem.goals == (Coordinate(7, 0), Coordinate(10, 3))
        assert problem.walls[0] == Wall(x=2, y=0, columns=2, rows=2)
        assert len(problem.walls) == 7

    def test_whitespace_comments_and_blank_lines(self):
        text = "# header\n\n  [ 3 , 4 ]  \r\n( 1, 2 )\n\n(3,0)|(0,2)|\n# trailing note\n"
        problem = parse_maze_text(text)
        assert problem.maze_size == MazeSize(3, 4)
        assert problem.agent_location == (1, 2)
        assert problem.goals == ((3, 0), (0, 2))
        assert problem.walls == ()

    def test_bad_wall_line_skipped(self, capsys):
        problem = parse_maze_text("[5,5]\n(0,0)\n(4,4)\n(1,1,2)\n(2,2,1,1)\n", source="bad.txt")
        assert problem.walls == (Wall(2, 2, 1, 1),)
        assert "Error parsing wall line '(1,1,2)'" in capsys.readouterr().err

    @pytest.mark.parametrize("text,message", [
        ("[5,5]\n(0,0)\n", "expected maze size, agent and goal lines"),
        ("[5]\n(0,0)\n(4,4)\n", "maze size"),
        ("[5,5]\n(0,0,1)\n(4,4)\n", "agent location"),
        ("[5,5]\n(0,0)\n(4,4) | (3)\n", "goal"),
        ("[5,5]\n(0,0)\n | \n", "no goal"),
    ])
    def test_malformed_header(self, text, message):
        with pytest.raises(ValueError, match=message):
            parse_maze_text(text, source="broken.txt")

    def test_source_in_error(self):
        with pytest.raises(ValueError, match="mazes/x.txt"):
            parse_maze_text("[5,5]", source="mazes/x.txt")


class TestParseMazeFile:

    def test_sample_files_parse(self, maze_folder):
        files = sorted(f for f in os.listdir(maze_folder) if f.endswith(".txt"))
        assert "RobotNav-test.txt" in files
        for name in files:
            problem = parse_maze_file(os.path.join(maze_folder, name))
            assert problem.goals
            assert problem.is_open(problem.agent_location)

    def test_robot_nav_file(self, maze_folder, robot_nav_problem):
        assert parse_maze_file(os.path.join(maze_folder, "RobotNav-test.txt")) == robot_nav_problem

    def test_corridor_file_comment(self, maze_folder):
        problem = parse_maze_file(os.path.join(maze_folder, "corridor-15.txt"))
        assert problem.maze_size == MazeSize(1, 15)
        assert problem.goals == (Coordinate(14, 0),)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            parse_maze_file(str(tmp_path / "nope.txt"))

    def test_tmp_file(self, tmp_path):
        path = tmp_path / "tiny.txt"
        path.write_text("[2,2]\n(0,0)\n(1,1)\n(1,0,1,1)\n", encoding="utf-8")
        problem = parse_maze_file(str(path))
        assert problem.is_wall(Coordinate(1, 0))
        assert not problem.is_wall(Coordinate(0, 1))
