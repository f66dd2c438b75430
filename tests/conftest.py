import os

import pytest

from util import Problem

MAZE_FOLDER = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "Test_Cases_Maze")

ROBOT_NAV_WALLS = [
    (2, 0, 2, 2), (8, 0, 1, 2), (10, 0, 1, 1), (2, 3, 1, 2),
    (3, 4, 3, 1), (9, 3, 1, 1), (8, 4, 2, 1),
]


@pytest.fixture
def open_problem():
    """5x5 maze without walls, (0,0) -> (4,4)."""
    return Problem.build((5, 5), (0, 0), [(4, 4)])


@pytest.fixture
def small_problem():
    """3x3 maze without walls, (0,0) -> (2,2)."""
    return Problem.build((3, 3), (0, 0), [(2, 2)])


@pytest.fixture
def sealed_problem():
    """Goal (5,5) boxed in by walls on every side."""
    return Problem.build((7, 7), (0, 0), [(5, 5)],
                         [(4, 4, 3, 1), (4, 6, 3, 1), (4, 5, 1, 1), (6, 5, 1, 1)])


@pytest.fixture
def robot_nav_problem():
    return Problem.build((5, 11), (0, 1), [(7, 0), (10, 3)], ROBOT_NAV_WALLS)


@pytest.fixture
def maze_folder():
    return MAZE_FOLDER
