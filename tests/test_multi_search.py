import pytest

import constants
from multi_search import nearest_leg, plan_legs, search_all_goals
from strategies import Status, find_solution, select_strategy
from strategies.common import step_direction
from util import Coordinate, Problem


class TestNearestLeg:

    def setup_method(self):
        self.problem = Problem.build((5, 5), (0, 0), [(4, 4), (1, 0), (0, 3)])

    def test_plan_legs_keeps_goal_order(self):
        legs = plan_legs(self.problem, self.problem.agent_location, list(self.problem.goals),
                         select_strategy("BFS"))
        assert [goal for goal, _ in legs] == [(4, 4), (1, 0), (0, 3)]
        assert [len(s.path) for _, s in legs] == [8, 1, 3]

    def test_shortest_leg_wins(self):
        legs = plan_legs(self.problem, self.problem.agent_location, list(self.problem.goals),
                         select_strategy("BFS"))
        goal, solution = nearest_leg(legs)
        assert goal == (1, 0)
        assert solution.directions == ["right"]

    def test_tie_goes_to_later_goal(self):
        problem = Problem.build((3, 3), (0, 0), [(1, 0), (0, 1)])
        legs = plan_legs(problem, problem.agent_location, list(problem.goals), select_strategy("BFS"))
        goal, _ = nearest_leg(legs)
        assert goal == Coordinate(0, 1)

    def test_failed_legs_ignored(self, sealed_problem):
        problem = Problem.build((7, 7), (0, 0), [(5, 5), (6, 0)], sealed_problem.walls)
        legs = plan_legs(problem, problem.agent_location, list(problem.goals), select_strategy("AS"))
        goal, _ = nearest_leg(legs)
        assert goal == (6, 0)

    def test_none_when_every_leg_failed(self, sealed_problem):
        legs = plan_legs(sealed_problem, sealed_problem.agent_location, list(sealed_problem.goals),
                         select_strategy("BFS"))
        assert nearest_leg(legs) is None


class TestSearchAllGoals:

    def test_visits_nearest_first(self):
        problem = Problem.build((5, 5), (0, 0), [(4, 4), (1, 0)])
        solution = search_all_goals(problem, "BFS")
        assert solution.status is Status.FOUND
        assert solution.visited_goals == [(1, 0), (4, 4)]
        assert len(solution.path) == 8
        assert solution.path[0].direction == "right"

    @pytest.mark.parametrize("method", constants.METHODS)
    def test_single_goal_matches_plain_search(self, open_problem, method):
        combined = search_all_goals(open_problem, method)
        assert combined.visited_goals == [Coordinate(4, 4)]
        assert combined.found

    @pytest.mark.parametrize("method", ["DFS", "BFS", "GBFS", "AS", "CUS2"])
    def test_robot_nav_every_goal(self, robot_nav_problem, method):
        solution = search_all_goals(robot_nav_problem, method)
        assert solution.status is Status.FOUND
        assert sorted(solution.visited_goals) == sorted(robot_nav_problem.goals)

        # legs join up: the path is one contiguous walk through every goal
        previous = robot_nav_problem.agent_location
        for node in solution.path:
            assert node.direction == step_direction(previous, node.coordinates)
            previous = node.coordinates
        assert previous == solution.visited_goals[-1]

    @pytest.mark.parametrize("method", ["DFS", "BFS", "GBFS", "AS", "CUS2"])
    def test_path_is_concatenation_of_legs(self, robot_nav_problem, method):
        solution = search_all_goals(robot_nav_problem, method)
        expected = []
        current = robot_nav_problem.agent_location
        for goal in solution.visited_goals:
            expected.extend(find_solution(robot_nav_problem, current, goal, method).directions)
            current = goal
        assert solution.directions == expected

    def test_robot_nav_bfs_order(self, robot_nav_problem):
        solution = search_all_goals(robot_nav_problem, "BFS")
        assert solution.visited_goals == [(7, 0), (10, 3)]

    def test_search_tree_is_concatenation_of_legs(self):
        problem = Problem.build((3, 3), (0, 0), [(2, 2), (2, 0)])
        solution = search_all_goals(problem, "BFS")
        roots = [n for n in solution.search_tree if n.direction == "start"]
        assert [r.coordinates for r in roots] == [(0, 0), (2, 0)]

    def test_unreachable_goal_fails(self, sealed_problem):
        problem = Problem.build((7, 7), (0, 0), [(5, 5), (6, 0)], sealed_problem.walls)
        solution = search_all_goals(problem, "BFS")
        assert solution.status is Status.FAIL
        assert solution.visited_goals == [(6, 0)]
        # the path still walks to the reachable goal
        assert solution.path[-1].coordinates == (6, 0)

    def test_nothing_reachable(self, sealed_problem):
        solution = search_all_goals(sealed_problem, "GBFS")
        assert solution.status is Status.FAIL
        assert solution.path == []
        assert solution.visited_goals == []
        assert len(solution.search_tree) > 0

    def test_unknown_method(self, open_problem):
        with pytest.raises(ValueError):
            search_all_goals(open_problem, "XYZ")
