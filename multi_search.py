from strategies import Solution, Status, find_solution, select_strategy


def plan_legs(problem, current, remaining, strategy):
    """Runs one search from current to every remaining goal.

    Returns a list of (goal, solution) pairs in the order of remaining.
    """
    return [(goal, find_solution(problem, current, goal, strategy)) for goal in remaining]


def nearest_leg(legs):
    """Picks the successful leg with the shortest path, or None if every leg failed.

    Legs are stably sorted longest-first and the last one taken, so on equal
    lengths the goal listed later wins.
    """
    reachable = [leg for leg in legs if leg[1].found]
    if not reachable:
        return None
    return sorted(reachable, key=lambda leg: len(leg[1].path), reverse=True).pop()


def search_all_goals(problem, method):
    """Visit every goal of the problem with greedy nearest-next ordering.

    From the current position every remaining goal is searched with the given
    method; the goal with the shortest path is visited next and becomes the
    new starting position. This is not an optimal tour.

    Returns a Solution whose path and search_tree are the concatenation of the
    chosen legs in visiting order. The status is FOUND only if every goal was
    reached; when none of the remaining goals is reachable the failed legs'
    search trees are appended and the search stops.
    """
    strategy = select_strategy(method)
    remaining = list(problem.goals)
    current = problem.agent_location
    combined = Solution(status=Status.FOUND)

    while remaining:
        legs = plan_legs(problem, current, remaining, strategy)
        leg = nearest_leg(legs)
        if leg is None:
            combined.status = Status.FAIL
            for _goal, failed in legs:
                combined.search_tree.extend(failed.search_tree)
            break

        goal, solution = leg
        combined.path.extend(solution.path)
        combined.search_tree.extend(solution.search_tree)
        combined.visited_goals.append(goal)
        remaining.remove(goal)
        current = goal

    return combined
