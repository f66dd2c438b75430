import sys
import time
import tracemalloc

import pandas as pd
import psutil

import constants
from file_reader import parse_maze_file
from multi_search import search_all_goals
from strategies import find_solution, select_strategy
from util import format_bytes

USAGE = (
    "Usage: python search.py <filename> <method> [allGoals] [--metrics | --metrics-stdout]\n"
    f"Methods: {', '.join(constants.METHODS)}, ALL"
)


def search(problem, method):
    """Search from the agent location to the first goal of the problem."""
    return find_solution(problem, problem.agent_location, problem.goals[0], method)


def search_maze(problem, method, all_goals=False):
    """Search the first goal only, or every goal in greedy order when all_goals is set."""
    if all_goals:
        return search_all_goals(problem, method)
    return search(problem, method)


def format_path(solution):
    """Direction string of a solution, e.g. 'down; right; right; '."""
    return "".join(f"{d}{constants.DIRECTION_SEPARATOR}" for d in solution.directions)


def _execute_with_metrics(run_fn, *args):
    """Run a search function and collect runtime and memory metrics.

    Returns: (result, runtime_seconds, peak_tracemalloc_bytes, rss_after_bytes)
    - peak_tracemalloc_bytes: peak Python allocations measured by tracemalloc
    - rss_after_bytes: process RSS at end (approx OS memory usage)
    """
    tracemalloc.start()
    proc = psutil.Process()
    t0 = time.perf_counter()
    try:
        result = run_fn(*args)
        dt = time.perf_counter() - t0
        _cur, peak = tracemalloc.get_traced_memory()
    finally:
        tracemalloc.stop()
    rss_after = proc.memory_info().rss
    return result, dt, peak, rss_after


def compare_strategies(problem, all_goals=False):
    """Run every method on the problem and tabulate the results.

    Returns a DataFrame with one row per method (in constants.METHODS order) and
    the columns method, status, path_length, nodes, runtime_ms, peak_py_mem, path.
    """
    rows = []
    for method in constants.METHODS:
        solution, runtime_s, peak_bytes, _rss = _execute_with_metrics(search_maze, problem, method, all_goals)
        rows.append({
            "method": method,
            "status": solution.status.value,
            "path_length": len(solution.path) if solution.found else None,
            "nodes": len(solution.search_tree),
            "runtime_ms": round(runtime_s * 1000, 3),
            "peak_py_mem": format_bytes(peak_bytes),
            "path": format_path(solution) if solution.found else "No solution found.",
        })
    return pd.DataFrame(rows, columns=["method", "status", "path_length", "nodes", "runtime_ms", "peak_py_mem", "path"])


def load_problem(filename):
    """Parse a maze file for the command line, printing an error line on failure.

    Returns the Problem, or None if the file could not be read or parsed.
    """
    try:
        return parse_maze_file(filename)
    except FileNotFoundError:
        print(f"Error: File not found: {filename}")
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
    return None


def main(filename, method, all_goals=False, metrics_mode="none"):
    """Main function to run the search algorithm.

    metrics_mode: "none" | "stderr" | "stdout"
    - When not "none", prints a single metrics line after the normal output

    Returns the process exit code.
    """
    problem = load_problem(filename)
    if problem is None:
        return 1

    method = method.upper()
    if method == "ALL":
        results_df = compare_strategies(problem, all_goals)
        print(f"{filename} ALL")
        print(results_df.to_string(index=False))
        return 0

    try:
        select_strategy(method)
    except ValueError:
        print(f"Unknown method: {method}")
        return 1

    solution, runtime_s, peak_bytes, rss_after = _execute_with_metrics(search_maze, problem, method, all_goals)

    # Expected output:
    # <filename> <method> <number of nodes>
    # <path> | No solution found.
    print(f"{filename} {method} {len(solution.search_tree)}")
    if solution.found:
        print(format_path(solution))
    else:
        print("No solution found.")

    # Metrics (printed separately so the two result lines stay unchanged)
    if metrics_mode in ("stderr", "stdout"):
        metrics_line = (
            f"Metrics: method={method} nodes={len(solution.search_tree)} "
            f"path_length={len(solution.path) if solution.found else 'N/A'} "
            f"runtime_ms={(runtime_s*1000):.3f} peak_py_mem={format_bytes(peak_bytes)} "
            f"rss_now={format_bytes(rss_after)}"
        )
        if metrics_mode == "stdout":
            print(metrics_line)
        else:
            print(metrics_line, file=sys.stderr)
    return 0


def parse_args(argv):
    """Parses [filename, method, extras...] into keyword arguments for main, or None on a usage error."""
    if len(argv) < 2:
        return None

    filename, method = argv[0], argv[1]
    all_goals = False
    metrics_mode = "none"
    # optional args are order-flexible
    for extra in argv[2:]:
        if extra.lower() == "allgoals":
            all_goals = True
        elif extra.lower() in ("--metrics", "-m"):
            metrics_mode = "stderr"
        elif extra.lower() == "--metrics-stdout":
            metrics_mode = "stdout"
        else:
            print(f"Warning: unknown flag '{extra}'. Ignored.", file=sys.stderr)
    return {"filename": filename, "method": method, "all_goals": all_goals, "metrics_mode": metrics_mode}


if __name__ == "__main__":
    # e.g. python search.py RobotNav-test.txt AS allGoals --metrics
    args = parse_args(sys.argv[1:])
    if args is None:
        print(USAGE)
        sys.exit(1)
    sys.exit(main(**args))
