import argparse
import os

import gradio as gr
import pandas as pd

import constants
import file_reader
import pathing
from search import compare_strategies, format_path, search_maze

# ============================
# Initialization stuff
# ============================
# Get list of available test case files
if os.path.isdir(constants.TEST_CASE_FOLDER):
    available_files = sorted(f for f in os.listdir(constants.TEST_CASE_FOLDER) if f.endswith(".txt"))
else:
    available_files = []
default_file = os.path.basename(constants.DEFAULT_MAZE)


def summarise(filename, method, solution):
    """Text block in the same format as the command line output."""
    lines = [f"{filename} {method} {len(solution.search_tree)}"]
    if solution.found:
        lines.append(format_path(solution))
        lines.append("Goals visited: " + " -> ".join(str(g) for g in solution.visited_goals))
    else:
        lines.append("No solution found.")
    return "\n".join(lines)


def solve_maze(filename, method, all_goals=False):
    """Load a maze file from the test case folder and search it

    Returns:
        figure, summary text and the comparison DataFrame of every method
    """
    if not filename:
        return None, "No maze selected.", pd.DataFrame()
    filepath = os.path.join(constants.TEST_CASE_FOLDER, filename)
    try:
        problem = file_reader.parse_maze_file(filepath)
    except (OSError, ValueError) as e:
        return None, f"Error: {e}", pd.DataFrame()

    solution = search_maze(problem, method, all_goals)
    fig = pathing.build_maze_figure(problem, solution)
    return fig, summarise(filename, method, solution), compare_strategies(problem, all_goals)


#================================================
#   GRADIO INTERFACE
#================================================
with gr.Blocks() as demo:
    with gr.Column():
        with gr.Row():
            maze_plot = gr.Plot()
        with gr.Row():
            result_out = gr.Textbox(label="Result", lines=3, interactive=False)
        with gr.Row():
            paths_out = gr.DataFrame(interactive=False, label="All Methods")
        with gr.Row():
            file_dropdown = gr.Dropdown(choices=available_files,
                                        value=default_file if default_file in available_files else None,
                                        label="Select Maze File", interactive=True)
            method_dropdown = gr.Dropdown(choices=constants.METHODS, value="AS", label="Search Method", interactive=True)
            is_all_goals = gr.Checkbox(value=False, label="Visit All Goals", interactive=True)
        with gr.Row():
            btn = gr.Button(value="Find path")

    # Event listeners
    inputs = [file_dropdown, method_dropdown, is_all_goals]
    outputs = [maze_plot, result_out, paths_out]
    file_dropdown.change(solve_maze, inputs=inputs, outputs=outputs)
    method_dropdown.change(solve_maze, inputs=inputs, outputs=outputs)
    is_all_goals.change(solve_maze, inputs=inputs, outputs=outputs)
    btn.click(solve_maze, inputs=inputs, outputs=outputs)
    demo.load(solve_maze, inputs=inputs, outputs=outputs)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Launch gradio maze search application")
    parser.add_argument("--share", action="store_true", help="Create a public gradio link")
    args = parser.parse_args()
    demo.launch(share=args.share)
