import argparse
import logging
import os

import gradio as gr
import pandas as pd

import constants
import editor
import file_reader
import render
import replay
from grid import Grid, InvalidGrid
from search import compare_strategies, search

logger = logging.getLogger(__name__)

# ============================
# Initialization stuff
# ============================
# Get list of available maze files
available_files = sorted(f for f in os.listdir(constants.MAZE_FOLDER) if f.endswith('.txt')) \
    if os.path.isdir(constants.MAZE_FOLDER) else []

init_grid = Grid.from_rows(constants.DEFAULT_MAZE)
init_algorithm = constants.DEFAULT_ALGORITHM
init_speed = constants.DEFAULT_SPEED_MS
default_file = None


def dropdown_value(maze_path, choices):
    """The file dropdown entry for maze_path, or None when it is not one of the maze folder files."""
    name = os.path.basename(maze_path)
    return name if name in choices else None


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Launch gradio maze pathfinding application")
    parser.add_argument('--maze', help='Initial maze file', default=None)
    parser.add_argument('--port', type=int, default=None, help='Port to serve on')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')

    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if args.maze:
        config = file_reader.parse_maze_file(args.maze)
        init_grid, init_algorithm, init_speed = config.grid, config.algorithm, config.speed_ms
        #Update default file to display the currently loaded file
        default_file = dropdown_value(args.maze, available_files)


def table_to_grid(table):
    """Reads the editable table back into a Grid, reporting bad cells to the user."""
    try:
        return Grid.from_dataframe(pd.DataFrame(table))
    except InvalidGrid as e:
        raise gr.Error(f"Invalid maze: {e}")


def show_grid(grid, visited=(), path=()):
    return render.build_figure(grid, visited, path)


def run_search(table, algorithm, speed):
    """Runs the chosen search, then streams the reveal one cell at a time."""
    grid = table_to_grid(table)
    result = search(grid, algorithm)
    logger.info("%s on %dx%d grid: %s", algorithm, grid.rows, grid.cols, replay.summary(result))
    if result.error:
        yield show_grid(grid), replay.summary(result)
        return
    for frame in replay.play(result, int(speed)):
        stats = replay.summary(result) if frame.phase == "done" else ""
        yield show_grid(grid, frame.visited, frame.path), stats


def reset_view(table):
    return show_grid(table_to_grid(table)), ""


def on_cell_select(table, edit_mode, evt: gr.SelectData):
    """Toggles a wall under the clicked cell while edit mode is on."""
    grid = table_to_grid(table)
    if edit_mode and evt.index is not None:
        row, col = evt.index
        grid = editor.toggle_wall(grid, (row, col))
    return grid.to_dataframe(), show_grid(grid), ""


def place_cell(table, row, col, state):
    grid = table_to_grid(table)
    try:
        grid = editor.place(grid, (int(row), int(col)), state)
    except InvalidGrid as e:
        raise gr.Error(str(e))
    return grid.to_dataframe(), show_grid(grid), ""


def generate_random(rows, cols, density, seed):
    try:
        grid = editor.random_maze(int(rows), int(cols), float(density), None if seed in (None, "") else int(seed))
    except (InvalidGrid, ValueError) as e:
        raise gr.Error(str(e))
    return grid.to_dataframe(), show_grid(grid), ""


def resize_grid(table, rows, cols):
    try:
        grid = editor.resize(table_to_grid(table), int(rows), int(cols))
    except InvalidGrid as e:
        raise gr.Error(str(e))
    return grid.to_dataframe(), show_grid(grid), ""


def compare_all(table):
    return compare_strategies(table_to_grid(table))


def load_maze(filename):
    """Load a maze file from the maze folder"""
    if not filename:
        raise gr.Error("No maze file selected")
    filepath = os.path.join(constants.MAZE_FOLDER, filename)
    try:
        config = file_reader.parse_maze_file(filepath)
    except (OSError, InvalidGrid) as e:
        raise gr.Error(f"Could not load {filename}: {e}")
    grid = config.grid
    return grid.to_dataframe(), show_grid(grid), config.algorithm, config.speed_ms, ""


#================================================
#   GRADIO INTERFACE
#================================================
with gr.Blocks(title="Maze Pathfinding") as demo:
    gr.Markdown("# Maze Pathfinding\nVisualize BFS, DFS, and A* algorithms")
    with gr.Column():
        with gr.Row():
            maze_plot = gr.Plot(value=show_grid(init_grid))
        with gr.Row():
            stats_out = gr.Textbox(value="", label="Stats", interactive=False)
        with gr.Row():
            inp_algorithm = gr.Dropdown(choices=constants.ENUM_ALGORITHMS, value=init_algorithm,
                                        label="Algorithm", interactive=True)
            inp_speed = gr.Slider(minimum=constants.MIN_SPEED_MS, maximum=constants.MAX_SPEED_MS,
                                  step=constants.SPEED_STEP_MS, value=init_speed, label="Speed (ms)")
        with gr.Row():
            run_btn = gr.Button(value="Run", variant="primary")
            reset_btn = gr.Button(value="Reset")
            compare_btn = gr.Button(value="Compare all")
        with gr.Row():
            compare_out = gr.DataFrame(interactive=False, label="Strategy comparison")
    with gr.Tab("Edit"):
        with gr.Row():
            edit_mode = gr.Checkbox(value=False, label="Edit mode (click a cell to toggle a wall)")
            file_dropdown = gr.Dropdown(choices=available_files, value=default_file,
                                        label="Load maze file", interactive=True)
        grid_table = gr.Dataframe(value=init_grid.to_dataframe(), interactive=True, label="Maze (S, G, 1 = wall, 0 = empty)")
        with gr.Row():
            inp_row = gr.Number(value=0, precision=0, label="Row")
            inp_col = gr.Number(value=0, precision=0, label="Col")
            inp_state = gr.Dropdown(choices=["S", "G", "1", "0"], value="1", label="Cell")
            place_btn = gr.Button("Place")
    with gr.Tab("Generate"):
        with gr.Row():
            inp_rows = gr.Number(value=init_grid.rows, precision=0, label="Rows")
            inp_cols = gr.Number(value=init_grid.cols, precision=0, label="Cols")
            inp_density = gr.Slider(minimum=0.0, maximum=0.8, step=0.05,
                                    value=constants.RANDOM_WALL_DENSITY, label="Wall density")
            inp_seed = gr.Textbox(value="", label="Seed (optional)")
        with gr.Row():
            random_btn = gr.Button("Random maze")
            resize_btn = gr.Button("Resize")

    # Event listeners
    run_event = run_btn.click(run_search, inputs=[grid_table, inp_algorithm, inp_speed],
                              outputs=[maze_plot, stats_out])
    reset_btn.click(reset_view, inputs=[grid_table], outputs=[maze_plot, stats_out], cancels=[run_event])
    compare_btn.click(compare_all, inputs=[grid_table], outputs=[compare_out])
    grid_table.select(on_cell_select, inputs=[grid_table, edit_mode], outputs=[grid_table, maze_plot, stats_out])
    place_btn.click(place_cell, inputs=[grid_table, inp_row, inp_col, inp_state],
                    outputs=[grid_table, maze_plot, stats_out])
    random_btn.click(generate_random, inputs=[inp_rows, inp_cols, inp_density, inp_seed],
                     outputs=[grid_table, maze_plot, stats_out])
    resize_btn.click(resize_grid, inputs=[grid_table, inp_rows, inp_cols],
                     outputs=[grid_table, maze_plot, stats_out])
    file_dropdown.change(load_maze, inputs=[file_dropdown],
                         outputs=[grid_table, maze_plot, inp_algorithm, inp_speed, stats_out])

if __name__ == "__main__":
    demo.launch(server_port=args.port)
