from rich.console import Console
from rich.text import Text

# No-break spaces keep the background colour when the terminal reflows
GLYPH = "\u00a0\u00a0"

STYLE_ENTRY = "on red"
STYLE_GOAL = "on green"
STYLE_WALL = "on white"
STYLE_PATH = "on blue"
STYLE_OPEN = "on black"


def cell_style(cell) -> str:
    if cell.is_entry:
        return STYLE_ENTRY
    if cell.is_goal:
        return STYLE_GOAL
    if cell.is_wall:
        return STYLE_WALL
    if cell.is_visited:
        return STYLE_PATH
    return STYLE_OPEN


def build_text(maze) -> Text:
    text = Text()
    for row in range(maze.height):
        for col in range(maze.width):
            text.append(GLYPH, style=cell_style(maze.cell_at(row, col)))
        if row < maze.height - 1:
            text.append("\n")
    return text


def render(maze, console: Console = None):
    """Print the maze as coloured blocks, two columns per cell."""
    if console is None:
        console = Console()
    console.print(build_text(maze), soft_wrap=True)
