"""Theming and table rendering for todosh."""

import logging
from typing import List

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from .todo import Todo


logger = logging.getLogger(__name__)

CITY_LIGHTS_COLORS = {
    'primary': '#68D5F3',
    'accent': '#B7C5D3',
    'success': '#8BD649',
    'warning': '#FFD93D',
    'error': '#F78C6C',
    'text_primary': '#B7C5D3',
    'text_muted': '#4F5B66',
    'text_bright': '#FFFFFF',
    'surface_light': '#41505E',
}

TODOSH_THEME = Theme({
    'default': f"{CITY_LIGHTS_COLORS['text_primary']}",
    'muted': f"{CITY_LIGHTS_COLORS['text_muted']}",
    'success': f"{CITY_LIGHTS_COLORS['success']} bold",
    'warning': f"{CITY_LIGHTS_COLORS['warning']} bold",
    'error': f"{CITY_LIGHTS_COLORS['error']} bold",
    'primary': f"{CITY_LIGHTS_COLORS['primary']} bold",
    'accent': f"{CITY_LIGHTS_COLORS['accent']}",
    'todo_pending': f"{CITY_LIGHTS_COLORS['primary']}",
    'todo_completed': f"{CITY_LIGHTS_COLORS['success']}",
    'header': f"{CITY_LIGHTS_COLORS['text_bright']} bold",
    'border': f"{CITY_LIGHTS_COLORS['surface_light']}",
})

TABLE_BOXES = {
    'rounded': box.ROUNDED,
    'simple': box.SIMPLE,
    'ascii': box.ASCII,
    'square': box.SQUARE,
}


def get_themed_console(no_color: bool = False, stderr: bool = False) -> Console:
    """Get a console using the todosh theme."""
    return Console(theme=TODOSH_THEME, no_color=no_color, stderr=stderr, highlight=False)


def get_status_style(todo: Todo) -> str:
    return f'todo_{todo.status}'


def build_todo_table(todos: List[Todo], table_style: str = 'rounded') -> Table:
    """Build a table with one row per todo, in the given order."""
    table_box = TABLE_BOXES.get(table_style)
    if table_box is None:
        logger.warning("Unknown table style %r, using 'rounded'", table_style)
        table_box = box.ROUNDED

    table = Table(box=table_box, header_style='header', border_style='border')
    table.add_column("ID", style='muted', justify="right", no_wrap=True)
    table.add_column("TASK", style='default')
    table.add_column("COMPLETED", justify="center", no_wrap=True)

    for todo in todos:
        status_style = get_status_style(todo)
        table.add_row(
            Text(todo.id),
            Text(todo.task),
            f"[{status_style}]{str(todo.completed).lower()}[/{status_style}]",
        )

    return table


def render_todos(console: Console, todos: List[Todo], table_style: str = 'rounded') -> None:
    """Print the todo collection as a table."""
    if not todos:
        console.print("[muted]No todos found.[/muted]")
        return

    console.print(build_todo_table(todos, table_style=table_style))
