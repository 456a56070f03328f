"""Command-line interface for todosh."""

import logging
import sys
from contextlib import contextmanager
from dataclasses import replace
from pathlib import Path

import click
from rich.markup import escape

from .. import __version__
from ..config import Config, ConfigModel, get_config
from ..errors import TodoError, UsageError
from ..handlers import (
    clean_task,
    complete_todo,
    create_todo,
    delete_todo,
    list_todos,
    update_todo,
)
from ..storage import CsvStore, get_store as build_store
from ..theme import get_themed_console, render_todos


logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_log_level(level: str = "WARNING", verbose: bool = False) -> int:
    """Map a level name to a logging level, falling back to WARNING."""
    if verbose:
        return logging.DEBUG
    numeric = logging.getLevelName(str(level).upper())
    if not isinstance(numeric, int):
        logger.warning("Unknown log level %r, using WARNING", level)
        return logging.WARNING
    return numeric


def configure_logging(level: str = "WARNING", verbose: bool = False) -> None:
    """Send log records to stderr at the configured level."""
    logging.basicConfig(
        level=resolve_log_level(level, verbose),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def get_console(ctx: click.Context, stderr: bool = False):
    """Get a themed console that reflects current configuration."""
    config: ConfigModel = ctx.obj['config']
    return get_themed_console(no_color=config.no_color, stderr=stderr)


def get_store(ctx: click.Context) -> CsvStore:
    """Get the store for the database path chosen on the command line or in config."""
    db_path = ctx.obj.get('db_path') or ctx.obj['config'].database_path
    return build_store(db_path)


def validate_task(ctx, param, value):
    """Reject empty task text while arguments are parsed."""
    try:
        return clean_task(value)
    except UsageError as e:
        raise click.BadParameter(e.message, ctx=ctx, param=param)


@contextmanager
def report_errors(ctx: click.Context):
    """Report todosh errors on stderr and exit non-zero."""
    try:
        yield
    except UsageError as e:
        raise click.UsageError(e.message, ctx=ctx)
    except TodoError as e:
        logger.debug("Command %s failed", ctx.info_name, exc_info=True)
        get_console(ctx, stderr=True).print(f"[error]❌ Error: {escape(str(e))}[/error]", soft_wrap=True)
        sys.exit(1)


@click.group(invoke_without_command=True)
@click.option("--db", "db_path", type=click.Path(dir_okay=False), help="Path to the CSV database")
@click.option("--config", "config_path", type=click.Path(dir_okay=False), help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.version_option(__version__, prog_name="todosh")
@click.pass_context
def main(ctx, db_path, config_path, verbose):
    """todosh - Terminal based todo list app."""
    if ctx.invoked_subcommand is None:
        raise click.UsageError("Missing command.", ctx=ctx)

    ctx.ensure_object(dict)
    ctx.obj['db_path'] = db_path

    if config_path:
        config = Config.reload(Path(config_path))
    else:
        config = get_config()
    ctx.obj['config'] = config

    configure_logging(config.log_level, verbose)
    logger.debug("Using database %s", db_path or config.database_path)


@main.command("list")
@click.option("--pending", is_flag=True, help="Hide completed todos")
@click.pass_context
def list_command(ctx, pending):
    """List all todos in file order."""
    config = ctx.obj['config']
    with report_errors(ctx):
        todos = get_store(ctx).load()
        visible = list_todos(todos, show_completed=config.show_completed and not pending)
    render_todos(get_console(ctx), visible, table_style=config.table_style)


@main.command()
@click.argument("task", callback=validate_task)
@click.pass_context
def create(ctx, task):
    """Create a new todo.

    Example:
      todosh create "Take out trash"
    """
    with report_errors(ctx):
        store = get_store(ctx)
        todos = store.load()
        todo = create_todo(store, todos, task)
    get_console(ctx).print(f"[success]✅ Created task {escape(todo.id)}:[/success] {escape(todo.task)}")


@main.command()
@click.argument("todo_id")
@click.pass_context
def complete(ctx, todo_id):
    """Mark a todo as completed."""
    with report_errors(ctx):
        store = get_store(ctx)
        todos = store.load()
        todo = complete_todo(store, todos, todo_id)
    get_console(ctx).print(f"[success]✅ Completed task {escape(todo.id)}[/success]")


@main.command()
@click.argument("todo_id")
@click.argument("task", callback=validate_task)
@click.pass_context
def update(ctx, todo_id, task):
    """Replace the text of a todo."""
    with report_errors(ctx):
        store = get_store(ctx)
        todos = store.load()
        todo = update_todo(store, todos, todo_id, task)
    get_console(ctx).print(f"[success]✅ Updated task {escape(todo.id)}[/success]")


@main.command()
@click.argument("todo_id")
@click.pass_context
def delete(ctx, todo_id):
    """Delete a todo."""
    with report_errors(ctx):
        store = get_store(ctx)
        todos = store.load()
        todo = delete_todo(store, todos, todo_id)
    get_console(ctx).print(f"[success]🗑️  Deleted task {escape(todo.id)}[/success]")


@main.command()
@click.option("--force", is_flag=True, help="Overwrite an existing database")
@click.pass_context
def init(ctx, force):
    """Create an empty todo database."""
    with report_errors(ctx):
        store = get_store(ctx)
        store.initialize(force=force)
    get_console(ctx).print(f"[success]✅ Initialized database at {escape(str(store.path))}[/success]")


@main.command("config")
@click.pass_context
def show_config(ctx):
    """Show the effective configuration as YAML."""
    config = ctx.obj['config']
    if ctx.obj.get('db_path'):
        config = replace(config, database_path=ctx.obj['db_path'])
    click.echo(config.to_yaml(), nl=False)
