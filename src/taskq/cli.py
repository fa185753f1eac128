"""CLI interface for taskq."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from taskq import __version__
from taskq.config import CONFIG_FILE, TaskqConfig
from taskq.engine import TaskEngine
from taskq.logging_setup import setup_logging

console = Console()
logger = logging.getLogger(__name__)

# Raised by TaskqConfig.load for unreadable or invalid files
CONFIG_ERRORS = (ValidationError, json.JSONDecodeError, UnicodeDecodeError)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="taskq")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help=f"Config file (default: {CONFIG_FILE})",
)
@click.option("--verbose", "-v", is_flag=True, help="Log engine activity to stderr")
@click.pass_context
def main(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """taskq - prioritised task list with undo.

    \b
    Usage:
      taskq shell            # Interactive session
      taskq demo             # Walk through add, remove and undo
      taskq config show      # Show effective configuration
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path

    # Config commands must still run when the file itself is broken.
    if ctx.invoked_subcommand == "config":
        setup_logging("DEBUG" if verbose else logging.WARNING)
        return

    config = _load_config(ctx, config_path)
    ctx.obj["config"] = config

    try:
        setup_logging("DEBUG" if verbose else config.logging.level, log_file=config.logging.file)
    except OSError as e:
        console.print(f"[red]Cannot open log file:[/red] {escape(str(e))}")
        ctx.exit(1)
    logger.debug("Loaded configuration from %s", config_path or CONFIG_FILE)

    # If no subcommand, show help
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _load_config(ctx: click.Context, path: Path | None) -> TaskqConfig:
    """Load config, exiting with a readable error if the file is unusable."""
    try:
        return TaskqConfig.load(path)
    except CONFIG_ERRORS as e:
        console.print(f"[red]Invalid configuration:[/red] {escape(str(e))}")
        ctx.exit(1)


@main.command()
@click.pass_context
def shell(ctx: click.Context) -> None:
    """Start an interactive task session.

    Tasks live only for the length of the session.
    """
    from taskq.shell import TaskShell

    config: TaskqConfig = ctx.obj["config"]
    TaskShell(config=config, console=console).run()


@main.command()
@click.pass_context
def demo(ctx: click.Context) -> None:
    """Walk through adding, removing and undoing tasks."""
    config: TaskqConfig = ctx.obj["config"]
    engine = TaskEngine.from_config(config)

    console.print(Panel.fit("[bold]Demo[/bold]", title="taskq"))

    milk = engine.add_task("Buy milk", 3, "errand")
    console.print(f"  add 'Buy milk' (3, errand) -> #{milk}")
    rent = engine.add_task("Pay rent", 5, "finance")
    console.print(f"  add 'Pay rent' (5, finance) -> #{rent}")
    _print_top(engine)

    removed = engine.remove_task(rent)
    console.print(f"  remove #{rent} -> {removed}")
    _print_top(engine)

    console.print(f"  undo -> {engine.undo_message()}")
    _print_top(engine)


def _print_top(engine: TaskEngine) -> None:
    task = engine.get_highest_priority_task()
    label = f"#{task.id} {escape(task.title)}" if task else "none"
    console.print(f"  [cyan]top:[/cyan] {label}")


@main.group("config")
def config_group() -> None:
    """Inspect or create the configuration file."""
    pass


@config_group.command("show")
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Show the effective configuration."""
    config = _load_config(ctx, ctx.obj["config_path"])

    table = Table(title="Configuration", show_header=True)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="white")

    for section, values in config.model_dump().items():
        for key, value in values.items():
            table.add_row(f"{section}.{key}", escape(str(value)))

    console.print(table)


@config_group.command("init")
@click.option("--force", "-f", is_flag=True, help="Overwrite existing config")
@click.pass_context
def config_init(ctx: click.Context, force: bool) -> None:
    """Write the default configuration file."""
    path: Path = ctx.obj["config_path"] or CONFIG_FILE

    if path.exists() and not force:
        console.print(
            f"[yellow]Config already exists:[/yellow] {path}. Use --force to overwrite."
        )
        return

    TaskqConfig().save(path)
    console.print(f"[green]Configuration saved:[/green] {path}")
