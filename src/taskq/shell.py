"""Interactive shell driving a single TaskEngine.

The shell owns everything the engine does not: reading and validating raw
input, rendering results, and deciding when the session ends.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from taskq.config import TaskqConfig
from taskq.engine import TaskEngine
from taskq.models import Task

logger = logging.getLogger(__name__)

COMMAND_HELP: dict[str, str] = {
    "add": "Add a task (prompts for title, priority, category)",
    "remove [ID]": "Remove a task by id",
    "done [ID]": "Mark a task as completed",
    "undo": "Undo the last add, remove or completion",
    "list [CATEGORY]": "List tasks, optionally for one category",
    "top": "Show the highest priority task",
    "help": "Show this help",
    "exit": "Leave the shell",
}


def parse_task_id(raw: str) -> int | None:
    """Parse user text as a task id, or None if it is not an integer."""
    try:
        return int(raw.strip())
    except ValueError:
        return None


def render_tasks(tasks: list[Task], title: str = "Tasks") -> Table:
    """Build a table of task views."""
    table = Table(title=title, show_header=True)
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Title", style="white")
    table.add_column("Priority", justify="right")
    table.add_column("Category", style="magenta")
    table.add_column("Done", justify="center")

    for task in tasks:
        done_icon = "[green]✓[/green]" if task.completed else "[dim]·[/dim]"
        table.add_row(
            str(task.id),
            escape(task.title),
            str(task.priority),
            escape(task.category) or "[dim]-[/dim]",
            done_icon,
        )

    return table


class TaskShell:
    """Read-eval-print loop over one engine.

    Commands are read with `click.prompt`, so the shell can be scripted by
    feeding lines on stdin. End of input ends the session.
    """

    def __init__(
        self,
        engine: TaskEngine | None = None,
        config: TaskqConfig | None = None,
        console: Console | None = None,
    ) -> None:
        self.config = config or TaskqConfig()
        self.engine = engine if engine is not None else TaskEngine.from_config(self.config)
        self.console = console or Console()
        self._commands: dict[str, Callable[[list[str]], bool]] = {
            "add": self.cmd_add,
            "remove": self.cmd_remove,
            "done": self.cmd_done,
            "undo": self.cmd_undo,
            "list": self.cmd_list,
            "top": self.cmd_top,
            "help": self.cmd_help,
            "exit": self.cmd_exit,
            "quit": self.cmd_exit,
        }

    def run(self) -> None:
        """Run until `exit` or end of input."""
        self.console.print("[bold]taskq[/bold] - type [cyan]help[/cyan] for commands")

        while True:
            # Commands prompt too, so end of input can surface inside handle().
            try:
                line = click.prompt("taskq", default="", show_default=False, prompt_suffix="> ")
                if not self.handle(line):
                    break
            except click.Abort:
                break

        logger.debug("Shell session ended with %d task(s)", len(self.engine))

    def handle(self, line: str) -> bool:
        """Dispatch one input line. Returns False when the session should end."""
        parts = line.split()
        if not parts:
            return True

        name, args = parts[0].lower(), parts[1:]
        command = self._commands.get(name)
        if command is None:
            self.console.print(
                f"[yellow]Unknown command:[/yellow] {escape(name)}. "
                "Type [cyan]help[/cyan] for commands."
            )
            return True

        return command(args)

    def cmd_add(self, args: list[str]) -> bool:
        bounds = self.config.priority

        title = click.prompt("Title", default="", show_default=False).strip()
        if not title:
            self.console.print("[red]Title cannot be empty![/red]")
            return True

        priority = click.prompt(
            "Priority",
            type=click.IntRange(bounds.minimum, bounds.maximum),
            default=bounds.default,
        )
        category = click.prompt("Category", default="", show_default=False).strip()

        task_id = self.engine.add_task(title, priority, category)
        self.console.print(
            f"[green]Task added:[/green] #{task_id} {escape(title)} [dim](priority {priority})[/dim]"
        )
        return True

    def cmd_remove(self, args: list[str]) -> bool:
        task_id = self._read_task_id(args, "Task ID to remove")
        if task_id is None:
            return True

        if self.engine.remove_task(task_id):
            self.console.print(f"[green]Task removed:[/green] #{task_id}")
        else:
            self.console.print(f"[red]Task not found![/red] #{task_id}")
        return True

    def cmd_done(self, args: list[str]) -> bool:
        task_id = self._read_task_id(args, "Task ID to complete")
        if task_id is None:
            return True

        if self.engine.complete_task(task_id):
            self.console.print(f"[green]Task completed:[/green] #{task_id}")
        else:
            self.console.print(f"[red]Task not found![/red] #{task_id}")
        return True

    def cmd_undo(self, args: list[str]) -> bool:
        self.console.print(self.engine.undo_message())
        return True

    def cmd_list(self, args: list[str]) -> bool:
        category = " ".join(args).strip()
        tasks = self.engine.get_tasks_by_category(category)

        if not self.config.display.show_completed:
            tasks = [t for t in tasks if not t.completed]
        if self.config.display.order == "priority":
            tasks = sorted(tasks, key=lambda t: t.sort_key)

        if not tasks:
            self.console.print("[dim]No tasks found.[/dim]")
            return True

        title = f"Tasks in {category}" if category else "All tasks"
        self.console.print(render_tasks(tasks, title=escape(title)))
        return True

    def cmd_top(self, args: list[str]) -> bool:
        task = self.engine.get_highest_priority_task()
        if task is None:
            self.console.print("[dim]No tasks.[/dim]")
        else:
            self.console.print(f"[bold]Top priority:[/bold] {escape(str(task))}")
        return True

    def cmd_help(self, args: list[str]) -> bool:
        table = Table(title="Commands", show_header=True)
        table.add_column("Command", style="cyan")
        table.add_column("Description", style="white")
        for usage, description in COMMAND_HELP.items():
            table.add_row(escape(usage), description)
        self.console.print(table)
        return True

    def cmd_exit(self, args: list[str]) -> bool:
        return False

    def _read_task_id(self, args: list[str], prompt: str) -> int | None:
        """Take an id from args or prompt for one; report malformed input."""
        if len(args) > 1:
            self.console.print(f"[red]Invalid task ID![/red] {escape(' '.join(args))}")
            return None

        raw = args[0] if args else click.prompt(prompt, default="", show_default=False)
        if not raw.strip():
            return None

        task_id = parse_task_id(raw)
        if task_id is None:
            self.console.print(f"[red]Invalid task ID![/red] {escape(raw.strip())}")
        return task_id
