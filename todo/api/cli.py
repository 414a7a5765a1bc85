from todo.domain.errors import TaskNotFoundError, TaskValidationError, DomainError
from todo.domain.task import Task
from todo.domain.todo_list import TodoList
from todo.config import Settings, load_settings
from todo.logging_setup import setup_logging
from typer import BadParameter, Option, Typer
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape
from pathlib import Path
from typing import Iterable, Optional
import logging
import sys

logger = logging.getLogger(__name__)


### COMMENTS
# ==========================================================
# CLI (Typer + Rich): user interface over an in-memory TodoList.
# ==========================================================
# Role:
# - `demo` runs a scripted walk-through, `shell` reads commands from stdin.
# - Renders tasks as Rich tables and panels.
# - Catches DomainError and prints a friendly panel; the shell keeps going.
#
# Rules:
# - Zero list logic here: delegate to TodoList.
# - One list per process; nothing survives the process.
# - Ids shown in the "#" column are positions in the full list, the same ids
#   `done` and `rm` accept.


app = Typer(help="In-memory todo list")
console = Console()

settings: Settings = Settings()

HELP_TEXT = (
    "add <text>      append a task (alias: append)\n"
    "prepend <text>  insert a task at the top\n"
    "done <id>       mark task <id> as completed\n"
    "rm <id>         remove task <id>\n"
    "list            show every task\n"
    "complete        show completed tasks, oldest completion first\n"
    "incomplete      show open tasks, oldest first\n"
    "help            show this help\n"
    "quit            leave the shell (alias: exit)"
)


@app.callback()
def main(
    log_level: Optional[str] = Option(
        None,
        "--log-level",
        "-l",
        help="Console log level (default: TODO_LOG_LEVEL or WARNING)",
    ),
    log_file: Optional[Path] = Option(
        None,
        "--log-file",
        help="Also write DEBUG logs to this file (default: TODO_LOG_FILE)",
    ),
) -> None:
    """Load settings and configure logging once per process."""
    global settings
    settings = load_settings()
    level = (log_level or settings.log_level).upper()
    if level not in logging.getLevelNamesMapping():
        raise BadParameter(f"unknown log level: {log_level}", param_hint="--log-level")
    setup_logging(
        level=level,
        log_file=log_file or settings.log_file,
    )


def fmt_dt(value) -> str:
    if value is None:
        return "-"
    return value.strftime(settings.date_format)


def color_status(task: Task) -> str:
    """Returns the status in Rich markup with a colour."""
    if task.is_complete():
        return "[green]Done[/]"
    return "[red]Open[/]"


def render_list(todo: TodoList, items: Iterable[Task], title: str) -> None:
    """Renders a Rich table with columns: #, Description, Created, Completed, Status."""

    positions = {id(t): i for i, t in enumerate(todo.tasks, start=1)}

    table = Table(title=title, show_lines=True, header_style="bold")
    table.add_column("#", no_wrap=True, style="cyan")
    table.add_column("Description")
    table.add_column("Created", no_wrap=True, style="dim")
    table.add_column("Completed", no_wrap=True, style="dim")
    table.add_column("Status", no_wrap=True)

    count = 0
    for t in items:
        count += 1
        table.add_row(
            str(positions[id(t)]),
            escape(t.description),
            fmt_dt(t.created_at),
            fmt_dt(t.completed_at),
            color_status(t),
        )

    console.print(table)
    console.print(f"[dim]Shown: {count} • Total: {len(todo)}[/dim]")


def error_panel(e: DomainError) -> None:
    match e:
        case TaskNotFoundError():
            console.print(Panel.fit(
                f"❌ {escape(str(e))}\n[dim]Use 'list' to find a valid id[/]",
                title="Not found",
                border_style="red",
            ))
        case TaskValidationError():
            console.print(Panel.fit(
                f"❌ {escape(str(e))}\n[dim]Hint: done 2, rm 1[/]",
                title="Validation error",
                border_style="red",
            ))
        case _:
            console.print(Panel.fit(
                f"❌ {escape(str(e))}",
                title="Domain error",
                border_style="red",
            ))


def parse_task_id(raw: str) -> int:
    """Turns shell input into a task id; anything but a plain integer is a validation error."""
    try:
        return int(raw.strip())
    except ValueError:
        raise TaskValidationError("task_id", f"expected an integer, got {raw.strip()!r}") from None


def run_command(todo: TodoList, line: str) -> bool:
    """
    Executes one shell line against `todo`.

    :return: False when the shell should stop, True otherwise.
    """
    cmd, _, arg = line.strip().partition(" ")
    cmd = cmd.lower()
    arg = arg.strip()

    if not cmd:
        return True

    try:
        match cmd:
            case "add" | "append" | "prepend":
                if not arg:
                    raise TaskValidationError("description", f"usage: {cmd} <text>")
                if cmd == "prepend":
                    task = todo.prepend(arg)
                    position = 1
                else:
                    task = todo.append(arg)
                    position = len(todo)
                console.print(Panel.fit(
                    f"✅ Task added\n[cyan]#:[/cyan] {position}\n[dim]Description:[/dim] {escape(task.description)}",
                    title="Success",
                    border_style="green",
                ))
            case "done":
                task_id = parse_task_id(arg)
                task = todo.complete(task_id)
                console.print(Panel.fit(
                    f"✅ Completed #{task_id}\n[dim]Description:[/dim] {escape(task.description)}\n"
                    f"Status: {color_status(task)}",
                    title="Success",
                    border_style="green",
                ))
            case "rm":
                task_id = parse_task_id(arg)
                task = todo.remove(task_id)
                console.print(Panel.fit(
                    f"🟡 Task removed\n#: {task_id}\n[dim]{escape(task.description)}[/]",
                    title="Removed",
                    border_style="yellow",
                ))
            case "list":
                render_list(todo, todo.tasks, "All tasks")
            case "complete":
                render_list(todo, todo.complete_tasks(), "Completed tasks")
            case "incomplete":
                render_list(todo, todo.incomplete_tasks(), "Open tasks")
            case "help":
                console.print(Panel.fit(HELP_TEXT, title="Commands", border_style="cyan"))
            case "quit" | "exit":
                return False
            case _:
                console.print(f"[red]Unknown command:[/] {escape(cmd)} [dim](try 'help')[/]")
    except DomainError as e:
        logger.info("Command %r failed: %s", line.strip(), e)
        error_panel(e)
    return True


@app.command("shell")
def shell() -> None:
    """
    Interactive session over a single in-memory list.

    Reads one command per line from stdin until 'quit' or end of input.
    """
    todo = TodoList()
    console.print("[dim]Type 'help' for commands, 'quit' to leave.[/]")
    for line in sys.stdin:
        if not run_command(todo, line):
            break
    console.print(f"[dim]Bye. {len(todo)} task(s) discarded.[/]")


@app.command("demo")
def demo() -> None:
    """
    Scripted walk-through on a fresh in-memory list.

    - Appends three tasks and prepends one.
    - Completes two of them.
    - Removes one.
    - Shows the list, completed and open views after the changes.
    """
    todo = TodoList()

    console.print(Panel.fit("🚀 Demo start", border_style="cyan"))

    # 1. create
    todo.append("Buy milk")
    todo.append("Walk the dog")
    todo.append("Read a book")
    todo.prepend("Call mom")
    console.print(Panel.fit(f"✅ Created {len(todo)} tasks", border_style="green"))
    render_list(todo, todo.tasks, "After creating")

    # 2. complete: ids are positions, "Call mom" is #1 after the prepend
    todo.complete(2)
    todo.complete(1)
    console.print(Panel.fit("✔️ Completed #2 (Buy milk) and #1 (Call mom)", border_style="yellow"))

    # 3. remove
    removed = todo.remove(4)
    console.print(Panel.fit(f"🗑️ Removed #4 ({escape(removed.description)})", border_style="red"))

    # 4. views
    render_list(todo, todo.tasks, "All tasks")
    render_list(todo, todo.complete_tasks(), "Completed tasks")
    render_list(todo, todo.incomplete_tasks(), "Open tasks")

    # 5. out of range id
    try:
        todo.complete(99)
    except TaskNotFoundError as e:
        error_panel(e)

    console.print(Panel.fit("🏁 Demo finished", border_style="cyan"))


if __name__ == "__main__":
    app()
