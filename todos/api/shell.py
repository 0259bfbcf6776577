import logging

from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt

from todos.api.render import console, render_board, render_error, render_stats, render_task, short_id
from todos.domain.enums import TaskFilter
from todos.domain.errors import DomainError, TaskNotFoundError, TaskValidationError
from todos.services.task_store import TaskStore, validate_title

logger = logging.getLogger(__name__)

HELP = """\
[bold]add[/bold] <title> [:: description]   add a task (newest first)
[bold]toggle[/bold] <id>                    mark done / undo
[bold]rm[/bold] <id>                        delete a task
[bold]show[/bold] <id>                      task details
[bold]filter[/bold] all|active|completed    switch the list view
[bold]list[/bold]                           show the list
[bold]stats[/bold]                          Active / Completed / Total
[bold]help[/bold]                           this message
[bold]quit[/bold]                           end the session (tasks are not saved)"""

DESCRIPTION_SEPARATOR = "::"


class ShellSession:
    """
    Interaktywna sesja nad jednym TaskStore.

    Trzyma tylko stan prezentacji (wybrany filtr); dane zadań są w store.
    """
    def __init__(self, store: TaskStore) -> None:
        self.store = store
        self.selected = TaskFilter.ALL

    def show_board(self) -> None:
        render_board(self.store.list_filtered(self.selected), self.store.counts(), self.selected)

    def handle(self, line: str) -> bool:
        """Wykonuje jedną linię. Zwraca False, gdy sesja ma się zakończyć."""
        command, _, rest = line.strip().partition(" ")
        command = command.lower()
        rest = rest.strip()

        if not command:
            return True
        if command in {"quit", "exit", "q"}:
            return False

        handler = getattr(self, f"_cmd_{command}", None)
        if handler is None:
            render_error(f"Unknown command: {command}", hint="Type 'help' to see available commands")
            return True

        try:
            handler(rest)
        except TaskValidationError as e:
            render_error(str(e), title="Validation error")
        except TaskNotFoundError as e:
            render_error(str(e), title="Not found", hint="Use 'list' to find the right ID")
        except DomainError as e:
            render_error(str(e), title="Domain error")
        return True

    def run(self) -> None:
        self.show_board()
        console.print("[dim]Type 'help' for commands.[/dim]")
        while True:
            try:
                line = Prompt.ask("[bold cyan]todos[/bold cyan]", console=console, default="", show_default=False)
            except (EOFError, KeyboardInterrupt):
                console.print()
                break
            if not self.handle(line):
                break
        logger.debug("shell session ended, total=%s", self.store.counts().total)
        console.print("[dim]Bye. Tasks live only for this session.[/dim]")

    def _cmd_help(self, rest: str) -> None:
        console.print(Panel.fit(HELP, title="Commands", border_style="cyan"))

    def _cmd_add(self, rest: str) -> None:
        raw_title, _, raw_description = rest.partition(DESCRIPTION_SEPARATOR)
        title = validate_title(raw_title)
        task = self.store.add(title, raw_description or None)
        console.print(Panel.fit(
            f"✅ Added\n[cyan]ID:[/cyan] {short_id(task.task_id)}\n[dim]Title:[/dim] {escape(task.title)}"
            + (f"\n[dim]Description:[/dim] {escape(task.description)}" if task.description else ""),
            border_style="green",
        ))
        self.show_board()

    def _cmd_toggle(self, rest: str) -> None:
        task = self.store.toggle_completion(self.store.resolve_id(rest))
        if task is not None:
            state = "completed" if task.completed else "active"
            console.print(f"[green]✔[/green] {escape(task.title)} → {state}")
        self.show_board()

    def _cmd_rm(self, rest: str) -> None:
        task_id = self.store.resolve_id(rest)
        if self.store.delete(task_id):
            console.print(f"[yellow]🗑 Deleted {short_id(task_id)}[/yellow]")
        self.show_board()

    def _cmd_show(self, rest: str) -> None:
        render_task(self.store.get_task(self.store.resolve_id(rest)))

    def _cmd_filter(self, rest: str) -> None:
        try:
            self.selected = TaskFilter(rest.lower())
        except ValueError:
            raise TaskValidationError("filter", "use one of: all, active, completed") from None
        self.show_board()

    def _cmd_list(self, rest: str) -> None:
        self.show_board()

    def _cmd_stats(self, rest: str) -> None:
        render_stats(self.store.counts())
