from rich.console import Console
from rich.columns import Columns
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from todos.api.colors import TaskColor
from todos.domain.enums import TaskFilter
from todos.domain.task import Task, TaskCounts


### COMMENTS
# ==========================================================
# Renderowanie (Rich): odpowiednik ekranów listy zadań.
# ==========================================================
# - Wiersz statystyk (Active / Completed / Total).
# - Zakładki filtrów z podświetlonym wybranym.
# - Tabela zadań albo "pusty stan" zależny od filtra.
# - Zero logiki biznesowej: dostaje gotowe listy i liczniki z TaskStore.


console = Console()

EMPTY_STATES: dict[TaskFilter, tuple[str, str]] = {
    TaskFilter.ALL: ("No todos yet", "Use 'add <title>' to add your first todo"),
    TaskFilter.ACTIVE: ("No active todos", "Try switching to a different filter"),
    TaskFilter.COMPLETED: ("No completed todos", "Try switching to a different filter"),
}


def short_id(task_id: str, n: int = 8) -> str:
    """Zwraca skróconą wersję UUID do wyświetlenia (pierwsze 8 znaków)."""
    return task_id[:n]


def check_mark(task: Task) -> str:
    if task.completed:
        return f"{TaskColor.DONE}✔{TaskColor.RESET}"
    return f"{TaskColor.ACTIVE}○{TaskColor.RESET}"


def render_stats(counts: TaskCounts) -> None:
    cards = [
        Panel.fit(f"[bold]{counts.active}[/bold]\nActive", border_style="yellow"),
        Panel.fit(f"[bold]{counts.completed}[/bold]\nCompleted", border_style="green"),
        Panel.fit(f"[bold]{counts.total}[/bold]\nTotal", border_style="cyan"),
    ]
    console.print(Columns(cards))


def render_filters(selected: TaskFilter) -> None:
    tabs = []
    for f in TaskFilter:
        label = f.value.capitalize()
        if f is selected:
            tabs.append(f"{TaskColor.SELECTED} {label} {TaskColor.RESET}")
        else:
            tabs.append(f"{TaskColor.DIM} {label} {TaskColor.RESET}")

    console.print("  ".join(tabs))


def render_list(items: list[Task], selected: TaskFilter) -> None:
    """Tabela z kolumnami: ID, ✔, Title, Description, Created; albo pusty stan."""
    if not items:
        title, hint = EMPTY_STATES[selected]
        console.print(Panel.fit(
            f"{title}\n[dim]{hint}[/dim]",
            border_style="dim",
        ))
        return

    table = Table(show_lines=True, header_style="bold")
    table.add_column("ID", no_wrap=True, style="cyan")
    table.add_column("", no_wrap=True)
    table.add_column("Title")
    table.add_column("Description", style="dim")
    table.add_column("Created", no_wrap=True, style="dim")

    for t in items:
        title = escape(t.title)
        if t.completed:
            title = f"[strike]{title}[/strike]"
        table.add_row(
            short_id(t.task_id),
            check_mark(t),
            title,
            escape(t.description or ""),
            t.created_at.strftime("%Y-%m-%d %H:%M"),
        )
    console.print(table)


def render_board(items: list[Task], counts: TaskCounts, selected: TaskFilter) -> None:
    """Cały "ekran": statystyki, filtry, lista."""
    render_stats(counts)
    render_filters(selected)
    render_list(items, selected)


def render_task(task: Task) -> None:
    lines = [
        f"ID: {task.task_id}",
        f"Title: {escape(task.title)}",
        f"Description: {escape(task.description) if task.description else '[dim]none[/]'}",
        f"Created: {task.created_at.isoformat()}",
        f"Status: {'completed' if task.completed else 'active'}",
    ]
    console.print(Panel.fit("\n".join(lines), title="Task details", border_style="cyan"))


def render_error(message: str, title: str = "Error", hint: str | None = None) -> None:
    body = f"❌ {escape(message)}"
    if hint:
        body += f"\n[dim]{hint}[/dim]"
    console.print(Panel.fit(body, title=title, border_style="red"))
