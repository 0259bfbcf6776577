import logging
from dataclasses import replace
from typing import Optional

from rich.markup import escape
from rich.panel import Panel
from typer import Context, Option, Typer

from todos.api.render import console, render_board, render_stats, short_id
from todos.api.shell import ShellSession
from todos.config import LOG_LEVELS, load_settings
from todos.domain.enums import TaskFilter
from todos.logging_setup import setup_logging
from todos.services.task_store import TaskStore, new_session_store


### COMMENTS
# ==========================================================
# CLI (Typer + Rich): interfejs użytkownika dla listy zadań.
# ==========================================================
# Rola:
# - Bootstrap: ustawienia → logowanie → jeden TaskStore na proces.
# - Store jest jawnie przekazywany przez `ctx.obj` (żadnego globalnego stanu).
# - Komendy tylko wywołują TaskStore i renderują wynik.
#
# Store żyje tyle co proces: `list`/`stats` pokazują świeżą sesję,
# pełną pracę z listą daje `shell`.

logger = logging.getLogger(__name__)

app = Typer(help="Todos: a single-session task list", no_args_is_help=True)


@app.callback()
def main(
    ctx: Context,
    log_level: Optional[str] = Option(
        None,
        "--log-level",
        "-l",
        help=f"One of: {', '.join(LOG_LEVELS)} (default from TODOS_LOG_LEVEL)",
    ),
) -> None:
    """Bootstrap zależności na starcie procesu CLI."""
    settings = load_settings()
    if log_level and log_level.upper() in LOG_LEVELS:
        settings = replace(settings, log_level=log_level.upper())
    setup_logging(level=settings.log_level, log_file=settings.log_file)
    ctx.obj = new_session_store(settings)
    logger.debug("settings: %s", settings)


@app.command("list")
def list_cmd(
    ctx: Context,
    status: TaskFilter = Option(TaskFilter.ALL, "--filter", "-f", case_sensitive=False),
) -> None:
    """Pokazuje statystyki i listę zadań przefiltrowaną po statusie."""
    store: TaskStore = ctx.obj
    render_board(store.list_filtered(status), store.counts(), status)


@app.command("stats")
def stats(ctx: Context) -> None:
    """Active / Completed / Total."""
    store: TaskStore = ctx.obj
    render_stats(store.counts())


@app.command("shell")
def shell(ctx: Context) -> None:
    """Interaktywna sesja: add / toggle / rm / filter / list / stats."""
    ShellSession(ctx.obj).run()


@app.command("demo")
def demo(ctx: Context) -> None:
    """
    Pokazowy przebieg w jednym procesie.

    - Start: jedno zadanie powitalne.
    - Dodaje "Buy milk" (trafia na górę listy).
    - Oznacza je jako zrobione.
    - Usuwa zadanie powitalne.
    """
    store: TaskStore = ctx.obj

    console.print(Panel.fit("🚀 Demo start", border_style="cyan"))
    render_board(store.list_all(), store.counts(), TaskFilter.ALL)

    milk = store.add("Buy milk")
    console.print(Panel.fit(f"✅ Added: {short_id(milk.task_id)} ({escape(milk.title)})", border_style="green"))
    render_board(store.list_all(), store.counts(), TaskFilter.ALL)

    store.toggle_completion(milk.task_id)
    console.print(Panel.fit(f"✔️ Completed: {short_id(milk.task_id)} ({escape(milk.title)})", border_style="yellow"))
    render_board(store.list_filtered(TaskFilter.COMPLETED), store.counts(), TaskFilter.COMPLETED)

    for task in store.list_all():
        if task.task_id != milk.task_id:
            store.delete(task.task_id)
            console.print(Panel.fit(f"🗑️ Deleted: {short_id(task.task_id)} ({escape(task.title)})", border_style="red"))
    render_board(store.list_all(), store.counts(), TaskFilter.ALL)

    console.print(Panel.fit("🏁 Demo finished", border_style="cyan"))


if __name__ == "__main__":
    app()
