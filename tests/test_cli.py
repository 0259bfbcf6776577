import pytest
from typer.testing import CliRunner

from todos.api.cli import app
from todos.api.shell import ShellSession
from todos.domain.enums import TaskFilter
from todos.services.task_store import new_session_store

from conftest import FakeClock, FakeIdProvider

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("TODOS_LOG_LEVEL", "TODOS_LOG_FILE", "TODOS_SEED_WELCOME"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def session():
    return ShellSession(new_session_store(id_provider=FakeIdProvider(), clock=FakeClock()))


def test_list_shows_welcome_task():
    result = runner.invoke(app, ["list"])

    assert result.exit_code == 0
    assert "Welcome" in result.output
    assert "Active" in result.output


def test_list_completed_shows_empty_state():
    result = runner.invoke(app, ["list", "--filter", "completed"])

    assert result.exit_code == 0
    assert "No completed todos" in result.output


def test_list_without_seed_shows_empty_state(monkeypatch):
    monkeypatch.setenv("TODOS_SEED_WELCOME", "false")
    result = runner.invoke(app, ["list"])

    assert result.exit_code == 0
    assert "No todos yet" in result.output


def test_demo_runs_scenario():
    result = runner.invoke(app, ["demo"])

    assert result.exit_code == 0
    assert "Buy milk" in result.output
    assert "Demo finished" in result.output


def test_shell_session_over_stdin():
    result = runner.invoke(app, ["shell"], input="add Buy milk :: 2 liters\nstats\nquit\n")

    assert result.exit_code == 0
    assert "Added" in result.output
    assert "Buy milk" in result.output
    assert "Bye" in result.output


def test_shell_ends_on_eof():
    result = runner.invoke(app, ["shell"], input="list\n")

    assert result.exit_code == 0
    assert "Bye" in result.output


def test_session_add_toggle_rm(session):
    assert session.handle("add Buy milk :: 2 liters") is True
    milk = session.store.list_all()[0]
    assert (milk.title, milk.description) == ("Buy milk", "2 liters")

    session.handle(f"toggle {milk.task_id}")
    assert session.store.counts().as_dict() == {"active": 1, "completed": 1, "total": 2}

    welcome = session.store.list_all()[1]
    session.handle(f"rm {welcome.task_id}")
    assert [t.title for t in session.store.list_all()] == ["Buy milk"]


def test_session_rejects_blank_add(session, capsys):
    session.handle("add    ")

    assert session.store.counts().total == 1
    assert "Validation error" in capsys.readouterr().out


def test_session_unknown_id_and_command_do_not_raise(session, capsys):
    assert session.handle("toggle does-not-exist") is True
    assert session.handle("rm does-not-exist") is True
    assert session.handle("frobnicate") is True

    out = capsys.readouterr().out
    assert "Not found" in out
    assert "Unknown command" in out
    assert session.store.counts().total == 1


def test_session_filter_switch(session, capsys):
    session.handle("filter completed")
    assert session.selected is TaskFilter.COMPLETED
    assert "No completed todos" in capsys.readouterr().out

    session.handle("filter nope")
    assert session.selected is TaskFilter.COMPLETED
    assert "Validation error" in capsys.readouterr().out


def test_session_quit(session):
    assert session.handle("quit") is False


def test_stats_counts_seeded_session():
    result = runner.invoke(app, ["stats"])

    assert result.exit_code == 0
    assert "Completed" in result.output
    assert "Total" in result.output
