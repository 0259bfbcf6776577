import pytest
from dataclasses import replace
from datetime import datetime, timezone
from todos.adapters.memory.task_repo import InMemoryTaskRepository
from todos.domain.task import Task, TaskId
from todos.domain.errors import TaskNotFoundError, TaskAlreadyExistsError


@pytest.fixture
def repo():
    """Świeże, puste repozytorium."""
    return InMemoryTaskRepository()


def make_task(task_id: str, title: str = "Test") -> Task:
    return Task(
        task_id=TaskId(task_id),
        title=title,
        description="desc",
        created_at=datetime.now(timezone.utc),
    )


def test_add_and_get(repo):
    task = make_task("id-1")
    repo.add(task)

    fetched = repo.get(TaskId("id-1"))
    assert fetched == task
    assert repo.get(TaskId("nope")) is None


def test_add_inserts_at_front(repo):
    repo.add(make_task("t1", "A"))
    repo.add(make_task("t2", "B"))
    repo.add(make_task("t3", "C"))

    assert [t.task_id for t in repo.list_all()] == ["t3", "t2", "t1"]


def test_add_duplicate_raises(repo):
    task = make_task("dup-1")
    repo.add(task)
    with pytest.raises(TaskAlreadyExistsError):
        repo.add(task)
    assert repo.count_all() == 1


def test_update_replaces_in_place(repo):
    for i in range(3):
        repo.add(make_task(f"t{i}"))

    repo.update(replace(repo.get(TaskId("t1")), completed=True))

    assert [t.task_id for t in repo.list_all()] == ["t2", "t1", "t0"]
    assert repo.get(TaskId("t1")).completed is True


def test_update_missing_raises(repo):
    with pytest.raises(TaskNotFoundError):
        repo.update(make_task("ghost"))


def test_remove_keeps_relative_order(repo):
    for i in range(4):
        repo.add(make_task(f"t{i}"))

    repo.remove(TaskId("t2"))

    assert [t.task_id for t in repo.list_all()] == ["t3", "t1", "t0"]
    assert not repo.exists(TaskId("t2"))
    with pytest.raises(TaskNotFoundError):
        repo.remove(TaskId("t2"))


def test_list_all_returns_copy(repo):
    repo.add(make_task("t1"))
    repo.list_all().clear()
    assert repo.count_all() == 1


def test_initial_tasks_keep_given_order():
    repo = InMemoryTaskRepository([make_task("a", "first"), make_task("b"), make_task("a", "last wins")])

    assert [t.task_id for t in repo.list_all()] == ["a", "b"]
    assert repo.get(TaskId("a")).title == "last wins"


def test_exists(repo):
    repo.add(make_task("ex-1"))
    assert repo.exists(TaskId("ex-1"))
    assert not repo.exists(TaskId("nope"))
