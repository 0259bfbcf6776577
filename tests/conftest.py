from datetime import datetime, timedelta, timezone

import pytest

from todos.adapters.memory.task_repo import InMemoryTaskRepository
from todos.services.task_store import TaskStore


class FakeIdProvider:
    def __init__(self):
        self.counter = 0
    def new_id(self) -> str:
        self.counter += 1
        return f"id-{self.counter}"

class FakeClock:
    def __init__(self, fixed: datetime | None = None):
        # jeśli nie podamy fixed, zwróci zawsze ten sam „teraz”
        self.fixed = fixed or datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
    def now(self) -> datetime:
        return self.fixed
    def advance(self, seconds: int) -> None:
        self.fixed = self.fixed + timedelta(seconds=seconds)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock) -> TaskStore:
    """Pusty store z deterministycznym ID i czasem."""
    return TaskStore(InMemoryTaskRepository(), FakeIdProvider(), clock)
