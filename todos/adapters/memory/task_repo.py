from todos.domain.task import Task, TaskId
from todos.domain.errors import TaskAlreadyExistsError, TaskNotFoundError
from typing import Iterable, Optional

### COMMENTS
# ==========================================================
# Adapter pamięciowy dla repozytorium zadań (adapters/memory/task_repo.py).
# ==========================================================
# Jedyna implementacja portu `TaskRepository`: aplikacja nie ma trwałości.
#
# - Kolejność trzyma lista `_order` (najnowsze na indeksie 0),
#   a `_data: dict[TaskId, Task]` daje szybki dostęp po ID.
# - Wszystkie operacje działają w czasie życia obiektu (sesja procesu).
# - Zasady zgodne z kontraktem portu:
#     * `add`  → wstawia na początek, `TaskAlreadyExistsError` przy duplikacie,
#     * `update` → podmiana w miejscu, `TaskNotFoundError` gdy brak,
#     * `remove` → usuwa lub zgłasza `TaskNotFoundError`,
#     * `list_all` → kopia w kolejności `_order`.
# - Repozytorium nie jest thread-safe; serializacją zajmuje się TaskStore.



class InMemoryTaskRepository:
    """
        Uporządkowana kolekcja zadań w pamięci.

        :param initial: Iterable z obiektami Task do wstępnego załadowania,
        w podanej kolejności (pierwszy element = góra listy).
        Duplikaty task_id: ostatni wygrywa, pozycja pierwszego wystąpienia
        (to tylko seed, nie API).
    """
    def __init__(self, initial: Iterable[Task] | None = None) -> None:
        self._data: dict[TaskId, Task] = {}
        self._order: list[TaskId] = []
        for t in (initial or []):
            if t.task_id not in self._data:
                self._order.append(t.task_id)
            self._data[t.task_id] = t

    def add(self, task: Task) -> None:
        """
            Wstawia nowe zadanie na początek kolekcji.

            :param task: Obiekt domenowy Task do zapisania.
            :raises TaskAlreadyExistsError: Jeśli zadanie o tym samym `task_id`
            już istnieje w repozytorium.
        """
        if task.task_id in self._data:
            raise TaskAlreadyExistsError(task.task_id)
        self._data[task.task_id] = task
        self._order.insert(0, task.task_id)

    def get(self, task_id: TaskId) -> Optional[Task]:
        return self._data.get(task_id)

    def update(self, task: Task) -> None:
        """
            Podmienia rekord o danym `task_id`. Pozycja w `_order` się nie zmienia.

            :raises TaskNotFoundError: Gdy rekord z `task_id` nie istnieje.
        """
        if task.task_id not in self._data:
            raise TaskNotFoundError(task.task_id)
        self._data[task.task_id] = task

    def remove(self, task_id: TaskId) -> None:
        """
            Usuwa zadanie (hard delete). Względna kolejność pozostałych zostaje.

            :raises TaskNotFoundError: Jeśli nie istnieje wpis o podanym `task_id`.
        """
        if task_id not in self._data:
            raise TaskNotFoundError(task_id)
        del self._data[task_id]
        self._order.remove(task_id)

    def list_all(self) -> list[Task]:
        return [self._data[task_id] for task_id in self._order]

    def count_all(self) -> int:
        return len(self._order)

    def exists(self, task_id: TaskId) -> bool:
        return task_id in self._data
