from __future__ import annotations

import logging
import threading
from dataclasses import replace

from todos.adapters.memory.task_repo import InMemoryTaskRepository
from todos.adapters.system.clock_system import SystemClock
from todos.adapters.system.id_provider_uuid import UuidIdProvider
from todos.config import Settings
from todos.domain.enums import TaskFilter
from todos.domain.errors import TaskNotFoundError, TaskValidationError
from todos.domain.task import Task, TaskCounts, TaskId
from todos.ports.clock import Clock
from todos.ports.id_provider import IdProvider
from todos.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)

WELCOME_TITLE = "Welcome to your Todo App!"
WELCOME_DESCRIPTION = "Tap the + button to add your first todo"


### COMMENTS
# ==========================================================
# Warstwa serwisowa (services/task_store.py): rdzeń aplikacji.
# ==========================================================
# Rola:
# - Jedyny właściciel kolekcji zadań (przez port `TaskRepository`).
# - Mutacje: add / toggle_completion / delete.
# - Widoki pochodne: list_all / list_filtered / counts.
#
# Zasady:
# - Operacje synchroniczne, bez I/O; każda chroniona jednym RLock.
# - Pusty tytuł w add, nieznane ID w toggle/delete → no-op, nie wyjątek.
# - Modele są niemutowalne (`frozen=True`): zmiana = nowa instancja i `repo.update`.
# - Brak efektów ubocznych poza zmianą stanu (haptyka, animacje, render → UI).


def validate_title(title: str | None) -> str:
    """
        Walidacja po stronie wywołującego (UI), przed `TaskStore.add`.

        :return: Tytuł bez białych znaków na brzegach.
        :raises TaskValidationError: Gdy tytuł jest pusty lub same spacje.
    """
    cleaned = (title or "").strip()
    if not cleaned:
        raise TaskValidationError("title", "title cannot be empty")
    return cleaned


class TaskStore:
    """
    Kolekcja zadań jednej sesji wraz z jej operacjami.

    :param repo: Implementacja portu TaskRepository.
    :param id_provider: Źródło unikalnych identyfikatorów.
    :param clock: Źródło czasu dla `created_at`.
    """
    def __init__(self, repo: TaskRepository, id_provider: IdProvider, clock: Clock) -> None:
        self.repo = repo
        self.id_provider = id_provider
        self.clock = clock
        self._lock = threading.RLock()

    def add(self, title: str | None, description: str | None = None) -> Task | None:
        """
            Tworzy nowe zadanie i wstawia je na początek listy.

            - `title` po przycięciu nie może być pusty; w przeciwnym razie
              operacja jest odrzucana (zwraca `None`, stan bez zmian).
            - `description` przycięty; pusty → `None`.
            - `completed=False`, `created_at = clock.now()`.

            :return: Utworzony `Task` albo `None`, gdy tytuł odrzucono.
        """
        cleaned_title = (title or "").strip()
        if not cleaned_title:
            logger.info("add rejected: empty title")
            return None
        cleaned_description = (description or "").strip() or None

        with self._lock:
            task = Task(
                task_id=TaskId(self.id_provider.new_id()),
                title=cleaned_title,
                description=cleaned_description,
                created_at=self.clock.now(),
            )
            self.repo.add(task)
        logger.debug("added task %s", task.task_id)
        return task

    def toggle_completion(self, task_id: TaskId) -> Task | None:
        """
            Odwraca flagę `completed`. Pozostałe pola i kolejność bez zmian.

            Nieznane ID to no-op (delete mógł wyprzedzić toggle).

            :return: Zaktualizowany `Task` albo `None`.
        """
        with self._lock:
            task = self.repo.get(task_id)
            if task is None:
                logger.info("toggle ignored: no task %s", task_id)
                return None
            toggled = replace(task, completed=not task.completed)
            self.repo.update(toggled)
        logger.debug("task %s completed=%s", task_id, toggled.completed)
        return toggled

    def delete(self, task_id: TaskId) -> bool:
        """
            Usuwa zadanie na stałe. Nieznane ID to no-op.

            :return: True, jeśli coś usunięto.
        """
        with self._lock:
            if not self.repo.exists(task_id):
                logger.info("delete ignored: no task %s", task_id)
                return False
            self.repo.remove(task_id)
        logger.debug("deleted task %s", task_id)
        return True

    def list_all(self) -> list[Task]:
        """Wszystkie zadania, najnowsze pierwsze. Zwracana lista to kopia."""
        with self._lock:
            return self.repo.list_all()

    def list_filtered(self, status: TaskFilter | str) -> list[Task]:
        """
            Podciąg `list_all()` pasujący do filtra; kolejność zachowana.

            :param status: `TaskFilter` lub jego wartość ("all", "active", "completed").
            :raises TaskValidationError: Przy nieznanym filtrze.
        """
        try:
            task_filter = TaskFilter(status)
        except ValueError:
            raise TaskValidationError("status", f"unknown filter: {status!r}") from None
        return [t for t in self.list_all() if task_filter.matches(t)]

    def counts(self) -> TaskCounts:
        with self._lock:
            tasks = self.repo.list_all()
        completed = sum(1 for t in tasks if t.completed)
        return TaskCounts(active=len(tasks) - completed, completed=completed, total=len(tasks))

    def get_task(self, task_id: TaskId) -> Task:
        """
            Zwraca pojedyncze zadanie o wskazanym identyfikatorze.

            :raises TaskNotFoundError: Gdy nie znaleziono zadania.
        """
        with self._lock:
            task = self.repo.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def resolve_id(self, prefix: str) -> TaskId:
        """
            Zamienia pełne ID albo jego unikalny prefiks (UI pokazuje 8 znaków) na TaskId.

            :raises TaskNotFoundError: Brak pasującego zadania.
            :raises TaskValidationError: Prefiks pasuje do kilku zadań.
        """
        prefix = (prefix or "").strip()
        if not prefix:
            raise TaskValidationError("id", "id cannot be empty")
        with self._lock:
            if self.repo.exists(TaskId(prefix)):
                return TaskId(prefix)
            matches = [t.task_id for t in self.repo.list_all() if t.task_id.startswith(prefix)]
        if not matches:
            raise TaskNotFoundError(prefix)
        if len(matches) > 1:
            raise TaskValidationError("id", f"'{prefix}' matches {len(matches)} tasks, use a longer prefix")
        return matches[0]


def new_session_store(
    settings: Settings | None = None,
    *,
    id_provider: IdProvider | None = None,
    clock: Clock | None = None,
) -> TaskStore:
    """Tworzy store na czas sesji procesu; domyślnie z jednym zadaniem powitalnym."""
    settings = settings or Settings()
    store = TaskStore(
        InMemoryTaskRepository(),
        id_provider or UuidIdProvider(),
        clock or SystemClock(),
    )
    if settings.seed_welcome:
        store.add(WELCOME_TITLE, WELCOME_DESCRIPTION)
    logger.debug("session store ready, total=%s", store.counts().total)
    return store
