from typing import Protocol, Optional
from todos.domain.task import Task, TaskId


### COMMENTS
# ==========================================================
# Kontrakt repozytorium zadań (ports/task_repository.py).
# ==========================================================
# Ten moduł definiuje interfejs (Protocol) dla kolekcji Tasków trzymanej przez TaskStore.
# - Repozytorium trzyma KOLEJNOŚĆ: nowe zadanie trafia na początek listy.
#   Kolejność nie jest sortowaniem po `created_at`.
# - Brak logiki biznesowej (walidacje i no-op dla brakujących ID są w TaskStore).
# - Adapter sygnalizuje naruszenia kontraktu błędami domenowymi
#   (duplikat → TaskAlreadyExistsError, brak rekordu → TaskNotFoundError).


class TaskRepository(Protocol):
    """Interfejs uporządkowanej kolekcji obiektów `Task`.

    Adaptery (implementacje) muszą:
    - wstawiać nowe zadania na początek (najnowsze pierwsze),
    - przy `update` podmieniać rekord na tej samej pozycji,
    - przy `remove` zachować względną kolejność pozostałych,
    - zwracać z `list_all` kopię listy, nie wewnętrzną strukturę.
    """

    def add(self, task: Task) -> None:
        """Wstawia nowy rekord `Task` na początek kolekcji.

        Wyjątki domenowe:
            TaskAlreadyExistsError: Gdy istnieje wpis o tym samym `task_id`.
        """

    def get(self, task_id: TaskId) -> Optional[Task]:
        """Zwraca zadanie o podanym `task_id` albo `None`.

        Brak rekordu nie jest tu błędem: decyzja należy do TaskStore.
        """

    def update(self, task: Task) -> None:
        """Pełna podmiana istniejącego rekordu o danym `task_id`, w miejscu.

        Wyjątki domenowe:
            TaskNotFoundError: Gdy rekord z `task_id` nie istnieje.
        """

    def remove(self, task_id: TaskId) -> None:
        """Usuwa (hard delete) rekord o podanym `task_id`.

        Wyjątki domenowe:
            TaskNotFoundError: Gdy rekord z `task_id` nie istnieje.
        """

    def list_all(self) -> list[Task]:
        """Zwraca wszystkie zadania w kolejności wstawienia, najnowsze pierwsze.

        Zwraca:
            list[Task]: Nowa lista (kopia); rekordy są niemutowalne.
        """

    def count_all(self) -> int:
        """Zwraca liczbę wszystkich rekordów."""

    def exists(self, task_id: TaskId) -> bool:
        """Szybkie sprawdzenie istnienia rekordu o `task_id`."""
