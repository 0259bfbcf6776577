from typing import NewType
from datetime import datetime
from dataclasses import dataclass

TaskId = NewType("TaskId", str)

@dataclass(frozen=True)
class Task():
    """
    Model domenowy pojedynczego zadania; niemutowalny.
    Zmiana statusu = nowa instancja podmieniona w repozytorium na tej samej pozycji.
    Czas w UTC dostarczany przez serwis (port Clock).
    """
    task_id: TaskId
    title: str
    created_at: datetime
    description: str | None = None
    completed: bool = False


@dataclass(frozen=True)
class TaskCounts():
    """Liczniki listy zadań. Zawsze: active + completed == total."""
    active: int
    completed: int
    total: int

    def as_dict(self) -> dict[str, int]:
        return {"active": self.active, "completed": self.completed, "total": self.total}



### COMMENTS
# Ten plik definiuje model domenowy `Task`, czyli czysty, niezmienny obiekt opisujący pojedyncze zadanie.
# Nie zawiera logiki biznesowej ani technicznej, tylko dane.
#
# - `completed` to jedyne pole, które "zmienia się" w czasie życia zadania
#   (przez TaskStore.toggle_completion), ale nadal przez nową instancję.
# - `created_at` nie ma wartości domyślnej (byłaby liczona przy imporcie);
#   podaje ją serwis z portu Clock.
# - Kolejność wyświetlania NIE wynika z `created_at`: decyduje kolejność wstawienia
#   (najnowsze na początku), trzymana przez repozytorium.
