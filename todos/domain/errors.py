

### COMMENTS
# ============================================
# Konwencja użycia błędów domenowych w projekcie
# ============================================
# - Repozytoria (adaptery):
#     * wykrywają duplikaty (TaskAlreadyExistsError) lub brak rekordów (TaskNotFoundError)
#
# - TaskStore:
#     * add z pustym tytułem, toggle/delete nieistniejącego ID → cichy no-op, BEZ wyjątku
#       (UI może wysłać delete po tym, jak zadanie już zniknęło)
#     * get_task / resolve_id muszą coś znaleźć → TaskNotFoundError
#     * zły filtr statusu → TaskValidationError
#
# - UI (CLI, shell):
#     * waliduje tytuł przed add (validate_title → TaskValidationError)
#     * łapie DomainError i wyświetla przyjazny komunikat
#     * wszystko inne traktuje jako błąd techniczny


class DomainError(Exception):
    """Bazowa klasa dla błędów domenowych.
    Umożliwia odróżnienie błędów domeny od błędów technicznych.
    Nie powinna być rzucana bezpośrednio: używaj klas pochodnych.
    """

class TaskAlreadyExistsError(DomainError):
    """Rzucany przez repozytorium, gdy dodawane zadanie ma `task_id`, który już istnieje.
    Strzeże niezmiennika unikalności ID w czasie życia store'a.
    """
    def __init__(self, task_id: str):
        self.task_id = task_id
        super().__init__(self.__str__())
    def __str__(self):
        return f"Task with ID {self.task_id} already exists."

class TaskValidationError(DomainError):
    """Rzucany, gdy dane wejściowe nie spełniają reguł dla zadania.
    Przykłady:
    - tytuł jest pusty lub składa się z samych białych znaków,
    - nieznany filtr statusu,
    - niejednoznaczny skrócony identyfikator.
    Zawiera czytelny komunikat (`message`) oraz nazwę pola (`field`).
    """
    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(self.__str__())
    def __str__(self):
        return f"Invalid '{self.field}': {self.message}"



class TaskNotFoundError(DomainError):
    """Rzucany, gdy żądane zadanie nie istnieje.
    Zgłaszany przez adapter repozytorium (`update()`, `remove()`) oraz przez
    `TaskStore.get_task()` / `TaskStore.resolve_id()`.
    """
    def __init__(self, task_id: str):
        self.task_id = task_id
        super().__init__(self.__str__())
    def __str__(self):
        return f"Task with ID {self.task_id} does not exist."
