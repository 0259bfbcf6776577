from enum import Enum

class TaskColor(Enum):
    ACTIVE = "[yellow]"
    DONE = "[green]"
    SELECTED = "[bold reverse]"
    DIM = "[dim]"
    RESET = "[/]"

    def __str__(self):
        return self.value
