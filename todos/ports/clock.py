from typing import Protocol
from datetime import datetime

class Clock(Protocol):
    """Źródło czasu dla `created_at`. Musi zwracać datetime aware w UTC."""
    def now(self) -> datetime:
        ...
