from todos.ports.clock import Clock
from datetime import datetime, timezone

class SystemClock(Clock):
    """Zegar systemowy dla TaskStore; `created_at` zawsze w UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
