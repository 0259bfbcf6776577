from todos.ports.id_provider import IdProvider
import uuid

class UuidIdProvider(IdProvider):
    """UUID4 zamiast znacznika czasu w ms: dwa add() w tej samej milisekundzie nie kolidują."""

    def new_id(self) -> str:
        return str(uuid.uuid4())
