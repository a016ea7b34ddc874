import uuid
from typing import Iterable

from sqlalchemy import JSON
from sqlalchemy.types import TypeDecorator


class UUIDSet(TypeDecorator):
    """Stores a set of UUIDs as a JSON array of canonical strings.

    Duplicates are dropped and the array is sorted on write, so a
    load/mutate/save cycle never persists the same id twice.
    """

    impl = JSON
    cache_ok = True

    def process_bind_param(self, value: Iterable[uuid.UUID] | None, dialect):
        if value is None:
            return []
        return sorted({str(uuid.UUID(str(item))) for item in value})

    def process_result_value(self, value, dialect) -> list[uuid.UUID]:
        if not value:
            return []
        return [uuid.UUID(item) for item in value]
