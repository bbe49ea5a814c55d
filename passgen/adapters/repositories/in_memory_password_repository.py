from typing import Dict, Iterable, List
from uuid import uuid4

from passgen.core.models.password import StoredPassword
from passgen.core.ports.password_repository import PasswordRepositoryPort


class InMemoryPasswordRepository(PasswordRepositoryPort):
    """Dictionary-backed store for tests and local development."""

    def __init__(self):
        self._records: Dict[str, StoredPassword] = {}

    async def find_all_by_search_hash(self, search_hash: bytes) -> List[StoredPassword]:
        return [
            record for record in self._records.values()
            if record.search_hash == search_hash
        ]

    async def save_all(self, records: Iterable[StoredPassword]) -> List[StoredPassword]:
        saved = []
        for record in records:
            stored = record.with_id(str(uuid4()))
            self._records[stored.id] = stored
            saved.append(stored)
        return saved

    async def delete(self, record: StoredPassword) -> None:
        if record.id in self._records:
            del self._records[record.id]

    async def count(self) -> int:
        """Number of stored records."""
        return len(self._records)

    async def clear(self) -> None:
        """Remove every record."""
        self._records.clear()
