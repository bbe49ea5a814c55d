from abc import ABC, abstractmethod
from typing import Iterable, List

from passgen.core.models.password import StoredPassword


class PasswordRepositoryPort(ABC):
    """
    Durable store of password records.

    Uniqueness of plaintexts is not enforced here; the persistence
    service checks before inserting.
    """

    @abstractmethod
    async def find_all_by_search_hash(self, search_hash: bytes) -> List[StoredPassword]:
        """Get every record sharing a search hash."""
        pass

    @abstractmethod
    async def save_all(self, records: Iterable[StoredPassword]) -> List[StoredPassword]:
        """Insert records, returning them with their assigned ids."""
        pass

    @abstractmethod
    async def delete(self, record: StoredPassword) -> None:
        """Delete a record by its id."""
        pass
