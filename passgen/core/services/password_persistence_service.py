"""
Deduplicating password persistence service for passgen.
Stores each distinct plaintext at most once using lookup-before-insert.
"""
import asyncio
from typing import List, Optional, Set

from passgen.core.models.password import GeneratedPassword, PasswordLookup, StoredPassword
from passgen.core.ports.credential_hasher import CredentialHasherPort
from passgen.core.ports.password_repository import PasswordRepositoryPort
from passgen.core.services.search_hash import SearchHashGenerator
from passgen.infrastructure.logging.log_config import get_logger


logger = get_logger(__name__)


class PasswordPersistenceService:
    """
    Domain service for storing, finding and deleting passwords.

    The store only knows one-way hashes, so a plaintext is located by
    fetching every record sharing its search hash and verifying each
    candidate. Uniqueness is checked here, not by the store: two batches
    persisted concurrently may both insert the same plaintext.

    Hashing is CPU bound and runs in worker threads off the event loop.
    """

    def __init__(
        self,
        password_repository: PasswordRepositoryPort,
        credential_hasher: CredentialHasherPort,
        search_hash_generator: Optional[SearchHashGenerator] = None
    ):
        """
        Initialize password persistence service.

        Args:
            password_repository: Store of password records
            credential_hasher: One-way hash used to verify plaintexts
            search_hash_generator: Lookup key generator, MD5 by default
        """
        self.password_repository = password_repository
        self.credential_hasher = credential_hasher
        self.search_hash_generator = search_hash_generator or SearchHashGenerator()

    async def lookup(self, plaintext: str) -> Optional[StoredPassword]:
        """
        Find the stored record matching a plaintext.

        Args:
            plaintext: Unhashed password

        Returns:
            Optional[StoredPassword]: Matching record or None

        Raises:
            DigestUnavailableError: If the search hash cannot be computed
        """
        search_hash = self.search_hash_generator.generate(plaintext)
        candidates = await self.password_repository.find_all_by_search_hash(search_hash)

        for record in candidates:
            if await asyncio.to_thread(self.credential_hasher.verify, plaintext, record.verification_hash):
                return record

        return None

    async def get_password(self, plaintext: str) -> Optional[PasswordLookup]:
        """Return the projection of a stored password, or None if it is not stored."""
        record = await self.lookup(plaintext)
        if record is None:
            return None
        return self._to_lookup(plaintext, record)

    async def delete(self, plaintext: str) -> Optional[PasswordLookup]:
        """
        Delete the record matching a plaintext.

        Returns:
            Optional[PasswordLookup]: Projection of the removed record, or None
        """
        record = await self.lookup(plaintext)
        if record is None:
            return None

        await self.password_repository.delete(record)
        logger.info("Password record deleted", extra={
            'extra_fields': {"record_id": record.id, "complexity": record.complexity.value}
        })
        return self._to_lookup(plaintext, record)

    async def persist_unique_batch(self, passwords: List[GeneratedPassword]) -> List[GeneratedPassword]:
        """
        Persist passwords that are not stored yet.

        A password is rejected when the store already holds it or when an
        earlier entry of the same batch has the same plaintext; the first
        occurrence is the one persisted. All staged records are inserted
        with a single save_all call.

        Args:
            passwords: Generated passwords in request order

        Returns:
            List[GeneratedPassword]: Rejected duplicates, in input order
        """
        duplicates: List[GeneratedPassword] = []
        staged: List[StoredPassword] = []
        seen: Set[str] = set()

        for password in passwords:
            if password.plaintext in seen or await self.lookup(password.plaintext) is not None:
                duplicates.append(password)
                continue

            seen.add(password.plaintext)
            staged.append(StoredPassword.create(
                verification_hash=await asyncio.to_thread(self.credential_hasher.encode, password.plaintext),
                search_hash=self.search_hash_generator.generate(password.plaintext),
                password=password
            ))

        if staged:
            await self.password_repository.save_all(staged)

        logger.info("Password batch persisted", extra={
            'extra_fields': {
                "batch_size": len(passwords),
                "persisted": len(staged),
                "duplicates": len(duplicates)
            }
        })

        return duplicates

    @staticmethod
    def _to_lookup(plaintext: str, record: StoredPassword) -> PasswordLookup:
        return PasswordLookup(
            password=plaintext,
            complexity=record.complexity,
            created_at=record.created_at
        )
