"""
Password domain entities.
Generated passwords, stored records and lookup projections.
"""
from datetime import datetime, timezone
from typing import Optional
from dataclasses import dataclass, replace

from .complexity import Complexity


@dataclass(frozen=True)
class GenerationRequest:
    """Parameters of one password generation batch."""
    length: int
    include_lower: bool = True
    include_upper: bool = False
    include_special: bool = False
    amount: int = 1


@dataclass(frozen=True)
class GeneratedPassword:
    """
    A freshly generated password.

    Holds the plaintext, so it only lives for the duration of a request.
    """
    plaintext: str
    complexity: Complexity
    created_at: datetime

    @classmethod
    def create(cls, plaintext: str, complexity: Complexity) -> 'GeneratedPassword':
        """Create a generated password stamped with the current UTC time."""
        return cls(
            plaintext=plaintext,
            complexity=complexity,
            created_at=datetime.now(timezone.utc)
        )


@dataclass(frozen=True)
class StoredPassword:
    """
    Persisted password record.

    The plaintext is never stored: verification_hash is the one-way hash
    used to prove a match and search_hash only narrows the candidate set.
    """
    verification_hash: str
    search_hash: bytes
    complexity: Complexity
    created_at: datetime
    id: Optional[str] = None

    @classmethod
    def create(
        cls,
        verification_hash: str,
        search_hash: bytes,
        password: GeneratedPassword
    ) -> 'StoredPassword':
        """Stage a record for a generated password, copying its metadata."""
        return cls(
            verification_hash=verification_hash,
            search_hash=search_hash,
            complexity=password.complexity,
            created_at=password.created_at
        )

    def with_id(self, record_id: str) -> 'StoredPassword':
        """Return a copy carrying the identity assigned by the store."""
        return replace(self, id=record_id)


@dataclass(frozen=True)
class PasswordLookup:
    """Projection of a password returned by complexity checks and deletions."""
    password: str
    complexity: Complexity
    created_at: Optional[datetime] = None

    @property
    def persisted(self) -> bool:
        """A missing timestamp means the password was never persisted."""
        return self.created_at is not None


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of a generate-and-persist request."""
    passwords: list
    duplicates: list
    complexity: Complexity
