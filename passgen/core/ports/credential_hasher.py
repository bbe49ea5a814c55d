"""
Credential hasher port for passgen.
Defines the one-way hash used to store and verify passwords.
"""
from abc import ABC, abstractmethod


class CredentialHasherPort(ABC):
    """
    Abstract interface for one-way credential hashing.

    Implementations are salted and intentionally slow, so encode()
    yields a different hash for the same plaintext on every call and
    verify() is the only way to test a match.
    """

    @abstractmethod
    def encode(self, plaintext: str) -> str:
        """
        Hash a plaintext password.

        Args:
            plaintext: Password to hash

        Returns:
            str: Salted one-way hash
        """
        pass

    @abstractmethod
    def verify(self, plaintext: str, hashed: str) -> bool:
        """
        Check a plaintext password against a stored hash.

        Args:
            plaintext: Password to check
            hashed: Hash produced by encode()

        Returns:
            bool: True if the password matches the hash
        """
        pass
