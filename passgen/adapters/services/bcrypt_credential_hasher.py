"""
Bcrypt credential hasher for passgen.
Salted, deliberately slow one-way hashing of stored passwords.
"""
import hashlib
from typing import Optional

import bcrypt

from passgen.config.password_rules import password_rules
from passgen.core.ports.credential_hasher import CredentialHasherPort


class BcryptCredentialHasher(CredentialHasherPort):
    """
    Credential hasher backed by bcrypt.

    Passwords are SHA-256 pre-hashed before bcrypt so multi-byte
    passwords never exceed bcrypt's 72-byte input limit.
    """

    def __init__(self, rounds: Optional[int] = None):
        """
        Initialize bcrypt hasher.

        Args:
            rounds: bcrypt cost factor, defaults to the configured rules
        """
        self.rounds = rounds or password_rules.bcrypt_rounds

    @staticmethod
    def _prehash(plaintext: str) -> bytes:
        return hashlib.sha256(plaintext.encode("utf-8")).hexdigest().encode("ascii")

    def encode(self, plaintext: str) -> str:
        """
        Hash password using bcrypt.

        Args:
            plaintext: Plain text password

        Returns:
            str: bcrypt hash ($2b$...)
        """
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(self._prehash(plaintext), salt).decode("ascii")

    def verify(self, plaintext: str, hashed: str) -> bool:
        """Check a plaintext against a bcrypt hash; malformed hashes never match."""
        try:
            return bcrypt.checkpw(self._prehash(plaintext), hashed.encode("ascii"))
        except ValueError:
            return False
