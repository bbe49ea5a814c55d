"""
Search hash helper for passgen.

The search hash is a short digest over the first third of a password. It
lets the store narrow candidates before the slow verification hash is
checked; it never proves identity on its own.
"""
import hashlib
from typing import Optional

from passgen.config.password_rules import password_rules
from passgen.core.models.errors import DigestUnavailableError


class SearchHashGenerator:
    """Computes lossy lookup keys for stored passwords."""

    def __init__(self, algorithm: Optional[str] = None):
        self.algorithm = algorithm or password_rules.search_hash_algorithm

    def generate(self, text: str) -> bytes:
        """
        Digest the first third of a text.

        Inputs shorter than three characters digest an empty prefix.

        Raises:
            DigestUnavailableError: If the digest algorithm cannot be obtained
        """
        prefix = text[:len(text) // 3]
        try:
            digest = hashlib.new(self.algorithm, usedforsecurity=False)
        except (ValueError, TypeError) as e:
            raise DigestUnavailableError(self.algorithm, str(e)) from e
        digest.update(prefix.encode("utf-8"))
        return digest.digest()

    @property
    def digest_size(self) -> int:
        """Size in bytes of the produced search hashes."""
        try:
            return hashlib.new(self.algorithm, usedforsecurity=False).digest_size
        except (ValueError, TypeError) as e:
            raise DigestUnavailableError(self.algorithm, str(e)) from e


def search_hash(text: str) -> bytes:
    """Compute the search hash of a text with the configured algorithm."""
    return SearchHashGenerator().generate(text)
