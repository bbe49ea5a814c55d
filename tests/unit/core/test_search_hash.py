"""
Unit tests for the search hash generator.
"""
import hashlib
import pytest

from passgen.core.models.errors import DigestUnavailableError
from passgen.core.services.search_hash import SearchHashGenerator, search_hash


@pytest.mark.unit
def test_digests_first_third():
    generator = SearchHashGenerator("md5")

    assert generator.generate("abcdefghi") == hashlib.md5(b"abc").digest()
    assert generator.generate("abcdefghij") == hashlib.md5(b"abc").digest()
    assert len(generator.generate("abcdefghi")) == 16


@pytest.mark.unit
def test_shared_prefix_collides():
    generator = SearchHashGenerator("md5")

    assert generator.generate("abcdefghi") == generator.generate("abcXYZ!!!")
    assert generator.generate("abcdefghi") != generator.generate("abdefghij")


@pytest.mark.unit
def test_short_input_digests_empty_prefix():
    generator = SearchHashGenerator("md5")

    assert generator.generate("a") == hashlib.md5(b"").digest()
    assert generator.generate("ab") == hashlib.md5(b"").digest()
    assert generator.generate("") == hashlib.md5(b"").digest()


@pytest.mark.unit
def test_prefix_counts_characters_not_bytes():
    generator = SearchHashGenerator("md5")

    assert generator.generate("ñandú1") == hashlib.md5("ña".encode("utf-8")).digest()


@pytest.mark.unit
def test_configurable_algorithm():
    generator = SearchHashGenerator("sha256")

    assert generator.digest_size == 32
    assert generator.generate("abcdef") == hashlib.sha256(b"ab").digest()


@pytest.mark.unit
def test_unknown_algorithm():
    generator = SearchHashGenerator("not-a-digest")

    with pytest.raises(DigestUnavailableError) as exc_info:
        generator.generate("abcdef")

    assert exc_info.value.algorithm == "not-a-digest"

    with pytest.raises(DigestUnavailableError):
        generator.digest_size


@pytest.mark.unit
def test_module_helper_uses_configured_algorithm():
    assert search_hash("abcdefghi") == SearchHashGenerator().generate("abcdefghi")
