"""
Tests for the hash primitive wrapper.
"""

import hashlib

import pytest

from merklecommit.merkle.hashing import Hasher, default_hasher, hash_leaf_data
from merklecommit.protocol.enums import ErrorCode
from merklecommit.protocol.errors import UnsupportedHashAlgorithm


class TestHasher:
    """Tests for Hasher."""

    def test_default_is_sha512(self):
        hasher = Hasher()
        assert hasher.algorithm == "sha512"
        assert hasher.digest_size == 64
        assert hasher.hash(b"a") == hashlib.sha512(b"a").digest()

    def test_hash_pair_is_plain_concatenation(self):
        """No prefixes or separators between the two digests."""
        hasher = Hasher("sha256")
        assert hasher.hash_pair(b"left", b"right") == hashlib.sha256(b"leftright").digest()

    def test_algorithm_name_normalized(self):
        assert Hasher("SHA256").algorithm == "sha256"
        assert Hasher("SHA256") == Hasher("sha256")

    @pytest.mark.parametrize("name", ["blake2b", "sha3_256", "sha384"])
    def test_fixed_size_algorithms(self, name):
        hasher = Hasher(name)
        assert hasher.digest_size == hashlib.new(name).digest_size

    @pytest.mark.parametrize("name", ["nope", "shake_256", "shake_128", ""])
    def test_unsupported_algorithms(self, name):
        """Unknown and variable-length algorithms are rejected up front."""
        with pytest.raises(UnsupportedHashAlgorithm) as exc_info:
            Hasher(name)

        assert exc_info.value.code == ErrorCode.UNSUPPORTED_HASH
        assert isinstance(exc_info.value, ValueError)


class TestHashLeafData:
    """Tests for hash_leaf_data."""

    def test_matches_hasher(self):
        assert hash_leaf_data(b"value") == hashlib.sha512(b"value").digest()

    def test_explicit_hasher(self):
        assert hash_leaf_data(b"value", Hasher("sha256")) == hashlib.sha256(b"value").digest()

    def test_text_rejected(self):
        with pytest.raises(TypeError):
            hash_leaf_data("value")

    def test_default_hasher_follows_settings(self, monkeypatch):
        """default_hasher reads MERKLECOMMIT_HASH_ALGORITHM."""
        from merklecommit.core.settings import get_settings

        monkeypatch.setenv("MERKLECOMMIT_HASH_ALGORITHM", "sha256")
        get_settings.cache_clear()

        assert default_hasher().algorithm == "sha256"
        assert len(hash_leaf_data(b"value")) == 32
