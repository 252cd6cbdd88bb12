"""
Hash primitive for merklecommit trees.

The tree only relies on H being deterministic with a fixed digest size:

- Leaf digest:     H(value)
- Internal digest: H(left || right)

There are no domain-separation prefixes and no length prefixes. SHA-512 is
the default, so digests are 64 bytes unless configured otherwise.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Any, Optional

from merklecommit.core.settings import get_settings
from merklecommit.protocol.errors import UnsupportedHashAlgorithm

DEFAULT_ALGORITHM = "sha512"


@dataclass(frozen=True)
class Hasher:
    """
    Fixed-length hash function backed by hashlib.

    Attributes:
        algorithm: hashlib algorithm name (e.g. "sha512", "sha256", "blake2b")
    """
    algorithm: str = DEFAULT_ALGORITHM

    def __post_init__(self) -> None:
        name = (self.algorithm or "").lower()
        # XOFs have no intrinsic digest size
        if name.startswith("shake"):
            raise UnsupportedHashAlgorithm(self.algorithm)
        try:
            hashlib.new(name)
        except (ValueError, TypeError):
            raise UnsupportedHashAlgorithm(self.algorithm) from None
        object.__setattr__(self, "algorithm", name)

    @classmethod
    def from_settings(cls) -> "Hasher":
        return cls(get_settings().hash_algorithm)

    @property
    def digest_size(self) -> int:
        return hashlib.new(self.algorithm).digest_size

    def hash(self, data: bytes) -> bytes:
        """Return H(data)."""
        return hashlib.new(self.algorithm, data).digest()

    def hash_pair(self, left: bytes, right: bytes) -> bytes:
        """Return H(left || right)."""
        hasher = hashlib.new(self.algorithm)
        hasher.update(left)
        hasher.update(right)
        return hasher.digest()


def as_value(value: Any) -> bytes:
    """
    Coerce a leaf value to bytes.

    Only bytes-like objects are accepted; text must be encoded by the caller.
    """
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"Merkle values must be bytes-like, got {type(value).__name__}")


def default_hasher() -> Hasher:
    """Hasher for the configured MERKLECOMMIT_HASH_ALGORITHM."""
    return Hasher.from_settings()


def hash_leaf_data(value: bytes, hasher: Optional[Hasher] = None) -> bytes:
    """
    Hash a value as a Merkle leaf.

    Use this to compute the digest to pass to proof generation or
    verification.
    """
    return (hasher or default_hasher()).hash(as_value(value))
