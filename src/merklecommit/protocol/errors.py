from typing import Optional
from .enums import ErrorCode


class MerkleError(Exception):
    def __init__(self, message: str, code: Optional[ErrorCode] = None):
        super().__init__(message)
        self.code = code or ErrorCode.INTERNAL_ERROR


class EmptyTreeError(MerkleError):
    """Raised when an operation needs a tree but none was given."""

    def __init__(self, message: str = "empty tree"):
        super().__init__(message, ErrorCode.EMPTY_TREE)


class LeafNotFoundError(MerkleError):
    """Raised when no stored leaf carries the requested digest."""

    def __init__(self, digest: bytes):
        super().__init__(f"no leaf with digest {digest.hex()}", ErrorCode.LEAF_NOT_FOUND)
        self.digest = digest


class EmptyInputError(MerkleError, ValueError):
    """Raised when a tree is built from zero values."""

    def __init__(self, message: str = "cannot build a Merkle tree with no values"):
        super().__init__(message, ErrorCode.EMPTY_INPUT)


class UnsupportedHashAlgorithm(MerkleError, ValueError):
    """Raised when the hash algorithm is unknown or has no fixed digest size."""

    def __init__(self, algorithm: str):
        super().__init__(f"unsupported hash algorithm: {algorithm}", ErrorCode.UNSUPPORTED_HASH)
        self.algorithm = algorithm
