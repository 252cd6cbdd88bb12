from .enums import ErrorCode, NodeKind
from .errors import (
    MerkleError,
    EmptyTreeError,
    LeafNotFoundError,
    EmptyInputError,
    UnsupportedHashAlgorithm,
)

__all__ = [
    "ErrorCode",
    "NodeKind",
    "MerkleError",
    "EmptyTreeError",
    "LeafNotFoundError",
    "EmptyInputError",
    "UnsupportedHashAlgorithm",
]
