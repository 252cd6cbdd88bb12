from .merkle import (
    Hasher,
    MerkleNode,
    MerkleTree,
    PathPoint,
    build_tree,
    compute_merkle_root,
    default_hasher,
    generate_proof,
    hash_leaf_data,
    verify_proof,
    verify_tree,
)
from .protocol import (
    ErrorCode,
    NodeKind,
    MerkleError,
    EmptyTreeError,
    LeafNotFoundError,
    EmptyInputError,
    UnsupportedHashAlgorithm,
)

__all__ = [
    "Hasher",
    "MerkleNode",
    "MerkleTree",
    "PathPoint",
    "build_tree",
    "compute_merkle_root",
    "default_hasher",
    "generate_proof",
    "hash_leaf_data",
    "verify_proof",
    "verify_tree",
    "ErrorCode",
    "NodeKind",
    "MerkleError",
    "EmptyTreeError",
    "LeafNotFoundError",
    "EmptyInputError",
    "UnsupportedHashAlgorithm",
]

__version__ = "0.1.0"
