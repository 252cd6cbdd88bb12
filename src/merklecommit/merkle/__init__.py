"""
Merkle tree primitives.

Key concepts:
- Fixed-length hash primitive (SHA-512 by default)
- Odd-count padding with a duplicate of the last leaf
- FIFO pairwise reduction to a single root
- Inclusion proofs verifiable from the root digest alone
"""

from merklecommit.merkle.hashing import (
    Hasher,
    default_hasher,
    hash_leaf_data,
)

from merklecommit.merkle.proof import (
    PathPoint,
    generate_proof,
    verify_proof,
)

from merklecommit.merkle.tree import (
    MerkleNode,
    MerkleTree,
    build_tree,
    compute_merkle_root,
    verify_tree,
)

__all__ = [
    # Hashing
    "Hasher",
    "default_hasher",
    "hash_leaf_data",
    # Proofs
    "PathPoint",
    "generate_proof",
    "verify_proof",
    # Tree
    "MerkleNode",
    "MerkleTree",
    "build_tree",
    "compute_merkle_root",
    "verify_tree",
]
