"""
Merkle inclusion proofs.

A proof is the list of sibling digests met while walking from a leaf up to
the root. Each PathPoint says which side the sibling goes on when the
chain is replayed:

    appended=True   ->  result = H(result || sibling)
    appended=False  ->  result = H(sibling || result)

Verification needs only the leaf digest, the path and a trusted root
digest, never the tree itself.
"""

from __future__ import annotations

import hmac
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Sequence

from merklecommit.merkle.hashing import Hasher, default_hasher
from merklecommit.protocol.errors import EmptyTreeError, LeafNotFoundError

if TYPE_CHECKING:
    from merklecommit.merkle.tree import MerkleNode, MerkleTree

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathPoint:
    """
    One step of an inclusion proof.

    Attributes:
        sibling: Digest of the sibling node at this level
        appended: True if the sibling is concatenated after the running result
    """
    sibling: bytes
    appended: bool


def _find_leaf(leaves: Sequence["MerkleNode"], target: bytes) -> Optional["MerkleNode"]:
    # Leftmost match wins; padding always duplicates the last digest.
    for leaf in leaves:
        if leaf.digest == target:
            return leaf
    return None


def generate_proof(tree: Optional["MerkleTree"], target: bytes) -> List[PathPoint]:
    """
    Build the inclusion proof for a leaf digest.

    Args:
        tree: Tree to prove against
        target: Leaf digest to prove

    Returns:
        PathPoints ordered from the leaf level up to, not including, the root

    Raises:
        EmptyTreeError: If tree is None
        LeafNotFoundError: If no leaf has the target digest
    """
    if tree is None:
        raise EmptyTreeError()

    target = bytes(target)
    current = _find_leaf(tree.leaves, target)
    if current is None:
        logger.debug("No leaf with digest %s", target.hex()[:16])
        raise LeafNotFoundError(target)

    path: List[PathPoint] = []

    # collect siblings until the root has been combined
    parent = current.parent
    while parent is not None:
        if current is parent.left:
            path.append(PathPoint(sibling=parent.right.digest, appended=True))
        else:
            path.append(PathPoint(sibling=parent.left.digest, appended=False))
        current = parent
        parent = current.parent

    logger.debug("Generated proof for %s: %d steps", target.hex()[:16], len(path))
    return path


def verify_proof(
    target: bytes,
    path: Sequence[PathPoint],
    root_digest: bytes,
    hasher: Optional[Hasher] = None,
) -> bool:
    """
    Verify an inclusion proof against a root digest.

    Args:
        target: Claimed leaf digest
        path: Proof from generate_proof()
        root_digest: Trusted root digest
        hasher: Hash primitive the tree was built with

    Returns:
        True if replaying path from target reproduces root_digest
    """
    hasher = hasher or default_hasher()
    size = hasher.digest_size

    result = bytes(target)
    if len(result) != size:
        logger.warning("Proof rejected: target is %d bytes, expected %d", len(result), size)
        return False

    for point in path:
        if not isinstance(point, PathPoint) or len(point.sibling) != size:
            logger.warning("Proof rejected: malformed path point %r", point)
            return False
        if point.appended:
            result = hasher.hash_pair(result, point.sibling)
        else:
            result = hasher.hash_pair(point.sibling, result)

    return hmac.compare_digest(result, bytes(root_digest))
