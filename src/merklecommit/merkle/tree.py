"""
Merkle Tree Implementation

Builds an immutable binary hash tree over an ordered list of byte values.

Key features:
- SHA-512 leaves and internal nodes by default (see hashing.Hasher)
- Odd leaf counts are padded with a second leaf for the last value
- FIFO pairwise reduction from leaves to root
- Parent back-references for proof generation

The FIFO reduction pairs nodes in arrival order, not level by level, so
leaves of a tree whose padded size is not a power of two can sit at
different depths. Proofs follow the actual parent links and stay valid.
"""

from __future__ import annotations

import hmac
import logging
import weakref
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from merklecommit.merkle.hashing import Hasher, as_value, default_hasher
from merklecommit.merkle.proof import PathPoint, generate_proof, verify_proof
from merklecommit.protocol.enums import NodeKind
from merklecommit.protocol.errors import EmptyInputError, MerkleError

logger = logging.getLogger(__name__)


# ===========================================================================
# Merkle Node
# ===========================================================================


@dataclass(frozen=True, eq=False)
class MerkleNode:
    """
    A node in a Merkle tree.

    Attributes:
        digest: H(value) for leaves, H(left.digest || right.digest) otherwise
        kind: LEAF or INTERNAL
        left: Left child (None for leaves)
        right: Right child (None for leaves)
    """
    digest: bytes
    kind: NodeKind = NodeKind.LEAF
    left: Optional["MerkleNode"] = None
    right: Optional["MerkleNode"] = None
    _parent_ref: Optional["weakref.ReferenceType[MerkleNode]"] = field(
        default=None, init=False, repr=False
    )

    @property
    def parent(self) -> Optional["MerkleNode"]:
        """The node this one was combined into, or None for the root."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    def is_leaf(self) -> bool:
        return self.kind is NodeKind.LEAF

    def _attach_to(self, parent: "MerkleNode") -> None:
        if self._parent_ref is not None:
            raise MerkleError("node is already attached to a parent")
        object.__setattr__(self, "_parent_ref", weakref.ref(parent))


def _combine(left: MerkleNode, right: MerkleNode, hasher: Hasher) -> MerkleNode:
    node = MerkleNode(
        digest=hasher.hash_pair(left.digest, right.digest),
        kind=NodeKind.INTERNAL,
        left=left,
        right=right,
    )
    left._attach_to(node)
    right._attach_to(node)
    return node


def _reduce(leaves: Sequence[MerkleNode], hasher: Hasher) -> MerkleNode:
    queue = deque(leaves)
    while len(queue) > 1:
        left = queue.popleft()
        right = queue.popleft()
        queue.append(_combine(left, right, hasher))
    return queue[0]


def compute_merkle_root(digests: Iterable[bytes], hasher: Optional[Hasher] = None) -> bytes:
    """
    Compute the root digest over already-hashed leaves.

    Runs the same FIFO reduction as tree construction without creating
    nodes. No padding is applied here: pass the padded leaf digests, as
    stored in MerkleTree.leaves.

    Raises:
        EmptyInputError: If no digests are given
    """
    hasher = hasher or default_hasher()
    queue = deque(bytes(d) for d in digests)
    if not queue:
        raise EmptyInputError("cannot compute a Merkle root with no leaves")

    while len(queue) > 1:
        left = queue.popleft()
        right = queue.popleft()
        queue.append(hasher.hash_pair(left, right))
    return queue[0]


def _hash_leaves(values: Sequence[bytes], hasher: Hasher) -> List[bytes]:
    digests = [hasher.hash(v) for v in values]
    if len(values) % 2 == 1:
        digests.append(hasher.hash(values[-1]))
    return digests


# ===========================================================================
# Merkle Tree
# ===========================================================================


class MerkleTree:
    """
    Immutable Merkle tree over an ordered list of values.

    Build trees with build_tree() or MerkleTree.from_values(); the
    constructor only wraps nodes that have already been linked together.
    Once built, nothing adds, removes or replaces nodes, so a tree can be
    read from several threads without locking.
    """

    def __init__(self, root: MerkleNode, leaves: Sequence[MerkleNode], hasher: Hasher):
        self._root = root
        self._leaves: Tuple[MerkleNode, ...] = tuple(leaves)
        self._hasher = hasher

    @classmethod
    def from_values(cls, values: Iterable[Any], hasher: Optional[Hasher] = None) -> "MerkleTree":
        return build_tree(values, hasher)

    @property
    def root(self) -> MerkleNode:
        return self._root

    @property
    def root_digest(self) -> bytes:
        return self._root.digest

    @property
    def leaves(self) -> Tuple[MerkleNode, ...]:
        """Leaf nodes in construction order, including the padding leaf."""
        return self._leaves

    @property
    def leaf_count(self) -> int:
        return len(self._leaves)

    @property
    def hasher(self) -> Hasher:
        return self._hasher

    def verify(self) -> bool:
        """
        Recompute the root from the stored leaves and compare it to the
        stored root digest.

        This detects stored nodes that disagree with each other. It does
        not show the leaves belong to any particular values; use
        matches_values() for that.
        """
        recomputed = compute_merkle_root((leaf.digest for leaf in self._leaves), self._hasher)
        ok = hmac.compare_digest(recomputed, self._root.digest)
        if not ok:
            logger.warning(
                "Merkle tree verification failed: stored root %s, recomputed %s",
                self._root.digest.hex()[:16],
                recomputed.hex()[:16],
            )
        return ok

    def matches_values(self, values: Iterable[Any]) -> bool:
        """Check the stored leaves are exactly the (padded) hashes of values."""
        items = [as_value(v) for v in values]
        if not items:
            return False
        expected = _hash_leaves(items, self._hasher)
        if len(expected) != len(self._leaves):
            return False
        return all(
            hmac.compare_digest(digest, leaf.digest)
            for digest, leaf in zip(expected, self._leaves)
        )

    def proof(self, target: bytes) -> List[PathPoint]:
        """
        Inclusion proof for the first leaf whose digest equals target.

        Raises:
            LeafNotFoundError: If no leaf has that digest
        """
        return generate_proof(self, target)

    def proof_for_value(self, value: Any) -> List[PathPoint]:
        return self.proof(self._hasher.hash(as_value(value)))

    def verify_proof(self, target: bytes, path: Sequence[PathPoint]) -> bool:
        """Replay path from target and compare with this tree's root digest."""
        return verify_proof(target, path, self._root.digest, self._hasher)

    def __repr__(self) -> str:
        return (
            f"MerkleTree(root={self._root.digest.hex()[:16]}..., "
            f"leaves={len(self._leaves)}, hash={self._hasher.algorithm})"
        )


# ===========================================================================
# Construction / Verification Functions
# ===========================================================================


def build_tree(values: Iterable[Any], hasher: Optional[Hasher] = None) -> MerkleTree:
    """
    Build a Merkle tree from an ordered list of byte values.

    An odd number of values is padded with one extra leaf that re-hashes
    the last value, so the leaf count is always even. A distinct node is
    created for the padding leaf; it shares only the digest.

    Args:
        values: Byte values, in commitment order
        hasher: Hash primitive (defaults to the configured algorithm)

    Returns:
        The built MerkleTree

    Raises:
        EmptyInputError: If values is empty
        TypeError: If a value is not bytes-like
    """
    hasher = hasher or default_hasher()
    items = [as_value(v) for v in values]
    if not items:
        raise EmptyInputError()

    leaves = [MerkleNode(digest=d) for d in _hash_leaves(items, hasher)]
    root = _reduce(leaves, hasher)

    logger.debug(
        "Built Merkle tree: %d values, %d leaves, root=%s (%s)",
        len(items),
        len(leaves),
        root.digest.hex()[:16],
        hasher.algorithm,
    )
    return MerkleTree(root, leaves, hasher)


def verify_tree(tree: Optional[MerkleTree]) -> bool:
    """Full verification that treats a missing tree as unverified."""
    if tree is None:
        return False
    return tree.verify()
