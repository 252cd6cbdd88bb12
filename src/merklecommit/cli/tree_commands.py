"""
Tree CLI commands for merklecommit.

Commands:
    merklecommit root VALUE...              Print the root digest over the values
    merklecommit prove TARGET VALUE...      Print the inclusion proof for TARGET
    merklecommit verify VALUE...            Rebuild, verify and check every leaf proof

With --file, every VALUE (and TARGET) is a path whose bytes are the value;
otherwise the arguments themselves are used, UTF-8 encoded.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Dict, List

from merklecommit.merkle.hashing import Hasher, default_hasher
from merklecommit.merkle.tree import MerkleTree, build_tree
from merklecommit.protocol.errors import MerkleError


def tree_root(args) -> None:
    """Print the root digest for the given values."""
    tree = _build(args)
    data = {
        "root": tree.root_digest.hex(),
        "leaves": tree.leaf_count,
        "hash": tree.hasher.algorithm,
    }

    if args.output == "json":
        print(json.dumps(data, indent=2))
    else:
        print(f"Root:    {data['root']}")
        print(f"Leaves:  {data['leaves']}")
        print(f"Hash:    {data['hash']}")


def tree_prove(args) -> None:
    """Print the inclusion proof for one value."""
    tree = _build(args)
    target = tree.hasher.hash(_read_value(args.target, args.file))

    try:
        path = tree.proof(target)
    except MerkleError as e:
        print(f"Proof error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.output == "json":
        data: Dict[str, Any] = {
            "target": target.hex(),
            "root": tree.root_digest.hex(),
            "path": [{"sibling": p.sibling.hex(), "appended": p.appended} for p in path],
        }
        print(json.dumps(data, indent=2))
        return

    print(f"Target:  {target.hex()}")
    print(f"Root:    {tree.root_digest.hex()}")
    print()
    print(f"{'LEVEL':<6} {'SIDE':<6} SIBLING")
    print("-" * 80)
    for level, point in enumerate(path):
        side = "right" if point.appended else "left"
        print(f"{level:<6} {side:<6} {point.sibling.hex()}")
    print(f"\nTotal: {len(path)} steps")


def tree_verify(args) -> None:
    """Rebuild the tree, verify it, and check a proof for every leaf."""
    tree = _build(args)

    structure_ok = tree.verify()
    failed = [
        i for i, leaf in enumerate(tree.leaves)
        if not tree.verify_proof(leaf.digest, tree.proof(leaf.digest))
    ]

    if args.output == "json":
        print(json.dumps({
            "root": tree.root_digest.hex(),
            "structure": structure_ok,
            "failed_leaves": failed,
        }, indent=2))
    else:
        print(f"Root:        {tree.root_digest.hex()}")
        print(f"Structure:   {'OK' if structure_ok else 'CORRUPT'}")
        print(f"Proofs:      {tree.leaf_count - len(failed)}/{tree.leaf_count} verified")

    if not structure_ok or failed:
        sys.exit(1)


def _build(args) -> MerkleTree:
    hasher = _get_hasher(args)
    values = [_read_value(v, args.file) for v in args.values]
    try:
        return build_tree(values, hasher)
    except MerkleError as e:
        print(f"Build error: {e}", file=sys.stderr)
        sys.exit(1)


def _get_hasher(args) -> Hasher:
    try:
        if getattr(args, "hash", None):
            return Hasher(args.hash)
        return default_hasher()
    except MerkleError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def _read_value(raw: str, from_file: bool) -> bytes:
    if not from_file:
        return raw.encode("utf-8")
    try:
        return Path(raw).read_bytes()
    except OSError as e:
        print(f"Error: cannot read {raw}: {e.strerror}", file=sys.stderr)
        sys.exit(1)


def _values_arg(parser) -> None:
    parser.add_argument("values", nargs="*", metavar="VALUE", help="Values to commit, in order")


def add_tree_commands(sub) -> None:
    """Register root/prove/verify on an argparse subparsers object."""
    common: List[Any] = []

    p_root = sub.add_parser("root", help="Print the Merkle root of the values")
    _values_arg(p_root)
    p_root.set_defaults(func=tree_root)
    common.append(p_root)

    p_prove = sub.add_parser("prove", help="Print the inclusion proof for a value")
    p_prove.add_argument("target", metavar="TARGET", help="Value to prove")
    _values_arg(p_prove)
    p_prove.set_defaults(func=tree_prove)
    common.append(p_prove)

    p_verify = sub.add_parser("verify", help="Verify the tree and every leaf proof")
    _values_arg(p_verify)
    p_verify.set_defaults(func=tree_verify)
    common.append(p_verify)

    for p in common:
        p.add_argument("--file", action="store_true", help="Treat arguments as file paths")
        p.add_argument(
            "--output",
            choices=["table", "json"],
            default="table",
            help="Output format (default: table)",
        )
