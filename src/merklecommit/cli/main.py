"""
merklecommit command line tool.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from merklecommit import __version__
from merklecommit.cli.tree_commands import add_tree_commands
from merklecommit.utils.logging import configure_logging


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="merklecommit",
        description="Build Merkle trees over values and check inclusion proofs.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--hash",
        default=None,
        help="hashlib algorithm (default: MERKLECOMMIT_HASH_ALGORITHM or sha512)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (default: MERKLECOMMIT_LOG_LEVEL or WARNING)",
    )

    sub = parser.add_subparsers(dest="command")
    add_tree_commands(sub)
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = create_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    configure_logging(args.log_level)
    args.func(args)


if __name__ == "__main__":
    main()
