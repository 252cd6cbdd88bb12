from enum import Enum


class ErrorCode(str, Enum):
    EMPTY_TREE = "empty_tree"
    LEAF_NOT_FOUND = "leaf_not_found"
    EMPTY_INPUT = "empty_input"
    UNSUPPORTED_HASH = "unsupported_hash"
    INTERNAL_ERROR = "internal_error"


class NodeKind(str, Enum):
    LEAF = "leaf"
    INTERNAL = "internal"
