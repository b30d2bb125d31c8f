"""Edit operation kinds."""

from enum import Enum


class OpKind(str, Enum):
    """Classification of a run of elements in an alignment."""

    EQUAL = "equal"
    DELETE = "delete"
    INSERT = "insert"
