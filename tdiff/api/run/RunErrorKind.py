"""Per-case run failure kinds."""

from enum import Enum


class RunErrorKind(str, Enum):
    SPAWN_FAILED = "spawn_failed"
    NON_ZERO_EXIT = "non_zero_exit"
    TIMEOUT = "timeout"
    OUTPUT_DECODE_FAILED = "output_decode_failed"
