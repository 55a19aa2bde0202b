from enum import Enum


class InputKind(str, Enum):
    """Shape a raw input was classified as, in classification order."""

    BYTES = "bytes"
    MEMORYVIEW = "memoryview"
    BUFFER = "buffer"
    INT_SEQUENCE = "int_sequence"
    STREAM = "stream"
    UNKNOWN = "unknown"

