"""Errors raised while decoding a binary STL buffer."""


class STLError(ValueError):
    """Base class for every binary STL decode failure."""


class FileTooSmall(STLError):
    def __init__(self, size: int):
        self.size = size
        super().__init__(
            f"STL buffer too small: {size} bytes (a binary STL needs at least 84)"
        )


class UnexpectedFileSize(STLError):
    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Unexpected STL size: header implies {expected} bytes, got {actual}"
        )


class TriangleCountMismatch(STLError):
    def __init__(self, diff: int):
        # declared - decoded
        self.diff = diff
        super().__init__(
            f"Triangle count mismatch: header count minus decoded count is {diff}"
        )


class RecordAlignmentError(STLError):
    """Triangle data does not split into whole 50-byte records."""

    def __init__(self, length: int, start: int):
        self.length = length
        self.start = start
        super().__init__(
            f"Triangle data of {length - start} bytes starting at offset {start} "
            f"is not a whole number of 50-byte records"
        )
