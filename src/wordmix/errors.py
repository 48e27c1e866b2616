"""Exceptions raised by wordmix."""


class ShuffleError(Exception):
    """Base class for all wordmix errors."""


class InvalidRangeError(ShuffleError, IndexError):
    """Begin/end bounds fall outside the sequence or are reversed."""

    def __init__(self, begin: int, end: int, length: int):
        self.begin = begin
        self.end = end
        self.length = length
        super().__init__(
            f"Bounds are out of range: [{begin}, {end}] for a sequence of length {length}"
        )


class InvalidMovableIndicesError(ShuffleError, IndexError):
    """A movable index is out of range or the indices are not strictly ascending."""

    def __init__(self, index: int, message: str):
        self.index = index
        super().__init__(message)


class DocumentParseError(ShuffleError, ValueError):
    """An XML document could not be parsed."""
