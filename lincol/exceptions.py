"""Custom exceptions for lincol.

Construction-time errors (ParseError, OutOfRangeError, DecodeError) abort the
whole build and no partial Index is returned. Lookup-time errors
(MalformedPointerError) are local to the call that raised them.
"""


class LincolError(Exception):
    """Base class for every error raised by lincol."""


class ParseError(LincolError):
    """Raised when the source document is syntactically invalid.

    Attributes:
        line: 1-based line of the problem, when the parser reported one
        column: 1-based column of the problem, when the parser reported one
    """

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.message} (line {self.line}, column {self.column})"


class DuplicateKeyError(ParseError):
    """Raised for a repeated mapping key when duplicates are configured as errors."""

    def __init__(self, pointer: str, first, second):
        super().__init__(
            f"duplicate key at {pointer!r}: first defined at {first}, redefined at {second}",
            line=second.line,
            column=second.column,
        )
        self.pointer = pointer
        self.first = first
        self.second = second


class OutOfRangeError(LincolError):
    """Raised when a node offset falls outside the source text.

    Only reachable with a misbehaving parser. Reported instead of clamping.
    """

    def __init__(self, offset: int, limit: int, pointer: str | None = None):
        where = f" for pointer {pointer!r}" if pointer is not None else ""
        super().__init__(f"offset {offset} is outside source text of length {limit}{where}")
        self.offset = offset
        self.limit = limit
        self.pointer = pointer


class MalformedPointerError(LincolError):
    """Raised when a lookup string is not a valid RFC 6901 JSON Pointer."""

    def __init__(self, pointer: str, reason: str):
        super().__init__(f"malformed JSON Pointer {pointer!r}: {reason}")
        self.pointer = pointer
        self.reason = reason


class DecodeError(LincolError):
    """Raised when byte input is not valid UTF-8."""
