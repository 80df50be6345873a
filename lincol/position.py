"""Offset to line/column resolution.

A LineStartTable is built once per source text and then answers any number of
offset lookups with a binary search over the sorted line starts.
"""

from bisect import bisect_right
from dataclasses import dataclass

from .exceptions import OutOfRangeError


@dataclass(frozen=True)
class Position:
    """Line and column of a node in source text, both 1-based."""

    line: int
    column: int

    def __post_init__(self):
        if self.line < 1 or self.column < 1:
            raise ValueError(f"Position must be 1-based, got line={self.line} column={self.column}")

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


class LineStartTable:
    """Sorted offsets of the first character of every line.

    Entry i is the offset where line i+1 begins. Offsets are str indices, so
    a multi-byte character counts as one column.
    """

    __slots__ = ("starts", "length")

    def __init__(self, starts: tuple[int, ...], length: int):
        self.starts = starts
        self.length = length

    @classmethod
    def build(cls, text: str) -> "LineStartTable":
        """Scan text once, recording the offset after every newline.

        A trailing newline does not open an empty final line. With \\r\\n the
        \\r stays on the line it ends.
        """
        length = len(text)
        starts = [0]
        pos = text.find("\n")
        while pos != -1:
            if pos + 1 < length:
                starts.append(pos + 1)
            pos = text.find("\n", pos + 1)
        return cls(tuple(starts), length)

    def resolve(self, offset: int) -> Position:
        """Map an offset to its Position.

        Args:
            offset: Character offset, 0 <= offset <= length. The end-of-text
                offset is valid because parsers report empty scalars there.

        Raises:
            OutOfRangeError: If the offset is negative or past the end.
        """
        if offset < 0 or offset > self.length:
            raise OutOfRangeError(offset, self.length)
        line = bisect_right(self.starts, offset) - 1
        return Position(line + 1, offset - self.starts[line] + 1)

    def __len__(self) -> int:
        return len(self.starts)

    def __repr__(self) -> str:
        return f"LineStartTable(lines={len(self.starts)}, length={self.length})"
