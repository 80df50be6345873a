"""The Index: canonical JSON Pointer -> Position, in traversal order."""

from collections.abc import Iterable, Iterator, Mapping

from .pointer import JsonPointer
from .position import Position


def _canonical(pointer: str | JsonPointer) -> str:
    if isinstance(pointer, JsonPointer):
        return str(pointer)
    return str(JsonPointer.parse(pointer))


class Index:
    """Read-only table of Position information.

    Iteration follows depth-first pre-order of the source document: a
    container comes before its children and siblings keep document order.
    Nothing mutates an Index after construction, so it can be shared between
    threads freely.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, Position] | Iterable[tuple[str, Position]] = ()):
        self._entries: dict[str, Position] = dict(entries)

    def get(self, pointer: str | JsonPointer) -> Position | None:
        """Get a node's position given its JSON Pointer.

        Inside pointer segments ``/`` is written ``~1`` and ``~`` is written
        ``~0``. The empty string is the document root.

        Returns:
            The Position, or None when the pointer is well-formed but absent

        Raises:
            MalformedPointerError: If pointer is not a valid RFC 6901 string.
        """
        return self._entries.get(_canonical(pointer))

    def __getitem__(self, pointer: str | JsonPointer) -> Position:
        return self._entries[_canonical(pointer)]

    def __contains__(self, pointer) -> bool:
        return _canonical(pointer) in self._entries

    def iter(self) -> Iterator[tuple[str, Position]]:
        """Return a fresh iterator over (pointer, position) in insertion order."""
        return iter(self._entries.items())

    __iter__ = iter

    def pointers(self) -> list[str]:
        return list(self._entries)

    def to_dict(self) -> dict[str, dict[str, int]]:
        return {
            pointer: {"line": position.line, "column": position.column}
            for pointer, position in self._entries.items()
        }

    @property
    def size(self) -> int:
        return len(self._entries)

    @property
    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Index):
            return NotImplemented
        return list(self._entries.items()) == list(other._entries.items())

    __hash__ = None

    def __repr__(self) -> str:
        return f"Index(size={len(self._entries)})"
