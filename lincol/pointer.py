"""JSON Pointer (RFC 6901) segments and canonical strings.

Inside a segment ``~`` is written ``~0`` and ``/`` is written ``~1``. The empty
string addresses the whole document.
"""

import re
from dataclasses import dataclass

from .exceptions import MalformedPointerError

# A '~' not followed by '0' or '1'
_BAD_ESCAPE = re.compile(r"~(?![01])")


def escape_segment(segment: str) -> str:
    """Return segment with ``~`` and ``/`` escaped for use in a pointer."""
    return segment.replace("~", "~0").replace("/", "~1")


def unescape_segment(segment: str, pointer: str | None = None) -> str:
    """Return segment with ``~1``/``~0`` sequences restored.

    Raises:
        MalformedPointerError: If the segment has a bare ``~``.
    """
    match = _BAD_ESCAPE.search(segment)
    if match:
        raise MalformedPointerError(
            segment if pointer is None else pointer,
            f"invalid escape at '{segment[match.start():match.start() + 2]}'",
        )
    return segment.replace("~1", "/").replace("~0", "~")


@dataclass(frozen=True)
class JsonPointer:
    """A parsed JSON Pointer: the unescaped segments from root to node."""

    segments: tuple[str, ...] = ()

    @classmethod
    def parse(cls, text: str) -> "JsonPointer":
        """Parse a pointer string into segments.

        Raises:
            MalformedPointerError: If text is non-empty and does not start with
                '/', or contains an invalid escape sequence.
        """
        if text == "":
            return cls()
        if not text.startswith("/"):
            raise MalformedPointerError(text, "must be empty or start with '/'")
        return cls(tuple(unescape_segment(raw, text) for raw in text[1:].split("/")))

    def child(self, segment: str | int) -> "JsonPointer":
        """Return the pointer to a member key or array index below this one."""
        return JsonPointer(self.segments + (str(segment),))

    @property
    def is_root(self) -> bool:
        return not self.segments

    def __str__(self) -> str:
        return "".join("/" + escape_segment(segment) for segment in self.segments)
