"""Strict JSON composer producing a positioned node tree.

The standard library json module decodes strings, numbers and literals but
throws positions away. Containers are therefore walked here, with an explicit
stack of open containers, and every scalar is handed to
JSONDecoder.raw_decode at its own offset.

Duplicate object keys are kept in source order; the Indexer applies the
duplicate-key policy.
"""

import json

from ..exceptions import ParseError
from ..nodes import MappingNode, Node, ScalarNode, SequenceNode
from ..utils.logging import logger

_WHITESPACE = " \t\n\r"


def _skip_whitespace(text: str, pos: int) -> int:
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    return pos


class _Frame:
    """An open container and, for objects, the key waiting for its value."""

    __slots__ = ("node", "key", "closer")

    def __init__(self, node: MappingNode | SequenceNode):
        self.node = node
        self.key: ScalarNode | None = None
        self.closer = "}" if isinstance(node, MappingNode) else "]"

    def add(self, child: Node) -> None:
        if isinstance(self.node, MappingNode):
            self.node.entries.append((self.key, child))
            self.key = None
        else:
            self.node.items.append(child)


class JsonNodeParser:
    """Parser for JSON text."""

    def __init__(self):
        self._decoder = json.JSONDecoder()

    def parse(self, text: str) -> Node:
        """Compose the node tree of a JSON document.

        Raises:
            ParseError: If text is not a single valid JSON value.
        """
        try:
            root = self._compose(text)
        except json.JSONDecodeError as e:
            raise ParseError(f"invalid JSON: {e.msg}", line=e.lineno, column=e.colno) from e
        logger.debug("Composed JSON document ({chars} chars)", chars=len(text))
        return root

    def _compose(self, text: str) -> Node:
        length = len(text)
        pos = _skip_whitespace(text, 0)
        stack: list[_Frame] = []
        root = None

        while True:
            node, pos = self._value(text, pos)
            if stack:
                stack[-1].add(node)
            else:
                root = node

            if isinstance(node, (MappingNode, SequenceNode)):
                frame = _Frame(node)
                pos = _skip_whitespace(text, pos)
                if text.startswith(frame.closer, pos):
                    pos += 1
                else:
                    stack.append(frame)
                    if isinstance(node, MappingNode):
                        pos = self._key(text, pos, frame)
                    continue

            # The value is complete: close finished containers until a ','
            # announces the next member or the document ends.
            while True:
                pos = _skip_whitespace(text, pos)
                if not stack:
                    if pos != length:
                        raise json.JSONDecodeError("Extra data", text, pos)
                    return root
                frame = stack[-1]
                if text.startswith(",", pos):
                    pos = _skip_whitespace(text, pos + 1)
                    if isinstance(frame.node, MappingNode):
                        pos = self._key(text, pos, frame)
                    break
                if text.startswith(frame.closer, pos):
                    stack.pop()
                    pos += 1
                    continue
                raise json.JSONDecodeError("Expecting ',' delimiter", text, pos)

    def _value(self, text: str, pos: int) -> tuple[Node, int]:
        char = text[pos:pos + 1]
        if char == "{":
            return MappingNode(pos), pos + 1
        if char == "[":
            return SequenceNode(pos), pos + 1
        value, end = self._decoder.raw_decode(text, pos)
        return ScalarNode(pos, value), end

    def _key(self, text: str, pos: int, frame: _Frame) -> int:
        """Read '"key" :' and return the offset where the member value starts."""
        if not text.startswith('"', pos):
            raise json.JSONDecodeError(
                "Expecting property name enclosed in double quotes", text, pos
            )
        key, end = self._decoder.raw_decode(text, pos)
        frame.key = ScalarNode(pos, key)
        pos = _skip_whitespace(text, end)
        if not text.startswith(":", pos):
            raise json.JSONDecodeError("Expecting ':' delimiter", text, pos)
        return _skip_whitespace(text, pos + 1)
