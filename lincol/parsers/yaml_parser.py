"""Parser for YAML documents.

PyYAML's own composer calls itself once per nesting level, so deep documents
exhaust the interpreter stack. PositionLoader instead composes lincol nodes
straight from the parser's event stream, keeping the open containers on an
explicit stack. Every event carries a start mark, which is all the indexer
needs.

Aliases (``*name``) become leaf AliasNodes at the alias's own position, so
anchors are never expanded and recursive aliases cannot loop.
"""

import yaml
from yaml.composer import ComposerError

from ..exceptions import ParseError
from ..nodes import AliasNode, MappingNode, Node, ScalarNode, SequenceNode
from ..utils.logging import logger


class _Frame:
    """An open container and, for mappings, the key still waiting for its value."""

    __slots__ = ("node", "key")

    def __init__(self, node: SequenceNode | MappingNode):
        self.node = node
        self.key: Node | None = None

    def attach(self, child: Node) -> None:
        if isinstance(self.node, SequenceNode):
            self.node.items.append(child)
        elif self.key is None:
            self.key = child
        else:
            self.node.entries.append((self.key, child))
            self.key = None


class PositionLoader(yaml.SafeLoader):
    """SafeLoader that composes positioned lincol nodes without recursion."""

    def compose_positioned(self, single: bool = False) -> list[Node]:
        """Compose every document of the stream, in order.

        Raises:
            ComposerError: On an undefined alias, or on a second document
                when single is set.
        """
        self.get_event()  # StreamStartEvent
        roots: list[Node] = []
        while not self.check_event(yaml.StreamEndEvent):
            if single and roots:
                raise ComposerError(
                    "expected a single document in the stream",
                    None,
                    "but found another document",
                    self.peek_event().start_mark,
                )
            roots.append(self._compose_positioned_document())
        self.get_event()
        return roots

    def _compose_positioned_document(self) -> Node:
        self.get_event()  # DocumentStartEvent
        anchors: set[str] = set()
        stack: list[_Frame] = []
        root = None

        while not self.check_event(yaml.DocumentEndEvent):
            event = self.get_event()
            if isinstance(event, (yaml.SequenceEndEvent, yaml.MappingEndEvent)):
                stack.pop()
                continue

            offset = event.start_mark.index
            if isinstance(event, yaml.AliasEvent):
                if event.anchor not in anchors:
                    raise ComposerError(
                        None, None, f"found undefined alias {event.anchor!r}", event.start_mark
                    )
                node = AliasNode(offset, event.anchor)
            else:
                # Registered before children, so an anchor may be aliased inside itself
                if event.anchor is not None:
                    anchors.add(event.anchor)
                if isinstance(event, yaml.ScalarEvent):
                    node = ScalarNode(offset, event.value)
                elif isinstance(event, yaml.SequenceStartEvent):
                    node = SequenceNode(offset)
                else:
                    node = MappingNode(offset)

            if stack:
                stack[-1].attach(node)
            else:
                root = node
            if isinstance(node, (SequenceNode, MappingNode)):
                stack.append(_Frame(node))

        self.get_event()
        return root


def _parse_error(error: yaml.YAMLError) -> ParseError:
    mark = getattr(error, "problem_mark", None)
    if mark is None:
        return ParseError(f"invalid YAML: {error}")
    problem = "; ".join(part for part in (error.context, error.problem) if part)
    return ParseError(f"invalid YAML: {problem}", line=mark.line + 1, column=mark.column + 1)


def _compose(text: str, single: bool) -> list[Node]:
    loader = PositionLoader(text)
    try:
        return loader.compose_positioned(single=single)
    except yaml.YAMLError as e:
        raise _parse_error(e) from e
    finally:
        loader.dispose()


class YamlNodeParser:
    """Parser for YAML text, single or multi-document."""

    def parse(self, text: str) -> Node | None:
        """Compose the only document in text.

        Returns:
            The root node, or None for an empty document (blank or comments only)

        Raises:
            ParseError: On invalid YAML or a stream with more than one document.
        """
        roots = _compose(text, single=True)
        if not roots:
            logger.debug("YAML source holds no document")
            return None
        return roots[0]

    def parse_all(self, text: str) -> list[Node]:
        """Compose every document of a ``---`` separated stream, in order."""
        roots = _compose(text, single=False)
        logger.debug("Composed {count} YAML document(s)", count=len(roots))
        return roots
