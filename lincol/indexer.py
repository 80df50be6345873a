"""Depth-first indexer: positioned node tree -> Index.

The walk uses an explicit work stack of (pointer, node) pairs, so deeply
nested documents cannot exhaust the interpreter's recursion limit. Children
are pushed in reverse, which makes pops happen in document order and keeps
the pre-order contract: every container is recorded before its children.

Pointers are built incrementally as canonical strings: the parent's pointer
plus ``/`` plus the escaped member key or the decimal array index.
"""

from .config import DuplicateKeyPolicy
from .exceptions import DuplicateKeyError, OutOfRangeError
from .nodes import MappingNode, Node, ScalarNode, SequenceNode
from .pointer import escape_segment
from .position import LineStartTable, Position
from .position_index import Index
from .utils.logging import logger


def _resolve(table: LineStartTable, pointer: str, offset: int) -> Position:
    try:
        return table.resolve(offset)
    except OutOfRangeError as exc:
        raise OutOfRangeError(exc.offset, exc.limit, pointer=pointer) from exc


def _members(
    node: MappingNode, pointer: str, table: LineStartTable, policy: DuplicateKeyPolicy
) -> list[tuple[str, Node]]:
    """Return the (child pointer, value) pairs of a mapping after the duplicate-key policy.

    A key that wins under LAST keeps the slot of its first occurrence, as a
    repeated key does in a Python dict.
    """
    members: dict[str, tuple[ScalarNode, Node]] = {}
    for key_node, value in node.entries:
        if not isinstance(key_node, ScalarNode) or not isinstance(key_node.value, str):
            logger.debug(
                "Skipping key at offset {offset} under {pointer!r}: not addressable by a JSON Pointer",
                offset=key_node.offset,
                pointer=pointer,
            )
            continue
        key = key_node.value
        if key in members:
            if policy is DuplicateKeyPolicy.FIRST:
                continue
            if policy is DuplicateKeyPolicy.ERROR:
                child = pointer + "/" + escape_segment(key)
                raise DuplicateKeyError(
                    child,
                    _resolve(table, child, members[key][0].offset),
                    _resolve(table, child, key_node.offset),
                )
        members[key] = (key_node, value)
    return [(pointer + "/" + escape_segment(key), value) for key, (_, value) in members.items()]


def build_index(
    root: Node | None,
    table: LineStartTable,
    policy: DuplicateKeyPolicy = DuplicateKeyPolicy.LAST,
) -> Index:
    """Walk root and record the Position of every addressable node.

    Args:
        root: Root of the document tree; None for an empty document
        table: Line-start table of the text the tree was parsed from
        policy: How to treat repeated keys within one mapping

    Returns:
        A new Index. An empty document gives an empty Index.

    Raises:
        OutOfRangeError: A node offset lies outside the text; carries the pointer.
        DuplicateKeyError: A key repeats and policy is ERROR.
    """
    entries: dict[str, Position] = {}
    if root is None:
        return Index(entries)

    stack: list[tuple[str, Node]] = [("", root)]
    while stack:
        pointer, node = stack.pop()
        entries[pointer] = _resolve(table, pointer, node.offset)
        if isinstance(node, MappingNode):
            children = _members(node, pointer, table, policy)
        elif isinstance(node, SequenceNode):
            children = [(f"{pointer}/{i}", item) for i, item in enumerate(node.items)]
        else:
            continue
        stack.extend(reversed(children))

    logger.debug("Indexed {count} pointers over {lines} lines", count=len(entries), lines=len(table))
    return Index(entries)


class Indexer:
    """Indexes node trees parsed from one source text.

    The line-start table is built once and shared by every document of a
    multi-document stream.
    """

    def __init__(self, text: str, policy: DuplicateKeyPolicy = DuplicateKeyPolicy.LAST):
        self.table = LineStartTable.build(text)
        self.policy = policy

    def index(self, root: Node | None) -> Index:
        return build_index(root, self.table, self.policy)
