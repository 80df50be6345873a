"""Positioned document tree shared by all parser collaborators.

Every node carries the character offset of its first character in the source
text. The Indexer only looks at node kinds, offsets and mapping key text, so
JSON and YAML documents are indexed the same way.
"""

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass
class ScalarNode:
    """A leaf value. For mapping keys, value is the key text."""

    offset: int
    value: Any = None


@dataclass
class AliasNode:
    """A YAML alias (``*name``), kept as a leaf at the alias's own position."""

    offset: int
    anchor: str


@dataclass
class SequenceNode:
    offset: int
    items: list["Node"] = field(default_factory=list)


@dataclass
class MappingNode:
    """A mapping with its entries in source order, duplicates included."""

    offset: int
    entries: list[tuple["Node", "Node"]] = field(default_factory=list)


Node = Union[ScalarNode, AliasNode, SequenceNode, MappingNode]
