"""lincol - JSON Pointer to line/column lookup for JSON and YAML documents.

    >>> from lincol import index
    >>> positions = index('{"a": {"b": 1}}')
    >>> positions.get("/a/b")
    Position(line=1, column=13)
"""

__version__ = "0.1.0"

from .config import DuplicateKeyPolicy, IndexConfig, load_config
from .exceptions import (
    DecodeError,
    DuplicateKeyError,
    LincolError,
    MalformedPointerError,
    OutOfRangeError,
    ParseError,
)
from .indexer import Indexer, build_index
from .loader import index, index_all, index_file, index_reader
from .parsers import Format
from .pointer import JsonPointer
from .position import LineStartTable, Position
from .position_index import Index

__all__ = [
    "__version__",
    "DecodeError",
    "DuplicateKeyError",
    "DuplicateKeyPolicy",
    "Format",
    "Index",
    "IndexConfig",
    "Indexer",
    "JsonPointer",
    "LincolError",
    "LineStartTable",
    "MalformedPointerError",
    "OutOfRangeError",
    "ParseError",
    "Position",
    "build_index",
    "index",
    "index_all",
    "index_file",
    "index_reader",
    "load_config",
]
