"""Entry points: JSON or YAML source -> Index.

Usage:
    from lincol import index

    positions = index("foo:\\n  - bar: baz\\n    boom: true\\n")
    positions.get("/foo/0/boom")   # Position(line=3, column=11)
    positions.get("/foo/0/zoom")   # None
"""

from pathlib import Path
from typing import IO

from .config import IndexConfig, load_config
from .exceptions import DecodeError
from .indexer import Indexer
from .parsers import Format, parse_document, parse_documents, resolve_format
from .position_index import Index
from .utils.logging import logger

Source = str | bytes | bytearray


def _decode(source: Source) -> str:
    if isinstance(source, (bytes, bytearray)):
        try:
            return bytes(source).decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"source is not valid UTF-8: {e}") from e
    return source


def _prepare(source: Source, fmt, config: IndexConfig | None) -> tuple[str, Format, IndexConfig]:
    config = config or load_config()
    text = _decode(source)
    return text, resolve_format(text, fmt if fmt is not None else config.format), config


def index(source: Source, fmt: Format | str | None = None, *, config: IndexConfig | None = None) -> Index:
    """Build the Index of a single JSON or YAML document.

    Args:
        source: Document text, or UTF-8 bytes
        fmt: json, yaml or auto; None uses config.format
        config: Settings; defaults to load_config()

    Raises:
        ParseError: Invalid syntax, or more than one YAML document.
        DecodeError: Byte input that is not UTF-8.
        OutOfRangeError: A parser reported an offset outside the text.
    """
    text, fmt, config = _prepare(source, fmt, config)
    root = parse_document(text, fmt)
    positions = Indexer(text, config.duplicate_keys).index(root)
    logger.debug("Indexed {fmt} source: {count} pointers", fmt=fmt.value, count=len(positions))
    return positions


def index_all(
    source: Source, fmt: Format | str | None = None, *, config: IndexConfig | None = None
) -> list[Index]:
    """Build one Index per document of a multi-document YAML stream."""
    text, fmt, config = _prepare(source, fmt, config)
    indexer = Indexer(text, config.duplicate_keys)
    return [indexer.index(root) for root in parse_documents(text, fmt)]


def index_file(
    path: str | Path, fmt: Format | str | None = None, *, config: IndexConfig | None = None
) -> Index:
    """Build the Index of a file.

    Without an explicit fmt, a .json/.yaml/.yml suffix decides the format and
    anything else falls back to the configured one. OSError propagates.
    """
    path = Path(path)
    if fmt is None:
        guessed = Format.from_path(path)
        if guessed is not Format.AUTO:
            fmt = guessed
    logger.debug("Indexing file {path}", path=str(path))
    return index(path.read_bytes(), fmt, config=config)


def index_reader(
    stream: IO, fmt: Format | str | None = None, *, config: IndexConfig | None = None
) -> Index:
    """Build the Index of everything readable from a text or binary stream."""
    return index(stream.read(), fmt, config=config)
