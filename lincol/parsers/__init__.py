"""Parser collaborators: source text -> positioned node tree.

The format is decided once, at the entry point, and dispatched here. Everything
downstream works on lincol.nodes only.
"""

from enum import Enum
from pathlib import Path

from ..nodes import Node
from .json_parser import JsonNodeParser
from .yaml_parser import PositionLoader, YamlNodeParser


class Format(str, Enum):
    """Source format of a document."""

    JSON = "json"
    YAML = "yaml"
    AUTO = "auto"

    @classmethod
    def coerce(cls, value: "Format | str") -> "Format":
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())

    @classmethod
    def from_path(cls, path: str | Path) -> "Format":
        """Guess the format from a file suffix, AUTO when unknown."""
        return _SUFFIXES.get(Path(path).suffix.lower(), cls.AUTO)


_SUFFIXES = {
    ".json": Format.JSON,
    ".yaml": Format.YAML,
    ".yml": Format.YAML,
}


def detect_format(text: str) -> Format:
    """JSON when the first significant character opens an object or array."""
    head = text.lstrip(" \t\r\n\ufeff")[:1]
    return Format.JSON if head in ("{", "[") else Format.YAML


def resolve_format(text: str, fmt: Format | str) -> Format:
    fmt = Format.coerce(fmt)
    if fmt is Format.AUTO:
        return detect_format(text)
    return fmt


_json_parser = JsonNodeParser()
_yaml_parser = YamlNodeParser()


def parse_document(text: str, fmt: Format | str = Format.AUTO) -> Node | None:
    """Parse a single document. None means the YAML source was empty."""
    if resolve_format(text, fmt) is Format.JSON:
        return _json_parser.parse(text)
    return _yaml_parser.parse(text)


def parse_documents(text: str, fmt: Format | str = Format.AUTO) -> list[Node]:
    """Parse every document of the source. JSON always holds exactly one."""
    if resolve_format(text, fmt) is Format.JSON:
        return [_json_parser.parse(text)]
    return _yaml_parser.parse_all(text)


__all__ = [
    "Format",
    "JsonNodeParser",
    "PositionLoader",
    "YamlNodeParser",
    "detect_format",
    "parse_document",
    "parse_documents",
    "resolve_format",
]
