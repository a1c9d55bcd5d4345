"""Semantic nodes produced by the block parser.

Each node is a small frozen dataclass; :data:`MarkdownNode` is the closed
union the block builder dispatches on.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True)
class Heading:
    level: int
    content: str


@dataclass(frozen=True)
class Paragraph:
    content: str


@dataclass(frozen=True)
class Code:
    """Fenced code.  ``content`` keeps its internal newlines."""

    language: str | None
    content: str


@dataclass(frozen=True)
class Quote:
    """Block quote; source lines are newline-joined into ``content``."""

    content: str


@dataclass(frozen=True)
class Divider:
    pass


@dataclass(frozen=True)
class ListItem:
    content: str


@dataclass(frozen=True)
class List:
    """A flat list.  Indented items are siblings, never children."""

    ordered: bool
    items: list[ListItem] = field(default_factory=list)


@dataclass(frozen=True)
class Table:
    """Table cells by row; ``rows[0]`` is the header."""

    rows: list[list[str]] = field(default_factory=list)


MarkdownNode = Heading | Paragraph | Code | Quote | Divider | List | Table


def node_to_dict(node: MarkdownNode) -> dict[str, Any]:
    """Serialise *node* with a ``type`` tag, for debug dumps."""
    return {"type": type(node).__name__.lower(), **asdict(node)}
