"""Feishu Docx block vocabulary.

The Docx ``documentBlockChildren.create`` endpoint identifies every block by
a numeric ``block_type``.  This module holds the static lookup tables for
those ids, the inline text elements a block carries, and one dataclass per
block variant the converter can emit.

Emitted block shapes::

    {"block_type": 2, "text": {"elements": [...]}}
    {"block_type": 3, "heading1": {"elements": [...]}}
    {"block_type": 14, "code": {"elements": [...], "style": {"language": 76}}}
    {"block_type": 22, "divider": {}}

A text element is one of::

    {"text_run": {"content": "hello", "style": {"bold": true}}}
    {"link": {"url": "https://...", "content": "label"}}
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import IntEnum
from types import MappingProxyType
from typing import Any, ClassVar

# ---------------------------------------------------------------------------
# Block type ids
# ---------------------------------------------------------------------------

class BlockType(IntEnum):
    """Docx block type ids used by the converter and the payload helpers."""

    PAGE = 1
    TEXT = 2
    HEADING1 = 3
    HEADING2 = 4
    HEADING3 = 5
    BULLET = 12
    ORDERED = 13
    CODE = 14
    QUOTE = 15
    TODO = 16
    DIVIDER = 22
    IMAGE = 23
    TABLE = 24
    TABLE_CELL = 25


BLOCK_TYPE_NAMES: MappingProxyType[int, str] = MappingProxyType({
    1: "Page",
    2: "Text",
    3: "Heading1",
    4: "Heading2",
    5: "Heading3",
    6: "Heading4",
    7: "Heading5",
    8: "Heading6",
    9: "Heading7",
    10: "Heading8",
    11: "Heading9",
    12: "Bullet",
    13: "Ordered",
    14: "Code",
    15: "Quote",
    16: "Todo",
    17: "Callout",
    18: "ChatCard",
    19: "Diagram",
    20: "File",
    22: "Divider",
    23: "Image",
    24: "Table",
    25: "TableCell",
    26: "Iframe",
    27: "Sheet",
    31: "View",
})
"""Display names for every Docx block type id (diagnostics only)."""

SUPPORTED_BLOCK_TYPES: frozenset[int] = frozenset({
    BlockType.TEXT,
    BlockType.HEADING1,
    BlockType.HEADING2,
    BlockType.HEADING3,
    BlockType.BULLET,
    BlockType.ORDERED,
    BlockType.CODE,
    BlockType.QUOTE,
    BlockType.TODO,
    BlockType.DIVIDER,
    BlockType.IMAGE,
})
"""Block types the children-create endpoint accepts."""

UNSUPPORTED_CREATE_TYPES: frozenset[int] = frozenset({
    BlockType.TABLE,
    BlockType.TABLE_CELL,
})
"""Block types that exist in documents but cannot be created via the API."""


def block_type_name(block_type: int) -> str:
    """Return the display name for *block_type*, or ``type_<id>``."""
    return BLOCK_TYPE_NAMES.get(block_type, f"type_{block_type}")


# ---------------------------------------------------------------------------
# Text elements
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TextStyle:
    """Inline style flags of a text run.  ``None`` means "not set"."""

    bold: bool | None = None
    italic: bool | None = None
    underline: bool | None = None
    strikethrough: bool | None = None
    code: bool | None = None

    def to_dict(self) -> dict[str, bool]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass(frozen=True)
class TextRun:
    """A span of text with optional style."""

    content: str
    style: TextStyle | None = None

    def to_dict(self) -> dict[str, Any]:
        run: dict[str, Any] = {"content": self.content}
        if self.style is not None:
            style = self.style.to_dict()
            if style:
                run["style"] = style
        return {"text_run": run}


@dataclass(frozen=True)
class Link:
    """A hyperlink element."""

    url: str
    content: str | None = None

    def to_dict(self) -> dict[str, Any]:
        link: dict[str, Any] = {"url": self.url}
        if self.content is not None:
            link["content"] = self.content
        return {"link": link}


TextElement = TextRun | Link


# ---------------------------------------------------------------------------
# Output blocks
# ---------------------------------------------------------------------------

@dataclass
class _ElementsBlock:
    """Shared shape of every block that carries a list of text elements."""

    elements: list[TextElement] = field(default_factory=list)

    block_type: ClassVar[int]
    payload_key: ClassVar[str]

    def _body(self) -> dict[str, Any]:
        return {"elements": [el.to_dict() for el in self.elements]}

    def to_dict(self) -> dict[str, Any]:
        return {"block_type": int(self.block_type), self.payload_key: self._body()}


@dataclass
class TextBlock(_ElementsBlock):
    block_type: ClassVar[int] = BlockType.TEXT
    payload_key: ClassVar[str] = "text"


@dataclass
class BulletBlock(_ElementsBlock):
    block_type: ClassVar[int] = BlockType.BULLET
    payload_key: ClassVar[str] = "bullet"


@dataclass
class OrderedBlock(_ElementsBlock):
    block_type: ClassVar[int] = BlockType.ORDERED
    payload_key: ClassVar[str] = "ordered"


@dataclass
class QuoteBlock(_ElementsBlock):
    block_type: ClassVar[int] = BlockType.QUOTE
    payload_key: ClassVar[str] = "quote"


@dataclass
class HeadingBlock:
    """Heading of level 1-3.  Deeper levels are degraded by the builder."""

    level: int
    elements: list[TextElement] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.level not in (1, 2, 3):
            raise ValueError(f"heading level must be 1, 2 or 3, got {self.level}")

    @property
    def block_type(self) -> int:
        return BlockType.HEADING1 + self.level - 1

    @property
    def payload_key(self) -> str:
        return f"heading{self.level}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "block_type": int(self.block_type),
            self.payload_key: {"elements": [el.to_dict() for el in self.elements]},
        }


@dataclass
class CodeBlock(_ElementsBlock):
    """Fenced code; ``language`` is the numeric Docx language code."""

    language: int = 0

    block_type: ClassVar[int] = BlockType.CODE
    payload_key: ClassVar[str] = "code"

    def _body(self) -> dict[str, Any]:
        body = super()._body()
        body["style"] = {"language": self.language}
        return body


@dataclass
class DividerBlock:
    block_type: ClassVar[int] = BlockType.DIVIDER
    payload_key: ClassVar[str] = "divider"

    def to_dict(self) -> dict[str, Any]:
        return {"block_type": int(self.block_type), "divider": {}}


OutputBlock = (
    TextBlock
    | HeadingBlock
    | BulletBlock
    | OrderedBlock
    | CodeBlock
    | QuoteBlock
    | DividerBlock
)
