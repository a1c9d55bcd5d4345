"""Line-based block parser: Markdown text to semantic nodes.

Every line is classified exactly once by :func:`classify_line`; the scanner
then walks the classified lines forward, handing each block start to a
consumer that returns the node it built and the index of the first line it
did not consume.

Precedence at a block start (first match wins):

1. heading        ``^(#{1,6})\\s+(.+)$`` on the trimmed line
2. fenced code    trimmed line starts with ```` ``` ````
3. divider        ``---``, ``***`` or ``___``
4. block quote    trimmed line starts with ``>``
5. table          trimmed line contains ``|``
6. list item      ``^(\\s*)([-*+]|\\d+\\.)\\s+`` on the untrimmed line
7. paragraph      everything else
"""

from __future__ import annotations

import re
from collections.abc import Callable
from enum import Enum

from feishuify.converter.nodes import (
    Code,
    Divider,
    Heading,
    List,
    ListItem,
    MarkdownNode,
    Paragraph,
    Quote,
    Table,
)
from feishuify.converter.tables import parse_table_rows

FENCE = "```"

HEADING_RE = re.compile(r"^(#{1,6})\s+(.+)$")
DIVIDER_RE = re.compile(r"^(---|\*\*\*|___)\s*$")
LIST_ITEM_RE = re.compile(r"^(\s*)([-*+]|\d+\.)\s+")


class LineKind(str, Enum):
    """Classification of a single source line."""

    BLANK = "blank"
    HEADING = "heading"
    FENCE = "fence"
    DIVIDER = "divider"
    QUOTE = "quote"
    TABLE = "table"
    LIST_ITEM = "list_item"
    TEXT = "text"


def classify_line(line: str) -> LineKind:
    """Return the kind of block *line* would start."""
    stripped = line.strip()
    if not stripped:
        return LineKind.BLANK
    if stripped.startswith("#") and HEADING_RE.match(stripped):
        return LineKind.HEADING
    if stripped.startswith(FENCE):
        return LineKind.FENCE
    if DIVIDER_RE.match(stripped):
        return LineKind.DIVIDER
    if stripped.startswith(">"):
        return LineKind.QUOTE
    if "|" in stripped:
        return LineKind.TABLE
    if LIST_ITEM_RE.match(line):
        return LineKind.LIST_ITEM
    return LineKind.TEXT


def parse_blocks(text: str) -> list[MarkdownNode]:
    """Parse *text* into an ordered list of semantic nodes.

    Blank lines between constructs are skipped.  The scan never backtracks
    and every consumer advances by at least one line, so any input
    terminates; an unclosed fence simply runs to the end of the text.
    """
    scanner = _Scanner(text)
    nodes: list[MarkdownNode] = []

    while scanner.pos < len(scanner.lines):
        kind = scanner.kinds[scanner.pos]
        if kind is LineKind.BLANK:
            scanner.pos += 1
            continue
        consumer = _CONSUMERS.get(kind, _consume_paragraph)
        node, scanner.pos = consumer(scanner, scanner.pos)
        nodes.append(node)

    return nodes


class _Scanner:
    """Source lines with their precomputed kinds."""

    __slots__ = ("kinds", "lines", "pos")

    def __init__(self, text: str) -> None:
        self.lines: list[str] = text.split("\n")
        self.kinds: list[LineKind] = [classify_line(line) for line in self.lines]
        self.pos = 0


# ---------------------------------------------------------------------------
# Consumers
# ---------------------------------------------------------------------------

def _consume_heading(sc: _Scanner, i: int) -> tuple[MarkdownNode, int]:
    stripped = sc.lines[i].strip()
    text = stripped.lstrip("#")
    return Heading(level=len(stripped) - len(text), content=text.strip()), i + 1


def _consume_fence(sc: _Scanner, i: int) -> tuple[MarkdownNode, int]:
    info = sc.lines[i].strip()[len(FENCE):].strip()
    j = i + 1
    while j < len(sc.lines) and sc.kinds[j] is not LineKind.FENCE:
        j += 1
    content = "\n".join(sc.lines[i + 1:j])
    # Skip the closing fence when there is one.
    return Code(language=info or None, content=content), min(j + 1, len(sc.lines))


def _consume_divider(sc: _Scanner, i: int) -> tuple[MarkdownNode, int]:
    return Divider(), i + 1


def _consume_quote(sc: _Scanner, i: int) -> tuple[MarkdownNode, int]:
    parts: list[str] = []
    j = i
    while j < len(sc.lines) and sc.kinds[j] is LineKind.QUOTE:
        parts.append(sc.lines[j].strip()[1:].strip())
        j += 1
    return Quote(content="\n".join(parts)), j


def _consume_table(sc: _Scanner, i: int) -> tuple[MarkdownNode, int]:
    j = i + 1
    while j < len(sc.lines) and "|" in sc.lines[j]:
        j += 1
    return Table(rows=parse_table_rows(sc.lines[i:j])), j


def _consume_list(sc: _Scanner, i: int) -> tuple[MarkdownNode, int]:
    base_indent, marker, _ = _split_item(sc.lines[i])
    ordered = marker[:1].isdigit()

    items: list[ListItem] = []
    j = i
    while j < len(sc.lines):
        kind = sc.kinds[j]
        if kind is LineKind.BLANK:
            j += 1
            continue
        # Inside a list any item-shaped line is an item, even one holding "|".
        match = LIST_ITEM_RE.match(sc.lines[j])
        if match is None or len(match.group(1)) < base_indent:
            break
        content = sc.lines[j][match.end():]

        parts = [content]
        j += 1
        # Continuation lines must follow the item directly.
        while (
            j < len(sc.lines)
            and sc.kinds[j] is LineKind.TEXT
            and _indent(sc.lines[j]) >= base_indent
        ):
            parts.append(sc.lines[j].strip())
            j += 1
        items.append(ListItem(content=" ".join(parts)))

    return List(ordered=ordered, items=items), j


def _consume_paragraph(sc: _Scanner, i: int) -> tuple[MarkdownNode, int]:
    j = i + 1
    while j < len(sc.lines) and sc.kinds[j] is LineKind.TEXT:
        j += 1
    return Paragraph(content=" ".join(sc.lines[i:j]).strip()), j


def _indent(line: str) -> int:
    return len(line) - len(line.lstrip())


def _split_item(line: str) -> tuple[int, str, str]:
    """Return (indent, marker, content) of a list item line."""
    match = LIST_ITEM_RE.match(line)
    if match is None:
        return _indent(line), "", line.strip()
    return len(match.group(1)), match.group(2), line[match.end():]


_CONSUMERS: dict[LineKind, Callable[[_Scanner, int], tuple[MarkdownNode, int]]] = {
    LineKind.HEADING: _consume_heading,
    LineKind.FENCE: _consume_fence,
    LineKind.DIVIDER: _consume_divider,
    LineKind.QUOTE: _consume_quote,
    LineKind.TABLE: _consume_table,
    LineKind.LIST_ITEM: _consume_list,
    LineKind.TEXT: _consume_paragraph,
}
