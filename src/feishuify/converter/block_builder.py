"""Convert semantic nodes to Docx output blocks.

Mapping:

- heading -> heading1/2/3; level 4+ -> text block with one bold run
- paragraph -> text block, inline-styled
- code -> code block with numeric language, content kept verbatim
- quote -> quote block, inline-styled across the joined lines
- divider -> divider
- list -> one bullet or ordered block, one plain run per item
- table -> ASCII rendering inside a plaintext code block; fewer than two
  rows -> dropped

Degrades are reported as :class:`ConversionWarning` and never raise.
"""

from __future__ import annotations

from collections.abc import Callable

from feishuify.blocks import (
    BulletBlock,
    CodeBlock,
    DividerBlock,
    HeadingBlock,
    OrderedBlock,
    OutputBlock,
    QuoteBlock,
    TextBlock,
    TextRun,
    TextStyle,
)
from feishuify.converter.languages import PLAINTEXT, is_known_language, resolve_language
from feishuify.converter.nodes import (
    Code,
    Divider,
    Heading,
    List,
    MarkdownNode,
    Paragraph,
    Quote,
    Table,
)
from feishuify.converter.rich_text import style_inline
from feishuify.converter.tables import render_table
from feishuify.models import ConversionWarning
from feishuify.observability import get_logger

log = get_logger("feishuify.converter")

_MAX_HEADING_LEVEL = 3
_MIN_TABLE_ROWS = 2


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def build_blocks(
    nodes: list[MarkdownNode],
) -> tuple[list[OutputBlock], list[ConversionWarning]]:
    """Convert semantic nodes to Docx output blocks.

    Parameters
    ----------
    nodes:
        Nodes from :func:`~feishuify.converter.block_parser.parse_blocks`.

    Returns
    -------
    tuple[list[OutputBlock], list[ConversionWarning]]
        (blocks, warnings); at most one block per node, in node order.
    """
    ctx = _BuildContext()
    for index, node in enumerate(nodes):
        handler = _NODE_HANDLERS.get(type(node))
        if handler is None:
            ctx.add_warning(
                "UNKNOWN_NODE",
                f"Unknown node type '{type(node).__name__}' was skipped.",
                node_index=index,
            )
            continue
        block = handler(node, ctx)
        if block is not None:
            ctx.blocks.append(block)
    return ctx.blocks, ctx.warnings


class _BuildContext:
    """Mutable accumulator for the block building pass."""

    __slots__ = ("blocks", "warnings")

    def __init__(self) -> None:
        self.blocks: list[OutputBlock] = []
        self.warnings: list[ConversionWarning] = []

    def add_warning(self, code: str, message: str, **context: object) -> None:
        self.warnings.append(ConversionWarning(
            code=code, message=message, context=dict(context),
        ))


# ---------------------------------------------------------------------------
# Block builders
# ---------------------------------------------------------------------------

def _build_heading(node: Heading, ctx: _BuildContext) -> OutputBlock:
    if node.level <= _MAX_HEADING_LEVEL:
        return HeadingBlock(level=max(node.level, 1), elements=style_inline(node.content))

    # Inline markup is not re-parsed here: the raw content becomes one bold run.
    ctx.add_warning(
        "HEADING_DEGRADED",
        f"Heading level {node.level} rendered as bold text.",
        level=node.level,
    )
    return TextBlock(elements=[TextRun(content=node.content, style=TextStyle(bold=True))])


def _build_paragraph(node: Paragraph, ctx: _BuildContext) -> OutputBlock:
    return TextBlock(elements=style_inline(node.content))


def _build_code(node: Code, ctx: _BuildContext) -> OutputBlock:
    if node.language and not is_known_language(node.language):
        ctx.add_warning(
            "UNKNOWN_LANGUAGE",
            f"Unknown code language '{node.language}'; using plain text.",
            language=node.language,
        )
    return CodeBlock(
        elements=[TextRun(content=node.content or "")],
        language=resolve_language(node.language),
    )


def _build_quote(node: Quote, ctx: _BuildContext) -> OutputBlock:
    return QuoteBlock(elements=style_inline(node.content))


def _build_divider(node: Divider, ctx: _BuildContext) -> OutputBlock:
    return DividerBlock()


def _build_list(node: List, ctx: _BuildContext) -> OutputBlock:
    # Item text stays literal; no inline styling for list items.
    elements = [TextRun(content=item.content) for item in node.items]
    if node.ordered:
        return OrderedBlock(elements=elements)
    return BulletBlock(elements=elements)


def _build_table(node: Table, ctx: _BuildContext) -> OutputBlock | None:
    if len(node.rows) < _MIN_TABLE_ROWS:
        ctx.add_warning(
            "TABLE_DROPPED",
            "Table with fewer than two rows was dropped.",
            rows=len(node.rows),
        )
        log.warning(
            "table dropped",
            extra={"extra_fields": {"rows": len(node.rows)}},
        )
        return None

    ctx.add_warning(
        "TABLE_AS_CODE",
        "Table rendered as a plaintext code block.",
        rows=len(node.rows),
        columns=max(len(row) for row in node.rows),
    )
    return CodeBlock(
        elements=[TextRun(content=render_table(node.rows))],
        language=PLAINTEXT,
    )


_NODE_HANDLERS: dict[type, Callable[..., OutputBlock | None]] = {
    Heading: _build_heading,
    Paragraph: _build_paragraph,
    Code: _build_code,
    Quote: _build_quote,
    Divider: _build_divider,
    List: _build_list,
    Table: _build_table,
}
