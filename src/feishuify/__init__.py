"""feishuify: Markdown to Feishu/Lark Docx blocks.

Public re-exports
-----------------

* **Pipeline:** :func:`preprocess`, :func:`convert`,
  :class:`MarkdownToFeishuConverter`
* **Configuration:** :class:`FeishuifyConfig`
* **Errors:** Every :class:`FeishuifyError` subclass and :class:`ErrorCode`
* **Models:** Result types, block vocabulary and text elements

Usage::

    from feishuify import MarkdownToFeishuConverter

    result = MarkdownToFeishuConverter().convert("# Hello\\n\\nWorld")
    children = result.to_payload()
"""

from __future__ import annotations

# ── Blocks ──────────────────────────────────────────────────────────────
from feishuify.blocks import (
    BLOCK_TYPE_NAMES,
    SUPPORTED_BLOCK_TYPES,
    UNSUPPORTED_CREATE_TYPES,
    BlockType,
    BulletBlock,
    CodeBlock,
    DividerBlock,
    HeadingBlock,
    Link,
    OrderedBlock,
    OutputBlock,
    QuoteBlock,
    TextBlock,
    TextElement,
    TextRun,
    TextStyle,
)

# ── Configuration ───────────────────────────────────────────────────────
from feishuify.config import FeishuifyConfig

# ── Pipeline ────────────────────────────────────────────────────────────
from feishuify.converter import MarkdownToFeishuConverter, convert, preprocess

# ── Errors ──────────────────────────────────────────────────────────────
from feishuify.errors import (
    ErrorCode,
    FeishuifyConversionError,
    FeishuifyError,
    FeishuifyUnsupportedBlockError,
)

# ── Models ──────────────────────────────────────────────────────────────
from feishuify.models import ConversionResult, ConversionWarning

# ── Payload helpers ─────────────────────────────────────────────────────
from feishuify.payload import clean_blocks_for_insert, extract_image_urls

# ── Public surface ──────────────────────────────────────────────────────

__all__ = [
    # Pipeline
    "preprocess",
    "convert",
    "MarkdownToFeishuConverter",
    # Configuration
    "FeishuifyConfig",
    # Errors
    "FeishuifyError",
    "ErrorCode",
    "FeishuifyConversionError",
    "FeishuifyUnsupportedBlockError",
    # Models
    "ConversionResult",
    "ConversionWarning",
    # Blocks
    "BlockType",
    "BLOCK_TYPE_NAMES",
    "SUPPORTED_BLOCK_TYPES",
    "UNSUPPORTED_CREATE_TYPES",
    "OutputBlock",
    "TextBlock",
    "HeadingBlock",
    "BulletBlock",
    "OrderedBlock",
    "CodeBlock",
    "QuoteBlock",
    "DividerBlock",
    "TextElement",
    "TextRun",
    "TextStyle",
    "Link",
    # Payload helpers
    "clean_blocks_for_insert",
    "extract_image_urls",
]
