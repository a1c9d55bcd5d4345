"""Markdown to Feishu Docx conversion pipeline.

Public API:

- :func:`preprocess`: normalise raw Markdown.
- :func:`convert`: preprocessed Markdown to output blocks.
- :class:`MarkdownToFeishuConverter`: full pipeline with warnings.
- :func:`parse_blocks`: lines to semantic nodes.
- :func:`build_blocks`: semantic nodes to output blocks.
- :func:`style_inline`: inline span to text elements.
- :func:`render_table`: table rows to an ASCII grid.
- :func:`resolve_language`: fence tag to Docx language code.
"""

from feishuify.converter.block_builder import build_blocks
from feishuify.converter.block_parser import parse_blocks
from feishuify.converter.languages import resolve_language
from feishuify.converter.md_to_feishu import MarkdownToFeishuConverter, convert
from feishuify.converter.preprocess import preprocess
from feishuify.converter.rich_text import style_inline
from feishuify.converter.tables import render_table

__all__ = [
    "MarkdownToFeishuConverter",
    "build_blocks",
    "convert",
    "parse_blocks",
    "preprocess",
    "render_table",
    "resolve_language",
    "style_inline",
]
