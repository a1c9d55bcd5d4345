"""Full Markdown-to-Docx conversion pipeline.

Stages, each a pure function of the previous stage's output:

1. **Preprocess**: :func:`preprocess` normalises line endings and spacing.
2. **Parse**: :func:`parse_blocks` turns lines into semantic nodes.
3. **Build**: :func:`build_blocks` maps nodes to Docx output blocks and
   collects :class:`ConversionWarning` for every degrade.

:func:`convert` runs stages 2 and 3 on already-preprocessed text.
:class:`MarkdownToFeishuConverter` runs the whole pipeline and wraps the
result in a :class:`ConversionResult`.
"""

from __future__ import annotations

import json
import sys
import time
from typing import Any

from feishuify.blocks import OutputBlock
from feishuify.config import FeishuifyConfig
from feishuify.converter.block_builder import build_blocks
from feishuify.converter.block_parser import parse_blocks
from feishuify.converter.nodes import node_to_dict
from feishuify.converter.preprocess import preprocess
from feishuify.models import ConversionResult, ConversionWarning
from feishuify.observability import NoopMetricsHook, get_logger
from feishuify.payload import clean_blocks_for_insert
from feishuify.utils.chunk import chunk_blocks

log = get_logger("feishuify.converter")


def convert(normalized: str) -> list[OutputBlock]:
    """Convert preprocessed Markdown to Docx output blocks.

    Never raises; empty or whitespace-only input gives an empty list.
    """
    blocks, _ = build_blocks(parse_blocks(normalized))
    return blocks


class MarkdownToFeishuConverter:
    """Convert Markdown text to Docx block payloads.

    Parameters
    ----------
    config:
        Conversion configuration.  Defaults to :class:`FeishuifyConfig()`.

    Examples
    --------
    >>> converter = MarkdownToFeishuConverter()
    >>> result = converter.convert("# Hello\\n\\nWorld")
    >>> [block.block_type for block in result.blocks]
    [3, 2]
    """

    def __init__(self, config: FeishuifyConfig | None = None) -> None:
        self._config = config or FeishuifyConfig()
        self._metrics = self._config.metrics or NoopMetricsHook()

    @property
    def config(self) -> FeishuifyConfig:
        return self._config

    def convert(self, markdown: str) -> ConversionResult:
        """Full pipeline: preprocess -> parse -> build blocks -> collect warnings.

        Parameters
        ----------
        markdown:
            Raw Markdown text to convert.

        Returns
        -------
        ConversionResult
            ``blocks`` in document order and the ``warnings`` raised by
            degrades.
        """
        started = time.perf_counter()

        text = preprocess(markdown) if self._config.preprocess else markdown
        nodes = parse_blocks(text)

        if self._config.debug_dump_nodes:
            print(
                "[feishuify] Parsed nodes:",
                json.dumps([node_to_dict(n) for n in nodes], indent=2, ensure_ascii=False),
                file=sys.stderr,
            )

        blocks, warnings = build_blocks(nodes)
        result = ConversionResult(blocks=blocks, warnings=warnings)

        if self._config.debug_dump_payload:
            print(
                "[feishuify] Docx blocks payload:",
                json.dumps(result.to_payload(), indent=2, ensure_ascii=False),
                file=sys.stderr,
            )

        elapsed_ms = (time.perf_counter() - started) * 1000
        self._metrics.increment("feishuify.conversions_total")
        self._metrics.increment("feishuify.blocks_built_total", len(blocks))
        for warning in warnings:
            self._metrics.increment(
                "feishuify.conversion_warnings_total", tags={"code": warning.code},
            )
        self._metrics.timing("feishuify.conversion_duration_ms", elapsed_ms)

        log.debug(
            "conversion complete",
            extra={"extra_fields": {
                "nodes": len(nodes),
                "blocks": len(blocks),
                "warnings": len(warnings),
                "duration_ms": round(elapsed_ms, 3),
            }},
        )
        return result

    def insert_batches(
        self,
        result: ConversionResult,
    ) -> tuple[list[list[dict[str, Any]]], list[ConversionWarning]]:
        """Turn *result* into payload batches ready for the insert endpoint.

        Applies :func:`clean_blocks_for_insert` with the configured
        ``unsupported_block_policy`` and splits the cleaned payload into
        batches of ``batch_size`` blocks.

        Raises
        ------
        FeishuifyUnsupportedBlockError
            If the policy is ``"raise"`` and an uncreatable block is found.
        """
        cleaned, warnings = clean_blocks_for_insert(
            result.to_payload(), policy=self._config.unsupported_block_policy,
        )
        return chunk_blocks(cleaned, self._config.batch_size), warnings
