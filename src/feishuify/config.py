"""Configuration for feishuify.

:class:`FeishuifyConfig` is a plain dataclass that captures every tuneable
knob of the conversion pipeline.  Instances are passed to
:class:`~feishuify.converter.md_to_feishu.MarkdownToFeishuConverter`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

DEFAULT_BATCH_SIZE = 50
"""Maximum number of children the Docx children-create endpoint accepts
per request."""

_UNSUPPORTED_BLOCK_POLICIES = ("skip", "raise")


# ---------------------------------------------------------------------------
# Configuration dataclass
# ---------------------------------------------------------------------------

@dataclass
class FeishuifyConfig:
    """Complete configuration for a feishuify converter.

    Every parameter has a sensible default.

    Parameters
    ----------
    preprocess:
        Normalise line endings and block spacing before parsing.  Disable
        only when the input already went through
        :func:`~feishuify.converter.preprocess.preprocess`.
    unsupported_block_policy:
        What :func:`~feishuify.payload.clean_blocks_for_insert` does with
        block types the children-create endpoint rejects (tables, table
        cells).

        * ``"skip"``: drop the block and record a warning.
        * ``"raise"``: raise :class:`FeishuifyUnsupportedBlockError`.
    batch_size:
        Number of blocks per insert request when payloads are split with
        :func:`~feishuify.utils.chunk.chunk_blocks`.
    metrics:
        Optional :class:`~feishuify.observability.MetricsHook` receiving
        conversion counters and timings.
    debug_dump_nodes:
        Write the parsed semantic nodes as JSON to *stderr*.
    debug_dump_payload:
        Write the Docx block payload as JSON to *stderr*.
    """

    # ── Conversion ──────────────────────────────────────────────────────
    preprocess: bool = True

    # ── Payload ─────────────────────────────────────────────────────────
    unsupported_block_policy: Literal["skip", "raise"] = "skip"

    batch_size: int = DEFAULT_BATCH_SIZE

    # ── Observability ──────────────────────────────────────────────────
    metrics: Any | None = None

    # ── Debug ───────────────────────────────────────────────────────────
    debug_dump_nodes: bool = False

    debug_dump_payload: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.unsupported_block_policy not in _UNSUPPORTED_BLOCK_POLICIES:
            raise ValueError(
                "unsupported_block_policy must be one of "
                f"{_UNSUPPORTED_BLOCK_POLICIES}, got {self.unsupported_block_policy!r}"
            )
        if self.batch_size < 1:
            raise ValueError(f"batch_size must be >= 1, got {self.batch_size}")
