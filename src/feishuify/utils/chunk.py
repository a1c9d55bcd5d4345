"""Split block payloads into insert-sized batches."""

from __future__ import annotations

from typing import Any

from feishuify.config import DEFAULT_BATCH_SIZE


def chunk_blocks(
    blocks: list[dict[str, Any]],
    size: int = DEFAULT_BATCH_SIZE,
) -> list[list[dict[str, Any]]]:
    """Group *blocks* into consecutive batches of at most *size* items.

    Order is preserved and only the last batch may be short.  No input
    means no batches: ``chunk_blocks([])`` is ``[]``.

    Raises
    ------
    ValueError
        If *size* is less than 1.

    Examples
    --------
    >>> [len(batch) for batch in chunk_blocks([{"block_type": 2}] * 120)]
    [50, 50, 20]
    """
    if size < 1:
        raise ValueError(f"size must be >= 1, got {size}")
    return [blocks[start:start + size] for start in range(0, len(blocks), size)]
