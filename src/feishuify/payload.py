"""Helpers for preparing converted blocks for the Docx insert endpoint.

These work on plain payload dicts (as returned by
:meth:`ConversionResult.to_payload` or read back from a document) and never
touch the network.
"""

from __future__ import annotations

import re
from typing import Any, Literal

from feishuify.blocks import UNSUPPORTED_CREATE_TYPES, block_type_name
from feishuify.errors import FeishuifyUnsupportedBlockError
from feishuify.models import ConversionWarning

# Keys the API sets on returned blocks and rejects on create.
READ_ONLY_KEYS: frozenset[str] = frozenset({
    "block_id",
    "parent_id",
    "children",
    "document_id",
})

_IMAGE_RE = re.compile(r"!\[[^\]]*\]\(([^)]+)\)")


def clean_blocks_for_insert(
    blocks: list[dict[str, Any]],
    policy: Literal["skip", "raise"] = "skip",
) -> tuple[list[dict[str, Any]], list[ConversionWarning]]:
    """Strip read-only keys and drop block types that cannot be created.

    Parameters
    ----------
    blocks:
        Docx block payload dicts.  They are not modified.
    policy:
        ``"skip"`` drops uncreatable blocks (tables, table cells) with an
        ``UNSUPPORTED_BLOCK`` warning; ``"raise"`` raises instead.

    Returns
    -------
    tuple[list[dict], list[ConversionWarning]]
        (cleaned blocks, warnings)

    Raises
    ------
    FeishuifyUnsupportedBlockError
        If *policy* is ``"raise"`` and an uncreatable block is found.
    """
    cleaned: list[dict[str, Any]] = []
    warnings: list[ConversionWarning] = []

    for index, block in enumerate(blocks):
        block_type = block.get("block_type")
        if block_type in UNSUPPORTED_CREATE_TYPES:
            name = block_type_name(block_type)
            context = {"block_type": block_type, "block_type_name": name, "index": index}
            if policy == "raise":
                raise FeishuifyUnsupportedBlockError(
                    message=f"Block type {name} cannot be created via the API.",
                    context=context,
                )
            warnings.append(ConversionWarning(
                code="UNSUPPORTED_BLOCK",
                message=f"Skipped unsupported block type: {name}",
                context=context,
            ))
            continue

        cleaned.append({k: v for k, v in block.items() if k not in READ_ONLY_KEYS})

    return cleaned, warnings


def extract_image_urls(markdown: str) -> list[str]:
    """Return the remote ``![alt](url)`` image URLs in *markdown*, in order.

    Only ``http://`` and ``https://`` URLs are returned; local paths and
    data URIs are ignored.
    """
    urls: list[str] = []
    for match in _IMAGE_RE.finditer(markdown):
        url = match.group(1).strip()
        if url.startswith(("http://", "https://")):
            urls.append(url)
    return urls
