"""Build Docx text elements from a flat Markdown span.

Only two inline constructs are realised, in this order:

1. Links ``[label](url)`` become :class:`Link` elements.
2. Bold ``**text**`` inside the spans between links becomes a
   :class:`TextRun` with ``style.bold``.

Everything else, including ``*italic*`` and backtick code spans, is kept
as literal text.  ``"see [docs](https://x) for **more**"`` becomes::

    TextRun("see "), Link(url="https://x", content="docs"),
    TextRun(" for "), TextRun("more", style=TextStyle(bold=True))
"""

from __future__ import annotations

import re

from feishuify.blocks import Link, TextElement, TextRun, TextStyle

_LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
_BOLD_RE = re.compile(r"\*\*([^*]+)\*\*")

_BOLD = TextStyle(bold=True)


def style_inline(text: str) -> list[TextElement]:
    """Convert *text* to an ordered list of text and link elements.

    Never returns an empty list: input that yields no element (the empty
    string) becomes a single unstyled run of *text*.
    """
    elements: list[TextElement] = []
    last = 0

    for match in _LINK_RE.finditer(text):
        if match.start() > last:
            elements.extend(_style_plain(text[last:match.start()]))
        elements.append(Link(url=match.group(2), content=match.group(1)))
        last = match.end()

    if last < len(text):
        elements.extend(_style_plain(text[last:]))

    if not elements:
        elements.append(TextRun(content=text))
    return elements


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _style_plain(text: str) -> list[TextElement]:
    """Split a link-free span on ``**bold**`` markers."""
    elements: list[TextElement] = []
    last = 0

    for match in _BOLD_RE.finditer(text):
        if match.start() > last:
            elements.append(TextRun(content=text[last:match.start()]))
        elements.append(TextRun(content=match.group(1), style=_BOLD))
        last = match.end()

    if last < len(text):
        elements.append(TextRun(content=text[last:]))

    if not elements:
        elements.append(TextRun(content=text))
    return elements
