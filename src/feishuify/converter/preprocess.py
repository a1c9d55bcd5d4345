"""Normalise raw Markdown before block parsing.

The block parser works line by line, so constructs that share a line or
run into each other are separated here first:

* ``\\r\\n`` and ``\\r`` line endings become ``\\n``.
* A fence marker sharing a line with other content is moved onto its own
  line.  The info string of an opening fence stays with it.
* Outside fenced code, whitespace-only lines become empty, runs of blank
  lines collapse to a single blank line, and a heading directly followed
  by text gets a blank line after it.

Fenced code bodies are copied verbatim.  :func:`preprocess` is idempotent.
"""

from __future__ import annotations

from feishuify.converter.block_parser import FENCE, HEADING_RE


def preprocess(raw: str) -> str:
    """Return *raw* with normalised line endings and block spacing."""
    text = raw.replace("\r\n", "\n").replace("\r", "\n")
    lines = _split_fences(text.split("\n"))

    out: list[str] = []
    prev_blank = False
    for idx, (line, verbatim) in enumerate(lines):
        if verbatim:
            out.append(line)
            prev_blank = False
            continue

        if not line.strip():
            if not prev_blank:
                out.append("")
            prev_blank = True
            continue

        out.append(line)
        prev_blank = False

        if HEADING_RE.match(line.strip()) and idx + 1 < len(lines):
            following = lines[idx + 1][0]
            if following.strip():
                out.append("")
                prev_blank = True

    return "\n".join(out)


def _split_fences(lines: list[str]) -> list[tuple[str, bool]]:
    """Put every fence marker on its own line.

    Returns ``(line, verbatim)`` pairs where *verbatim* marks lines inside
    a fenced body.
    """
    result: list[tuple[str, bool]] = []
    in_fence = False

    for line in lines:
        rest = line
        while True:
            idx = rest.find(FENCE)
            if idx == -1:
                result.append((rest, in_fence))
                break

            head = rest[:idx]
            if head.strip():
                result.append((head.rstrip(), in_fence))
                rest = rest[idx:]
                continue

            tail = rest[idx + len(FENCE):]
            if in_fence:
                # Closing fence; whatever follows goes to the next line.
                in_fence = False
                if tail.strip():
                    result.append((rest[:idx + len(FENCE)], False))
                    rest = tail.lstrip()
                    continue
                result.append((rest, False))
                break

            # Opening fence; the info string ends at a second marker.
            in_fence = True
            inner = tail.find(FENCE)
            if inner == -1:
                result.append((rest, False))
                break
            result.append((rest[:idx + len(FENCE) + inner].rstrip(), False))
            rest = tail[inner:]

    return result
