"""Table parsing and ASCII rendering.

Docx tables cannot be created through the children-create endpoint, so a
Markdown table is rendered as a fixed-width ASCII grid and emitted as a
plaintext code block::

    | A | BB |           +---+----+
    |---|----|    ->     | A | BB |
    | 1 | 22 |           +---+----+
                         | 1 | 22 |
                         +---+----+
"""

from __future__ import annotations

import re

_ALIGNMENT_CELL_RE = re.compile(r"^[-:]+$")


def parse_table_rows(lines: list[str]) -> list[list[str]]:
    """Split table source lines into rows of trimmed cells.

    Empty cells (including the ones produced by leading and trailing
    pipes) are dropped, lines without any cell are skipped, and a second
    row made only of ``-``/``:`` cells is treated as the alignment row and
    removed.  Column counts are left as they are.
    """
    rows: list[list[str]] = []
    for line in lines:
        cells = [cell.strip() for cell in line.split("|")]
        cells = [cell for cell in cells if cell != ""]
        if cells:
            rows.append(cells)

    if len(rows) >= 2 and all(_ALIGNMENT_CELL_RE.match(cell) for cell in rows[1]):
        del rows[1]

    return rows


def render_table(rows: list[list[str]]) -> str:
    """Render *rows* as an ASCII grid with a rule after the header row.

    Parameters
    ----------
    rows:
        Table cells by row; ``rows[0]`` is the header.  Rows may have
        different lengths.

    Returns
    -------
    str
        ``\\n``-joined lines; empty string when *rows* is empty.
    """
    if not rows:
        return ""

    col_widths: list[int] = []
    for row in rows:
        for j, cell in enumerate(row):
            if j == len(col_widths):
                col_widths.append(0)
            col_widths[j] = max(col_widths[j], len(cell or ""))

    rule = "+" + "+".join("-" * (w + 2) for w in col_widths) + "+"

    lines = [rule]
    for i, row in enumerate(rows):
        cells = [
            " " + (cell or "").ljust(col_widths[j]) + " "
            for j, cell in enumerate(row)
        ]
        lines.append("|" + "|".join(cells) + "|")
        if i == 0:
            lines.append(rule)
    lines.append(rule)
    return "\n".join(lines)
