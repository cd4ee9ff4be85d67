# journal_markdown/stages/tables.py
"""
Stage that converts pipe tables to styled HTML tables.

Expected structure:
    | Col 1 | Col 2 |
    |-------|-------|
    | A     | B     |

Output:
    <table class="tg"><thead><tr><th class="tg-0pky">Col 1</th>...</tr></thead>
    <tbody><tr><td class="tg-0pky">A</td>...</tr></tbody></table>

(shown wrapped; the real output is a single line)

A table block is a run of consecutive lines that each start and end with
"|". The block is found with a forward line scan rather than a regex so
adversarial input cannot trigger catastrophic backtracking.

The second line must be a separator row: every cell empty or made of dashes
only. Alignment colons (":-:") are not supported, and a block whose
separator row fails this check is passed through untouched.
"""

import logging
import re
from typing import List

logger = logging.getLogger(__name__)

SEPARATOR_CELL_PATTERN = re.compile(r"-+")

TABLE_CLASS = "tg"
CELL_CLASS = "tg-0pky"


def _is_table_line(line: str) -> bool:
    return len(line) >= 2 and line.startswith("|") and line.endswith("|")


def _split_cells(row: str) -> List[str]:
    # Leading and trailing "|" produce empty outer cells
    return [cell.strip() for cell in row.split("|")[1:-1]]


def _is_valid_separator(cells: List[str]) -> bool:
    return all(cell == "" or SEPARATOR_CELL_PATTERN.fullmatch(cell) for cell in cells)


def parse_table(table_text: str) -> str:
    """
    Parse a table block and return an HTML table, or the input if invalid.

    Args:
        table_text: Consecutive pipe-delimited lines, optionally ending in "\\n"

    Returns:
        HTML table, or table_text unchanged when it has fewer than two lines
        or an invalid separator row
    """
    table_lines = table_text.strip().split("\n")
    if len(table_lines) < 2:
        return table_text

    headers = _split_cells(table_lines[0])
    separators = _split_cells(table_lines[1])

    if not _is_valid_separator(separators):
        logger.debug(f"Invalid table separator row {table_lines[1]!r}, leaving block unchanged")
        return table_text

    html = f'<table class="{TABLE_CLASS}"><thead><tr>'
    for header in headers:
        html += f'<th class="{CELL_CLASS}">{header}</th>'
    html += "</tr></thead><tbody>"

    for row in table_lines[2:]:
        if not row.strip():
            continue
        html += "<tr>"
        for cell in _split_cells(row):
            html += f'<td class="{CELL_CLASS}">{cell}</td>'
        html += "</tr>"

    html += "</tbody></table>"
    return html


def convert_tables(text: str) -> str:
    """
    Convert Markdown tables to HTML tables.

    A converted block also consumes the newline ending its last line, so
    the following text starts right after </table>. Blocks that fail
    validation are emitted exactly as found, newline included.
    """
    lines = text.split("\n")
    last = len(lines) - 1
    parts = []

    i = 0
    while i <= last:
        if not _is_table_line(lines[i]):
            parts.append(lines[i] if i == last else lines[i] + "\n")
            i += 1
            continue

        end = i
        while end <= last and _is_table_line(lines[end]):
            end += 1

        block = "\n".join(lines[i:end])
        if end <= last:
            block += "\n"
        parts.append(parse_table(block))
        i = end

    return "".join(parts)
