# journal_markdown/stages/blockquotes.py
"""
Stage that converts blockquotes, including GitHub-style alert boxes.

Plain quotes:
    > Line 1
    > Line 2
becomes
    <blockquote>Line 1<br>Line 2</blockquote>

Alerts are marked on the first line of the quote:
    > [!WARNING]
    > Disk almost full
becomes
    <p class="warning">ℹ️ <strong>WARNING:</strong> Disk almost full</p>

Supported types: NOTE, TIP, IMPORTANT, WARNING, CAUTION (uppercase only).
Any other [!...] marker is kept as ordinary quote content.
"""

import logging
import re
from typing import List, Optional

logger = logging.getLogger(__name__)

ALERT_TYPES = ("note", "tip", "important", "warning", "caution")

ALERT_MARKER_PATTERN = re.compile(r"^\[!(NOTE|TIP|IMPORTANT|WARNING|CAUTION)\]")


def format_blockquote(lines: List[str], alert_type: Optional[str]) -> str:
    """
    Format collected quote lines as HTML.

    Args:
        lines: Quote content lines, markers already stripped
        alert_type: Lowercase alert type, or None for a plain blockquote

    Returns:
        Alert paragraph or <blockquote> element
    """
    content = "<br>".join(lines)
    if alert_type:
        return f'<p class="{alert_type}">ℹ️ <strong>{alert_type.upper()}:</strong> {content}</p>'
    return f"<blockquote>{content}</blockquote>"


class _BlockquoteRun:
    """Lines and alert type of the quote currently being collected."""

    def __init__(self):
        self.active = False
        self.lines: List[str] = []
        self.alert_type: Optional[str] = None

    def add(self, content: str) -> None:
        if not self.active:
            self.active = True
            content = self._take_alert_marker(content)
            if content is None:
                return
        self.lines.append(content)

    def _take_alert_marker(self, content: str) -> Optional[str]:
        # Only the first line of a run can carry the marker
        match = ALERT_MARKER_PATTERN.match(content)
        if not match:
            return content

        self.alert_type = match.group(1).lower()
        logger.debug(f"Blockquote marked as {self.alert_type} alert")
        remainder = content[match.end():].strip()
        return remainder or None

    def flush(self) -> str:
        html = format_blockquote(self.lines, self.alert_type)
        self.active = False
        self.lines = []
        self.alert_type = None
        return html


def convert_blockquotes(text: str) -> str:
    """Convert blockquotes (> text) to HTML, with special handling for alerts."""
    run = _BlockquoteRun()
    formatted_lines = []

    for line in text.split("\n"):
        if line.startswith(">"):
            run.add(line[1:].strip())
            continue

        if run.active:
            formatted_lines.append(run.flush())
        formatted_lines.append(line)

    if run.active:
        formatted_lines.append(run.flush())

    return "\n".join(formatted_lines)
