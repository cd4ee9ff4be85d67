# journal_markdown/stages/headers.py
"""
Stage that converts ATX headers to HTML heading elements.

Converts:
    # Title        → <h1>Title</h1>
    ###### Small   → <h6>Small</h6>

Seven or more leading # characters are left untouched. Header text is
captured verbatim; emphasis, links and code inside it are converted by the
later stages.
"""

import re

HEADER_PATTERN = re.compile(r"^(#{1,6})\s+(.*)$", re.MULTILINE)


def _replace_header(match):
    level = len(match.group(1))
    return f"<h{level}>{match.group(2)}</h{level}>"


def convert_headers(text: str) -> str:
    """Convert Markdown headers (# -> h1, ## -> h2, ...) to HTML."""
    return HEADER_PATTERN.sub(_replace_header, text)
