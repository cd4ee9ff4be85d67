# journal_markdown/stages/code.py
"""
Stages for fenced code blocks and inline code.

Fenced blocks must be converted before inline code so the fence backticks
are not read as inline code delimiters. The language tag on the opening
fence is dropped; the block content is kept byte for byte, newlines
included, and later protected from the newline postprocessor.
"""

import re

CODE_BLOCK_PATTERN = re.compile(r"```[a-zA-Z]*\n([\s\S]*?)```")
INLINE_CODE_PATTERN = re.compile(r"`([^`]+)`")


def convert_code_blocks(text: str) -> str:
    """Convert fenced code blocks (```language\\ncode```) to <pre><code>."""
    return CODE_BLOCK_PATTERN.sub(lambda m: f"<pre><code>{m.group(1)}</code></pre>", text)


def convert_inline_code(text: str) -> str:
    """Convert inline code (`code`) to HTML."""
    return INLINE_CODE_PATTERN.sub(lambda m: f"<code>{m.group(1)}</code>", text)
