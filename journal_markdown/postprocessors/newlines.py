# journal_markdown/postprocessors/newlines.py
"""
Postprocessor that turns the remaining raw newlines into line breaks.

The journal field ignores bare newlines inside [code] blocks, so every
newline outside preformatted code becomes <br/>. Newlines inside
<pre><code>...</code></pre> regions are kept as they are. Headers already end
the line, so a <br/> directly after </h1>..</h6> is dropped.
"""

import re

PRE_BLOCK_PATTERN = re.compile(r"(<pre><code>[\s\S]*?</code></pre>)")
HEADER_BREAK_PATTERN = re.compile(r"(/h[1-6]>)<br/>")


def convert_newlines_outside_pre(text: str) -> str:
    """Convert newlines to <br/> except inside <pre> blocks and after headers."""
    result = []

    for part in PRE_BLOCK_PATTERN.split(text):
        if part.startswith("<pre><code>"):
            result.append(part)
            continue
        converted = part.replace("\n", "<br/>")
        converted = HEADER_BREAK_PATTERN.sub(r"\1", converted)
        result.append(converted)

    return "".join(result)


def convert_newlines_default(text: str, options: dict) -> str:
    """
    Default configuration for convert_newlines_outside_pre.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return convert_newlines_outside_pre(text)
