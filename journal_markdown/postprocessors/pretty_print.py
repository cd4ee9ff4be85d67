# journal_markdown/postprocessors/pretty_print.py
"""
Postprocessor that adds newlines after structural tags for readability.

Purely cosmetic: only "\n" characters are inserted, so tag nesting and text
content are unchanged. A newline is added after:
- </h1> .. </h6>, </ul>, </ol>, </blockquote>, </pre>
- every <br> / <br/> and <hr> / <hr/>
- every <li> and </li>
"""

import re

STRUCTURAL_CLOSE_PATTERN = re.compile(r"</h[1-6]>|</ul>|</ol>|</blockquote>|</pre>")
LINE_BREAK_PATTERN = re.compile(r"<br/?>")
HORIZONTAL_RULE_PATTERN = re.compile(r"<hr/?>")
LIST_ITEM_PATTERN = re.compile(r"</?li>")


def pretty_print_html(text: str) -> str:
    """Add newlines after structural HTML tags for readability."""
    for pattern in (
        STRUCTURAL_CLOSE_PATTERN,
        LINE_BREAK_PATTERN,
        HORIZONTAL_RULE_PATTERN,
        LIST_ITEM_PATTERN,
    ):
        text = pattern.sub(lambda m: m.group(0) + "\n", text)
    return text


def pretty_print_default(text: str, options: dict) -> str:
    """
    Default configuration for pretty_print_html.

    Skipped when the skip_pretty_print option is set.
    """
    if options.get("skip_pretty_print"):
        return text
    return pretty_print_html(text)
