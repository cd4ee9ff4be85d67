# journal_markdown/stages/lists.py
"""
Stages that convert flat Markdown lists to HTML lists.

Lines are scanned one at a time. A line carrying the item marker is
stripped of it and buffered; the first line without the marker (or the end
of input) closes the run:

    - Item 1
    - Item 2
    after

becomes

    <ul><li>Item 1</li><li>Item 2</li></ul>
    after

Ordered items ("1. ", "42. ") lose their number; the browser numbers them.
Nested lists are not supported: an indented item is not a list line, so it
closes the run and is left as plain text.
"""

import re
from typing import List

UNORDERED_ITEM_PATTERN = re.compile(r"^[-*]\s+")
ORDERED_ITEM_PATTERN = re.compile(r"^\d+\.\s+")


class _ListRun:
    """Items of the list currently being collected."""

    def __init__(self, wrapper_tag: str):
        self.wrapper_tag = wrapper_tag
        self.active = False
        self.items: List[str] = []

    def add(self, item: str) -> None:
        self.active = True
        self.items.append(item)

    def flush(self) -> str:
        html = "".join(f"<li>{item}</li>" for item in self.items)
        self.items = []
        self.active = False
        return f"<{self.wrapper_tag}>{html}</{self.wrapper_tag}>"


def convert_list(text: str, pattern: re.Pattern, wrapper_tag: str) -> str:
    """
    Convert runs of lines matching an item marker into one HTML list.

    Args:
        text: Text to scan line by line
        pattern: Compiled item marker, anchored at the start of the line
        wrapper_tag: "ul" or "ol"

    Returns:
        Text with every run of item lines replaced by a single list element
    """
    run = _ListRun(wrapper_tag)
    formatted_lines = []

    for line in text.split("\n"):
        if pattern.match(line):
            run.add(pattern.sub("", line, count=1))
            continue

        if run.active:
            formatted_lines.append(run.flush())
        formatted_lines.append(line)

    if run.active:
        formatted_lines.append(run.flush())

    return "\n".join(formatted_lines)


def convert_unordered_lists(text: str) -> str:
    """Convert unordered lists (- item or * item) to HTML."""
    return convert_list(text, UNORDERED_ITEM_PATTERN, "ul")


def convert_ordered_lists(text: str) -> str:
    """Convert ordered lists (1. item) to HTML."""
    return convert_list(text, ORDERED_ITEM_PATTERN, "ol")
