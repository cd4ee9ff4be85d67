# journal_markdown/stages/links.py
"""
Stages for images and links.

Converts:
    ![Alt](diagram.png)        → <img src="diagram.png" alt="Alt">
    [Docs](https://example.com) → <a href="https://example.com">Docs</a>

Images must run before links: "[Alt](diagram.png)" inside the image syntax
is itself a valid link.
"""

import re

IMAGE_PATTERN = re.compile(r"!\[([^\]]*)\]\(([^)]+)\)")
LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")


def convert_images(text: str) -> str:
    """Convert images (![alt](url)) to HTML. Must run before links."""
    return IMAGE_PATTERN.sub(lambda m: f'<img src="{m.group(2)}" alt="{m.group(1)}">', text)


def convert_links(text: str) -> str:
    """Convert links ([text](url)) to HTML."""
    return LINK_PATTERN.sub(lambda m: f'<a href="{m.group(2)}">{m.group(1)}</a>', text)
