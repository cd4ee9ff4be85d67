# journal_markdown/stages/__init__.py

import logging

from .blockquotes import convert_blockquotes
from .code import convert_code_blocks, convert_inline_code
from .emphasis import (
    convert_bold,
    convert_bold_italic,
    convert_highlight,
    convert_italic,
    convert_strikethrough,
    convert_text_formatting,
)
from .headers import convert_headers
from .horizontal_rules import convert_horizontal_rules
from .links import convert_images, convert_links
from .lists import convert_ordered_lists, convert_unordered_lists
from .tables import convert_tables, parse_table

logger = logging.getLogger(__name__)

STAGES = [
    convert_headers,  # Structural elements first
    convert_bold_italic,  # Before bold and italic so *** is not split
    convert_bold,  # Before italic
    convert_italic,  # Lookaround skips leftover doubled delimiters
    convert_strikethrough,
    convert_highlight,
    convert_code_blocks,  # Before inline code so fences are not inline code
    convert_inline_code,
    convert_images,  # Before links: ![alt](url) contains [alt](url)
    convert_links,
    convert_horizontal_rules,
    convert_unordered_lists,
    convert_ordered_lists,
    convert_blockquotes,
    convert_tables,
    # Order matters - each stage rewrites the previous stage's full output
]


def apply_stages(text, stages=None):
    """Apply all stages in order"""
    for stage in STAGES if stages is None else stages:
        text = stage(text)
        logger.debug(f"Applied stage {getattr(stage, '__name__', stage)}")
    return text


__all__ = [
    "STAGES",
    "apply_stages",
    "convert_blockquotes",
    "convert_bold",
    "convert_bold_italic",
    "convert_code_blocks",
    "convert_headers",
    "convert_highlight",
    "convert_horizontal_rules",
    "convert_images",
    "convert_inline_code",
    "convert_italic",
    "convert_links",
    "convert_ordered_lists",
    "convert_strikethrough",
    "convert_tables",
    "convert_text_formatting",
    "convert_unordered_lists",
    "parse_table",
]
