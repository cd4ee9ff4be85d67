"""Convert Markdown to HTML for ServiceNow journal fields ([code] blocks)."""

from .config import DEFAULT_OPTIONS, get_conversion_options
from .postprocessors import (
    POSTPROCESSORS,
    apply_postprocessors,
    convert_newlines_outside_pre,
    pretty_print_html,
    wrap_with_code_tags,
)
from .renderer import convert, convert_markdown_to_servicenow
from .stages import (
    STAGES,
    apply_stages,
    convert_blockquotes,
    convert_bold,
    convert_bold_italic,
    convert_code_blocks,
    convert_headers,
    convert_highlight,
    convert_horizontal_rules,
    convert_images,
    convert_inline_code,
    convert_italic,
    convert_links,
    convert_ordered_lists,
    convert_strikethrough,
    convert_tables,
    convert_text_formatting,
    convert_unordered_lists,
    parse_table,
)
from .styles import ALERT_CSS, CODE_CSS, HIGHLIGHT_CSS, TABLE_CSS

__all__ = [
    "ALERT_CSS",
    "CODE_CSS",
    "DEFAULT_OPTIONS",
    "HIGHLIGHT_CSS",
    "POSTPROCESSORS",
    "STAGES",
    "TABLE_CSS",
    "apply_postprocessors",
    "apply_stages",
    "convert",
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
    "convert_markdown_to_servicenow",
    "convert_newlines_outside_pre",
    "convert_ordered_lists",
    "convert_strikethrough",
    "convert_tables",
    "convert_text_formatting",
    "convert_unordered_lists",
    "get_conversion_options",
    "parse_table",
    "pretty_print_html",
    "wrap_with_code_tags",
]
