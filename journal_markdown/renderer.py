# journal_markdown/renderer.py

from .config import get_conversion_options
from .postprocessors import apply_postprocessors
from .stages import apply_stages


def convert(markdown_text, options=None, **overrides):
    """
    Convert Markdown text to ServiceNow journal format.

    Runs every stage in STAGES, then the postprocessors (newlines, pretty
    print, [code] wrapper). Never raises for string input: constructs that
    do not parse are passed through unchanged.

    Args:
        markdown_text: Input Markdown text (None is treated as empty)
        options: Optional dict with skip_code_tags / skip_pretty_print
        **overrides: The same options as keyword arguments

    Returns:
        Formatted text for ServiceNow journal fields
    """
    options = get_conversion_options(options, **overrides)

    text = markdown_text or ""

    # Markdown constructs, in the fixed stage order
    text = apply_stages(text)

    # Line breaks, pretty printing and the output wrapper
    text = apply_postprocessors(text, options)

    return text


# Name used by existing journal integrations
convert_markdown_to_servicenow = convert
