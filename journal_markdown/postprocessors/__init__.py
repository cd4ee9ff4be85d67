# journal_markdown/postprocessors/__init__.py

from .code_wrapper import collect_css, wrap_with_code_tags, wrap_with_code_tags_default
from .newlines import convert_newlines_default, convert_newlines_outside_pre
from .pretty_print import pretty_print_default, pretty_print_html

POSTPROCESSORS = [
    convert_newlines_default,  # Must see the raw newlines left by the stages
    pretty_print_default,  # Newlines added here must not become <br/>
    wrap_with_code_tags_default,  # Must be last, inspects the finished HTML
    # Order matters - they run sequentially
]


def apply_postprocessors(text, options):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        text = processor(text, options)
    return text


__all__ = [
    "POSTPROCESSORS",
    "apply_postprocessors",
    "collect_css",
    "convert_newlines_outside_pre",
    "pretty_print_html",
    "wrap_with_code_tags",
]
