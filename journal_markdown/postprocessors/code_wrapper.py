# journal_markdown/postprocessors/code_wrapper.py
"""
Postprocessor that wraps the converted HTML for the journal field.

The journal renders the content of [code]...[/code] as literal HTML. CSS is
only prepended for features that actually appear in the output:

    code       any <code> element
    highlight  any <span class="highlight">
    alerts     any class="note|tip|important|warning|caution"
    table      any <table class="tg">

Selected blocks are concatenated in that order and separated from the body
by one blank line.
"""

import logging
import re

from ..styles import ALERT_CSS, CODE_CSS, HIGHLIGHT_CSS, TABLE_CSS

logger = logging.getLogger(__name__)

ALERT_CLASS_PATTERN = re.compile(r'class="(note|tip|important|warning|caution)"')


def collect_css(text: str) -> str:
    """
    Return the CSS blocks needed by the features present in text.

    Args:
        text: Converted HTML

    Returns:
        Concatenated <style> blocks, or "" if no feature needs styling
    """
    blocks = []
    if "<code>" in text:
        blocks.append(("code", CODE_CSS))
    if '<span class="highlight">' in text:
        blocks.append(("highlight", HIGHLIGHT_CSS))
    if ALERT_CLASS_PATTERN.search(text):
        blocks.append(("alert", ALERT_CSS))
    if '<table class="tg">' in text:
        blocks.append(("table", TABLE_CSS))

    if blocks:
        logger.debug(f"Adding CSS for: {', '.join(name for name, _ in blocks)}")
    return "".join(css for _, css in blocks)


def wrap_with_code_tags(text: str) -> str:
    """Wrap output in [code] tags and add CSS styles if needed."""
    css = collect_css(text)
    if css:
        text = css + "\n" + text
    return f"[code]{text}[/code]"


def wrap_with_code_tags_default(text: str, options: dict) -> str:
    """
    Default configuration for wrap_with_code_tags.

    Skipped when the skip_code_tags option is set; the bare fragment then
    carries no CSS either.
    """
    if options.get("skip_code_tags"):
        return text
    return wrap_with_code_tags(text)
