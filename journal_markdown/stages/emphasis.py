# journal_markdown/stages/emphasis.py
"""
Stages for inline text formatting.

Bold-italic must run before bold, and bold before italic: the shorter
delimiters would otherwise consume part of a longer sequence. Italic uses
negative lookaround so a lone * or _ left next to another one is never
treated as single emphasis.

    ***text*** / ___text___  → <strong><em>text</em></strong>
    **text** / __text__      → <strong>text</strong>
    *text* / _text_          → <em>text</em>
    ~~text~~                 → <strike>text</strike>
    ==text==                 → <span class="highlight">text</span>
"""

import re

BOLD_ITALIC_STAR_PATTERN = re.compile(r"\*\*\*(.*?)\*\*\*")
BOLD_ITALIC_UNDERSCORE_PATTERN = re.compile(r"___(.*?)___")

BOLD_STAR_PATTERN = re.compile(r"\*\*(.*?)\*\*")
BOLD_UNDERSCORE_PATTERN = re.compile(r"__(.*?)__")

ITALIC_STAR_PATTERN = re.compile(r"(?<!\*)\*([^*]+)\*(?!\*)")
ITALIC_UNDERSCORE_PATTERN = re.compile(r"(?<!_)_([^_]+)_(?!_)")

STRIKETHROUGH_PATTERN = re.compile(r"~~(.*?)~~")
HIGHLIGHT_PATTERN = re.compile(r"==(.*?)==")


def convert_bold_italic(text: str) -> str:
    """Convert bold+italic (***text*** or ___text___) to HTML."""
    text = BOLD_ITALIC_STAR_PATTERN.sub(r"<strong><em>\1</em></strong>", text)
    text = BOLD_ITALIC_UNDERSCORE_PATTERN.sub(r"<strong><em>\1</em></strong>", text)
    return text


def convert_bold(text: str) -> str:
    """Convert bold (**text** or __text__) to HTML."""
    text = BOLD_STAR_PATTERN.sub(r"<strong>\1</strong>", text)
    text = BOLD_UNDERSCORE_PATTERN.sub(r"<strong>\1</strong>", text)
    return text


def convert_italic(text: str) -> str:
    """Convert italic (*text* or _text_) to HTML."""
    text = ITALIC_STAR_PATTERN.sub(r"<em>\1</em>", text)
    text = ITALIC_UNDERSCORE_PATTERN.sub(r"<em>\1</em>", text)
    return text


def convert_strikethrough(text: str) -> str:
    """Convert strikethrough (~~text~~) to HTML."""
    return STRIKETHROUGH_PATTERN.sub(r"<strike>\1</strike>", text)


def convert_highlight(text: str) -> str:
    """Convert highlight (==text==) to a highlight span."""
    return HIGHLIGHT_PATTERN.sub(r'<span class="highlight">\1</span>', text)


def convert_text_formatting(text: str) -> str:
    """
    Apply all text formatting stages in pipeline order.

    Convenience for callers composing their own pipeline; the default
    pipeline lists the individual stages instead.
    """
    text = convert_bold_italic(text)
    text = convert_bold(text)
    text = convert_italic(text)
    text = convert_strikethrough(text)
    text = convert_highlight(text)
    return text
