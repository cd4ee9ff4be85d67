# journal_markdown/stages/horizontal_rules.py

import re

# Three or more of the same character; "-*-" is not a rule
HORIZONTAL_RULE_PATTERN = re.compile(r"^(?:-{3,}|\*{3,}|_{3,})$", re.MULTILINE)


def convert_horizontal_rules(text: str) -> str:
    """Convert horizontal rules (---, *** or ___) to <hr>."""
    return HORIZONTAL_RULE_PATTERN.sub("<hr>", text)
