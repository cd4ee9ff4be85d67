# journal_markdown/config.py

import logging

logger = logging.getLogger(__name__)

DEFAULT_OPTIONS = {
    # Return the bare HTML fragment instead of wrapping it in [code]...[/code]
    "skip_code_tags": False,
    # Leave out the readability newlines inserted after structural tags
    "skip_pretty_print": False,
}


def get_conversion_options(options=None, **overrides):
    """
    Options for a single conversion.

    Merges DEFAULT_OPTIONS, the caller's options dict and keyword overrides
    (in that order of precedence, lowest first) into a fresh dict. Unknown
    keys are dropped with a warning so a typo never breaks a conversion.

    Args:
        options: Optional dict of option values
        **overrides: Individual option values, e.g. skip_code_tags=True

    Returns:
        Dict containing every key of DEFAULT_OPTIONS with a bool value
    """
    resolved = dict(DEFAULT_OPTIONS)

    supplied = dict(options or {})
    supplied.update(overrides)

    for key, value in supplied.items():
        if key not in DEFAULT_OPTIONS:
            logger.warning(f"Ignoring unknown conversion option '{key}'")
            continue
        resolved[key] = bool(value)

    return resolved
