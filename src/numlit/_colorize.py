"""Terminal styling for command line output.

Public API
----------
style(text, *codes)      → str wrapped in ANSI codes
should_use_color(stream) → bool
"""

import os


CODES = {
    "strong": "\033[1m",
    "dim": "\033[2m",
    "cyan": "\033[36m",
    "red": "\033[31m",
    "normal": "\033[0m",
}


def style(text, *codes):
    """Wrap text in ANSI codes, followed by a reset.

    Args:
        text: (str) Text to style
        codes: (str) Names from CODES

    Returns:
        (str) Styled text, or the text itself when no codes are given
    """
    if not codes:
        return text
    prefix = "".join(CODES[code] for code in codes)
    return f"{prefix}{text}{CODES['normal']}"


def should_use_color(stream):
    """True when stream is a terminal and NO_COLOR is unset."""
    if "NO_COLOR" in os.environ:
        return False
    try:
        return stream.isatty()
    except AttributeError:
        return False
