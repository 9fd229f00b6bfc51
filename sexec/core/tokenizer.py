"""
Tokenizer — Split typed lines into arguments, escape names for display

Splitting follows POSIX shell rules (quotes, backslash escapes) so that
a name printed by escape_string() can be typed back verbatim.
"""

import shlex
from typing import List

# Characters that would split or re-quote a token when typed back
_SPECIAL = set("\\\"' \t\n\r")


def string_to_arguments(line: str) -> List[str]:
    """
    Split a line of input into argument tokens.

    Unbalanced quotes fall back to a plain whitespace split rather
    than rejecting the line.

    Example:
        >>> string_to_arguments('run deploy "two words"')
        ['run', 'deploy', 'two words']
    """
    try:
        return shlex.split(line, posix=True)
    except ValueError:
        return line.split()


def escape_string(text: str) -> str:
    """
    Escape a name for display so it reads back as one token.

    Backslashes, quotes and whitespace get a leading backslash.
    The empty string is shown as "".

    Example:
        >>> escape_string('my cmd')
        'my\\\\ cmd'
    """
    if text == "":
        return '""'
    return "".join(f"\\{ch}" if ch in _SPECIAL else ch for ch in text)
