"""Extraction of the word being typed at the cursor."""

import re

__all__ = ["extract_prefix"]

_TRAILING_WORD = re.compile(r"\w+$", re.ASCII)


def extract_prefix(command_line: str, cursor_position: int) -> str | None:
    """Return the partial word right before the cursor.

    This is a heuristic, not a shell lexer: quotes, escapes and flag values
    are not taken into account.

    Args:
        command_line: The full command line
        cursor_position: Cursor offset in `command_line`

    Returns:
        The trailing word characters before the cursor ("" if there are none),
        or None when the cursor sits inside a word
    """
    cursor_position = max(0, min(cursor_position, len(command_line)))
    if cursor_position < len(command_line) and not command_line[cursor_position].isspace():
        return None

    match = _TRAILING_WORD.search(command_line[:cursor_position])
    return match.group(0) if match else ""
