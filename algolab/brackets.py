"""Bracket balance checking."""

from __future__ import annotations

_OPENER = {")": "(", "]": "[", "}": "{"}


def is_valid_brackets(text: str) -> bool:
    """Return True when every bracket in text is closed in the right order.

    Any character that is not a matching closer is pushed on the stack, so
    text containing anything but brackets is never valid.
    """
    stack: list[str] = []
    for char in text:
        if stack and _OPENER.get(char) == stack[-1]:
            stack.pop()
        else:
            stack.append(char)
    return not stack