from __future__ import annotations

import re
from typing import Optional

_INLINE_SPACE = re.compile(r"([^\S\n]+)")


def format_int(value: int) -> str:
    try:
        return f"{int(value):,}"
    except (TypeError, ValueError):
        return "0"


def truncate(text: str, max_len: int) -> str:
    if not text:
        return ""
    if max_len <= 0:
        return ""
    if len(text) <= max_len:
        return text
    return text[: max_len - 1].rstrip() + "…"


def _wrap_line(line: str, limit: int) -> str:
    if len(line) <= limit:
        return line
    # parts alternates word, space, word, ... (first and last word may be empty)
    parts = _INLINE_SPACE.split(line)
    lines = []
    current = parts[0]
    for i in range(1, len(parts), 2):
        space, word = parts[i], parts[i + 1]
        if word and current.strip() and len(current) + len(space) + len(word) > limit:
            lines.append(current)
            current = word
        else:
            current += space + word
    lines.append(current)
    return "\n".join(lines)


def wrap_text(text: str, limit: Optional[int]) -> str:
    """
    Greedy word wrap.

    Each newline-delimited chunk is scanned left to right and the whitespace run
    that would push the current line past `limit` characters is replaced with a
    newline. Words are never split, so a single word longer than `limit` stays
    on its own line. Already-wrapped text comes back unchanged.
    """
    if not text or not limit or limit <= 0:
        return text
    return "\n".join(_wrap_line(line, limit) for line in text.split("\n"))
