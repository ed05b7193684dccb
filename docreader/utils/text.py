from __future__ import annotations

import re
from typing import Iterable, List

LINE_BREAK_RE = re.compile(r"[\r\n]")


def paginate(text: str, max_chars: int) -> List[str]:
    """
    Split text into pages of at most max_chars characters, breaking on the
    last space inside the window when the window ends mid-word.

    Empty or whitespace-only text, and a non-positive max_chars, are passed
    through unchanged as a single page. Pages are stripped and blank pages
    are dropped.
    """
    if not text or text.isspace() or max_chars <= 0:
        return [text]

    pages: list[str] = []
    index = 0
    total = len(text)

    while index < total:
        end = index + min(max_chars, total - index)

        if end < total and text[end] != " ":
            last_space = text.rfind(" ", index + 1, end)
            if last_space > index:
                end = last_space

        page = text[index:end].strip()
        if page:
            pages.append(page)

        # Always move forward, even on a zero-width window.
        index = end if end > index else index + 1

    return pages


def split_lines(text: str) -> List[str]:
    """
    Split on CR and LF, dropping empty entries.
    """
    return [line for line in LINE_BREAK_RE.split(text) if line]


def split_fields(lines: Iterable[str], delimiter: str = ",") -> List[List[str]]:
    """
    Split every line on a single-character delimiter. Quoting is not
    interpreted: a delimiter inside quotes still splits the field.
    """
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    return [line.split(delimiter) for line in lines]


__all__ = ["paginate", "split_fields", "split_lines"]
