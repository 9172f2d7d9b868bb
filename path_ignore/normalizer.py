"""Reduce raw ignore-file lines to a glob body plus rule flags."""

from __future__ import annotations

from path_ignore.constants import (
    COMMENT_PREFIX,
    ESCAPE_CHAR,
    NEGATION_PREFIX,
    PATH_SEPARATOR,
    TRAILING_WHITESPACE,
)
from path_ignore.models import NormalizedLine


def _is_escaped(text: str, index: int) -> bool:
    """Return True when ``text[index]`` follows an odd run of backslashes."""
    count = 0
    cursor = index - 1
    while cursor >= 0 and text[cursor] == ESCAPE_CHAR:
        count += 1
        cursor -= 1
    return count % 2 == 1


def strip_trailing_whitespace(line: str) -> str:
    end = len(line)
    while end > 0 and line[end - 1] in TRAILING_WHITESPACE:
        if _is_escaped(line, end - 1):
            break
        end -= 1
    return line[:end]


def normalize_line(line: str) -> NormalizedLine | None:
    """Normalize one rule line, or return None for lines that are not rules.

    Blank lines, whitespace-only lines and ``#`` comments are skipped. An
    escaped ``\\#`` keeps its backslash so the compiler reads it as a
    literal ``#``.
    """
    if not line or line.startswith(COMMENT_PREFIX):
        return None

    body = strip_trailing_whitespace(line)
    if not body:
        return None

    is_negation = body.startswith(NEGATION_PREFIX)
    if is_negation:
        body = body[1:]

    is_directory_only = body.endswith(PATH_SEPARATOR) and not _is_escaped(
        body, len(body) - 1
    )
    if is_directory_only:
        body = body[:-1]
    if not body:
        return None

    if body.startswith(PATH_SEPARATOR):
        is_anchored = True
        body = body[1:]
    else:
        is_anchored = PATH_SEPARATOR in body
    if not body:
        return None

    return NormalizedLine(
        body=body,
        is_negation=is_negation,
        is_directory_only=is_directory_only,
        is_anchored=is_anchored,
    )
