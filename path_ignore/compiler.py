"""Translate normalized glob bodies into full-match regular expressions."""

from __future__ import annotations

import re
import warnings

from path_ignore.constants import (
    CLASS_CLOSE,
    CLASS_NEGATION,
    CLASS_OPEN,
    ESCAPE_CHAR,
    PATH_SEPARATOR,
)
from path_ignore.models import CompiledPattern, GlobToken, TokenKind
from path_ignore.normalizer import normalize_line

ANY_LEADING_SEGMENTS = "(?:.*/)?"

_FIXED_TRANSLATIONS: dict[TokenKind, str] = {
    TokenKind.STAR: "[^/]*",
    TokenKind.DOUBLE_STAR: ".*",
    TokenKind.DOUBLE_STAR_SLASH: ANY_LEADING_SEGMENTS,
    TokenKind.QUESTION: "[^/]",
}


def _read_char_class(body: str, start: int) -> tuple[GlobToken, int] | None:
    """Read ``[...]`` starting at ``start``; None when empty or unterminated."""
    cursor = start + 1
    negated = cursor < len(body) and body[cursor] == CLASS_NEGATION
    if negated:
        cursor += 1
    close = body.find(CLASS_CLOSE, cursor)
    if close == -1 or close == cursor:
        return None
    token = GlobToken(TokenKind.CHAR_CLASS, body[cursor:close], negated=negated)
    return token, close + 1


def tokenize_glob(body: str) -> list[GlobToken]:
    tokens: list[GlobToken] = []
    index = 0
    length = len(body)

    while index < length:
        char = body[index]

        if char == "*":
            if body.startswith("**" + PATH_SEPARATOR, index):
                tokens.append(GlobToken(TokenKind.DOUBLE_STAR_SLASH))
                index += 3
            elif body.startswith("**", index):
                tokens.append(GlobToken(TokenKind.DOUBLE_STAR))
                index += 2
            else:
                tokens.append(GlobToken(TokenKind.STAR))
                index += 1
            continue

        if char == "?":
            tokens.append(GlobToken(TokenKind.QUESTION))
            index += 1
            continue

        if char == CLASS_OPEN:
            parsed = _read_char_class(body, index)
            if parsed is not None:
                token, index = parsed
                tokens.append(token)
                continue
            # malformed class: the bracket is plain text
            tokens.append(GlobToken(TokenKind.LITERAL, char))
            index += 1
            continue

        if char == ESCAPE_CHAR:
            # a dangling trailing backslash is dropped
            if index + 1 < length:
                tokens.append(GlobToken(TokenKind.ESCAPED, body[index + 1]))
            index += 2
            continue

        tokens.append(GlobToken(TokenKind.LITERAL, char))
        index += 1

    return tokens


def translate_token(token: GlobToken) -> str:
    if token.kind in (TokenKind.LITERAL, TokenKind.ESCAPED):
        return re.escape(token.value)
    if token.kind == TokenKind.CHAR_CLASS:
        prefix = "^" if token.negated else ""
        return f"[{prefix}{token.value}]"
    return _FIXED_TRANSLATIONS[token.kind]


def translate_glob(body: str) -> str:
    return "".join(translate_token(token) for token in tokenize_glob(body))


def compile_glob(body: str, anchored: bool) -> re.Pattern[str]:
    """Compile a glob body; unanchored bodies may start at any segment boundary.

    Raises ``re.error`` when character-class contents are rejected by ``re``
    and ``FutureWarning`` when ``re`` flags them as ambiguous (nested sets,
    set operators); ``compile_line`` turns either into a dropped line.
    """
    source = translate_glob(body)
    if not anchored:
        source = ANY_LEADING_SEGMENTS + source
    with warnings.catch_warnings():
        warnings.simplefilter("error", FutureWarning)
        return re.compile(source, re.DOTALL)


def compile_line(
    line: str,
    *,
    origin: str | None = None,
    line_number: int | None = None,
) -> CompiledPattern | None:
    normalized = normalize_line(line)
    if normalized is None:
        return None

    try:
        matcher = compile_glob(normalized.body, normalized.is_anchored)
    except (re.error, FutureWarning):
        return None

    return CompiledPattern(
        matcher=matcher,
        is_negation=normalized.is_negation,
        is_directory_only=normalized.is_directory_only,
        is_anchored=normalized.is_anchored,
        source=line,
        origin=origin,
        line_number=line_number,
    )
