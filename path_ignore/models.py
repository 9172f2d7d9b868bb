"""Data models shared by the normalizer, compiler and matcher."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from path_ignore.constants import PATH_SEPARATOR


class TokenKind(str, Enum):
    LITERAL = "literal"
    ESCAPED = "escaped"
    STAR = "star"
    DOUBLE_STAR = "double_star"
    DOUBLE_STAR_SLASH = "double_star_slash"
    QUESTION = "question"
    CHAR_CLASS = "char_class"


@dataclass(frozen=True)
class GlobToken:
    kind: TokenKind
    value: str = ""
    negated: bool = False


@dataclass(frozen=True)
class NormalizedLine:
    body: str
    is_negation: bool = False
    is_directory_only: bool = False
    is_anchored: bool = False


@dataclass(frozen=True)
class CompiledPattern:
    """One compiled rule line.

    ``matcher`` is only ever evaluated with ``fullmatch``; anchoring is
    already folded into it, ``is_anchored`` is kept for display.
    """

    matcher: re.Pattern[str]
    is_negation: bool = False
    is_directory_only: bool = False
    is_anchored: bool = False
    source: str = ""
    origin: Optional[str] = None
    line_number: Optional[int] = None

    @property
    def regex(self) -> str:
        return self.matcher.pattern

    def matches(self, path: str) -> bool:
        return self.matcher.fullmatch(path) is not None

    def location(self) -> str:
        if self.origin is None:
            return ""
        if self.line_number is None:
            return self.origin
        return f"{self.origin}:{self.line_number}"


@dataclass(frozen=True)
class MatchQuery:
    path: str
    is_directory: bool = False

    @property
    def normalized_path(self) -> str:
        if self.path.startswith(PATH_SEPARATOR):
            return self.path[1:]
        return self.path


@dataclass(frozen=True)
class MatchResult:
    query: MatchQuery
    ignored: bool
    pattern: Optional[CompiledPattern] = None

    @property
    def matched(self) -> bool:
        return self.pattern is not None

    def as_dict(self) -> dict[str, str]:
        return {
            "path": self.query.path,
            "kind": "directory" if self.query.is_directory else "file",
            "verdict": "ignored" if self.ignored else "included",
            "pattern": self.pattern.source if self.pattern is not None else "",
            "location": self.pattern.location() if self.pattern is not None else "",
        }
