"""Ordered, immutable rule sets with last-match-wins evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from path_ignore.compiler import compile_line
from path_ignore.models import CompiledPattern, MatchQuery, MatchResult


@dataclass(frozen=True)
class RuleSet:
    """Compiled ignore rules in file order.

    Later patterns override earlier ones. Instances are never mutated, so a
    single rule set can be queried from any number of threads.
    """

    patterns: tuple[CompiledPattern, ...] = ()

    @classmethod
    def from_lines(
        cls, lines: Iterable[str], origin: Optional[str] = None
    ) -> "RuleSet":
        compiled: list[CompiledPattern] = []
        for line_number, line in enumerate(lines, start=1):
            pattern = compile_line(line, origin=origin, line_number=line_number)
            if pattern is not None:
                compiled.append(pattern)
        return cls(patterns=tuple(compiled))

    def __len__(self) -> int:
        return len(self.patterns)

    def __iter__(self) -> Iterator[CompiledPattern]:
        return iter(self.patterns)

    def __add__(self, other: "RuleSet") -> "RuleSet":
        if not isinstance(other, RuleSet):
            return NotImplemented
        return RuleSet(patterns=self.patterns + other.patterns)

    def match(self, path: str, is_directory: bool = False) -> MatchResult:
        query = MatchQuery(path=path, is_directory=is_directory)
        candidate = query.normalized_path

        ignored = False
        deciding: Optional[CompiledPattern] = None
        for pattern in self.patterns:
            if pattern.is_directory_only and not is_directory:
                continue
            if pattern.matches(candidate):
                ignored = not pattern.is_negation
                deciding = pattern

        return MatchResult(query=query, ignored=ignored, pattern=deciding)

    def is_ignored(self, path: str, is_directory: bool = False) -> bool:
        return self.match(path, is_directory=is_directory).ignored


def compile_rules(lines: Iterable[str], origin: Optional[str] = None) -> RuleSet:
    return RuleSet.from_lines(lines, origin=origin)
