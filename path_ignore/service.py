"""Compose configured rule sources into one rule set and evaluate queries."""

from __future__ import annotations

from pathlib import Path

from path_ignore.config import IgnoreConfig
from path_ignore.constants import DEFAULT_ORIGIN, DEFAULT_PATTERNS, PATTERN_ORIGIN
from path_ignore.matcher import RuleSet
from path_ignore.models import MatchQuery, MatchResult
from path_ignore.repository import RuleFileRepository


class IgnoreService:
    def __init__(
        self, config: IgnoreConfig, repository: RuleFileRepository | None = None
    ) -> None:
        self._config = config
        self._repository = repository or RuleFileRepository(config.root)

    @property
    def config(self) -> IgnoreConfig:
        return self._config

    def rule_files(self) -> list[Path]:
        return [self._repository.resolve(path) for path in self._config.rule_files]

    def build_rule_set(self) -> RuleSet:
        """Defaults first, then rule files in order, then extra patterns."""
        rule_set = RuleSet()
        if self._config.include_defaults:
            rule_set = rule_set + RuleSet.from_lines(
                DEFAULT_PATTERNS, origin=DEFAULT_ORIGIN
            )
        rule_set = rule_set + self._repository.load_many(list(self._config.rule_files))
        return rule_set + RuleSet.from_lines(
            self._config.extra_patterns, origin=PATTERN_ORIGIN
        )

    def check(self, rule_set: RuleSet, queries: list[MatchQuery]) -> list[MatchResult]:
        return [
            rule_set.match(query.path, is_directory=query.is_directory)
            for query in queries
        ]
