"""Load rule files from disk into rule sets."""

from __future__ import annotations

from pathlib import Path

from path_ignore.errors import RuleFileNotFoundError, RuleFileReadError
from path_ignore.matcher import RuleSet
from path_ignore.utils import compact_home_path, read_lines


class RuleFileRepository:
    def __init__(self, root: Path | None = None) -> None:
        self._root = root or Path.cwd()

    @property
    def root(self) -> Path:
        return self._root

    def resolve(self, path: Path) -> Path:
        path = path.expanduser()
        if path.is_absolute():
            return path
        return self._root / path

    def exists(self, path: Path) -> bool:
        return self.resolve(path).is_file()

    def read_lines(self, path: Path) -> list[str]:
        resolved = self.resolve(path)
        if not resolved.is_file():
            raise RuleFileNotFoundError(resolved)
        try:
            return read_lines(resolved)
        except (OSError, UnicodeDecodeError) as exc:
            raise RuleFileReadError(resolved, str(exc)) from exc

    def load(self, path: Path) -> RuleSet:
        lines = self.read_lines(path)
        origin = compact_home_path(self.resolve(path))
        return RuleSet.from_lines(lines, origin=origin)

    def load_many(self, paths: list[Path]) -> RuleSet:
        rule_set = RuleSet()
        for path in paths:
            rule_set = rule_set + self.load(path)
        return rule_set
