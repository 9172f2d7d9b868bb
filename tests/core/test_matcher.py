"""Tests for rule set evaluation."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from path_ignore.matcher import RuleSet, compile_rules
from path_ignore.models import MatchQuery


def test_empty_rule_set_ignores_nothing() -> None:
    rules = RuleSet.from_lines([])
    assert len(rules) == 0
    assert not rules.is_ignored("file.txt")
    assert not rules.is_ignored("dir", is_directory=True)


def test_blank_and_comment_lines_contribute_nothing() -> None:
    rules = RuleSet.from_lines(["", "# this is a comment", "   "])
    assert len(rules) == 0
    assert not rules.is_ignored("file.txt")


def test_simple_pattern_matches_at_any_depth() -> None:
    rules = RuleSet.from_lines(["*.log"])
    assert rules.is_ignored("debug.log")
    assert rules.is_ignored("src/debug.log")
    assert rules.is_ignored("a/b/c/debug.log")
    assert not rules.is_ignored("debug.txt")


def test_directory_only_pattern() -> None:
    rules = RuleSet.from_lines(["build/"])
    assert rules.is_ignored("build", is_directory=True)
    assert not rules.is_ignored("build", is_directory=False)
    assert not rules.is_ignored("build")
    assert rules.is_ignored("src/build", is_directory=True)


def test_leading_slash_anchors() -> None:
    rules = RuleSet.from_lines(["/TODO"])
    assert rules.is_ignored("TODO")
    assert not rules.is_ignored("src/TODO")


def test_negation_re_includes() -> None:
    rules = RuleSet.from_lines(["*.log", "!important.log"])
    assert rules.is_ignored("debug.log")
    assert not rules.is_ignored("important.log")


def test_last_match_wins() -> None:
    rules = RuleSet.from_lines(["*.log", "!important.log", "important.log"])
    assert rules.is_ignored("important.log")


def test_single_star_does_not_cross_separators() -> None:
    rules = RuleSet.from_lines(["doc/*.txt"])
    assert rules.is_ignored("doc/notes.txt")
    assert not rules.is_ignored("doc/sub/notes.txt")


def test_question_mark_matches_one_character() -> None:
    rules = RuleSet.from_lines(["file?.txt"])
    assert rules.is_ignored("fileA.txt")
    assert rules.is_ignored("file1.txt")
    assert not rules.is_ignored("file10.txt")
    assert not rules.is_ignored("file/.txt")


def test_leading_double_star() -> None:
    rules = RuleSet.from_lines(["**/logs"])
    assert rules.is_ignored("logs")
    assert rules.is_ignored("src/logs")
    assert rules.is_ignored("a/b/logs")


def test_trailing_double_star() -> None:
    rules = RuleSet.from_lines(["logs/**"])
    assert rules.is_ignored("logs/debug.log")
    assert rules.is_ignored("logs/a/b/c.log")
    assert not rules.is_ignored("src/logs/debug.log")
    assert not rules.is_ignored("src/logs/x")


def test_middle_double_star() -> None:
    rules = RuleSet.from_lines(["a/**/b"])
    assert rules.is_ignored("a/b")
    assert rules.is_ignored("a/x/b")
    assert rules.is_ignored("a/x/y/b")
    assert not rules.is_ignored("c/a/b")


@pytest.mark.parametrize(
    ("pattern", "ignored", "kept"),
    [
        ("file[abc].txt", ["filea.txt", "fileb.txt"], ["filed.txt"]),
        ("file[!abc].txt", ["filed.txt", "filex.txt"], ["filea.txt", "fileb.txt"]),
        ("file[a-z].txt", ["filea.txt", "filez.txt"], ["file1.txt"]),
    ],
)
def test_character_classes(pattern: str, ignored: list[str], kept: list[str]) -> None:
    rules = RuleSet.from_lines([pattern])
    for path in ignored:
        assert rules.is_ignored(path)
    for path in kept:
        assert not rules.is_ignored(path)


def test_path_with_separator_is_implicitly_anchored() -> None:
    rules = RuleSet.from_lines(["src/build"])
    assert rules.is_ignored("src/build")
    assert not rules.is_ignored("other/src/build")


def test_trailing_whitespace_is_stripped() -> None:
    rules = RuleSet.from_lines(["*.log   "])
    assert rules.is_ignored("debug.log")


def test_escaped_trailing_space_is_significant() -> None:
    rules = RuleSet.from_lines(["name\\ "])
    assert rules.is_ignored("name ")
    assert not rules.is_ignored("name")


def test_escaped_hash_is_literal() -> None:
    rules = RuleSet.from_lines(["\\#file"])
    assert rules.is_ignored("#file")
    assert not rules.is_ignored("file")


def test_escaped_negation_is_literal() -> None:
    rules = RuleSet.from_lines(["\\!keep"])
    assert rules.is_ignored("!keep")
    assert not rules.is_ignored("keep")


def test_case_sensitive() -> None:
    rules = RuleSet.from_lines(["Makefile"])
    assert rules.is_ignored("Makefile")
    assert not rules.is_ignored("makefile")
    assert not rules.is_ignored("MAKEFILE")


def test_leading_slash_on_query_is_stripped() -> None:
    rules = RuleSet.from_lines(["/TODO", "*.log"])
    assert rules.is_ignored("/TODO")
    assert rules.is_ignored("/src/debug.log")
    assert MatchQuery("/TODO").normalized_path == "TODO"
    assert MatchQuery("//TODO").normalized_path == "/TODO"


def test_directory_only_negation_skipped_for_files() -> None:
    rules = RuleSet.from_lines(["cache*", "!cache/"])
    assert rules.is_ignored("cache")
    assert not rules.is_ignored("cache", is_directory=True)


def test_malformed_lines_never_raise() -> None:
    rules = RuleSet.from_lines(["[", "[]", "file[z-a]", "a\\", "**"])
    assert len(rules) == 4
    assert rules.is_ignored("anything/at/all")


@pytest.mark.filterwarnings("error")
def test_ambiguous_class_is_dropped_without_warning() -> None:
    rules = RuleSet.from_lines(["[a--b]", "*.log"])
    assert len(rules) == 1
    assert rules.is_ignored("debug.log")
    assert not rules.is_ignored("a")


def test_compilation_is_idempotent() -> None:
    lines = ["*.log", "!keep.log", "build/", "/TODO", "a/**/b", "x[!0-9]"]
    first = compile_rules(lines)
    second = compile_rules(lines)
    assert first == second
    for path in ["a.log", "keep.log", "build", "TODO", "a/q/b", "xa", "x1"]:
        for is_directory in (False, True):
            assert first.is_ignored(path, is_directory) == second.is_ignored(
                path, is_directory
            )


def test_match_reports_deciding_pattern() -> None:
    rules = RuleSet.from_lines(["*.log", "!important.log"], origin=".gitignore")

    result = rules.match("important.log")
    assert result.ignored is False
    assert result.pattern is not None
    assert result.pattern.source == "!important.log"
    assert result.pattern.location() == ".gitignore:2"

    unmatched = rules.match("readme.md")
    assert unmatched.ignored is False
    assert unmatched.matched is False


def test_line_numbers_count_skipped_lines() -> None:
    rules = RuleSet.from_lines(["# header", "", "*.tmp"], origin="rules")
    assert [pattern.line_number for pattern in rules] == [3]


def test_concatenation_keeps_order() -> None:
    base = RuleSet.from_lines(["*.log"])
    override = RuleSet.from_lines(["!debug.log"])

    assert not (base + override).is_ignored("debug.log")
    assert (override + base).is_ignored("debug.log")
    assert len(base) == 1


def test_rule_set_is_immutable() -> None:
    rules = RuleSet.from_lines(["*.log"])
    with pytest.raises(AttributeError):
        rules.patterns = ()  # type: ignore[misc]


def test_concurrent_queries_agree() -> None:
    rules = RuleSet.from_lines(["*.log", "!keep.log", "tmp/"])
    paths = [f"dir{index}/file{index}.log" for index in range(200)] + ["keep.log"]

    with ThreadPoolExecutor(max_workers=8) as pool:
        verdicts = list(pool.map(rules.is_ignored, paths))

    assert verdicts == [rules.is_ignored(path) for path in paths]
    assert verdicts[-1] is False
