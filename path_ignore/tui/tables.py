from collections import Counter

from rich.markup import escape
from rich.table import Column, Table

from path_ignore.matcher import RuleSet
from path_ignore.models import CompiledPattern, MatchResult
from path_ignore.tui.enums import VERDICT_STYLE, UIStyle, Verdict


def _flag(value: bool) -> str:
    return "yes" if value else ""


def _verdict(result: MatchResult) -> Verdict:
    return Verdict.IGNORED if result.ignored else Verdict.INCLUDED


class CheckTable:
    @staticmethod
    def summary_block(results: list[MatchResult]):
        counts = Counter(_verdict(result).value for result in results)
        chips = [f"{key}={value}" for key, value in sorted(counts.items()) if value > 0]
        if not chips:
            chips = ["none"]

        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Paths", str(len(results)))
        table.add_row("Verdicts", "  ".join(chips))
        return table

    @staticmethod
    def results_table(results: list[MatchResult], verbose: bool = False) -> Table:
        columns = [
            Column(header="Path", overflow="fold"),
            Column(header="Kind", width=9),
            Column(header="Verdict", width=9),
        ]
        if verbose:
            columns.append(Column(header="Pattern", overflow="fold"))
            columns.append(Column(header="Source", overflow="fold"))
        table = Table(*columns, expand=True, header_style="bold")

        for result in results:
            row = result.as_dict()
            verdict = _verdict(result)
            style = VERDICT_STYLE.get(verdict, UIStyle.WHITE.value)
            cells = [
                escape(row["path"]),
                row["kind"],
                f"[{style}]{verdict.value}[/{style}]",
            ]
            if verbose:
                cells.append(escape(row["pattern"]))
                cells.append(escape(row["location"]))
            table.add_row(*cells)
        return table


class PatternTable:
    @staticmethod
    def summary_block(rule_set: RuleSet):
        negations = sum(1 for pattern in rule_set if pattern.is_negation)
        directories = sum(1 for pattern in rule_set if pattern.is_directory_only)

        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Patterns", str(len(rule_set)))
        table.add_row("Negations", str(negations))
        table.add_row("Directory-only", str(directories))
        return table

    @staticmethod
    def patterns_table(patterns: tuple[CompiledPattern, ...]) -> Table:
        table = Table(
            Column(header="#", width=4, justify="right"),
            Column(header="Pattern", overflow="fold"),
            Column(header="Neg", width=4),
            Column(header="Dir", width=4),
            Column(header="Anchor", width=6),
            Column(header="Regex", overflow="fold"),
            Column(header="Source", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for index, pattern in enumerate(patterns, start=1):
            table.add_row(
                str(index),
                escape(pattern.source),
                _flag(pattern.is_negation),
                _flag(pattern.is_directory_only),
                _flag(pattern.is_anchored),
                escape(pattern.regex),
                escape(pattern.location()),
            )
        return table
