from rich.console import Console

from path_ignore.matcher import RuleSet
from path_ignore.models import MatchResult
from path_ignore.tui.enums import UIStyle
from path_ignore.tui.sections import UISection
from path_ignore.tui.tables import CheckTable, PatternTable
from path_ignore.utils import compact_home_path


class IgnoreConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_sources(self, sources: list[str]) -> None:
        if not sources:
            return
        self.console.print(
            UISection.bullets(
                "rule sources",
                [compact_home_path(item) for item in sources],
                style=UIStyle.DIM.value,
            )
        )

    def render_check(self, results: list[MatchResult], verbose: bool = False) -> None:
        self.console.print(
            UISection.wrap(
                "check overview",
                CheckTable.summary_block(results),
                style=UIStyle.BLUE.value,
            )
        )
        if not results:
            self.console.print(
                UISection.note("paths", "No paths given.", style=UIStyle.DIM.value)
            )
            return

        border = UIStyle.YELLOW.value if any(r.ignored for r in results) else UIStyle.GREEN.value
        self.console.print(
            UISection.wrap(
                "paths",
                CheckTable.results_table(results, verbose=verbose),
                style=border,
            )
        )

    def render_patterns(self, rule_set: RuleSet) -> None:
        self.console.print(
            UISection.wrap(
                "pattern overview",
                PatternTable.summary_block(rule_set),
                style=UIStyle.BLUE.value,
            )
        )
        if not len(rule_set):
            self.console.print(
                UISection.note(
                    "patterns", "No patterns compiled.", style=UIStyle.YELLOW.value
                )
            )
            return

        self.console.print(
            UISection.wrap(
                "patterns",
                PatternTable.patterns_table(rule_set.patterns),
                style=UIStyle.CYAN.value,
            )
        )
