from dataclasses import replace
from pathlib import Path
from typing import Callable, Optional

import click
from rich.console import Console

from path_ignore.config import IgnoreConfig, load_config
from path_ignore.constants import CONFIG_FILENAME, GITIGNORE_FILENAME, PATTERN_ORIGIN
from path_ignore.errors import PathIgnoreError
from path_ignore.matcher import RuleSet
from path_ignore.models import MatchQuery
from path_ignore.service import IgnoreService
from path_ignore.tui import IgnoreConsoleUI
from path_ignore.utils import compact_home_paths_in_text, split_directory_marker


def _rule_source_options(func: Callable) -> Callable:
    func = click.option(
        "-p",
        "--pattern",
        "patterns",
        multiple=True,
        help="Inline rule line, applied after rule files. Repeatable.",
    )(func)
    func = click.option(
        "-c",
        "--config",
        "config_path",
        type=click.Path(path_type=Path),
        default=None,
        help=f"Config file (default: {CONFIG_FILENAME} if present).",
    )(func)
    func = click.option(
        "-r",
        "--rules",
        "rules",
        multiple=True,
        type=click.Path(path_type=Path),
        help="Rule file in .gitignore syntax. Repeatable, later files win.",
    )(func)
    return func


def _resolve_config(
    rules: tuple[Path, ...], patterns: tuple[str, ...], config_path: Optional[Path]
) -> IgnoreConfig:
    cwd = Path.cwd()
    if config_path is not None:
        config = load_config(config_path)
        # inline sources layer on top of the config's own rules
        inline_files = tuple(cwd / path.expanduser() for path in rules)
        return replace(
            config,
            rule_files=config.rule_files + inline_files,
            extra_patterns=config.extra_patterns + tuple(patterns),
        )
    if rules or patterns:
        return IgnoreConfig(
            root=cwd,
            rule_files=tuple(rules),
            extra_patterns=tuple(patterns),
            include_defaults=False,
        )
    default_config = cwd / CONFIG_FILENAME
    if default_config.exists():
        return load_config(default_config)
    # a missing implicit .gitignore means no rules, not an error
    if not (cwd / GITIGNORE_FILENAME).is_file():
        return IgnoreConfig(root=cwd, rule_files=())
    return IgnoreConfig(root=cwd)


def _load_rules(
    rules: tuple[Path, ...], patterns: tuple[str, ...], config_path: Optional[Path]
) -> tuple[IgnoreService, RuleSet]:
    try:
        service = IgnoreService(_resolve_config(rules, patterns, config_path))
        return service, service.build_rule_set()
    except PathIgnoreError as exc:
        raise click.ClickException(compact_home_paths_in_text(str(exc)))


def _source_labels(service: IgnoreService) -> list[str]:
    labels = [str(path) for path in service.rule_files()]
    if service.config.extra_patterns:
        labels.append(PATTERN_ORIGIN)
    return labels


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
def cli() -> None:
    """Evaluate paths against .gitignore-style rules."""


@cli.command(help="Check whether paths are ignored. A trailing / marks a directory.")
@_rule_source_options
@click.argument("paths", nargs=-1, required=True)
@click.option(
    "-d", "--directory", is_flag=True, help="Treat every path as a directory."
)
@click.option(
    "-v", "--verbose", is_flag=True, help="Show the deciding pattern and its source."
)
def check(
    paths: tuple[str, ...],
    rules: tuple[Path, ...],
    config_path: Optional[Path],
    patterns: tuple[str, ...],
    directory: bool,
    verbose: bool,
) -> None:
    ui = IgnoreConsoleUI(Console())
    service, rule_set = _load_rules(rules, patterns, config_path)

    queries: list[MatchQuery] = []
    for raw in paths:
        path, marked = split_directory_marker(raw)
        queries.append(MatchQuery(path=path, is_directory=directory or marked))

    results = service.check(rule_set, queries)
    if verbose:
        ui.render_sources(_source_labels(service))
    ui.render_check(results, verbose=verbose)

    # same convention as `git check-ignore`
    if not any(result.ignored for result in results):
        raise click.exceptions.Exit(1)


@cli.command("patterns", help="List compiled patterns in evaluation order.")
@_rule_source_options
def patterns_list(
    rules: tuple[Path, ...],
    config_path: Optional[Path],
    patterns: tuple[str, ...],
) -> None:
    ui = IgnoreConsoleUI(Console())
    service, rule_set = _load_rules(rules, patterns, config_path)
    ui.render_sources(_source_labels(service))
    ui.render_patterns(rule_set)


def main() -> int:
    try:
        result = cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return 2
    return result if isinstance(result, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
