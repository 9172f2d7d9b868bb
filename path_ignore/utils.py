from pathlib import Path


def read_lines(path: Path) -> list[str]:
    with path.open("r", encoding="utf-8-sig") as handle:
        return handle.read().splitlines()


def compact_home_path(path: str | Path) -> str:
    text = str(path)
    home = str(Path.home())
    if text == home:
        return "~"
    home_prefix = f"{home}/"
    if text.startswith(home_prefix):
        return f"~/{text[len(home_prefix):]}"
    return text


def compact_home_paths_in_text(text: str) -> str:
    home = str(Path.home())
    if text == home:
        return "~"
    return text.replace(f"{home}/", "~/")


def split_directory_marker(path: str) -> tuple[str, bool]:
    """Strip a trailing ``/`` from a CLI path argument and report it."""
    if len(path) > 1 and path.endswith("/"):
        return path.rstrip("/"), True
    return path, False
