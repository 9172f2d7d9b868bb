from typing import Final


PATH_SEPARATOR: Final[str] = "/"
ESCAPE_CHAR: Final[str] = "\\"
COMMENT_PREFIX: Final[str] = "#"
NEGATION_PREFIX: Final[str] = "!"
TRAILING_WHITESPACE: Final[frozenset[str]] = frozenset({" ", "\t"})

CLASS_OPEN: Final[str] = "["
CLASS_CLOSE: Final[str] = "]"
CLASS_NEGATION: Final[str] = "!"

GITIGNORE_FILENAME: Final[str] = ".gitignore"
CONFIG_FILENAME: Final[str] = ".path-ignore.yaml"

DEFAULT_ORIGIN: Final[str] = "<default>"
PATTERN_ORIGIN: Final[str] = "<pattern>"

DEFAULT_PATTERNS: Final[tuple[str, ...]] = (".git/",)
