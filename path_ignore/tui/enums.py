from enum import Enum


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    MAGENTA = "magenta"
    DIM = "dim"
    WHITE = "white"


class Verdict(str, Enum):
    IGNORED = "ignored"
    INCLUDED = "included"


VERDICT_STYLE = {
    Verdict.IGNORED: UIStyle.YELLOW.value,
    Verdict.INCLUDED: UIStyle.GREEN.value,
}
