from path_ignore.tui.renderers import IgnoreConsoleUI

__all__ = ["IgnoreConsoleUI"]
