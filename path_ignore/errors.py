from pathlib import Path


class PathIgnoreError(Exception):
    """Base user-facing application error."""


class IgnoreFileError(PathIgnoreError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class RuleFileNotFoundError(IgnoreFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Rule file not found")


class RuleFileReadError(IgnoreFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Cannot read rule file ({detail})")


class MissingConfigFileError(IgnoreFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Missing required config file")


class InvalidConfigFormatError(IgnoreFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid config format ({detail})")


class InvalidConfigSchemaError(IgnoreFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid config schema ({detail})")
