from path_ignore.compiler import compile_glob, compile_line, tokenize_glob, translate_glob
from path_ignore.config import IgnoreConfig, load_config
from path_ignore.errors import (
    IgnoreFileError,
    InvalidConfigFormatError,
    InvalidConfigSchemaError,
    MissingConfigFileError,
    PathIgnoreError,
    RuleFileNotFoundError,
    RuleFileReadError,
)
from path_ignore.matcher import RuleSet, compile_rules
from path_ignore.models import CompiledPattern, MatchQuery, MatchResult, NormalizedLine
from path_ignore.normalizer import normalize_line
from path_ignore.repository import RuleFileRepository
from path_ignore.service import IgnoreService

__all__ = [
    "CompiledPattern",
    "IgnoreConfig",
    "IgnoreFileError",
    "IgnoreService",
    "InvalidConfigFormatError",
    "InvalidConfigSchemaError",
    "MatchQuery",
    "MatchResult",
    "MissingConfigFileError",
    "NormalizedLine",
    "PathIgnoreError",
    "RuleFileNotFoundError",
    "RuleFileReadError",
    "RuleFileRepository",
    "RuleSet",
    "compile_glob",
    "compile_line",
    "compile_rules",
    "load_config",
    "normalize_line",
    "tokenize_glob",
    "translate_glob",
]
