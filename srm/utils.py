import os
import stat
from pathlib import Path
from typing import Iterable

from .errors import FilesystemAccessError

def contains(needle: str, haystack: Iterable[str]) -> bool:
    """("lindsay", ["matt", "mark", "john", "lindsay"]) -> True"""
    return any(needle == item for item in haystack)


def _stat(path: str) -> os.stat_result:
    try:
        return Path(path).stat()
    except OSError as e:
        raise FilesystemAccessError(path, e) from e


def is_dir(path: str) -> bool:
    return stat.S_ISDIR(_stat(path).st_mode)


def is_read_only(path: str) -> bool:
    """True when the owner write bit is clear. Looks at the mode only, not at access(2)."""
    return _stat(path).st_mode & stat.S_IWUSR == 0


def strip_trailing_separators(path: str) -> str:
    """'foo//' -> 'foo'. A path made only of separators is left alone."""
    stripped = path.rstrip(os.sep)
    return stripped or path


def display_name(path: str) -> str:
    """Final segment of the path, tolerating trailing separators."""
    normalized = strip_trailing_separators(path)
    return Path(normalized).name or normalized


def join_destination(root: str, name: str) -> Path:
    # A leading separator would make the join discard the root
    return Path(root) / name.lstrip(os.sep)
