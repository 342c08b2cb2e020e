from dataclasses import dataclass, fields
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional, Tuple

from .default_flags import FLAG_TOKENS

@dataclass(frozen=True)
class Flags:
    """Named view of the option tokens given on the command line."""
    help: bool = False
    force: bool = False
    interactive: bool = False
    batch_interactive: bool = False
    recursive: bool = False
    allow_directory: bool = False
    verbose: bool = False
    compat: bool = False

    @classmethod
    def from_tokens(cls, tokens: Iterable[str]) -> "Flags":
        names = {FLAG_TOKENS[t] for t in tokens if t in FLAG_TOKENS}
        return cls(**{f.name: f.name in names for f in fields(cls)})

class Outcome(Enum):
    MOVED = "moved"
    SKIPPED = "skipped-by-user"
    REJECTED_DIRECTORY = "rejected-directory"
    REJECTED_READONLY = "rejected-readonly"
    FATAL_STAT_ERROR = "fatal-stat-error"
    MOVE_FAILED = "move-failed"

    @property
    def is_fatal(self) -> bool:
        return self in (
            Outcome.REJECTED_DIRECTORY,
            Outcome.REJECTED_READONLY,
            Outcome.FATAL_STAT_ERROR,
        )

@dataclass(frozen=True)
class MoveResult:
    src: Path
    dst: Path

@dataclass(frozen=True)
class OperandResult:
    operand: str
    outcome: Outcome
    message: str = ""
    move: Optional[MoveResult] = None

@dataclass(frozen=True)
class RunResult:
    results: Tuple[OperandResult, ...] = ()
    declined: bool = False  # -I pre-pass answered "no"

    @property
    def aborted(self) -> bool:
        return any(r.outcome.is_fatal for r in self.results)

    @property
    def exit_code(self) -> int:
        if any(r.outcome.is_fatal or r.outcome is Outcome.MOVE_FAILED for r in self.results):
            return 1
        return 0

    @property
    def moved(self) -> Tuple[OperandResult, ...]:
        return tuple(r for r in self.results if r.outcome is Outcome.MOVED)
