import logging
from typing import Callable, List, Optional, Sequence

from .default_flags import BATCH_THRESHOLD
from .errors import FilesystemAccessError, MoveError
from .models import Flags, OperandResult, Outcome, RunResult
from .mover import TrashMover
from .prompt import Prompter
from .utils import display_name, is_dir, is_read_only, strip_trailing_separators

logger = logging.getLogger(__name__)

PROG = "srm"

class DeletionPolicy:
    def __init__(
        self,
        flags: Flags,
        destination_root: str,
        prompter: Optional[Prompter] = None,
        mover: Optional[TrashMover] = None,
        is_dir: Callable[[str], bool] = is_dir,
        is_read_only: Callable[[str], bool] = is_read_only,
        out: Callable[[str], None] = print,
    ):
        self.flags = flags
        self.prompter = prompter or Prompter()
        self.mover = mover or TrashMover(destination_root)
        self.is_dir = is_dir
        self.is_read_only = is_read_only
        self.out = out

    def confirm_batch(self, operands: Sequence[str]) -> bool:
        """-I: ask once when more than BATCH_THRESHOLD operands are given."""
        if not self.flags.batch_interactive or len(operands) <= BATCH_THRESHOLD:
            return True
        return self.prompter.ask(f"remove {len(operands)} files?")

    def _fail(self, operand: str, outcome: Outcome, message: str) -> OperandResult:
        self.out(f"{PROG}: {message}")
        logger.debug("%s: %s", outcome.value, operand)
        return OperandResult(operand, outcome, message)

    def _skip(self, operand: str) -> OperandResult:
        logger.debug("skipped by user: %s", operand)
        return OperandResult(operand, Outcome.SKIPPED)

    def process(self, operand: str) -> OperandResult:
        flags = self.flags

        try:
            operand_is_dir = self.is_dir(operand)
        except FilesystemAccessError as e:
            return self._fail(operand, Outcome.FATAL_STAT_ERROR, str(e))

        if operand_is_dir:
            if not flags.recursive and not flags.allow_directory:
                return self._fail(operand, Outcome.REJECTED_DIRECTORY, f"{operand}: is a directory")
            if flags.batch_interactive and flags.recursive:
                if not self.prompter.ask(f"recursively remove {operand}?"):
                    return self._skip(operand)

        name = display_name(operand)

        if flags.interactive and not self.prompter.ask(f"remove {operand}?"):
            return self._skip(operand)

        path = strip_trailing_separators(operand)

        try:
            read_only = self.is_read_only(path)
        except FilesystemAccessError as e:
            return self._fail(operand, Outcome.FATAL_STAT_ERROR, str(e))
        if read_only and not flags.force:
            return self._fail(operand, Outcome.REJECTED_READONLY, f"{operand}: File is read-only")

        if flags.verbose:
            self.out(name)

        try:
            move = self.mover.move_one(path, name)
        except MoveError as e:
            self.out(f"{PROG}: {e}")
            logger.warning("move failed for %s: %s", operand, e.cause)
            return OperandResult(operand, Outcome.MOVE_FAILED, str(e))
        return OperandResult(operand, Outcome.MOVED, move=move)

    def run(self, operands: Sequence[str]) -> RunResult:
        if not self.confirm_batch(operands):
            logger.debug("batch of %d declined", len(operands))
            return RunResult(declined=True)

        results: List[OperandResult] = []
        for operand in operands:
            result = self.process(operand)
            results.append(result)
            if result.outcome.is_fatal:
                break
        return RunResult(tuple(results))
