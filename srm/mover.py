import logging
from pathlib import Path

from .errors import MoveError
from .models import MoveResult
from .utils import join_destination

logger = logging.getLogger(__name__)

class TrashMover:
    """Renames operands into the destination root.

    No collision renaming and no cross-device copy: an existing destination is
    replaced the way rename(2) replaces it, and an EXDEV failure surfaces as
    MoveError.
    """
    def __init__(self, destination_root: str):
        self.output_root = destination_root

    def destination_for(self, name: str) -> Path:
        return join_destination(self.output_root, name)

    def move_one(self, path: str, name: str) -> MoveResult:
        src = Path(path)
        dest = self.destination_for(name)

        try:
            src.rename(dest)
        except OSError as e:
            raise MoveError(path, str(dest), e) from e
        logger.debug("moved %s -> %s", src, dest)
        return MoveResult(src, dest)
