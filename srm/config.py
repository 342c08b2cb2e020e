import os
from pathlib import Path
from typing import Mapping, Optional

from .default_flags import FALLBACK_DESTINATION, TRASH_DIR_NAME
from .errors import DestinationError

TRASH_DIR_ENV = "SRM_TRASH_DIR"
DEBUG_ENV = "SRM_DEBUG"

def resolve_destination_root(
    env: Optional[Mapping[str, str]] = None,
    home: Optional[Path] = None,
) -> str:
    """$SRM_TRASH_DIR, else ~/.Trash when it exists (macOS), else /tmp."""
    env = os.environ if env is None else env
    override = env.get(TRASH_DIR_ENV)
    if override:
        return override

    if home is None:
        try:
            home = Path.home()
        except (RuntimeError, KeyError) as e:
            raise DestinationError("could not get user's home dir") from e

    trash = home / TRASH_DIR_NAME
    if trash.exists():
        return str(trash)
    return FALLBACK_DESTINATION

def debug_enabled(env: Optional[Mapping[str, str]] = None) -> bool:
    env = os.environ if env is None else env
    return env.get(DEBUG_ENV, "") not in ("", "0")
