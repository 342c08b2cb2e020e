import logging
import sys
from typing import Optional, Sequence

from .classifier import parse_args
from .config import debug_enabled, resolve_destination_root
from .default_flags import USAGE
from .errors import DestinationError, UsageError
from .logger import configure_logging
from .policy import PROG, DeletionPolicy

logger = logging.getLogger(__name__)

def usage() -> None:
    print(USAGE)

def main(argv: Optional[Sequence[str]] = None) -> int:
    configure_logging(debug_enabled())
    tokens = list(sys.argv[1:] if argv is None else argv)

    try:
        parsed = parse_args(tokens)
    except UsageError:
        usage()
        return 1

    if parsed.flags.help:
        usage()
        return 0

    try:
        destination_root = resolve_destination_root()
    except DestinationError as e:
        print(f"{PROG}: {e}")
        return 1
    logger.debug("flags=%s destination=%s", parsed.flags, destination_root)

    policy = DeletionPolicy(parsed.flags, destination_root)
    try:
        result = policy.run(parsed.operands)
    except KeyboardInterrupt:
        # Ctrl-C at a prompt ends the run, like SIGINT would
        print()
        return 130
    return result.exit_code

def run() -> None:
    sys.exit(main())
