# Recognized option tokens -> Flags field they switch on.
FLAG_TOKENS = {
    "-h": "help", "--help": "help",
    "-f": "force",
    "-i": "interactive",
    "-I": "batch_interactive",
    "-r": "recursive", "-R": "recursive",
    "-d": "allow_directory",
    "-v": "verbose",
    "-P": "compat",  # 4.4BSD-Lite2 leftover, accepted and ignored
}
END_OF_OPTIONS = "--"

AFFIRMATIVE_RESPONSES = frozenset({"y", "yes", "yea", "yeah", "da", "si", "letsgo"})

# -I asks once when more operands than this are given.
BATCH_THRESHOLD = 3

TRASH_DIR_NAME = ".Trash"
FALLBACK_DESTINATION = "/tmp"

USAGE = """Usage:
    srm [-f | -i] [-dIPRrv] <filepath> <...>
Note:
    Intended to replace `rm` via a shell alias"""
