class SrmError(Exception):
    """Base error for the project."""

class UsageError(SrmError):
    pass

class DestinationError(SrmError):
    pass

class FilesystemAccessError(SrmError):
    """A stat-style query on an operand failed."""
    def __init__(self, path: str, cause: OSError):
        self.path = path
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"cannot stat '{path}': {reason}")

class MoveError(SrmError):
    def __init__(self, src: str, dst: str, cause: OSError):
        self.src = src
        self.dst = dst
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"cannot move '{src}' to '{dst}': {reason}")
