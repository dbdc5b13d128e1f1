from typing import Optional


class LogxError(Exception):
    """Failure inside LogX; `path` is the log file (or None) the operation was working on."""

    def __init__(self, path, reason, details=None):
        self.path = path
        self.reason = reason
        self.details = details
        super().__init__(reason)

class RotationError(LogxError):
    pass

class LogWriteError(LogxError):
    pass

class BannerDecodeError(LogxError):
    pass


class LogFormatError(ValueError):
    def __init__(self, line: str, reason: Optional[str] = None):
        self.line = line
        super().__init__(reason or f"Not a LogX line: {line!r}")
