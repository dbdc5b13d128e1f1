from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, TextIO

from src.logx.log_level import LogLevel

DEFAULT_LOG_FILE_NAME = "LogX.log"
DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024  # 10 MiB


def default_log_file_path() -> Path:
    return Path.home() / DEFAULT_LOG_FILE_NAME


@dataclass(frozen=True)
class LoggerConfig:
    """
    Construction-time configuration for a LogOperator.

    Nothing here changes after the logger is built; only the
    threshold is mutable, and it lives on the operator itself.
    """

    log_file_path: Path = field(default_factory=default_log_file_path)
    # Active log file. Backups are written beside it.

    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    # Rotate once the active file has reached this many bytes.

    default_level: LogLevel = LogLevel.ALL
    # Threshold in effect until set_log_level() is called.

    console_stream: Optional[TextIO] = None
    # Console mirror; None means the current sys.stdout.

    def __post_init__(self):
        object.__setattr__(self, "log_file_path", Path(self.log_file_path).expanduser())
        if self.max_file_size <= 0:
            raise ValueError(f"max_file_size must be positive, got {self.max_file_size}")
        if not isinstance(self.default_level, LogLevel):
            object.__setattr__(self, "default_level", LogLevel.parse(self.default_level))
