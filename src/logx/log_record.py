from dataclasses import dataclass, field
from datetime import datetime

from src.logx.call_site import CallSite
from src.logx.log_level import LogLevel


@dataclass(frozen=True)
class LogRecord:
    """
    One admitted log call, built just before formatting.

    Records are transient: they are formatted, written and dropped.
    Nothing in LogX keeps them around.
    """

    level: LogLevel
    # Severity the caller logged at (never ALL or OFF).

    site: CallSite
    # Where the call was issued.

    message: str
    # Message text, or a rendered traceback for exceptions.

    timestamp: datetime = field(default_factory=datetime.now)
    # Local wall-clock time; rendered to the millisecond.
