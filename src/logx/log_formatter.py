"""log_formatter.py

Fixed-layout rendering of log lines:

    [2024-05-01 13:45:12.007] [INFO ] [app.worker:42] - message text

The message is written as-is. Multi-line messages (tracebacks) are one
opaque block; nothing is escaped or truncated. Lines end in "\n" and the
text-mode file handle turns that into the platform newline.
"""

from __future__ import annotations

import re
import traceback
from datetime import datetime
from types import FrameType
from typing import Optional

from src.logx.call_site import CallSite
from src.logx.log_exceptions import LogFormatError
from src.logx.log_level import LogLevel
from src.logx.log_record import LogRecord

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
LEVEL_WIDTH = 5

_LINE_RE = re.compile(
    r"^\[(?P<ts>\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{3})\] "
    r"\[(?P<level>[A-Z]+) *\] "
    r"\[(?P<module>[^\]]*):(?P<line>\d+)\] - "
    r"(?P<message>.*)$",
    re.DOTALL,
)


def format_timestamp(ts: datetime) -> str:
    return f"{ts.strftime(TIMESTAMP_FORMAT)}.{ts.microsecond // 1000:03d}"


def format_line(ts: datetime, level: LogLevel, site: CallSite, message: str) -> str:
    return f"[{format_timestamp(ts)}] [{level.name.ljust(LEVEL_WIDTH)}] [{site}] - {message}\n"


def format_record(record: LogRecord) -> str:
    return format_line(record.timestamp, record.level, record.site, record.message)


def render_exception(exc: BaseException, stack_frame: Optional[FrameType] = None) -> str:
    """
    Render an exception as its full traceback text.

    An exception that was never raised has no traceback of its own;
    in that case the stack leading to `stack_frame` (normally the
    logging call site) stands in for the frame list.
    """
    if exc.__traceback__ is None and stack_frame is not None:
        frames = "".join(traceback.format_stack(stack_frame))
        body = "".join(traceback.format_exception_only(type(exc), exc))
        text = f"Traceback (most recent call last):\n{frames}{body}"
    else:
        text = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return text.rstrip("\n")


def parse_line(line: str) -> LogRecord:
    """
    Inverse of format_line.

    Recovers timestamp (to the millisecond), level, site and message.
    Raises LogFormatError for anything that is not a LogX line.
    """
    text = line[:-1] if line.endswith("\n") else line
    if text.endswith("\r"):
        text = text[:-1]

    match = _LINE_RE.match(text)
    if match is None:
        raise LogFormatError(line)

    try:
        level = LogLevel[match.group("level")]
        ts = datetime.strptime(match.group("ts"), f"{TIMESTAMP_FORMAT}.%f")
    except (KeyError, ValueError) as e:
        raise LogFormatError(line, f"Invalid field in LogX line: {e}") from e

    return LogRecord(
        level=level,
        site=CallSite(module=match.group("module"), line=int(match.group("line"))),
        message=match.group("message"),
        timestamp=ts,
    )
