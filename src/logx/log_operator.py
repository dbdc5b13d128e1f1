import sys
import threading
from datetime import datetime
from typing import Callable, Optional, Protocol, Union

from src.logx.call_site import CallSite
from src.logx.console_log_sink import ConsoleLogSink, report_failure
from src.logx.file_log_sink import FileLogSink, SinkResult
from src.logx.log_banner import BANNER_PAYLOAD, decode_banner
from src.logx.log_config import LoggerConfig
from src.logx.log_exceptions import BannerDecodeError
from src.logx.log_formatter import format_record, render_exception
from src.logx.log_level import LogLevel, should_emit
from src.logx.log_record import LogRecord
from src.logx.log_rotation import RotationManager


class Logger(Protocol):
    """
    Leveled logging surface used by application code.

    Implementations never raise on I/O failure; logging is fire and forget.
    """

    def set_log_level(self, level: Union[LogLevel, str]) -> None:
        """
        Messages below `level` are dropped from now on.
        """

    def trace(self, message: str, *, site: Optional[CallSite] = None) -> None: ...

    def debug(self, message: str, *, site: Optional[CallSite] = None) -> None: ...

    def info(self, message: str, *, site: Optional[CallSite] = None) -> None: ...

    def warn(self, message: str, *, site: Optional[CallSite] = None) -> None: ...

    def error(self, message: Union[str, BaseException], *, site: Optional[CallSite] = None) -> None: ...

    def fatal(self, message: str, *, site: Optional[CallSite] = None) -> None: ...


class LogOperator:
    """
    Leveled logger writing to one rotating file and the console.

    Each admitted call is timestamped, formatted, written to the file
    (rotating it first when full) and then mirrored to the console.
    Filtered calls perform no I/O at all.

    The call site is taken from the frame that called the public
    method, unless the caller passes one explicitly with `site=`.
    """

    def __init__(
        self,
        config: Optional[LoggerConfig] = None,
        *,
        file_sink: Optional[FileLogSink] = None,
        console_sink: Optional[ConsoleLogSink] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._config = config or LoggerConfig()
        self._level = self._config.default_level
        self._level_lock = threading.Lock()
        self._clock = clock

        self._file_sink = file_sink or FileLogSink(
            RotationManager(self._config.log_file_path, self._config.max_file_size)
        )
        self._console_sink = console_sink or ConsoleLogSink(self._config.console_stream)

    # -------------------------------------------------
    # Threshold
    # -------------------------------------------------
    @property
    def log_level(self) -> LogLevel:
        return self._level

    @property
    def log_file_path(self):
        return self._file_sink.log_file_path

    def set_log_level(self, level: Union[LogLevel, str]) -> None:
        if not isinstance(level, LogLevel):
            level = LogLevel.parse(level)
        with self._level_lock:
            self._level = level

    def is_enabled_for(self, level: LogLevel) -> bool:
        # Unlocked read; a concurrent set_log_level() may or may not
        # be seen by a call already in flight.
        return should_emit(level, self._level)

    # -------------------------------------------------
    # Public logging calls
    # -------------------------------------------------
    def trace(self, message: str, *, site: Optional[CallSite] = None) -> None:
        self._log(LogLevel.TRACE, message, site or CallSite.capture(1))

    def debug(self, message: str, *, site: Optional[CallSite] = None) -> None:
        self._log(LogLevel.DEBUG, message, site or CallSite.capture(1))

    def info(self, message: str, *, site: Optional[CallSite] = None) -> None:
        self._log(LogLevel.INFO, message, site or CallSite.capture(1))

    def warn(self, message: str, *, site: Optional[CallSite] = None) -> None:
        self._log(LogLevel.WARN, message, site or CallSite.capture(1))

    warning = warn

    def error(self, message: Union[str, BaseException], *, site: Optional[CallSite] = None) -> None:
        """
        Log at ERROR. An exception is logged as its full traceback.
        """
        site = site or CallSite.capture(1)
        if isinstance(message, BaseException):
            if not self.is_enabled_for(LogLevel.ERROR):
                return
            message = render_exception(message, sys._getframe(1))
        self._log(LogLevel.ERROR, message, site)

    def fatal(self, message: str, *, site: Optional[CallSite] = None) -> None:
        self._log(LogLevel.FATAL, message, site or CallSite.capture(1))

    def log(self, level: LogLevel, message: str, *, site: Optional[CallSite] = None) -> None:
        if level in (LogLevel.ALL, LogLevel.OFF):
            raise ValueError(f"{level.name} is a threshold, not a message level")
        self._log(level, message, site or CallSite.capture(1))

    def write_header_banner(self, payload: str = BANNER_PAYLOAD) -> "LogOperator":
        """
        Write the decorative header banner to both sinks.

        Goes through the same rotation and write path as a record and
        ignores the threshold. A malformed payload is reported, not raised.
        """
        try:
            banner = decode_banner(payload)
        except BannerDecodeError as e:
            report_failure("Header banner could not be decoded", e)
            return self

        self._emit(banner)
        return self

    # -------------------------------------------------
    # Pipeline
    # -------------------------------------------------
    def _log(self, level: LogLevel, message: str, site: CallSite) -> None:
        if not self.is_enabled_for(level):
            return

        record = LogRecord(
            level=level,
            site=site,
            message=str(message),
            timestamp=self._clock(),
        )
        self._emit(format_record(record))

    def _emit(self, text: str) -> SinkResult:
        # File and console are independent: append() never raises,
        # so the console mirror always runs.
        result = self._file_sink.append(text)
        self._console_sink.write(text)
        return result


_instance: Optional[LogOperator] = None
_instance_lock = threading.Lock()


def get_logger(config: Optional[LoggerConfig] = None) -> LogOperator:
    """
    Process-wide LogOperator, created on first use.

    `config` only applies to the call that creates the instance.
    """
    global _instance

    if _instance is None:
        with _instance_lock:
            if _instance is None:
                _instance = LogOperator(config)
    return _instance


def reset_logger() -> None:
    """
    Drop the process-wide instance; the next get_logger() builds a new one.
    """
    global _instance

    with _instance_lock:
        _instance = None
