from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import threading

from src.logx.console_log_sink import report_failure
from src.logx.log_exceptions import LogxError, LogWriteError, RotationError
from src.logx.log_rotation import RotationManager


@dataclass(frozen=True)
class SinkResult:
    """
    Outcome of one file append.
    """

    ok: bool
    rotated_to: Optional[Path] = None
    error: Optional[LogxError] = None


class FileLogSink:
    """
    Log sink that appends formatted lines to the active log file.

    The size check, a possible rotation and the append run as one
    critical section, so concurrent writers never rename the same file
    twice or lose a line. The file is opened per write and closed
    (flushed) before the lock is released.
    """

    def __init__(self, rotation: RotationManager):
        self._rotation = rotation
        self._path = rotation.log_file_path
        self._lock = threading.Lock()

    @property
    def log_file_path(self) -> Path:
        return self._path

    @property
    def rotation(self) -> RotationManager:
        return self._rotation

    def append(self, line: str) -> SinkResult:
        """
        Append one formatted line, rotating first if needed.

        This method must not raise exceptions outward. Rotation failures
        are reported and the line still goes to the (oversized) file.
        """
        rotated_to = None
        rotation_error = None

        with self._lock:
            try:
                rotated_to = self._rotation.ensure_capacity()
            except RotationError as e:
                rotation_error = e
                report_failure(f"Log rotation failed for {self._path}", e)

            try:
                self._path.parent.mkdir(parents=True, exist_ok=True)
                # Unencodable characters (lone surrogates) are escaped, not dropped.
                with open(self._path, "a", encoding="utf-8", errors="backslashreplace") as f:
                    f.write(line)
                    f.flush()
            except (OSError, ValueError) as e:
                error = LogWriteError(self._path, "Unable to append to log file", str(e))
                report_failure(f"Log write failed for {self._path}", e)
                return SinkResult(ok=False, rotated_to=rotated_to, error=error)

        return SinkResult(ok=True, rotated_to=rotated_to, error=rotation_error)
