import os
import re
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional

from src.logx.log_exceptions import RotationError

BACKUP_TIMESTAMP_FORMAT = "%Y_%m_%d_%H_%M_%S"
BACKUP_EXTENSION = ".log"
MAX_BACKUP_SUFFIX = 999


class RotationManager:
    """
    Archives the active log file once it reaches its size limit.

    Rotation renames the active file to
    <stem>_<YYYY_MM_DD_HH_mm_ss>.log beside it. The next append then
    creates a fresh file at the original path.

    Not thread-safe on its own: FileLogSink calls ensure_capacity()
    and the append under one lock.
    """

    def __init__(
        self,
        log_file_path,
        max_file_size: int,
        *,
        clock: Callable[[], datetime] = datetime.now,
    ):
        if max_file_size <= 0:
            raise ValueError(f"max_file_size must be positive, got {max_file_size}")

        self._path = Path(log_file_path)
        self._max_file_size = max_file_size
        self._clock = clock
        self._backup_re = re.compile(
            rf"^{re.escape(self._path.stem)}_(\d{{4}}(?:_\d{{2}}){{5}})(?:_(\d+))?"
            rf"{re.escape(BACKUP_EXTENSION)}$"
        )

    @property
    def log_file_path(self) -> Path:
        return self._path

    @property
    def max_file_size(self) -> int:
        return self._max_file_size

    def current_size(self) -> int:
        """
        Size of the active file in bytes. A missing file counts as empty.
        """
        try:
            return self._path.stat().st_size
        except FileNotFoundError:
            return 0
        except OSError as e:
            raise RotationError(self._path, "Unable to read log file size", str(e)) from e

    def needs_rotation(self) -> bool:
        return self.current_size() >= self._max_file_size

    def ensure_capacity(self) -> Optional[Path]:
        """
        Rotate the active file if it has reached the size limit.

        Returns the backup path when a rotation happened, None otherwise.
        Raises RotationError when the file could not be archived.
        """
        if not self.needs_rotation():
            return None

        backup = self.backup_path_for(self._clock())
        try:
            os.rename(self._path, backup)
        except OSError as e:
            raise RotationError(
                self._path,
                f"Unable to archive log file to {backup.name}",
                str(e),
            ) from e

        return backup

    def backup_path_for(self, instant: datetime) -> Path:
        """
        Archive name for a rotation at `instant`.

        A name that is already taken gets a _1, _2, ... suffix so an
        earlier archive is never overwritten.
        """
        base = f"{self._path.stem}_{instant.strftime(BACKUP_TIMESTAMP_FORMAT)}"
        candidate = self._path.with_name(base + BACKUP_EXTENSION)

        suffix = 0
        while candidate.exists() or candidate == self._path:
            suffix += 1
            if suffix > MAX_BACKUP_SUFFIX:
                raise RotationError(
                    self._path,
                    f"No free backup name for {base}{BACKUP_EXTENSION}",
                )
            candidate = self._path.with_name(f"{base}_{suffix}{BACKUP_EXTENSION}")

        return candidate

    def list_backups(self) -> List[Path]:
        """
        Archived files of this log, oldest first.
        """
        directory = self._path.parent
        if not directory.is_dir():
            return []

        backups = []
        for entry in directory.iterdir():
            match = self._backup_re.match(entry.name)
            if match is None or not entry.is_file():
                continue
            backups.append((match.group(1), int(match.group(2) or 0), entry))

        backups.sort(key=lambda item: (item[0], item[1]))
        return [entry for _, _, entry in backups]
