from datetime import datetime
from pathlib import Path

import pytest
from src.logx.file_log_sink import FileLogSink
from src.logx.log_exceptions import RotationError
from src.logx.log_rotation import MAX_BACKUP_SUFFIX, RotationManager

LIMIT = 100
INSTANT = datetime(2024, 5, 1, 13, 45, 12)


def _manager(log_file: Path, limit: int = LIMIT) -> RotationManager:
    return RotationManager(log_file, limit, clock=lambda: INSTANT)


def test_missing_file_counts_as_empty(log_file: Path) -> None:
    manager = _manager(log_file)
    assert manager.current_size() == 0
    assert manager.ensure_capacity() is None


def test_no_rotation_one_byte_below_limit(log_file: Path) -> None:
    log_file.write_bytes(b"x" * (LIMIT - 1))
    sink = FileLogSink(_manager(log_file))

    result = sink.append("newest\n")

    assert result.ok
    assert result.rotated_to is None
    assert log_file.read_text(encoding="utf-8") == "x" * (LIMIT - 1) + "newest\n"


def test_rotation_at_limit_before_write(log_file: Path) -> None:
    log_file.write_bytes(b"x" * LIMIT)
    sink = FileLogSink(_manager(log_file))

    result = sink.append("newest\n")

    expected_backup = log_file.with_name("LogX_2024_05_01_13_45_12.log")
    assert result.ok
    assert result.rotated_to == expected_backup
    assert expected_backup.read_bytes() == b"x" * LIMIT
    assert log_file.read_text(encoding="utf-8") == "newest\n"


def test_backup_name_is_disambiguated(log_file: Path) -> None:
    manager = _manager(log_file)
    taken = log_file.with_name("LogX_2024_05_01_13_45_12.log")
    taken.write_text("older archive", encoding="utf-8")
    log_file.write_bytes(b"y" * LIMIT)

    backup = manager.ensure_capacity()

    assert backup == log_file.with_name("LogX_2024_05_01_13_45_12_1.log")
    assert taken.read_text(encoding="utf-8") == "older archive"
    assert not log_file.exists()


def test_backup_suffix_exhaustion_raises(log_file: Path) -> None:
    manager = _manager(log_file)
    log_file.with_name("LogX_2024_05_01_13_45_12.log").touch()
    for n in range(1, MAX_BACKUP_SUFFIX + 1):
        log_file.with_name(f"LogX_2024_05_01_13_45_12_{n}.log").touch()

    with pytest.raises(RotationError):
        manager.backup_path_for(INSTANT)


def test_list_backups_oldest_first(log_file: Path) -> None:
    manager = _manager(log_file)
    for name in (
        "LogX_2024_05_01_13_45_12_2.log",
        "LogX_2024_05_01_13_45_12.log",
        "LogX_2023_12_31_23_59_59.log",
        "LogX_2024_05_01_13_45_12_10.log",
        "Other_2024_05_01_13_45_12.log",
    ):
        log_file.with_name(name).touch()
    log_file.touch()

    assert [p.name for p in manager.list_backups()] == [
        "LogX_2023_12_31_23_59_59.log",
        "LogX_2024_05_01_13_45_12.log",
        "LogX_2024_05_01_13_45_12_2.log",
        "LogX_2024_05_01_13_45_12_10.log",
    ]


def test_limit_must_be_positive(log_file: Path) -> None:
    with pytest.raises(ValueError):
        RotationManager(log_file, 0)
