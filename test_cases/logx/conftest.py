import io
import re
from pathlib import Path

import pytest

from src.logx.log_config import LoggerConfig
from src.logx.log_formatter import parse_line
from src.logx.log_operator import LogOperator, reset_logger

_RECORD_START = re.compile(r"(?m)^(?=\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{3}\] \[)")


def split_records(text: str):
    """Split log file text into LogRecords; anything else (the banner) is skipped."""
    chunks = [c for c in _RECORD_START.split(text) if c]
    return [parse_line(c) for c in chunks if _RECORD_START.match(c)]


@pytest.fixture(autouse=True)
def _fresh_process_logger():
    reset_logger()
    yield
    reset_logger()


@pytest.fixture
def log_file(tmp_path: Path) -> Path:
    return tmp_path / "LogX.log"


@pytest.fixture
def console() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def config(log_file: Path, console: io.StringIO) -> LoggerConfig:
    return LoggerConfig(log_file_path=log_file, console_stream=console)


@pytest.fixture
def logger(config: LoggerConfig) -> LogOperator:
    return LogOperator(config)


@pytest.fixture
def read_records():
    def _read(path: Path):
        if not path.exists():
            return []
        return split_records(path.read_text(encoding="utf-8"))
    return _read
