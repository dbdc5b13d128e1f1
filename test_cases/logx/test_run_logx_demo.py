from pathlib import Path

from src.logx.log_level import LogLevel
from test_cases.logx_demo.run_logx_demo import run


def test_demo_writes_banner_and_both_passes(tmp_path: Path, read_records, capsys) -> None:
    log_file = tmp_path / "demo.log"

    run(log_file, LogLevel.WARN)

    text = log_file.read_text(encoding="utf-8")
    assert text.startswith("   __")
    assert "Log Express" in text

    records = read_records(log_file)
    assert len(records) == 10
    assert [r.level for r in records[7:]] == [LogLevel.WARN, LogLevel.ERROR, LogLevel.FATAL]
    assert "Log Express" in capsys.readouterr().out


def test_demo_without_banner(tmp_path: Path, read_records) -> None:
    log_file = tmp_path / "plain.log"

    run(log_file, LogLevel.OFF, banner=False)

    assert log_file.read_text(encoding="utf-8").startswith("[")
    assert len(read_records(log_file)) == 7
