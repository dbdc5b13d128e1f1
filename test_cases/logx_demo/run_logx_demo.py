"""
Module: run_logx_demo.py
Location: test_cases/logx_demo/
Version: 2.0.23

Exercises the LogX public surface end to end:
- header banner
- one message per level at threshold ALL
- an exception logged with its traceback
- the same calls again after raising the threshold

Use command-line args to point the demo at another file or threshold.
"""

import argparse
from pathlib import Path

from src.logx.log_config import LoggerConfig, default_log_file_path
from src.logx.log_level import LogLevel
from src.logx.log_operator import get_logger


def run(log_file: Path, second_level: LogLevel, banner: bool = True) -> None:
    logger = get_logger(LoggerConfig(log_file_path=log_file))
    if banner:
        logger.write_header_banner()

    logger.trace("This is a trace message.")
    logger.debug("This is a debug message.")
    logger.info("This is an info message.")
    logger.warn("This is a warning message")
    logger.error("This is a error message")
    logger.error(Exception("This is error traceback message of exception"))
    logger.fatal("This is a fatal message")

    logger.set_log_level(second_level)

    logger.trace("This trace message won't be logged.")
    logger.debug("This debug message won't be logged.")
    logger.info("This is an info message after changing log level.")
    logger.warn("This is a warning message after changing log level.")
    logger.error("This is an error message after changing log level.")
    logger.fatal("This is a fatal message after changing log level.")


def main():
    parser = argparse.ArgumentParser(description="Run the LogX demo")
    parser.add_argument("--log-file", type=Path, default=default_log_file_path())
    parser.add_argument("--level", default="WARN", help="Threshold for the second pass")
    parser.add_argument("--no-banner", action="store_true", help="Skip the header banner")

    args = parser.parse_args()

    run(args.log_file, LogLevel.parse(args.level), banner=not args.no_banner)
    print(f"[Demo] Log written to {args.log_file}")


if __name__ == "__main__":
    main()
