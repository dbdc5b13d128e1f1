import sys
from typing import Optional, TextIO


class ConsoleLogSink:
    """
    Log sink that mirrors formatted lines to a console stream.

    Writes are synchronous and flushed per line. Errors are not caught:
    there is no channel below the console to report them on.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        # None means "whatever sys.stdout is at write time", so
        # redirection (and pytest capture) keeps working.
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, line: str) -> None:
        stream = self.stream
        stream.write(line)
        stream.flush()


def report_failure(message: str, error: Optional[BaseException] = None) -> None:
    """
    Report an internal LogX failure on stderr.

    Used for rotation, write and banner failures, which must never be
    raised back into application code.
    """
    if error is not None:
        message = f"{message}: {type(error).__name__}: {error}"
    print(f"[LogX] {message}", file=sys.stderr, flush=True)
