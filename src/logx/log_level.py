from enum import Enum


class LogLevel(Enum):
    """
    Ordered severity level for log messages.

    The declaration order is the filtering order: a message is
    emitted when its level ranks at or above the current threshold.
    ALL and OFF only make sense as thresholds.
    """

    ALL = 0      # Threshold that admits everything
    TRACE = 1    # Extremely fine-grained execution detail
    DEBUG = 2    # Developer-focused diagnostic information
    INFO = 3     # Normal operation
    WARN = 4     # Unexpected but recoverable condition
    ERROR = 5    # Operation failed, program continued
    FATAL = 6    # Program integrity at risk
    OFF = 7      # Threshold that suppresses everything

    @property
    def rank(self) -> int:
        return self.value

    @classmethod
    def parse(cls, name: str) -> "LogLevel":
        key = str(name).strip().upper()
        if key == "WARNING":
            key = "WARN"
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown log level: {name}") from None


def should_emit(level: LogLevel, threshold: LogLevel) -> bool:
    return level.rank >= threshold.rank
