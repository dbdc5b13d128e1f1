import sys
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CallSite:
    """
    Logical source location that issued a log call.

    Either captured from the calling frame at the public logging
    method or supplied explicitly by the calling code.
    """

    module: str
    # Dotted module name (or any logical component name).

    line: int
    # Line number of the log call within the module.

    function: Optional[str] = None
    # Enclosing function, kept for diagnostics only.

    def __str__(self) -> str:
        return f"{self.module}:{self.line}"

    @classmethod
    def capture(cls, depth: int = 0) -> "CallSite":
        """
        Capture the site `depth` frames above the code calling this method.

        depth=0 is the line that called capture() itself; a public
        logging method passes depth=1 to name its own caller.
        """
        try:
            frame = sys._getframe(depth + 1)
        except ValueError:
            return cls(module="<unknown>", line=0)

        return cls(
            module=frame.f_globals.get("__name__", "<unknown>"),
            line=frame.f_lineno,
            function=frame.f_code.co_name,
        )
