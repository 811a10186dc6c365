"""
Caller location lookup

Resolves the file, line and function of the code that called a logger.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import FrameType
from typing import Optional
import os

# Frames from files below this directory belong to the logger itself
_PACKAGE_DIR = os.path.normcase(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@dataclass(frozen=True)
class CallerInfo:
    """Location of a logging call."""

    file: str = ""
    line: int = -1
    function: str = ""
    module: str = ""

    def file_name(self, mode: str = "short") -> str:
        """
        Render the calling file.

        Args:
            mode: "short" for the base name, anything else for the full path
        """
        if mode == "short":
            return os.path.basename(self.file)
        return self.file

    def function_name(self, mode: str = "package") -> str:
        """
        Render the calling function.

        Args:
            mode: "short" -> ``func``, "package" -> ``module.func``,
                  anything else -> ``full.module.path.func``
        """
        if mode == "short":
            return self.function.rsplit(".", 1)[-1]
        if mode == "package":
            package = self.module.rsplit(".", 1)[-1]
            return f"{package}.{self.function}" if package else self.function
        return f"{self.module}.{self.function}" if self.module else self.function


UNKNOWN_CALLER = CallerInfo()


def _is_internal_frame(frame: FrameType) -> bool:
    filename = os.path.normcase(os.path.abspath(frame.f_code.co_filename))
    return filename.startswith(_PACKAGE_DIR + os.sep)


class RuntimeInformation:
    """
    Walks the call stack to find where a log call came from.

    Instead of a fixed frame offset, every frame that belongs to this
    package is skipped, then ``depth`` more frames. A helper function
    that wraps logger calls is skipped by passing depth=1.
    """

    def caller(self, frame: Optional[FrameType], depth: int = 0) -> CallerInfo:
        """
        Find the caller starting at ``frame``.

        Args:
            frame: Frame inside the logger entrypoint
            depth: Extra frames to skip after leaving the package

        Returns:
            CallerInfo, or UNKNOWN_CALLER if the stack is too shallow
        """
        while frame is not None and _is_internal_frame(frame):
            frame = frame.f_back
        for _ in range(depth):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            return UNKNOWN_CALLER

        code = frame.f_code
        return CallerInfo(
            file=os.path.abspath(code.co_filename),
            line=frame.f_lineno,
            function=getattr(code, "co_qualname", code.co_name),
            module=frame.f_globals.get("__name__", ""),
        )
