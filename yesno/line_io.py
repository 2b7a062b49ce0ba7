"""Line I/O — the read/write collaborator every dialogue run talks through."""

from __future__ import annotations

import sys
from collections import deque
from typing import Iterable, Protocol, TextIO


class DialogueIOError(OSError):
    """The line source or sink became unusable (closed, exhausted, broken)."""


class LineIO(Protocol):
    def write_line(self, text: str) -> None: ...

    def read_line(self) -> str: ...


class ConsoleIO:
    """Line I/O over a pair of text streams (stdin/stdout by default)."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout

    def write_line(self, text: str) -> None:
        try:
            self._out.write(text + "\n")
            self._out.flush()
        except (OSError, ValueError) as exc:  # ValueError: write to closed file
            raise DialogueIOError(f"cannot write to output: {exc}") from exc

    def read_line(self) -> str:
        try:
            line = self._in.readline()
        except (OSError, ValueError) as exc:
            raise DialogueIOError(f"cannot read from input: {exc}") from exc
        if not line:
            raise DialogueIOError("end of input")
        return line.removesuffix("\n")


class ScriptedLineIO:
    """In-memory Line I/O fed from a fixed sequence of input lines.

    Every written line is kept in ``written`` and every read attempt is
    counted in ``reads``. An exception instance in ``lines`` is raised when
    it is reached; running out of lines raises DialogueIOError.
    """

    def __init__(self, lines: Iterable[str | BaseException] = ()):
        self._lines = deque(lines)
        self.written: list[str] = []
        self.reads = 0

    def write_line(self, text: str) -> None:
        self.written.append(text)

    def read_line(self) -> str:
        self.reads += 1
        if not self._lines:
            raise DialogueIOError("input exhausted")
        line = self._lines.popleft()
        if isinstance(line, BaseException):
            raise line
        return line

    @property
    def remaining(self) -> int:
        return len(self._lines)
