#!/usr/bin/env python3
import sys
from dataclasses import dataclass
from typing import List, Optional, TextIO


@dataclass(frozen=True)
class Diagnostic:
    """A single error reported while scanning.

    Args:
        line: int. 1-based line where the error was encountered.
        message: str. Short description of the error.
    """

    line: int
    message: str

    def __str__(self) -> str:
        return f"Error [Line {self.line}]: {self.message}"


class ErrorReporter:
    """Collector for errors reported while scanning a Budget source.

    The Scanner does not stop when it encounters malformed input. Instead it
    reports the error here and keeps going, so that a single pass can surface
    every error in the source. The driver then checks had_error to decide
    whether to treat the input as failed.

    One reporter is passed into each scan rather than kept as process-wide
    state, so independent scans never see each other's errors.

    Args:
        stream: Optional[TextIO]. Where each error is printed as it is
            reported. Defaults to whatever sys.stderr is at report time.
        quiet: bool. Only collect errors, never print them.

    Public Attributes:
        diagnostics: List[Diagnostic]. Every error reported since construction
            or the last reset(), in the order they were reported.
    """

    def __init__(self, stream: Optional[TextIO] = None, quiet: bool = False) -> None:
        self.stream = stream
        self.quiet = quiet
        self.diagnostics: List[Diagnostic] = []

    @property
    def had_error(self) -> bool:
        """Whether any error has been reported since the last reset()."""

        return bool(self.diagnostics)

    def error(self, line: int, message: str) -> None:
        """Report an error at a given line.

        Args:
            line: int. Line number where the error was encountered.
            message: str. Error message for the user.

        Raises:
            TypeError: If line is not an int.
        """

        # bool is an int subclass but never a line number.
        if not isinstance(line, int) or isinstance(line, bool):
            raise TypeError(f"Error line must be int, got {type(line)}")

        self.report(Diagnostic(line, message))

    def report(self, diagnostic: Diagnostic) -> None:
        """Record a Diagnostic and print it unless quiet.

        Args:
            diagnostic: Diagnostic. The error to record.
        """

        self.diagnostics.append(diagnostic)
        if not self.quiet:
            print(diagnostic, file=self.stream or sys.stderr)

    def reset(self) -> None:
        """Forget all reported errors.

        Used by the interactive prompt, where an error on one line should not
        affect the next one.
        """

        self.diagnostics.clear()
