"""Exception hierarchy for parsing and simulation faults."""

from __future__ import annotations


class SimulationError(Exception):
    """Base class for every error raised by jssim."""


class ParseFailure(SimulationError):
    """Source text could not be parsed; no trace exists."""

    def __init__(self, message: str, line: int = 0, column: int = 0):
        super().__init__(message)
        self.line = line
        self.column = column


class SimulationFault(SimulationError):
    """A fault the top-level driver turns into a single halting step."""

    error_name: str = "Error"

    def __init__(self, message: str, name: str = ""):
        super().__init__(message)
        self.message = message
        self.name = name

    def describe(self) -> str:
        return f"{self.error_name}: {self.message}"


class ReferenceFault(SimulationFault):
    """Identifier missing from every enclosing scope, or read inside its TDZ."""

    error_name = "ReferenceError"


class StackOverflowFault(SimulationFault):
    """Call nesting exceeded the configured recursion bound."""

    error_name = "RangeError"
