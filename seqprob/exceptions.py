"""Exceptions raised by the probabilistic sequence models."""

from __future__ import annotations


class ToPSError(Exception):
    """Base error that records where it was raised.

    The message reads ``file:line: func: message``.
    """

    def __init__(self, file: str, line: int, func: str, message: str) -> None:
        self.file = file
        self.line = line
        self.func = func
        self.message = message
        super().__init__(f"{file}:{line}: {func}: {message}")


class InvalidModelDefinition(ToPSError):
    """A model was defined with inconsistent parameters."""

    def __init__(self, file: str, line: int, func: str) -> None:
        super().__init__(file, line, func, "Invalid model definition")


class NotYetImplemented(ToPSError):
    """The requested operation is not available for this model."""

    def __init__(self, file: str, line: int, func: str) -> None:
        super().__init__(file, line, func, "Method not implemented")


class OutOfRange(ToPSError):
    """An argument lies outside the range the operation accepts."""

    def __init__(self, file: str, line: int, func: str) -> None:
        super().__init__(file, line, func, "Argument out of range")