"""Data models for non-fatal problems found while reading documents."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StructuralWarning:
    """A recoverable structural problem, such as an unterminated code fence."""

    line: int
    message: str


@dataclass(frozen=True)
class ReadFailure:
    """A document that could not be read; the rest of the run continues."""

    path: str
    error: str
