"""Errors and warnings raised or collected while reading .puz files."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class PuzWarning:
    """A non-fatal problem met while parsing; the puzzle is still produced."""


@dataclass(frozen=True)
class SkippedExtension(PuzWarning):
    """An optional extension section was skipped."""

    section: str
    reason: str

    def __str__(self) -> str:
        return f"Skipped extension section '{self.section}': {self.reason}"


@dataclass(frozen=True)
class EncodingIssue(PuzWarning):
    """Character encoding trouble that was handled."""

    context: str
    recovered: bool

    def __str__(self) -> str:
        outcome = "recovered using fallback" if self.recovered else "could not recover"
        return f"Encoding issue in {self.context}: {outcome}"


@dataclass(frozen=True)
class DataRecovery(PuzWarning):
    """Invalid data was replaced by defaults."""

    field: str
    issue: str

    def __str__(self) -> str:
        return f"Data recovery for '{self.field}': {self.issue}"


@dataclass(frozen=True)
class ScrambledPuzzle(PuzWarning):
    """The puzzle solution is scrambled."""

    version: str

    def __str__(self) -> str:
        return (
            f"Puzzle is scrambled (version {self.version}). "
            "Solution may not be readable without descrambling."
        )


@dataclass
class ParseResult(Generic[T]):
    """A parsed value together with the warnings collected on the way."""

    result: T
    warnings: List[PuzWarning] = field(default_factory=list)

    def add_warning(self, warning: PuzWarning) -> None:
        self.warnings.append(warning)


class PuzError(Exception):
    """Base class for every error that stops a .puz file from being parsed."""

    def __post_init__(self) -> None:
        Exception.__init__(self, str(self))

    def with_position(self, position: int) -> "PuzError":
        """Return the error carrying a byte position, where it has one."""
        if dataclasses.is_dataclass(self) and any(
            f.name == "position" for f in dataclasses.fields(self)
        ):
            return dataclasses.replace(self, position=position)
        return self

    def with_context(self, context: str) -> "PuzError":
        """Return the error with a context prefix, where it supports one."""
        return self


@dataclass(eq=False)
class InvalidMagic(PuzError):
    found: bytes

    def __str__(self) -> str:
        return (
            "Invalid .puz file magic header. Expected 'ACROSS&DOWN\\0', "
            f"found: {list(self.found)}. This file may be corrupted or not a .puz file."
        )


@dataclass(eq=False)
class InvalidChecksum(PuzError):
    expected: int
    found: int
    context: str

    def __str__(self) -> str:
        return (
            f"Checksum validation failed in {self.context}: expected "
            f"0x{self.expected:04X}, found 0x{self.found:04X}. The file may be corrupted."
        )


@dataclass(eq=False)
class InvalidDimensions(PuzError):
    width: int
    height: int

    def __str__(self) -> str:
        return (
            f"Invalid puzzle dimensions: {self.width}x{self.height}. "
            "Dimensions must be between 1 and 255."
        )


@dataclass(eq=False)
class InvalidClueCount(PuzError):
    expected: int
    found: int

    def __str__(self) -> str:
        return (
            f"Clue count mismatch: expected {self.expected} clues, found {self.found}. "
            "The file may be corrupted."
        )


@dataclass(eq=False)
class SectionSizeMismatch(PuzError):
    section: str
    expected: int
    found: int

    def __str__(self) -> str:
        return (
            f"Extension section '{self.section}' size mismatch: expected "
            f"{self.expected} bytes, found {self.found}. The section may be corrupted."
        )


@dataclass(eq=False)
class PuzParseError(PuzError):
    message: str
    context: str = ""
    position: Optional[int] = None

    def __str__(self) -> str:
        if self.position is not None:
            return f"Parse error at position {self.position}: {self.message} ({self.context})"
        return f"Parse error: {self.message} ({self.context})"

    def with_context(self, context: str) -> "PuzError":
        return dataclasses.replace(self, context=f"{context}: {self.context}")


@dataclass(eq=False)
class PuzIOError(PuzError):
    message: str
    kind: str = "Other"
    position: Optional[int] = None

    def __str__(self) -> str:
        if self.position is not None:
            return f"I/O error at position {self.position}: {self.message} ({self.kind})"
        return f"I/O error: {self.message} ({self.kind})"

    def with_context(self, context: str) -> "PuzError":
        return dataclasses.replace(self, message=f"{context}: {self.message}")


@dataclass(eq=False)
class InvalidUtf8(PuzError):
    message: str
    position: Optional[int] = None

    def __str__(self) -> str:
        if self.position is not None:
            return f"Invalid UTF-8 data at position {self.position}: {self.message}"
        return f"Invalid UTF-8 data: {self.message}"

    def with_context(self, context: str) -> "PuzError":
        return dataclasses.replace(self, message=f"{context}: {self.message}")


@dataclass(eq=False)
class MissingData(PuzError):
    field: str
    position: Optional[int] = None

    def __str__(self) -> str:
        if self.position is not None:
            return f"Missing required data '{self.field}' at position {self.position}"
        return f"Missing required data: {self.field}"


@dataclass(eq=False)
class UnsupportedVersion(PuzError):
    version: str

    def __str__(self) -> str:
        return (
            f"Unsupported .puz file version: '{self.version}'. "
            "Only standard versions are supported."
        )


@dataclass(eq=False)
class InvalidGrid(PuzError):
    reason: str

    def __str__(self) -> str:
        return f"Invalid puzzle grid: {self.reason}"


@dataclass(eq=False)
class InvalidClues(PuzError):
    reason: str

    def __str__(self) -> str:
        return f"Invalid clues: {self.reason}"