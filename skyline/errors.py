"""Structured error types used throughout the skyline package."""

from __future__ import annotations

from enum import Enum


class ErrorType(str, Enum):
    """Categories of errors that can occur while building a skyline."""

    VALIDATION = "VALIDATION"
    IO = "IO"
    NETWORK = "NETWORK"
    GRAPHQL = "GRAPHQL"
    STL = "STL"


class SkylineError(Exception):
    """An error carrying a category, a message and an optional underlying cause."""

    def __init__(
        self,
        error_type: ErrorType,
        message: str,
        err: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.error_type = ErrorType(error_type)
        self.message = message
        self.err = err
        if err is not None:
            self.__cause__ = err

    def __str__(self) -> str:
        if self.err is not None:
            return f"[{self.error_type.value}] {self.message}: {self.err}"
        return f"[{self.error_type.value}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"SkylineError({self.error_type.value!r}, {self.message!r}, "
            f"{self.err!r})"
        )

    def matches(self, other: object) -> bool:
        """Return True if ``other`` is a SkylineError of the same category."""
        return isinstance(other, SkylineError) and self.error_type == other.error_type


def wrap(err: BaseException | None, message: str) -> SkylineError | None:
    """Add context to ``err``, keeping its category if it already has one.

    Returns None when ``err`` is None. Errors without a category are
    classified as STL errors.
    """
    if err is None:
        return None
    if isinstance(err, SkylineError):
        return SkylineError(err.error_type, f"{message}: {err.message}", err.err)
    return SkylineError(ErrorType.STL, message, err)