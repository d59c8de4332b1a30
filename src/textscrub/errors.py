"""Error kinds raised to callers.  Flat: no nested causes."""

from __future__ import annotations


class CensorError(ValueError):
    """Base class for every error textscrub raises."""


class EmptyWordError(CensorError):
    """A vulgar word registration was attempted with an empty word."""

    def __init__(self, index: int | None = None) -> None:
        self.index = index
        where = f" (entry {index})" if index is not None else ""
        super().__init__(f"Word can't be empty{where}")


class MissingArgumentError(CensorError):
    """CUSTOM matching was requested without a custom pattern."""

    def __init__(self, message: str = "CUSTOM requires a custom_pattern") -> None:
        super().__init__(message)


class InvalidPatternError(CensorError):
    """The caller-supplied custom pattern does not compile."""

    def __init__(self, pattern: str, reason: str = "") -> None:
        self.pattern = pattern
        self.reason = reason
        detail = f": {reason}" if reason else ""
        super().__init__(f"Invalid pattern {pattern!r}{detail}")


class AlignmentMismatchError(CensorError):
    """Classifier output and its input differ in character length."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Classifier changed text length: expected {expected} chars, got {actual}"
        )
