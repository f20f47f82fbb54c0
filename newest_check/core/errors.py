from __future__ import annotations


class CheckError(Exception):
    """Base class for anything that aborts a run."""


class NavigationFailure(CheckError):
    """The listing page failed to load or settle."""


class TimestampParseError(CheckError, ValueError):
    def __init__(self, title: str) -> None:
        self.title = title
        super().__init__(f"Cannot parse a timestamp from age title {title!r}")


class ValidationFailure(CheckError, AssertionError):
    pass


class CountMismatch(ValidationFailure):
    def __init__(self, actual: int, expected: int) -> None:
        self.actual = actual
        self.expected = expected
        super().__init__(
            f"Article count should be {expected}, got {actual}"
        )


class OrderViolation(ValidationFailure):
    def __init__(self, index: int, current: int, following: int) -> None:
        self.index = index
        self.current = current
        self.following = following
        super().__init__(
            f"Article {index + 1:04d} is out of order (index {index} -> {index + 1}): "
            f"current time {current} should be greater than or equal to next time {following}"
        )
