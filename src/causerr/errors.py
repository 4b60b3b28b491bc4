from __future__ import annotations


class UsageError(Exception):
    """A defect in the calling code.

    Raised while constructing a decorated error from malformed input. These are
    not meant to be caught and routed like ordinary failures.
    """


class InvalidCauseError(UsageError, TypeError):
    """The cause is neither an exception nor a string."""

    def __init__(self, cause: object) -> None:
        self.cause = cause
        super().__init__(f"invalid type for cause: {cause!r} ({type(cause).__name__})")


class InvalidIdentifierError(UsageError, ValueError):
    """The identifier is not a non-negative integer."""

    def __init__(self, error_id: object) -> None:
        self.error_id = error_id
        super().__init__("id must be >=0")
