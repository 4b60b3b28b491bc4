"""
causerr

Errors with a cause, a user-facing message, an optional numeric id and a
stack snapshot taken where the error was created.

    err = wrap_with_id(3, "disk full", "cannot save file")
    str(err)           # 'disk full (3: cannot save file)'
    get_id(err)        # 3
    f"{err:+v}"        # heading, cause and stack
"""

from __future__ import annotations

from .core import (
    DecoratedError,
    IdentifiedError,
    get_cause,
    get_id,
    get_message,
    wrap,
    wrap_with_id,
)
from .errors import InvalidCauseError, InvalidIdentifierError, UsageError
from .formatting import Mode
from .stack import StackTrace

__all__ = [
    "__version__",
    "DecoratedError",
    "IdentifiedError",
    "InvalidCauseError",
    "InvalidIdentifierError",
    "Mode",
    "StackTrace",
    "UsageError",
    "get_cause",
    "get_id",
    "get_message",
    "wrap",
    "wrap_with_id",
]

__version__ = "0.1.0"
