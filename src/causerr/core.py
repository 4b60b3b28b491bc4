"""Decorated errors: a cause, a user-facing message and a stack snapshot."""

from __future__ import annotations

import json
from typing import Any

from .config import settings
from .errors import InvalidCauseError, InvalidIdentifierError
from .formatting import Mode, render, render_spec
from .stack import StackTrace


def _resolve_cause(cause: object) -> BaseException:
    if isinstance(cause, BaseException):
        return cause
    if isinstance(cause, str):
        return Exception(cause)
    raise InvalidCauseError(cause)


class DecoratedError(Exception):
    """An error carrying its cause and a message meant for non-developers.

    The cause can be either an exception or a string, which is turned into a
    plain ``Exception``. Anything else raises ``InvalidCauseError``.

    Without ``stack`` the snapshot starts at the frame that called
    ``__init__``. Subclasses should capture their own with
    ``StackTrace.capture(skip=1)`` and pass it as ``stack=``, otherwise their
    ``__init__`` ends up as the innermost frame.
    """

    def __init__(self, cause: BaseException | str, message: str, *, stack: StackTrace | None = None) -> None:
        resolved = _resolve_cause(cause)
        if stack is None:
            stack = StackTrace.capture(skip=1, limit=settings.stack_limit)
        super().__init__(cause, message)
        self._cause = resolved
        self._message = message
        self._stack = stack
        self.__cause__ = resolved

    @property
    def cause(self) -> BaseException:
        return self._cause

    @property
    def message(self) -> str:
        return self._message

    @property
    def stack(self) -> StackTrace:
        return self._stack

    def heading(self) -> str:
        """First line of every rendered form."""
        return self._message

    def render(self, mode: Mode | str) -> str:
        return render(self, mode)

    def to_dict(self) -> dict[str, Any]:
        return {"message": self._message}

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":"))

    def __str__(self) -> str:
        return f"{self._cause} ({self._message})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(cause={self._cause!r}, message={self._message!r})"

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        return render_spec(self, format_spec)


class IdentifiedError(DecoratedError):
    """A decorated error that also carries a numeric id.

    The id is an internal number used to catalogue error kinds. It must be an
    ``int`` >= 0, else ``InvalidIdentifierError`` is raised.
    """

    def __init__(
        self,
        error_id: int,
        cause: BaseException | str,
        message: str,
        *,
        stack: StackTrace | None = None,
    ) -> None:
        if isinstance(error_id, bool) or not isinstance(error_id, int) or error_id < 0:
            raise InvalidIdentifierError(error_id)
        if stack is None:
            stack = StackTrace.capture(skip=1, limit=settings.stack_limit)
        super().__init__(cause, message, stack=stack)
        self.args = (error_id, cause, message)
        self._id = error_id

    @property
    def id(self) -> int:
        return self._id

    def heading(self) -> str:
        return f"#{self._id}: {self._message}"

    def to_dict(self) -> dict[str, Any]:
        return {"id": self._id, "message": self._message}

    def __str__(self) -> str:
        return f"{self._cause} ({self._id}: {self._message})"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self._id!r}, cause={self._cause!r}, "
            f"message={self._message!r})"
        )


def wrap(cause: BaseException | str, message: str) -> DecoratedError:
    """Decorate *cause* with *message*, recording the caller's stack."""
    return DecoratedError(cause, message, stack=StackTrace.capture(skip=1, limit=settings.stack_limit))


def wrap_with_id(error_id: int, cause: BaseException | str, message: str) -> IdentifiedError:
    """Like ``wrap`` but also tags the error with a non-negative *error_id*."""
    return IdentifiedError(
        error_id, cause, message, stack=StackTrace.capture(skip=1, limit=settings.stack_limit)
    )


def get_id(err: object) -> int:
    """Return the id of an ``IdentifiedError``, or -1 for anything else."""
    if isinstance(err, IdentifiedError):
        return err.id
    return -1


def get_cause(err: object) -> BaseException | None:
    """Return the cause of a decorated error, or ``None`` for anything else."""
    if isinstance(err, DecoratedError):
        return err.cause
    return None


def get_message(err: object) -> str:
    """Return the message of a decorated error, or ``""`` for anything else."""
    if isinstance(err, DecoratedError):
        return err.message
    return ""
