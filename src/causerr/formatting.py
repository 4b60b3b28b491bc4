"""Multi-mode rendering of decorated errors."""

from __future__ import annotations

import json
from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .core import DecoratedError


class Mode(str, Enum):
    DETAILED = "detailed"
    DEFAULT = "default"
    DISPLAY = "display"
    QUOTED = "quoted"


# format() specs, printf-verb style. "+" only changes "v".
FORMAT_SPECS: dict[str, Mode] = {
    "+v": Mode.DETAILED,
    "v": Mode.DEFAULT,
    "s": Mode.DISPLAY,
    "+s": Mode.DISPLAY,
    "q": Mode.QUOTED,
    "+q": Mode.QUOTED,
}


def _detailed(err: DecoratedError) -> str:
    return f"{err.heading()}\n{err.cause}\n{err.stack.format()}"


def _plain(err: DecoratedError) -> str:
    return f"{err.heading()}\n{err.cause}"


def _quoted(err: DecoratedError) -> str:
    return f"{err.heading()}\n{json.dumps(str(err.cause), ensure_ascii=False)}"


_RENDERERS: dict[Mode, Callable[[DecoratedError], str]] = {
    Mode.DETAILED: _detailed,
    Mode.DEFAULT: _plain,
    Mode.DISPLAY: _plain,
    Mode.QUOTED: _quoted,
}


def resolve_mode(mode: Mode | str) -> Mode | None:
    """Map a mode name or member to a ``Mode``; ``None`` when unknown."""
    if isinstance(mode, Mode):
        return mode
    try:
        return Mode(mode)
    except ValueError:
        return None


def render(err: DecoratedError, mode: Mode | str) -> str:
    """Render *err* in *mode*. Unknown modes produce an empty string."""
    resolved = resolve_mode(mode)
    if resolved is None:
        return ""
    return _RENDERERS[resolved](err)


def render_spec(err: DecoratedError, spec: str) -> str:
    """Render *err* for a ``format()`` spec such as ``"+v"`` or ``"q"``."""
    mode = FORMAT_SPECS.get(spec)
    if mode is None:
        return ""
    return _RENDERERS[mode](err)
