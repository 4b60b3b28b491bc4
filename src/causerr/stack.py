"""Stack snapshots attached to decorated errors."""

from __future__ import annotations

import sys
import traceback
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StackTrace:
    """Frames leading up to the point where an error was decorated.

    Frames are ordered oldest first, matching ``traceback.extract_stack``.
    """

    frames: tuple[traceback.FrameSummary, ...] = ()

    @classmethod
    def capture(cls, *, skip: int = 0, limit: int | None = None) -> StackTrace:
        """Snapshot the current stack.

        Args:
            skip: Number of frames above the caller to leave out. ``0`` makes
                the caller of ``capture`` the innermost frame.
            limit: Keep at most this many frames nearest the call site.
                ``None`` or a value <= 0 keeps everything.
        """
        frame = sys._getframe(skip + 1)
        if limit is not None and limit <= 0:
            limit = None
        return cls(frames=tuple(traceback.extract_stack(frame, limit=limit)))

    def __len__(self) -> int:
        return len(self.frames)

    def format(self) -> str:
        """Render the frames in the standard traceback layout."""
        summary = traceback.StackSummary.from_list(list(self.frames))
        return "".join(summary.format()).rstrip("\n")
