"""Terminal mouse-reporting toggles.

Hover needs the terminal to report bare motion (mode 1003), not only motion
while a button is held (mode 1002). Reports use SGR encoding (mode 1006) so
coordinates past column 223 survive, and decode with
``pointer.decode_sgr_mouse``.
"""

from __future__ import annotations

import contextlib
import os
from collections.abc import Callable, Iterator

from .config import load_motion_reporting

BUTTON_REPORTING = b"\x1b[?1000h"
DRAG_REPORTING = b"\x1b[?1002h"
MOTION_REPORTING = b"\x1b[?1003h"
SGR_ENCODING = b"\x1b[?1006h"


def _disable(sequence: bytes) -> bytes:
    return sequence[:-1] + b"l"


class MouseReporting:
    def __init__(
        self,
        stdout_fd: int,
        motion: bool = True,
        write: Callable[[int, bytes], object] = os.write,
    ) -> None:
        self.stdout_fd = stdout_fd
        self.motion = motion
        self._write = write
        self._enabled = False

    @classmethod
    def from_config(cls, stdout_fd: int) -> MouseReporting:
        return cls(stdout_fd, motion=load_motion_reporting())

    @property
    def enabled(self) -> bool:
        return self._enabled

    def _modes(self) -> list[bytes]:
        modes = [BUTTON_REPORTING, DRAG_REPORTING]
        if self.motion:
            modes.append(MOTION_REPORTING)
        modes.append(SGR_ENCODING)
        return modes

    def set_enabled(self, enabled: bool) -> None:
        desired = bool(enabled)
        if desired == self._enabled:
            return
        if desired:
            self._write(self.stdout_fd, b"".join(self._modes()))
        else:
            # Disable in reverse order of enabling.
            self._write(self.stdout_fd, b"".join(_disable(mode) for mode in reversed(self._modes())))
        self._enabled = desired

    @contextlib.contextmanager
    def reporting(self) -> Iterator[MouseReporting]:
        try:
            self.set_enabled(True)
            yield self
        finally:
            self.set_enabled(False)
