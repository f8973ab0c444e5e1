"""Per-run scan state: counters and the bounded digit window."""
from __future__ import annotations

from dataclasses import dataclass, field

from ..utils.text import is_ascii_digit

NEWLINE = 0x0A


@dataclass(slots=True)
class ScanState:
    """Mutable state owned by a single scan.

    ``window`` holds the most recent contiguous digits and never grows past
    the configured window length. ``bytes_read`` and ``newlines_read`` count
    every byte consumed so far, including the one most recently pushed.
    """

    window: bytearray = field(default_factory=bytearray)
    bytes_read: int = 0
    newlines_read: int = 0

    def push(self, byte: int, window_length: int) -> bool:
        """Consume one byte and report whether the window is exactly full."""
        self.bytes_read += 1
        if byte == NEWLINE:
            self.newlines_read += 1
        if not is_ascii_digit(byte):
            if self.window:
                self.window.clear()
            return False
        self.window.append(byte)
        excess = len(self.window) - window_length
        if excess > 0:
            del self.window[:excess]
        return len(self.window) == window_length

    @property
    def window_start(self) -> int:
        """0-based stream offset of the first byte currently in the window."""
        return self.bytes_read - len(self.window)


__all__ = ["ScanState"]
