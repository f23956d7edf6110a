"""Clipboard collaborator used to publish share links."""

from typing import List, Optional, Protocol

from compounder.exceptions import ClipboardError


class ClipboardWriter(Protocol):
    """Anything that can place text on a clipboard.

    Implementations raise ClipboardError (or let an OSError through) when
    the write fails.
    """

    def write_text(self, text: str) -> None:
        ...


class MemoryClipboard:
    """Clipboard kept in process memory, for headless use and tests."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.history: List[str] = []

    @property
    def text(self) -> Optional[str]:
        return self.history[-1] if self.history else None

    def write_text(self, text: str) -> None:
        if self.fail:
            raise ClipboardError("Clipboard is not available")
        self.history.append(text)
