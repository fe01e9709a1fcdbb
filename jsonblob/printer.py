"""Output sinks the renderer appends JSON text to."""

from __future__ import annotations

from abc import ABC, abstractmethod
from io import StringIO
from typing import TextIO


class Printer(ABC):
    """Append-only text destination that also carries the masking flag.

    Implementations only need :meth:`append`; the single-character and
    sub-range forms delegate to it unless overridden.
    """

    def __init__(self, mask: bool = False) -> None:
        self.mask = mask

    def should_mask(self) -> bool:
        return self.mask

    @abstractmethod
    def append(self, text: str) -> Printer:
        """Append *text* verbatim and return ``self``."""

    def append_char(self, ch: str) -> Printer:
        return self.append(ch)

    def append_range(self, text: str, start: int, end: int) -> Printer:
        """Append ``text[start:end]``."""
        return self.append(text[start:end])


class StringPrinter(Printer):
    """In-memory printer; the rendered text is available from :meth:`getvalue`."""

    def __init__(self, mask: bool = False) -> None:
        super().__init__(mask)
        self._buf = StringIO()

    def append(self, text: str) -> StringPrinter:
        self._buf.write(text)
        return self

    def getvalue(self) -> str:
        return self._buf.getvalue()

    def __str__(self) -> str:
        return self.getvalue()


class StreamPrinter(Printer):
    """Printer that writes straight through to a text stream.

    Nothing is buffered here and stream errors are not caught; a failing
    ``write`` aborts the render and reaches the caller unchanged.
    """

    def __init__(self, stream: TextIO, mask: bool = False) -> None:
        super().__init__(mask)
        self.stream = stream

    def append(self, text: str) -> StreamPrinter:
        self.stream.write(text)
        return self
