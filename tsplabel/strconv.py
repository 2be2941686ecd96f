"""Holds one string in three encodings: the ANSI code page, UTF-8 and Unicode text."""

from __future__ import annotations

import locale
from dataclasses import dataclass, field

__all__ = ["StrConv"]


def _default_encoding() -> str:
    return locale.getpreferredencoding(False)


def _until_nul(data: bytes) -> bytes:
    return data.split(b"\0", 1)[0]


@dataclass
class StrConv:
    """A string kept in sync as ANSI bytes, UTF-8 bytes and text.

    Characters that cannot be represented become '?' when encoding and
    U+FFFD when decoding. Input stops at the first NUL.
    """

    encoding: str = field(default_factory=_default_encoding)
    ascii: bytes = b""
    u8: bytes = b""
    u16: str = ""

    def set_ascii(self, data: bytes) -> StrConv:
        """Set the value from bytes in the ANSI encoding."""
        self.ascii = _until_nul(bytes(data))
        self.u16 = self.ascii.decode(self.encoding, errors="replace")
        self.u8 = self.u16.encode("utf-8", errors="replace")
        return self

    def set_u8(self, data: bytes) -> StrConv:
        """Set the value from UTF-8 bytes."""
        self.u8 = _until_nul(bytes(data))
        self.u16 = self.u8.decode("utf-8", errors="replace")
        self.ascii = self.u16.encode(self.encoding, errors="replace")
        return self

    def set_u16(self, text: str) -> StrConv:
        """Set the value from text."""
        self.u16 = text.split("\0", 1)[0]
        self.ascii = self.u16.encode(self.encoding, errors="replace")
        self.u8 = self.u16.encode("utf-8", errors="replace")
        return self