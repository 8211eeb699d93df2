"""Walkmesh Bounded Context - Error Hierarchy.

Custom exceptions for decoding walkmesh and gateway buffers.

Empty or implausible headers are not surfaced to callers: the decoder
catches MalformedHeaderError and returns an empty Walkmesh, since "no
geometry yet" is a normal state upstream. Truncated records are reported.
"""

from __future__ import annotations


class WalkmeshError(Exception):
    """Base error for walkmesh operations."""


class InvalidBufferError(WalkmeshError):
    """Input is not bytes-like and not a sequence of byte values."""


class MalformedHeaderError(WalkmeshError):
    """Header is too short or declares an implausible record count."""


class TruncatedInputError(WalkmeshError):
    """A record would be read past the end of the buffer.

    Attributes:
        offset: Byte offset of the field that could not be read
        width: Width in bytes of that field
        length: Actual buffer length
    """

    def __init__(self, offset: int, width: int, length: int) -> None:
        self.offset = offset
        self.width = width
        self.length = length
        super().__init__(
            f"Read of {width}B at offset {offset} exceeds buffer length {length}"
        )
