"""Domain Port(s) for Walkmesh Decoding.

Defines interfaces (Protocols) that infrastructure adapters must implement.
No concrete byte handling here.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, Union

from .value_objects import Gateway, Walkmesh

RawBuffer = Union[bytes, bytearray, memoryview, Sequence[int]]


class WalkmeshRepository(Protocol):
    """Port for obtaining walkmesh structures from raw buffers.

    Implementations live in infrastructure (e.g., the binary adapter).
    """

    def decode_walkmesh(self, buffer: RawBuffer) -> Walkmesh:
        """Decode a walkmesh; empty Walkmesh when the buffer holds no geometry."""
        ...

    def decode_gateways(self, buffer: RawBuffer) -> list[Gateway]:
        """Decode the gateway table, keeping only used, non-degenerate slots."""
        ...
