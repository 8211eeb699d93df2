"""Infrastructure adapters for the walkmesh bounded context.

This module provides the infrastructure layer implementations for walkmesh
operations: the binary decoder and the transport payload loader.
"""

from .binary_adapter import WalkmeshBinaryAdapter
from .payload import FieldWalkmeshLoader, FieldWalkmeshPayload

__all__ = ["FieldWalkmeshLoader", "FieldWalkmeshPayload", "WalkmeshBinaryAdapter"]
