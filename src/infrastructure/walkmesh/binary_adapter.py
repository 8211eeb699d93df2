"""Binary adapter for WalkmeshRepository.

Decodes raw walkmesh and gateway buffers into domain Value Objects using the
record schema in `layout.py`.

Lifecycle:
1) Normalize the input (bytes-like or list of byte values) to bytes
2) Read and sanity-check the header; implausible headers yield empty results
3) Verify every record lies inside the buffer before reading it
4) View the pools through numpy structured dtypes and copy out Python ints
5) Return Value Objects; no reference to the input buffer is retained
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from domain.walkmesh.errors import (
    InvalidBufferError,
    MalformedHeaderError,
    TruncatedInputError,
)
from domain.walkmesh.repositories import RawBuffer
from domain.walkmesh.value_objects import Gateway, Triangle, Vertex, Walkmesh

from .layout import (
    ACCESS_RECORD,
    COUNT_FORMAT,
    GATEWAY_RECORD,
    GATEWAY_SLOT_COUNT,
    GATEWAY_TABLE_OFFSET,
    HEADER_SIZE,
    MAX_TRIANGLES,
    MIN_GATEWAY_BUFFER,
    SECTOR_POOL_OFFSET,
    SECTOR_RECORD,
    UNUSED_FIELD_ID,
    access_pool_offset,
    walkmesh_size,
)

# Module-level logger (reused across all calls)
logger = logging.getLogger(__name__)


def _to_bytes(buffer: RawBuffer) -> bytes:
    """Normalize supported buffer types to an immutable bytes copy.

    The event transport delivers buffers as JSON arrays of ints, so plain
    sequences of byte values are accepted alongside bytes-like objects.
    """
    if isinstance(buffer, bytes):
        return buffer
    if isinstance(buffer, (bytearray, memoryview)):
        return bytes(buffer)
    # bytes(5) would silently allocate five zero bytes, and bytes() of other
    # buffer-protocol objects (numpy arrays) copies raw machine words
    if not isinstance(buffer, Sequence) or isinstance(buffer, str):
        raise InvalidBufferError(f"Unsupported buffer type: {type(buffer).__name__}")
    try:
        return bytes(buffer)
    except (TypeError, ValueError) as e:
        raise InvalidBufferError(f"Buffer is not a sequence of byte values: {e}") from e


def _require_records(
    data: bytes, offset: int, record_size: int, count: int
) -> None:
    """Raise TruncatedInputError at the first record that does not fit."""
    length = len(data)
    if offset + record_size * count <= length:
        return
    first_missing = max(0, (length - offset) // record_size)
    record_offset = offset + first_missing * record_size
    logger.error(
        "Truncated walkmesh data: %dB record at offset %d, buffer is %dB",
        record_size,
        record_offset,
        length,
    )
    raise TruncatedInputError(record_offset, record_size, length)


class WalkmeshBinaryAdapter:
    """Infrastructure adapter for decoding walkmesh and gateway buffers.

    Parameters
    ----------
    max_triangles: int
        Sanity ceiling for the header triangle count. Headers declaring more
        triangles (or zero) are treated as "no data" and decode to an empty
        Walkmesh instead of allocating for garbage input.
    """

    def __init__(self, max_triangles: int = MAX_TRIANGLES) -> None:
        if max_triangles <= 0:
            raise ValueError("max_triangles must be positive")
        self.max_triangles = max_triangles

    def _read_count(self, data: bytes) -> int:
        if len(data) < HEADER_SIZE:
            raise MalformedHeaderError(
                f"Buffer of {len(data)}B is shorter than the {HEADER_SIZE}B header"
            )
        count = int(np.frombuffer(data, dtype=COUNT_FORMAT, count=1)[0])
        if count == 0:
            raise MalformedHeaderError("Header declares zero triangles")
        if count > self.max_triangles:
            logger.warning(
                "Walkmesh header declares %d triangles (ceiling %d); ignoring buffer",
                count,
                self.max_triangles,
            )
            raise MalformedHeaderError(
                f"Triangle count {count} exceeds ceiling {self.max_triangles}"
            )
        return count

    def decode_walkmesh(self, buffer: RawBuffer) -> Walkmesh:
        """Decode a walkmesh buffer.

        Returns:
            Walkmesh with triangles in on-disk order, or an empty Walkmesh
            when the header is missing, zero, or above the ceiling.

        Raises:
            InvalidBufferError: If the input is not byte data
            TruncatedInputError: If the pools extend past the end of the buffer
        """
        data = _to_bytes(buffer)

        try:
            count = self._read_count(data)
        except MalformedHeaderError as e:
            logger.debug("No walkmesh decoded: %s", e)
            return Walkmesh.empty()

        access_offset = access_pool_offset(count)
        if len(data) < walkmesh_size(count):
            _require_records(data, SECTOR_POOL_OFFSET, SECTOR_RECORD.itemsize, count)
            _require_records(data, access_offset, ACCESS_RECORD.itemsize, count)

        vertices = np.frombuffer(
            data, dtype=SECTOR_RECORD, count=count, offset=SECTOR_POOL_OFFSET
        )["vertices"]
        access = np.frombuffer(
            data, dtype=ACCESS_RECORD, count=count, offset=access_offset
        )["access"]

        # tolist() copies into Python ints, releasing the view on `data`
        xs = vertices["x"].tolist()
        ys = vertices["y"].tolist()
        zs = vertices["z"].tolist()
        links = access.tolist()

        triangles = tuple(
            Triangle(
                vertices=tuple(
                    Vertex(x=xs[i][k], y=ys[i][k], z=zs[i][k]) for k in range(3)
                ),
                access=tuple(links[i]),
            )
            for i in range(count)
        )

        logger.debug("Decoded walkmesh: %d triangles", count)
        return Walkmesh(triangle_count=count, triangles=triangles)

    def decode_gateways(self, buffer: RawBuffer) -> list[Gateway]:
        """Decode the fixed gateway slot table.

        Slots with field id 0, or whose two vertices are both (0, 0) in x/y,
        are skipped. Kept gateways preserve slot order with no gaps.

        Returns:
            List of Gateways; empty if the buffer cannot hold the slot table.
        """
        data = _to_bytes(buffer)
        if len(data) < MIN_GATEWAY_BUFFER:
            logger.debug(
                "No gateways decoded: buffer of %dB is shorter than %dB",
                len(data),
                MIN_GATEWAY_BUFFER,
            )
            return []

        slots = np.frombuffer(
            data,
            dtype=GATEWAY_RECORD,
            count=GATEWAY_SLOT_COUNT,
            offset=GATEWAY_TABLE_OFFSET,
        )

        gateways: list[Gateway] = []
        for slot in slots:
            field_id = int(slot["field_id"])
            if field_id == UNUSED_FIELD_ID:
                continue

            x1, y1, z1 = slot["vertex1"].tolist()
            x2, y2, z2 = slot["vertex2"].tolist()
            # Placeholder segment; z is not considered
            if x1 == 0 and y1 == 0 and x2 == 0 and y2 == 0:
                continue

            gateways.append(
                Gateway(
                    vertex1=Vertex(x=x1, y=y1, z=z1),
                    vertex2=Vertex(x=x2, y=y2, z=z2),
                    field_id=field_id,
                )
            )

        logger.debug("Decoded %d gateways", len(gateways))
        return gateways
