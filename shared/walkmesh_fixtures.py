"""Byte-level encoders for synthetic walkmesh and gateway buffers.

Used by scripts/gen_fixtures.py and the test suite. Offsets are written out
with struct, independently of the decoder's numpy record schema, so the two
check each other.
"""

from __future__ import annotations

import struct
from collections.abc import Sequence

# (x, y, z)
RawVertex = tuple[int, int, int]
# ((v0, v1, v2), (a0, a1, a2))
RawTriangle = tuple[tuple[RawVertex, RawVertex, RawVertex], tuple[int, int, int]]
# (vertex1, vertex2, field_id)
RawGateway = tuple[RawVertex, RawVertex, int]

BLOCKED = 0xFFFF
GATEWAY_TABLE_OFFSET = 56
GATEWAY_SLOT_SIZE = 24
GATEWAY_SLOTS = 12
GATEWAY_BUFFER_SIZE = GATEWAY_TABLE_OFFSET + GATEWAY_SLOTS * GATEWAY_SLOT_SIZE


def encode_walkmesh(triangles: Sequence[RawTriangle], count: int | None = None) -> bytes:
    """Encode triangles as header + sector pool + adjacency pool.

    Args:
        triangles: Raw triangles in on-disk order
        count: Header value to write; defaults to len(triangles). Pass a
            different value to build inconsistent or truncated buffers.
    """
    header_count = len(triangles) if count is None else count
    out = bytearray(struct.pack("<I", header_count))
    for vertices, _ in triangles:
        for x, y, z in vertices:
            # 6 bytes of coordinates, 2 bytes of padding
            out += struct.pack("<hhhh", x, y, z, 0)
    for _, access in triangles:
        out += struct.pack("<HHH", *access)
    return bytes(out)


def encode_gateway_slot(
    vertex1: RawVertex, vertex2: RawVertex, field_id: int
) -> bytes:
    slot = bytearray(GATEWAY_SLOT_SIZE)
    struct.pack_into("<hhh", slot, 0, *vertex1)
    struct.pack_into("<hhh", slot, 6, *vertex2)
    struct.pack_into("<H", slot, 18, field_id)
    return bytes(slot)


def encode_gateway_table(
    gateways: Sequence[RawGateway | None], header_fill: int = 0
) -> bytes:
    """Encode up to 12 gateway slots into a 344-byte buffer.

    None entries leave the slot zeroed (unused).
    """
    if len(gateways) > GATEWAY_SLOTS:
        raise ValueError(f"At most {GATEWAY_SLOTS} gateway slots")
    out = bytearray([header_fill & 0xFF] * GATEWAY_TABLE_OFFSET)
    for i in range(GATEWAY_SLOTS):
        entry = gateways[i] if i < len(gateways) else None
        if entry is None:
            out += bytes(GATEWAY_SLOT_SIZE)
        else:
            out += encode_gateway_slot(*entry)
    return bytes(out)


def grid_triangles(columns: int, rows: int, size: int = 100) -> list[RawTriangle]:
    """Build a rectangular grid of triangles with consistent adjacency.

    Each cell is split into a lower (index 2k) and upper (index 2k+1)
    triangle; outer edges are BLOCKED. Elevation z equals x + y so the
    surface is a plane.
    """

    def vertex(cx: int, cy: int) -> RawVertex:
        x, y = cx * size, cy * size
        return (x, y, x + y)

    def lower(c: int, r: int) -> int:
        return 2 * (r * columns + c)

    triangles: list[RawTriangle] = []
    for r in range(rows):
        for c in range(columns):
            a, b = vertex(c, r), vertex(c + 1, r)
            d, e = vertex(c, r + 1), vertex(c + 1, r + 1)
            below = lower(c, r - 1) + 1 if r > 0 else BLOCKED
            above = lower(c, r + 1) if r < rows - 1 else BLOCKED
            left = lower(c - 1, r) + 1 if c > 0 else BLOCKED
            right = lower(c + 1, r) if c < columns - 1 else BLOCKED
            # Lower: a -> b -> d; edges a-b (below), b-d (diagonal), d-a (left)
            triangles.append(((a, b, d), (below, lower(c, r) + 1, left)))
            # Upper: b -> e -> d; edges b-e (right), e-d (above), d-b (diagonal)
            triangles.append(((b, e, d), (right, above, lower(c, r))))
    return triangles
