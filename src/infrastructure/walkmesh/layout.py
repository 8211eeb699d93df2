"""On-disk record schema for walkmesh and gateway buffers.

Every byte offset the decoder relies on is declared here as a numpy
structured dtype, so the layout can be audited and tested on its own.
All fields are little-endian.

Walkmesh buffer::

    0                     uint32 triangle count N
    4                     sector pool:    N x SECTOR_RECORD  (24 B each)
    4 + 24N               adjacency pool: N x ACCESS_RECORD  (6 B each)

Gateway buffer::

    0 .. 55               header, not decoded here
    56                    12 x GATEWAY_RECORD (24 B each)
    344                   end of gateway table
"""

from __future__ import annotations

import numpy as np

# ---------------------------------------------------------------------------
# Walkmesh
# ---------------------------------------------------------------------------
COUNT_FORMAT = np.dtype("<u4")
HEADER_SIZE = COUNT_FORMAT.itemsize  # 4
MAX_TRIANGLES = 10_000  # Sanity ceiling; larger counts are treated as garbage

# x, y, z followed by 2 bytes of padding
VERTEX_RECORD = np.dtype(
    [("x", "<i2"), ("y", "<i2"), ("z", "<i2"), ("padding", "<i2")]
)

SECTOR_RECORD = np.dtype([("vertices", VERTEX_RECORD, (3,))])

# One neighbor per edge, in vertex order: 0-1, 1-2, 2-0
ACCESS_RECORD = np.dtype([("access", "<u2", (3,))])

SECTOR_POOL_OFFSET = HEADER_SIZE


def access_pool_offset(triangle_count: int) -> int:
    """Byte offset of the adjacency pool for a given triangle count."""
    return SECTOR_POOL_OFFSET + triangle_count * SECTOR_RECORD.itemsize


def walkmesh_size(triangle_count: int) -> int:
    """Total bytes needed to hold ``triangle_count`` triangles."""
    return access_pool_offset(triangle_count) + triangle_count * ACCESS_RECORD.itemsize


# ---------------------------------------------------------------------------
# Gateways
# ---------------------------------------------------------------------------
GATEWAY_TABLE_OFFSET = 56
GATEWAY_SLOT_COUNT = 12

# Bytes +12..+17 and +20..+23 are not decoded.
GATEWAY_RECORD = np.dtype(
    {
        "names": ["vertex1", "vertex2", "field_id"],
        "formats": [("<i2", (3,)), ("<i2", (3,)), "<u2"],
        "offsets": [0, 6, 18],
        "itemsize": 24,
    }
)

GATEWAY_TABLE_END = GATEWAY_TABLE_OFFSET + GATEWAY_SLOT_COUNT * GATEWAY_RECORD.itemsize
MIN_GATEWAY_BUFFER = GATEWAY_TABLE_END  # 344
UNUSED_FIELD_ID = 0
