"""Tests for the on-disk record schema.

These check the declared layout on its own, independent of decoding.
"""

from __future__ import annotations

import pytest

from infrastructure.walkmesh import layout
from shared.walkmesh_fixtures import GATEWAY_BUFFER_SIZE, encode_walkmesh, grid_triangles


def test_header_is_single_uint32():
    assert layout.HEADER_SIZE == 4
    assert layout.COUNT_FORMAT.str == "<u4"


def test_vertex_record_has_trailing_padding():
    rec = layout.VERTEX_RECORD
    assert rec.itemsize == 8
    assert [rec.fields[name][1] for name in ("x", "y", "z", "padding")] == [0, 2, 4, 6]
    assert all(rec.fields[name][0].str == "<i2" for name in ("x", "y", "z"))


def test_sector_record_is_three_vertices():
    assert layout.SECTOR_RECORD.itemsize == 24
    sub_dtype, shape = layout.SECTOR_RECORD["vertices"].subdtype
    assert shape == (3,)
    assert sub_dtype == layout.VERTEX_RECORD


def test_access_record_is_three_uint16():
    assert layout.ACCESS_RECORD.itemsize == 6
    sub_dtype, shape = layout.ACCESS_RECORD["access"].subdtype
    assert shape == (3,)
    assert sub_dtype.str == "<u2"


@pytest.mark.parametrize("count", [1, 5, 100, 10_000])
def test_pool_offsets(count):
    assert layout.access_pool_offset(count) == 4 + 24 * count
    assert layout.walkmesh_size(count) == 4 + 30 * count


def test_encoder_agrees_with_schema_size():
    triangles = grid_triangles(3, 2)
    assert len(encode_walkmesh(triangles)) == layout.walkmesh_size(len(triangles))


def test_gateway_record_offsets():
    rec = layout.GATEWAY_RECORD
    assert rec.itemsize == 24
    assert rec.fields["vertex1"][1] == 0
    assert rec.fields["vertex2"][1] == 6
    assert rec.fields["field_id"][1] == 18
    assert rec.fields["field_id"][0].str == "<u2"


def test_gateway_table_bounds():
    assert layout.GATEWAY_TABLE_OFFSET == 56
    assert layout.GATEWAY_SLOT_COUNT == 12
    assert layout.MIN_GATEWAY_BUFFER == 344
    assert GATEWAY_BUFFER_SIZE == layout.MIN_GATEWAY_BUFFER
