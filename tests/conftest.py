"""Root pytest configuration for all tests.

Provides walkmeshes built directly from Value Objects (no decoding) and
the encoded buffers used by adapter tests.
"""

from __future__ import annotations

import pytest

from domain.walkmesh.value_objects import Triangle, Walkmesh
from shared.walkmesh_fixtures import encode_walkmesh, grid_triangles
from tests.conftest_utils import make_triangle, make_walkmesh


@pytest.fixture
def right_triangle() -> Triangle:
    """(0,0,0) (10,0,0) (0,10,30): centroid elevation is exactly 10."""
    return make_triangle((0, 0, 0), (10, 0, 0), (0, 10, 30))


@pytest.fixture
def single_walkmesh(right_triangle: Triangle) -> Walkmesh:
    return make_walkmesh(right_triangle)


@pytest.fixture
def grid_buffer() -> bytes:
    """10x5 cells, 100 triangles, z = x + y."""
    return encode_walkmesh(grid_triangles(10, 5))


@pytest.fixture
def grid_walkmesh() -> Walkmesh:
    """Same grid as ``grid_buffer``, built without decoding."""
    return make_walkmesh(
        *(make_triangle(*vertices, access=access) for vertices, access in grid_triangles(10, 5))
    )
