"""Shared pytest helpers.

Builders for Value Objects so domain tests never go through the binary
decoder. These utilities are used by:
- tests/conftest.py
- tests/walkmesh/*
- tests/placement/*
"""

from __future__ import annotations

from domain.walkmesh.value_objects import BLOCKED, Triangle, Vertex, Walkmesh

RawVertex = tuple[int, int, int]


def make_triangle(
    v0: RawVertex,
    v1: RawVertex,
    v2: RawVertex,
    access: tuple[int, int, int] = (BLOCKED, BLOCKED, BLOCKED),
) -> Triangle:
    """Build a Triangle from three (x, y, z) tuples."""
    return Triangle(
        vertices=tuple(Vertex(x=x, y=y, z=z) for x, y, z in (v0, v1, v2)),
        access=access,
    )


def make_walkmesh(*triangles: Triangle) -> Walkmesh:
    """Build a Walkmesh whose count matches its triangles."""
    return Walkmesh(triangle_count=len(triangles), triangles=triangles)
