"""Walkmesh Bounded Context - Value Objects.

Immutable data structures describing a decoded walkmesh.
All validation occurs at construction time via Pydantic.

Coordinates are in walkmesh units: x and y span the horizontal plane and
z is elevation. Triangle identity is its position in ``Walkmesh.triangles``;
access values reference other triangles by that same index.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
BLOCKED = 0xFFFF  # Access value meaning "no traversal across this edge"
EDGES_PER_TRIANGLE = 3

Int16 = Annotated[int, Field(ge=-0x8000, le=0x7FFF)]
UInt16 = Annotated[int, Field(ge=0, le=0xFFFF)]


class Vertex(BaseModel):
    """Signed 16-bit point (Value Object)."""

    x: Int16
    y: Int16
    z: Int16

    model_config = ConfigDict(frozen=True)


class Triangle(BaseModel):
    """Walkmesh triangle with per-edge access (Value Object).

    Edge ``i`` runs from ``vertices[i]`` to ``vertices[(i + 1) % 3]`` and
    ``access[i]`` is the triangle reachable across it, or BLOCKED.
    """

    vertices: tuple[Vertex, Vertex, Vertex]
    access: tuple[UInt16, UInt16, UInt16] = (BLOCKED, BLOCKED, BLOCKED)

    model_config = ConfigDict(frozen=True)

    def edge(self, edge: int) -> tuple[Vertex, Vertex]:
        """Return the (start, end) vertices of an edge."""
        if not 0 <= edge < EDGES_PER_TRIANGLE:
            raise IndexError(f"Edge index out of range: {edge}")
        return (self.vertices[edge], self.vertices[(edge + 1) % EDGES_PER_TRIANGLE])

    def is_blocked(self, edge: int) -> bool:
        return self.access[edge] == BLOCKED

    def neighbor(self, edge: int) -> int | None:
        """Index of the triangle across ``edge``, or None when blocked."""
        value = self.access[edge]
        return None if value == BLOCKED else value


class Walkmesh(BaseModel):
    """Ordered triangle list (Value Object).

    Invariants:
        triangle_count == len(triangles)
        triangle_count == 0 means "no geometry" (empty walkmesh)
    """

    triangle_count: int = Field(default=0, ge=0)
    triangles: tuple[Triangle, ...] = ()

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_count(self) -> "Walkmesh":
        if self.triangle_count != len(self.triangles):
            raise ValueError(
                f"triangle_count={self.triangle_count} does not match "
                f"{len(self.triangles)} triangles"
            )
        return self

    @classmethod
    def empty(cls) -> "Walkmesh":
        return cls(triangle_count=0, triangles=())

    def is_empty(self) -> bool:
        return self.triangle_count == 0


class Gateway(BaseModel):
    """Portal segment leading to another field (Value Object).

    A field_id of 0 marks an unused slot on disk and is never decoded
    into a Gateway.
    """

    vertex1: Vertex
    vertex2: Vertex
    field_id: int = Field(gt=0, le=0xFFFF)

    model_config = ConfigDict(frozen=True)


class Bounds(BaseModel):
    """Axis-aligned box around every walkmesh vertex (Value Object).

    Centers are midpoints of (min, max), not centroids of the vertices.
    An empty walkmesh yields all zeros.
    """

    min_x: int = 0
    max_x: int = 0
    min_y: int = 0
    max_y: int = 0
    min_z: int = 0
    max_z: int = 0
    center_x: float = 0.0
    center_y: float = 0.0
    center_z: float = 0.0

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_ordering(self) -> "Bounds":
        for axis in ("x", "y", "z"):
            low = getattr(self, f"min_{axis}")
            high = getattr(self, f"max_{axis}")
            if low > high:
                raise ValueError(f"Invalid {axis} ordering: min={low} > max={high}")
        return self

    @property
    def width(self) -> int:
        return self.max_x - self.min_x

    @property
    def height(self) -> int:
        return self.max_y - self.min_y

    @property
    def depth(self) -> int:
        return self.max_z - self.min_z


class LocateResult(BaseModel):
    """Outcome of a point-location query (Value Object).

    triangle_index is -1 (and elevation 0) when no triangle contains the point.
    """

    triangle_index: int = Field(ge=-1)
    elevation: int

    model_config = ConfigDict(frozen=True)

    @property
    def found(self) -> bool:
        return self.triangle_index >= 0


NOT_FOUND = LocateResult(triangle_index=-1, elevation=0)


class BlockedEdge(BaseModel):
    """Edge that cannot be crossed (Value Object)."""

    triangle_index: int = Field(ge=0)
    edge: int = Field(ge=0, lt=EDGES_PER_TRIANGLE)
    start: Vertex
    end: Vertex

    model_config = ConfigDict(frozen=True)
